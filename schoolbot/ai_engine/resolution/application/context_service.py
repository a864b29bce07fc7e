from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List

from django.db import connections

from ..config.settings import DEFAULT_BASE_URL, DEFAULT_SCHOOL_NAME

logger = logging.getLogger(__name__)

CONTEXT_UNAVAILABLE = "Data sekolah belum tersedia."
NOT_AVAILABLE = "Belum tersedia"

CONTEXT_TEMPLATE = """{school_name_upper}

VISI: {visi}
MISI: {misi}
ALAMAT: {alamat}
TELEPON: {telp}
EMAIL: {email}

JURUSAN:
{programs}

EKSTRAKURIKULER:
{clubs}

BERITA TERBARU:
{news}

Website: {website}"""


def _run_in_worker(fn: Callable[[], Any]) -> Any:
    try:
        return fn()
    finally:
        # Koneksi DB milik thread worker, tutup supaya tidak bocor.
        connections.close_all()


def render_programs(rows: List[Dict[str, Any]]) -> str:
    lines = [f"- {r.get('name')}: {str(r.get('description') or '').strip() or 'Tidak ada deskripsi'}" for r in rows]
    return "\n".join(lines) or "-"


def render_clubs(rows: List[Dict[str, Any]]) -> str:
    lines = []
    for r in rows:
        supervisor = str(r.get("supervisor") or "").strip()
        lines.append(f"- {r.get('name')}" + (f" (Pembina: {supervisor})" if supervisor else ""))
    return "\n".join(lines) or "-"


def render_news(rows: List[Dict[str, Any]]) -> str:
    lines = [f"- {r.get('title')} ({str(r.get('date') or '').strip() or '-'}) -> {r.get('link')}" for r in rows]
    return "\n".join(lines) or "-"


class ContextBuilder:
    def __init__(
        self,
        repo: Any,
        school_name: str = DEFAULT_SCHOOL_NAME,
        base_url: str = DEFAULT_BASE_URL,
        news_limit: int = 5,
        max_workers: int = 4,
    ):
        self.repo = repo
        self.school_name = school_name
        self.base_url = base_url
        self.news_limit = int(news_limit)
        self.max_workers = int(max_workers)

    def build(self, request_id: str = "-") -> str:
        try:
            with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="schoolbot-ctx") as pool:
                f_facts = pool.submit(_run_in_worker, self.repo.get_facts)
                f_programs = pool.submit(_run_in_worker, self.repo.list_programs)
                f_clubs = pool.submit(_run_in_worker, self.repo.list_clubs)
                f_news = pool.submit(_run_in_worker, lambda: self.repo.latest_news(self.news_limit))
                facts = f_facts.result() or {}
                programs = f_programs.result() or []
                clubs = f_clubs.result() or []
                news = f_news.result() or []
        except Exception as exc:
            logger.error("Build context gagal err=%r", exc, extra={"request_id": request_id})
            return CONTEXT_UNAVAILABLE

        return CONTEXT_TEMPLATE.format(
            school_name_upper=self.school_name.upper(),
            visi=facts.get("visi") or NOT_AVAILABLE,
            misi=facts.get("misi") or NOT_AVAILABLE,
            alamat=facts.get("alamat") or NOT_AVAILABLE,
            telp=facts.get("telp") or NOT_AVAILABLE,
            email=facts.get("email") or NOT_AVAILABLE,
            programs=render_programs(programs),
            clubs=render_clubs(clubs),
            news=render_news(news),
            website=self.base_url,
        ).strip()
