from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..config.settings import DEFAULT_SCHOOL_NAME
from ..domain.models import SOURCE_DATABASE, AnswerPayload

logger = logging.getLogger(__name__)

# Dicek berurutan, kode pertama yang muncul di query yang dipakai.
PROGRAM_CODES: Sequence[str] = ("rpl", "tkj", "mm")

PROGRAMS_TOKEN = "jurusan"
CLUBS_TOKEN = "ekskul"
CONTACT_TOKENS: Sequence[str] = ("kontak", "alamat")
CONTACT_FACT_KEYS: Sequence[str] = ("alamat", "telp", "email")

DEFAULT_QUICK_REPLIES: Dict[str, List[str]] = {
    "general": ["Jurusan", "PPDB", "Ekstrakurikuler", "Kontak sekolah"],
    "jurusan": ["TKJ", "RPL", "MM", "Kembali"],
    "ekskul": ["Pramuka", "Robotik", "Seni Islami", "Lainnya"],
}
CONTACT_QUICK_REPLIES: List[str] = ["Jurusan", "PPDB", "Ekstrakurikuler"]


def format_program_detail(row: Dict[str, Any]) -> str:
    name = str(row.get("name") or "").strip()
    desc = str(row.get("description") or "").strip() or "Deskripsi menyusul"
    return f"**{name}**\n{desc}"


def format_programs(rows: List[Dict[str, Any]], school_name: str = DEFAULT_SCHOOL_NAME) -> str:
    lines = [
        f"{i}. **{r.get('name')}** - {str(r.get('description') or '').strip() or 'Deskripsi menyusul'}"
        for i, r in enumerate(rows, start=1)
    ]
    return f"JURUSAN {school_name}\n\n" + "\n".join(lines)


def format_clubs(rows: List[Dict[str, Any]]) -> str:
    lines = []
    for i, r in enumerate(rows, start=1):
        supervisor = str(r.get("supervisor") or "").strip()
        suffix = f" - Pembina: {supervisor}" if supervisor else ""
        lines.append(f"{i}. **{r.get('name')}**{suffix}")
    return "EKSTRAKURIKULER\n\n" + "\n".join(lines)


def format_contact(info: Dict[str, str]) -> str:
    return (
        "KONTAK SEKOLAH\n\n"
        f"Alamat: {info.get('alamat') or '-'}\n"
        f"Telepon: {info.get('telp') or '-'}\n"
        f"Email: {info.get('email') or '-'}"
    )


class StructuredDataResolver:
    """
    Menjawab pertanyaan dari data terstruktur sekolah (jurusan, ekskul, kontak).

    Urutan cek tetap: detail jurusan -> daftar jurusan -> daftar ekskul -> kontak.
    Hasil kosong lanjut ke aturan berikutnya; error storage dicatat lalu
    dianggap tidak ada jawaban (orchestrator lanjut ke fallback AI).
    """

    def __init__(self, repo: Any, school_name: str = DEFAULT_SCHOOL_NAME, quick_reply_limit: int = 4):
        self.repo = repo
        self.school_name = school_name
        self.quick_reply_limit = int(quick_reply_limit)

    def resolve(self, normalized_query: str, request_id: str = "-") -> Optional[AnswerPayload]:
        text = normalized_query or ""
        if not text:
            return None
        try:
            return self._resolve(text)
        except Exception as exc:
            logger.warning(
                "Structured lookup gagal q='%s' err=%r", text[:80], exc, extra={"request_id": request_id}
            )
            return None

    def _resolve(self, text: str) -> Optional[AnswerPayload]:
        code = next((c for c in PROGRAM_CODES if c in text), None)
        if code:
            row = self.repo.get_program_by_code(code)
            if row:
                return AnswerPayload(
                    answer=format_program_detail(row),
                    quick_replies=self.quick_replies("jurusan"),
                    source=SOURCE_DATABASE,
                )

        if PROGRAMS_TOKEN in text:
            rows = self.repo.list_programs()
            if rows:
                return AnswerPayload(
                    answer=format_programs(rows, self.school_name),
                    quick_replies=self.quick_replies("jurusan"),
                    source=SOURCE_DATABASE,
                )

        if CLUBS_TOKEN in text:
            rows = self.repo.list_clubs()
            if rows:
                return AnswerPayload(
                    answer=format_clubs(rows),
                    quick_replies=self.quick_replies("ekskul"),
                    source=SOURCE_DATABASE,
                )

        if any(t in text for t in CONTACT_TOKENS):
            info = self.repo.get_facts(CONTACT_FACT_KEYS)
            if any(str(info.get(k) or "").strip() for k in CONTACT_FACT_KEYS):
                return AnswerPayload(
                    answer=format_contact(info),
                    quick_replies=list(CONTACT_QUICK_REPLIES),
                    source=SOURCE_DATABASE,
                )

        return None

    def quick_replies(self, context: str = "general") -> List[str]:
        try:
            if context == "jurusan":
                rows = self.repo.list_programs(limit=self.quick_reply_limit)
                if rows:
                    return [str(r.get("name")) for r in rows]
            if context == "ekskul":
                rows = self.repo.list_clubs(limit=self.quick_reply_limit)
                if rows:
                    return [str(r.get("name")) for r in rows]
        except Exception as exc:
            logger.warning("Quick reply lookup gagal context=%s err=%r", context, exc)
        return list(DEFAULT_QUICK_REPLIES.get(context) or DEFAULT_QUICK_REPLIES["general"])
