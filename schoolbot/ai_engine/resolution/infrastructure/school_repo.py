from __future__ import annotations

import functools
from typing import Any, Dict, Iterable, List, Optional

from django.db import DatabaseError

from schoolbot.models import Club, News, Program, SchoolFact
from schoolbot.services.errors import StorageError


def _wrap_db_errors(fn):
    @functools.wraps(fn)
    def inner(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except DatabaseError as exc:
            raise StorageError(f"{fn.__name__} gagal: {exc}") from exc

    return inner


class SchoolDataRepository:
    """
    Akses baca ke data sekolah (hasil scraper/seed).
    Semua method mengembalikan dict biasa, error DB dibungkus jadi StorageError.
    """

    @_wrap_db_errors
    def get_facts(self, keys: Optional[Iterable[str]] = None) -> Dict[str, str]:
        qs = SchoolFact.objects.all()
        if keys is not None:
            qs = qs.filter(key__in=list(keys))
        return {row["key"]: row["value"] for row in qs.values("key", "value")}

    @_wrap_db_errors
    def get_program_by_code(self, code: str) -> Optional[Dict[str, Any]]:
        return (
            Program.objects.filter(code__iexact=str(code or "").strip())
            .values("code", "name", "description")
            .first()
        )

    @_wrap_db_errors
    def list_programs(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        qs = Program.objects.order_by("id").values("code", "name", "description")
        if limit:
            qs = qs[: int(limit)]
        return list(qs)

    @_wrap_db_errors
    def list_clubs(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        qs = Club.objects.order_by("id").values("name", "supervisor", "description")
        if limit:
            qs = qs[: int(limit)]
        return list(qs)

    @_wrap_db_errors
    def latest_news(self, limit: int = 5) -> List[Dict[str, Any]]:
        return list(News.objects.order_by("-id").values("title", "link", "date")[: max(int(limit), 0)])

    @_wrap_db_errors
    def health_check(self) -> Dict[str, Any]:
        return {"status": "ok", "facts": SchoolFact.objects.count(), "programs": Program.objects.count()}
