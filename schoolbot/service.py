from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from .ai_engine.resolution.main import SchoolBot, build_school_bot
from .ai_engine.resolution.infrastructure.school_repo import SchoolDataRepository
from .services.errors import StorageError

_BOT: Optional[SchoolBot] = None
_BOT_LOCK = threading.Lock()


def get_school_bot() -> SchoolBot:
    global _BOT
    if _BOT is None:
        with _BOT_LOCK:
            if _BOT is None:
                _BOT = build_school_bot()
    return _BOT


def set_school_bot(bot: Optional[SchoolBot]) -> None:
    """Ganti instance default (dipakai test); None = rakit ulang saat dipakai."""
    global _BOT
    with _BOT_LOCK:
        _BOT = bot


def answer_question(raw_text: str, request_id: str = "-") -> Dict[str, Any]:
    return get_school_bot().answer_question(raw_text, request_id=request_id)


def get_cache_stats(max_keys: int = 10) -> Dict[str, Any]:
    stats = get_school_bot().cache.stats()
    return {"size": stats["count"], "keys": stats["keys"][:max_keys]}


def clear_cache() -> None:
    get_school_bot().cache.clear()


def database_health() -> Dict[str, Any]:
    try:
        return SchoolDataRepository().health_check()
    except StorageError as exc:
        return {"status": "error", "message": str(exc)}
