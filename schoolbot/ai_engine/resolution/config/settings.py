from __future__ import annotations

from dataclasses import dataclass
import os


def _env_bool(name: str, default: bool = False) -> bool:
    val = str(os.environ.get(name, "1" if default else "0")).strip().lower()
    return val in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except Exception:
        return int(default)


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, str(default)))
    except Exception:
        return float(default)


DEFAULT_SCHOOL_NAME = "SMK Syafi'i Akrom"
DEFAULT_BASE_URL = "https://ponpes-smksa.sch.id/"
DEFAULT_PPDB_URL = "https://ppdb.ponpes-smksa.sch.id/"
DEFAULT_BKK_URL = "https://bkk.ponpes-smksa.sch.id/"


@dataclass(frozen=True)
class ResolutionSettings:
    school_name: str = DEFAULT_SCHOOL_NAME
    base_url: str = DEFAULT_BASE_URL
    ppdb_url: str = DEFAULT_PPDB_URL
    bkk_url: str = DEFAULT_BKK_URL

    cache_ttl_s: int = 300
    sweep_probability: float = 0.1
    cache_ai_answers: bool = True

    context_max_chars: int = 4000
    context_news_limit: int = 5
    context_workers: int = 4
    quick_reply_limit: int = 4


def get_resolution_settings() -> ResolutionSettings:
    return ResolutionSettings(
        school_name=str(os.environ.get("SCHOOLBOT_SCHOOL_NAME", DEFAULT_SCHOOL_NAME)).strip() or DEFAULT_SCHOOL_NAME,
        base_url=str(os.environ.get("SCHOOLBOT_BASE_URL", DEFAULT_BASE_URL)).strip() or DEFAULT_BASE_URL,
        ppdb_url=str(os.environ.get("SCHOOLBOT_PPDB_URL", DEFAULT_PPDB_URL)).strip() or DEFAULT_PPDB_URL,
        bkk_url=str(os.environ.get("SCHOOLBOT_BKK_URL", DEFAULT_BKK_URL)).strip() or DEFAULT_BKK_URL,
        cache_ttl_s=max(_env_int("SCHOOLBOT_CACHE_TTL_S", 300), 0),
        sweep_probability=max(min(_env_float("SCHOOLBOT_SWEEP_PROBABILITY", 0.1), 1.0), 0.0),
        cache_ai_answers=_env_bool("SCHOOLBOT_CACHE_AI_ANSWERS", default=True),
        context_max_chars=max(_env_int("SCHOOLBOT_CONTEXT_MAX_CHARS", 4000), 1),
        context_news_limit=max(_env_int("SCHOOLBOT_NEWS_LIMIT", 5), 0),
        context_workers=max(_env_int("SCHOOLBOT_CONTEXT_WORKERS", 4), 1),
        quick_reply_limit=max(_env_int("SCHOOLBOT_QUICK_REPLY_LIMIT", 4), 1),
    )
