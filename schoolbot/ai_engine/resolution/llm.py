import os
from typing import Any, Dict, Optional, Tuple

from django.db import DatabaseError

DEFAULT_MODEL = "gemini-2.0-flash"
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, str(default)))
    except Exception:
        return float(default)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except Exception:
        return int(default)


def get_runtime_gemini_config() -> Dict[str, Any]:
    cfg: Dict[str, Any] = {
        "api_key": os.environ.get("GEMINI_API_KEY", "").strip(),
        "model": os.environ.get("GEMINI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
        "api_base": os.environ.get("GEMINI_API_BASE", GEMINI_API_BASE).strip().rstrip("/") or GEMINI_API_BASE,
        "timeout": _env_int("GEMINI_TIMEOUT", 15),
        "temperature": _env_float("GEMINI_TEMPERATURE", 0.2),
    }

    try:
        from schoolbot.models import AIConfiguration

        db_cfg = (
            AIConfiguration.objects.filter(is_active=True)
            .order_by("-updated_at", "-id")
            .first()
        )
        if db_cfg:
            if (db_cfg.api_key or "").strip():
                cfg["api_key"] = db_cfg.api_key.strip()
            if (db_cfg.model or "").strip():
                cfg["model"] = db_cfg.model.strip()
            cfg["timeout"] = int(db_cfg.timeout)
            cfg["temperature"] = float(db_cfg.temperature)
    except DatabaseError:
        # DB belum siap atau rusak -> pakai env.
        pass

    return cfg


def build_request(prompt: str, cfg: Dict[str, Any]) -> Tuple[str, Dict[str, Any], Dict[str, str]]:
    url = f"{cfg.get('api_base') or GEMINI_API_BASE}/models/{cfg.get('model') or DEFAULT_MODEL}:generateContent"
    body = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {"temperature": float(cfg.get("temperature", 0.2))},
    }
    headers = {
        "Content-Type": "application/json",
        "x-goog-api-key": str(cfg.get("api_key") or ""),
    }
    return url, body, headers


def extract_text(data: Any) -> Optional[str]:
    """Ambil teks kandidat pertama dari response generateContent, None kalau bentuknya lain."""
    if not isinstance(data, dict):
        return None
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text.strip() else None


def extract_error(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    err = data.get("error")
    if isinstance(err, dict):
        msg = str(err.get("message") or "").strip()
        return msg or None
    if isinstance(err, str) and err.strip():
        return err.strip()
    return None
