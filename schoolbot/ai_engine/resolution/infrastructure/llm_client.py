from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict

import requests

from ..config.settings import DEFAULT_BASE_URL, DEFAULT_BKK_URL, DEFAULT_PPDB_URL, DEFAULT_SCHOOL_NAME
from ..llm import build_request, extract_error, extract_text, get_runtime_gemini_config
from ..prompt import build_fallback_prompt

logger = logging.getLogger(__name__)

NOT_CONFIGURED_ANSWER = "Konfigurasi server belum lengkap (GEMINI_API_KEY)."
GENERIC_FAILURE_ANSWER = "Gagal mendapatkan jawaban dari AI."
DISRUPTION_ANSWER = "Maaf, sedang ada gangguan pada sistem AI. Silakan coba lagi nanti."


class GeminiClient:
    """
    Fallback ke API generateContent Gemini lewat HTTPS.
    Tidak pernah raise: semua kegagalan diubah jadi teks jawaban tetap.
    """

    def __init__(
        self,
        *,
        school_name: str = DEFAULT_SCHOOL_NAME,
        base_url: str = DEFAULT_BASE_URL,
        ppdb_url: str = DEFAULT_PPDB_URL,
        bkk_url: str = DEFAULT_BKK_URL,
        max_context_chars: int = 4000,
        config_loader: Callable[[], Dict[str, Any]] = get_runtime_gemini_config,
        session: Any = None,
    ):
        self.school_name = school_name
        self.base_url = base_url
        self.ppdb_url = ppdb_url
        self.bkk_url = bkk_url
        self.max_context_chars = int(max_context_chars)
        self.config_loader = config_loader
        self.session = session or requests

    def ask(self, question: str, context: str) -> str:
        return self.ask_with_status(question, context)["text"]

    def ask_with_status(self, question: str, context: str, request_id: str = "-") -> Dict[str, Any]:
        log_extra = {"request_id": request_id}
        try:
            cfg = dict(self.config_loader() or {})
        except Exception as exc:
            logger.error("Gagal membaca konfigurasi AI err=%r", exc, extra=log_extra)
            cfg = {}
        if not str(cfg.get("api_key") or "").strip():
            logger.warning("GEMINI_API_KEY belum di-set, fallback AI dilewati", extra=log_extra)
            return {"ok": False, "text": NOT_CONFIGURED_ANSWER, "error": "missing_api_key"}

        prompt = build_fallback_prompt(
            question=question,
            context=context,
            school_name=self.school_name,
            base_url=self.base_url,
            ppdb_url=self.ppdb_url,
            bkk_url=self.bkk_url,
            max_context_chars=self.max_context_chars,
        )
        url, body, headers = build_request(prompt, cfg)

        t0 = time.time()
        try:
            resp = self.session.post(url, json=body, headers=headers, timeout=int(cfg.get("timeout") or 15))
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Gemini API error model=%s err=%r", cfg.get("model"), exc, extra=log_extra)
            return {"ok": False, "text": DISRUPTION_ANSWER, "error": str(exc)}

        llm_ms = int(max((time.time() - t0) * 1000, 0))
        text = extract_text(data)
        if text is not None:
            logger.info("Gemini OK model=%s llm_ms=%s len=%s", cfg.get("model"), llm_ms, len(text), extra=log_extra)
            return {"ok": True, "text": text, "error": ""}

        error_msg = extract_error(data)
        logger.warning(
            "Gemini response tidak terduga status=%s err=%s",
            getattr(resp, "status_code", "-"),
            error_msg or "-",
            extra=log_extra,
        )
        return {"ok": False, "text": error_msg or GENERIC_FAILURE_ANSWER, "error": error_msg or "unexpected_shape"}
