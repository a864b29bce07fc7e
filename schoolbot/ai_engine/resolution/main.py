from __future__ import annotations

import logging
import random
import time
from typing import Any, Dict, List, Optional

from .application.context_service import ContextBuilder
from .application.structured_service import StructuredDataResolver
from .cache import ResponseCache
from .config.settings import ResolutionSettings, get_resolution_settings
from .domain.models import SOURCE_FALLBACK, SOURCE_PREDEFINED, AnswerPayload
from .infrastructure.llm_client import GeminiClient
from .normalizer import normalize
from .rules import RuleMatcher, default_rules

logger = logging.getLogger(__name__)

EMPTY_QUESTION_ANSWER = "Masukkan pertanyaan yang ingin Anda tanyakan."
EMPTY_QUESTION_QUICK_REPLIES: List[str] = ["Info jurusan", "Info PPDB", "Ekstrakurikuler", "Kontak sekolah"]

FALLBACK_QUICK_REPLIES: List[str] = [
    "Info jurusan",
    "PPDB",
    "Kontak sekolah",
    "Ekstrakurikuler",
    "Berita terbaru",
    "Fasilitas sekolah",
]

TECHNICAL_ERROR_ANSWER = "Maaf, sedang terjadi gangguan teknis. Silakan coba lagi dalam beberapa saat."


class SchoolBot:
    """
    Orchestrator resolusi pertanyaan:
    cache -> aturan predefined -> data terstruktur -> (miss) konteks + fallback AI.

    Semua dependency di-inject supaya bisa dites terpisah; `build_school_bot`
    merakit versi default untuk aplikasi.
    """

    def __init__(
        self,
        *,
        cache: ResponseCache,
        rules: RuleMatcher,
        resolver: StructuredDataResolver,
        context_builder: ContextBuilder,
        ai_client: Any,
        settings: Optional[ResolutionSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cache = cache
        self.rules = rules
        self.resolver = resolver
        self.context_builder = context_builder
        self.ai_client = ai_client
        self.settings = settings or ResolutionSettings()
        self.rng = rng or random.Random()

    def answer_question(self, raw_text: str, request_id: str = "-") -> Dict[str, Any]:
        return self.answer(raw_text, request_id=request_id).to_response()

    def answer(self, raw_text: str, request_id: str = "-") -> AnswerPayload:
        try:
            return self._answer(raw_text, request_id)
        except Exception as exc:
            logger.error("Resolusi crash err=%r", exc, extra={"request_id": request_id}, exc_info=True)
            return AnswerPayload(answer=TECHNICAL_ERROR_ANSWER, quick_replies=[], source=SOURCE_FALLBACK)

    def _answer(self, raw_text: str, request_id: str) -> AnswerPayload:
        log_extra = {"request_id": request_id}
        text = normalize(raw_text)
        if not text:
            return AnswerPayload(
                answer=EMPTY_QUESTION_ANSWER,
                quick_replies=list(EMPTY_QUESTION_QUICK_REPLIES),
                source=SOURCE_PREDEFINED,
            )

        if self.rng.random() < self.settings.sweep_probability:
            removed = self.cache.sweep()
            if removed:
                logger.debug("Cache sweep removed=%s", removed, extra=log_extra)

        cached = self.cache.lookup(text)
        if cached is not None:
            logger.info("Jawaban dari cache q='%s' source=%s", text[:80], cached.source, extra=log_extra)
            return cached

        rule = self.rules.match(text)
        if rule is not None:
            payload = AnswerPayload(
                answer=rule.answer,
                quick_replies=list(rule.quick_replies),
                source=SOURCE_PREDEFINED,
            )
            self.cache.store(text, payload)
            return payload

        payload = self.resolver.resolve(text, request_id=request_id)
        if payload is not None:
            self.cache.store(text, payload)
            logger.info("Jawaban dari database q='%s'", text[:80], extra=log_extra)
            return payload

        return self._fallback(raw_text, text, request_id)

    def _fallback(self, raw_text: str, text: str, request_id: str) -> AnswerPayload:
        t0 = time.time()
        context = self.context_builder.build(request_id=request_id)[: self.settings.context_max_chars]
        result = self.ai_client.ask_with_status(str(raw_text).strip(), context, request_id=request_id)
        answer = str(result.get("text") or "").strip() or TECHNICAL_ERROR_ANSWER
        payload = AnswerPayload(answer=answer, quick_replies=list(FALLBACK_QUICK_REPLIES), source=SOURCE_FALLBACK)

        if result.get("ok") and self.settings.cache_ai_answers:
            self.cache.store(text, payload)
        logger.info(
            "Fallback AI q='%s' ok=%s ctx_len=%s ms=%s",
            text[:80],
            bool(result.get("ok")),
            len(context),
            int((time.time() - t0) * 1000),
            extra={"request_id": request_id},
        )
        return payload


def build_school_bot(repo: Any = None, settings: Optional[ResolutionSettings] = None) -> SchoolBot:
    from .infrastructure.school_repo import SchoolDataRepository

    cfg = settings or get_resolution_settings()
    repo = repo or SchoolDataRepository()
    return SchoolBot(
        cache=ResponseCache(ttl_s=cfg.cache_ttl_s),
        rules=RuleMatcher(default_rules(cfg.school_name)),
        resolver=StructuredDataResolver(repo, school_name=cfg.school_name, quick_reply_limit=cfg.quick_reply_limit),
        context_builder=ContextBuilder(
            repo,
            school_name=cfg.school_name,
            base_url=cfg.base_url,
            news_limit=cfg.context_news_limit,
            max_workers=cfg.context_workers,
        ),
        ai_client=GeminiClient(
            school_name=cfg.school_name,
            base_url=cfg.base_url,
            ppdb_url=cfg.ppdb_url,
            bkk_url=cfg.bkk_url,
            max_context_chars=cfg.context_max_chars,
        ),
        settings=cfg,
    )
