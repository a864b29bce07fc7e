from __future__ import annotations

import hashlib
import threading
from typing import Any, Dict, Optional

from django.core.cache import caches

from .domain.models import AnswerPayload

DEFAULT_TTL_S = 300
CACHE_ALIAS = "schoolbot"


def _cache_key(text: str) -> str:
    return "schoolbot:answer:v1:" + hashlib.md5(text.encode("utf-8")).hexdigest()


class ResponseCache:
    """
    Cache jawaban per query ternormalisasi di atas backend cache Django
    (default alias `schoolbot`, LocMemCache). Entry berlaku `ttl_s` detik
    sejak `store`; backend yang membuang entry basi saat dibaca.

    Index kecil query -> cache key disimpan di sini supaya `stats` bisa
    menampilkan daftar query dan `sweep` bisa merapikan index.
    """

    def __init__(self, ttl_s: int = DEFAULT_TTL_S, backend: Any = None):
        self.ttl_s = int(ttl_s)
        self.backend = backend if backend is not None else caches[CACHE_ALIAS]
        self._index: Dict[str, str] = {}
        self._lock = threading.Lock()

    def lookup(self, key: str) -> Optional[AnswerPayload]:
        ck = _cache_key(key)
        payload = self.backend.get(ck)
        if isinstance(payload, AnswerPayload):
            return AnswerPayload(
                answer=payload.answer,
                quick_replies=list(payload.quick_replies),
                source=payload.source,
            )
        with self._lock:
            self._index.pop(key, None)
        return None

    def store(self, key: str, payload: AnswerPayload) -> None:
        ck = _cache_key(key)
        self.backend.set(ck, payload, self.ttl_s)
        with self._lock:
            self._index[key] = ck

    def sweep(self) -> int:
        with self._lock:
            items = list(self._index.items())
        # get() pada LocMemCache menghapus entry yang sudah kedaluwarsa.
        stale = [k for k, ck in items if self.backend.get(ck) is None]
        with self._lock:
            for k in stale:
                self._index.pop(k, None)
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            keys = list(self._index.values())
            self._index.clear()
        self.backend.delete_many(keys)

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            keys = list(self._index.keys())
        return {"count": len(keys), "keys": keys}
