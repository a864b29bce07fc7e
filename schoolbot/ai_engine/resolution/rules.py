from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .config.settings import DEFAULT_SCHOOL_NAME
from .domain.models import RuleEntry


def default_rules(school_name: str = DEFAULT_SCHOOL_NAME) -> List[RuleEntry]:
    # Urutan deklarasi = prioritas (first match wins).
    return [
        RuleEntry(
            keywords=frozenset({"halo", "hai", "hello", "assalamualaikum", "salam"}),
            answer=f"Halo! Saya chatbot {school_name}. Mau tahu info apa hari ini?",
            quick_replies=("Jurusan", "PPDB", "Ekstrakurikuler", "Kontak sekolah"),
        ),
        RuleEntry(
            keywords=frozenset({"terima kasih", "thanks", "makasih", "syukron"}),
            answer="Sama-sama! Senang bisa membantu.",
            quick_replies=("Jurusan", "PPDB", "Berita sekolah"),
        ),
        RuleEntry(
            keywords=frozenset({"kamu siapa", "siapa kamu", "nama kamu"}),
            answer=f"Saya adalah AI Assistant {school_name}.",
            quick_replies=("Info sekolah", "Jurusan", "PPDB"),
        ),
    ]


class RuleMatcher:
    def __init__(self, rules: Iterable[RuleEntry] | None = None):
        self.rules: Sequence[RuleEntry] = tuple(rules if rules is not None else default_rules())

    def match(self, normalized_query: str) -> Optional[RuleEntry]:
        text = normalized_query or ""
        if not text:
            return None
        for rule in self.rules:
            if any(k in text for k in rule.keywords):
                return rule
        return None
