from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Tuple

SOURCE_PREDEFINED = "predefined"
SOURCE_DATABASE = "database"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class RuleEntry:
    keywords: FrozenSet[str]
    answer: str
    quick_replies: Tuple[str, ...] = ()


@dataclass
class AnswerPayload:
    answer: str
    quick_replies: List[str] = field(default_factory=list)
    source: str = SOURCE_FALLBACK

    def to_response(self) -> Dict[str, Any]:
        return {"answer": self.answer, "quickReplies": list(self.quick_replies)}
