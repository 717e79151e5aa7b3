"""Core entities for the mindful journaling domain."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RiskLevel(str, Enum):
    """Crisis risk tier detected in a piece of user text."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


_RISK_ORDER = (RiskLevel.NONE, RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)


@dataclass(frozen=True)
class ClassificationInput:
    """Raw user text handed to the classifiers for a single call."""

    text: str


@dataclass(frozen=True)
class RiskDetection:
    """Risk tier together with the phrases of that tier found in the text."""

    level: RiskLevel
    matched_phrases: tuple[str, ...] = ()


@dataclass(frozen=True)
class SentimentResult:
    """Coarse polarity, emotion tags and intensity for a text."""

    sentiment: str
    emotions: frozenset[str]
    intensity: float
    keywords: frozenset[str]


@dataclass
class JournalEntry:
    """A single journal entry as stored by the application."""

    id: str
    content: str
    date: str
    mood: float
    emotions: list[str]
    timestamp: int
    ai_response: Optional[str] = None


@dataclass(frozen=True)
class ChatMessage:
    """One message of the companion chat transcript."""

    id: str
    content: str
    sender: str
    timestamp: int


__all__ = [
    "ChatMessage",
    "ClassificationInput",
    "JournalEntry",
    "RiskDetection",
    "RiskLevel",
    "SentimentResult",
]
