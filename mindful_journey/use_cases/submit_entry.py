"""Use case for recording a new journal entry."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Protocol

from mindful_journey.core.entities import JournalEntry, RiskLevel, SentimentResult
from mindful_journey.use_cases.analyze_text import AnalyzeTextUseCase, ResponseProvider
from mindful_journey.utils.logger import logger

NEUTRAL_MOOD = 3.5
MOOD_SPREAD = 2.5
MIN_MOOD = 1.0
MAX_MOOD = 6.0


class EntryRepository(Protocol):
    def add_entry(self, entry: JournalEntry) -> list[JournalEntry]:
        ...


@dataclass(frozen=True)
class JournalSubmission:
    entry: JournalEntry
    sentiment: Optional[SentimentResult]
    risk: RiskLevel


def mood_from_sentiment(sentiment: Optional[SentimentResult]) -> float:
    """Map a mood analysis onto the 1-6 scale used by the trend charts."""

    if sentiment is None or sentiment.sentiment == "neutral":
        return NEUTRAL_MOOD
    direction = 1.0 if sentiment.sentiment == "positive" else -1.0
    mood = NEUTRAL_MOOD + direction * MOOD_SPREAD * sentiment.intensity
    return round(min(max(mood, MIN_MOOD), MAX_MOOD), 2)


class SubmitJournalEntryUseCase:
    """Analyse, annotate and persist a journal entry."""

    def __init__(
        self,
        analyzer: AnalyzeTextUseCase,
        repository: EntryRepository,
        responses: ResponseProvider,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._analyzer = analyzer
        self._repository = repository
        self._responses = responses
        self._clock = clock or datetime.now

    def execute(
        self,
        text: str,
        on_crisis: Optional[Callable[[RiskLevel], None]] = None,
    ) -> JournalSubmission:
        content = text.strip() if isinstance(text, str) else ""
        if not content:
            raise ValueError("A journal entry cannot be empty.")

        now = self._clock()
        timestamp = int(now.timestamp() * 1000)
        assessment = self._analyzer.execute(content, on_crisis)
        sentiment = assessment.sentiment
        emotions = sorted(sentiment.emotions) if sentiment is not None else ["neutral"]

        entry = JournalEntry(
            id=str(timestamp),
            content=content,
            date=now.strftime("%B %d, %Y"),
            mood=mood_from_sentiment(sentiment),
            emotions=emotions,
            timestamp=timestamp,
            ai_response=self._responses.choose("journal"),
        )
        self._repository.add_entry(entry)
        logger.info("Stored journal entry {} (risk: {})", entry.id, assessment.risk.value)
        return JournalSubmission(entry=entry, sentiment=sentiment, risk=assessment.risk)


__all__ = [
    "EntryRepository",
    "JournalSubmission",
    "SubmitJournalEntryUseCase",
    "mood_from_sentiment",
]
