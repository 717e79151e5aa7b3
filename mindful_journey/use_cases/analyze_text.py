"""Use case for assessing a piece of user text for risk and mood."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from mindful_journey.core.entities import RiskLevel, SentimentResult


class RiskClassifier(Protocol):
    def classify(
        self, text: str, on_detected: Optional[Callable[[RiskLevel], None]] = None
    ) -> RiskLevel:
        ...


class SentimentScorer(Protocol):
    def score(self, text: str) -> SentimentResult:
        ...


class ResponseProvider(Protocol):
    def choose(self, category: str) -> str:
        ...


@dataclass(frozen=True)
class TextAssessment:
    risk: RiskLevel
    sentiment: Optional[SentimentResult]


class AnalyzeTextUseCase:
    """Run the risk classifier and, for long enough text, the mood scorer."""

    def __init__(
        self,
        classifier: RiskClassifier,
        scorer: SentimentScorer,
        *,
        min_text_length: int = 10,
    ) -> None:
        self._classifier = classifier
        self._scorer = scorer
        self._min_text_length = min_text_length

    def execute(
        self, text: str, on_detected: Optional[Callable[[RiskLevel], None]] = None
    ) -> TextAssessment:
        risk = self._classifier.classify(text, on_detected)
        sentiment = None
        if len(text) > self._min_text_length:
            sentiment = self._scorer.score(text)
        return TextAssessment(risk=risk, sentiment=sentiment)


__all__ = [
    "AnalyzeTextUseCase",
    "ResponseProvider",
    "RiskClassifier",
    "SentimentScorer",
    "TextAssessment",
]
