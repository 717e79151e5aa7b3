"""Keyword-based crisis risk detection for journal entries and chat messages."""
from __future__ import annotations

from typing import Callable, Optional

from mindful_journey.core.entities import ClassificationInput, RiskDetection, RiskLevel
from mindful_journey.infrastructure.nlp.keyword_tables import RISK_TIERS, KeywordTable
from mindful_journey.utils.logger import logger
from mindful_journey.utils.text_cleaning import is_meaningful, normalize_text

MIN_TEXT_LENGTH = 10

RiskCallback = Callable[[RiskLevel], None]


class KeywordRiskClassifier:
    """Assign a crisis risk tier based on trigger-phrase containment."""

    def __init__(
        self,
        table: KeywordTable | None = None,
        *,
        min_text_length: int = MIN_TEXT_LENGTH,
    ) -> None:
        self._table = table or KeywordTable.default()
        self._min_text_length = min_text_length

    def detect(self, text: str) -> RiskDetection:
        """Return the highest tier with a match and the phrases of that tier."""

        request = ClassificationInput(text=text if isinstance(text, str) else "")
        if not is_meaningful(request.text, self._min_text_length):
            return RiskDetection(level=RiskLevel.NONE)

        lowered = normalize_text(request.text)
        for level in RISK_TIERS:
            matched = tuple(phrase for phrase in self._table.phrases_for(level) if phrase in lowered)
            if matched:
                logger.debug("Risk tier '{}' matched phrases {}", level.value, matched)
                return RiskDetection(level=level, matched_phrases=matched)
        return RiskDetection(level=RiskLevel.NONE)

    def classify(self, text: str, on_detected: Optional[RiskCallback] = None) -> RiskLevel:
        """Return the risk tier and notify ``on_detected`` once when it is not ``none``."""

        level = self.detect(text).level
        if level is not RiskLevel.NONE:
            logger.info("Crisis risk detected at level '{}'", level.value)
            if on_detected is not None:
                on_detected(level)
        return level


_DEFAULT_CLASSIFIER = KeywordRiskClassifier()


def classify_risk(text: str, on_detected: Optional[RiskCallback] = None) -> RiskLevel:
    """Classify ``text`` with the built-in keyword tables."""

    return _DEFAULT_CLASSIFIER.classify(text, on_detected)


__all__ = ["KeywordRiskClassifier", "MIN_TEXT_LENGTH", "RiskCallback", "classify_risk"]
