"""Use case driving the supportive companion chat."""
from __future__ import annotations

from datetime import datetime
from itertools import count
from typing import Callable, Optional

from mindful_journey.core.entities import ChatMessage, RiskLevel
from mindful_journey.infrastructure.chat.responses import CRISIS_REPLY, WELCOME_MESSAGE
from mindful_journey.use_cases.analyze_text import (
    ResponseProvider,
    RiskClassifier,
    SentimentScorer,
)
from mindful_journey.utils.logger import logger

USER = "user"
AI = "ai"


class CompanionChat:
    """Keep a chat transcript and answer each user message with a canned reply.

    A message classified as ``high`` risk is answered with the crisis reply and
    triggers ``on_crisis``; every other message gets a reply matching its mood.
    """

    def __init__(
        self,
        classifier: RiskClassifier,
        scorer: SentimentScorer,
        responses: ResponseProvider,
        *,
        on_crisis: Optional[Callable[[RiskLevel], None]] = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._classifier = classifier
        self._scorer = scorer
        self._responses = responses
        self._on_crisis = on_crisis
        self._clock = clock or datetime.now
        self._ids = count(1)
        self._messages: list[ChatMessage] = [self._message(WELCOME_MESSAGE, AI)]

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    def send(self, text: str) -> Optional[ChatMessage]:
        """Record ``text`` and return the companion's reply, or ``None`` for blank input."""

        if not isinstance(text, str) or not text.strip():
            return None

        self._messages.append(self._message(text, USER))
        risk = self._classifier.classify(text)

        if risk is RiskLevel.HIGH:
            logger.warning("High risk message received; replying with crisis resources.")
            if self._on_crisis is not None:
                self._on_crisis(risk)
            reply = self._message(CRISIS_REPLY, AI)
        else:
            sentiment = self._scorer.score(text)
            reply = self._message(self._responses.choose(sentiment.sentiment), AI)

        self._messages.append(reply)
        return reply

    def _message(self, content: str, sender: str) -> ChatMessage:
        timestamp = int(self._clock().timestamp() * 1000)
        return ChatMessage(
            id=str(next(self._ids)),
            content=content,
            sender=sender,
            timestamp=timestamp,
        )


__all__ = ["AI", "CompanionChat", "USER"]
