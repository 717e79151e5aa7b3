"""Canned companion replies and the providers that pick between them."""
from __future__ import annotations

import random
from itertools import cycle
from typing import Iterator, Mapping, Sequence

from mindful_journey.utils.logger import logger

WELCOME_MESSAGE = (
    "Hello! I'm your AI companion here to listen and support you. How are you feeling "
    "today? Feel free to share anything that's on your mind."
)

CRISIS_REPLY = (
    "I'm really concerned about what you've shared. Your life has value and there are "
    "people who want to help. Please consider reaching out to a crisis helpline: 988 "
    "(Suicide & Crisis Lifeline) or text HOME to 741741. You don't have to go through "
    "this alone."
)

DEFAULT_RESPONSES: Mapping[str, tuple[str, ...]] = {
    "positive": (
        "I'm so glad to hear you're feeling positive! What's been contributing to this good mood?",
        "That sounds wonderful! It's great that you're experiencing these positive feelings.",
        "Your positive energy is really coming through. What would you like to explore about this feeling?",
    ),
    "negative": (
        "I can hear that you're going through a difficult time. Thank you for sharing this with "
        "me - it takes courage to express these feelings.",
        "It sounds like things are really challenging right now. Remember that difficult feelings "
        "are temporary, and you're not alone in this.",
        "I'm here to listen and support you. Would you like to talk about what's making you feel this way?",
    ),
    "neutral": (
        "Thank you for sharing that with me. How has your day been overall?",
        "I appreciate you opening up. What's been on your mind lately?",
        "That's interesting. Tell me more about what you're experiencing.",
    ),
    "journal": (
        "Thank you for sharing your thoughts. I can sense there's a lot on your mind today. "
        "Remember that it's completely normal to feel this way, and you're taking a positive "
        "step by expressing these feelings. What would you like to explore further about this "
        "experience?",
    ),
}


def _validated(responses: Mapping[str, Sequence[str]]) -> dict[str, tuple[str, ...]]:
    validated: dict[str, tuple[str, ...]] = {}
    for category, replies in responses.items():
        options = tuple(reply for reply in replies if isinstance(reply, str) and reply.strip())
        if not options:
            raise ValueError(f"Response category {category!r} has no replies.")
        validated[category] = options
    return validated


class TableResponseProvider:
    """Deterministic provider that rotates through each category in order."""

    def __init__(self, responses: Mapping[str, Sequence[str]] | None = None) -> None:
        self._responses = _validated(responses or DEFAULT_RESPONSES)
        self._cursors: dict[str, Iterator[str]] = {
            category: cycle(replies) for category, replies in self._responses.items()
        }

    def choose(self, category: str) -> str:
        if category not in self._cursors:
            raise KeyError(f"No canned replies configured for category {category!r}")
        return next(self._cursors[category])


class RandomResponseProvider:
    """Pick a canned reply uniformly at random, optionally from a fixed seed."""

    def __init__(
        self,
        responses: Mapping[str, Sequence[str]] | None = None,
        *,
        seed: int | None = None,
    ) -> None:
        self._responses = _validated(responses or DEFAULT_RESPONSES)
        self._random = random.Random(seed)

    def choose(self, category: str) -> str:
        if category not in self._responses:
            raise KeyError(f"No canned replies configured for category {category!r}")
        reply = self._random.choice(self._responses[category])
        logger.debug("Picked '{}' reply at random", category)
        return reply


def build_response_provider(
    chat_config: Mapping[str, object] | None = None,
) -> TableResponseProvider | RandomResponseProvider:
    """Pick the provider described by the ``chat`` configuration section."""

    settings = chat_config if isinstance(chat_config, Mapping) else {}
    if settings.get("deterministic"):
        logger.info("Using deterministic companion replies.")
        return TableResponseProvider()

    seed = settings.get("seed")
    if seed is not None and not isinstance(seed, int):
        raise ValueError(f"Chat seed must be an integer, got {seed!r}")
    return RandomResponseProvider(seed=seed)


__all__ = [
    "CRISIS_REPLY",
    "DEFAULT_RESPONSES",
    "RandomResponseProvider",
    "TableResponseProvider",
    "WELCOME_MESSAGE",
    "build_response_provider",
]
