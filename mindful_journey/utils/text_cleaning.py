"""Utility functions for text preprocessing."""
from __future__ import annotations

import re

from mindful_journey.utils.logger import logger

_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case text for phrase containment checks."""
    if not isinstance(text, str):
        return ""
    return text.lower()


def split_words(text: str) -> list[str]:
    """Like ``tokenize`` but keeps the empty pieces left by outer whitespace."""
    return _WHITESPACE_PATTERN.split(normalize_text(text))


def tokenize(text: str) -> list[str]:
    """Lower-case text and split it on runs of whitespace.

    Punctuation is kept attached to its token, so ``"happy,"`` is not the same
    token as ``"happy"``.
    """
    tokens = [token for token in split_words(text) if token]
    logger.debug("Tokenized text into {} tokens", len(tokens))
    return tokens


def is_meaningful(text: str, min_length: int = 10) -> bool:
    """Return whether ``text`` is long enough to be worth analysing."""
    return isinstance(text, str) and len(text) >= min_length


__all__ = ["is_meaningful", "normalize_text", "split_words", "tokenize"]
