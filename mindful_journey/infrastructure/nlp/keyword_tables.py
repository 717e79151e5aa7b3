"""Static trigger-phrase tables shared by the risk classifier and mood scorer."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import yaml

from mindful_journey.core.entities import RiskLevel
from mindful_journey.utils.logger import logger

# Tiers in the order they are checked.
RISK_TIERS: tuple[RiskLevel, ...] = (RiskLevel.HIGH, RiskLevel.MEDIUM, RiskLevel.LOW)

_DEFAULT_RISK_PHRASES: dict[RiskLevel, tuple[str, ...]] = {
    RiskLevel.HIGH: (
        "suicide",
        "kill myself",
        "end it all",
        "better off dead",
        "ending my life",
        "suicide plan",
        "kill me",
        "want to die",
        "no reason to live",
    ),
    RiskLevel.MEDIUM: (
        "self harm",
        "hurt myself",
        "cutting",
        "can't go on",
        "giving up",
        "hopeless",
        "no way out",
        "burden",
        "everyone would be better without me",
    ),
    RiskLevel.LOW: (
        "really struggling",
        "can't cope",
        "overwhelmed",
        "breaking point",
        "too much",
        "can't handle",
        "falling apart",
        "lost",
    ),
}

_DEFAULT_POSITIVE_WORDS = (
    "happy",
    "joy",
    "good",
    "great",
    "wonderful",
    "amazing",
    "love",
    "excited",
    "grateful",
    "hopeful",
)

_DEFAULT_NEGATIVE_WORDS = (
    "sad",
    "angry",
    "bad",
    "terrible",
    "awful",
    "hate",
    "depressed",
    "anxious",
    "worried",
    "stressed",
)

_DEFAULT_EMOTION_WORDS: dict[str, tuple[str, ...]] = {
    "happy": ("happy", "joy", "cheerful", "delighted"),
    "sad": ("sad", "down", "blue", "melancholy"),
    "anxious": ("anxious", "worried", "nervous", "stressed"),
    "angry": ("angry", "mad", "furious", "irritated"),
    "calm": ("calm", "peaceful", "relaxed", "serene"),
    "grateful": ("grateful", "thankful", "appreciative"),
    "hopeful": ("hopeful", "optimistic", "positive"),
    "lonely": ("lonely", "isolated", "alone"),
}


def _clean_phrases(phrases: Iterable[Any]) -> tuple[str, ...]:
    cleaned: list[str] = []
    for phrase in phrases:
        if not isinstance(phrase, str):
            continue
        normalized = phrase.strip().lower()
        if normalized and normalized not in cleaned:
            cleaned.append(normalized)
    return tuple(cleaned)


@dataclass(frozen=True)
class KeywordTable:
    """Immutable trigger tables for risk tiers, polarity and emotion tags."""

    risk_phrases: Mapping[RiskLevel, tuple[str, ...]]
    positive_words: frozenset[str]
    negative_words: frozenset[str]
    emotion_words: Mapping[str, frozenset[str]]

    def __post_init__(self) -> None:
        risk = {level: _clean_phrases(self.risk_phrases.get(level, ())) for level in RISK_TIERS}
        emotions = {
            str(tag).strip().lower(): frozenset(_clean_phrases(words))
            for tag, words in self.emotion_words.items()
            if str(tag).strip()
        }
        object.__setattr__(self, "risk_phrases", MappingProxyType(risk))
        object.__setattr__(self, "positive_words", frozenset(_clean_phrases(self.positive_words)))
        object.__setattr__(self, "negative_words", frozenset(_clean_phrases(self.negative_words)))
        object.__setattr__(self, "emotion_words", MappingProxyType(emotions))

    def phrases_for(self, level: RiskLevel) -> tuple[str, ...]:
        return self.risk_phrases.get(level, ())

    @classmethod
    def default(cls) -> "KeywordTable":
        return cls(
            risk_phrases=_DEFAULT_RISK_PHRASES,
            positive_words=frozenset(_DEFAULT_POSITIVE_WORDS),
            negative_words=frozenset(_DEFAULT_NEGATIVE_WORDS),
            emotion_words={tag: frozenset(words) for tag, words in _DEFAULT_EMOTION_WORDS.items()},
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "KeywordTable":
        """Build a table from a parsed YAML mapping.

        Sections that are absent keep the built-in defaults; a section that is
        present replaces the corresponding default entirely.
        """

        if not isinstance(data, Mapping):
            raise ValueError("Keyword configuration must be a mapping.")

        defaults = cls.default()
        risk: dict[RiskLevel, tuple[str, ...]] = dict(defaults.risk_phrases)
        crisis_section = data.get("crisis", {})
        if not isinstance(crisis_section, Mapping):
            raise ValueError("The 'crisis' keyword section must be a mapping of tiers.")
        for tier_name, phrases in crisis_section.items():
            try:
                level = RiskLevel(str(tier_name).strip().lower())
            except ValueError as error:
                raise ValueError(f"Unknown crisis tier: {tier_name!r}") from error
            if level is RiskLevel.NONE:
                raise ValueError("The 'none' tier cannot carry trigger phrases.")
            if not isinstance(phrases, list):
                raise ValueError(f"Crisis tier {tier_name!r} must list its phrases.")
            risk[level] = _clean_phrases(phrases)

        positive = data.get("positive", defaults.positive_words)
        negative = data.get("negative", defaults.negative_words)
        for name, section in (("positive", positive), ("negative", negative)):
            if isinstance(section, str) or not isinstance(section, Iterable):
                raise ValueError(f"The {name!r} keyword section must list its words.")
        emotions = data.get("emotions", defaults.emotion_words)
        if not isinstance(emotions, Mapping):
            raise ValueError("The 'emotions' keyword section must be a mapping of tags.")
        for tag, words in emotions.items():
            if isinstance(words, str) or not isinstance(words, Iterable):
                raise ValueError(f"Emotion tag {tag!r} must list its words.")

        return cls(
            risk_phrases=risk,
            positive_words=frozenset(_clean_phrases(positive)),
            negative_words=frozenset(_clean_phrases(negative)),
            emotion_words={tag: frozenset(_clean_phrases(words)) for tag, words in emotions.items()},
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "KeywordTable":
        yaml_path = Path(path)
        if not yaml_path.exists():
            logger.warning("Keyword file {} not found; using built-in tables.", yaml_path)
            return cls.default()

        logger.info("Loading keyword tables from {}", yaml_path)
        with yaml_path.open("r", encoding="utf-8") as file:
            try:
                data = yaml.safe_load(file) or {}
            except yaml.YAMLError as error:
                raise ValueError(f"Keyword file {yaml_path} is not valid YAML: {error}") from error
        return cls.from_mapping(data)


__all__ = ["KeywordTable", "RISK_TIERS"]
