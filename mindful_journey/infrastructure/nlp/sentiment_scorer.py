"""Lexicon-based mood scoring for journal entries."""
from __future__ import annotations

from mindful_journey.core.entities import SentimentResult
from mindful_journey.infrastructure.nlp.keyword_tables import KeywordTable
from mindful_journey.utils.logger import logger
from mindful_journey.utils.text_cleaning import split_words

NEUTRAL = "neutral"
POSITIVE = "positive"
NEGATIVE = "negative"


class LexiconSentimentScorer:
    """Count polarity words and tag emotions from fixed word sets."""

    def __init__(self, table: KeywordTable | None = None) -> None:
        self._table = table or KeywordTable.default()

    def score(self, text: str) -> SentimentResult:
        words = split_words(text)
        tokens = [word for word in words if word]
        positive_count = 0
        negative_count = 0
        keywords: set[str] = set()
        emotions: set[str] = set()

        for token in tokens:
            if token in self._table.positive_words:
                positive_count += 1
                keywords.add(token)
            if token in self._table.negative_words:
                negative_count += 1
                keywords.add(token)
            for tag, tag_words in self._table.emotion_words.items():
                if token in tag_words:
                    emotions.add(tag)

        if positive_count > negative_count:
            sentiment = POSITIVE
        elif negative_count > positive_count:
            sentiment = NEGATIVE
        else:
            sentiment = NEUTRAL

        intensity = 0.0
        if tokens:
            intensity = min((positive_count + negative_count) / len(words) * 10, 1.0)

        result = SentimentResult(
            sentiment=sentiment,
            emotions=frozenset(emotions or {NEUTRAL}),
            intensity=intensity,
            keywords=frozenset(keywords),
        )
        logger.debug(
            "Scored {} tokens: +{} / -{} -> {}", len(tokens), positive_count, negative_count, sentiment
        )
        return result


_DEFAULT_SCORER = LexiconSentimentScorer()


def score_sentiment(text: str) -> SentimentResult:
    """Score ``text`` with the built-in word sets."""

    return _DEFAULT_SCORER.score(text)


__all__ = ["LexiconSentimentScorer", "NEGATIVE", "NEUTRAL", "POSITIVE", "score_sentiment"]
