"""Keyword-driven text analysis: crisis risk tiers and mood scoring."""

from .crisis_risk import KeywordRiskClassifier, classify_risk
from .keyword_tables import KeywordTable
from .sentiment_scorer import LexiconSentimentScorer, score_sentiment

__all__ = [
    "KeywordRiskClassifier",
    "KeywordTable",
    "LexiconSentimentScorer",
    "classify_risk",
    "score_sentiment",
]
