"""Tests for the companion chat use case."""
from __future__ import annotations

from datetime import datetime

from mindful_journey.core.entities import RiskLevel
from mindful_journey.infrastructure.chat.responses import (
    CRISIS_REPLY,
    DEFAULT_RESPONSES,
    WELCOME_MESSAGE,
    TableResponseProvider,
)
from mindful_journey.infrastructure.nlp.crisis_risk import KeywordRiskClassifier
from mindful_journey.infrastructure.nlp.sentiment_scorer import LexiconSentimentScorer
from mindful_journey.use_cases.companion_chat import AI, USER, CompanionChat


def build_chat(alerts: list[RiskLevel]) -> CompanionChat:
    return CompanionChat(
        KeywordRiskClassifier(),
        LexiconSentimentScorer(),
        TableResponseProvider(),
        on_crisis=alerts.append,
        clock=lambda: datetime(2024, 5, 1, 20, 0),
    )


def test_transcript_starts_with_welcome() -> None:
    chat = build_chat([])

    assert [message.content for message in chat.messages] == [WELCOME_MESSAGE]
    assert chat.messages[0].sender == AI


def test_blank_messages_are_ignored() -> None:
    chat = build_chat([])

    assert chat.send("   ") is None
    assert len(chat.messages) == 1


def test_high_risk_message_gets_crisis_reply() -> None:
    alerts: list[RiskLevel] = []
    chat = build_chat(alerts)

    reply = chat.send("I just want to end it all tonight")

    assert reply is not None
    assert reply.content == CRISIS_REPLY
    assert alerts == [RiskLevel.HIGH]
    assert [message.sender for message in chat.messages] == [AI, USER, AI]


def test_reply_follows_message_mood() -> None:
    alerts: list[RiskLevel] = []
    chat = build_chat(alerts)

    positive = chat.send("I feel happy and excited today")
    negative = chat.send("work made me so sad and stressed")

    assert positive is not None and positive.content == DEFAULT_RESPONSES["positive"][0]
    assert negative is not None and negative.content == DEFAULT_RESPONSES["negative"][0]
    assert alerts == []


def test_lower_risk_tiers_keep_normal_replies() -> None:
    alerts: list[RiskLevel] = []
    chat = build_chat(alerts)

    reply = chat.send("I am giving up on everything")

    assert reply is not None
    assert reply.content == DEFAULT_RESPONSES["neutral"][0]
    assert alerts == []


def test_message_ids_are_unique_and_ordered() -> None:
    chat = build_chat([])
    chat.send("hello there companion")
    chat.send("another message for you")

    ids = [message.id for message in chat.messages]
    assert ids == ["1", "2", "3", "4", "5"]
