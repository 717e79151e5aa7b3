"""Streamlit interface for the MindfulJourney journaling companion."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import pandas as pd
import streamlit as st

CURRENT_FILE = Path(__file__).resolve()
for candidate in CURRENT_FILE.parents:
    if (candidate / "pyproject.toml").exists():
        project_root = candidate
        break
else:
    project_root = CURRENT_FILE.parents[3]

project_root_str = str(project_root)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from mindful_journey.core.entities import JournalEntry, RiskLevel, SentimentResult
from mindful_journey.infrastructure.chat.responses import build_response_provider
from mindful_journey.infrastructure.nlp.crisis_risk import KeywordRiskClassifier
from mindful_journey.infrastructure.nlp.keyword_tables import KeywordTable
from mindful_journey.infrastructure.nlp.sentiment_scorer import LexiconSentimentScorer
from mindful_journey.infrastructure.reports.mood_trends import MoodTrendAnalyzer
from mindful_journey.infrastructure.resources.crisis_resources import (
    CRISIS_RESOURCES,
    ONLINE_RESOURCES,
    SPECIALIZED_RESOURCES,
    banner_for,
)
from mindful_journey.infrastructure.storage.journal_repository import JournalRepository
from mindful_journey.infrastructure.storage.key_value import JsonFileKeyValueStore
from mindful_journey.use_cases.analyze_text import AnalyzeTextUseCase
from mindful_journey.use_cases.companion_chat import AI, CompanionChat
from mindful_journey.use_cases.manage_profile import ManageProfileUseCase
from mindful_journey.use_cases.submit_entry import SubmitJournalEntryUseCase
from mindful_journey.utils import config as app_config
from mindful_journey.utils.logger import configure_logging, logger


@dataclass
class Services:
    classifier: KeywordRiskClassifier
    scorer: LexiconSentimentScorer
    analyze_text: AnalyzeTextUseCase
    submit_entry: SubmitJournalEntryUseCase
    profile: ManageProfileUseCase
    repository: JournalRepository
    trends: MoodTrendAnalyzer
    chat_config: app_config.ChatConfig


@st.cache_data
def load_config(path: Path) -> app_config.AppConfig:
    return app_config.load_config(path)


@st.cache_resource
def load_keyword_table(path: Path) -> KeywordTable:
    try:
        return KeywordTable.from_yaml(path)
    except ValueError as exc:
        logger.error("Invalid keyword file {}: {}", path, exc)
        return KeywordTable.default()


@st.cache_resource
def load_store(path: Path) -> JsonFileKeyValueStore:
    store = JsonFileKeyValueStore(path)
    store.initialize()
    return store


def create_services(config: app_config.AppConfig) -> Services:
    paths = app_config.get_paths(config)

    storage_file = paths.get("storage_file")
    if storage_file is None:
        raise KeyError("Configuration 'paths' is missing the 'storage_file' entry.")
    keywords_file = paths.get("keywords_file")

    table = load_keyword_table(Path(keywords_file)) if keywords_file else KeywordTable.default()
    min_length = app_config.get_min_text_length(config)
    classifier = KeywordRiskClassifier(table, min_text_length=min_length)
    scorer = LexiconSentimentScorer(table)
    analyze_text = AnalyzeTextUseCase(classifier, scorer, min_text_length=min_length)

    repository = JournalRepository(load_store(Path(storage_file)))
    chat_config = config.get("chat", {}) or {}
    submit_entry = SubmitJournalEntryUseCase(
        analyze_text, repository, build_response_provider(chat_config)
    )
    return Services(
        classifier=classifier,
        scorer=scorer,
        analyze_text=analyze_text,
        submit_entry=submit_entry,
        profile=ManageProfileUseCase(repository),
        repository=repository,
        trends=MoodTrendAnalyzer(days=app_config.get_trend_days(config)),
        chat_config=chat_config,
    )


def _raise_crisis_alert(level: RiskLevel) -> None:
    current = st.session_state.get("crisis_level", RiskLevel.NONE)
    if level > current:
        st.session_state["crisis_level"] = level


def render_crisis_banner(level: RiskLevel) -> None:
    banner = banner_for(level)
    if banner is None:
        return

    body = f"**{banner.title}**\n\n{banner.message}"
    if level is RiskLevel.HIGH:
        st.error(body)
    elif level is RiskLevel.MEDIUM:
        st.warning(body)
    else:
        st.info(body)

    if banner.urgent:
        col1, col2 = st.columns(2)
        col1.link_button("📞 Call 988 (Crisis Line)", "tel:988", use_container_width=True)
        col2.link_button("💬 Text HOME to 741741", "sms:741741", use_container_width=True)
    st.caption("💗 You matter, and help is always available.")


def render_mood_analysis(sentiment: SentimentResult) -> None:
    col1, col2 = st.columns(2)
    col1.metric("Overall mood", sentiment.sentiment.capitalize())
    col2.metric("Intensity", f"{sentiment.intensity:.0%}")
    st.markdown(" ".join(f"`{emotion}`" for emotion in sorted(sentiment.emotions)))
    if sentiment.keywords:
        st.caption("Words noticed: " + ", ".join(sorted(sentiment.keywords)))


def render_journal_section(services: Services) -> None:
    st.markdown("### 📝 How are you feeling today?")
    st.caption("Your thoughts are stored only on this device.")

    with st.form("journal-form", clear_on_submit=True):
        text_input = st.text_area(
            "Journal entry",
            height=200,
            placeholder="Write about your day, your feelings, or anything on your mind...",
        )
        submitted = st.form_submit_button("Save entry", use_container_width=True)

    if not submitted:
        return

    if not text_input.strip():
        st.warning("Write a few words before saving your entry.")
        return

    with st.spinner("Reflecting on your entry..."):
        submission = services.submit_entry.execute(text_input, on_crisis=_raise_crisis_alert)

    render_crisis_banner(submission.risk)
    if submission.sentiment is not None:
        render_mood_analysis(submission.sentiment)
    if submission.entry.ai_response:
        st.success(submission.entry.ai_response)


def render_recent_entries(entries: Sequence[JournalEntry], limit: int = 5) -> None:
    if not entries:
        st.info("No entries yet. Your first reflection will appear here.")
        return

    st.markdown("#### Recent entries")
    for entry in entries[:limit]:
        with st.expander(f"{entry.date} · mood {entry.mood:.1f}"):
            st.write(entry.content)
            st.markdown(" ".join(f"`{emotion}`" for emotion in entry.emotions))
            if entry.ai_response:
                st.caption(entry.ai_response)


def render_chat_section(services: Services) -> None:
    st.markdown("### 🤖 AI Companion")
    st.caption("This companion provides support but isn't a replacement for professional help.")

    chat: CompanionChat | None = st.session_state.get("chat")
    if chat is None:
        chat = CompanionChat(
            services.classifier,
            services.scorer,
            build_response_provider(services.chat_config),
            on_crisis=_raise_crisis_alert,
        )
        st.session_state["chat"] = chat

    message = st.chat_input("Share your thoughts and feelings...")
    if message:
        chat.send(message)

    for item in chat.messages:
        with st.chat_message("assistant" if item.sender == AI else "user"):
            st.write(item.content)


def render_trends_section(services: Services, entries: Sequence[JournalEntry]) -> None:
    st.markdown("### 📈 Mood trends")
    if not entries:
        st.info("Start journaling to see how your mood changes over time.")
        return

    trend = services.trends.daily_trend(entries)
    summary = services.trends.summary(trend)
    col1, col2, col3 = st.columns(3)
    col1.metric("Entries", summary["total_entries"])
    col2.metric("Active days", summary["active_days"])
    col3.metric("Average mood", f"{summary['average_mood']:.1f}")

    st.line_chart(trend.set_index("date")["mood"])

    frequencies = services.trends.emotion_frequencies(entries)
    if frequencies:
        st.markdown("#### Emotions you wrote about")
        st.bar_chart(pd.Series(frequencies, name="entries"))


def render_resources_section() -> None:
    st.markdown("### 🆘 Emergency resources")
    st.error(
        "If you're having thoughts of self-harm or suicide, please reach out immediately: "
        "call **988** or text **HOME** to **741741**."
    )

    crisis_tab, specialized_tab, online_tab = st.tabs(["Crisis support", "Specialized", "Online"])
    with crisis_tab:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "Service": resource.name,
                        "Contact": resource.phone,
                        "How": resource.contact_type,
                        "Available": resource.available,
                        "About": resource.description,
                    }
                    for resource in CRISIS_RESOURCES
                ]
            ),
            use_container_width=True,
            hide_index=True,
        )
    with specialized_tab:
        for resource in SPECIALIZED_RESOURCES:
            st.markdown(f"- **{resource.name}** ({resource.demographic}): {resource.phone} · {resource.description}")
    with online_tab:
        for resource in ONLINE_RESOURCES:
            st.markdown(f"- [{resource.name}]({resource.url}): {resource.description}")


def render_sidebar(services: Services) -> None:
    profile = services.profile
    with st.sidebar:
        st.markdown("### 🛡️ Privacy")
        mode = "Anonymous mode" if profile.anonymous else "Personal mode"
        st.caption(mode)
        label = "Use my name" if profile.anonymous else "Go anonymous"
        if st.button(label, use_container_width=True):
            profile.toggle_anonymous()
            st.rerun()
        if not profile.anonymous:
            name = st.text_input("Display name", value=profile.user_name)
            if name.strip() != profile.user_name:
                profile.set_user_name(name)


def main() -> None:
    st.set_page_config(page_title="MindfulJourney", page_icon="💙", layout="wide")

    config = load_config(app_config.DEFAULT_CONFIG_PATH)
    configure_logging(config.get("logging", {}).get("level", "INFO"))
    services = create_services(config)

    render_sidebar(services)
    st.title("💙 MindfulJourney")
    st.subheader(services.profile.greeting())

    level = st.session_state.get("crisis_level", RiskLevel.NONE)
    if level is not RiskLevel.NONE:
        render_crisis_banner(level)
        if st.button("Dismiss"):
            st.session_state["crisis_level"] = RiskLevel.NONE
            st.rerun()

    journal_tab, chat_tab, trends_tab, resources_tab = st.tabs(
        ["Journal", "Companion", "Mood trends", "Resources"]
    )

    with journal_tab:
        render_journal_section(services)
        render_recent_entries(services.repository.load_entries())

    with chat_tab:
        render_chat_section(services)

    with trends_tab:
        render_trends_section(services, services.repository.load_entries())

    with resources_tab:
        render_resources_section()


if __name__ == "__main__":
    main()
