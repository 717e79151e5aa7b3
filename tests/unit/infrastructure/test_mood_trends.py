"""Tests for the mood trend analyzer and report repository."""
from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")
matplotlib = pytest.importorskip("matplotlib")
from matplotlib.figure import Figure

from mindful_journey.core.entities import JournalEntry
from mindful_journey.infrastructure.reports.mood_trends import (
    FileSystemMoodReportRepository,
    MoodTrendAnalyzer,
)


def make_entry(moment: datetime, mood: float, emotions: list[str]) -> JournalEntry:
    timestamp = int(moment.timestamp() * 1000)
    return JournalEntry(
        id=str(timestamp),
        content="entry",
        date=moment.strftime("%B %d, %Y"),
        mood=mood,
        emotions=emotions,
        timestamp=timestamp,
    )


@pytest.fixture
def entries() -> list[JournalEntry]:
    return [
        make_entry(datetime(2024, 3, 10, 21, 0), 4.0, ["calm", "happy"]),
        make_entry(datetime(2024, 3, 10, 8, 15), 5.0, ["happy"]),
        make_entry(datetime(2024, 3, 8, 12, 0), 2.0, ["sad"]),
        make_entry(datetime(2024, 2, 1, 12, 0), 1.0, ["lonely"]),
    ]


def test_daily_trend_covers_window_oldest_first(entries: list[JournalEntry]) -> None:
    trend = MoodTrendAnalyzer().daily_trend(entries, days=3, today=date(2024, 3, 10))

    assert list(trend["date"]) == ["Mar 08", "Mar 09", "Mar 10"]
    assert list(trend["mood"]) == [2.0, 0.0, 4.5]
    assert list(trend["entries"]) == [1, 0, 2]
    assert list(trend["emotions"]) == [["sad"], [], ["calm", "happy"]]


def test_daily_trend_defaults_to_configured_window(entries: list[JournalEntry]) -> None:
    trend = MoodTrendAnalyzer(days=30).daily_trend(entries, today=date(2024, 3, 10))

    assert len(trend) == 30
    assert trend["entries"].sum() == 3


def test_daily_trend_without_entries_is_all_zero() -> None:
    trend = MoodTrendAnalyzer(days=7).daily_trend([], today=date(2024, 1, 7))

    assert len(trend) == 7
    assert trend["mood"].eq(0.0).all()
    assert trend["entries"].eq(0).all()


def test_window_must_be_positive() -> None:
    with pytest.raises(ValueError):
        MoodTrendAnalyzer(days=0)


def test_emotion_frequencies_sorted_by_count_then_name(entries: list[JournalEntry]) -> None:
    frequencies = MoodTrendAnalyzer.emotion_frequencies(entries)

    assert list(frequencies.items()) == [("happy", 2), ("calm", 1), ("lonely", 1), ("sad", 1)]
    assert MoodTrendAnalyzer.emotion_frequencies([]) == {}


def test_summary_averages_active_days_only(entries: list[JournalEntry]) -> None:
    analyzer = MoodTrendAnalyzer()
    trend = analyzer.daily_trend(entries, days=3, today=date(2024, 3, 10))

    summary = analyzer.summary(trend)

    assert summary == {"days": 3, "active_days": 2, "total_entries": 3, "average_mood": 3.25}


def test_repository_persists_artifacts(tmp_path: Path, entries: list[JournalEntry]) -> None:
    analyzer = MoodTrendAnalyzer()
    trend = analyzer.daily_trend(entries, days=3, today=date(2024, 3, 10))
    repository = FileSystemMoodReportRepository(tmp_path / "reports")

    trend_path = repository.save_trend(trend)
    summary_path = repository.save_summary(analyzer.summary(trend))
    figure = analyzer.build_figure(trend)
    assert isinstance(figure, Figure)
    figure_path = repository.save_figure(figure)

    saved = pd.read_csv(trend_path, keep_default_na=False)
    assert list(saved.columns) == ["date", "mood", "emotions", "entries"]
    assert list(saved["emotions"]) == ["sad", "", "calm, happy"]
    assert json.loads(summary_path.read_text(encoding="utf-8"))["total_entries"] == 3
    assert figure_path.exists()
