"""Tests for the GenerateMoodReportUseCase orchestration."""
from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")
matplotlib = pytest.importorskip("matplotlib")
from matplotlib.figure import Figure

from mindful_journey.use_cases.generate_mood_report import GenerateMoodReportUseCase


class StubSource:
    def __init__(self) -> None:
        self.called = False

    def load_entries(self) -> list:
        self.called = True
        return []


class StubAnalyzer:
    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.trend = pd.DataFrame({"date": ["Jan 01"], "mood": [3.0], "entries": [1]})

    def daily_trend(self, entries, *, days=None, today=None) -> pd.DataFrame:
        self.calls.append(("trend", days, today))
        return self.trend

    def summary(self, trend: pd.DataFrame) -> dict:
        self.calls.append(("summary",))
        return {"days": 1}

    def build_figure(self, trend: pd.DataFrame) -> Figure:
        self.calls.append(("figure",))
        return Figure()


class StubRepository:
    def __init__(self, base: Path) -> None:
        self.base = base
        self.saved: list[str] = []

    def save_trend(self, trend: pd.DataFrame) -> Path:
        self.saved.append("trend")
        return self.base / "trend.csv"

    def save_summary(self, summary: dict) -> Path:
        self.saved.append("summary")
        return self.base / "summary.json"

    def save_figure(self, figure: Figure) -> Path:
        self.saved.append("figure")
        return self.base / "trend.png"


def test_use_case_orchestrates_components(tmp_path: Path) -> None:
    source = StubSource()
    analyzer = StubAnalyzer()
    repository = StubRepository(tmp_path)
    use_case = GenerateMoodReportUseCase(source=source, analyzer=analyzer, repository=repository)

    report = use_case.execute(days=7, today=date(2024, 1, 1))

    assert source.called
    assert analyzer.calls == [("trend", 7, date(2024, 1, 1)), ("summary",), ("figure",)]
    assert repository.saved == ["trend", "summary", "figure"]
    assert report.trend_path == tmp_path / "trend.csv"
    assert report.summary == {"days": 1}
