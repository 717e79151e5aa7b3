"""Use case orchestrating the generation of mood trend reports."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Mapping, Protocol, Sequence

import pandas as pd
from matplotlib.figure import Figure

from mindful_journey.core.entities import JournalEntry


class EntrySource(Protocol):
    def load_entries(self) -> list[JournalEntry]:
        ...


class TrendAnalyzer(Protocol):
    def daily_trend(
        self, entries: Sequence[JournalEntry], *, days: int | None = None, today: date | None = None
    ) -> pd.DataFrame:
        ...

    def summary(self, trend: pd.DataFrame) -> Mapping[str, float | int]:
        ...

    def build_figure(self, trend: pd.DataFrame) -> Figure:
        ...


class ReportRepository(Protocol):
    def save_trend(self, trend: pd.DataFrame) -> Path:
        ...

    def save_summary(self, summary: Mapping[str, object]) -> Path:
        ...

    def save_figure(self, figure: Figure) -> Path:
        ...


@dataclass(frozen=True)
class GeneratedMoodReport:
    trend_path: Path
    summary_path: Path
    figure_path: Path
    summary: Mapping[str, float | int]


class GenerateMoodReportUseCase:
    def __init__(
        self,
        source: EntrySource,
        analyzer: TrendAnalyzer,
        repository: ReportRepository,
    ) -> None:
        self._source = source
        self._analyzer = analyzer
        self._repository = repository

    def execute(self, *, days: int | None = None, today: date | None = None) -> GeneratedMoodReport:
        entries = self._source.load_entries()
        trend = self._analyzer.daily_trend(entries, days=days, today=today)
        summary = self._analyzer.summary(trend)
        figure = self._analyzer.build_figure(trend)
        return GeneratedMoodReport(
            trend_path=self._repository.save_trend(trend),
            summary_path=self._repository.save_summary(summary),
            figure_path=self._repository.save_figure(figure),
            summary=summary,
        )


__all__ = ["GenerateMoodReportUseCase", "GeneratedMoodReport"]
