"""Mood trend aggregation and charts built from journal entries."""
from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Mapping, Sequence

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.figure import Figure

from mindful_journey.core.entities import JournalEntry
from mindful_journey.utils.logger import logger

TREND_COLUMNS = ["date", "day", "mood", "emotions", "entries"]


def entry_day(entry: JournalEntry) -> date:
    """Local calendar day of an entry's millisecond timestamp."""

    return datetime.fromtimestamp(entry.timestamp / 1000).date()


class MoodTrendAnalyzer:
    """Aggregate journal entries into a per-day mood series."""

    def __init__(self, days: int = 30) -> None:
        if days <= 0:
            raise ValueError("The trend window must cover at least one day.")
        self._days = days

    def daily_trend(
        self,
        entries: Sequence[JournalEntry],
        *,
        days: int | None = None,
        today: date | None = None,
    ) -> pd.DataFrame:
        window_days = days or self._days
        end = today or datetime.now().date()
        window = list(pd.date_range(end=pd.Timestamp(end), periods=window_days, freq="D").date)

        frame = pd.DataFrame(
            [(entry_day(entry), entry.mood, list(entry.emotions)) for entry in entries],
            columns=["day", "mood", "emotions"],
        )
        frame["mood"] = frame["mood"].astype(float)
        grouped = frame.groupby("day")
        mood = grouped["mood"].mean().reindex(window, fill_value=0.0)
        counts = grouped.size().reindex(window, fill_value=0)
        exploded = frame.explode("emotions").dropna(subset=["emotions"])
        emotions = exploded.groupby("day")["emotions"].unique()

        rows = []
        for day in window:
            day_emotions = emotions.loc[day] if day in emotions.index else []
            rows.append(
                {
                    "date": day.strftime("%b %d"),
                    "day": day,
                    "mood": round(float(mood.loc[day]), 1),
                    "emotions": sorted(str(emotion) for emotion in day_emotions),
                    "entries": int(counts.loc[day]),
                }
            )
        logger.debug("Built mood trend over {} days from {} entries", window_days, len(entries))
        return pd.DataFrame(rows, columns=TREND_COLUMNS)

    @staticmethod
    def emotion_frequencies(entries: Sequence[JournalEntry]) -> dict[str, int]:
        emotions = pd.Series(
            [emotion for entry in entries for emotion in entry.emotions], dtype="object"
        )
        if emotions.empty:
            return {}
        counts = emotions.value_counts().sort_index().sort_values(ascending=False, kind="stable")
        return {str(emotion): int(count) for emotion, count in counts.items()}

    @staticmethod
    def summary(trend: pd.DataFrame) -> Mapping[str, float | int]:
        active = trend[trend["entries"] > 0]
        average = round(float(active["mood"].mean()), 2) if not active.empty else 0.0
        return {
            "days": int(len(trend)),
            "active_days": int(len(active)),
            "total_entries": int(trend["entries"].sum()),
            "average_mood": average,
        }

    @staticmethod
    def build_figure(trend: pd.DataFrame) -> Figure:
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.plot(trend["date"], trend["mood"], marker="o", color="#6366f1")
        ax.set(title="Mood over time", xlabel="Day", ylabel="Average mood", ylim=(0, 6))
        step = max(1, len(trend) // 10)
        ax.set_xticks(range(0, len(trend), step))
        ax.set_xticklabels(trend["date"].iloc[::step], rotation=45, ha="right")
        ax.grid(alpha=0.3)
        fig.tight_layout()
        return fig


class FileSystemMoodReportRepository:
    """Persist generated mood artefacts to disk."""

    def __init__(self, report_dir: Path) -> None:
        self._report_dir = Path(report_dir)

    @property
    def trend_path(self) -> Path:
        return self._report_dir / "mood_trend.csv"

    @property
    def summary_path(self) -> Path:
        return self._report_dir / "mood_summary.json"

    @property
    def figure_path(self) -> Path:
        return self._report_dir / "mood_trend.png"

    def save_trend(self, trend: pd.DataFrame) -> Path:
        self._report_dir.mkdir(parents=True, exist_ok=True)
        serialisable = trend.drop(columns=["day"]).copy()
        serialisable["emotions"] = serialisable["emotions"].map(", ".join)
        serialisable.to_csv(self.trend_path, index=False)
        return self.trend_path

    def save_summary(self, summary: Mapping[str, object]) -> Path:
        self._report_dir.mkdir(parents=True, exist_ok=True)
        with self.summary_path.open("w", encoding="utf-8") as file:
            json.dump(dict(summary), file, ensure_ascii=False, indent=2)
        return self.summary_path

    def save_figure(self, figure: Figure) -> Path:
        self._report_dir.mkdir(parents=True, exist_ok=True)
        figure.savefig(self.figure_path)
        plt.close(figure)
        return self.figure_path


__all__ = ["FileSystemMoodReportRepository", "MoodTrendAnalyzer", "TREND_COLUMNS", "entry_day"]
