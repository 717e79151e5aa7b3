"""Infrastructure helpers for generating mood reports."""

from .mood_trends import FileSystemMoodReportRepository, MoodTrendAnalyzer

__all__ = ["FileSystemMoodReportRepository", "MoodTrendAnalyzer"]
