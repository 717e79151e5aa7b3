"""End-to-end journaling flow over a file-backed store and the report script."""
from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")

from mindful_journey.core.entities import RiskLevel
from mindful_journey.infrastructure.chat.responses import TableResponseProvider
from mindful_journey.infrastructure.nlp.crisis_risk import KeywordRiskClassifier
from mindful_journey.infrastructure.nlp.keyword_tables import KeywordTable
from mindful_journey.infrastructure.nlp.sentiment_scorer import LexiconSentimentScorer
from mindful_journey.infrastructure.storage.journal_repository import JournalRepository
from mindful_journey.infrastructure.storage.key_value import JsonFileKeyValueStore
from mindful_journey.use_cases.analyze_text import AnalyzeTextUseCase
from mindful_journey.use_cases.submit_entry import SubmitJournalEntryUseCase
from scripts.generate_mood_report import generate_report

ROOT = Path(__file__).resolve().parents[2]


def test_entries_survive_restart_and_feed_reports(tmp_path: Path) -> None:
    storage_path = tmp_path / "local_storage.json"
    table = KeywordTable.from_yaml(ROOT / "configs" / "keywords.yaml")
    moments = iter([datetime.now() - timedelta(days=1), datetime.now()])

    store = JsonFileKeyValueStore(storage_path)
    store.initialize()
    use_case = SubmitJournalEntryUseCase(
        AnalyzeTextUseCase(KeywordRiskClassifier(table), LexiconSentimentScorer(table)),
        JournalRepository(store),
        TableResponseProvider(),
        clock=lambda: next(moments),
    )
    alerts: list[RiskLevel] = []
    use_case.execute("Yesterday I felt calm and grateful after a long walk", on_crisis=alerts.append)
    use_case.execute("Today everything is too much and I feel anxious", on_crisis=alerts.append)

    assert alerts == [RiskLevel.LOW]

    reopened = JsonFileKeyValueStore(storage_path)
    reopened.initialize()
    entries = JournalRepository(reopened).load_entries()
    assert [entry.emotions for entry in entries] == [["anxious"], ["calm", "grateful"]]

    config = {
        "paths": {
            "storage_file": str(storage_path),
            "report_dir": str(tmp_path / "reports"),
        },
        "trends": {"days": 7},
    }
    report = generate_report(config)

    assert report.summary["total_entries"] == 2
    assert report.summary["active_days"] == 2
    trend = pd.read_csv(report.trend_path)
    assert len(trend) == 7
    assert report.figure_path.exists()


def test_report_requires_existing_store(tmp_path: Path) -> None:
    config = {"paths": {"storage_file": str(tmp_path / "missing.json")}}

    with pytest.raises(FileNotFoundError):
        generate_report(config)
