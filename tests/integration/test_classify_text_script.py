"""Tests for the text classification command-line script."""
from __future__ import annotations

import json
from pathlib import Path

from mindful_journey.infrastructure.nlp.keyword_tables import KeywordTable
from scripts.classify_text import classify_texts, main


def test_classify_texts_reports_risk_and_mood() -> None:
    results = classify_texts(
        ["I feel like giving up and there's no way out", "happy joy cheerful"],
        KeywordTable.default(),
    )

    assert results[0]["risk"] == "medium"
    assert results[0]["matched_phrases"] == ["giving up", "no way out"]
    assert results[1]["risk"] == "none"
    assert results[1]["emotions"] == ["happy"]
    assert results[1]["sentiment"] == "positive"


def test_main_reads_input_file(tmp_path: Path, capsys) -> None:
    source = tmp_path / "texts.txt"
    source.write_text("I am so overwhelmed today\n\nthe weather is mild today\n", encoding="utf-8")

    main(["--input", str(source)])

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [line["risk"] for line in lines] == ["low", "none"]
