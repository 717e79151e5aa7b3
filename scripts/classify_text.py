"""Classify crisis risk and mood for texts given on the command line or in a file."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT = Path(__file__).resolve().parents[1]
    _SCRIPT_PARENT_STR = str(_SCRIPT_PARENT)
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project

_PROJECT_ROOT = bootstrap_project()

from mindful_journey.infrastructure.nlp.crisis_risk import KeywordRiskClassifier  # noqa: E402
from mindful_journey.infrastructure.nlp.keyword_tables import KeywordTable  # noqa: E402
from mindful_journey.infrastructure.nlp.sentiment_scorer import LexiconSentimentScorer  # noqa: E402
from mindful_journey.utils.logger import configure_logging, logger  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify crisis risk and mood of texts")
    parser.add_argument("texts", nargs="*", help="Texts to classify")
    parser.add_argument("--input", type=Path, help="File with one text per line")
    parser.add_argument("--keywords", type=Path, default=Path("configs/keywords.yaml"))
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def read_texts(args: argparse.Namespace) -> list[str]:
    texts = list(args.texts)
    if args.input is not None:
        with args.input.open("r", encoding="utf-8") as file:
            texts.extend(line.strip() for line in file if line.strip())
    return texts


def classify_texts(texts: list[str], table: KeywordTable) -> list[dict[str, object]]:
    classifier = KeywordRiskClassifier(table)
    scorer = LexiconSentimentScorer(table)
    results: list[dict[str, object]] = []
    for text in texts:
        detection = classifier.detect(text)
        sentiment = scorer.score(text)
        results.append(
            {
                "text": text,
                "risk": detection.level.value,
                "matched_phrases": list(detection.matched_phrases),
                "sentiment": sentiment.sentiment,
                "emotions": sorted(sentiment.emotions),
                "intensity": round(sentiment.intensity, 3),
                "keywords": sorted(sentiment.keywords),
            }
        )
    return results


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    texts = read_texts(args)
    if not texts:
        logger.error("No texts provided; pass them as arguments or with --input.")
        raise SystemExit(2)

    keywords_path = args.keywords if args.keywords.is_absolute() else _PROJECT_ROOT / args.keywords
    table = KeywordTable.from_yaml(keywords_path)
    for result in classify_texts(texts, table):
        print(json.dumps(result, ensure_ascii=False))


if __name__ == "__main__":
    main()
