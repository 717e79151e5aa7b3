"""Command-line entry point to build mood trend reports from stored entries."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT = Path(__file__).resolve().parents[1]
    _SCRIPT_PARENT_STR = str(_SCRIPT_PARENT)
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project

_PROJECT_ROOT = bootstrap_project()

from mindful_journey.infrastructure.reports import (  # noqa: E402
    FileSystemMoodReportRepository,
    MoodTrendAnalyzer,
)
from mindful_journey.infrastructure.storage.journal_repository import JournalRepository  # noqa: E402
from mindful_journey.infrastructure.storage.key_value import JsonFileKeyValueStore  # noqa: E402
from mindful_journey.use_cases.generate_mood_report import (  # noqa: E402
    GeneratedMoodReport,
    GenerateMoodReportUseCase,
)
from mindful_journey.utils.config import (  # noqa: E402
    AppConfig,
    get_paths,
    get_trend_days,
    load_config,
)
from mindful_journey.utils.logger import configure_logging, logger  # noqa: E402


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (_PROJECT_ROOT / path).resolve()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate mood trend reports from the journal store")
    parser.add_argument("--config", type=Path, default=Path("configs/config.yaml"))
    parser.add_argument("--days", type=int, default=None, help="Length of the trend window in days")
    return parser.parse_args(argv)


def generate_report(config: AppConfig, *, days: int | None = None) -> GeneratedMoodReport:
    paths = get_paths(config)
    if "storage_file" not in paths:
        raise KeyError("Configuration 'paths' is missing the 'storage_file' entry.")

    storage_path = _resolve_path(Path(paths["storage_file"]))
    if not storage_path.exists():
        raise FileNotFoundError(f"Journal store not found at {storage_path}")

    store = JsonFileKeyValueStore(storage_path)
    store.initialize()
    report_dir = _resolve_path(Path(paths.get("report_dir", "reports/mood")))

    use_case = GenerateMoodReportUseCase(
        source=JournalRepository(store),
        analyzer=MoodTrendAnalyzer(days=get_trend_days(config)),
        repository=FileSystemMoodReportRepository(report_dir),
    )
    return use_case.execute(days=days)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = load_config(_resolve_path(args.config))
    configure_logging(config.get("logging", {}).get("level", "INFO"))

    report = generate_report(config, days=args.days)
    logger.info("Trend saved to {}", report.trend_path)
    logger.info("Summary saved to {}", report.summary_path)
    logger.info("Figure saved to {}", report.figure_path)


if __name__ == "__main__":
    main()
