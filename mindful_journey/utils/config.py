"""Typed access to the YAML configuration file."""
from __future__ import annotations

from pathlib import Path
from typing import TypedDict, cast

import yaml


class PathsConfig(TypedDict, total=False):
    storage_file: str
    keywords_file: str
    report_dir: str


class AnalysisConfig(TypedDict, total=False):
    min_text_length: int


class ChatConfig(TypedDict, total=False):
    seed: int
    deterministic: bool


class TrendsConfig(TypedDict, total=False):
    days: int


class LoggingConfig(TypedDict, total=False):
    level: str


class AppConfig(TypedDict, total=False):
    paths: PathsConfig
    analysis: AnalysisConfig
    chat: ChatConfig
    trends: TrendsConfig
    logging: LoggingConfig


DEFAULT_CONFIG_PATH = Path("configs/config.yaml")


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    with Path(path).open("r", encoding="utf-8") as file:
        data = yaml.safe_load(file)

    if not isinstance(data, dict):
        raise ValueError("The configuration file must contain a mapping at the top level.")

    return cast(AppConfig, data)


def get_paths(config: AppConfig) -> PathsConfig:
    if "paths" not in config:
        raise KeyError("Configuration is missing the 'paths' section.")
    return config["paths"]


def get_min_text_length(config: AppConfig) -> int:
    analysis = cast(AnalysisConfig, config.get("analysis", {}))
    value = analysis.get("min_text_length") if isinstance(analysis, dict) else None
    if not isinstance(value, int) or value < 0:
        return 10
    return value


def get_trend_days(config: AppConfig) -> int:
    trends = cast(TrendsConfig, config.get("trends", {}))
    value = trends.get("days") if isinstance(trends, dict) else None
    if not isinstance(value, int) or value <= 0:
        return 30
    return value


__all__ = [
    "AppConfig",
    "ChatConfig",
    "DEFAULT_CONFIG_PATH",
    "PathsConfig",
    "get_min_text_length",
    "get_paths",
    "get_trend_days",
    "load_config",
]
