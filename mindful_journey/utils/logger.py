"""Centralised Loguru logger shared by the whole project."""
from __future__ import annotations

import sys

from loguru import logger

_DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Route project logs to stderr at the requested level.

    Loguru ships with a DEBUG handler on stderr; it is replaced so that the
    ``logging.level`` entry of the configuration file is honoured. Unknown level
    names raise ``ValueError``.
    """

    normalized = str(level).strip().upper() or "INFO"
    try:
        logger.level(normalized)
    except ValueError as error:
        raise ValueError(f"Unknown logging level: {level!r}") from error

    logger.remove()
    logger.add(sys.stderr, level=normalized, format=_DEFAULT_FORMAT)


__all__ = ["configure_logging", "logger"]
