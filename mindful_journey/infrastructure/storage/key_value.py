"""Key-value stores standing in for the browser's local storage."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from mindful_journey.utils.logger import logger


class InMemoryKeyValueStore:
    """Volatile store, handy for tests and anonymous sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def initialize(self) -> None:
        return None

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFileKeyValueStore:
    """Persist string values in a single JSON document on disk.

    ``initialize`` must be called once before use; it reads the file into
    memory. Every mutation rewrites the whole document.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._data: dict[str, str] = {}
        self._initialized = False

    @property
    def path(self) -> Path:
        return self._path

    def initialize(self) -> None:
        self._data = self._read()
        self._initialized = True
        logger.info("Loaded {} stored keys from {}", len(self._data), self._path)

    def get(self, key: str) -> Optional[str]:
        self._ensure_initialized()
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._ensure_initialized()
        self._data[key] = str(value)
        self._flush()

    def remove(self, key: str) -> None:
        self._ensure_initialized()
        if self._data.pop(key, None) is not None:
            self._flush()

    def keys(self) -> list[str]:
        self._ensure_initialized()
        return sorted(self._data)

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("Store must be initialized before use; call initialize() first.")

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as file:
                payload = json.load(file)
        except (OSError, json.JSONDecodeError) as error:
            logger.warning("Could not read stored data from {}: {}", self._path, error)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Stored data in {} is not an object; starting empty.", self._path)
            return {}
        return {str(key): str(value) for key, value in payload.items() if value is not None}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temporary = self._path.with_suffix(self._path.suffix + ".tmp")
        with temporary.open("w", encoding="utf-8") as file:
            json.dump(self._data, file, ensure_ascii=False, indent=2, sort_keys=True)
        temporary.replace(self._path)


__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore"]
