"""Journal persistence on top of a key-value store."""
from __future__ import annotations

import json
from typing import Any, Optional, Protocol

from mindful_journey.core.entities import JournalEntry
from mindful_journey.utils.logger import logger

ENTRIES_KEY = "mentalHealthEntries"
ANONYMOUS_MODE_KEY = "anonymousMode"
USER_NAME_KEY = "userName"


class KeyValueStore(Protocol):
    def initialize(self) -> None:
        ...

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


def entry_to_record(entry: JournalEntry) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": entry.id,
        "content": entry.content,
        "date": entry.date,
        "mood": entry.mood,
        "emotions": list(entry.emotions),
        "timestamp": entry.timestamp,
    }
    if entry.ai_response is not None:
        record["aiResponse"] = entry.ai_response
    return record


def entry_from_record(record: dict[str, Any]) -> JournalEntry:
    try:
        emotions = record.get("emotions") or []
        return JournalEntry(
            id=str(record["id"]),
            content=str(record["content"]),
            date=str(record.get("date", "")),
            mood=float(record.get("mood", 0.0)),
            emotions=[str(emotion) for emotion in emotions],
            timestamp=int(record["timestamp"]),
            ai_response=record.get("aiResponse"),
        )
    except (KeyError, TypeError, ValueError) as error:
        raise ValueError(f"Malformed journal entry record: {record!r}") from error


class JournalRepository:
    """Read and write entries, the anonymous-mode flag and the display name."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load_entries(self) -> list[JournalEntry]:
        raw = self._store.get(ENTRIES_KEY)
        if not raw:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as error:
            logger.warning("Stored journal entries are not valid JSON: {}", error)
            return []
        if not isinstance(records, list):
            logger.warning("Stored journal entries are not a list; ignoring them.")
            return []

        entries: list[JournalEntry] = []
        for record in records:
            if not isinstance(record, dict):
                logger.warning("Skipping stored entry that is not an object: {}", record)
                continue
            try:
                entries.append(entry_from_record(record))
            except ValueError as error:
                logger.warning("Skipping stored entry: {}", error)
        return entries

    def save_entries(self, entries: list[JournalEntry]) -> None:
        payload = json.dumps([entry_to_record(entry) for entry in entries], ensure_ascii=False)
        self._store.set(ENTRIES_KEY, payload)
        logger.debug("Persisted {} journal entries", len(entries))

    def add_entry(self, entry: JournalEntry) -> list[JournalEntry]:
        """Store ``entry`` ahead of the existing ones and return the new list."""

        entries = [entry, *self.load_entries()]
        self.save_entries(entries)
        return entries

    def is_anonymous(self) -> bool:
        raw = self._store.get(ANONYMOUS_MODE_KEY)
        if raw is None:
            return True
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored anonymous mode flag {!r} is invalid; assuming anonymous.", raw)
            return True
        return bool(value)

    def set_anonymous(self, anonymous: bool) -> None:
        self._store.set(ANONYMOUS_MODE_KEY, json.dumps(bool(anonymous)))
        if anonymous:
            self._store.remove(USER_NAME_KEY)

    def user_name(self) -> str:
        return self._store.get(USER_NAME_KEY) or ""

    def set_user_name(self, name: str) -> None:
        self._store.set(USER_NAME_KEY, name)


__all__ = [
    "ANONYMOUS_MODE_KEY",
    "ENTRIES_KEY",
    "JournalRepository",
    "KeyValueStore",
    "USER_NAME_KEY",
    "entry_from_record",
    "entry_to_record",
]
