"""Use case for the anonymous-mode flag, display name and greeting."""
from __future__ import annotations

from datetime import datetime
from typing import Protocol

from mindful_journey.utils.logger import logger


class ProfileStore(Protocol):
    def is_anonymous(self) -> bool:
        ...

    def set_anonymous(self, anonymous: bool) -> None:
        ...

    def user_name(self) -> str:
        ...

    def set_user_name(self, name: str) -> None:
        ...


class ManageProfileUseCase:
    def __init__(self, store: ProfileStore) -> None:
        self._store = store

    @property
    def anonymous(self) -> bool:
        return self._store.is_anonymous()

    @property
    def user_name(self) -> str:
        return self._store.user_name()

    def toggle_anonymous(self) -> bool:
        """Flip anonymous mode; entering it forgets the display name."""

        new_mode = not self._store.is_anonymous()
        self._store.set_anonymous(new_mode)
        logger.info("Anonymous mode {}", "enabled" if new_mode else "disabled")
        return new_mode

    def set_user_name(self, name: str) -> None:
        self._store.set_user_name(name.strip())

    def greeting(self, now: datetime | None = None) -> str:
        hour = (now or datetime.now()).hour
        if hour < 12:
            time_greeting = "Good morning"
        elif hour < 18:
            time_greeting = "Good afternoon"
        else:
            time_greeting = "Good evening"

        if self._store.is_anonymous():
            name = "friend"
        else:
            name = self._store.user_name() or "there"
        return f"{time_greeting}, {name}"


__all__ = ["ManageProfileUseCase", "ProfileStore"]
