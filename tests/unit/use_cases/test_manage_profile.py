"""Tests for the profile use case."""
from __future__ import annotations

from datetime import datetime

import pytest

from mindful_journey.infrastructure.storage.journal_repository import JournalRepository
from mindful_journey.infrastructure.storage.key_value import InMemoryKeyValueStore
from mindful_journey.use_cases.manage_profile import ManageProfileUseCase


@pytest.fixture
def profile() -> ManageProfileUseCase:
    return ManageProfileUseCase(JournalRepository(InMemoryKeyValueStore()))


@pytest.mark.parametrize(
    ("hour", "expected"),
    [(7, "Good morning, friend"), (12, "Good afternoon, friend"), (18, "Good evening, friend")],
)
def test_anonymous_greeting_by_time_of_day(
    profile: ManageProfileUseCase, hour: int, expected: str
) -> None:
    assert profile.greeting(datetime(2024, 5, 1, hour, 0)) == expected


def test_personal_mode_uses_display_name(profile: ManageProfileUseCase) -> None:
    assert profile.toggle_anonymous() is False
    assert profile.greeting(datetime(2024, 5, 1, 9, 0)) == "Good morning, there"

    profile.set_user_name("  Kai ")
    assert profile.user_name == "Kai"
    assert profile.greeting(datetime(2024, 5, 1, 9, 0)) == "Good morning, Kai"


def test_returning_to_anonymous_forgets_name(profile: ManageProfileUseCase) -> None:
    profile.toggle_anonymous()
    profile.set_user_name("Kai")

    assert profile.toggle_anonymous() is True
    assert profile.anonymous is True
    assert profile.user_name == ""
