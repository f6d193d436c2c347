"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from clocksource import FrozenClock


@pytest.fixture
def instant():
    return datetime(2024, 1, 15, 10, 0, 0, tzinfo=UTC)


@pytest.fixture
def june_noon():
    return FrozenClock.at(datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC))
