import os

# Credential fields have no defaults (the service must fail without secrets).
# Provide test values so Settings() can be constructed in tests.
os.environ.setdefault("API_KEY", "test-api-key")

from datetime import datetime, timedelta

import pytest

from fleet_trips.db import init_database
from tests.factories import FIXED_NOW, FleetFactory


class FakeClock:
    """Deterministic clock; every call advances by one minute."""

    def __init__(self, start: datetime = FIXED_NOW):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(minutes=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at FIXED_NOW."""
    return FakeClock()


@pytest.fixture
def fleet_factory() -> FleetFactory:
    """Factory for creating trips and vehicles with seeded Faker."""
    return FleetFactory(seed=42)


@pytest.fixture
def temp_sqlite_db(tmp_path):
    """Temporary SQLite database for persistence tests."""
    return tmp_path / "test_fleet.db"


@pytest.fixture
def session_factory(temp_sqlite_db):
    """Session factory for an initialized temporary database."""
    return init_database(str(temp_sqlite_db))
