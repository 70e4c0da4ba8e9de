"""Tests for transaction utilities."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from fleet_trips.db.schema import Base, FleetMetadata
from fleet_trips.db.transaction import transaction


@pytest.fixture
def engine():
    """Create an in-memory SQLite database."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def memory_session_maker(engine):
    """Create a session factory."""
    return sessionmaker(bind=engine)


@pytest.mark.unit
class TestTransaction:
    """Tests for the transaction context manager."""

    def test_transaction_commits_on_success(self, memory_session_maker):
        """Block that finishes normally is committed."""
        with memory_session_maker() as session, transaction(session):
            session.add(FleetMetadata(key="test_key", value="test_value"))

        with memory_session_maker() as session:
            result = session.get(FleetMetadata, "test_key")
            assert result is not None
            assert result.value == "test_value"

    def test_transaction_rolls_back_on_exception(self, memory_session_maker):
        """Block that raises is rolled back and the error propagates."""
        with (  # noqa: SIM117
            memory_session_maker() as session,
            pytest.raises(ValueError, match="intentional error"),
        ):
            with transaction(session):
                session.add(FleetMetadata(key="rollback_key", value="value"))
                raise ValueError("intentional error")

        with memory_session_maker() as session:
            assert session.get(FleetMetadata, "rollback_key") is None

    def test_session_usable_after_rollback(self, memory_session_maker):
        """Session accepts new work after a rolled back block."""
        with memory_session_maker() as session:
            with pytest.raises(ValueError), transaction(session):
                session.add(FleetMetadata(key="failed", value="value"))
                raise ValueError("boom")

            with transaction(session):
                session.add(FleetMetadata(key="retried", value="value"))

        with memory_session_maker() as session:
            assert session.get(FleetMetadata, "failed") is None
            assert session.get(FleetMetadata, "retried") is not None
