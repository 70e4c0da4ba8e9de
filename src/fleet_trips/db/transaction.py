"""Commit/rollback boundary for repository work."""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.orm import Session


@contextmanager
def transaction(session: Session) -> Generator[Session]:
    """Commit the session when the block succeeds, roll it back when it raises.

    Used by the SQL trip store for each write and by the vehicle routes:

        with transaction(session):
            VehicleRepository(session).update(vehicle_id, mileage=46000)

    The exception is re-raised after rollback.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
