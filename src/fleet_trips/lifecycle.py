"""Trip lifecycle manager.

Coordinates the pure transitions in ``fleet_trips.trip`` with a pluggable
``TripStore``. Every transition reads the stored trip, applies the transition
to that copy and writes it back. Rejected transitions never reach the store,
and store failures propagate unchanged: no retry, no compensation.
"""

import logging
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime

from fleet_trips.db.utils import utc_now
from fleet_trips.fleet_logging import log_trip_context
from fleet_trips.session import OperatorSession
from fleet_trips.storage import MileageSource, TripStore
from fleet_trips.trip import Trip, plan_trip

logger = logging.getLogger(__name__)


def _new_trip_id() -> str:
    return str(uuid.uuid4())


class TripLifecycleManager:
    """Plans trips and drives them through start, completion and cancellation."""

    def __init__(
        self,
        store: TripStore,
        mileage: MileageSource,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = _new_trip_id,
    ) -> None:
        self._store = store
        self._mileage = mileage
        self._clock = clock
        self._id_factory = id_factory

    def plan(
        self,
        vehicle_id: str,
        driver_id: str,
        origin: str,
        destination: str,
        notes: str | None = None,
        session: OperatorSession | None = None,
    ) -> Trip:
        """Create a PLANNED trip seeded with the vehicle's current mileage."""
        trip_id = self._id_factory()
        with self._context(trip_id, session, vehicle_id=vehicle_id):
            start_odometer = self._mileage.current_mileage(vehicle_id)
            trip = plan_trip(
                trip_id=trip_id,
                vehicle_id=vehicle_id,
                driver_id=driver_id,
                origin=origin,
                destination=destination,
                start_odometer=start_odometer,
                created_at=self._clock(),
                notes=notes,
            )
            saved = self._store.write(trip)
            logger.info(
                f"Trip planned for vehicle {vehicle_id}: {origin} -> {destination}, "
                f"start odometer {start_odometer}"
            )
        return saved

    def get(self, trip_id: str) -> Trip:
        return self._store.read(trip_id)

    def start(
        self, trip_id: str, odometer_reading: int, session: OperatorSession | None = None
    ) -> Trip:
        """Move a PLANNED trip to ACTIVE with the actual starting odometer."""
        with self._context(trip_id, session):
            trip = self._store.read(trip_id)
            trip.start(odometer_reading, at=self._clock())
            saved = self._store.write(trip)
            logger.info(f"Trip started at odometer {odometer_reading}")
        return saved

    def complete(
        self, trip_id: str, odometer_reading: int, session: OperatorSession | None = None
    ) -> Trip:
        """Move an ACTIVE trip to COMPLETED and record the distance travelled."""
        with self._context(trip_id, session):
            trip = self._store.read(trip_id)
            trip.complete(odometer_reading, at=self._clock())
            saved = self._store.write(trip)
            logger.info(
                f"Trip completed at odometer {odometer_reading}, distance {saved.distance}"
            )
        return saved

    def cancel(self, trip_id: str, session: OperatorSession | None = None) -> Trip:
        with self._context(trip_id, session):
            trip = self._store.read(trip_id)
            previous = trip.status
            trip.cancel()
            saved = self._store.write(trip)
            logger.info(f"Trip cancelled from {previous.value}")
        return saved

    @contextmanager
    def _context(
        self, trip_id: str, session: OperatorSession | None, **fields: str
    ) -> Iterator[None]:
        if session is not None:
            fields.update(session.log_fields())
        with log_trip_context(trip_id, **fields):
            yield
