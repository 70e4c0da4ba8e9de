"""SQLAlchemy-backed adapters for the lifecycle persistence contract."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from fleet_trips.core.exceptions import TripNotFoundError, VehicleNotFoundError, WriteError
from fleet_trips.trip import Trip

from .repositories import TripRepository, VehicleRepository
from .transaction import transaction

logger = logging.getLogger(__name__)


class SqlTripStore:
    """TripStore over a session factory. Each write commits in its own transaction."""

    def __init__(self, session_factory: sessionmaker[Any]):
        self._session_factory = session_factory

    def read(self, trip_id: str) -> Trip:
        with self._session_factory() as session:
            trip = TripRepository(session).get(trip_id)
        if trip is None:
            raise TripNotFoundError(f"Trip {trip_id} not found", details={"trip_id": trip_id})
        return trip

    def write(self, trip: Trip) -> Trip:
        try:
            with self._session_factory() as session, transaction(session):
                TripRepository(session).save(trip)
        except SQLAlchemyError as e:
            logger.error(f"Failed to persist trip {trip.trip_id}: {e}")
            raise WriteError(
                f"Failed to write trip {trip.trip_id}",
                details={"trip_id": trip.trip_id, "status": trip.status.value},
            ) from e
        return trip


class SqlMileageSource:
    """MileageSource reading the vehicles table."""

    def __init__(self, session_factory: sessionmaker[Any]):
        self._session_factory = session_factory

    def current_mileage(self, vehicle_id: str) -> int:
        with self._session_factory() as session:
            mileage = VehicleRepository(session).get_mileage(vehicle_id)
        if mileage is None:
            raise VehicleNotFoundError(
                f"Vehicle {vehicle_id} not found", details={"vehicle_id": vehicle_id}
            )
        return mileage
