"""Trip repository for CRUD operations with status tracking."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from fleet_trips.trip import TERMINAL_STATUSES, TripStatus
from fleet_trips.trip import Trip as TripDomain

from ..schema import Trip

TERMINAL_STATUS_VALUES = {status.value for status in TERMINAL_STATUSES}


class TripRepository:
    """Repository for trip CRUD operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, trip_id: str) -> TripDomain | None:
        """Get trip by ID, returning domain model."""
        trip = self.session.get(Trip, trip_id)
        if trip is None:
            return None
        return self._to_domain(trip)

    def save(self, trip: TripDomain) -> None:
        """Insert the trip or overwrite the stored row with its current fields."""
        row = self.session.get(Trip, trip.trip_id)
        if row is None:
            row = Trip(trip_id=trip.trip_id)
            self.session.add(row)

        row.vehicle_id = trip.vehicle_id
        row.driver_id = trip.driver_id
        row.status = trip.status.value
        row.origin = trip.origin
        row.destination = trip.destination
        row.start_odometer = trip.start_odometer
        row.end_odometer = trip.end_odometer
        row.distance = trip.distance
        row.notes = trip.notes
        row.created_at = trip.created_at
        row.started_at = trip.started_at
        row.completed_at = trip.completed_at

    def list_trips(
        self,
        status: TripStatus | None = None,
        vehicle_id: str | None = None,
        driver_id: str | None = None,
    ) -> list[TripDomain]:
        """List trips newest first, optionally filtered."""
        stmt = select(Trip)
        if status is not None:
            stmt = stmt.where(Trip.status == status.value)
        if vehicle_id is not None:
            stmt = stmt.where(Trip.vehicle_id == vehicle_id)
        if driver_id is not None:
            stmt = stmt.where(Trip.driver_id == driver_id)
        stmt = stmt.order_by(Trip.created_at.desc())

        result = self.session.execute(stmt)
        return [self._to_domain(t) for t in result.scalars().all()]

    def list_in_flight(
        self, vehicle_id: str | None = None, driver_id: str | None = None
    ) -> list[TripDomain]:
        """List trips in non-terminal states, newest first."""
        stmt = select(Trip).where(Trip.status.notin_(TERMINAL_STATUS_VALUES))
        if vehicle_id is not None:
            stmt = stmt.where(Trip.vehicle_id == vehicle_id)
        if driver_id is not None:
            stmt = stmt.where(Trip.driver_id == driver_id)
        stmt = stmt.order_by(Trip.created_at.desc())
        result = self.session.execute(stmt)
        return [self._to_domain(t) for t in result.scalars().all()]

    def count_by_status(self) -> dict[TripStatus, int]:
        """Count trips per status, with zero for statuses that have no trips."""
        stmt = select(Trip.status, func.count()).group_by(Trip.status)
        counts = {status: 0 for status in TripStatus}
        for status, count in self.session.execute(stmt).all():
            counts[TripStatus(status)] = count
        return counts

    def total_distance(self, vehicle_id: str | None = None) -> int:
        """Sum distance over completed trips."""
        stmt = select(func.coalesce(func.sum(Trip.distance), 0)).where(
            Trip.status == TripStatus.COMPLETED.value
        )
        if vehicle_id is not None:
            stmt = stmt.where(Trip.vehicle_id == vehicle_id)
        return self.session.execute(stmt).scalar() or 0

    def _to_domain(self, trip: Trip) -> TripDomain:
        """Convert ORM model to domain model."""
        return TripDomain(
            trip_id=trip.trip_id,
            vehicle_id=trip.vehicle_id,
            driver_id=trip.driver_id,
            status=TripStatus(trip.status),
            origin=trip.origin,
            destination=trip.destination,
            start_odometer=trip.start_odometer,
            end_odometer=trip.end_odometer,
            distance=trip.distance,
            started_at=trip.started_at,
            completed_at=trip.completed_at,
            created_at=trip.created_at,
            notes=trip.notes,
        )
