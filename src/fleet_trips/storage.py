"""Persistence contracts for the trip lifecycle and in-memory adapters."""

import threading
from typing import Protocol

from fleet_trips.core.exceptions import TripNotFoundError, VehicleNotFoundError, WriteError
from fleet_trips.trip import Trip


class TripStore(Protocol):
    """Storage used by the lifecycle manager. Only single-trip reads and writes."""

    def read(self, trip_id: str) -> Trip:
        """Return the stored trip or raise TripNotFoundError."""
        ...

    def write(self, trip: Trip) -> Trip:
        """Persist the trip and return the stored copy, or raise WriteError."""
        ...


class MileageSource(Protocol):
    """Source of a vehicle's last known odometer reading."""

    def current_mileage(self, vehicle_id: str) -> int:
        """Return mileage or raise VehicleNotFoundError."""
        ...


class InMemoryTripStore:
    """Dict-backed TripStore holding copies, so callers never alias stored state.

    Set fail_writes to make every write raise WriteError.
    """

    def __init__(self, trips: list[Trip] | None = None) -> None:
        self._trips: dict[str, Trip] = {}
        self._lock = threading.Lock()
        self.fail_writes = False
        for trip in trips or []:
            self._trips[trip.trip_id] = trip.model_copy(deep=True)

    def read(self, trip_id: str) -> Trip:
        with self._lock:
            trip = self._trips.get(trip_id)
            if trip is None:
                raise TripNotFoundError(f"Trip {trip_id} not found", details={"trip_id": trip_id})
            return trip.model_copy(deep=True)

    def write(self, trip: Trip) -> Trip:
        if self.fail_writes:
            raise WriteError(
                f"Failed to write trip {trip.trip_id}", details={"trip_id": trip.trip_id}
            )
        with self._lock:
            self._trips[trip.trip_id] = trip.model_copy(deep=True)
        return trip.model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._trips)


class InMemoryMileageSource:
    """Dict-backed MileageSource."""

    def __init__(self, mileage: dict[str, int] | None = None) -> None:
        self._mileage = dict(mileage or {})

    def set_mileage(self, vehicle_id: str, mileage: int) -> None:
        self._mileage[vehicle_id] = mileage

    def current_mileage(self, vehicle_id: str) -> int:
        if vehicle_id not in self._mileage:
            raise VehicleNotFoundError(
                f"Vehicle {vehicle_id} not found", details={"vehicle_id": vehicle_id}
            )
        return self._mileage[vehicle_id]
