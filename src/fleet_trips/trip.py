"""Trip state machine and models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from fleet_trips.core.exceptions import InvalidReadingError, InvalidTransitionError


class TripStatus(str, Enum):
    """Trip lifecycle states."""

    PLANNED = "PLANNED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


TERMINAL_STATUSES = {TripStatus.COMPLETED, TripStatus.CANCELLED}

VALID_TRANSITIONS: dict[TripStatus, set[TripStatus]] = {
    TripStatus.PLANNED: {TripStatus.ACTIVE, TripStatus.CANCELLED},
    TripStatus.ACTIVE: {TripStatus.COMPLETED, TripStatus.CANCELLED},
    TripStatus.COMPLETED: set(),
    TripStatus.CANCELLED: set(),
}

# Largest value a signed 64-bit INTEGER column can hold
MAX_ODOMETER = 2**63 - 1


def _check_reading(odometer_reading: int, **details: object) -> None:
    if not 0 <= odometer_reading <= MAX_ODOMETER:
        raise InvalidReadingError(
            f"Odometer reading must be between 0 and {MAX_ODOMETER}, got {odometer_reading}",
            details={**details, "odometer_reading": odometer_reading},
        )


class Trip(BaseModel):
    """Trip with state machine logic.

    Transition methods check every precondition before touching any field,
    so a rejected transition leaves the trip exactly as it was.
    """

    trip_id: str
    vehicle_id: str
    driver_id: str
    status: TripStatus = Field(default=TripStatus.PLANNED)
    origin: str
    destination: str
    start_odometer: int = Field(ge=0)
    end_odometer: int | None = Field(default=None, ge=0)
    distance: int | None = Field(default=None, ge=0)
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime
    notes: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def can_transition_to(self, new_status: TripStatus) -> bool:
        return new_status in VALID_TRANSITIONS[self.status]

    def _require_transition(self, new_status: TripStatus) -> None:
        if self.is_terminal:
            raise InvalidTransitionError(
                f"Cannot transition from terminal state {self.status.value}",
                details={"trip_id": self.trip_id, "status": self.status.value},
            )
        if not self.can_transition_to(new_status):
            raise InvalidTransitionError(
                f"Invalid transition from {self.status.value} to {new_status.value}",
                details={
                    "trip_id": self.trip_id,
                    "status": self.status.value,
                    "requested": new_status.value,
                },
            )

    def start(self, odometer_reading: int, at: datetime) -> None:
        """Start a planned trip, replacing the planned odometer with the actual reading."""
        self._require_transition(TripStatus.ACTIVE)
        _check_reading(odometer_reading, trip_id=self.trip_id)

        self.status = TripStatus.ACTIVE
        self.start_odometer = odometer_reading
        self.started_at = at

    def complete(self, odometer_reading: int, at: datetime) -> None:
        """Complete an active trip and derive the travelled distance.

        Zero-distance completions are rejected as data-entry errors.
        """
        self._require_transition(TripStatus.COMPLETED)
        if odometer_reading <= self.start_odometer:
            raise InvalidReadingError(
                f"End odometer {odometer_reading} must be greater than "
                f"start odometer {self.start_odometer}",
                details={
                    "trip_id": self.trip_id,
                    "odometer_reading": odometer_reading,
                    "start_odometer": self.start_odometer,
                },
            )
        _check_reading(odometer_reading, trip_id=self.trip_id)

        self.status = TripStatus.COMPLETED
        self.end_odometer = odometer_reading
        self.distance = odometer_reading - self.start_odometer
        self.completed_at = at

    def cancel(self) -> None:
        """Cancel a planned or active trip. Odometer fields are left as they are."""
        self._require_transition(TripStatus.CANCELLED)
        self.status = TripStatus.CANCELLED


def plan_trip(
    trip_id: str,
    vehicle_id: str,
    driver_id: str,
    origin: str,
    destination: str,
    start_odometer: int,
    created_at: datetime,
    notes: str | None = None,
) -> Trip:
    """Create a trip in PLANNED state.

    start_odometer is a snapshot of the vehicle's mileage at planning time.
    """
    _check_reading(start_odometer, vehicle_id=vehicle_id)

    return Trip(
        trip_id=trip_id,
        vehicle_id=vehicle_id,
        driver_id=driver_id,
        status=TripStatus.PLANNED,
        origin=origin,
        destination=destination,
        start_odometer=start_odometer,
        created_at=created_at,
        notes=notes,
    )
