from datetime import datetime

from pydantic import BaseModel, Field

from fleet_trips.trip import Trip, TripStatus


class TripPlanRequest(BaseModel):
    vehicle_id: str = Field(min_length=1)
    driver_id: str = Field(min_length=1)
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    notes: str | None = None


class OdometerReadingRequest(BaseModel):
    # Range is checked by the lifecycle so the error carries trip context
    odometer_reading: int


class TripResponse(BaseModel):
    trip_id: str
    vehicle_id: str
    driver_id: str
    status: TripStatus
    origin: str
    destination: str
    start_odometer: int
    end_odometer: int | None = None
    distance: int | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime
    notes: str | None = None

    @classmethod
    def from_trip(cls, trip: Trip) -> "TripResponse":
        return cls(**trip.model_dump())


class TripStatsResponse(BaseModel):
    total: int
    planned: int
    active: int
    completed: int
    cancelled: int
    total_distance: int
