"""Vehicle models."""

from enum import Enum

from pydantic import BaseModel, Field


class VehicleStatus(str, Enum):
    ACTIVE = "ACTIVE"
    MAINTENANCE = "MAINTENANCE"
    IDLE = "IDLE"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"


class Vehicle(BaseModel):
    """Fleet vehicle. Mileage is the last known odometer reading."""

    vehicle_id: str
    vin: str
    registration_number: str
    make: str
    model: str
    year: int = Field(ge=1900, le=2100)
    status: VehicleStatus = VehicleStatus.ACTIVE
    mileage: int = Field(default=0, ge=0)
    fuel_level: float = Field(default=100.0, ge=0.0, le=100.0)
    driver_id: str | None = None
