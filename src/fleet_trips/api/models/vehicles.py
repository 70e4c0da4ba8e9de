from pydantic import BaseModel, Field, model_validator

from fleet_trips.trip import MAX_ODOMETER
from fleet_trips.vehicle import VehicleStatus

# Columns that may be omitted from an update but never set to null
NON_NULLABLE_UPDATE_FIELDS = frozenset(
    {"registration_number", "make", "model", "year", "status", "mileage", "fuel_level"}
)


class VehicleCreateRequest(BaseModel):
    vin: str = Field(min_length=1)
    registration_number: str = Field(min_length=1)
    make: str
    model: str
    year: int = Field(ge=1900, le=2100)
    status: VehicleStatus = VehicleStatus.ACTIVE
    mileage: int = Field(default=0, ge=0, le=MAX_ODOMETER)
    fuel_level: float = Field(default=100.0, ge=0.0, le=100.0)
    driver_id: str | None = None


class VehicleUpdateRequest(BaseModel):
    registration_number: str | None = Field(default=None, min_length=1)
    make: str | None = None
    model: str | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    status: VehicleStatus | None = None
    mileage: int | None = Field(default=None, ge=0, le=MAX_ODOMETER)
    fuel_level: float | None = Field(default=None, ge=0.0, le=100.0)
    driver_id: str | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "VehicleUpdateRequest":
        nulls = sorted(
            field
            for field in self.model_fields_set & NON_NULLABLE_UPDATE_FIELDS
            if getattr(self, field) is None
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self
