"""Vehicle repository for CRUD operations."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from fleet_trips.vehicle import Vehicle as VehicleDomain
from fleet_trips.vehicle import VehicleStatus

from ..schema import Vehicle

UPDATABLE_FIELDS = {
    "registration_number",
    "make",
    "model",
    "year",
    "status",
    "mileage",
    "fuel_level",
    "driver_id",
}


class VehicleRepository:
    """Repository for vehicle CRUD operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, vehicle: VehicleDomain) -> None:
        """Create a new vehicle."""
        self.session.add(
            Vehicle(
                vehicle_id=vehicle.vehicle_id,
                vin=vehicle.vin,
                registration_number=vehicle.registration_number,
                make=vehicle.make,
                model=vehicle.model,
                year=vehicle.year,
                status=vehicle.status.value,
                mileage=vehicle.mileage,
                fuel_level=vehicle.fuel_level,
                driver_id=vehicle.driver_id,
            )
        )

    def get(self, vehicle_id: str) -> VehicleDomain | None:
        """Get vehicle by ID."""
        vehicle = self.session.get(Vehicle, vehicle_id)
        if vehicle is None:
            return None
        return self._to_domain(vehicle)

    def get_mileage(self, vehicle_id: str) -> int | None:
        """Get the vehicle's last known odometer reading."""
        vehicle = self.session.get(Vehicle, vehicle_id)
        return vehicle.mileage if vehicle else None

    def list_all(self, status: VehicleStatus | None = None) -> list[VehicleDomain]:
        """List vehicles, newest first."""
        stmt = select(Vehicle)
        if status is not None:
            stmt = stmt.where(Vehicle.status == status.value)
        stmt = stmt.order_by(Vehicle.created_at.desc())
        result = self.session.execute(stmt)
        return [self._to_domain(v) for v in result.scalars().all()]

    def update(self, vehicle_id: str, **updates: Any) -> VehicleDomain | None:
        """Apply partial updates. Returns None when the vehicle does not exist."""
        vehicle = self.session.get(Vehicle, vehicle_id)
        if vehicle is None:
            return None

        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update vehicle fields: {', '.join(sorted(unknown))}")

        for field, value in updates.items():
            if isinstance(value, VehicleStatus):
                value = value.value
            setattr(vehicle, field, value)
        return self._to_domain(vehicle)

    def delete(self, vehicle_id: str) -> bool:
        """Delete vehicle. Returns False when it does not exist."""
        vehicle = self.session.get(Vehicle, vehicle_id)
        if vehicle is None:
            return False
        self.session.delete(vehicle)
        return True

    def _to_domain(self, vehicle: Vehicle) -> VehicleDomain:
        return VehicleDomain(
            vehicle_id=vehicle.vehicle_id,
            vin=vehicle.vin,
            registration_number=vehicle.registration_number,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            status=VehicleStatus(vehicle.status),
            mileage=vehicle.mileage,
            fuel_level=vehicle.fuel_level,
            driver_id=vehicle.driver_id,
        )
