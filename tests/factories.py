"""Test factories for generating trips and vehicles with deterministic Faker."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from faker import Faker

from fleet_trips.trip import Trip, TripStatus
from fleet_trips.vehicle import Vehicle, VehicleStatus

FIXED_NOW = datetime(2026, 3, 14, 9, 30, 0)


class FleetFactory:
    """Factory for creating domain objects with deterministic Faker data."""

    DEFAULT_SEED = 42

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed
        self.fake = Faker()
        self.fake.seed_instance(seed)

    def vehicle(self, **overrides: Any) -> Vehicle:
        defaults: dict[str, Any] = {
            "vehicle_id": str(uuid.UUID(int=self.fake.random.getrandbits(128))),
            "vin": self.fake.bothify("1HGCM8####A######").upper(),
            "registration_number": self.fake.bothify("???-####").upper(),
            "make": self.fake.random_element(["Ford", "Volvo", "Toyota", "Mercedes"]),
            "model": self.fake.random_element(["Transit", "FH16", "Hilux", "Sprinter"]),
            "year": self.fake.random_int(min=2012, max=2025),
            "status": VehicleStatus.ACTIVE,
            "mileage": self.fake.random_int(min=1000, max=150000),
            "fuel_level": 80.0,
        }
        defaults.update(overrides)
        return Vehicle(**defaults)

    def trip(self, **overrides: Any) -> Trip:
        defaults: dict[str, Any] = {
            "trip_id": str(uuid.UUID(int=self.fake.random.getrandbits(128))),
            "vehicle_id": "vehicle-1",
            "driver_id": "driver-1",
            "status": TripStatus.PLANNED,
            "origin": self.fake.city(),
            "destination": self.fake.city(),
            "start_odometer": 45230,
            "created_at": FIXED_NOW,
        }
        defaults.update(overrides)
        return Trip(**defaults)
