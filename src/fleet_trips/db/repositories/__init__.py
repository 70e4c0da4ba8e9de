"""Repository layer for database CRUD operations."""

from .trip_repository import TripRepository
from .vehicle_repository import VehicleRepository

__all__ = ["TripRepository", "VehicleRepository"]
