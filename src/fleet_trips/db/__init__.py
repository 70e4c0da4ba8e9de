"""Database persistence module."""

from .database import init_database
from .schema import FleetMetadata, Trip, Vehicle
from .stores import SqlMileageSource, SqlTripStore
from .transaction import transaction

__all__ = [
    "init_database",
    "FleetMetadata",
    "Trip",
    "Vehicle",
    "SqlMileageSource",
    "SqlTripStore",
    "transaction",
]
