"""Core utilities shared across the service."""

from .exceptions import (
    ConfigurationError,
    FleetError,
    InvalidReadingError,
    InvalidTransitionError,
    NotFoundError,
    PermanentError,
    PersistenceError,
    StateError,
    TransientError,
    TripNotFoundError,
    ValidationError,
    VehicleNotFoundError,
    WriteError,
)

__all__ = [
    "ConfigurationError",
    "FleetError",
    "InvalidReadingError",
    "InvalidTransitionError",
    "NotFoundError",
    "PermanentError",
    "PersistenceError",
    "StateError",
    "TransientError",
    "TripNotFoundError",
    "ValidationError",
    "VehicleNotFoundError",
    "WriteError",
]
