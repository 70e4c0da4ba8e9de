"""Standardized exception hierarchy for the fleet trips service."""

from typing import Any


class FleetError(Exception):
    """Base exception for all fleet trips errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransientError(FleetError):
    """Errors that may succeed on retry."""

    pass


class PersistenceError(TransientError):
    """Database or state persistence failed."""

    pass


class WriteError(PersistenceError):
    """Writing a trip to the store failed; the stored trip is unchanged."""

    pass


class PermanentError(FleetError):
    """Errors that will not succeed on retry."""

    pass


class ValidationError(PermanentError):
    """Invalid input or data format."""

    pass


class InvalidReadingError(ValidationError):
    """Odometer reading is negative or does not move forward."""

    pass


class NotFoundError(PermanentError):
    """Requested entity does not exist."""

    pass


class TripNotFoundError(NotFoundError):
    """No trip with the requested ID."""

    pass


class VehicleNotFoundError(NotFoundError):
    """No vehicle with the requested ID."""

    pass


class StateError(PermanentError):
    """Invalid state transition."""

    pass


class InvalidTransitionError(StateError):
    """Trip status does not permit the requested transition."""

    pass


class ConfigurationError(PermanentError):
    """Missing or invalid configuration."""

    pass
