from .trips import OdometerReadingRequest, TripPlanRequest, TripResponse, TripStatsResponse
from .vehicles import VehicleCreateRequest, VehicleUpdateRequest

__all__ = [
    "OdometerReadingRequest",
    "TripPlanRequest",
    "TripResponse",
    "TripStatsResponse",
    "VehicleCreateRequest",
    "VehicleUpdateRequest",
]
