from fastapi import APIRouter, Depends, Query

from fleet_trips.api.auth import verify_api_key
from fleet_trips.api.dependencies import DbSessionDep, LifecycleManagerDep, OperatorSessionDep
from fleet_trips.api.models import (
    OdometerReadingRequest,
    TripPlanRequest,
    TripResponse,
    TripStatsResponse,
)
from fleet_trips.core.exceptions import ValidationError
from fleet_trips.db.repositories import TripRepository
from fleet_trips.trip import TripStatus

router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.post("", response_model=TripResponse, status_code=201)
def plan_trip(
    body: TripPlanRequest,
    manager: LifecycleManagerDep,
    session: OperatorSessionDep,
) -> TripResponse:
    """Plan a trip; its start odometer is the vehicle's current mileage."""
    trip = manager.plan(
        vehicle_id=body.vehicle_id,
        driver_id=body.driver_id,
        origin=body.origin,
        destination=body.destination,
        notes=body.notes,
        session=session,
    )
    return TripResponse.from_trip(trip)


@router.get("", response_model=list[TripResponse])
def list_trips(
    db: DbSessionDep,
    status: TripStatus | None = Query(default=None),
    vehicle_id: str | None = Query(default=None),
    driver_id: str | None = Query(default=None),
    in_flight: bool = Query(default=False),
) -> list[TripResponse]:
    """List trips, newest first. in_flight=true keeps PLANNED and ACTIVE trips only."""
    repo = TripRepository(db)
    if in_flight:
        if status is not None:
            raise ValidationError(
                "status and in_flight filters cannot be combined",
                details={"status": status.value},
            )
        trips = repo.list_in_flight(vehicle_id=vehicle_id, driver_id=driver_id)
    else:
        trips = repo.list_trips(status=status, vehicle_id=vehicle_id, driver_id=driver_id)
    return [TripResponse.from_trip(t) for t in trips]


@router.get("/stats", response_model=TripStatsResponse)
def trip_stats(db: DbSessionDep) -> TripStatsResponse:
    repo = TripRepository(db)
    counts = repo.count_by_status()
    return TripStatsResponse(
        total=sum(counts.values()),
        planned=counts[TripStatus.PLANNED],
        active=counts[TripStatus.ACTIVE],
        completed=counts[TripStatus.COMPLETED],
        cancelled=counts[TripStatus.CANCELLED],
        total_distance=repo.total_distance(),
    )


@router.get("/{trip_id}", response_model=TripResponse)
def get_trip(trip_id: str, manager: LifecycleManagerDep) -> TripResponse:
    return TripResponse.from_trip(manager.get(trip_id))


@router.post("/{trip_id}/start", response_model=TripResponse)
def start_trip(
    trip_id: str,
    body: OdometerReadingRequest,
    manager: LifecycleManagerDep,
    session: OperatorSessionDep,
) -> TripResponse:
    trip = manager.start(trip_id, body.odometer_reading, session=session)
    return TripResponse.from_trip(trip)


@router.post("/{trip_id}/complete", response_model=TripResponse)
def complete_trip(
    trip_id: str,
    body: OdometerReadingRequest,
    manager: LifecycleManagerDep,
    session: OperatorSessionDep,
) -> TripResponse:
    trip = manager.complete(trip_id, body.odometer_reading, session=session)
    return TripResponse.from_trip(trip)


@router.post("/{trip_id}/cancel", response_model=TripResponse)
def cancel_trip(
    trip_id: str,
    manager: LifecycleManagerDep,
    session: OperatorSessionDep,
) -> TripResponse:
    trip = manager.cancel(trip_id, session=session)
    return TripResponse.from_trip(trip)
