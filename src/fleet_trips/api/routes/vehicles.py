import uuid

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.exc import IntegrityError

from fleet_trips.api.auth import verify_api_key
from fleet_trips.api.dependencies import DbSessionDep
from fleet_trips.api.models import VehicleCreateRequest, VehicleUpdateRequest
from fleet_trips.core.exceptions import ValidationError, VehicleNotFoundError
from fleet_trips.db.repositories import VehicleRepository
from fleet_trips.db.transaction import transaction
from fleet_trips.vehicle import Vehicle, VehicleStatus

router = APIRouter(dependencies=[Depends(verify_api_key)])


def _not_found(vehicle_id: str) -> VehicleNotFoundError:
    return VehicleNotFoundError(
        f"Vehicle {vehicle_id} not found", details={"vehicle_id": vehicle_id}
    )


@router.post("", response_model=Vehicle, status_code=201)
def create_vehicle(body: VehicleCreateRequest, db: DbSessionDep) -> Vehicle:
    vehicle = Vehicle(vehicle_id=str(uuid.uuid4()), **body.model_dump())
    try:
        with transaction(db):
            VehicleRepository(db).create(vehicle)
    except IntegrityError as e:
        raise ValidationError(
            f"Vehicle with VIN {body.vin} already exists", details={"vin": body.vin}
        ) from e
    return vehicle


@router.get("", response_model=list[Vehicle])
def list_vehicles(
    db: DbSessionDep, status: VehicleStatus | None = Query(default=None)
) -> list[Vehicle]:
    return VehicleRepository(db).list_all(status=status)


@router.get("/{vehicle_id}", response_model=Vehicle)
def get_vehicle(vehicle_id: str, db: DbSessionDep) -> Vehicle:
    vehicle = VehicleRepository(db).get(vehicle_id)
    if vehicle is None:
        raise _not_found(vehicle_id)
    return vehicle


@router.patch("/{vehicle_id}", response_model=Vehicle)
def update_vehicle(vehicle_id: str, body: VehicleUpdateRequest, db: DbSessionDep) -> Vehicle:
    with transaction(db):
        vehicle = VehicleRepository(db).update(vehicle_id, **body.model_dump(exclude_unset=True))
    if vehicle is None:
        raise _not_found(vehicle_id)
    return vehicle


@router.delete("/{vehicle_id}", status_code=204)
def delete_vehicle(vehicle_id: str, db: DbSessionDep) -> Response:
    with transaction(db):
        deleted = VehicleRepository(db).delete(vehicle_id)
    if not deleted:
        raise _not_found(vehicle_id)
    return Response(status_code=204)
