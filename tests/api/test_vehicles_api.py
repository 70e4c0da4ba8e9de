"""Tests for vehicle endpoints."""

import pytest

from fleet_trips.trip import MAX_ODOMETER

pytestmark = pytest.mark.unit


def test_create_and_get_vehicle(test_client, auth_headers, vehicle):
    """Created vehicle is returned by GET."""
    assert vehicle["mileage"] == 45230
    assert vehicle["status"] == "ACTIVE"

    response = test_client.get(f"/vehicles/{vehicle['vehicle_id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == vehicle


def test_duplicate_vin_rejected(test_client, auth_headers, vehicle):
    """Second vehicle with the same VIN is a validation error."""
    response = test_client.post(
        "/vehicles",
        json={
            "vin": vehicle["vin"],
            "registration_number": "OTHER-1",
            "make": "Ford",
            "model": "Transit",
            "year": 2019,
        },
        headers=auth_headers,
    )
    assert response.status_code == 422
    assert response.json()["details"] == {"vin": vehicle["vin"]}


def test_invalid_year_rejected(test_client, auth_headers):
    """Year outside 1900-2100 is rejected."""
    response = test_client.post(
        "/vehicles",
        json={"vin": "X", "registration_number": "R", "make": "M", "model": "M", "year": 1800},
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_oversized_mileage_rejected(test_client, auth_headers):
    """Mileage past the storable range is rejected on create."""
    response = test_client.post(
        "/vehicles",
        json={
            "vin": "X",
            "registration_number": "R",
            "make": "M",
            "model": "M",
            "year": 2020,
            "mileage": MAX_ODOMETER + 1,
        },
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_update_vehicle(test_client, auth_headers, vehicle):
    """PATCH changes only the given fields."""
    response = test_client.patch(
        f"/vehicles/{vehicle['vehicle_id']}",
        json={"mileage": 46000, "status": "MAINTENANCE"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["mileage"] == 46000
    assert response.json()["status"] == "MAINTENANCE"
    assert response.json()["make"] == "Volvo"


@pytest.mark.parametrize("field", ["status", "make", "year", "mileage", "fuel_level"])
def test_update_null_required_field_rejected(test_client, auth_headers, vehicle, field):
    """Explicit null for a required field is a 422 and changes nothing."""
    url = f"/vehicles/{vehicle['vehicle_id']}"
    response = test_client.patch(url, json={field: None}, headers=auth_headers)

    assert response.status_code == 422
    assert test_client.get(url, headers=auth_headers).json() == vehicle


def test_update_clears_driver(test_client, auth_headers, vehicle):
    """driver_id is nullable and can be cleared."""
    url = f"/vehicles/{vehicle['vehicle_id']}"
    test_client.patch(url, json={"driver_id": "driver-9"}, headers=auth_headers)

    response = test_client.patch(url, json={"driver_id": None}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["driver_id"] is None


def test_list_vehicles_by_status(test_client, auth_headers, vehicle):
    """Status filter narrows the listing."""
    assert len(test_client.get("/vehicles", headers=auth_headers).json()) == 1
    idle = test_client.get("/vehicles", params={"status": "IDLE"}, headers=auth_headers)
    assert idle.json() == []


def test_delete_vehicle(test_client, auth_headers, vehicle):
    """Deleted vehicle returns 404 afterwards."""
    url = f"/vehicles/{vehicle['vehicle_id']}"
    assert test_client.delete(url, headers=auth_headers).status_code == 204
    assert test_client.get(url, headers=auth_headers).status_code == 404
    assert test_client.delete(url, headers=auth_headers).status_code == 404


def test_mileage_update_does_not_change_planned_trip(
    test_client, auth_headers, vehicle, planned_trip
):
    """Planned trip keeps its odometer snapshot."""
    test_client.patch(
        f"/vehicles/{vehicle['vehicle_id']}", json={"mileage": 99999}, headers=auth_headers
    )
    trip = test_client.get(f"/trips/{planned_trip['trip_id']}", headers=auth_headers).json()
    assert trip["start_odometer"] == 45230
