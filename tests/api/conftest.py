import pytest
from fastapi.testclient import TestClient

from fleet_trips.api.app import create_app
from fleet_trips.settings import get_settings


@pytest.fixture
def app(session_factory):
    """Application wired to a temporary SQLite database."""
    return create_app(session_factory, settings=get_settings())


@pytest.fixture
def test_client(app):
    """Test client that runs the app lifespan."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers():
    """Pre-configured API key headers for authenticated requests."""
    return {"X-API-Key": "test-api-key"}


@pytest.fixture
def vehicle(test_client, auth_headers):
    """A registered vehicle with mileage 45230."""
    response = test_client.post(
        "/vehicles",
        json={
            "vin": "1HGCM82633A004352",
            "registration_number": "KBX-4821",
            "make": "Volvo",
            "model": "FH16",
            "year": 2021,
            "mileage": 45230,
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def planned_trip(test_client, auth_headers, vehicle):
    """A trip planned for the registered vehicle."""
    response = test_client.post(
        "/trips",
        json={
            "vehicle_id": vehicle["vehicle_id"],
            "driver_id": "driver-1",
            "origin": "Central Depot",
            "destination": "North Warehouse",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()
