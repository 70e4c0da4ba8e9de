"""FastAPI dependency injection providers."""

from collections.abc import Iterator
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from fleet_trips.api.auth import verify_api_key
from fleet_trips.lifecycle import TripLifecycleManager
from fleet_trips.session import OperatorSession


def get_lifecycle_manager(request: Request) -> TripLifecycleManager:
    """Retrieve TripLifecycleManager from app state."""
    manager: TripLifecycleManager = request.app.state.lifecycle_manager
    return manager


def get_db_session(request: Request) -> Iterator[Session]:
    """Open a database session for the duration of the request."""
    session_factory: Any = request.app.state.session_factory
    with session_factory() as session:
        yield session


LifecycleManagerDep = Annotated[TripLifecycleManager, Depends(get_lifecycle_manager)]
DbSessionDep = Annotated[Session, Depends(get_db_session)]
OperatorSessionDep = Annotated[OperatorSession, Depends(verify_api_key)]
