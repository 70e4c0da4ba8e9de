"""FastAPI application factory for the fleet trips service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from fleet_trips.api.auth import verify_api_key
from fleet_trips.api.errors import register_error_handlers
from fleet_trips.api.routes import trips, vehicles
from fleet_trips.db.stores import SqlMileageSource, SqlTripStore
from fleet_trips.lifecycle import TripLifecycleManager
from fleet_trips.session import OperatorSession
from fleet_trips.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    session_factory: sessionmaker[Any],
    settings: Settings | None = None,
    lifecycle_manager: TripLifecycleManager | None = None,
) -> FastAPI:
    """Create FastAPI application with injected dependencies.

    Args:
        session_factory: SQLAlchemy session factory from init_database
        settings: Application settings, loaded from the environment when omitted
        lifecycle_manager: Manager to use instead of the SQL-backed default
    """
    if settings is None:
        settings = get_settings()

    if lifecycle_manager is None:
        lifecycle_manager = TripLifecycleManager(
            store=SqlTripStore(session_factory),
            mileage=SqlMileageSource(session_factory),
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> Any:
        """Manage application startup and shutdown."""
        logger.info("Fleet trips API starting")
        yield
        logger.info("Fleet trips API stopped")

    app = FastAPI(
        title="Fleet Trips API",
        version="1.0.0",
        description="REST API for planning and tracking fleet vehicle trips",
        lifespan=lifespan,
    )

    # Set core dependencies immediately (not in lifespan) so they're available for testing
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.lifecycle_manager = lifecycle_manager

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(trips.router, prefix="/trips", tags=["trips"])
    app.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint for monitoring (unauthenticated for infrastructure)."""
        try:
            with session_factory() as session:
                session.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {"status": "unhealthy", "database": "unavailable"}
        return {"status": "healthy", "database": "connected"}

    @app.get("/auth/validate")
    def validate_api_key_endpoint(
        session: OperatorSession = Depends(verify_api_key),
    ) -> dict[str, str]:
        """Validate API key for login.

        Returns 200 with the resolved operator if the key is valid, 401 otherwise.
        """
        return {"status": "authenticated", "operator": session.name, "role": session.role.value}

    return app
