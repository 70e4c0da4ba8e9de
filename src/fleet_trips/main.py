"""Service entry point."""

import logging

import uvicorn

from fleet_trips.api.app import create_app
from fleet_trips.core.exceptions import ConfigurationError
from fleet_trips.db import init_database
from fleet_trips.fleet_logging import setup_logging
from fleet_trips.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Load settings, configure logging, open the database and serve the API."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        raise SystemExit(e.message) from e

    setup_logging(
        level=settings.logging.level,
        json_output=settings.logging.format == "json",
        environment=settings.logging.environment,
    )

    session_factory = init_database(settings.database.url, echo=settings.database.echo)
    logger.info("Database initialized")

    app = create_app(session_factory, settings=settings)

    logger.info(f"Starting fleet trips service on port {settings.api.port}")
    uvicorn.run(
        app,
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
