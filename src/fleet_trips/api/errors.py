"""Maps service exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fleet_trips.core.exceptions import (
    FleetError,
    InvalidTransitionError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: list[tuple[type[FleetError], int]] = [
    (NotFoundError, 404),
    (InvalidTransitionError, 409),
    (ValidationError, 422),
    (PersistenceError, 503),
]


def status_code_for(exc: FleetError) -> int:
    for exc_type, status_code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def fleet_error_handler(request: Request, exc: FleetError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error": type(exc).__name__,
            "details": exc.details,
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FleetError, fleet_error_handler)  # type: ignore[arg-type]
