from fastapi import Header, HTTPException, Request

from fleet_trips.session import OperatorRole, OperatorSession


def verify_api_key(
    request: Request,
    x_api_key: str = Header(...),
    x_operator_name: str | None = Header(default=None),
    x_operator_email: str | None = Header(default=None),
    x_operator_role: str | None = Header(default=None),
) -> OperatorSession:
    """Validates API key from X-API-Key header and builds the operator session."""
    api_key = request.app.state.settings.api.key

    if not api_key:
        raise HTTPException(status_code=500, detail="API_KEY not configured")

    if x_api_key != api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")

    role = OperatorRole.MANAGER
    if x_operator_role is not None:
        try:
            role = OperatorRole(x_operator_role.upper())
        except ValueError as e:
            raise HTTPException(
                status_code=400, detail=f"Unknown operator role: {x_operator_role}"
            ) from e

    return OperatorSession(
        name=x_operator_name or "anonymous",
        email=x_operator_email,
        role=role,
    )
