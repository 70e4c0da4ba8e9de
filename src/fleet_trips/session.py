"""Operator session passed explicitly from the HTTP boundary to services."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class OperatorRole(str, Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    DRIVER = "DRIVER"


class OperatorSession(BaseModel):
    """Who is performing an operation.

    Created per request by the auth dependency and handed down as an
    argument; nothing in the service keeps a current-user global.
    """

    name: str = "anonymous"
    email: str | None = None
    role: OperatorRole = OperatorRole.MANAGER

    def log_fields(self) -> dict[str, Any]:
        """Fields added to the logging context for operations run by this operator."""
        return {"operator": self.name, "operator_role": self.role.value}
