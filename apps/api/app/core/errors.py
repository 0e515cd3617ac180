"""Domain errors rendered by the application's exception handlers."""
from __future__ import annotations

FORBIDDEN_MESSAGE = "Forbidden: insufficient permissions"


class DashboardError(Exception):
    """Base class for errors the API translates into HTTP responses."""

    status_code = 500


class ForbiddenError(DashboardError):
    """Raised when the caller's role lacks the permission an endpoint needs."""

    status_code = 403

    def __init__(self, role: str, message: str = FORBIDDEN_MESSAGE) -> None:
        super().__init__(message)
        self.role = role
        self.message = message

    def to_payload(self) -> dict[str, str]:
        return {"message": self.message, "role": self.role}
