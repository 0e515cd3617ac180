"""Header-based role gate for dashboard endpoints.

There is no real authentication: the caller states its role in ``x-role`` and
the gate only checks that role against the static permission table.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from fastapi import Header, Request

from .config import settings
from .errors import ForbiddenError
from .permissions import Permission, permissions_for

logger = logging.getLogger(__name__)

ROLE_HEADER = "x-role"


@dataclass(frozen=True, slots=True)
class Principal:
    """Resolved caller identity attached to the request state."""

    role: str
    permissions: frozenset[Permission]

    def can(self, permission: Permission) -> bool:
        return permission in self.permissions


def resolve_principal(header_value: str | None, default_role: str | None = None) -> Principal:
    """Resolve the ``x-role`` header into a role and its permissions."""

    fallback = default_role or settings.default_role
    role = (header_value or "").strip().lower() or fallback
    return Principal(role=role, permissions=permissions_for(role))


async def current_principal(
    x_role: str | None = Header(default=None, alias=ROLE_HEADER),
) -> Principal:
    """Resolve the caller without enforcing any permission."""

    return resolve_principal(x_role)


def require_permission(permission: Permission) -> Callable[..., Awaitable[Principal]]:
    """Build a dependency that rejects callers lacking ``permission``."""

    async def _guard(
        request: Request,
        x_role: str | None = Header(default=None, alias=ROLE_HEADER),
    ) -> Principal:
        principal = resolve_principal(x_role)
        if not principal.can(permission):
            logger.info(
                "Rejected %s %s for role %r (needs %s)",
                request.method,
                request.url.path,
                principal.role,
                permission.value,
            )
            raise ForbiddenError(principal.role)

        request.state.principal = principal
        return principal

    return _guard
