"""Role to permission table for the dashboard."""
from __future__ import annotations

import enum


class Permission(str, enum.Enum):
    VIEW_OVERVIEW = "view_overview"
    VIEW_SALES = "view_sales"
    VIEW_MAINTENANCE = "view_maintenance"


class Role(str, enum.Enum):
    ADMIN = "admin"
    SALES = "sales"
    TECHNICIAN = "technician"


ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset(
        {Permission.VIEW_OVERVIEW, Permission.VIEW_SALES, Permission.VIEW_MAINTENANCE}
    ),
    Role.SALES: frozenset({Permission.VIEW_OVERVIEW, Permission.VIEW_SALES}),
    Role.TECHNICIAN: frozenset({Permission.VIEW_OVERVIEW, Permission.VIEW_MAINTENANCE}),
}


def permissions_for(role: str) -> frozenset[Permission]:
    """Return the permission set for ``role``; unknown roles get nothing."""

    try:
        return ROLE_PERMISSIONS[Role(role)]
    except ValueError:
        return frozenset()
