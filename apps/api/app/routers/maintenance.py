"""Technician-facing maintenance endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..core.permissions import Permission
from ..core.security import Principal, require_permission
from ..data.dataset import RawRecord, get_records
from ..schemas import dashboard as schemas
from ..services import dashboard as dashboard_service

router = APIRouter()


@router.get("/maintenance/tasks", response_model=list[schemas.MaintenanceTask])
async def list_tasks(
    _principal: Principal = Depends(require_permission(Permission.VIEW_MAINTENANCE)),
    records: tuple[RawRecord, ...] = Depends(get_records),
) -> list[schemas.MaintenanceTask]:
    """Return demo maintenance work orders."""

    return dashboard_service.build_maintenance_tasks(records)
