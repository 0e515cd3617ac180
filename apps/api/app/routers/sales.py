"""Sales-facing inventory and contract endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..core.permissions import Permission
from ..core.security import Principal, require_permission
from ..data.dataset import RawRecord, get_records
from ..schemas import dashboard as schemas
from ..services import dashboard as dashboard_service

router = APIRouter()


@router.get("/properties", response_model=list[schemas.Unit])
async def list_properties(
    status: str | None = Query(default=None, description="Exact status, case-insensitive"),
    area: str | None = Query(default=None, description="Sub-locality substring, case-insensitive"),
    _principal: Principal = Depends(require_permission(Permission.VIEW_SALES)),
    records: tuple[RawRecord, ...] = Depends(get_records),
) -> list[schemas.Unit]:
    """Return up to 200 units matching the optional filters."""

    return dashboard_service.list_properties(records, status=status, area=area)


@router.get("/sales/contracts", response_model=list[schemas.Contract])
async def list_contracts(
    _principal: Principal = Depends(require_permission(Permission.VIEW_SALES)),
    records: tuple[RawRecord, ...] = Depends(get_records),
) -> list[schemas.Contract]:
    """Return demo contracts with payment schedules."""

    return dashboard_service.build_contracts(records)
