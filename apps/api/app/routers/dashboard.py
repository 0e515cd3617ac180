"""Portfolio overview endpoints available to every known role."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..core.permissions import Permission
from ..core.security import Principal, require_permission
from ..data.dataset import RawRecord, get_records
from ..schemas import dashboard as schemas
from ..services import dashboard as dashboard_service

router = APIRouter()


@router.get("/dashboard/overview", response_model=schemas.OverviewResponse)
async def overview(
    _principal: Principal = Depends(require_permission(Permission.VIEW_OVERVIEW)),
    records: tuple[RawRecord, ...] = Depends(get_records),
) -> schemas.OverviewResponse:
    """Return portfolio value, unit count and the busiest areas."""

    return dashboard_service.build_overview(records)


@router.get("/property-insights", response_model=list[schemas.PropertyInsight])
async def property_insights(
    _principal: Principal = Depends(require_permission(Permission.VIEW_OVERVIEW)),
    records: tuple[RawRecord, ...] = Depends(get_records),
) -> list[schemas.PropertyInsight]:
    """Return every unit alongside its raw record and premium flag."""

    return dashboard_service.list_property_insights(records)
