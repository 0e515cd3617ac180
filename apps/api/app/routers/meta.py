"""Unauthenticated service endpoints: health, caller role and metadata."""
from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Response

from ..core.config import settings
from ..core.security import Principal, current_principal
from ..data.dataset import RawRecord, get_records
from ..schemas import meta as schemas

API_NAME = "Property Dashboard API"
API_VERSION = "0.1.0"

_STARTED_AT = time.monotonic()

router = APIRouter()


def uptime_seconds() -> float:
    return time.monotonic() - _STARTED_AT


@router.get("/health", response_model=schemas.HealthResponse, tags=["meta"])
async def health() -> schemas.HealthResponse:
    """Simple liveness probe."""

    return schemas.HealthResponse(status="ok", uptime=uptime_seconds())


@router.head("/health", tags=["meta"])
async def health_head() -> Response:
    """Allow HEAD for uptime monitors that only need the status code."""

    return Response(status_code=200)


@router.get("/api/me", response_model=schemas.PrincipalResponse, tags=["meta"])
async def whoami(principal: Principal = Depends(current_principal)) -> schemas.PrincipalResponse:
    """Report the resolved role and what it may view."""

    return schemas.PrincipalResponse(
        role=principal.role,
        permissions=sorted(permission.value for permission in principal.permissions),
    )


@router.get("/api/meta", response_model=schemas.MetaResponse, tags=["meta"])
async def meta(records: tuple[RawRecord, ...] = Depends(get_records)) -> schemas.MetaResponse:
    return schemas.MetaResponse(
        name=API_NAME,
        version=API_VERSION,
        environment=settings.app_env,
        record_count=len(records),
    )
