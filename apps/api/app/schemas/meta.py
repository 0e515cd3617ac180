"""Schemas for service metadata endpoints."""
from __future__ import annotations

from .dashboard import CamelModel


class HealthResponse(CamelModel):
    status: str
    uptime: float


class PrincipalResponse(CamelModel):
    role: str
    permissions: list[str]


class MetaResponse(CamelModel):
    name: str
    version: str
    environment: str
    record_count: int
