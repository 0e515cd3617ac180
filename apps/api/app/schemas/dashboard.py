"""Response schemas for the dashboard views."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float]


class CamelModel(BaseModel):
    """Snake-case attributes serialised with camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Unit(CamelModel):
    unit_id: str
    project_name: str
    address: str
    sub_locality: str | None = None
    price: Number | None = None
    sqft: Number | None = None
    price_per_sqft: float | None = None
    status: str


class PropertyInsight(Unit):
    original: dict[str, Any] = Field(default_factory=dict)
    is_premium: bool = False


class AreaSummary(CamelModel):
    name: str
    avg_price: int
    count: int


class OverviewResponse(CamelModel):
    total_value: Number = 0
    unit_count: int = 0
    avg_price: Number = 0
    by_area: list[AreaSummary] = Field(default_factory=list)


class Installment(CamelModel):
    installment_no: int
    due_date: datetime
    amount: int
    status: str = "Pending"


class Contract(CamelModel):
    contract_id: str
    unit_id: str
    buyer_name: str
    booking_date: datetime
    total_price: Number | None = None
    down_payment: int
    installment_schedule: list[Installment]


class MaintenanceTask(CamelModel):
    task_id: str
    unit_id: str
    project_name: str
    sub_locality: str | None = None
    priority: str
    type: str
    status: str
    scheduled_date: datetime
