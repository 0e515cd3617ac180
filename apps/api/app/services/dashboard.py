"""Read-only dashboard views derived from the raw listing dataset.

Every view recomputes units from the raw records on each call; contracts and
maintenance tasks are synthetic and dated relative to ``now``.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

from ..schemas import dashboard as schemas
from .units import to_unit, to_units

logger = logging.getLogger(__name__)

RawRecords = Sequence[Mapping[str, Any]]

UNKNOWN_AREA = "Unknown"
TOP_AREA_COUNT = 10
PREMIUM_PRICE_THRESHOLD = 1_000_000

PROPERTY_LIST_LIMIT = 200

CONTRACT_SAMPLE_SIZE = 100
DOWN_PAYMENT_RATE = 0.2
INSTALLMENT_PLAN: tuple[tuple[float, int], ...] = (
    (0.2, 30),
    (0.3, 60),
    (0.3, 90),
)

TASK_SAMPLE_SIZE = 50
HIGH_PRIORITY_PRICE = 900_000
INSPECTION_PRICE_PER_SQFT = 500


def build_overview(records: RawRecords) -> schemas.OverviewResponse:
    """Portfolio KPIs; an empty or broken dataset yields a zeroed overview."""

    if not records:
        return schemas.OverviewResponse()

    try:
        return _compute_overview(records)
    except Exception as exc:  # noqa: BLE001 - overview degrades to zeroed KPIs
        logger.exception("Failed computing dashboard overview: %s", exc)
        return schemas.OverviewResponse()


def _compute_overview(records: RawRecords) -> schemas.OverviewResponse:
    units = to_units(records)

    total_value = sum(unit.price or 0 for unit in units)
    unit_count = len(units)
    avg_price = total_value / unit_count if unit_count else 0

    return schemas.OverviewResponse(
        total_value=total_value,
        unit_count=unit_count,
        avg_price=avg_price,
        by_area=summarise_areas(units),
    )


def summarise_areas(units: Sequence[schemas.Unit], limit: int = TOP_AREA_COUNT) -> list[schemas.AreaSummary]:
    """Group units by sub-locality, busiest areas first."""

    totals: dict[str, list[float]] = {}
    for unit in units:
        bucket = totals.setdefault(unit.sub_locality or UNKNOWN_AREA, [0, 0])
        bucket[0] += unit.price or 0
        bucket[1] += 1

    summaries = [
        schemas.AreaSummary(
            name=name,
            avg_price=round_half_up(total / count) if count else 0,
            count=count,
        )
        for name, (total, count) in totals.items()
    ]
    # sorted() is stable, so ties keep first-seen order.
    summaries = sorted(summaries, key=lambda item: item.count, reverse=True)
    return summaries[:limit]


def list_property_insights(records: RawRecords) -> list[schemas.PropertyInsight]:
    insights = []
    for index, record in enumerate(records):
        unit = to_unit(record, index)
        insights.append(
            schemas.PropertyInsight(
                **unit.model_dump(),
                original=dict(record),
                is_premium=(unit.price or 0) > PREMIUM_PRICE_THRESHOLD,
            )
        )
    return insights


def list_properties(
    records: RawRecords,
    *,
    status: str | None = None,
    area: str | None = None,
    limit: int = PROPERTY_LIST_LIMIT,
) -> list[schemas.Unit]:
    """Inventory view filtered by status and area, in dataset order."""

    units = to_units(records)

    if status:
        wanted = status.lower()
        units = [unit for unit in units if unit.status.lower() == wanted]

    if area:
        needle = area.lower()
        units = [unit for unit in units if unit.sub_locality and needle in unit.sub_locality.lower()]

    return units[:limit]


def build_contracts(
    records: RawRecords,
    *,
    now: datetime | None = None,
    sample_size: int = CONTRACT_SAMPLE_SIZE,
) -> list[schemas.Contract]:
    """Synthetic sales contracts for the first ``sample_size`` units."""

    now = now or _utcnow()
    units = to_units(records[:sample_size])

    contracts = []
    for index, unit in enumerate(units):
        price = unit.price or 0
        schedule = [
            schemas.Installment(
                installment_no=number,
                due_date=now + timedelta(days=due_in_days),
                amount=round_half_up(price * rate),
                status="Pending",
            )
            for number, (rate, due_in_days) in enumerate(INSTALLMENT_PLAN, start=1)
        ]
        contracts.append(
            schemas.Contract(
                contract_id=f"CN-{index + 1}",
                unit_id=unit.unit_id,
                buyer_name=f"Buyer {index + 1}",
                booking_date=now - timedelta(days=index),
                total_price=unit.price,
                down_payment=round_half_up(price * DOWN_PAYMENT_RATE),
                installment_schedule=schedule,
            )
        )
    return contracts


def build_maintenance_tasks(
    records: RawRecords,
    *,
    now: datetime | None = None,
    sample_size: int = TASK_SAMPLE_SIZE,
) -> list[schemas.MaintenanceTask]:
    """Synthetic maintenance work orders for the first ``sample_size`` units."""

    now = now or _utcnow()
    units = to_units(records[:sample_size])

    return [
        schemas.MaintenanceTask(
            task_id=f"MT-{index + 1}",
            unit_id=unit.unit_id,
            project_name=unit.project_name,
            sub_locality=unit.sub_locality,
            priority="High" if (unit.price or 0) > HIGH_PRIORITY_PRICE else "Normal",
            type=(
                "Inspection"
                if unit.price_per_sqft and unit.price_per_sqft > INSPECTION_PRICE_PER_SQFT
                else "General Repair"
            ),
            status="In Progress" if index % 3 == 0 else "Open",
            scheduled_date=now + timedelta(days=index + 1),
        )
        for index, unit in enumerate(units)
    ]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (not banker's rounding)."""

    return math.floor(value + 0.5)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
