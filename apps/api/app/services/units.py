"""Mapping from raw listing records to normalised units."""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..schemas.dashboard import Number, Unit

RESERVED_PRICE_THRESHOLD = 800_000


@dataclass(frozen=True, slots=True)
class FallbackChain:
    """Ordered record keys tried in turn before settling on ``default``."""

    keys: tuple[str, ...]
    default: str | None = None

    def resolve(self, record: Mapping[str, Any]) -> str | None:
        for key in self.keys:
            value = record.get(key)
            if _present(value):
                return str(value)
        return self.default


UNIT_ID = FallbackChain(("LISTINGID",))
PROJECT_NAME = FallbackChain(("PROJECTNAME", "SUBLOCALITY"), default="Unknown Project")
ADDRESS = FallbackChain(("FULLADDRESS", "SUBLOCALITY"), default="Unknown Address")
SUB_LOCALITY = FallbackChain(("SUBLOCALITY",))
STATUS = FallbackChain(("STATUS",))

PRICE_KEY = "PRICE"
SQFT_KEY = "PROPERTYSQFT"


def to_unit(record: Mapping[str, Any], index: int) -> Unit:
    """Normalise one raw record; ``index`` is its position in the dataset."""

    price = _number(record.get(PRICE_KEY))
    sqft = _number(record.get(SQFT_KEY))

    price_per_sqft = None
    if price is not None and sqft:
        price_per_sqft = price / sqft

    status = STATUS.resolve(record)
    if status is None:
        status = "Reserved" if (price or 0) > RESERVED_PRICE_THRESHOLD else "Available"

    return Unit(
        unit_id=UNIT_ID.resolve(record) or f"UNIT-{index + 1}",
        project_name=PROJECT_NAME.resolve(record),
        address=ADDRESS.resolve(record),
        sub_locality=SUB_LOCALITY.resolve(record),
        price=price,
        sqft=sqft,
        price_per_sqft=price_per_sqft,
        status=status,
    )


def to_units(records: Iterable[Mapping[str, Any]]) -> list[Unit]:
    return [to_unit(record, index) for index, record in enumerate(records)]


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _number(value: Any) -> Number | None:
    """Return a numeric value, parsing numeric strings; anything else is absent."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    return None
