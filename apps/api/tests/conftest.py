"""Shared fixtures: a small raw dataset injected in place of the bundled file."""
from __future__ import annotations

import pytest

from app.data.dataset import get_records
from app.main import app

SAMPLE_RECORDS = [
    {
        "LISTINGID": "L-1",
        "PROJECTNAME": "Harbor View",
        "FULLADDRESS": "1 Harbor Rd",
        "SUBLOCALITY": "Brooklyn",
        "PRICE": 1_200_000,
        "PROPERTYSQFT": 2000,
    },
    {
        "FULLADDRESS": "22 Elm St",
        "SUBLOCALITY": "Queens",
        "PRICE": 450_000,
        "PROPERTYSQFT": 1500,
    },
    {
        "LISTINGID": "L-3",
        "SUBLOCALITY": "Brooklyn Heights",
        "PRICE": 850_000,
        "PROPERTYSQFT": 0,
        "STATUS": "Sold",
    },
    {
        "LISTINGID": "L-4",
        "PROJECTNAME": "Midtown Lofts",
        "PRICE": 950_000,
        "PROPERTYSQFT": 1000,
    },
]


@pytest.fixture
def records() -> tuple[dict, ...]:
    return tuple(dict(record) for record in SAMPLE_RECORDS)


@pytest.fixture
def use_records(records):
    """Serve ``records`` from every endpoint for the duration of a test."""

    app.dependency_overrides[get_records] = lambda: records
    yield records
    app.dependency_overrides.pop(get_records, None)
