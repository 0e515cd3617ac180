"""Raw record to unit normalisation."""
from __future__ import annotations

import pytest

from app.services.units import to_unit, to_units


def test_full_record_maps_straight_through() -> None:
    unit = to_unit(
        {
            "LISTINGID": "L-9",
            "PROJECTNAME": "Harbor View",
            "FULLADDRESS": "1 Harbor Rd",
            "SUBLOCALITY": "Brooklyn",
            "PRICE": 600_000,
            "PROPERTYSQFT": 1200,
            "STATUS": "Sold",
        },
        0,
    )

    assert unit.unit_id == "L-9"
    assert unit.project_name == "Harbor View"
    assert unit.address == "1 Harbor Rd"
    assert unit.sub_locality == "Brooklyn"
    assert unit.price_per_sqft == 500
    assert unit.status == "Sold"


def test_fallback_chains() -> None:
    with_area = to_unit({"SUBLOCALITY": "Queens", "PROJECTNAME": ""}, 4)
    bare = to_unit({}, 0)

    assert with_area.unit_id == "UNIT-5"
    assert with_area.project_name == "Queens"
    assert with_area.address == "Queens"

    assert bare.unit_id == "UNIT-1"
    assert bare.project_name == "Unknown Project"
    assert bare.address == "Unknown Address"
    assert bare.sub_locality is None
    assert bare.price is None
    assert bare.sqft is None


@pytest.mark.parametrize("sqft", [0, None, "", "n/a"])
def test_price_per_sqft_absent_without_usable_area(sqft) -> None:
    assert to_unit({"PRICE": 500_000, "PROPERTYSQFT": sqft}, 0).price_per_sqft is None


def test_price_per_sqft_absent_without_price() -> None:
    assert to_unit({"PROPERTYSQFT": 900}, 0).price_per_sqft is None


@pytest.mark.parametrize(
    ("price", "expected"),
    [(800_001, "Reserved"), (800_000, "Available"), (100, "Available"), (None, "Available")],
)
def test_status_derived_from_price(price, expected) -> None:
    assert to_unit({"PRICE": price}, 0).status == expected


def test_numeric_strings_are_parsed() -> None:
    unit = to_unit({"PRICE": "1,000,000", "PROPERTYSQFT": "2000.0"}, 0)

    assert unit.price == 1_000_000
    assert unit.sqft == 2000.0
    assert unit.price_per_sqft == 500


def test_to_units_keeps_positions() -> None:
    units = to_units([{"LISTINGID": "A"}, {}, {}])

    assert [unit.unit_id for unit in units] == ["A", "UNIT-2", "UNIT-3"]


def test_unit_serialises_with_camel_case_names() -> None:
    payload = to_unit({"PRICE": 100, "PROPERTYSQFT": 4}, 0).model_dump(by_alias=True)

    assert payload == {
        "unitId": "UNIT-1",
        "projectName": "Unknown Project",
        "address": "Unknown Address",
        "subLocality": None,
        "price": 100,
        "sqft": 4,
        "pricePerSqft": 25,
        "status": "Available",
    }
