"""Canonical test fixtures used across engine and API tests.

Fixture: $100K piece of equipment placed in service 2024-01-01, carried on
a 5-year straight-line GAAP book and a 5-year 200% declining-balance,
half-year Tax book (labelled MACRS 5-year).
"""

from datetime import date
from decimal import Decimal

import pytest

from fixed_assets.models.asset import (
    Asset,
    BookType,
    Convention,
    DepreciationMethod,
    DepreciationSchedule,
)


@pytest.fixture
def gaap_straight_line() -> DepreciationSchedule:
    return DepreciationSchedule(
        id="S-GAAP",
        method=DepreciationMethod.STRAIGHT_LINE,
        life=5,
        salvage_value=Decimal("0"),
        convention=Convention.FULL_MONTH,
        book=BookType.GAAP,
    )


@pytest.fixture
def tax_declining_balance() -> DepreciationSchedule:
    return DepreciationSchedule(
        id="S-TAX",
        method=DepreciationMethod.DECLINING_BALANCE,
        life=5,
        salvage_value=Decimal("0"),
        convention=Convention.HALF_YEAR,
        book=BookType.TAX,
        tax_code="MACRS 5-year",
    )


@pytest.fixture
def equipment_asset(gaap_straight_line, tax_declining_balance) -> Asset:
    """$100K equipment with GAAP and Tax books."""
    return Asset(
        id="FA-1001",
        name="CNC mill",
        cost=Decimal("100000"),
        acquisition_date=date(2024, 1, 1),
        in_service_date=date(2024, 1, 1),
        category="Equipment",
        department="Production",
        schedules=(gaap_straight_line, tax_declining_balance),
    )


@pytest.fixture
def building_asset() -> Asset:
    """$250K building improvement, $25K salvage, 7-year straight-line."""
    return Asset(
        id="FA-2001",
        name="Warehouse racking",
        cost=Decimal("250000"),
        acquisition_date=date(2023, 3, 1),
        in_service_date=date(2023, 3, 1),
        category="Buildings",
        department="Logistics",
        schedules=(
            DepreciationSchedule(
                id="S-BLD",
                method=DepreciationMethod.STRAIGHT_LINE,
                life=7,
                salvage_value=Decimal("25000"),
                convention=Convention.FULL_MONTH,
                book=BookType.GAAP,
            ),
        ),
    )


@pytest.fixture
def year_2024() -> tuple[date, date]:
    return date(2024, 1, 1), date(2024, 12, 31)


@pytest.fixture
def equipment_payload() -> dict:
    """The equipment asset as a JSON record, as the API receives it."""
    return {
        "id": "FA-1001",
        "name": "CNC mill",
        "cost": "100000",
        "acquisition_date": "2024-01-01",
        "in_service_date": "2024-01-01",
        "category": "Equipment",
        "department": "Production",
        "schedules": [
            {
                "id": "S-GAAP",
                "method": "straight-line",
                "life": 5,
                "salvage_value": "0",
                "convention": "full-month",
                "book": "GAAP",
            },
            {
                "id": "S-TAX",
                "method": "declining-balance",
                "life": 5,
                "salvage_value": "0",
                "convention": "half-year",
                "book": "Tax",
                "tax_code": "MACRS 5-year",
            },
        ],
    }
