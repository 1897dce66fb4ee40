"""Fixed asset records as supplied by the asset-record collaborator.

The engine only reads these; it never mutates or persists them.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class DepreciationMethod(Enum):
    STRAIGHT_LINE = "straight-line"
    DECLINING_BALANCE = "declining-balance"
    SUM_OF_YEARS_DIGITS = "sum-of-years-digits"
    UNITS_OF_PRODUCTION = "units-of-production"


class Convention(Enum):
    HALF_YEAR = "half-year"
    MID_QUARTER = "mid-quarter"
    MID_MONTH = "mid-month"
    FULL_MONTH = "full-month"


class BookType(Enum):
    GAAP = "GAAP"
    TAX = "Tax"


class AssetStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DISPOSED = "disposed"


class DisposalMethod(Enum):
    SALE = "sale"
    SCRAPPED = "scrapped"
    DONATED = "donated"
    TRADED_IN = "traded-in"


@dataclass(frozen=True)
class DepreciationSchedule:
    id: str
    method: DepreciationMethod
    life: int  # Whole years
    salvage_value: Decimal
    convention: Convention
    book: BookType
    tax_code: Optional[str] = None  # e.g. "MACRS 5-year"
    annual_depreciation: Optional[Decimal] = None  # Stored by the record keeper


@dataclass(frozen=True)
class BasisAdjustment:
    """Reductions to depreciable basis, applied in field order."""
    section_179: Decimal = Decimal("0")
    section_168k: Decimal = Decimal("0")  # Bonus depreciation
    special_depreciation: Decimal = Decimal("0")
    other_adjustments: Decimal = Decimal("0")
    notes: Optional[str] = None

    @property
    def reductions(self) -> tuple[tuple[str, Decimal], ...]:
        return (
            ("section_179", self.section_179),
            ("section_168k", self.section_168k),
            ("special_depreciation", self.special_depreciation),
            ("other_adjustments", self.other_adjustments),
        )

    @property
    def total(self) -> Decimal:
        return sum((amount for _, amount in self.reductions), Decimal("0"))


@dataclass(frozen=True)
class DisposalInfo:
    date: date
    proceeds: Decimal
    method: DisposalMethod
    reason: str = ""
    notes: Optional[str] = None


@dataclass(frozen=True)
class Asset:
    id: str
    cost: Decimal
    acquisition_date: date
    in_service_date: date
    category: str
    name: str = ""
    department: str = ""
    status: AssetStatus = AssetStatus.ACTIVE
    schedules: tuple[DepreciationSchedule, ...] = ()
    accumulated_depreciation: Decimal = Decimal("0")
    net_book_value: Optional[Decimal] = None  # Defaults to cost - accumulated
    disposal: Optional[DisposalInfo] = None
    basis_adjustment: Optional[BasisAdjustment] = None

    @property
    def book_value(self) -> Decimal:
        if self.net_book_value is not None:
            return self.net_book_value
        return self.cost - self.accumulated_depreciation

    @property
    def disposal_date(self) -> Optional[date]:
        return self.disposal.date if self.disposal is not None else None

    @property
    def is_disposed(self) -> bool:
        return self.status is AssetStatus.DISPOSED

    def schedule_for(self, book: BookType) -> Optional[DepreciationSchedule]:
        for schedule in self.schedules:
            if schedule.book is book:
                return schedule
        return None


@dataclass(frozen=True)
class ReportingPeriod:
    start: date
    end: date
    label: str = field(default="", compare=False)

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end
