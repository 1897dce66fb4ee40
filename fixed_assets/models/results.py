from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from fixed_assets.models.asset import (
    BookType,
    Convention,
    DepreciationMethod,
    DepreciationSchedule,
    DisposalMethod,
    ReportingPeriod,
)


@dataclass(frozen=True)
class YearRow:
    period: int  # 1-indexed depreciation year
    year: int  # Calendar year label
    book: BookType
    depreciation: Decimal
    beginning_nbv: Decimal
    ending_nbv: Decimal


@dataclass(frozen=True)
class ScheduleResult:
    schedule: DepreciationSchedule
    rows: tuple[YearRow, ...]
    total_depreciation: Decimal
    remaining_value: Decimal  # Cost less total depreciation, uncapped


@dataclass(frozen=True)
class AssetScheduleReport:
    asset_id: str
    years: int  # Longest schedule life
    schedules: tuple[ScheduleResult, ...]

    def for_book(self, book: BookType) -> ScheduleResult | None:
        for result in self.schedules:
            if result.schedule.book is book:
                return result
        return None


@dataclass(frozen=True)
class RollforwardRow:
    category: str
    beginning_balance: Decimal = Decimal("0")
    additions: Decimal = Decimal("0")
    disposals: Decimal = Decimal("0")
    depreciation: Decimal = Decimal("0")
    ending_balance: Decimal = Decimal("0")
    asset_count: int = 0

    @property
    def has_activity(self) -> bool:
        return any((
            self.beginning_balance,
            self.additions,
            self.disposals,
            self.depreciation,
        ))


@dataclass(frozen=True)
class RollforwardReport:
    period: ReportingPeriod
    rows: tuple[RollforwardRow, ...]
    total: RollforwardRow


@dataclass(frozen=True)
class DisposalRow:
    asset_id: str
    name: str
    disposal_date: date
    method: DisposalMethod
    cost: Decimal
    accumulated_depreciation: Decimal
    net_book_value: Decimal
    proceeds: Decimal
    gain_loss: Decimal  # Positive = gain


@dataclass(frozen=True)
class DisposalReport:
    period: ReportingPeriod
    rows: tuple[DisposalRow, ...]
    total_cost: Decimal
    total_net_book_value: Decimal
    total_proceeds: Decimal
    total_gain_loss: Decimal


@dataclass(frozen=True)
class CategoryShare:
    category: str
    net_book_value: Decimal
    share: Decimal  # Fraction of total NBV, 0-1


@dataclass(frozen=True)
class WaterfallSummary:
    period: ReportingPeriod
    beginning_balance: Decimal
    additions: Decimal
    depreciation: Decimal
    disposals: Decimal
    ending_balance: Decimal
    composition: tuple[CategoryShare, ...]


@dataclass(frozen=True)
class BasisReductionRow:
    asset_id: str
    name: str
    cost: Decimal
    section_179: Decimal
    section_168k: Decimal
    special_depreciation: Decimal
    other_adjustments: Decimal
    adjusted_basis: Decimal


@dataclass(frozen=True)
class MacrsRow:
    asset_id: str
    tax_code: str
    original_basis: Decimal
    adjusted_basis: Decimal
    method: DepreciationMethod
    convention: Convention
    depreciation: Decimal  # First-year tax depreciation on adjusted basis


@dataclass(frozen=True)
class Form4562Summary:
    tax_year: int
    section_179_limit: Decimal
    bonus_rate: Decimal
    section_179_rows: tuple[BasisReductionRow, ...]
    total_section_179: Decimal
    total_section_168k: Decimal
    total_special_depreciation: Decimal
    macrs_rows: tuple[MacrsRow, ...]
