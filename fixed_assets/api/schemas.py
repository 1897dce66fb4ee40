"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fixed_assets.engine.filters import AssetFilter
from fixed_assets.engine.validation import parse_book, parse_convention, parse_method
from fixed_assets.models.asset import (
    Asset,
    AssetStatus,
    BasisAdjustment,
    BookType,
    Convention,
    DepreciationMethod,
    DepreciationSchedule,
    DisposalInfo,
    DisposalMethod,
    ReportingPeriod,
)


# ---- Request schemas ----

class ScheduleIn(BaseModel):
    id: str
    method: str = Field(..., description="straight-line, declining-balance, sum-of-years-digits, units-of-production")
    life: int
    salvage_value: Decimal = Decimal("0")
    convention: str = Field(..., description="half-year, mid-quarter, mid-month, full-month")
    book: str = Field(..., description="GAAP or Tax")
    tax_code: str | None = None
    annual_depreciation: Decimal | None = None

    def to_domain(self, asset_id: str | None = None) -> DepreciationSchedule:
        ctx = {"asset_id": asset_id, "schedule_id": self.id}
        return DepreciationSchedule(
            id=self.id,
            method=parse_method(self.method, **ctx),
            life=self.life,
            salvage_value=self.salvage_value,
            convention=parse_convention(self.convention, **ctx),
            book=parse_book(self.book, **ctx),
            tax_code=self.tax_code,
            annual_depreciation=self.annual_depreciation,
        )


class BasisAdjustmentIn(BaseModel):
    section_179: Decimal = Decimal("0")
    section_168k: Decimal = Decimal("0")
    special_depreciation: Decimal = Decimal("0")
    other_adjustments: Decimal = Decimal("0")
    notes: str | None = None

    def to_domain(self) -> BasisAdjustment:
        return BasisAdjustment(**self.model_dump())


class DisposalIn(BaseModel):
    date: date
    proceeds: Decimal
    method: DisposalMethod
    reason: str = ""
    notes: str | None = None

    def to_domain(self) -> DisposalInfo:
        return DisposalInfo(**self.model_dump())


class AssetIn(BaseModel):
    id: str
    name: str = ""
    cost: Decimal
    acquisition_date: date
    in_service_date: date
    category: str
    department: str = ""
    status: AssetStatus = AssetStatus.ACTIVE
    schedules: list[ScheduleIn] = []
    accumulated_depreciation: Decimal = Decimal("0")
    net_book_value: Decimal | None = None
    disposal: DisposalIn | None = None
    basis_adjustment: BasisAdjustmentIn | None = None

    def to_domain(self) -> Asset:
        return Asset(
            id=self.id,
            name=self.name,
            cost=self.cost,
            acquisition_date=self.acquisition_date,
            in_service_date=self.in_service_date,
            category=self.category,
            department=self.department,
            status=self.status,
            schedules=tuple(s.to_domain(self.id) for s in self.schedules),
            accumulated_depreciation=self.accumulated_depreciation,
            net_book_value=self.net_book_value,
            disposal=self.disposal.to_domain() if self.disposal else None,
            basis_adjustment=self.basis_adjustment.to_domain() if self.basis_adjustment else None,
        )


class PeriodIn(BaseModel):
    start: date
    end: date
    label: str = ""

    def to_domain(self) -> ReportingPeriod:
        return ReportingPeriod(self.start, self.end, label=self.label)


class FilterIn(BaseModel):
    category: str | None = None
    department: str | None = None
    status: AssetStatus | None = None
    min_cost: Decimal = Decimal("0")
    max_cost: Decimal | None = None

    def to_domain(self) -> AssetFilter:
        return AssetFilter(**self.model_dump())


class ScheduleRequest(BaseModel):
    asset: AssetIn


class PeriodReportRequest(BaseModel):
    assets: list[AssetIn]
    period: PeriodIn
    filter: FilterIn | None = Field(None, description="Applied before aggregation")


class Form4562Request(BaseModel):
    assets: list[AssetIn]
    tax_year: int


class AdjustedBasisRequest(BaseModel):
    cost: Decimal
    adjustments: BasisAdjustmentIn


class GainLossRequest(BaseModel):
    proceeds: Decimal
    net_book_value: Decimal


# ---- Response schemas ----

class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class YearRowResponse(_FromEngine):
    period: int
    year: int
    book: BookType
    depreciation: Decimal
    beginning_nbv: Decimal
    ending_nbv: Decimal


class ScheduleInfoResponse(_FromEngine):
    id: str
    method: DepreciationMethod
    life: int
    salvage_value: Decimal
    convention: Convention
    book: BookType
    tax_code: str | None = None


class ScheduleResultResponse(_FromEngine):
    schedule: ScheduleInfoResponse
    rows: list[YearRowResponse]
    total_depreciation: Decimal
    remaining_value: Decimal


class AssetScheduleResponse(_FromEngine):
    asset_id: str
    years: int
    schedules: list[ScheduleResultResponse]


class PeriodResponse(_FromEngine):
    start: date
    end: date
    label: str = ""


class RollforwardRowResponse(_FromEngine):
    category: str
    beginning_balance: Decimal
    additions: Decimal
    disposals: Decimal
    depreciation: Decimal
    ending_balance: Decimal
    asset_count: int


class RollforwardResponse(_FromEngine):
    period: PeriodResponse
    rows: list[RollforwardRowResponse]
    total: RollforwardRowResponse


class DisposalRowResponse(_FromEngine):
    asset_id: str
    name: str
    disposal_date: date
    method: DisposalMethod
    cost: Decimal
    accumulated_depreciation: Decimal
    net_book_value: Decimal
    proceeds: Decimal
    gain_loss: Decimal


class DisposalReportResponse(_FromEngine):
    period: PeriodResponse
    rows: list[DisposalRowResponse]
    total_cost: Decimal
    total_net_book_value: Decimal
    total_proceeds: Decimal
    total_gain_loss: Decimal


class CategoryShareResponse(_FromEngine):
    category: str
    net_book_value: Decimal
    share: Decimal


class WaterfallResponse(_FromEngine):
    period: PeriodResponse
    beginning_balance: Decimal
    additions: Decimal
    depreciation: Decimal
    disposals: Decimal
    ending_balance: Decimal
    composition: list[CategoryShareResponse]


class BasisReductionRowResponse(_FromEngine):
    asset_id: str
    name: str
    cost: Decimal
    section_179: Decimal
    section_168k: Decimal
    special_depreciation: Decimal
    other_adjustments: Decimal
    adjusted_basis: Decimal


class MacrsRowResponse(_FromEngine):
    asset_id: str
    tax_code: str
    original_basis: Decimal
    adjusted_basis: Decimal
    method: DepreciationMethod
    convention: Convention
    depreciation: Decimal


class Form4562Response(_FromEngine):
    tax_year: int
    section_179_limit: Decimal
    bonus_rate: Decimal
    section_179_rows: list[BasisReductionRowResponse]
    total_section_179: Decimal
    total_section_168k: Decimal
    total_special_depreciation: Decimal
    macrs_rows: list[MacrsRowResponse]


class AdjustedBasisResponse(BaseModel):
    cost: Decimal
    total_reductions: Decimal
    adjusted_basis: Decimal


class GainLossResponse(BaseModel):
    proceeds: Decimal
    net_book_value: Decimal
    gain_loss: Decimal
    is_gain: bool
