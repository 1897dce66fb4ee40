"""Year-by-year depreciation schedules for one asset, one book at a time.

Pure functions. GAAP and Tax schedules are built independently and never
share running state.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from fixed_assets.config import settings
from fixed_assets.engine.conventions import apply_convention
from fixed_assets.engine.methods import depreciation_amount
from fixed_assets.engine.validation import validate_asset, validate_schedule
from fixed_assets.models.asset import Asset, DepreciationSchedule
from fixed_assets.models.results import AssetScheduleReport, ScheduleResult, YearRow

logger = logging.getLogger(__name__)


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(settings.money_places, ROUND_HALF_UP)


def build_schedule(
    asset: Asset,
    schedule: DepreciationSchedule,
    basis: Decimal | None = None,
) -> tuple[YearRow, ...]:
    """Build `schedule.life` year rows for one book.

    Ending NBV never drops below salvage. The depreciation shown on each row
    is the uncapped method amount; the floor only affects NBV.

    Args:
        asset: Asset the schedule belongs to
        schedule: GAAP or Tax schedule
        basis: Starting value override (adjusted tax basis); defaults to cost
    """
    start = asset.cost if basis is None else basis
    validate_schedule(schedule, start, asset_id=asset.id)

    rows = []
    beginning = start
    for period in range(1, schedule.life + 1):
        raw = depreciation_amount(
            start, schedule.salvage_value, schedule.life, schedule.method, period
        )
        depreciation = apply_convention(raw, schedule.convention, period == 1)
        ending = max(beginning - depreciation, schedule.salvage_value)
        rows.append(
            YearRow(
                period=period,
                year=asset.in_service_date.year + period - 1,
                book=schedule.book,
                depreciation=_money(depreciation),
                beginning_nbv=_money(beginning),
                ending_nbv=_money(ending),
            )
        )
        beginning = ending

    logger.debug(
        "Built %s schedule %s for asset %s: %d years",
        schedule.book.value, schedule.id, asset.id, schedule.life,
    )
    return tuple(rows)


def summarize_schedule(
    asset: Asset,
    schedule: DepreciationSchedule,
    basis: Decimal | None = None,
) -> ScheduleResult:
    rows = build_schedule(asset, schedule, basis)
    total = sum((row.depreciation for row in rows), Decimal("0"))
    start = asset.cost if basis is None else basis
    return ScheduleResult(
        schedule=schedule,
        rows=rows,
        total_depreciation=total,
        remaining_value=start - total,
    )


def build_asset_report(asset: Asset) -> AssetScheduleReport:
    """All books for one asset, as shown on the asset's depreciation report."""
    validate_asset(asset)
    results = tuple(summarize_schedule(asset, s) for s in asset.schedules)
    years = max((s.life for s in asset.schedules), default=0)
    return AssetScheduleReport(asset_id=asset.id, years=years, schedules=results)


def depreciation_for_year(
    asset: Asset, schedule: DepreciationSchedule, year: int
) -> Decimal:
    """Schedule depreciation for a calendar year; zero outside the schedule life."""
    for row in build_schedule(asset, schedule):
        if row.year == year:
            return row.depreciation
    return Decimal("0")
