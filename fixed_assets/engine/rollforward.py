"""Category rollforward: beginning balance + additions - disposals - depreciation.

Balances are carried at original cost. Depreciation is pro-rata on the days
each asset was in service during the period.
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from fixed_assets.config import settings
from fixed_assets.engine.schedule import depreciation_for_year
from fixed_assets.engine.validation import validate_asset, validate_period
from fixed_assets.models.asset import Asset, BookType, ReportingPeriod
from fixed_assets.models.results import RollforwardReport, RollforwardRow

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(settings.money_places, ROUND_HALF_UP)


def annual_gaap_depreciation(asset: Asset, year: int) -> Decimal:
    """The GAAP schedule's annual amount for the period.

    Uses the amount stored on the schedule record when present; otherwise
    the built schedule's row for `year`.
    """
    schedule = asset.schedule_for(BookType.GAAP)
    if schedule is None:
        logger.warning("Asset %s has no GAAP schedule; no depreciation counted", asset.id)
        return ZERO
    if schedule.annual_depreciation is not None:
        return schedule.annual_depreciation
    return depreciation_for_year(asset, schedule, year)


def was_active(asset: Asset, period: ReportingPeriod) -> bool:
    """In service by the period end and not disposed before it began."""
    if asset.in_service_date > period.end:
        return False
    disposal_date = asset.disposal_date
    return disposal_date is None or disposal_date >= period.start


def days_active(asset: Asset, period: ReportingPeriod) -> int:
    """Inclusive day overlap of the asset's service window with the period.

    Each calendar year in the overlap counts at most `days_in_year` days, so
    a leap day never adds depreciation beyond the annual amount.
    """
    start = max(asset.in_service_date, period.start)
    end = period.end
    if asset.disposal_date is not None:
        end = min(asset.disposal_date, period.end)
    if end < start:
        return 0

    days = 0
    for year in range(start.year, end.year + 1):
        year_start = max(start, date(year, 1, 1))
        year_end = min(end, date(year, 12, 31))
        days += min((year_end - year_start).days + 1, settings.days_in_year)
    return days


def period_depreciation(asset: Asset, period: ReportingPeriod) -> Decimal:
    if not was_active(asset, period):
        return ZERO
    annual = annual_gaap_depreciation(asset, period.start.year)
    return annual * Decimal(days_active(asset, period)) / Decimal(settings.days_in_year)


def _category_row(category: str, assets: list[Asset], period: ReportingPeriod) -> RollforwardRow:
    beginning = ZERO
    additions = ZERO
    disposals = ZERO
    depreciation = ZERO

    for asset in assets:
        if asset.in_service_date < period.start:
            beginning += asset.cost
        elif period.contains(asset.in_service_date):
            additions += asset.cost

        disposal_date = asset.disposal_date
        if disposal_date is not None and period.contains(disposal_date):
            disposals += asset.cost

        depreciation += period_depreciation(asset, period)

    depreciation = _money(depreciation)
    return RollforwardRow(
        category=category,
        beginning_balance=beginning,
        additions=additions,
        disposals=disposals,
        depreciation=depreciation,
        ending_balance=beginning + additions - disposals - depreciation,
        asset_count=len(assets),
    )


def _total_row(rows: Iterable[RollforwardRow]) -> RollforwardRow:
    rows = list(rows)
    return RollforwardRow(
        category="Total",
        beginning_balance=sum((r.beginning_balance for r in rows), ZERO),
        additions=sum((r.additions for r in rows), ZERO),
        disposals=sum((r.disposals for r in rows), ZERO),
        depreciation=_money(sum((r.depreciation for r in rows), ZERO)),
        ending_balance=_money(sum((r.ending_balance for r in rows), ZERO)),
        asset_count=sum(r.asset_count for r in rows),
    )


def aggregate_rollforward(
    assets: Iterable[Asset],
    period_start: date,
    period_end: date,
) -> RollforwardReport:
    """Group assets by category and roll each forward across the period.

    Categories with no balance and no activity are dropped. Row order follows
    the first appearance of each category in `assets`.
    """
    period = ReportingPeriod(period_start, period_end)
    validate_period(period)

    by_category: dict[str, list[Asset]] = {}
    for asset in assets:
        validate_asset(asset)
        by_category.setdefault(asset.category, []).append(asset)

    rows = []
    for category, members in by_category.items():
        row = _category_row(category, members, period)
        if not row.has_activity:
            logger.debug("Dropping category %s: no activity in period", category)
            continue
        rows.append(row)

    return RollforwardReport(period=period, rows=tuple(rows), total=_total_row(rows))
