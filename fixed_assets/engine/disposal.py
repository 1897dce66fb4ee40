"""Asset disposal: NBV at the disposal date and gain/loss on proceeds.

Pure functions. No I/O.
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from fixed_assets.config import settings
from fixed_assets.engine.schedule import build_schedule
from fixed_assets.engine.validation import validate_asset, validate_period
from fixed_assets.errors import InputRangeError
from fixed_assets.models.asset import Asset, BookType, DepreciationSchedule, ReportingPeriod
from fixed_assets.models.results import DisposalReport, DisposalRow

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def gain_loss(proceeds: Decimal, net_book_value: Decimal) -> Decimal:
    """Positive = gain, negative = loss."""
    return proceeds - net_book_value


def net_book_value_at(
    asset: Asset,
    schedule: DepreciationSchedule,
    as_of: date,
) -> Decimal:
    """NBV on a given date, interpolated within the schedule year.

    The first schedule year is prorated over the days from the in-service
    date to year end, since the convention already shortened that year.
    Later years are prorated over the calendar year.
    """
    if as_of < asset.in_service_date:
        return asset.cost

    rows = build_schedule(asset, schedule)
    index = as_of.year - asset.in_service_date.year
    if index >= len(rows):
        return rows[-1].ending_nbv

    row = rows[index]
    window_start = asset.in_service_date if row.period == 1 else date(row.year, 1, 1)
    year_end = date(row.year, 12, 31)
    elapsed = Decimal((as_of - window_start).days + 1)
    window = Decimal((year_end - window_start).days + 1)

    nbv = row.beginning_nbv - row.depreciation * elapsed / window
    nbv = max(nbv, schedule.salvage_value)
    return nbv.quantize(settings.money_places, ROUND_HALF_UP)


def disposal_net_book_value(asset: Asset) -> Decimal:
    """NBV at disposal from the GAAP schedule, else the record's carried NBV."""
    if asset.disposal is None:
        raise InputRangeError(
            "Asset has no disposal record", asset_id=asset.id, field="disposal"
        )
    schedule = asset.schedule_for(BookType.GAAP)
    if schedule is None:
        logger.warning("Asset %s: no GAAP schedule, using recorded NBV", asset.id)
        return asset.book_value
    return net_book_value_at(asset, schedule, asset.disposal.date)


def build_disposal_report(
    assets: Iterable[Asset],
    period: ReportingPeriod,
) -> DisposalReport:
    """Disposed assets whose disposal date falls within the period."""
    validate_period(period)

    rows = []
    for asset in assets:
        validate_asset(asset)
        disposal = asset.disposal
        if disposal is None or not period.contains(disposal.date):
            continue

        nbv = disposal_net_book_value(asset)
        rows.append(
            DisposalRow(
                asset_id=asset.id,
                name=asset.name,
                disposal_date=disposal.date,
                method=disposal.method,
                cost=asset.cost,
                accumulated_depreciation=asset.cost - nbv,
                net_book_value=nbv,
                proceeds=disposal.proceeds,
                gain_loss=gain_loss(disposal.proceeds, nbv),
            )
        )

    return DisposalReport(
        period=period,
        rows=tuple(rows),
        total_cost=sum((r.cost for r in rows), ZERO),
        total_net_book_value=sum((r.net_book_value for r in rows), ZERO),
        total_proceeds=sum((r.proceeds for r in rows), ZERO),
        total_gain_loss=sum((r.gain_loss for r in rows), ZERO),
    )
