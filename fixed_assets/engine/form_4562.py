"""Form 4562 (Depreciation and Amortization) summary for one tax year.

Part I: Section 179 property and basis reductions.
Part II: special depreciation totals.
Part III: MACRS-labelled tax schedules, depreciated on adjusted basis.
"""

import logging
from decimal import Decimal
from typing import Iterable

from fixed_assets.config import settings
from fixed_assets.engine.basis import asset_adjusted_basis
from fixed_assets.engine.schedule import build_schedule
from fixed_assets.engine.validation import validate_asset
from fixed_assets.models.asset import Asset, BasisAdjustment, BookType
from fixed_assets.models.results import BasisReductionRow, Form4562Summary, MacrsRow

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
MACRS_PREFIX = "MACRS"


def bonus_rate(tax_year: int) -> Decimal:
    """Section 168(k) bonus rate for property placed in service in `tax_year`."""
    rate = settings.bonus_depreciation_rate.get(tax_year, 0)
    return Decimal(str(rate))


def _reduction_row(asset: Asset) -> BasisReductionRow:
    adj = asset.basis_adjustment or BasisAdjustment()
    return BasisReductionRow(
        asset_id=asset.id,
        name=asset.name,
        cost=asset.cost,
        section_179=adj.section_179,
        section_168k=adj.section_168k,
        special_depreciation=adj.special_depreciation,
        other_adjustments=adj.other_adjustments,
        adjusted_basis=asset_adjusted_basis(asset),
    )


def _macrs_row(asset: Asset) -> MacrsRow | None:
    schedule = asset.schedule_for(BookType.TAX)
    if schedule is None or not (schedule.tax_code or "").startswith(MACRS_PREFIX):
        return None

    basis = asset_adjusted_basis(asset)
    if schedule.salvage_value > basis:
        logger.warning(
            "Asset %s: salvage %s exceeds adjusted basis %s, skipping Part III row",
            asset.id, schedule.salvage_value, basis,
        )
        return None

    first_year = build_schedule(asset, schedule, basis=basis)[0]
    return MacrsRow(
        asset_id=asset.id,
        tax_code=schedule.tax_code,
        original_basis=asset.cost,
        adjusted_basis=basis,
        method=schedule.method,
        convention=schedule.convention,
        depreciation=first_year.depreciation,
    )


def build_form_4562(assets: Iterable[Asset], tax_year: int) -> Form4562Summary:
    placed = []
    for asset in assets:
        validate_asset(asset)
        if asset.acquisition_date.year == tax_year:
            placed.append(asset)

    limit = settings.section_179_limit
    section_179_rows = tuple(_reduction_row(a) for a in placed if a.cost <= limit)
    adjusted = [a.basis_adjustment for a in placed if a.basis_adjustment is not None]
    macrs_rows = tuple(row for row in map(_macrs_row, placed) if row is not None)

    return Form4562Summary(
        tax_year=tax_year,
        section_179_limit=limit,
        bonus_rate=bonus_rate(tax_year),
        section_179_rows=section_179_rows,
        total_section_179=sum((r.section_179 for r in section_179_rows), ZERO),
        total_section_168k=sum((a.section_168k for a in adjusted), ZERO),
        total_special_depreciation=sum((a.special_depreciation for a in adjusted), ZERO),
        macrs_rows=macrs_rows,
    )
