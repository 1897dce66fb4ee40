"""Depreciation waterfall: how net book value moved over a reporting period.

Ending balance is today's carried NBV of assets still held; the beginning
balance is backed out from it.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from fixed_assets.config import settings
from fixed_assets.engine.rollforward import annual_gaap_depreciation, was_active
from fixed_assets.engine.validation import validate_asset, validate_period
from fixed_assets.models.asset import Asset, ReportingPeriod
from fixed_assets.models.results import CategoryShare, WaterfallSummary

ZERO = Decimal("0")
FOUR_PLACES = Decimal("0.0001")


def _composition(held: list[Asset]) -> tuple[CategoryShare, ...]:
    by_category: dict[str, Decimal] = {}
    for asset in held:
        by_category[asset.category] = by_category.get(asset.category, ZERO) + asset.book_value

    total = sum(by_category.values(), ZERO)
    shares = []
    for category, nbv in by_category.items():
        share = (nbv / total).quantize(FOUR_PLACES, ROUND_HALF_UP) if total else ZERO
        shares.append(CategoryShare(category=category, net_book_value=nbv, share=share))
    return tuple(shares)


def build_waterfall(assets: Iterable[Asset], period: ReportingPeriod) -> WaterfallSummary:
    validate_period(period)

    additions = ZERO
    depreciation = ZERO
    disposals = ZERO
    held = []

    for asset in assets:
        validate_asset(asset)
        if period.contains(asset.acquisition_date):
            additions += asset.cost
        if was_active(asset, period):
            depreciation += annual_gaap_depreciation(asset, period.start.year)

        disposal_date = asset.disposal_date
        if asset.is_disposed:
            if disposal_date is not None and period.contains(disposal_date):
                disposals += asset.book_value
        else:
            held.append(asset)

    ending = sum((a.book_value for a in held), ZERO)
    depreciation = depreciation.quantize(settings.money_places, ROUND_HALF_UP)

    return WaterfallSummary(
        period=period,
        beginning_balance=ending + depreciation + disposals - additions,
        additions=additions,
        depreciation=depreciation,
        disposals=disposals,
        ending_balance=ending,
        composition=_composition(held),
    )
