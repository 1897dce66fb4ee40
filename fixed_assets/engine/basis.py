"""Adjusted tax basis after Section 179, bonus, special and other reductions.

Pure function. Range checks live in validation.validate_basis_adjustment.
"""

from decimal import Decimal

from fixed_assets.models.asset import Asset, BasisAdjustment


def adjusted_basis(cost: Decimal, adjustments: BasisAdjustment) -> Decimal:
    return (
        cost
        - adjustments.section_179
        - adjustments.section_168k
        - adjustments.special_depreciation
        - adjustments.other_adjustments
    )


def asset_adjusted_basis(asset: Asset) -> Decimal:
    if asset.basis_adjustment is None:
        return asset.cost
    return adjusted_basis(asset.cost, asset.basis_adjustment)
