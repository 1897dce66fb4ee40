from dataclasses import replace
from decimal import Decimal

import pytest

from fixed_assets.engine.basis import adjusted_basis, asset_adjusted_basis
from fixed_assets.engine.validation import validate_basis_adjustment
from fixed_assets.errors import InputRangeError
from fixed_assets.models.asset import BasisAdjustment


class TestAdjustedBasis:
    def test_all_reductions(self):
        adj = BasisAdjustment(
            section_179=Decimal("20000"),
            section_168k=Decimal("10000"),
            special_depreciation=Decimal("5000"),
            other_adjustments=Decimal("1000"),
        )
        assert adjusted_basis(Decimal("100000"), adj) == Decimal("64000")

    def test_no_reductions(self):
        assert adjusted_basis(Decimal("100000"), BasisAdjustment()) == Decimal("100000")

    def test_fully_expensed(self):
        adj = BasisAdjustment(section_179=Decimal("60000"), section_168k=Decimal("40000"))
        assert adjusted_basis(Decimal("100000"), adj) == Decimal("0")

    def test_total_property(self):
        adj = BasisAdjustment(section_179=Decimal("1.10"), other_adjustments=Decimal("2.20"))
        assert adj.total == Decimal("3.30")


class TestAssetAdjustedBasis:
    def test_without_adjustment_is_cost(self, equipment_asset):
        assert asset_adjusted_basis(equipment_asset) == Decimal("100000")

    def test_with_adjustment(self, equipment_asset):
        asset = replace(
            equipment_asset,
            basis_adjustment=BasisAdjustment(section_179=Decimal("25000")),
        )
        assert asset_adjusted_basis(asset) == Decimal("75000")


class TestBasisLimits:
    def test_reduction_exceeding_remaining_basis(self):
        """179 takes 8,000 of 10,000; bonus of 3,000 no longer fits."""
        adj = BasisAdjustment(section_179=Decimal("8000"), section_168k=Decimal("3000"))
        with pytest.raises(InputRangeError) as exc:
            validate_basis_adjustment(Decimal("10000"), adj, asset_id="FA-9")
        assert exc.value.field == "section_168k"
        assert exc.value.asset_id == "FA-9"

    def test_negative_reduction(self):
        adj = BasisAdjustment(other_adjustments=Decimal("-1"))
        with pytest.raises(InputRangeError) as exc:
            validate_basis_adjustment(Decimal("10000"), adj)
        assert exc.value.field == "other_adjustments"

    def test_exactly_exhausted_is_allowed(self):
        adj = BasisAdjustment(section_179=Decimal("4000"), special_depreciation=Decimal("6000"))
        validate_basis_adjustment(Decimal("10000"), adj)
