from decimal import Decimal

import pytest

from fixed_assets.engine.conventions import apply_convention
from fixed_assets.errors import ConfigurationError
from fixed_assets.models.asset import Convention


class TestFirstPeriod:
    def test_half_year(self):
        assert apply_convention(Decimal("40000"), Convention.HALF_YEAR, True) == Decimal("20000")

    def test_full_month_unchanged(self):
        assert apply_convention(Decimal("40000"), Convention.FULL_MONTH, True) == Decimal("40000")

    def test_mid_quarter_fixed_factor(self):
        """One constant regardless of placement quarter."""
        assert apply_convention(Decimal("1000"), Convention.MID_QUARTER, True) == Decimal("625")

    def test_mid_month(self):
        adjusted = apply_convention(Decimal("1200"), Convention.MID_MONTH, True)
        assert abs(adjusted - Decimal("1150")) < Decimal("0.0000001")


class TestLaterPeriods:
    @pytest.mark.parametrize("convention", list(Convention))
    def test_no_adjustment_after_first_period(self, convention):
        assert apply_convention(Decimal("12345.67"), convention, False) == Decimal("12345.67")


def test_unknown_convention_raises():
    with pytest.raises(ConfigurationError) as exc:
        apply_convention(Decimal("100"), "mid-week", True)
    assert exc.value.field == "convention"
