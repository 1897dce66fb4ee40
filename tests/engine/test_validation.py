from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from fixed_assets.engine.validation import (
    parse_book,
    parse_convention,
    parse_method,
    validate_asset,
    validate_period,
    validate_schedule,
)
from fixed_assets.errors import AssetEngineError, ConfigurationError, InputRangeError
from fixed_assets.models.asset import BookType, Convention, DepreciationMethod, ReportingPeriod


class TestParsing:
    def test_known_values(self):
        assert parse_method("sum-of-years-digits") is DepreciationMethod.SUM_OF_YEARS_DIGITS
        assert parse_convention("mid-quarter") is Convention.MID_QUARTER
        assert parse_book("Tax") is BookType.TAX

    def test_unknown_method_names_context(self):
        with pytest.raises(ConfigurationError) as exc:
            parse_method("150-db", asset_id="FA-1", schedule_id="S-1")
        err = exc.value
        assert err.context == {"asset_id": "FA-1", "schedule_id": "S-1", "field": "method"}
        assert "150-db" in str(err)
        assert "schedule_id=S-1" in str(err)

    def test_book_is_case_sensitive(self):
        with pytest.raises(ConfigurationError):
            parse_book("tax")


class TestScheduleChecks:
    def test_negative_salvage(self, gaap_straight_line):
        bad = replace(gaap_straight_line, salvage_value=Decimal("-1"))
        with pytest.raises(ConfigurationError) as exc:
            validate_schedule(bad, Decimal("1000"))
        assert exc.value.field == "salvage_value"

    def test_method_must_be_enum(self, gaap_straight_line):
        bad = replace(gaap_straight_line, method="straight-line")
        with pytest.raises(ConfigurationError) as exc:
            validate_schedule(bad, Decimal("1000"))
        assert exc.value.field == "method"

    def test_salvage_equal_to_cost_allowed(self, gaap_straight_line):
        validate_schedule(replace(gaap_straight_line, salvage_value=Decimal("1000")), Decimal("1000"))


class TestAssetChecks:
    def test_valid_asset(self, equipment_asset):
        validate_asset(equipment_asset)

    @pytest.mark.parametrize("cost", ["0", "-500"])
    def test_cost_must_be_positive(self, equipment_asset, cost):
        with pytest.raises(InputRangeError) as exc:
            validate_asset(replace(equipment_asset, cost=Decimal(cost)))
        assert exc.value.field == "cost"
        assert exc.value.asset_id == "FA-1001"


class TestPeriodChecks:
    def test_single_day_period(self):
        validate_period(ReportingPeriod(date(2024, 1, 1), date(2024, 1, 1)))

    def test_inverted(self):
        with pytest.raises(InputRangeError):
            validate_period(ReportingPeriod(date(2024, 2, 1), date(2024, 1, 31)))


def test_engine_errors_are_value_errors():
    assert issubclass(ConfigurationError, AssetEngineError)
    assert issubclass(InputRangeError, ValueError)
