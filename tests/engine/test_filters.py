from dataclasses import replace
from datetime import date
from decimal import Decimal

from fixed_assets.engine.filters import AssetFilter, filter_assets, standard_periods
from fixed_assets.models.asset import AssetStatus, ReportingPeriod

FY2024 = ReportingPeriod(date(2024, 1, 1), date(2024, 12, 31))


class TestAssetFilter:
    def test_empty_filter_matches_everything(self, equipment_asset, building_asset):
        assert AssetFilter().matches(equipment_asset)
        assert AssetFilter().matches(building_asset)

    def test_category(self, equipment_asset, building_asset):
        f = AssetFilter(category="Buildings")
        assert not f.matches(equipment_asset)
        assert f.matches(building_asset)

    def test_department(self, equipment_asset):
        assert AssetFilter(department="Production").matches(equipment_asset)
        assert not AssetFilter(department="Finance").matches(equipment_asset)

    def test_status(self, equipment_asset):
        assert AssetFilter(status=AssetStatus.ACTIVE).matches(equipment_asset)
        assert not AssetFilter(status=AssetStatus.DISPOSED).matches(equipment_asset)

    def test_cost_range(self, equipment_asset, building_asset):
        f = AssetFilter(min_cost=Decimal("50000"), max_cost=Decimal("200000"))
        assert f.matches(equipment_asset)
        assert not f.matches(building_asset)

    def test_cost_bounds_inclusive(self, equipment_asset):
        f = AssetFilter(min_cost=Decimal("100000"), max_cost=Decimal("100000"))
        assert f.matches(equipment_asset)


class TestFilterAssets:
    def test_drops_assets_outside_period(self, equipment_asset, building_asset):
        later = replace(equipment_asset, id="FA-1002", in_service_date=date(2025, 1, 10))
        kept = filter_assets([equipment_asset, building_asset, later], AssetFilter(), FY2024)
        assert [a.id for a in kept] == ["FA-1001", "FA-2001"]

    def test_criteria_and_period_combined(self, equipment_asset, building_asset):
        kept = filter_assets(
            [equipment_asset, building_asset], AssetFilter(category="Equipment"), FY2024
        )
        assert [a.id for a in kept] == ["FA-1001"]


class TestStandardPeriods:
    def test_labels(self):
        periods = standard_periods(date(2024, 5, 15))
        assert [p.label for p in periods] == [
            "Current Year", "Previous Year", "YTD", "Q1", "Q2", "Q3", "Q4",
        ]

    def test_year_bounds(self):
        current, previous, ytd, *_ = standard_periods(date(2024, 5, 15))
        assert (current.start, current.end) == (date(2024, 1, 1), date(2024, 12, 31))
        assert (previous.start, previous.end) == (date(2023, 1, 1), date(2023, 12, 31))
        assert (ytd.start, ytd.end) == (date(2024, 1, 1), date(2024, 5, 15))

    def test_quarters(self):
        quarters = standard_periods(date(2024, 5, 15))[3:]
        assert [(q.start, q.end) for q in quarters] == [
            (date(2024, 1, 1), date(2024, 3, 31)),
            (date(2024, 4, 1), date(2024, 6, 30)),
            (date(2024, 7, 1), date(2024, 9, 30)),
            (date(2024, 10, 1), date(2024, 12, 31)),
        ]
