"""Report filters and the standard reporting periods offered to callers.

Filtering happens before aggregation; the aggregators themselves see only
the assets they are handed.
"""

from calendar import monthrange
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from fixed_assets.engine.rollforward import was_active
from fixed_assets.models.asset import Asset, AssetStatus, ReportingPeriod


@dataclass(frozen=True)
class AssetFilter:
    """Empty criteria match every asset."""
    category: Optional[str] = None
    department: Optional[str] = None
    status: Optional[AssetStatus] = None
    min_cost: Decimal = Decimal("0")
    max_cost: Optional[Decimal] = None  # None = no upper bound

    def matches(self, asset: Asset) -> bool:
        if self.category and asset.category != self.category:
            return False
        if self.department and asset.department != self.department:
            return False
        if self.status is not None and asset.status is not self.status:
            return False
        if asset.cost < self.min_cost:
            return False
        if self.max_cost is not None and asset.cost > self.max_cost:
            return False
        return True


def filter_assets(
    assets: Iterable[Asset],
    asset_filter: AssetFilter,
    period: ReportingPeriod,
) -> list[Asset]:
    return [a for a in assets if asset_filter.matches(a) and was_active(a, period)]


def _quarter(year: int, q: int) -> ReportingPeriod:
    first_month = 3 * (q - 1) + 1
    last_month = first_month + 2
    return ReportingPeriod(
        date(year, first_month, 1),
        date(year, last_month, monthrange(year, last_month)[1]),
        label=f"Q{q}",
    )


def standard_periods(reference: date) -> list[ReportingPeriod]:
    """Current year, previous year, YTD and quarters relative to `reference`."""
    year = reference.year
    return [
        ReportingPeriod(date(year, 1, 1), date(year, 12, 31), label="Current Year"),
        ReportingPeriod(date(year - 1, 1, 1), date(year - 1, 12, 31), label="Previous Year"),
        ReportingPeriod(date(year, 1, 1), reference, label="YTD"),
        *(_quarter(year, q) for q in range(1, 5)),
    ]
