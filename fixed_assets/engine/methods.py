"""Period depreciation by method, before any timing convention.

Pure functions: Decimal in, Decimal out. No I/O. Results are not rounded;
rounding happens once, when schedule rows are produced.
"""

from decimal import Decimal

from fixed_assets.errors import ConfigurationError
from fixed_assets.models.asset import DepreciationMethod

DDB_FACTOR = Decimal("2")  # 200% declining balance


def straight_line(cost: Decimal, salvage: Decimal, life: int) -> Decimal:
    return (cost - salvage) / life


def declining_balance(cost: Decimal, life: int, period: int) -> Decimal:
    """200% declining balance on cost.

    Salvage is not considered here; ScheduleBuilder floors NBV at salvage.
    There is no switch to straight-line in later years.
    """
    rate = DDB_FACTOR / life
    remaining = cost
    for _ in range(period - 1):
        remaining -= remaining * rate
    return remaining * rate


def sum_of_years_digits(
    cost: Decimal, salvage: Decimal, life: int, period: int
) -> Decimal:
    remaining_life = life - period + 1
    digit_sum = Decimal(life * (life + 1)) / 2
    return (cost - salvage) * remaining_life / digit_sum


def depreciation_amount(
    cost: Decimal,
    salvage: Decimal,
    life: int,
    method: DepreciationMethod,
    period: int,
) -> Decimal:
    """Raw depreciation for one period.

    Args:
        cost: Depreciable starting value (cost, or adjusted basis)
        salvage: Salvage value
        life: Useful life in whole years
        method: Depreciation method
        period: Depreciation year (1-indexed)
    """
    if life <= 0:
        raise ConfigurationError(f"Useful life must be at least 1 year, got {life}", field="life")

    if method is DepreciationMethod.STRAIGHT_LINE:
        return straight_line(cost, salvage, life)
    if method is DepreciationMethod.DECLINING_BALANCE:
        return declining_balance(cost, life, period)
    if method is DepreciationMethod.SUM_OF_YEARS_DIGITS:
        return sum_of_years_digits(cost, salvage, life, period)
    if method is DepreciationMethod.UNITS_OF_PRODUCTION:
        # No units-produced figure is tracked; straight-line stands in
        return straight_line(cost, salvage, life)
    raise ConfigurationError(f"Unsupported depreciation method: {method!r}", field="method")
