"""First-year timing conventions.

Only the first depreciation period is prorated. Mid-quarter uses one fixed
factor regardless of the quarter the asset entered service.
"""

from decimal import Decimal

from fixed_assets.errors import ConfigurationError
from fixed_assets.models.asset import Convention

FIRST_PERIOD_FACTORS: dict[Convention, Decimal] = {
    Convention.HALF_YEAR: Decimal("0.5"),
    Convention.MID_QUARTER: Decimal("0.625"),
    Convention.MID_MONTH: Decimal("11.5") / Decimal("12"),
    Convention.FULL_MONTH: Decimal("1"),
}


def apply_convention(
    amount: Decimal, convention: Convention, is_first_period: bool
) -> Decimal:
    if not is_first_period:
        return amount
    try:
        factor = FIRST_PERIOD_FACTORS[convention]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported convention: {convention!r}", field="convention"
        ) from None
    return amount * factor
