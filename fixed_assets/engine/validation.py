"""Input validation at the engine boundary.

Everything here fails fast, before any schedule or report is built, and
names the asset, schedule and field at fault.
"""

from decimal import Decimal
from enum import Enum
from typing import TypeVar

from fixed_assets.errors import ConfigurationError, InputRangeError
from fixed_assets.models.asset import (
    Asset,
    BasisAdjustment,
    BookType,
    Convention,
    DepreciationMethod,
    DepreciationSchedule,
    DisposalInfo,
    ReportingPeriod,
)

E = TypeVar("E", bound=Enum)

ZERO = Decimal("0")


def _parse_enum(enum_cls: type[E], value: str, field: str, **ctx) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ConfigurationError(
            f"Unsupported {field} {value!r}; expected one of: {allowed}", field=field, **ctx
        ) from None


def parse_method(value: str, **ctx) -> DepreciationMethod:
    return _parse_enum(DepreciationMethod, value, "method", **ctx)


def parse_convention(value: str, **ctx) -> Convention:
    return _parse_enum(Convention, value, "convention", **ctx)


def parse_book(value: str, **ctx) -> BookType:
    return _parse_enum(BookType, value, "book", **ctx)


def validate_schedule(
    schedule: DepreciationSchedule,
    cost: Decimal,
    asset_id: str | None = None,
) -> None:
    """Reject schedules that cannot be built against `cost`."""
    ctx = {"asset_id": asset_id, "schedule_id": schedule.id}
    if not isinstance(schedule.method, DepreciationMethod):
        raise ConfigurationError(f"Unsupported method {schedule.method!r}", field="method", **ctx)
    if not isinstance(schedule.convention, Convention):
        raise ConfigurationError(
            f"Unsupported convention {schedule.convention!r}", field="convention", **ctx
        )
    if not isinstance(schedule.book, BookType):
        raise ConfigurationError(f"Unsupported book {schedule.book!r}", field="book", **ctx)
    if schedule.life <= 0:
        raise ConfigurationError(
            f"Useful life must be at least 1 year, got {schedule.life}", field="life", **ctx
        )
    if schedule.salvage_value < 0:
        raise ConfigurationError(
            f"Salvage value cannot be negative, got {schedule.salvage_value}",
            field="salvage_value",
            **ctx,
        )
    if schedule.salvage_value > cost:
        raise ConfigurationError(
            f"Salvage value {schedule.salvage_value} exceeds depreciable cost {cost}",
            field="salvage_value",
            **ctx,
        )


def validate_basis_adjustment(
    cost: Decimal,
    adjustment: BasisAdjustment,
    asset_id: str | None = None,
) -> None:
    """Each reduction must fit within the basis left after the prior ones."""
    remaining = cost
    for field, amount in adjustment.reductions:
        if amount < 0:
            raise InputRangeError(
                f"Basis reduction cannot be negative, got {amount}",
                asset_id=asset_id,
                field=field,
            )
        if amount > remaining:
            raise InputRangeError(
                f"Basis reduction {amount} exceeds remaining basis {remaining}",
                asset_id=asset_id,
                field=field,
            )
        remaining -= amount


def validate_disposal(disposal: DisposalInfo, asset_id: str | None = None) -> None:
    if disposal.proceeds < 0:
        raise InputRangeError(
            f"Disposal proceeds cannot be negative, got {disposal.proceeds}",
            asset_id=asset_id,
            field="proceeds",
        )


def validate_asset(asset: Asset) -> None:
    """Validate an asset record and everything nested in it."""
    if asset.cost <= 0:
        raise InputRangeError(
            f"Asset cost must be positive, got {asset.cost}", asset_id=asset.id, field="cost"
        )

    seen: set[BookType] = set()
    for schedule in asset.schedules:
        validate_schedule(schedule, asset.cost, asset_id=asset.id)
        if schedule.book in seen:
            raise ConfigurationError(
                f"Asset carries more than one {schedule.book.value} schedule",
                asset_id=asset.id,
                schedule_id=schedule.id,
                field="book",
            )
        seen.add(schedule.book)

    if asset.basis_adjustment is not None:
        validate_basis_adjustment(asset.cost, asset.basis_adjustment, asset_id=asset.id)
    if asset.disposal is not None:
        validate_disposal(asset.disposal, asset_id=asset.id)


def validate_period(period: ReportingPeriod) -> None:
    if period.start > period.end:
        raise InputRangeError(
            f"Reporting period starts {period.start} after it ends {period.end}",
            field="period",
        )
