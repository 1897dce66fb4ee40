"""Engine error hierarchy.

Every error raised by the engine is a caller input problem. Errors carry the
asset id, schedule id and field name needed to correct the record. They
subclass ValueError so callers that already catch ValueError keep working.
"""


class AssetEngineError(ValueError):
    """Base class for all depreciation engine errors."""

    def __init__(
        self,
        message: str,
        *,
        asset_id: str | None = None,
        schedule_id: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.asset_id = asset_id
        self.schedule_id = schedule_id
        self.field = field

    @property
    def context(self) -> dict[str, str]:
        ctx = {
            "asset_id": self.asset_id,
            "schedule_id": self.schedule_id,
            "field": self.field,
        }
        return {k: v for k, v in ctx.items() if v is not None}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class ConfigurationError(AssetEngineError):
    """Invalid schedule parameters: life, salvage, method, convention, book."""


class InputRangeError(AssetEngineError):
    """A monetary input or date range outside its allowed bounds."""
