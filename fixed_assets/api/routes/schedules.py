"""Per-asset depreciation schedule routes."""

from fastapi import APIRouter

from fixed_assets.api.schemas import AssetScheduleResponse, ScheduleRequest
from fixed_assets.engine.schedule import build_asset_report

router = APIRouter(prefix="/api/v1/schedules", tags=["schedules"])


@router.post("", response_model=AssetScheduleResponse)
async def build_schedules(req: ScheduleRequest):
    """Asset record → one year-by-year table per book (GAAP, Tax)."""
    report = build_asset_report(req.asset.to_domain())
    return AssetScheduleResponse.model_validate(report)
