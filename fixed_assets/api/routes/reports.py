"""Period report routes: rollforward, disposals, waterfall, Form 4562."""

from datetime import date

from fastapi import APIRouter

from fixed_assets.api.schemas import (
    DisposalReportResponse,
    Form4562Request,
    Form4562Response,
    PeriodReportRequest,
    PeriodResponse,
    RollforwardResponse,
    WaterfallResponse,
)
from fixed_assets.engine.disposal import build_disposal_report
from fixed_assets.engine.filters import AssetFilter, filter_assets, standard_periods
from fixed_assets.engine.form_4562 import build_form_4562
from fixed_assets.engine.rollforward import aggregate_rollforward
from fixed_assets.engine.validation import validate_period
from fixed_assets.engine.waterfall import build_waterfall
from fixed_assets.models.asset import Asset, ReportingPeriod

router = APIRouter(prefix="/api/v1", tags=["reports"])


def _assets_for(req: PeriodReportRequest) -> tuple[list[Asset], ReportingPeriod]:
    """Convert the request; keep assets active in the period that match the filter."""
    period = req.period.to_domain()
    validate_period(period)
    assets = [a.to_domain() for a in req.assets]
    asset_filter = req.filter.to_domain() if req.filter is not None else AssetFilter()
    return filter_assets(assets, asset_filter, period), period


@router.post("/reports/rollforward", response_model=RollforwardResponse)
async def rollforward(req: PeriodReportRequest):
    assets, period = _assets_for(req)
    report = aggregate_rollforward(assets, period.start, period.end)
    return RollforwardResponse.model_validate(report)


@router.post("/reports/disposals", response_model=DisposalReportResponse)
async def disposals(req: PeriodReportRequest):
    assets, period = _assets_for(req)
    return DisposalReportResponse.model_validate(build_disposal_report(assets, period))


@router.post("/reports/waterfall", response_model=WaterfallResponse)
async def waterfall(req: PeriodReportRequest):
    assets, period = _assets_for(req)
    return WaterfallResponse.model_validate(build_waterfall(assets, period))


@router.post("/reports/form-4562", response_model=Form4562Response)
async def form_4562(req: Form4562Request):
    assets = [a.to_domain() for a in req.assets]
    return Form4562Response.model_validate(build_form_4562(assets, req.tax_year))


@router.get("/periods", response_model=list[PeriodResponse])
async def periods(reference: date):
    """Standard reporting periods relative to a reference date."""
    return [PeriodResponse.model_validate(p) for p in standard_periods(reference)]
