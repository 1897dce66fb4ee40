"""Single-figure calculators: adjusted basis and disposal gain/loss."""

from fastapi import APIRouter

from fixed_assets.api.schemas import (
    AdjustedBasisRequest,
    AdjustedBasisResponse,
    GainLossRequest,
    GainLossResponse,
)
from fixed_assets.engine.basis import adjusted_basis
from fixed_assets.engine.disposal import gain_loss
from fixed_assets.engine.validation import validate_basis_adjustment
from fixed_assets.errors import InputRangeError

router = APIRouter(prefix="/api/v1", tags=["calculators"])


@router.post("/basis/adjusted", response_model=AdjustedBasisResponse)
async def compute_adjusted_basis(req: AdjustedBasisRequest):
    if req.cost <= 0:
        raise InputRangeError(f"Asset cost must be positive, got {req.cost}", field="cost")
    adjustments = req.adjustments.to_domain()
    validate_basis_adjustment(req.cost, adjustments)
    return AdjustedBasisResponse(
        cost=req.cost,
        total_reductions=adjustments.total,
        adjusted_basis=adjusted_basis(req.cost, adjustments),
    )


@router.post("/disposals/gain-loss", response_model=GainLossResponse)
async def compute_gain_loss(req: GainLossRequest):
    if req.proceeds < 0:
        raise InputRangeError(
            f"Disposal proceeds cannot be negative, got {req.proceeds}", field="proceeds"
        )
    result = gain_loss(req.proceeds, req.net_book_value)
    return GainLossResponse(
        proceeds=req.proceeds,
        net_book_value=req.net_book_value,
        gain_loss=result,
        is_gain=result > 0,
    )
