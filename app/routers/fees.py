# app/routers/fees.py
from fastapi import APIRouter, Depends

from app.dependencies import get_registry
from app.schemas.config import FeeTransferOut
from app.services.alert_registry import AlertRegistry

router = APIRouter()


@router.get("/fees/transfers", response_model=list[FeeTransferOut], summary="Recent submission fee transfers")
def list_fee_transfers(limit: int = 50, registry: AlertRegistry = Depends(get_registry)):
    """Newest first."""
    return [FeeTransferOut.model_validate(t) for t in registry.fee_sink.recent(limit)]
