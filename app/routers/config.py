# app/routers/config.py
"""Registry configuration: fee beneficiary, submission fee, capacity."""

from fastapi import APIRouter, Depends

from app.dependencies import get_registry
from app.schemas.config import BeneficiaryIn, CapacityIn, FeeIn, RegistryConfigOut
from app.services.alert_registry import AlertRegistry

router = APIRouter()


@router.get("/config", response_model=RegistryConfigOut, summary="Current registry configuration")
def get_config(registry: AlertRegistry = Depends(get_registry)):
    return registry.snapshot()


@router.post("/config/beneficiary", summary="Set the fee beneficiary (once only)")
def configure_beneficiary(body: BeneficiaryIn, registry: AlertRegistry = Depends(get_registry)):
    registry.configure_beneficiary(body.identity)
    return {"status": "configured", "beneficiary": body.identity}


@router.post("/config/fee", summary="Change the submission fee")
def set_fee(body: FeeIn, registry: AlertRegistry = Depends(get_registry)):
    """Requires a configured beneficiary. The new fee applies from the next submission."""
    registry.set_fee(body.fee)
    return {"status": "updated", "submission_fee": body.fee}


@router.post("/config/capacity", summary="Change the maximum number of stored alerts")
def set_capacity(body: CapacityIn, registry: AlertRegistry = Depends(get_registry)):
    registry.set_capacity(body.max_alerts)
    return {"status": "updated", "max_alerts": body.max_alerts}
