# app/routers/authorities.py
from fastapi import APIRouter, Depends

from app.dependencies import get_registry
from app.services.alert_registry import AlertRegistry

router = APIRouter()


@router.get("/authorities/{identity}", summary="Is this identity a verified authority?")
def check_authority(identity: str, registry: AlertRegistry = Depends(get_registry)):
    return {"identity": identity, "verified": registry.is_verified_authority(identity)}
