# app/routers/alerts.py
"""
Alert submission, amendment and lookup endpoints.
Registry errors propagate to the RegistryError handler in app.main.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_caller, get_clock, get_registry
from app.schemas.alert import (
    AlertCount,
    AlertCreated,
    AlertExists,
    AlertOut,
    AlertPatch,
    AlertSubmit,
    AlertUpdateOut,
)
from app.services.alert_records import Geolocation
from app.services.alert_registry import AlertRegistry
from app.services.clock import BlockClock

router = APIRouter()


def decode_hash(value) -> bytes:
    """Hex string -> bytes. Malformed hex or a non-string yields b"" so the registry's length rule rejects it."""
    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError):
        return b""


@router.post("/alerts", response_model=AlertCreated, status_code=status.HTTP_201_CREATED,
             summary="Submit a new alert (charges the submission fee)")
def submit_alert(
    body: AlertSubmit,
    caller: str = Depends(get_caller),
    registry: AlertRegistry = Depends(get_registry),
    clock: BlockClock = Depends(get_clock),
):
    # Clock reading and insert under one lock keep timestamps ordered by id
    with registry.lock:
        now = clock.advance()
        alert_id = registry.submit(
            category=body.category,
            geolocation=Geolocation(lat=body.geolocation.lat, lon=body.geolocation.lon),
            evidence_hash=decode_hash(body.evidence_hash),
            severity=body.severity,
            alert_type=body.alert_type,
            reporter_reputation=body.reporter_reputation,
            region=body.region,
            proof_level=body.proof_level,
            resolution_time=body.resolution_time,
            caller=caller,
            current_time=now,
        )
    return AlertCreated(id=alert_id, timestamp=now)


@router.get("/alerts/count", response_model=AlertCount, summary="Total alerts ever submitted")
def get_alert_count(registry: AlertRegistry = Depends(get_registry)):
    return AlertCount(count=registry.get_count())


@router.get("/alerts/exists/{evidence_hash}", response_model=AlertExists,
            summary="Is this evidence hash already registered?")
def check_alert_existence(evidence_hash: str, registry: AlertRegistry = Depends(get_registry)):
    return AlertExists(evidence_hash=evidence_hash,
                       exists=registry.check_existence(decode_hash(evidence_hash)))


@router.get("/alerts/{alert_id}", response_model=AlertOut, summary="Fetch one alert")
def get_alert(alert_id: int, registry: AlertRegistry = Depends(get_registry)):
    alert = registry.get_alert(alert_id)
    if alert is None:
        raise HTTPException(status_code=404, detail=f"Alert {alert_id} not found")
    return AlertOut.from_alert(alert)


@router.get("/alerts/{alert_id}/update", response_model=AlertUpdateOut,
            summary="Latest amendment of an alert")
def get_alert_update(alert_id: int, registry: AlertRegistry = Depends(get_registry)):
    update = registry.get_alert_update(alert_id)
    if update is None:
        raise HTTPException(status_code=404, detail=f"Alert {alert_id} has no update")
    return AlertUpdateOut.model_validate(update)


@router.patch("/alerts/{alert_id}", response_model=AlertOut,
              summary="Amend category/severity/status (original reporter only)")
def update_alert(
    alert_id: int,
    body: AlertPatch,
    caller: str = Depends(get_caller),
    registry: AlertRegistry = Depends(get_registry),
    clock: BlockClock = Depends(get_clock),
):
    with registry.lock:
        registry.update(alert_id, body.category, body.severity, body.status,
                        caller=caller, current_time=clock.advance())
    return AlertOut.from_alert(registry.get_alert(alert_id))
