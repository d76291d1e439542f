# app/schemas/alert.py
# Request fields are loosely typed: range and enum checks belong to
# the registry, which reports them in a fixed order.
from pydantic import BaseModel
from typing import Any

from app.services.alert_records import Alert, AlertType, Category, Status


class GeolocationIn(BaseModel):
    lat: Any
    lon: Any


class GeolocationOut(BaseModel):
    lat: float
    lon: float


class AlertSubmit(BaseModel):
    category: Any
    geolocation: GeolocationIn
    evidence_hash: Any          # 64 hex characters (32 bytes)
    severity: Any
    alert_type: Any
    reporter_reputation: Any
    region: Any
    proof_level: Any
    resolution_time: Any        # seconds


class AlertPatch(BaseModel):
    category: Any
    severity: Any
    status: Any


class AlertOut(BaseModel):
    id: int
    reporter: str
    timestamp: int
    category: Category
    geolocation: GeolocationOut
    evidence_hash: str
    severity: int
    status: Status
    alert_type: AlertType
    reporter_reputation: int
    region: str
    proof_level: int
    resolution_time: int
    validation_count: int
    bounty_earned: int

    @classmethod
    def from_alert(cls, alert: Alert) -> "AlertOut":
        return cls(
            id=alert.id,
            reporter=alert.reporter,
            timestamp=alert.timestamp,
            category=alert.category,
            geolocation=GeolocationOut(lat=alert.geolocation.lat, lon=alert.geolocation.lon),
            evidence_hash=alert.evidence_hash.hex(),
            severity=alert.severity,
            status=alert.status,
            alert_type=alert.alert_type,
            reporter_reputation=alert.reporter_reputation,
            region=alert.region,
            proof_level=alert.proof_level,
            resolution_time=alert.resolution_time,
            validation_count=alert.validation_count,
            bounty_earned=alert.bounty_earned,
        )


class AlertUpdateOut(BaseModel):
    update_category: Category
    update_severity: int
    update_status: Status
    update_timestamp: int
    updater: str

    class Config:
        from_attributes = True


class AlertCreated(BaseModel):
    id: int
    timestamp: int


class AlertCount(BaseModel):
    count: int


class AlertExists(BaseModel):
    evidence_hash: str
    exists: bool
