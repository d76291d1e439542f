# app/services/alert_records.py
"""
In-memory record types held by the AlertRegistry.
Records are frozen: an update stores a modified copy instead of mutating.
"""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    FLOOD = "FLOOD"
    FIRE = "FIRE"
    EARTHQUAKE = "EARTHQUAKE"
    TORNADO = "TORNADO"


class AlertType(str, Enum):
    CITIZEN = "CITIZEN"
    SENSOR = "SENSOR"
    OFFICIAL = "OFFICIAL"


class Status(str, Enum):
    PENDING = "PENDING"
    VALIDATED = "VALIDATED"
    REJECTED = "REJECTED"
    RESOLVED = "RESOLVED"


@dataclass(frozen=True)
class Geolocation:
    lat: float
    lon: float


@dataclass(frozen=True)
class Alert:
    id: int
    reporter: str
    timestamp: int                # logical clock at creation or last update
    category: Category
    geolocation: Geolocation
    evidence_hash: bytes          # 32-byte digest, unique across the registry
    severity: int                 # 1..10
    status: Status
    alert_type: AlertType
    reporter_reputation: int
    region: str
    proof_level: int
    resolution_time: int          # seconds
    # Reserved: no registry operation changes these yet
    validation_count: int = 0
    bounty_earned: int = 0


@dataclass(frozen=True)
class AlertUpdate:
    update_category: Category
    update_severity: int
    update_status: Status
    update_timestamp: int
    updater: str


@dataclass(frozen=True)
class FeeTransferRecord:
    amount: int
    sender: str
    recipient: str
