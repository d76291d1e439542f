# app/services/alert_registry.py
"""
AlertRegistry: in-memory store of disaster alerts.

Accepts submissions from verified authorities, charges a submission fee to
the configured beneficiary, and lets the original reporter amend
category/severity/status. Alerts are indexed by id and by evidence hash.

Every operation runs under one lock around the whole state, so hash
uniqueness and id assignment stay atomic with the insert even when the
API serves requests from a thread pool.
"""

import threading
from dataclasses import replace
from typing import Dict, Optional

from app.services.alert_records import Alert, AlertUpdate, Status
from app.services.errors import (
    AlreadyConfigured,
    BeneficiaryNotConfigured,
    CapacityExceeded,
    DuplicateEvidence,
    Forbidden,
    InvalidBeneficiary,
    NotAuthorized,
    NotConfigured,
    NotFound,
    UpdateRejected,
    ValidationFailed,
)
from app.services.validation import validate_submission, validate_update
from app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_ALERTS = 10000
DEFAULT_SUBMISSION_FEE = 100


class AlertRegistry:
    """
    authority_oracle: anything with is_authorized(identity) -> bool
    fee_sink:         anything with transfer(amount, sender, recipient)
    null_identity:    reserved burn identity that may never be the beneficiary
    """

    def __init__(self, authority_oracle, fee_sink, max_alerts: int = DEFAULT_MAX_ALERTS,
                 submission_fee: int = DEFAULT_SUBMISSION_FEE, null_identity: Optional[str] = None):
        self.authority_oracle = authority_oracle
        self.fee_sink = fee_sink
        self.null_identity = null_identity

        self.next_alert_id = 0
        self.max_alerts = max_alerts
        self.submission_fee = submission_fee
        self.beneficiary: Optional[str] = None

        self._alerts: Dict[int, Alert] = {}
        self._updates: Dict[int, AlertUpdate] = {}
        self._ids_by_hash: Dict[bytes, int] = {}
        self._lock = threading.RLock()

    @property
    def lock(self):
        """Re-entrant state lock. Hold it to keep a clock reading and the operation that uses it atomic."""
        return self._lock

    # ── Configuration ─────────────────────────────────────────────────────
    def configure_beneficiary(self, identity: str) -> bool:
        with self._lock:
            if not identity or identity == self.null_identity:
                raise InvalidBeneficiary(f"{identity!r} cannot receive submission fees")
            if self.beneficiary is not None:
                raise AlreadyConfigured()
            self.beneficiary = identity
        logger.info(f"[REGISTRY] Beneficiary set to {identity}")
        return True

    def set_fee(self, new_fee: int) -> bool:
        with self._lock:
            if self.beneficiary is None:
                raise NotConfigured()
            self.submission_fee = new_fee
        logger.info(f"[REGISTRY] Submission fee set to {new_fee}")
        return True

    def set_capacity(self, new_capacity: int) -> bool:
        with self._lock:
            if self.beneficiary is None:
                raise NotConfigured()
            if new_capacity < 0:
                raise ValidationFailed("capacity")
            self.max_alerts = new_capacity
        logger.info(f"[REGISTRY] Capacity set to {new_capacity}")
        return True

    # ── Submission ────────────────────────────────────────────────────────
    def submit(self, category, geolocation, evidence_hash, severity, alert_type,
               reporter_reputation, region, proof_level, resolution_time,
               caller: str, current_time: int) -> int:
        """
        Store a new alert and return its id.

        Rejections, in the order they are checked: CapacityExceeded,
        ValidationFailed (per field), NotAuthorized, DuplicateEvidence,
        BeneficiaryNotConfigured. The fee is transferred only after all
        of them pass.
        """
        with self._lock:
            try:
                if self.next_alert_id >= self.max_alerts:
                    raise CapacityExceeded()
                category, alert_type = validate_submission(
                    category, geolocation, evidence_hash, severity, alert_type,
                    reporter_reputation, region, proof_level, resolution_time,
                )
                if not self.authority_oracle.is_authorized(caller):
                    raise NotAuthorized(f"{caller} is not a verified authority")
                hash_key = bytes(evidence_hash)
                if hash_key in self._ids_by_hash:
                    raise DuplicateEvidence()
                if self.beneficiary is None:
                    raise BeneficiaryNotConfigured()
            except (CapacityExceeded, ValidationFailed, NotAuthorized,
                    DuplicateEvidence, BeneficiaryNotConfigured) as e:
                logger.warning(f"[REGISTRY] Submission from {caller} rejected: {type(e).__name__} ({e})")
                raise

            self.fee_sink.transfer(self.submission_fee, caller, self.beneficiary)

            alert_id = self.next_alert_id
            self._alerts[alert_id] = Alert(
                id=alert_id,
                reporter=caller,
                timestamp=current_time,
                category=category,
                geolocation=geolocation,
                evidence_hash=hash_key,
                severity=severity,
                status=Status.PENDING,
                alert_type=alert_type,
                reporter_reputation=reporter_reputation,
                region=region,
                proof_level=proof_level,
                resolution_time=resolution_time,
            )
            self._ids_by_hash[hash_key] = alert_id
            self.next_alert_id += 1

        logger.info(f"[REGISTRY] Alert {alert_id} stored: {category.value} severity={severity} "
                    f"region={region} reporter={caller}")
        return alert_id

    # ── Update ────────────────────────────────────────────────────────────
    def update(self, alert_id: int, new_category, new_severity, new_status,
               caller: str, current_time: int) -> bool:
        """Overwrite category/severity/status. Only the original reporter may do this."""
        with self._lock:
            try:
                alert = self._alerts.get(alert_id)
                if alert is None:
                    raise NotFound(f"Alert {alert_id} not found")
                if alert.reporter != caller:
                    raise Forbidden()
                category, severity, status = validate_update(new_category, new_severity, new_status)
            except UpdateRejected as e:
                logger.warning(f"[REGISTRY] Update of alert {alert_id} by {caller} rejected: {type(e).__name__}")
                raise

            self._alerts[alert_id] = replace(
                alert, category=category, severity=severity, status=status, timestamp=current_time,
            )
            self._updates[alert_id] = AlertUpdate(
                update_category=category,
                update_severity=severity,
                update_status=status,
                update_timestamp=current_time,
                updater=caller,
            )
        logger.info(f"[REGISTRY] Alert {alert_id} updated by {caller}: "
                    f"{category.value} severity={severity} status={status.value}")
        return True

    # ── Queries ───────────────────────────────────────────────────────────
    def get_alert(self, alert_id: int) -> Optional[Alert]:
        with self._lock:
            return self._alerts.get(alert_id)

    def get_alert_update(self, alert_id: int) -> Optional[AlertUpdate]:
        with self._lock:
            return self._updates.get(alert_id)

    def get_count(self) -> int:
        with self._lock:
            return self.next_alert_id

    def check_existence(self, evidence_hash) -> bool:
        if not isinstance(evidence_hash, (bytes, bytearray)):
            return False
        with self._lock:
            return bytes(evidence_hash) in self._ids_by_hash

    def is_verified_authority(self, identity: str) -> bool:
        return bool(self.authority_oracle.is_authorized(identity))

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "beneficiary": self.beneficiary,
                "submission_fee": self.submission_fee,
                "max_alerts": self.max_alerts,
                "alert_count": self.next_alert_id,
            }
