# app/services/validation.py
"""
Field rules for alert submissions and updates.
validate_submission() checks fields in a fixed order and raises on the first
violation, so callers always see the same error for the same bad input.
"""

import math
from typing import Optional, Type, TypeVar

from app.services.alert_records import AlertType, Category, Geolocation, Status
from app.services.errors import InvalidUpdate, ValidationFailed

EVIDENCE_HASH_LENGTH = 32
MIN_SEVERITY, MAX_SEVERITY = 1, 10
MAX_REPUTATION = 1000
MAX_REGION_LENGTH = 50
MAX_PROOF_LEVEL = 5

E = TypeVar("E", Category, AlertType, Status)


def enum_member(enum_cls: Type[E], value) -> Optional[E]:
    """Return the enum member named by value, or None when it is not one."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return (_is_int(value) or isinstance(value, float)) and math.isfinite(value)


def severity_ok(severity) -> bool:
    return _is_int(severity) and MIN_SEVERITY <= severity <= MAX_SEVERITY


def geolocation_ok(geolocation) -> bool:
    if not isinstance(geolocation, Geolocation):
        return False
    lat, lon = geolocation.lat, geolocation.lon
    if not (_is_number(lat) and _is_number(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def validate_submission(category, geolocation, evidence_hash, severity, alert_type,
                        reporter_reputation, region, proof_level, resolution_time):
    """
    Check every submitted field in order: category, geolocation, evidence hash,
    severity, alert type, reputation, region, proof level, resolution time.

    Returns the (Category, AlertType) members for the accepted strings.
    Raises ValidationFailed naming the first bad field.
    """
    category_member = enum_member(Category, category)
    if category_member is None:
        raise ValidationFailed("category")
    if not geolocation_ok(geolocation):
        raise ValidationFailed("geolocation")
    if not isinstance(evidence_hash, (bytes, bytearray)) or len(evidence_hash) != EVIDENCE_HASH_LENGTH:
        raise ValidationFailed("evidence_hash")
    if not severity_ok(severity):
        raise ValidationFailed("severity")
    alert_type_member = enum_member(AlertType, alert_type)
    if alert_type_member is None:
        raise ValidationFailed("alert_type")
    # reputation, proof level and resolution time are unsigned quantities
    if not _is_int(reporter_reputation) or not 0 <= reporter_reputation <= MAX_REPUTATION:
        raise ValidationFailed("reputation")
    if not isinstance(region, str) or not region or len(region) > MAX_REGION_LENGTH:
        raise ValidationFailed("region")
    if not _is_int(proof_level) or not 0 <= proof_level <= MAX_PROOF_LEVEL:
        raise ValidationFailed("proof_level")
    if not _is_int(resolution_time) or resolution_time <= 0:
        raise ValidationFailed("resolution_time")
    return category_member, alert_type_member


def validate_update(new_category, new_severity, new_status):
    """Returns (Category, severity, Status); raises InvalidUpdate on the first bad value."""
    category_member = enum_member(Category, new_category)
    if category_member is None:
        raise InvalidUpdate("category")
    if not severity_ok(new_severity):
        raise InvalidUpdate("severity")
    status_member = enum_member(Status, new_status)
    if status_member is None:
        raise InvalidUpdate("status")
    return category_member, new_severity, status_member
