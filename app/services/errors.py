# app/services/errors.py
"""
Error taxonomy for the alert registry.

Every rejection is a RegistryError subclass. `code` carries the numeric
error code of the on-chain alert-registry contract where one exists, and
`http_status` is what the API layer answers with. Errors are raised before
any state is touched, so a caught RegistryError leaves the registry as it was.
"""

from typing import Optional


# Numeric codes for field validation failures, keyed by field name
VALIDATION_CODES = {
    "category": 101,
    "geolocation": 102,
    "evidence_hash": 103,
    "severity": 104,
    "status": 105,
    "reputation": 113,
    "alert_type": 115,
    "region": 118,
    "proof_level": 119,
    "resolution_time": 120,
}


class RegistryError(Exception):
    code: Optional[int] = None
    http_status: int = 400
    message: str = "Registry operation rejected"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.field: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "detail": str(self),
            "error": type(self).__name__,
            "code": self.code,
            "field": self.field,
        }


class CapacityExceeded(RegistryError):
    code = 114
    http_status = 409
    message = "Maximum number of alerts reached"


class ValidationFailed(RegistryError):
    http_status = 422

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"Invalid {field.replace('_', ' ')}")
        self.field = field
        self.code = VALIDATION_CODES.get(field)


class NotAuthorized(RegistryError):
    code = 100
    http_status = 403
    message = "Caller is not a verified authority"


class DuplicateEvidence(RegistryError):
    code = 106
    http_status = 409
    message = "An alert with this evidence hash already exists"


class BeneficiaryNotConfigured(RegistryError):
    code = 109
    http_status = 409
    message = "Fee beneficiary has not been configured"


class AlreadyConfigured(RegistryError):
    http_status = 409
    message = "Fee beneficiary is already configured"


class InvalidBeneficiary(RegistryError):
    http_status = 422
    message = "Identity cannot receive submission fees"


class NotConfigured(RegistryError):
    http_status = 409
    message = "Registry settings are locked until a beneficiary is configured"


class UpdateRejected(RegistryError):
    """Base for every way an alert update can fail."""
    message = "Alert update rejected"


class NotFound(UpdateRejected):
    code = 107
    http_status = 404
    message = "Alert not found"


class Forbidden(UpdateRejected):
    http_status = 403
    message = "Only the original reporter may update an alert"


class InvalidUpdate(UpdateRejected):
    http_status = 422

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"Invalid updated {field}")
        self.field = field
        self.code = VALIDATION_CODES.get(field)
