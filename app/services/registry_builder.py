# app/services/registry_builder.py
"""
Builds an AlertRegistry and its collaborators from Settings.
Called once on startup; the result is kept on app.state.
"""

from app.services.alert_registry import AlertRegistry
from app.services.authority_oracle import HttpAuthorityOracle, SqlAuthorityOracle, StaticAuthorityOracle
from app.services.fee_ledger import InMemoryFeeLedger, SqlFeeLedger
from app.utils.logger import get_logger

logger = get_logger(__name__)


def build_authority_oracle(settings, session_factory):
    backend = settings.AUTHORITY_BACKEND.lower()
    if backend == "static":
        return StaticAuthorityOracle(settings.AUTHORITIES)
    if backend == "database":
        return SqlAuthorityOracle(session_factory)
    if backend == "http":
        if not settings.AUTHORITY_ORACLE_URL:
            raise ValueError("AUTHORITY_BACKEND=http requires AUTHORITY_ORACLE_URL")
        return HttpAuthorityOracle(settings.AUTHORITY_ORACLE_URL, timeout=settings.AUTHORITY_ORACLE_TIMEOUT)
    raise ValueError(f"Unknown AUTHORITY_BACKEND: {settings.AUTHORITY_BACKEND}")


def build_fee_ledger(settings, session_factory):
    backend = settings.FEE_LEDGER.lower()
    if backend == "memory":
        return InMemoryFeeLedger()
    if backend == "database":
        return SqlFeeLedger(session_factory)
    raise ValueError(f"Unknown FEE_LEDGER: {settings.FEE_LEDGER}")


def build_registry(settings, session_factory) -> AlertRegistry:
    registry = AlertRegistry(
        authority_oracle=build_authority_oracle(settings, session_factory),
        fee_sink=build_fee_ledger(settings, session_factory),
        max_alerts=settings.MAX_ALERTS,
        submission_fee=settings.SUBMISSION_FEE,
        null_identity=settings.NULL_IDENTITY,
    )
    if settings.BENEFICIARY:
        registry.configure_beneficiary(settings.BENEFICIARY)
    logger.info(f"Registry ready: authorities={settings.AUTHORITY_BACKEND} "
                f"fees={settings.FEE_LEDGER} capacity={settings.MAX_ALERTS}")
    return registry
