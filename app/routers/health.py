# app/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB + registry counters.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.dependencies import get_registry
from app.services.alert_registry import AlertRegistry
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db), registry: AlertRegistry = Depends(get_registry)):
    """
    Returns:
    - Backend status
    - Database connectivity (authorities + fee ledger tables)
    - Registry alert count and whether the beneficiary is configured
    """
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
        "registry": {},
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    snapshot = registry.snapshot()
    result["registry"] = {
        "alert_count": snapshot["alert_count"],
        "max_alerts": snapshot["max_alerts"],
        "beneficiary_configured": snapshot["beneficiary"] is not None,
    }
    return result
