# app/dependencies.py
"""
FastAPI dependencies for the registry routers.
The registry and clock live on app.state (set at startup) so tests can
swap them through app.dependency_overrides.
"""

from typing import Optional

from fastapi import Header, HTTPException, Request

from app.services.alert_registry import AlertRegistry
from app.services.clock import BlockClock


def get_registry(request: Request) -> AlertRegistry:
    return request.app.state.registry


def get_clock(request: Request) -> BlockClock:
    return request.app.state.clock


def get_caller(x_principal: Optional[str] = Header(None)) -> str:
    """Identity of the caller, taken from the X-Principal header."""
    if not x_principal:
        raise HTTPException(status_code=401, detail="Missing X-Principal header")
    return x_principal
