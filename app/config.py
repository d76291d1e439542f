# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    # Only the authority table and the fee ledger live here; alerts stay in memory.
    DATABASE_URL: str = "sqlite:///./alert_registry.db"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "127.0.0.1"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Registry ──────────────────────────────────────────────────────────
    MAX_ALERTS: int = 10000
    SUBMISSION_FEE: int = 100
    NULL_IDENTITY: str = "SP000000000000000000002Q6VF78"   # burn address, never a valid beneficiary
    BENEFICIARY: Optional[str] = None                       # configured once at startup when set

    # ── Authority oracle ──────────────────────────────────────────────────
    AUTHORITY_BACKEND: str = "static"       # static | database | http
    AUTHORITIES: List[str] = []             # used by the static backend
    AUTHORITY_ORACLE_URL: Optional[str] = None
    AUTHORITY_ORACLE_TIMEOUT: float = 3.0

    # ── Fee ledger ────────────────────────────────────────────────────────
    FEE_LEDGER: str = "memory"              # memory | database

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
