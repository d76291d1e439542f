# app/services/authority_oracle.py
"""
Authority oracles — answer "may this identity submit alerts?".
The registry only calls is_authorized(identity); pick a backend with
AUTHORITY_BACKEND (static | database | http).
"""

from typing import Iterable
from urllib.parse import quote

import requests

from app.models.authority import Authority
from app.utils.logger import get_logger

logger = get_logger(__name__)


class StaticAuthorityOracle:
    """Fixed allow-list, typically loaded from settings.AUTHORITIES."""

    def __init__(self, identities: Iterable[str] = ()):
        self.identities = set(identities)

    def is_authorized(self, identity: str) -> bool:
        return identity in self.identities


class SqlAuthorityOracle:
    """Looks the identity up in the authorities table."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def is_authorized(self, identity: str) -> bool:
        db = self.session_factory()
        try:
            match = db.query(Authority).filter(
                Authority.identity == identity, Authority.is_verified == 1
            ).first()
            return match is not None
        finally:
            db.close()


class HttpAuthorityOracle:
    """
    Asks a remote authority registry:
        GET {base_url}/authorities/{identity}  ->  {"verified": true|false}
    Anything other than a 200 with verified=true counts as not authorized.
    """

    def __init__(self, base_url: str, timeout: float = 3.0, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def is_authorized(self, identity: str) -> bool:
        # Escaped as one path segment so "/", "?" and "#" cannot redirect the lookup
        url = f"{self.base_url}/authorities/{quote(identity, safe='')}"
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Authority oracle unreachable at {url}: {e}")
            return False

        if resp.status_code != 200:
            logger.warning(f"Authority oracle answered HTTP {resp.status_code} for {identity}")
            return False
        try:
            return resp.json().get("verified") is True
        except ValueError:
            logger.warning(f"Authority oracle sent a non-JSON body for {identity}")
            return False
