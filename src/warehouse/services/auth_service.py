# src/warehouse/services/auth_service.py
from __future__ import annotations

from warehouse.core.metrics import AUTH_ATTEMPTS
from warehouse.domain.ports import CredentialSourcePort


class AuthService:
    def __init__(self, credentials: CredentialSourcePort) -> None:
        self._credentials = credentials

    def authenticate(self, username: str, password: str) -> bool:
        """Checks the pair against the credential source, which is re-read on every call."""
        ok = self._credentials.check_credentials(username, password)
        AUTH_ATTEMPTS.labels(outcome="success" if ok else "failure").inc()
        return ok
