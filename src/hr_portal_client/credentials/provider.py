"""Credential provider injected into the request gateway."""

from __future__ import annotations

from hr_portal_client.credentials.protocols import CredentialStoreProtocol
from hr_portal_client.exceptions import ConfigurationError
from hr_portal_client.logging_utils import create_client_logger

logger = create_client_logger("hr_portal.credentials")


class CredentialProvider:
    """Reads, writes and clears the bearer token and role in a credential store.

    The two storage keys are fixed per provider; login writes both, logout
    clears both.
    """

    def __init__(
        self,
        store: CredentialStoreProtocol,
        *,
        token_key: str = "token",
        role_key: str = "rol",
    ) -> None:
        if not token_key or not role_key:
            raise ConfigurationError("Credential storage keys must be non-empty")
        if token_key == role_key:
            raise ConfigurationError(
                "Token and role must use different storage keys",
                details={"key": token_key},
            )
        self._store = store
        self.token_key = token_key
        self.role_key = role_key

    def read_token(self) -> str | None:
        return self._store.get(self.token_key) or None

    def read_role(self) -> str | None:
        return self._store.get(self.role_key) or None

    @property
    def is_authenticated(self) -> bool:
        return self.read_token() is not None

    def write(self, token: str, role: str | None = None) -> None:
        """Store the credential issued at login."""
        self._store.set(self.token_key, token)
        if role is not None:
            self._store.set(self.role_key, role)

    def clear_token(self) -> None:
        self._store.remove(self.token_key)

    def clear(self) -> None:
        """Remove both the token and the role."""
        self._store.remove(self.token_key)
        self._store.remove(self.role_key)

    def logout(self) -> None:
        self.clear()
        logger.info("Credential removed from store")
