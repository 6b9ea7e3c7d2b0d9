"""Protocol definitions for credential storage."""

from __future__ import annotations

from typing import Protocol


class CredentialStoreProtocol(Protocol):
    """Key-value surface holding the bearer token and the companion role."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete key. Removing an absent key is a no-op."""
        ...
