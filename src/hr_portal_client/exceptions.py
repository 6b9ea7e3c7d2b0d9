"""Exceptions raised by hr_portal_client outside the request gateway.

The gateway itself never raises; it reports failures through
:class:`hr_portal_client.outcomes.GatewayFailure`.
"""

from __future__ import annotations

from typing import Any

from hr_portal_client.enums import ErrorCode


class PortalClientError(Exception):
    """Base error carrying a machine-readable code and structured details."""

    def __init__(
        self,
        message: str,
        *,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class CredentialStoreError(PortalClientError):
    """Persisting or removing a stored credential failed."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, error_code=ErrorCode.CREDENTIAL_STORE_ERROR, details=details)


class ConfigurationError(PortalClientError):
    """Settings describe a combination the client cannot work with."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, error_code=ErrorCode.CONFIGURATION_ERROR, details=details)
