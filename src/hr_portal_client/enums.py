"""
hr_portal_client.enums - Enums shared across the client package.
"""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Defines application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    CREDENTIAL_STORE_ERROR = "CREDENTIAL_STORE_ERROR"

    # Outcomes of an authenticated request
    CONNECTION_ERROR = "CONNECTION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    PARSING_ERROR = "PARSING_ERROR"


class FailureKind(str, Enum):
    """Classification of a failed gateway call."""

    TRANSPORT = "transport"  # no response: network, DNS, connection
    AUTH = "auth"  # any non-success status other than 500
    SERVER = "server"  # exactly 500
    MALFORMED = "malformed"  # unparseable success body, strict mode only

    @property
    def error_code(self) -> ErrorCode:
        return _FAILURE_ERROR_CODES[self]


_FAILURE_ERROR_CODES = {
    FailureKind.TRANSPORT: ErrorCode.CONNECTION_ERROR,
    FailureKind.AUTH: ErrorCode.AUTHENTICATION_ERROR,
    FailureKind.SERVER: ErrorCode.SERVICE_UNAVAILABLE,
    FailureKind.MALFORMED: ErrorCode.PARSING_ERROR,
}
