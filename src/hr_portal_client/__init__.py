"""
HR Portal Client Package.

Async client for the HR portal API. Every request goes through the
authenticated gateway, which attaches the stored bearer token and clears it
when the API rejects the session.
"""

from .credentials import CredentialProvider, InMemoryCredentialStore, JsonFileCredentialStore
from .enums import FailureKind
from .gateway import AuthenticatedGateway
from .models import FormPayload, RequestDescriptor
from .outcomes import GatewayFailure, collapse
from .result import Result
from .transport import HttpxTransport

__all__ = [
    "AuthenticatedGateway",
    "CredentialProvider",
    "FailureKind",
    "FormPayload",
    "GatewayFailure",
    "HttpxTransport",
    "InMemoryCredentialStore",
    "JsonFileCredentialStore",
    "RequestDescriptor",
    "Result",
    "collapse",
]
