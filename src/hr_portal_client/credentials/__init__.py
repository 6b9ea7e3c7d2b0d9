"""Credential storage for the HR portal client."""

from hr_portal_client.credentials.file_store import JsonFileCredentialStore
from hr_portal_client.credentials.memory_store import InMemoryCredentialStore
from hr_portal_client.credentials.protocols import CredentialStoreProtocol
from hr_portal_client.credentials.provider import CredentialProvider

__all__ = [
    "CredentialProvider",
    "CredentialStoreProtocol",
    "InMemoryCredentialStore",
    "JsonFileCredentialStore",
]
