"""Shared fixtures for HR portal client tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest

from hr_portal_client.config import ClientSettings
from hr_portal_client.credentials import CredentialProvider, InMemoryCredentialStore
from hr_portal_client.gateway import AuthenticatedGateway
from hr_portal_client.transport import HttpxTransport

API_URL = "http://hr-portal.test"
TOKEN = "valid-token"
ROLE = "admin"


@pytest.fixture
def test_settings(tmp_path: Path) -> ClientSettings:
    """Settings pointing at a fake API and a temporary credential file."""
    return ClientSettings(
        _env_file=None,
        API_BASE_URL=API_URL,
        CREDENTIAL_STORE_PATH=tmp_path / "credentials.json",
    )


@pytest.fixture
def store() -> InMemoryCredentialStore:
    """Credential store holding a logged-in session."""
    return InMemoryCredentialStore({"token": TOKEN, "rol": ROLE})


@pytest.fixture
def credentials(store: InMemoryCredentialStore) -> CredentialProvider:
    return CredentialProvider(store)


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx client for respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def gateway(http_client: httpx.AsyncClient, credentials: CredentialProvider) -> AuthenticatedGateway:
    return AuthenticatedGateway(HttpxTransport(http_client), credentials)
