"""Dependency Injection providers for the HR portal client.

Provides a Dishka APP-scoped provider wiring settings, the shared HTTP client,
credential storage, the authenticated gateway and the feature clients.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from dishka import Provider, Scope, provide

from hr_portal_client.clients import CourseClientImpl, EmployeeClientImpl, ProjectClientImpl
from hr_portal_client.config import ClientSettings, settings
from hr_portal_client.credentials import (
    CredentialProvider,
    CredentialStoreProtocol,
    JsonFileCredentialStore,
)
from hr_portal_client.gateway import AuthenticatedGateway
from hr_portal_client.protocols import (
    CourseClientProtocol,
    EmployeeClientProtocol,
    GatewayProtocol,
    ProjectClientProtocol,
)
from hr_portal_client.transport import HttpTransportProtocol, HttpxTransport


class PortalClientProvider(Provider):
    """Infrastructure provider for the HR portal client.

    Provides APP-scoped dependencies: config, HTTP client, credential storage,
    gateway and feature clients.
    """

    scope = Scope.APP

    def __init__(self, config: ClientSettings | None = None) -> None:
        super().__init__()
        self._config = config or settings

    @provide
    def get_config(self) -> ClientSettings:
        """Provide settings."""
        return self._config

    @provide
    async def get_http_client(self, config: ClientSettings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(config.HTTP_TIMEOUT_SECONDS),
            follow_redirects=True,
        ) as client:
            yield client

    @provide
    def provide_credential_store(self, config: ClientSettings) -> CredentialStoreProtocol:
        return JsonFileCredentialStore(config.CREDENTIAL_STORE_PATH)

    @provide
    def provide_credential_provider(
        self, store: CredentialStoreProtocol, config: ClientSettings
    ) -> CredentialProvider:
        return CredentialProvider(store, token_key=config.TOKEN_KEY, role_key=config.ROLE_KEY)

    @provide
    def provide_transport(self, http_client: httpx.AsyncClient) -> HttpTransportProtocol:
        return HttpxTransport(http_client)

    @provide
    def provide_gateway(
        self,
        transport: HttpTransportProtocol,
        credentials: CredentialProvider,
        config: ClientSettings,
    ) -> GatewayProtocol:
        return AuthenticatedGateway.from_settings(transport, credentials, config)

    @provide
    def provide_employee_client(
        self, gateway: GatewayProtocol, config: ClientSettings
    ) -> EmployeeClientProtocol:
        return EmployeeClientImpl(gateway, config)

    @provide
    def provide_course_client(
        self, gateway: GatewayProtocol, config: ClientSettings
    ) -> CourseClientProtocol:
        return CourseClientImpl(gateway, config)

    @provide
    def provide_project_client(
        self, gateway: GatewayProtocol, config: ClientSettings
    ) -> ProjectClientProtocol:
        return ProjectClientImpl(gateway, config)
