"""Authenticated request gateway.

Every feature client sends its HTTP calls through :class:`AuthenticatedGateway`.
One call issues one request with the stored bearer token attached, classifies
the response and, on failure, removes the credential:

- no response at all (transport error): token and role are removed
- status 500: credential is kept so the caller can retry without a new login
- any other non-success status: token is removed, role is kept
- success: the body is decoded as JSON; empty, ``null`` or unparseable bodies
  become the fallback payload ``{<collection>: []}``

No exception escapes :meth:`AuthenticatedGateway.send`. There are no retries
and no timeout at this layer.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx

from hr_portal_client.config import ClientSettings
from hr_portal_client.credentials.provider import CredentialProvider
from hr_portal_client.enums import FailureKind
from hr_portal_client.logging_utils import create_client_logger
from hr_portal_client.models import RequestDescriptor
from hr_portal_client.outcomes import (
    GatewayFailure,
    GatewayOutcome,
    UnifiedFailure,
    collapse,
    fallback_payload,
)
from hr_portal_client.result import Result
from hr_portal_client.transport import HttpTransportProtocol

logger = create_client_logger("hr_portal.gateway")

SERVER_FAILURE_STATUS = 500
JSON_CONTENT_TYPE = "application/json"


class AuthenticatedGateway:
    """Performs authenticated requests and manages the credential on failure."""

    def __init__(
        self,
        transport: HttpTransportProtocol,
        credentials: CredentialProvider,
        *,
        fallback_collection: str = "employees",
        strict_parsing: bool = False,
    ) -> None:
        self._transport = transport
        self._credentials = credentials
        self._fallback_collection = fallback_collection
        self._strict_parsing = strict_parsing

    @classmethod
    def from_settings(
        cls,
        transport: HttpTransportProtocol,
        credentials: CredentialProvider,
        config: ClientSettings,
    ) -> AuthenticatedGateway:
        return cls(
            transport,
            credentials,
            fallback_collection=config.FALLBACK_COLLECTION,
            strict_parsing=config.STRICT_PARSING,
        )

    async def send(self, descriptor: RequestDescriptor) -> GatewayOutcome:
        """Send one request and return ``Result.ok(payload)`` or ``Result.err(failure)``."""
        log_extra = {"method": descriptor.method, "url": descriptor.url}

        try:
            token = self._credentials.read_token()
            response = await self._issue(descriptor, build_headers(descriptor, token))
        except Exception as error:
            logger.error("Fetch error", exc_info=True, extra={**log_extra, "error": str(error)})
            cleared = self._discard_credentials(include_role=True)
            return Result.err(
                GatewayFailure(
                    kind=FailureKind.TRANSPORT,
                    message=str(error) or type(error).__name__,
                    credentials_cleared=cleared,
                )
            )

        status = response.status_code
        logger.debug("Request completed", extra={**log_extra, "status_code": status})

        if response.is_success:
            return self._decode(response, descriptor, log_extra)

        if status == SERVER_FAILURE_STATUS:
            return Result.err(
                GatewayFailure(
                    kind=FailureKind.SERVER,
                    message="Server failure",
                    status_code=status,
                )
            )

        # The role is intentionally left in place on this path
        cleared = self._discard_credentials(include_role=False)
        logger.warning("Request rejected, token cleared", extra={**log_extra, "status_code": status})
        return Result.err(
            GatewayFailure(
                kind=FailureKind.AUTH,
                message=f"Request rejected with status {status}",
                status_code=status,
                credentials_cleared=cleared,
            )
        )

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        fallback_collection: str | None = None,
    ) -> Any | UnifiedFailure:
        """Send a request and collapse every failure into the literal ``False``."""
        outcome = await self.send(
            RequestDescriptor(
                url=url,
                method=method,
                body=body,
                headers=headers,
                fallback_collection=fallback_collection,
            )
        )
        return collapse(outcome)

    async def _issue(
        self, descriptor: RequestDescriptor, headers: httpx.Headers
    ) -> httpx.Response:
        if descriptor.is_form:
            return await self._transport.request(
                descriptor.method,
                descriptor.url,
                headers=headers,
                data=descriptor.body.fields,
                files=descriptor.body.files,
            )
        return await self._transport.request(
            descriptor.method,
            descriptor.url,
            headers=headers,
            content=encode_json_body(descriptor.body),
        )

    def _decode(
        self,
        response: httpx.Response,
        descriptor: RequestDescriptor,
        log_extra: dict[str, Any],
    ) -> GatewayOutcome:
        collection = descriptor.fallback_collection or self._fallback_collection
        text = response.text

        try:
            payload = json.loads(text, parse_constant=_reject_constant) if text else None
        except ValueError as error:
            logger.error(
                "Invalid JSON response",
                extra={**log_extra, "raw_text": text, "parse_error": str(error)},
            )
            if self._strict_parsing:
                return Result.err(
                    GatewayFailure(
                        kind=FailureKind.MALFORMED,
                        message=f"Invalid JSON response: {error}",
                        status_code=response.status_code,
                    )
                )
            return Result.ok(fallback_payload(collection))

        if payload is None:
            return Result.ok(fallback_payload(collection))
        return Result.ok(payload)

    def _discard_credentials(self, *, include_role: bool) -> bool:
        try:
            if include_role:
                self._credentials.clear()
            else:
                self._credentials.clear_token()
        except Exception as error:
            logger.error("Failed to clear stored credential", extra={"error": str(error)})
            return False
        return True


def build_headers(descriptor: RequestDescriptor, token: str | None) -> httpx.Headers:
    """Merge caller headers with the bearer credential and, for non-form bodies,
    the JSON content type. Gateway headers replace caller headers of the same name.
    """
    headers = httpx.Headers(descriptor.headers or {})
    # An absent token still goes out as a bare scheme; the server rejects it
    headers["Authorization"] = f"Bearer {token}" if token else "Bearer"
    if not descriptor.is_form:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers


def encode_json_body(body: Any) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    # Strings are treated as already-serialized JSON
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")
