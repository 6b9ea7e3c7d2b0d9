"""Outcome types returned by the authenticated request gateway.

A gateway call yields ``Result.ok(payload)`` or ``Result.err(GatewayFailure)``.
Callers written against the older contract use :func:`collapse`, which maps
every failure to the literal ``False``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from hr_portal_client.enums import ErrorCode, FailureKind
from hr_portal_client.result import Result


@dataclass(frozen=True)
class GatewayFailure:
    """Represents a failed gateway call with diagnostic information."""

    kind: FailureKind
    message: str
    status_code: int | None = None
    # True when the stored credential was removed; callers should send the
    # user back to login.
    credentials_cleared: bool = False

    @property
    def error_code(self) -> ErrorCode:
        return self.kind.error_code


GatewayOutcome: TypeAlias = Result[Any, GatewayFailure]
UnifiedFailure: TypeAlias = Literal[False]


def fallback_payload(collection: str) -> dict[str, list[Any]]:
    """Empty-collection payload substituted for empty or unparseable bodies."""
    return {collection: []}


def collapse(outcome: GatewayOutcome) -> Any | UnifiedFailure:
    """Collapse a tagged outcome into the payload-or-``False`` contract."""
    if outcome.is_ok:
        return outcome.value
    return False
