"""Request descriptors passed to the authenticated request gateway."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# (filename, content, content_type); content_type None lets the transport guess
FileTuple = tuple[str, bytes, str | None]


@dataclass(frozen=True)
class FormPayload:
    """Multipart form body.

    The transport generates the boundary and the Content-Type header, so the
    gateway must leave that header alone for this body type.
    """

    fields: Mapping[str, str] = field(default_factory=dict)
    files: Mapping[str, FileTuple] = field(default_factory=dict)


@dataclass(frozen=True)
class RequestDescriptor:
    """One outbound request: target, method, optional body and headers.

    ``body`` is either a :class:`FormPayload`, raw ``bytes`` sent as-is, a ``str``
    holding already-serialized JSON (sent as UTF-8, not re-encoded), or any other
    JSON-serializable value. ``fallback_collection`` overrides the collection
    name used for the empty fallback payload.
    """

    url: str
    method: str = "GET"
    body: Any = None
    headers: Mapping[str, str] | None = None
    fallback_collection: str | None = None

    @property
    def is_form(self) -> bool:
        return isinstance(self.body, FormPayload)
