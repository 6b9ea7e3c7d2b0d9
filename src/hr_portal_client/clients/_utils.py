"""Shared helpers for feature clients."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_items(payload: Any, collection: str) -> list[Any]:
    """Return the list held under ``collection``, or the payload itself if it is a list.

    List endpoints answer either ``{"<collection>": [...]}`` or a bare array.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        items = payload.get(collection, [])
        if isinstance(items, list):
            return items
    return []


def unwrap_item(payload: Any, key: str) -> Any:
    """Return ``payload[key]`` when the object is wrapped, else the payload unchanged."""
    if isinstance(payload, dict) and isinstance(payload.get(key), dict):
        return payload[key]
    return payload


def is_empty_body(payload: Any) -> bool:
    """True for the gateway's ``{"<collection>": []}`` stand-in for an empty body."""
    return (
        isinstance(payload, dict)
        and len(payload) == 1
        and next(iter(payload.values())) == []
    )


def parse_item(payload: Any, key: str, model: type[ModelT]) -> ModelT | None:
    """Validate a single-record response, or return None when the body was empty.

    Write endpoints may answer 201/204 without a body; the write still succeeded.
    """
    if is_empty_body(payload):
        return None
    return model.model_validate(unwrap_item(payload, key))
