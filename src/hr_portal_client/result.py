"""Result[T, E] type for error discrimination without raising exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Either a success value or an error value, never both.

    Construct with ``Result.ok(value)`` or ``Result.err(error)`` and branch on
    ``is_ok``/``is_err``. Accessing the wrong side raises ``ValueError``.
    """

    _value: T | None = None
    _error: E | None = None
    _is_ok: bool = True

    @classmethod
    def ok(cls, value: T) -> Result[T, E]:
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> Result[T, E]:
        return cls(_error=error, _is_ok=False)

    @property
    def is_ok(self) -> bool:
        return self._is_ok

    @property
    def is_err(self) -> bool:
        return not self._is_ok

    @property
    def value(self) -> T:
        if not self._is_ok:
            raise ValueError("Called value on Result.err")
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> E:
        if self._is_ok:
            raise ValueError("Called error on Result.ok")
        return self._error  # type: ignore[return-value]
