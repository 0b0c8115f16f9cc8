"""Core result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import ErrorRecord, FlickrRemoteError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class ApiResult(Generic[T]):
    """Outcome of one remote operation: a value or an error record, never both."""

    value: T | None = None
    error: ErrorRecord | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise FlickrRemoteError.from_record(self.error)
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: ErrorRecord) -> "ApiResult[T]":
        return cls(value=None, error=error)


class ErrorState:
    """Last-error slot owned by a single client instance.

    Every operation overwrites it: failures store their record, successes
    clear it. Page fetches inside a listing count as operations.
    """

    def __init__(self) -> None:
        self._last: ErrorRecord | None = None

    @property
    def last(self) -> ErrorRecord | None:
        return self._last

    def record(self, error: ErrorRecord) -> None:
        self._last = error

    def clear(self) -> None:
        self._last = None


__all__ = [
    "ApiResult",
    "ErrorState",
]
