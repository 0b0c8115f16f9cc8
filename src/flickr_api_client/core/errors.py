"""Error types and status classification."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .values import to_int


def extract_status(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("stat")
    return str(value) if value is not None else None


def _extract_err(payload: Mapping[str, object]) -> Mapping[str, object]:
    err = payload.get("err")
    return err if isinstance(err, Mapping) else {}


def extract_error_code(payload: Mapping[str, object] | None) -> int | None:
    if not isinstance(payload, Mapping):
        return None
    return to_int(_extract_err(payload).get("code"))


def extract_error_message(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = _extract_err(payload).get("msg")
    return str(value) if value is not None else None


@dataclass(slots=True, frozen=True)
class ErrorRecord:
    """What went wrong in the most recent failed operation."""

    operation: str
    message: str
    code: int | None = None


class FlickrApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.code = code


class FlickrValidationError(FlickrApiError):
    """Invalid configuration or request options."""


class FlickrClientClosedError(FlickrApiError):
    """Raised when client is used after close."""


class FlickrProtocolError(FlickrApiError):
    """Response shape does not match what the operation expects."""


class FlickrRemoteError(FlickrApiError):
    """A failed operation surfaced as an exception by ``ApiResult.unwrap``."""

    @classmethod
    def from_record(cls, record: ErrorRecord) -> "FlickrRemoteError":
        return cls(record.message, operation=record.operation, code=record.code)


def classify_response(
    payload: Mapping[str, object] | None,
    *,
    operation: str,
) -> ErrorRecord | None:
    """Map a deserialized ``<rsp>`` envelope to an error record, or None on success."""

    if payload is None:
        return ErrorRecord(operation=operation, message="empty or unreadable response")

    status = extract_status(payload)
    if status == "ok":
        return None

    message = extract_error_message(payload)
    if message is None:
        message = (
            "response status is missing"
            if status is None
            else f"request failed with status {status!r}"
        )
    return ErrorRecord(
        operation=operation,
        message=message,
        code=extract_error_code(payload),
    )


__all__ = [
    "ErrorRecord",
    "FlickrApiError",
    "FlickrValidationError",
    "FlickrClientClosedError",
    "FlickrProtocolError",
    "FlickrRemoteError",
    "extract_status",
    "extract_error_code",
    "extract_error_message",
    "classify_response",
]
