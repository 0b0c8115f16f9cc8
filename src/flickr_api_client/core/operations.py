"""Run one remote operation into an ``ApiResult``."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from .errors import ErrorRecord, FlickrProtocolError, classify_response
from .executor import RequestExecutor, RequestParams
from .models import ApiResult, ErrorState
from .xml_parsing import FLAT_SHAPE, XmlObject, XmlShape

logger = logging.getLogger("flickr_api_client")

T = TypeVar("T")


def run_operation(
    executor: RequestExecutor,
    errors: ErrorState,
    *,
    operation: str,
    method: str,
    params: RequestParams | None = None,
    parse: Callable[[XmlObject], T],
    shape: XmlShape = FLAT_SHAPE,
    signed: bool = False,
    with_token: bool = False,
) -> ApiResult[T]:
    payload = executor.execute(
        method,
        params,
        shape=shape,
        signed=signed,
        with_token=with_token,
    )
    error = classify_response(payload, operation=operation)
    if error is None:
        try:
            value = parse(payload)  # type: ignore[arg-type]
        except FlickrProtocolError as exc:
            error = ErrorRecord(operation=operation, message=str(exc))
        else:
            errors.clear()
            logger.info("operation success operation=%s method=%s", operation, method)
            return ApiResult.success(value)

    logger.warning(
        "operation failed operation=%s method=%s code=%s message=%s",
        operation,
        method,
        error.code,
        error.message,
    )
    errors.record(error)
    return ApiResult.failure(error)


__all__ = [
    "run_operation",
]
