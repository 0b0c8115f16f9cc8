"""Sync HTTP transport with throttling."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Protocol

import httpx

from ..config import FlickrClientConfig
from .errors import FlickrClientClosedError
from .throttling import MinIntervalThrottler

logger = logging.getLogger("flickr_api_client")

QueryPairs = Sequence[tuple[str, str]]


class SyncTransportClient(Protocol):
    def get(self, url: str, params: QueryPairs) -> object: ...
    def close(self) -> None: ...


def build_default_headers(config: FlickrClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: FlickrClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


class SyncTransport:
    """Blocking GET transport for the REST endpoint.

    Any failure to obtain a body (network error, non-2xx status, empty body)
    is logged and reported as None; nothing is retried.
    """

    def __init__(
        self,
        config: FlickrClientConfig,
        *,
        client: SyncTransportClient | None = None,
        sleeper: Callable[[float], None] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._throttler = MinIntervalThrottler(
            config.throttling.min_wait_interval_seconds,
            clock=clock or time.monotonic,
            sleeper=sleeper or time.sleep,
        )
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def fetch(self, url: str, *, params: QueryPairs) -> str | None:
        if self._closed:
            raise FlickrClientClosedError("transport is already closed")

        method = _method_name(params)
        logger.debug("request start method=%s", method)
        waited = self._throttler.wait()
        if waited:
            logger.debug("request throttled method=%s waited=%.3f", method, waited)

        try:
            response = self._client.get(url, params=list(params))
        except httpx.HTTPError as exc:
            logger.error(
                "request network error method=%s error=%s",
                method,
                exc.__class__.__name__,
            )
            return None

        http_status = getattr(response, "status_code", None)
        logger.debug("response received method=%s http_status=%s", method, http_status)
        if http_status is not None and not 200 <= http_status < 300:
            logger.error("request failed method=%s http_status=%s", method, http_status)
            return None

        body = getattr(response, "text", None)
        if not body:
            logger.warning("empty response body method=%s", method)
            return None
        return body


def _method_name(params: QueryPairs) -> str | None:
    for name, value in params:
        if name == "method":
            return value
    return None


__all__ = [
    "SyncTransport",
    "SyncTransportClient",
    "build_default_headers",
    "build_default_timeout",
]
