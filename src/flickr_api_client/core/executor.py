"""Request execution: canonical query, signing, fetch and deserialization."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping

from ..config import Credentials, FlickrClientConfig
from .signing import sign
from .transport import SyncTransport
from .xml_parsing import FLAT_SHAPE, XmlObject, XmlShape, parse_xml_payload

logger = logging.getLogger("flickr_api_client")

RequestParams = Mapping[str, object | None]


def drop_missing(params: RequestParams | None) -> dict[str, str]:
    if not params:
        return {}
    return {name: str(value) for name, value in params.items() if value is not None}


def build_query(method: str, api_key: str, params: RequestParams | None) -> list[tuple[str, str]]:
    """``method`` and ``api_key`` first, then the rest sorted case-insensitively by name."""

    present = drop_missing(params)
    pairs = [("method", method), ("api_key", api_key)]
    for name in sorted(present, key=str.lower):
        pairs.append((name, present[name]))
    return pairs


class RequestExecutor:
    """Runs single REST calls for one set of credentials."""

    def __init__(
        self,
        config: FlickrClientConfig,
        credentials: Credentials,
        transport: SyncTransport,
    ) -> None:
        self._config = config
        self._credentials = credentials
        self._transport = transport

    @property
    def config(self) -> FlickrClientConfig:
        return self._config

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def replace_auth_token(self, auth_token: str) -> None:
        self._credentials = dataclasses.replace(self._credentials, auth_token=auth_token)

    def signed_params(self, params: RequestParams | None) -> dict[str, str]:
        """Return ``params`` (missing values dropped) plus ``api_sig`` when a secret is set.

        The signature covers ``api_key`` and every parameter sent, so callers
        include ``method`` themselves when it is part of the request.
        """

        present = drop_missing(params)
        present.pop("api_sig", None)
        signature = sign(
            self._credentials.api_secret,
            {**present, "api_key": self._credentials.api_key},
        )
        if signature is not None:
            present["api_sig"] = signature
        return present

    def execute(
        self,
        method: str,
        params: RequestParams | None = None,
        *,
        shape: XmlShape = FLAT_SHAPE,
        signed: bool = False,
        with_token: bool = False,
    ) -> XmlObject | None:
        request_params = drop_missing(params)
        if with_token and self._credentials.auth_token:
            request_params["auth_token"] = self._credentials.auth_token
            signed = True
        if signed:
            request_params = self.signed_params({**request_params, "method": method})
            request_params.pop("method")

        query = build_query(method, self._credentials.api_key, request_params)
        body = self._transport.fetch(self._config.base_url, params=query)
        if body is None:
            return None

        payload = parse_xml_payload(body, shape)
        if payload is None:
            logger.warning("response carried no content method=%s", method)
        return payload

    def close(self) -> None:
        self._transport.close()


__all__ = [
    "RequestExecutor",
    "RequestParams",
    "build_query",
    "drop_missing",
]
