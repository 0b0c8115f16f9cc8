"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType

from .auth.service import AuthService
from .config import Credentials, FlickrClientConfig
from .core.errors import ErrorRecord, FlickrValidationError
from .core.executor import RequestExecutor
from .core.models import ApiResult, ErrorState
from .core.operations import run_operation
from .core.transport import SyncTransport
from .core.xml_parsing import XmlObject
from .people.service import PeopleService
from .photos.service import PhotoService

_ECHO_RESERVED = frozenset({"method", "api_key", "stat"})


def validate_client_config(config: FlickrClientConfig, credentials: Credentials) -> None:
    try:
        config.validate()
        credentials.validate()
    except ValueError as exc:
        raise FlickrValidationError(str(exc)) from exc


def _parse_echo(payload: XmlObject) -> dict[str, object]:
    return {key: value for key, value in payload.items() if key not in _ECHO_RESERVED}


class FlickrClient:
    """Public Flickr API client.

    Operations return ``ApiResult`` values instead of raising on expected
    failures. ``last_error`` mirrors the error of the most recent operation,
    including each page fetch of a running listing.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        config: FlickrClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or FlickrClientConfig()
        validate_client_config(self._config, credentials)

        self._transport = transport or SyncTransport(self._config)
        self._executor = RequestExecutor(self._config, credentials, self._transport)
        self._errors = ErrorState()
        self.auth = AuthService(self._executor, self._errors)
        self.people = PeopleService(self._executor, self._errors)
        self.photos = PhotoService(self._executor, self._errors)

    @property
    def config(self) -> FlickrClientConfig:
        return self._config

    @property
    def credentials(self) -> Credentials:
        return self._executor.credentials

    @property
    def last_error(self) -> ErrorRecord | None:
        return self._errors.last

    @property
    def closed(self) -> bool:
        return self._transport.closed

    def echo(self, **params: object) -> ApiResult[Mapping[str, object]]:
        """Send ``params`` to ``flickr.test.echo`` and return what came back.

        With no parameters there is nothing to echo: an empty mapping is
        returned without a request and ``last_error`` is left as it was.
        """

        if not params:
            return ApiResult.success({})
        return run_operation(
            self._executor,
            self._errors,
            operation="echo",
            method="flickr.test.echo",
            params=params,
            parse=_parse_echo,
        )

    def close(self) -> None:
        self._executor.close()

    def __enter__(self) -> "FlickrClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "FlickrClient",
    "validate_client_config",
]
