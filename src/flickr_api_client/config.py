"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Credentials:
    """API key, shared secret and optional session token."""

    api_key: str
    api_secret: str | None = field(default=None, repr=False)
    auth_token: str | None = field(default=None, repr=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Credentials":
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("FLICKR_API_KEY", ""),
            api_secret=env.get("FLICKR_API_SECRET") or None,
            auth_token=env.get("FLICKR_AUTH_TOKEN") or None,
        )

    def validate(self) -> None:
        if not self.api_key:
            raise ValueError("credentials.api_key must not be empty")


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ThrottlingConfig:
    """Throttling-related settings."""

    min_wait_interval_seconds: float = 1.0

    def validate(self) -> None:
        if self.min_wait_interval_seconds < 0:
            raise ValueError("throttling.min_wait_interval_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class FlickrClientConfig:
    """Runtime configuration for the Flickr client."""

    base_url: str = "http://api.flickr.com/services/rest"
    auth_url: str = "http://flickr.com/services/auth"
    user_agent: str = "flickr-api-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    throttling: ThrottlingConfig = field(default_factory=ThrottlingConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.auth_url:
            raise ValueError("auth_url must not be empty")
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.transport.validate()
        self.throttling.validate()


__all__ = [
    "Credentials",
    "TransportConfig",
    "ThrottlingConfig",
    "FlickrClientConfig",
]
