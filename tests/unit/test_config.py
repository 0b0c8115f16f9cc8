from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from flickr_api_client.config import (
    Credentials,
    FlickrClientConfig,
    ThrottlingConfig,
    TransportConfig,
)


def test_config_validate_rejects_empty_base_url():
    cfg = FlickrClientConfig(base_url="")
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_validate_rejects_empty_auth_url():
    cfg = FlickrClientConfig(auth_url="")
    with pytest.raises(ValueError, match="auth_url"):
        cfg.validate()


def test_config_is_immutable():
    cfg = FlickrClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.throttling = ThrottlingConfig(min_wait_interval_seconds=0.0)


def test_config_defaults():
    cfg = FlickrClientConfig()
    cfg.validate()
    assert cfg.base_url == "http://api.flickr.com/services/rest"
    assert cfg.auth_url == "http://flickr.com/services/auth"
    assert cfg.throttling.min_wait_interval_seconds == 1.0


@pytest.mark.parametrize(
    ("section", "field", "value"),
    [
        ("throttling", "min_wait_interval_seconds", -1.0),
        ("transport", "timeout_connect_seconds", 0.0),
        ("transport", "timeout_read_seconds", 0.0),
        ("transport", "timeout_write_seconds", 0.0),
        ("transport", "timeout_pool_seconds", 0.0),
    ],
)
def test_config_validate_rejects_invalid_numeric_values(section, field, value):
    kwargs = {field: value}
    cfg = FlickrClientConfig(
        throttling=ThrottlingConfig(**kwargs) if section == "throttling" else ThrottlingConfig(),
        transport=TransportConfig(**kwargs) if section == "transport" else TransportConfig(),
    )
    with pytest.raises(ValueError):
        cfg.validate()


def test_credentials_hide_secrets_from_repr():
    credentials = Credentials(api_key="k3y", api_secret="s3cret", auth_token="tok")
    text = repr(credentials)
    assert "k3y" in text
    assert "s3cret" not in text
    assert "tok" not in text


def test_credentials_from_env():
    credentials = Credentials.from_env(
        {"FLICKR_API_KEY": "k", "FLICKR_API_SECRET": "s", "FLICKR_AUTH_TOKEN": ""}
    )
    assert credentials == Credentials(api_key="k", api_secret="s", auth_token=None)


def test_credentials_validate_rejects_missing_key():
    with pytest.raises(ValueError, match="api_key"):
        Credentials.from_env({}).validate()
