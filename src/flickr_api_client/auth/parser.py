"""Parsers for the authentication handshake responses."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.errors import FlickrProtocolError
from ..core.values import to_text
from ..core.xml_parsing import XmlObject
from .models import AuthToken


def parse_frob(payload: XmlObject) -> str:
    frob = to_text(payload.get("frob"))
    if not frob:
        raise FlickrProtocolError("frob element is missing")
    return frob


def parse_auth_token(payload: XmlObject) -> AuthToken:
    auth = payload.get("auth")
    if not isinstance(auth, Mapping):
        raise FlickrProtocolError("auth element is missing")
    token = to_text(auth.get("token"))
    if not token:
        raise FlickrProtocolError("auth element carries no token")

    user = auth.get("user")
    if not isinstance(user, Mapping):
        user = {}
    return AuthToken(
        token=token,
        perms=to_text(auth.get("perms")),
        user_nsid=to_text(user.get("nsid")),
        username=to_text(user.get("username")),
        fullname=to_text(user.get("fullname")),
    )


__all__ = [
    "parse_frob",
    "parse_auth_token",
]
