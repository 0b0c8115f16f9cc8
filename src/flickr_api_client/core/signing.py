"""Request signing."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping


def build_signature_base(secret: str, params: Mapping[str, object | None]) -> str:
    parts = [secret]
    for name in sorted(params):
        value = params[name]
        parts.append(name)
        parts.append("" if value is None else str(value))
    return "".join(parts)


def sign(secret: str | None, params: Mapping[str, object | None]) -> str | None:
    """Return the lowercase hex MD5 ``api_sig`` for ``params``.

    Names are taken in codepoint order and each is followed directly by its
    value; ``None`` values contribute an empty string. Without a secret there
    is nothing to sign and None is returned.
    """

    if not secret:
        return None
    base = build_signature_base(secret, params)
    return hashlib.md5(base.encode("utf-8")).hexdigest()


__all__ = [
    "build_signature_base",
    "sign",
]
