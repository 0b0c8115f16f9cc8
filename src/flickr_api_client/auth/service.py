"""Frob-based authentication handshake.

The sequence is: ``get_frob`` -> send the user to ``get_auth_url(frob, perms)``
-> ``get_token(frob)`` once they approved -> ``check_token`` whenever the
session token needs revalidating. Every step is signed with the shared secret.
"""

from __future__ import annotations

import logging

import httpx

from ..core.executor import RequestExecutor
from ..core.models import ApiResult, ErrorState
from ..core.operations import run_operation
from .models import AuthToken, Permission
from .parser import parse_auth_token, parse_frob

logger = logging.getLogger("flickr_api_client")


class AuthService:
    def __init__(self, executor: RequestExecutor, errors: ErrorState) -> None:
        self._executor = executor
        self._errors = errors

    def get_frob(self) -> ApiResult[str]:
        return run_operation(
            self._executor,
            self._errors,
            operation="get_frob",
            method="flickr.auth.getFrob",
            parse=parse_frob,
            signed=True,
        )

    def get_auth_url(self, frob: str, perms: Permission | str) -> str | None:
        """URL where the user grants ``perms`` to this application; None without both arguments."""

        permission = perms.value if isinstance(perms, Permission) else perms
        if not frob or not permission:
            return None
        params = self._executor.signed_params({"frob": frob, "perms": permission})
        query = [("api_key", self._executor.credentials.api_key)]
        query.extend(sorted(params.items()))
        return str(httpx.URL(self._executor.config.auth_url, params=query))

    def get_token(self, frob: str) -> ApiResult[AuthToken]:
        """Exchange an approved frob for a session token and start using it."""

        result = run_operation(
            self._executor,
            self._errors,
            operation="get_token",
            method="flickr.auth.getToken",
            params={"frob": frob},
            parse=parse_auth_token,
            signed=True,
        )
        if result.value is not None:
            self._executor.replace_auth_token(result.value.token)
            logger.info("session token replaced perms=%s", result.value.perms)
        return result

    def check_token(self) -> ApiResult[AuthToken]:
        return run_operation(
            self._executor,
            self._errors,
            operation="check_token",
            method="flickr.auth.checkToken",
            parse=parse_auth_token,
            signed=True,
            with_token=True,
        )


__all__ = [
    "AuthService",
]
