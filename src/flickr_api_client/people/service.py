"""User lookup operations."""

from __future__ import annotations

from ..core.executor import RequestExecutor
from ..core.models import ApiResult, ErrorState
from ..core.operations import run_operation
from .models import User
from .parser import parse_person, parse_user_nsid


class PeopleService:
    """Resolve users by e-mail, username or URL, then load their profile."""

    def __init__(self, executor: RequestExecutor, errors: ErrorState) -> None:
        self._executor = executor
        self._errors = errors

    def get_info(self, nsid: str) -> ApiResult[User]:
        return run_operation(
            self._executor,
            self._errors,
            operation="get_user_info",
            method="flickr.people.getInfo",
            params={"user_id": nsid},
            parse=parse_person,
            with_token=True,
        )

    def find_by_email(self, email: str) -> ApiResult[User]:
        return self._lookup("find_user_by_email", "flickr.people.findByEmail", {"find_email": email})

    def find_by_username(self, username: str) -> ApiResult[User]:
        return self._lookup(
            "find_user_by_username",
            "flickr.people.findByUsername",
            {"username": username},
        )

    def find_by_url(self, url: str) -> ApiResult[User]:
        return self._lookup("find_user_by_url", "flickr.urls.lookupUser", {"url": url})

    def _lookup(self, operation: str, method: str, params: dict[str, str]) -> ApiResult[User]:
        found = run_operation(
            self._executor,
            self._errors,
            operation=operation,
            method=method,
            params=params,
            parse=parse_user_nsid,
        )
        if found.error is not None:
            return ApiResult.failure(found.error)
        return self.get_info(found.value)  # type: ignore[arg-type]


__all__ = [
    "PeopleService",
]
