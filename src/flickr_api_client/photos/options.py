"""Listing option models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_EXTRAS = (
    "license,date_upload,date_taken,owner_name,icon_server,original_format,"
    "last_update,geo,tags,machine_tags,o_dims,views,media"
)


class SafeSearch(str, Enum):
    SAFE = "safe"
    MODERATE = "moderate"
    RESTRICTED = "restricted"

    @property
    def code(self) -> int:
        return _SAFE_SEARCH_CODES[self]


_SAFE_SEARCH_CODES = {
    SafeSearch.SAFE: 1,
    SafeSearch.MODERATE: 2,
    SafeSearch.RESTRICTED: 3,
}


@dataclass(slots=True, frozen=True)
class ListingOptions:
    """Options for paginated photo listings.

    safe_search accepts a ``SafeSearch`` or its string value; any other
    string is ignored. extras defaults to ``DEFAULT_EXTRAS``.
    """

    per_page: int | None = None
    safe_search: SafeSearch | str | None = None
    extras: str | None = None
    start_page: int | None = None


__all__ = [
    "DEFAULT_EXTRAS",
    "SafeSearch",
    "ListingOptions",
]
