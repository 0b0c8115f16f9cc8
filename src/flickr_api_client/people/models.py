"""People domain models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class User:
    """A Flickr account. ``photo_count`` drives listing pagination."""

    nsid: str
    username: str | None = None
    realname: str | None = None
    location: str | None = None
    photos_url: str | None = None
    profile_url: str | None = None
    photo_count: int | None = None
    first_date: str | None = None
    first_date_taken: str | None = None


__all__ = [
    "User",
]
