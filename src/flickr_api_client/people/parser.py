"""Parsers from deserialized people responses into typed models."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.errors import FlickrProtocolError
from ..core.values import to_int, to_text
from ..core.xml_parsing import XmlObject
from .models import User


def parse_user_nsid(payload: XmlObject) -> str:
    """NSID from a ``<user>`` lookup answer (``nsid`` attribute, else ``id``)."""

    user = payload.get("user")
    if not isinstance(user, Mapping):
        raise FlickrProtocolError("user element is missing")
    nsid = to_text(user.get("nsid")) or to_text(user.get("id"))
    if not nsid:
        raise FlickrProtocolError("user element carries no nsid")
    return nsid


def parse_person(payload: XmlObject) -> User:
    person = payload.get("person")
    if not isinstance(person, Mapping):
        raise FlickrProtocolError("person element is missing")
    nsid = to_text(person.get("nsid")) or to_text(person.get("id"))
    if not nsid:
        raise FlickrProtocolError("person element carries no nsid")

    photos = person.get("photos")
    if not isinstance(photos, Mapping):
        photos = {}
    return User(
        nsid=nsid,
        username=to_text(person.get("username")),
        realname=to_text(person.get("realname")),
        location=to_text(person.get("location")),
        photos_url=to_text(person.get("photosurl")),
        profile_url=to_text(person.get("profileurl")),
        photo_count=to_int(to_text(photos.get("count"))),
        first_date=to_text(photos.get("firstdate")),
        first_date_taken=to_text(photos.get("firstdatetaken")),
    )


__all__ = [
    "parse_user_nsid",
    "parse_person",
]
