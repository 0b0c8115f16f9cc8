"""Parsers from deserialized photo responses into typed models."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..core.errors import FlickrProtocolError
from ..core.values import to_flag, to_int, to_text
from ..core.xml_parsing import XmlObject, XmlShape
from .models import Photo, PhotoDetail, PhotoPage, PhotoSize
from .urls import build_photo_urls

PHOTO_PAGE_SHAPE = XmlShape(force_list=("photo",), key_attr=(("photo", "id"),))
PHOTO_INFO_SHAPE = XmlShape(force_list=("tag", "url"), key_attr=(("tag", "id"),))
PHOTO_SIZES_SHAPE = XmlShape(force_list=("size",))


def _as_object(value: object, name: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise FlickrProtocolError(f"{name} element is missing or not an element")
    return value


def _keyed_items(value: object, name: str) -> Iterable[tuple[str, Mapping[str, object]]]:
    """Yield ``(id, body)`` pairs from an element folded by its ``id`` attribute."""

    if value is None:
        return ()
    if not isinstance(value, Mapping):
        raise FlickrProtocolError(f"every {name} element must carry an id")
    pairs: list[tuple[str, Mapping[str, object]]] = []
    for key, body in value.items():
        pairs.append((str(key), body if isinstance(body, Mapping) else {}))
    return pairs


def photo_from_item(photo_id: str, item: Mapping[str, object]) -> Photo:
    attributes = dict(item)
    attributes["photo_id"] = photo_id
    urls = build_photo_urls(
        photo_id,
        farm=item.get("farm"),
        server=item.get("server"),
        secret=item.get("secret"),
        original_secret=item.get("originalsecret"),
        original_format=item.get("originalformat"),
    )
    return Photo(
        photo_id=photo_id,
        owner=to_text(item.get("owner")),
        secret=to_text(item.get("secret")),
        server=to_text(item.get("server")),
        farm=to_text(item.get("farm")),
        title=to_text(item.get("title")),
        original_secret=to_text(item.get("originalsecret")),
        original_format=to_text(item.get("originalformat")),
        urls=urls,
        attributes=attributes,
    )


def parse_photo_page(payload: XmlObject, *, requested_page: int) -> PhotoPage:
    photos = _as_object(payload.get("photos"), "photos")
    items = _keyed_items(photos.get("photo"), "photo")
    return PhotoPage(
        page=to_int(photos.get("page")) or requested_page,
        pages=to_int(photos.get("pages")),
        per_page=to_int(photos.get("perpage")),
        total=to_int(photos.get("total")),
        photos=[photo_from_item(photo_id, item) for photo_id, item in items],
    )


def parse_photo_tags(tags: object) -> dict[str, str | None]:
    """Flatten ``<tags>`` into ``{tag text: author nsid}``."""

    if not isinstance(tags, Mapping):
        return {}
    result: dict[str, str | None] = {}
    for _tag_id, body in _keyed_items(tags.get("tag"), "tag"):
        text = to_text(body.get("content"))
        if text is None:
            continue
        result[text] = to_text(body.get("author"))
    return result


def _photo_page_url(photo: Mapping[str, object]) -> str | None:
    urls = photo.get("urls")
    if not isinstance(urls, Mapping):
        return None
    entries = urls.get("url") or []
    for entry in entries if isinstance(entries, list) else [entries]:
        if isinstance(entry, Mapping) and entry.get("type") == "photopage":
            return to_text(entry.get("content"))
    return None


def parse_photo_info(payload: XmlObject) -> PhotoDetail:
    photo = _as_object(payload.get("photo"), "photo")
    photo_id = to_text(photo.get("id"))
    if not photo_id:
        raise FlickrProtocolError("photo element must carry an id")

    owner = photo.get("owner") if isinstance(photo.get("owner"), Mapping) else {}
    visibility = photo.get("visibility") if isinstance(photo.get("visibility"), Mapping) else {}
    dates = photo.get("dates") if isinstance(photo.get("dates"), Mapping) else {}

    return PhotoDetail(
        photo_id=photo_id,
        secret=to_text(photo.get("secret")),
        server=to_text(photo.get("server")),
        farm=to_text(photo.get("farm")),
        title=to_text(photo.get("title")),
        description=to_text(photo.get("description")),
        owner_nsid=to_text(owner.get("nsid")),
        owner_username=to_text(owner.get("username")),
        is_public=to_flag(visibility.get("ispublic")),
        posted=to_text(dates.get("posted")),
        taken=to_text(dates.get("taken")),
        last_update=to_text(dates.get("lastupdate")),
        page_url=_photo_page_url(photo),
        urls=build_photo_urls(
            photo_id,
            farm=photo.get("farm"),
            server=photo.get("server"),
            secret=photo.get("secret"),
            original_secret=photo.get("originalsecret"),
            original_format=photo.get("originalformat"),
        ),
        tags=parse_photo_tags(photo.get("tags")),
        attributes=photo,
    )


def _size_from_item(item: object) -> PhotoSize:
    size = _as_object(item, "size")
    return PhotoSize(
        label=to_text(size.get("label")) or "",
        width=to_int(size.get("width")),
        height=to_int(size.get("height")),
        source=to_text(size.get("source")),
        url=to_text(size.get("url")),
        media=to_text(size.get("media")),
    )


def parse_photo_sizes(payload: XmlObject) -> tuple[PhotoSize, ...]:
    sizes = _as_object(payload.get("sizes"), "sizes")
    return tuple(_size_from_item(item) for item in sizes.get("size") or [])


__all__ = [
    "PHOTO_PAGE_SHAPE",
    "PHOTO_INFO_SHAPE",
    "PHOTO_SIZES_SHAPE",
    "photo_from_item",
    "parse_photo_page",
    "parse_photo_tags",
    "parse_photo_info",
    "parse_photo_sizes",
]
