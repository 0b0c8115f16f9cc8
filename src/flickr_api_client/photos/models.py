"""Photo domain and response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _readonly(mapping: Mapping[str, object]) -> Mapping[str, object]:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(slots=True, frozen=True)
class PhotoUrls:
    small_square: str
    thumbnail: str
    small: str
    medium: str
    large: str
    original: str | None


@dataclass(slots=True, frozen=True)
class Photo:
    photo_id: str
    owner: str | None
    secret: str | None
    server: str | None
    farm: str | None
    title: str | None
    original_secret: str | None
    original_format: str | None
    urls: PhotoUrls
    attributes: Mapping[str, object] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _readonly(self.attributes))


@dataclass(slots=True, frozen=True)
class PhotoPage:
    page: int
    pages: int | None
    per_page: int | None
    total: int | None
    photos: tuple[Photo, ...] | list[Photo] = ()

    def __post_init__(self) -> None:
        if isinstance(self.photos, tuple):
            return
        object.__setattr__(self, "photos", tuple(self.photos))


@dataclass(slots=True, frozen=True)
class PhotoSize:
    label: str
    width: int | None
    height: int | None
    source: str | None
    url: str | None
    media: str | None


@dataclass(slots=True, frozen=True)
class PhotoDetail:
    photo_id: str
    secret: str | None
    server: str | None
    farm: str | None
    title: str | None
    description: str | None
    owner_nsid: str | None
    owner_username: str | None
    is_public: bool | None
    posted: str | None
    taken: str | None
    last_update: str | None
    page_url: str | None
    urls: PhotoUrls
    tags: Mapping[str, str | None] = field(default_factory=dict)
    attributes: Mapping[str, object] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _readonly(self.tags))
        object.__setattr__(self, "attributes", _readonly(self.attributes))


__all__ = [
    "PhotoUrls",
    "Photo",
    "PhotoPage",
    "PhotoSize",
    "PhotoDetail",
]
