from __future__ import annotations

import dataclasses
from dataclasses import FrozenInstanceError

import pytest

from flickr_api_client.core.models import ApiResult
from flickr_api_client.photos.models import Photo, PhotoPage
from flickr_api_client.photos.urls import build_photo_urls


def _photo(photo_id: str = "1") -> Photo:
    return Photo(
        photo_id=photo_id,
        owner="o",
        secret="abc",
        server="2",
        farm="1",
        title="t",
        original_secret=None,
        original_format=None,
        urls=build_photo_urls(photo_id, farm=1, server=2, secret="abc"),
        attributes={"media": "photo"},
    )


def test_photo_page_photos_is_tuple_and_immutable():
    page = PhotoPage(page=1, pages=1, per_page=1, total=1, photos=[_photo()])
    assert isinstance(page.photos, tuple)
    with pytest.raises(FrozenInstanceError):
        page.photos = ()  # type: ignore[misc]


def test_photo_attributes_are_read_only():
    photo = _photo()
    with pytest.raises(TypeError):
        photo.attributes["media"] = "video"  # type: ignore[index]


def test_photo_equality_ignores_attributes():
    first = _photo()
    second = dataclasses.replace(first, attributes={})
    assert first == second


def test_api_result_is_immutable():
    result = ApiResult.success(1)
    with pytest.raises(FrozenInstanceError):
        result.value = 2  # type: ignore[misc]
