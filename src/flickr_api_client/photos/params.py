"""Request parameter builders for photo endpoints."""

from __future__ import annotations

import logging

from ..core.errors import FlickrValidationError
from .options import DEFAULT_EXTRAS, ListingOptions, SafeSearch

logger = logging.getLogger("flickr_api_client")


def resolve_safe_search(value: SafeSearch | str | None) -> int | None:
    if value is None:
        return None
    if isinstance(value, SafeSearch):
        return value.code
    try:
        return SafeSearch(value).code
    except ValueError:
        logger.debug("ignoring unrecognized safe_search value=%r", value)
        return None


def _validate_positive(name: str, value: object) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise FlickrValidationError(f"{name} must be a positive integer")


def validate_listing_options(options: ListingOptions) -> None:
    _validate_positive("per_page", options.per_page)
    _validate_positive("start_page", options.start_page)


def build_public_photos_params(user_id: str, options: ListingOptions) -> dict[str, str]:
    """Parameters shared by every page of a public-photos listing (``page`` excluded)."""

    params: dict[str, str] = {
        "user_id": user_id,
        "extras": options.extras or DEFAULT_EXTRAS,
    }
    safe_search = resolve_safe_search(options.safe_search)
    if safe_search is not None:
        params["safe_search"] = str(safe_search)
    if options.per_page:
        params["per_page"] = str(options.per_page)
    return params


def build_photo_info_params(photo_id: str, secret: str | None = None) -> dict[str, str | None]:
    return {"photo_id": photo_id, "secret": secret}


def build_photo_sizes_params(photo_id: str) -> dict[str, str]:
    return {"photo_id": photo_id}


__all__ = [
    "resolve_safe_search",
    "validate_listing_options",
    "build_public_photos_params",
    "build_photo_info_params",
    "build_photo_sizes_params",
]
