"""Photo operations."""

from __future__ import annotations

from ..core.executor import RequestExecutor
from ..core.models import ApiResult, ErrorState
from ..core.operations import run_operation
from ..people.models import User
from .listing import PhotoListing, PhotoPageIterator
from .models import PhotoDetail, PhotoSize
from .options import ListingOptions
from .params import (
    build_photo_info_params,
    build_photo_sizes_params,
    build_public_photos_params,
    validate_listing_options,
)
from .parser import PHOTO_INFO_SHAPE, PHOTO_SIZES_SHAPE, parse_photo_info, parse_photo_sizes


class PhotoService:
    def __init__(self, executor: RequestExecutor, errors: ErrorState) -> None:
        self._executor = executor
        self._errors = errors

    def get_info(self, photo_id: str, secret: str | None = None) -> ApiResult[PhotoDetail]:
        return run_operation(
            self._executor,
            self._errors,
            operation="get_photo_info",
            method="flickr.photos.getInfo",
            params=build_photo_info_params(photo_id, secret),
            parse=parse_photo_info,
            shape=PHOTO_INFO_SHAPE,
            with_token=True,
        )

    def get_sizes(self, photo_id: str) -> ApiResult[tuple[PhotoSize, ...]]:
        return run_operation(
            self._executor,
            self._errors,
            operation="get_photo_sizes",
            method="flickr.photos.getSizes",
            params=build_photo_sizes_params(photo_id),
            parse=parse_photo_sizes,
            shape=PHOTO_SIZES_SHAPE,
            with_token=True,
        )

    def iter_public_photo_pages(
        self,
        owner: User,
        options: ListingOptions | None = None,
    ) -> PhotoPageIterator:
        """Pages of ``owner``'s public photos; the page count comes from ``owner.photo_count``."""

        resolved = options or ListingOptions()
        validate_listing_options(resolved)
        return PhotoPageIterator(
            self._executor,
            self._errors,
            operation="get_public_photos",
            method="flickr.people.getPublicPhotos",
            params=build_public_photos_params(owner.nsid, resolved),
            total=owner.photo_count,
            per_page=resolved.per_page,
            start_page=resolved.start_page or 1,
        )

    def iter_public_photos(
        self,
        owner: User,
        options: ListingOptions | None = None,
    ) -> PhotoListing:
        """Every public photo of ``owner``, one at a time, fetching pages on demand."""

        return PhotoListing(self.iter_public_photo_pages(owner, options))


__all__ = [
    "PhotoService",
]
