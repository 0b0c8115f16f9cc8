"""Photo APIs."""

from .listing import PhotoListing, PhotoPageIterator
from .models import Photo, PhotoDetail, PhotoPage, PhotoSize, PhotoUrls
from .options import DEFAULT_EXTRAS, ListingOptions, SafeSearch
from .urls import build_photo_urls

__all__ = [
    "DEFAULT_EXTRAS",
    "ListingOptions",
    "SafeSearch",
    "Photo",
    "PhotoDetail",
    "PhotoPage",
    "PhotoSize",
    "PhotoUrls",
    "PhotoListing",
    "PhotoPageIterator",
    "build_photo_urls",
]
