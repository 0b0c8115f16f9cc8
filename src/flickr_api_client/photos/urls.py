"""Static photo URL construction.

URLs follow the farm/server/secret scheme::

    http://farm{farm}.static.flickr.com/{server}/{id}_{secret}[_s|_t|_m|_b].jpg
    http://farm{farm}.static.flickr.com/{server}/{id}_{originalsecret}_o.{format}

Nothing here checks that a URL actually resolves; sizes that were never
generated for a photo (``large`` for small originals) still get a URL.
"""

from __future__ import annotations

from .models import PhotoUrls

STATIC_URL_TEMPLATE = "http://farm{farm}.static.flickr.com/{server}/{photo_id}_"


def build_photo_urls(
    photo_id: str,
    *,
    farm: object,
    server: object,
    secret: object,
    original_secret: object | None = None,
    original_format: object | None = None,
) -> PhotoUrls:
    base = STATIC_URL_TEMPLATE.format(farm=farm, server=server, photo_id=photo_id)
    original = None
    if original_secret and original_format:
        original = f"{base}{original_secret}_o.{original_format}"
    return PhotoUrls(
        small_square=f"{base}{secret}_s.jpg",
        thumbnail=f"{base}{secret}_t.jpg",
        small=f"{base}{secret}_m.jpg",
        medium=f"{base}{secret}.jpg",
        large=f"{base}{secret}_b.jpg",
        original=original,
    )


__all__ = [
    "STATIC_URL_TEMPLATE",
    "build_photo_urls",
]
