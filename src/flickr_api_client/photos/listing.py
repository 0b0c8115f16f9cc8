"""Lazy, flattened photo listing over a paginated endpoint."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from ..core.errors import ErrorRecord, FlickrProtocolError, classify_response
from ..core.executor import RequestExecutor
from ..core.models import ErrorState
from ..core.pagination import compute_max_pages, iterate_pages
from .models import Photo, PhotoPage
from .parser import PHOTO_PAGE_SHAPE, parse_photo_page

logger = logging.getLogger("flickr_api_client")


class PhotoPageIterator(Iterator[PhotoPage]):
    """Fetches listing pages one by one, ``start_page`` through ``max_pages``.

    A failed fetch ends iteration. The failure is kept on ``error`` and on
    the owning client's error state; nothing is raised and nothing is retried.
    Successful fetches clear both.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        errors: ErrorState,
        *,
        operation: str,
        method: str,
        params: Mapping[str, str],
        total: int | None,
        per_page: int | None,
        start_page: int = 1,
    ) -> None:
        self._executor = executor
        self._errors = errors
        self._operation = operation
        self._method = method
        self._params = dict(params)
        self.max_pages = compute_max_pages(total, per_page)
        self.page = start_page
        self.pages_fetched = 0
        self.error: ErrorRecord | None = None
        self._pages = iterate_pages(
            self._fetch_page,
            start_page=start_page,
            max_pages=self.max_pages,
        )

    def __iter__(self) -> "PhotoPageIterator":
        return self

    def __next__(self) -> PhotoPage:
        return next(self._pages)

    def _fail(self, error: ErrorRecord) -> None:
        logger.warning(
            "listing stopped operation=%s page=%s code=%s message=%s",
            self._operation,
            self.page,
            error.code,
            error.message,
        )
        self.error = error
        self._errors.record(error)

    def _fetch_page(self, page: int) -> PhotoPage | None:
        self.page = page
        payload = self._executor.execute(
            self._method,
            {**self._params, "page": str(page)},
            shape=PHOTO_PAGE_SHAPE,
            with_token=True,
        )
        self.pages_fetched += 1

        error = classify_response(payload, operation=self._operation)
        if error is not None:
            self._fail(error)
            return None
        try:
            result = parse_photo_page(payload, requested_page=page)  # type: ignore[arg-type]
        except FlickrProtocolError as exc:
            self._fail(ErrorRecord(operation=self._operation, message=str(exc)))
            return None

        self.error = None
        self._errors.clear()
        logger.debug(
            "listing page fetched operation=%s page=%s max_pages=%s photos=%s",
            self._operation,
            page,
            self.max_pages,
            len(result.photos),
        )
        return result


class PhotoListing(Iterator[Photo]):
    """Single-pass sequence of photos across all pages of a listing.

    The next page is requested only once every photo of the current page has
    been handed out. Once exhausted, or stopped by a failure, the listing
    stays exhausted; build a new one to enumerate again. Inspect ``error``
    afterwards to tell a failure from a normal end.
    """

    def __init__(self, pages: PhotoPageIterator) -> None:
        self._pages = pages
        self._photos = self._generate()

    @property
    def error(self) -> ErrorRecord | None:
        return self._pages.error

    @property
    def page(self) -> int:
        return self._pages.page

    @property
    def max_pages(self) -> int:
        return self._pages.max_pages

    @property
    def pages_fetched(self) -> int:
        return self._pages.pages_fetched

    def __iter__(self) -> "PhotoListing":
        return self

    def __next__(self) -> Photo:
        return next(self._photos)

    def _generate(self) -> Iterator[Photo]:
        for page in self._pages:
            yield from page.photos


__all__ = [
    "PhotoPageIterator",
    "PhotoListing",
]
