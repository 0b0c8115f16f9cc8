"""Pagination helpers based on page numbers."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

P = TypeVar("P")


def compute_max_pages(total: int | None, per_page: int | None) -> int:
    """``total // per_page + 1`` when a page size is set, otherwise a single page."""

    if not per_page:
        return 1
    return max(total or 0, 0) // per_page + 1


def iterate_pages(
    fetch_page: Callable[[int], P | None],
    *,
    start_page: int = 1,
    max_pages: int = 1,
) -> Iterator[P]:
    """Fetch pages ``start_page..max_pages`` one at a time, on demand.

    A page is requested only after the consumer has moved past the previous
    one. Iteration stops at the first page ``fetch_page`` reports as None.
    """

    current = start_page
    while current <= max_pages:
        page = fetch_page(current)
        if page is None:
            return
        yield page
        current += 1


__all__ = [
    "compute_max_pages",
    "iterate_pages",
]
