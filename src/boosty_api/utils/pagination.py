"""Pagination helpers for Boosty API list endpoints.

Two cursor styles are in use:

* posts return an opaque ``extra.offset`` string that is sent back verbatim;
* comments are paged by the numeric id of the last comment already seen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")
C = TypeVar("C")


@dataclass
class Page(Generic[T]):
    """One page as seen by the paginators."""
    items: list[T]
    is_last: bool
    is_first: bool = False
    offset: str | None = None


async def paginate_by_offset(
    fetch_page: Callable[[str | None, int], Awaitable[Page[T]]],
    limit: int | None,
    page_size: int,
) -> list[T]:
    """Collect items across pages using the server's opaque offset.

    Args:
        fetch_page: Called with (offset, page_limit); offset is None for the first page.
        limit: Total number of items wanted, or None for everything.
        page_size: Maximum items requested per page.

    Returns:
        Items in server order, at most ``limit`` of them.
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")

    all_results: list[T] = []
    offset: str | None = None

    while limit is None or len(all_results) < limit:
        page_limit = page_size if limit is None else min(page_size, limit - len(all_results))
        page = await fetch_page(offset, page_limit)
        if not page.items:
            break
        all_results.extend(page.items)

        if page.is_last or not page.offset:
            break
        offset = page.offset

    if limit is not None:
        del all_results[limit:]
    return all_results


async def paginate_by_last_id(
    fetch_page: Callable[[C | None], Awaitable[Page[T]]],
    cursor_of: Callable[[T], C | None],
) -> list[T]:
    """Collect items across pages, using the last item's id as the next offset.

    Stops on an empty page, on a page flagged both first and last (the whole
    remaining set fit in it), or when the last item yields no cursor.
    """
    all_results: list[T] = []
    offset: C | None = None

    while True:
        page = await fetch_page(offset)
        if not page.items:
            break
        all_results.extend(page.items)

        if page.is_last and page.is_first:
            break
        next_offset = cursor_of(page.items[-1])
        if next_offset is None:
            break
        offset = next_offset

    return all_results
