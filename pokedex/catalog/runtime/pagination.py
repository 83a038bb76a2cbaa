"""Cursor pagination over linked remote listing pages.

This module provides the CursorPaginator class that walks a remote listing
page by page, following the offset encoded in each page's ``next`` URL, and
streams the reference records of every page in the order received.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from time import perf_counter
from urllib.parse import parse_qs, urlsplit

from ..core.context import QueryContext
from ..core.exceptions import CursorParseError, PaginationLoopError
from ..models import ResourcePage, ResourceReference
from .telemetry import (
    log_cursor_parse_error,
    log_page_error,
    log_page_fetched,
    log_pagination_complete,
)

FetchPage = Callable[[str, int], Awaitable[ResourcePage]]


def extract_url_offset(url: str) -> int:
    """Extract the ``offset`` query parameter from a page URL.

    Args:
        url: The ``next`` reference of a listing page

    Returns:
        Offset of the page the URL addresses

    Raises:
        CursorParseError: If the URL carries no usable offset

    Examples:
        >>> extract_url_offset("https://pokeapi.co/api/v2/item?offset=20&limit=20")
        20
    """
    try:
        query = parse_qs(urlsplit(url).query, strict_parsing=False)
    except ValueError as e:
        raise CursorParseError(f"Malformed page reference {url!r}: {e}", cursor=url) from e

    values = query.get("offset")
    if not values:
        raise CursorParseError(f"Page reference {url!r} has no offset", cursor=url)

    try:
        offset = int(values[0])
    except ValueError as e:
        raise CursorParseError(
            f"Page reference {url!r} has a non-integer offset {values[0]!r}", cursor=url
        ) from e

    if offset < 0:
        raise CursorParseError(f"Page reference {url!r} has a negative offset", cursor=url)
    return offset


class CursorPaginator:
    """Streams every reference record of a remote listing.

    Pages are fetched strictly one after another, since each page's cursor
    comes from the previous response. A walk stops on the first page with an
    empty ``next``, on cancellation, or on the first failure.
    """

    def __init__(self, fetch_page: FetchPage, *, max_pages: int | None = None) -> None:
        """Initialize paginator.

        Args:
            fetch_page: Async callable returning the page at (resource_type, offset)
            max_pages: Optional upper bound on pages fetched in one walk
        """
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be a positive integer")
        self._fetch_page = fetch_page
        self._max_pages = max_pages

    async def list_all(
        self, resource_type: str, ctx: QueryContext | None = None
    ) -> AsyncIterator[ResourceReference]:
        """Yield every reference record of ``resource_type``, page by page.

        A fresh call re-walks the listing from offset 0.

        Raises:
            CursorParseError: If a ``next`` reference has no usable offset
            PaginationLoopError: If an offset repeats or max_pages is exceeded
        """
        offset = 0
        visited = {offset}
        pages = 0
        total = 0

        while True:
            if ctx is not None and ctx.is_cancelled:
                log_pagination_complete(
                    ctx=ctx,
                    resource_type=resource_type,
                    pages=pages,
                    total_entries=total,
                    cancelled=True,
                )
                return

            start = perf_counter()
            try:
                page = await self._fetch_page(resource_type, offset)
            except Exception as e:
                log_page_error(
                    ctx=ctx,
                    resource_type=resource_type,
                    offset=offset,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            pages += 1
            log_page_fetched(
                ctx=ctx,
                resource_type=resource_type,
                page_index=pages - 1,
                offset=offset,
                entries=len(page.results),
                latency_ms=(perf_counter() - start) * 1000.0,
            )

            for entry in page.results:
                total += 1
                yield entry

            if page.is_last:
                break

            try:
                offset = extract_url_offset(page.next)
            except CursorParseError as e:
                e.resource_type = resource_type
                log_cursor_parse_error(
                    ctx=ctx,
                    resource_type=resource_type,
                    cursor=page.next,
                    error_message=str(e),
                )
                raise

            if offset in visited:
                raise PaginationLoopError(
                    f"Listing of {resource_type} revisited offset {offset}",
                    resource_type=resource_type,
                    offset=offset,
                )
            if self._max_pages is not None and pages >= self._max_pages:
                raise PaginationLoopError(
                    f"Listing of {resource_type} exceeded {self._max_pages} pages",
                    resource_type=resource_type,
                    offset=offset,
                )
            visited.add(offset)

        log_pagination_complete(
            ctx=ctx, resource_type=resource_type, pages=pages, total_entries=total
        )
