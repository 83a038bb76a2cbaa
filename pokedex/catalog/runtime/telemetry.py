"""Structured logging for listing and hydration.

This module provides telemetry hooks for the paginator, hydrator and query
executor, emitting structured log records with context in ``extra``.
"""

from __future__ import annotations

import logging

from ..core.context import QueryContext

logger = logging.getLogger(__name__)


def _query_fields(ctx: QueryContext | None) -> dict[str, str | None]:
    if ctx is None:
        return {"table": None, "query_id": None}
    return {"table": ctx.table, "query_id": ctx.query_id}


def log_page_fetched(
    *,
    ctx: QueryContext | None,
    resource_type: str,
    page_index: int,
    offset: int,
    entries: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        ctx: Query context of the listing
        resource_type: Remote resource type being listed
        page_index: Zero-based index of the page within this walk
        offset: Offset the page was requested at
        entries: Number of reference records on the page
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            **_query_fields(ctx),
            "resource_type": resource_type,
            "page_index": page_index,
            "offset": offset,
            "entries": entries,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(
    *,
    ctx: QueryContext | None,
    resource_type: str,
    pages: int,
    total_entries: int,
    cancelled: bool = False,
) -> None:
    """Log the end of a listing walk."""
    logger.info(
        "pagination_complete",
        extra={
            **_query_fields(ctx),
            "resource_type": resource_type,
            "pages": pages,
            "total_entries": total_entries,
            "cancelled": cancelled,
        },
    )


def log_page_error(
    *,
    ctx: QueryContext | None,
    resource_type: str,
    offset: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        ctx: Query context of the listing
        resource_type: Remote resource type being listed
        offset: Offset of the page that failed
        error_type: Type of error (e.g., "ProviderError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            **_query_fields(ctx),
            "resource_type": resource_type,
            "offset": offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_cursor_parse_error(
    *,
    ctx: QueryContext | None,
    resource_type: str,
    cursor: str,
    error_message: str,
) -> None:
    logger.error(
        "cursor_parse_error",
        extra={
            **_query_fields(ctx),
            "resource_type": resource_type,
            "cursor": cursor,
            "error_message": error_message,
        },
    )


def log_hydrate_error(
    *,
    ctx: QueryContext | None,
    resource_type: str,
    key: str,
    error_type: str,
    error_message: str,
) -> None:
    logger.error(
        "hydrate_error",
        extra={
            **_query_fields(ctx),
            "resource_type": resource_type,
            "key": key,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_hydrate_suppressed(
    *,
    ctx: QueryContext | None,
    table: str,
    key: str,
    error_message: str,
) -> None:
    """Log a get-mode failure classified as not found."""
    logger.debug(
        "hydrate_suppressed",
        extra={
            **_query_fields(ctx),
            "table": table,
            "key": key,
            "error_message": error_message,
        },
    )
