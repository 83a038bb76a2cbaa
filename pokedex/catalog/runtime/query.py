"""Query execution over declared tables.

Architecture:
    The QueryExecutor is the host-engine side of the plugin protocol. For one
    query it picks an access mode and never switches:
    - LIST: no qualifier on a key column. The table's list hydrate is driven
      to exhaustion and every item becomes one row.
    - GET: a qualifier on a key column. Listing is skipped and the get hydrate
      runs once with the caller's key.

    Expensive columns name a hydrate function. Within one row each distinct
    hydrate function runs at most once and its result feeds every column
    that depends on it. Nothing is kept between rows or queries.

See Also:
    - TableDefinition: The declaration interpreted here
    - CursorPaginator: Usually behind a table's list hydrate
    - ResourceHydrator: Usually behind a table's get hydrate
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import aclosing
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..core.context import QueryContext
from ..core.enums import AccessMode
from ..core.exceptions import ValidationError
from ..tables.schema import Column, HydrateFunc, QueryData, TableDefinition
from .hydrator import FromKey, FromListing, HydrateSource
from .telemetry import log_hydrate_suppressed

if TYPE_CHECKING:
    from ..core.base import CatalogProvider


@dataclass(frozen=True)
class QueryRequest:
    """What the host engine asks of one table.

    Attributes:
        columns: Requested column names, or None for every declared column
        quals: Exact-match qualifiers keyed by column name
    """

    columns: tuple[str, ...] | None = None
    quals: dict[str, Any] = field(default_factory=dict)


def access_mode(table: TableDefinition, quals: dict[str, Any]) -> AccessMode:
    if table.get_config is not None and table.get_config.key_columns.match(quals):
        return AccessMode.GET
    return AccessMode.LIST


class QueryExecutor:
    """Streams rows of a table from a catalog provider."""

    def __init__(self, provider: CatalogProvider, *, max_pages: int | None = None) -> None:
        self._provider = provider
        self._max_pages = max_pages

    async def execute(
        self,
        table: TableDefinition,
        request: QueryRequest | None = None,
        ctx: QueryContext | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Yield one dict per row, keyed by the requested column names.

        Raises:
            ValidationError: If a requested column or key value is invalid
            CatalogError: Any failure not classified as not-found
        """
        request = request or QueryRequest()
        ctx = ctx or QueryContext(table=table.name)
        columns = table.select(request.columns)
        d = QueryData(
            table=table,
            provider=self._provider,
            columns=columns,
            key_quals=dict(request.quals),
            max_pages=self._max_pages,
        )

        if access_mode(table, d.key_quals) is AccessMode.GET:
            rows = self._get(ctx, d)
        else:
            rows = self._list(ctx, d)
        async with aclosing(rows):
            async for row in rows:
                yield row

    async def _list(self, ctx: QueryContext, d: QueryData) -> AsyncIterator[dict[str, Any]]:
        async with aclosing(d.table.list_config.hydrate(ctx, d)) as items:
            async for item in items:
                if ctx.is_cancelled:
                    break
                yield await self._project(ctx, d, item, FromListing(item), {})

    async def _get(self, ctx: QueryContext, d: QueryData) -> AsyncIterator[dict[str, Any]]:
        get_config = d.table.get_config
        column, value = get_config.key_columns.match(d.key_quals)
        if not isinstance(value, str):
            raise ValidationError(
                f"Key column {column} of {d.table.name} requires a string value"
            )

        # An empty name matches no resource
        if not value:
            return

        source = FromKey(value)
        try:
            record = await get_config.hydrate(ctx, d, source)
        except Exception as e:
            if get_config.ignores(e):
                log_hydrate_suppressed(
                    ctx=ctx, table=d.table.name, key=value, error_message=str(e)
                )
                return
            raise

        # The get result doubles as the row item and as the get hydrate's result
        yield await self._project(ctx, d, record, source, {get_config.hydrate: record})

    async def _project(
        self,
        ctx: QueryContext,
        d: QueryData,
        item: Any,
        source: HydrateSource,
        hydrated: dict[HydrateFunc, Any],
    ) -> dict[str, Any]:
        row: dict[str, Any] = {}
        for column in d.columns:
            value_source = await self._source_for(ctx, d, column, item, source, hydrated)
            row[column.name] = column.project(value_source)
        return row

    async def _source_for(
        self,
        ctx: QueryContext,
        d: QueryData,
        column: Column,
        item: Any,
        source: HydrateSource,
        hydrated: dict[HydrateFunc, Any],
    ) -> Any:
        if column.hydrate is None:
            return item
        if column.hydrate not in hydrated:
            hydrated[column.hydrate] = await column.hydrate(ctx, d, source)
        return hydrated[column.hydrate]


async def collect(rows: AsyncIterator[dict[str, Any]]) -> list[dict[str, Any]]:
    """Drain a row stream into a list."""
    return [row async for row in rows]
