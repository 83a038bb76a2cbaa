"""Plugin facade and table registration.

The CatalogPlugin is the entry point a host engine (or a script) uses: it
owns the connector, resolves tables by name and streams query rows.

Architecture:
    - register_all() fills a TableRegistry with every table of the plugin
    - CatalogPlugin wraps a TableRegistry, a CatalogProvider and a QueryExecutor
    - Provider injection allows testing with mock providers
    - Context manager pattern ensures the connector session is closed

See Also:
    - QueryExecutor: Row streaming and access-mode selection
    - PokeAPIRESTConnector: Default provider
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping, Sequence
from typing import Any

from .connectors.pokeapi import ConnectionConfig, PokeAPIRESTConnector
from .core.base import CatalogProvider
from .core.context import QueryContext
from .runtime.query import QueryExecutor, QueryRequest
from .runtime.table_registry import TableRegistry, get_table_registry
from .tables import table_pokemon_item

logger = logging.getLogger(__name__)

PLUGIN_NAME = "pokemon"

# Table name -> declaration factory
TABLES = {
    "pokemon_item": table_pokemon_item,
}


def register_all(registry: TableRegistry | None = None) -> TableRegistry:
    """Register every plugin table that is not registered yet.

    Args:
        registry: Optional registry instance (defaults to global singleton)
    """
    if registry is None:
        registry = get_table_registry()

    for name, factory in TABLES.items():
        if not registry.is_registered(name):
            registry.register(name, factory)
    return registry


class CatalogPlugin:
    """Query facade over the plugin's tables."""

    def __init__(
        self,
        config: ConnectionConfig | None = None,
        *,
        provider: CatalogProvider | None = None,
        registry: TableRegistry | None = None,
    ) -> None:
        """Initialize the plugin.

        Args:
            config: Connection settings (defaults to ConnectionConfig())
            provider: Optional provider instance (creates a PokeAPIRESTConnector if not provided)
            registry: Optional table registry (defaults to a fresh registry with all tables)
        """
        self.name = PLUGIN_NAME
        self.config = config or ConnectionConfig()
        self._owns_provider = provider is None
        self._provider = provider or PokeAPIRESTConnector(self.config)
        self._registry = register_all(registry or TableRegistry())
        self._executor = QueryExecutor(self._provider, max_pages=self.config.max_pages)

    @property
    def tables(self) -> list[str]:
        return self._registry.list_tables()

    def describe(self, table_name: str) -> list[dict[str, Any]]:
        """Describe the columns of a table."""
        table = self._registry.get_table(table_name)
        key_columns = table.get_config.key_columns.columns if table.get_config else ()
        return [
            {
                "name": column.name,
                "type": column.type.value,
                "description": column.description,
                "hydrated": column.is_expensive,
                "key": column.name in key_columns,
            }
            for column in table.columns
        ]

    async def query(
        self,
        table_name: str,
        *,
        columns: Sequence[str] | None = None,
        quals: Mapping[str, Any] | None = None,
        ctx: QueryContext | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Stream rows of ``table_name``.

        Args:
            table_name: Registered table name (e.g., "pokemon_item")
            columns: Column names to return (default: all columns)
            quals: Exact-match qualifiers; a key column switches to a direct lookup
            ctx: Optional query context, used for cancellation
        """
        table = self._registry.get_table(table_name)
        ctx = ctx or QueryContext(table=table.name)
        request = QueryRequest(
            columns=tuple(columns) if columns is not None else None,
            quals=dict(quals or {}),
        )
        logger.debug(
            "query_started",
            extra={"table": table.name, "query_id": ctx.query_id, "quals": sorted(request.quals)},
        )
        async for row in self._executor.execute(table, request, ctx):
            yield row

    async def close(self) -> None:
        if self._owns_provider:
            await self._provider.close()

    async def __aenter__(self) -> CatalogPlugin:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
