"""Pokedex Catalog - PokéAPI resources as queryable tables."""

from .connectors import ConnectionConfig, PokeAPIRESTConnector
from .core import (
    AccessMode,
    CatalogError,
    CatalogProvider,
    Classification,
    ColumnType,
    CursorParseError,
    HydrationError,
    PaginationLoopError,
    ProviderError,
    QueryContext,
    TableNotFoundError,
    ValidationError,
)
from .models import Item, ResourcePage, ResourceReference
from .plugin import PLUGIN_NAME, CatalogPlugin, register_all
from .runtime import (
    CursorPaginator,
    ErrorClassifier,
    FromKey,
    FromListing,
    ResourceHydrator,
    TableRegistry,
    extract_url_offset,
    get_table_registry,
    is_not_found_error,
)
from .runtime.query import QueryExecutor, QueryRequest
from .tables import Column, TableDefinition, table_pokemon_item

__version__ = "0.1.0"

__all__ = [
    # Plugin
    "PLUGIN_NAME",
    "CatalogPlugin",
    "register_all",
    # Core
    "AccessMode",
    "Classification",
    "ColumnType",
    "QueryContext",
    "CatalogProvider",
    # Connectors
    "ConnectionConfig",
    "PokeAPIRESTConnector",
    # Models
    "Item",
    "ResourcePage",
    "ResourceReference",
    # Runtime
    "CursorPaginator",
    "ErrorClassifier",
    "FromKey",
    "FromListing",
    "ResourceHydrator",
    "QueryExecutor",
    "QueryRequest",
    "TableRegistry",
    "extract_url_offset",
    "get_table_registry",
    "is_not_found_error",
    # Tables
    "Column",
    "TableDefinition",
    "table_pokemon_item",
    # Exceptions
    "CatalogError",
    "CursorParseError",
    "HydrationError",
    "PaginationLoopError",
    "ProviderError",
    "TableNotFoundError",
    "ValidationError",
]
