"""Core components."""

from .base import CatalogProvider
from .context import QueryContext
from .enums import AccessMode, Classification, ColumnType
from .exceptions import (
    CatalogError,
    CursorParseError,
    HydrationError,
    PaginationLoopError,
    ProviderError,
    TableNotFoundError,
    ValidationError,
)

__all__ = [
    "CatalogProvider",
    "QueryContext",
    "AccessMode",
    "Classification",
    "ColumnType",
    "CatalogError",
    "CursorParseError",
    "HydrationError",
    "PaginationLoopError",
    "ProviderError",
    "TableNotFoundError",
    "ValidationError",
]
