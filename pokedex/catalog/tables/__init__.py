"""Table declarations exposed by the plugin."""

from .pokemon_item import table_pokemon_item
from .schema import (
    Column,
    GetConfig,
    KeyColumnSet,
    ListConfig,
    QueryData,
    TableDefinition,
    from_field,
    get_field,
)

__all__ = [
    "Column",
    "GetConfig",
    "KeyColumnSet",
    "ListConfig",
    "QueryData",
    "TableDefinition",
    "from_field",
    "get_field",
    "table_pokemon_item",
]
