"""Table declaration primitives.

Architecture:
    A table is declared as data: a list of columns plus a list config and a
    get config. Each config names one hydrate function. Columns either read
    the row's item directly (cheap) or name the hydrate function whose result
    they read (expensive). The query executor interprets the declaration.

Hydrate signatures:
    - List hydrate: ``(ctx, d) -> AsyncIterator[item]``
    - Get / column hydrate: ``(ctx, d, source) -> record``
      where ``source`` is a FromListing or FromKey hydrate source

See Also:
    - QueryExecutor: Drives list and get mode over a TableDefinition
    - pokemon_item: The item table declaration
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..core.context import QueryContext
from ..core.enums import ColumnType
from ..core.exceptions import ValidationError
from ..runtime.classifier import ErrorPredicate

if TYPE_CHECKING:
    from ..core.base import CatalogProvider
    from ..runtime.hydrator import HydrateSource

Transform = Callable[[Any], Any]
ListHydrate = Callable[[QueryContext, "QueryData"], AsyncIterator[Any]]
HydrateFunc = Callable[[QueryContext, "QueryData", "HydrateSource"], Any]


def get_field(source: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-bearing object."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def from_field(name: str) -> Transform:
    """Transform reading a named field of the column's source."""

    def transform(source: Any) -> Any:
        return get_field(source, name)

    transform.__name__ = f"from_field_{name}"
    return transform


@dataclass(frozen=True)
class Column:
    """One declared output column."""

    name: str
    type: ColumnType
    description: str = ""
    hydrate: HydrateFunc | None = None
    transform: Transform | None = None

    @property
    def is_expensive(self) -> bool:
        return self.hydrate is not None

    def project(self, source: Any) -> Any:
        """Map the column's source object onto the column value."""
        if self.transform is not None:
            return self.transform(source)
        return get_field(source, self.name)


@dataclass(frozen=True)
class KeyColumnSet:
    """Columns a get-mode lookup may be driven by.

    With ``any_of``, a qualifier on any one of the columns is enough.
    """

    columns: tuple[str, ...]

    @classmethod
    def any_of(cls, columns: Sequence[str]) -> KeyColumnSet:
        if not columns:
            raise ValueError("KeyColumnSet requires at least one column")
        return cls(columns=tuple(columns))

    def match(self, quals: Mapping[str, Any]) -> tuple[str, Any] | None:
        """Return the first (column, value) qualifier this set can serve."""
        for column in self.columns:
            if column in quals:
                return column, quals[column]
        return None


@dataclass(frozen=True)
class ListConfig:
    hydrate: ListHydrate


@dataclass(frozen=True)
class GetConfig:
    key_columns: KeyColumnSet
    hydrate: HydrateFunc
    should_ignore_error: ErrorPredicate | None = None

    def ignores(self, error: BaseException) -> bool:
        return self.should_ignore_error is not None and self.should_ignore_error(error)


@dataclass(frozen=True)
class TableDefinition:
    """Declared schema and access patterns of one table."""

    name: str
    description: str
    columns: list[Column]
    list_config: ListConfig
    get_config: GetConfig | None = None

    def __post_init__(self) -> None:
        names = [c.name for c in self.columns]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValidationError(f"Table {self.name} declares duplicate columns: {duplicates}")
        if self.get_config is not None:
            missing = [c for c in self.get_config.key_columns.columns if c not in names]
            if missing:
                raise ValidationError(f"Table {self.name} key columns not declared: {missing}")

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def column(self, name: str) -> Column:
        for column in self.columns:
            if column.name == name:
                return column
        raise ValidationError(f"Table {self.name} has no column '{name}'")

    def select(self, names: Sequence[str] | None) -> list[Column]:
        """Resolve requested column names, all columns when ``names`` is None."""
        if names is None:
            return list(self.columns)
        return [self.column(n) for n in names]


@dataclass
class QueryData:
    """Per-query inputs handed to hydrate functions."""

    table: TableDefinition
    provider: CatalogProvider
    columns: list[Column]
    key_quals: dict[str, Any] = field(default_factory=dict)
    max_pages: int | None = None
