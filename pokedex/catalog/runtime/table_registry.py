"""Table registry mapping table names to their declarations.

Architecture:
    The registry holds one TableDefinition per table name. Tables are
    registered as factories and built lazily on first lookup, so importing
    the plugin does not construct every declaration up front.

Design Decisions:
    - Singleton pattern: Global registry for convenience, injection for testing
    - Lazy instantiation: Definitions built on demand, not at registration
    - Duplicate names are rejected at registration time

See Also:
    - register_all: Registers every table of the plugin
    - QueryExecutor: Executes queries against a resolved TableDefinition
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.exceptions import TableNotFoundError, ValidationError

if TYPE_CHECKING:
    from ..tables.schema import TableDefinition

TableFactory = Callable[[], "TableDefinition"]


@dataclass
class TableRegistration:
    """Registration metadata for a table."""

    name: str
    factory: TableFactory
    definition: TableDefinition | None = None


class TableRegistry:
    """Central registry of the tables a plugin exposes."""

    def __init__(self) -> None:
        self._registrations: dict[str, TableRegistration] = {}

    def register(self, name: str, factory: TableFactory) -> None:
        """Register a table factory under ``name``.

        Raises:
            ValidationError: If the table is already registered
        """
        if name in self._registrations:
            raise ValidationError(f"Table '{name}' is already registered")
        self._registrations[name] = TableRegistration(name=name, factory=factory)

    def unregister(self, name: str) -> None:
        if name not in self._registrations:
            raise TableNotFoundError(name)
        del self._registrations[name]

    def get_table(self, name: str) -> TableDefinition:
        """Return the declaration of ``name``, building it on first access.

        Raises:
            TableNotFoundError: If no table is registered under ``name``
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise TableNotFoundError(name)
        if registration.definition is None:
            definition = registration.factory()
            if definition.name != name:
                raise ValidationError(
                    f"Table factory for '{name}' built a table named '{definition.name}'"
                )
            registration.definition = definition
        return registration.definition

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def list_tables(self) -> list[str]:
        return sorted(self._registrations)


# Global singleton instance
_default_registry: TableRegistry | None = None


def get_table_registry() -> TableRegistry:
    """Get the global table registry singleton."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TableRegistry()
    return _default_registry
