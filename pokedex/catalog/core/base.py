"""Base catalog provider abstract class.

Architecture:
    This module defines the CatalogProvider abstract base class, the remote-call
    collaborator every table talks to. It provides:
    - Abstract methods for the two remote operations (fetch_page, fetch_detail)
    - Resource cleanup (close) and async context manager support

Design Decisions:
    - Abstract base class: Tables depend on this interface, not on a transport
    - Decoded results only: wire format stays inside the concrete provider
    - Errors carry a human-readable message usable for classification

See Also:
    - PokeAPIRESTConnector: Concrete provider for the PokéAPI REST service
    - CursorPaginator: Drives fetch_page
    - ResourceHydrator: Drives fetch_detail
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models import ResourcePage


class CatalogProvider(ABC):
    """Abstract base class for remote catalog providers."""

    def __init__(self, name: str) -> None:
        self.name = name

    async def fetch_health(self) -> dict[str, object]:
        """Fetch provider health information."""
        raise NotImplementedError("fetch_health is not implemented for this provider")

    @abstractmethod
    async def fetch_page(self, resource_type: str, offset: int) -> ResourcePage:
        """Fetch one listing page of ``resource_type`` starting at ``offset``."""
        pass

    @abstractmethod
    async def fetch_detail(self, resource_type: str, key: str) -> Any:
        """Fetch the detailed record of one resource by its natural key."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close provider connections and cleanup resources."""
        pass

    async def __aenter__(self) -> CatalogProvider:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
