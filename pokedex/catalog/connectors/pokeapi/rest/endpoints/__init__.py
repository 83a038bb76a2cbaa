"""PokéAPI REST endpoint registry."""

from __future__ import annotations

from pokedex.catalog.runtime.rest import ResponseAdapter, RestEndpointSpec

from .resource_detail import SPEC as ResourceDetailSpec  # noqa: N811
from .resource_detail import Adapter as ResourceDetailAdapter
from .resource_list import SPEC as ResourceListSpec  # noqa: N811
from .resource_list import Adapter as ResourceListAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "resource_list": (ResourceListSpec, ResourceListAdapter),
    "resource_detail": (ResourceDetailSpec, ResourceDetailAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "resource_list")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return list(_ENDPOINT_REGISTRY.keys())
