"""PokéAPI REST connector.

This connector is the remote-call collaborator of the catalog tables. It
resolves endpoint specs and adapters from the endpoint registry and executes
them with RestRunner, returning decoded listing pages and detail records.
"""

from __future__ import annotations

from time import perf_counter
from typing import Any

from pokedex.catalog.connectors.pokeapi.config import ConnectionConfig
from pokedex.catalog.core import CatalogProvider
from pokedex.catalog.models import ResourcePage
from pokedex.catalog.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class PokeAPIRESTConnector(CatalogProvider):
    """PokéAPI REST connector.

    Example:
        >>> async with PokeAPIRESTConnector() as api:
        ...     page = await api.fetch_page("item", 0)
        ...     potion = await api.fetch_detail("item", "potion")
    """

    def __init__(
        self,
        config: ConnectionConfig | None = None,
        *,
        transport: RESTTransport | None = None,
    ) -> None:
        super().__init__("pokeapi")
        self.config = config or ConnectionConfig()
        self._transport = transport or RESTTransport(
            base_url=self.config.base_url, timeout=self.config.timeout
        )
        self._runner = RestRunner(self._transport)

    async def fetch_health(self) -> dict[str, object]:
        """Request a one-entry listing to verify connectivity."""
        start = perf_counter()
        await self._transport.get("/item/", params={"offset": 0, "limit": 1})
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "provider": self.name,
            "status": "ok",
            "latency_ms": latency_ms,
            "endpoint": "/item/",
        }

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a PokéAPI REST endpoint.

        Args:
            endpoint_id: Endpoint identifier ("resource_list" or "resource_detail")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def fetch_page(self, resource_type: str, offset: int) -> ResourcePage:
        params = {
            "resource_type": resource_type,
            "offset": offset,
            "limit": self.config.page_limit,
        }
        result: ResourcePage = await self.fetch("resource_list", params)
        return result

    async def fetch_detail(self, resource_type: str, key: str) -> Any:
        return await self.fetch("resource_detail", {"resource_type": resource_type, "key": key})

    async def close(self) -> None:
        await self._transport.close()
