"""PokéAPI named-resource listing endpoint definition and adapter.

Every resource type shares the same listing shape:
``{count, next, previous, results: [{name, url}, ...]}``.
"""

from __future__ import annotations

from typing import Any

import pydantic

from pokedex.catalog.core.exceptions import ProviderError
from pokedex.catalog.models import ResourcePage
from pokedex.catalog.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"/{params['resource_type']}/"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"offset": int(params.get("offset", 0)), "limit": int(params["limit"])}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="resource_list",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a listing response into a ResourcePage."""

    def parse(self, response: Any, params: dict[str, Any]) -> ResourcePage:
        resource_type = params["resource_type"]
        if not isinstance(response, dict):
            raise ProviderError(
                f"Invalid {resource_type} listing payload: expected object, "
                f"got {type(response).__name__}"
            )
        try:
            return ResourcePage.model_validate(response)
        except pydantic.ValidationError as e:
            raise ProviderError(f"Invalid {resource_type} listing payload: {e}") from e
