"""PokéAPI resource detail endpoint definition and adapter."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import pydantic
from pydantic import BaseModel

from pokedex.catalog.core.exceptions import ProviderError
from pokedex.catalog.models import Item
from pokedex.catalog.runtime.rest import ResponseAdapter, RestEndpointSpec

# Resource types with a typed detail model. Others decode to plain dicts.
DETAIL_MODELS: dict[str, type[BaseModel]] = {
    "item": Item,
}


def build_path(params: dict[str, Any]) -> str:
    key = quote(str(params["key"]), safe="")
    return f"/{params['resource_type']}/{key}/"


# Endpoint specification
SPEC = RestEndpointSpec(
    id="resource_detail",
    method="GET",
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a detail response into its resource model."""

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        resource_type = params["resource_type"]
        if not isinstance(response, dict):
            raise ProviderError(
                f"Invalid {resource_type} payload: expected object, "
                f"got {type(response).__name__}"
            )

        model = DETAIL_MODELS.get(resource_type)
        if model is None:
            return response
        try:
            return model.model_validate(response)
        except pydantic.ValidationError as e:
            raise ProviderError(f"Invalid {resource_type} payload: {e}") from e
