"""On-demand hydration of one resource's detailed record."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from ..core.context import QueryContext
from ..core.exceptions import HydrationError, ValidationError
from ..models import ResourceReference
from .telemetry import log_hydrate_error

FetchDetail = Callable[[str, str], Awaitable[Any]]


@dataclass(frozen=True)
class FromListing:
    """Hydrate the resource a listing page referenced."""

    reference: ResourceReference


@dataclass(frozen=True)
class FromKey:
    """Hydrate the resource named by a caller-supplied key."""

    key: str


HydrateSource = FromListing | FromKey


def resolve_key(source: HydrateSource) -> str:
    if isinstance(source, FromListing):
        key = source.reference.name
    elif isinstance(source, FromKey):
        key = source.key
    else:
        raise TypeError(f"Unsupported hydrate source: {type(source).__name__}")

    if not key:
        raise ValidationError("Hydration key must be a non-empty string")
    return key


class ResourceHydrator:
    """Fetches the detailed record of one resource by name.

    Every call issues exactly one remote request. Results are not cached, so
    hydrating the same key twice fetches twice.
    """

    def __init__(self, fetch_detail: FetchDetail, resource_type: str) -> None:
        self._fetch_detail = fetch_detail
        self.resource_type = resource_type

    async def hydrate(self, source: HydrateSource, ctx: QueryContext | None = None) -> Any:
        """Fetch the detailed record for ``source``.

        Raises:
            ValidationError: If the resolved key is empty
            HydrationError: If the remote call fails, wrapping the original error
        """
        key = resolve_key(source)
        try:
            return await self._fetch_detail(self.resource_type, key)
        except Exception as e:
            log_hydrate_error(
                ctx=ctx,
                resource_type=self.resource_type,
                key=key,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise HydrationError(self.resource_type, key, e) from e
