"""Shared PokéAPI connector settings.

Module constants hold the defaults; ConnectionConfig validates a per-instance
override of them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

BASE_URL = "https://pokeapi.co/api/v2"

# Page size requested from listing endpoints. The service follows the
# requested limit and encodes the next offset in the "next" URL.
DEFAULT_PAGE_LIMIT = 20

DEFAULT_TIMEOUT = 30.0


class ConnectionConfig(BaseModel):
    """Connection settings for one plugin instance.

    Attributes:
        base_url: Root URL of the REST API
        page_limit: Entries requested per listing page
        timeout: Total per-request timeout in seconds
        max_pages: Optional bound on pages walked by one listing
    """

    base_url: str = Field(BASE_URL, min_length=1)
    page_limit: int = Field(DEFAULT_PAGE_LIMIT, ge=1, le=1000)
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    max_pages: int | None = Field(None, ge=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
