"""Lightweight resource reference returned by listing pages."""

from pydantic import BaseModel, ConfigDict, Field


class ResourceReference(BaseModel):
    """Name and locator of one resource in a listing page."""

    name: str = Field(..., min_length=1)
    url: str = ""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
