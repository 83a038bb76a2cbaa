"""Listing page model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .reference import ResourceReference


class ResourcePage(BaseModel):
    """One page of a remote listing.

    ``next`` is empty or ``None`` on the terminal page, otherwise a URL whose
    ``offset`` query parameter addresses the following page.
    """

    count: int | None = None
    next: str | None = None
    previous: str | None = None
    results: list[ResourceReference] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_last(self) -> bool:
        return not self.next
