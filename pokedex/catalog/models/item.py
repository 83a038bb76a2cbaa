"""Item detail model.

Nested attributes are kept as the decoded JSON structures the remote service
returns. They are passed through to columns without reinterpretation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Fully detailed item record."""

    id: int
    name: str = Field(..., min_length=1)
    cost: int | None = None
    fling_power: int | None = None
    fling_effect: dict[str, Any] | None = None
    attributes: list[dict[str, Any]] = Field(default_factory=list)
    category: dict[str, Any] | None = None
    effect_entries: list[dict[str, Any]] = Field(default_factory=list)
    flavor_text_entries: list[dict[str, Any]] = Field(default_factory=list)
    game_indices: list[dict[str, Any]] = Field(default_factory=list)
    names: list[dict[str, Any]] = Field(default_factory=list)
    sprites: dict[str, Any] | None = None
    held_by_pokemon: list[dict[str, Any]] = Field(default_factory=list)
    baby_trigger_for: dict[str, Any] | None = None
    machines: list[dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="allow")
