"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from pokedex.catalog.core import CatalogProvider
from pokedex.catalog.models import Item, ResourcePage, ResourceReference

ITEM_URL = "https://pokeapi.co/api/v2/item"


def ref(name: str, idx: int = 0) -> ResourceReference:
    return ResourceReference(name=name, url=f"{ITEM_URL}/{idx}/")


def page(names: list[str], next_offset: int | str | None = None) -> ResourcePage:
    if isinstance(next_offset, int):
        next_url = f"{ITEM_URL}?offset={next_offset}&limit=20"
    else:
        next_url = next_offset
    return ResourcePage(
        count=None,
        next=next_url,
        results=[ref(n, i) for i, n in enumerate(names)],
    )


class FakeCatalog(CatalogProvider):
    """In-memory provider recording every remote call."""

    def __init__(
        self,
        pages: dict[int, ResourcePage | Exception] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__("fake")
        self.pages = pages or {}
        self.details = details or {}
        self.page_calls: list[tuple[str, int]] = []
        self.detail_calls: list[tuple[str, str]] = []
        self.closed = False

    async def fetch_page(self, resource_type: str, offset: int) -> ResourcePage:
        self.page_calls.append((resource_type, offset))
        result = self.pages[offset]
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_detail(self, resource_type: str, key: str) -> Any:
        self.detail_calls.append((resource_type, key))
        result = self.details[key]
        if isinstance(result, Exception):
            raise result
        return result

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def potion() -> Item:
    return Item(
        id=17,
        name="potion",
        cost=300,
        fling_power=30,
        fling_effect=None,
        attributes=[{"name": "countable", "url": "https://pokeapi.co/api/v2/item-attribute/1/"}],
        category={"name": "healing", "url": "https://pokeapi.co/api/v2/item-category/27/"},
        effect_entries=[{"effect": "Restores 20 HP.", "language": {"name": "en"}}],
        flavor_text_entries=[{"text": "A spray-type medicine.", "language": {"name": "en"}}],
        game_indices=[{"game_index": 17, "generation": {"name": "generation-i"}}],
        sprites={"default": "https://example.invalid/potion.png"},
        held_by_pokemon=[],
        baby_trigger_for=None,
        machines=[],
    )


@pytest.fixture
def item_pages() -> dict[int, ResourcePage]:
    return {
        0: page(["potion", "antidote"], next_offset=2),
        2: page(["poke-ball"]),
    }


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def fake_catalog():
    return FakeCatalog
