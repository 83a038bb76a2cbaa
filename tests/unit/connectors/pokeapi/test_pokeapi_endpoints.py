"""Unit tests for PokéAPI endpoint specs and adapters."""

from __future__ import annotations

import pytest

from pokedex.catalog.connectors.pokeapi.rest.endpoints import (
    get_endpoint_adapter,
    get_endpoint_spec,
    list_endpoints,
)
from pokedex.catalog.connectors.pokeapi.rest.endpoints import resource_detail, resource_list
from pokedex.catalog.core import ProviderError
from pokedex.catalog.models import Item, ResourcePage

LISTING = {
    "count": 3,
    "next": "https://pokeapi.co/api/v2/item/?offset=2&limit=2",
    "previous": None,
    "results": [
        {"name": "master-ball", "url": "https://pokeapi.co/api/v2/item/1/"},
        {"name": "ultra-ball", "url": "https://pokeapi.co/api/v2/item/2/"},
    ],
}


def test_registry_lists_both_endpoints():
    assert set(list_endpoints()) == {"resource_list", "resource_detail"}
    assert get_endpoint_spec("resource_list") is resource_list.SPEC
    assert get_endpoint_adapter("resource_detail") is resource_detail.Adapter
    assert get_endpoint_spec("nope") is None
    assert get_endpoint_adapter("nope") is None


class TestResourceList:
    def test_build_path_and_query(self):
        params = {"resource_type": "item", "offset": 40, "limit": 20}
        assert resource_list.build_path(params) == "/item/"
        assert resource_list.build_query(params) == {"offset": 40, "limit": 20}

    def test_parse(self):
        page = resource_list.Adapter().parse(LISTING, {"resource_type": "item"})

        assert isinstance(page, ResourcePage)
        assert [r.name for r in page.results] == ["master-ball", "ultra-ball"]
        assert page.next == "https://pokeapi.co/api/v2/item/?offset=2&limit=2"
        assert not page.is_last

    def test_parse_terminal_page(self):
        payload = {**LISTING, "next": None}
        page = resource_list.Adapter().parse(payload, {"resource_type": "item"})
        assert page.is_last

    def test_parse_rejects_non_object(self):
        with pytest.raises(ProviderError, match="expected object"):
            resource_list.Adapter().parse([], {"resource_type": "item"})

    def test_parse_rejects_bad_entry(self):
        payload = {**LISTING, "results": [{"url": "https://pokeapi.co/api/v2/item/1/"}]}
        with pytest.raises(ProviderError, match="Invalid item listing payload"):
            resource_list.Adapter().parse(payload, {"resource_type": "item"})


class TestResourceDetail:
    def test_build_path_quotes_key(self):
        assert resource_detail.build_path({"resource_type": "item", "key": "poke-ball"}) == (
            "/item/poke-ball/"
        )
        assert resource_detail.build_path({"resource_type": "item", "key": "a/b"}) == (
            "/item/a%2Fb/"
        )

    def test_parse_item(self):
        payload = {
            "id": 17,
            "name": "potion",
            "cost": 300,
            "fling_power": 30,
            "category": {"name": "healing", "url": "https://pokeapi.co/api/v2/item-category/27/"},
            "sprites": {"default": "https://example.invalid/potion.png"},
            "unexpected": {"kept": True},
        }

        item = resource_detail.Adapter().parse(payload, {"resource_type": "item"})

        assert isinstance(item, Item)
        assert item.id == 17
        assert item.cost == 300
        assert item.category["name"] == "healing"
        assert item.attributes == []
        assert item.unexpected == {"kept": True}

    def test_parse_untyped_resource_returns_dict(self):
        payload = {"id": 1, "name": "stench"}
        assert resource_detail.Adapter().parse(payload, {"resource_type": "ability"}) == payload

    def test_parse_item_missing_id(self):
        with pytest.raises(ProviderError, match="Invalid item payload"):
            resource_detail.Adapter().parse({"name": "potion"}, {"resource_type": "item"})
