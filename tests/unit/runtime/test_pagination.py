"""Unit tests for CursorPaginator and extract_url_offset.

Tests focus on page-chain walking, ordering, termination and failures.
"""

from __future__ import annotations

import pytest

from pokedex.catalog.core import (
    CursorParseError,
    PaginationLoopError,
    ProviderError,
    QueryContext,
)
from pokedex.catalog.runtime.pagination import CursorPaginator, extract_url_offset


async def _names(paginator: CursorPaginator, ctx: QueryContext | None = None) -> list[str]:
    return [ref.name async for ref in paginator.list_all("item", ctx)]


class TestExtractUrlOffset:
    """Test offset extraction from next-page references."""

    def test_offset_and_limit(self):
        assert extract_url_offset("https://pokeapi.co/api/v2/item?offset=20&limit=20") == 20

    def test_offset_only(self):
        assert extract_url_offset("https://pokeapi.co/api/v2/item/?offset=1180") == 1180

    def test_missing_offset(self):
        with pytest.raises(CursorParseError) as exc_info:
            extract_url_offset("https://pokeapi.co/api/v2/item?limit=20")
        assert exc_info.value.cursor == "https://pokeapi.co/api/v2/item?limit=20"

    def test_non_integer_offset(self):
        with pytest.raises(CursorParseError):
            extract_url_offset("https://pokeapi.co/api/v2/item?offset=abc")

    def test_negative_offset(self):
        with pytest.raises(CursorParseError):
            extract_url_offset("https://pokeapi.co/api/v2/item?offset=-20")


class TestCursorPaginator:
    """Test walking synthetic page chains."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("n_pages", [1, 2, 5])
    async def test_yields_concatenation_of_all_pages(self, fake_catalog, make_page, n_pages):
        """N well-formed pages yield every entry in page order with N fetches."""
        pages = {}
        expected = []
        for i in range(n_pages):
            names = [f"item-{i}-{j}" for j in range(3)]
            expected.extend(names)
            next_offset = (i + 1) * 3 if i < n_pages - 1 else None
            pages[i * 3] = make_page(names, next_offset=next_offset)
        catalog = fake_catalog(pages=pages)

        names = await _names(CursorPaginator(catalog.fetch_page))

        assert names == expected
        assert catalog.page_calls == [("item", i * 3) for i in range(n_pages)]

    @pytest.mark.asyncio
    async def test_empty_next_terminates(self, fake_catalog, make_page):
        """An empty next string on the last page stops without another fetch."""
        catalog = fake_catalog(
            pages={0: make_page(["potion"], next_offset=1), 1: make_page(["antidote"], "")}
        )

        names = await _names(CursorPaginator(catalog.fetch_page))

        assert names == ["potion", "antidote"]
        assert len(catalog.page_calls) == 2

    @pytest.mark.asyncio
    async def test_bad_cursor_after_emitting_page(self, fake_catalog, make_page):
        """Entries fetched before an unparseable cursor are still emitted."""
        catalog = fake_catalog(
            pages={0: make_page(["potion", "antidote"], "https://pokeapi.co/api/v2/item?limit=20")}
        )
        seen: list[str] = []

        with pytest.raises(CursorParseError) as exc_info:
            async for ref in CursorPaginator(catalog.fetch_page).list_all("item"):
                seen.append(ref.name)

        assert seen == ["potion", "antidote"]
        assert exc_info.value.resource_type == "item"
        assert len(catalog.page_calls) == 1

    @pytest.mark.asyncio
    async def test_page_failure_propagates(self, fake_catalog, make_page):
        catalog = fake_catalog(
            pages={0: make_page(["potion"], next_offset=1), 1: ProviderError("500 Server Error")}
        )
        seen: list[str] = []

        with pytest.raises(ProviderError, match="500"):
            async for ref in CursorPaginator(catalog.fetch_page).list_all("item"):
                seen.append(ref.name)

        assert seen == ["potion"]

    @pytest.mark.asyncio
    async def test_revisited_offset_raises(self, fake_catalog, make_page):
        catalog = fake_catalog(
            pages={0: make_page(["potion"], next_offset=2), 2: make_page(["antidote"], 0)}
        )

        with pytest.raises(PaginationLoopError) as exc_info:
            await _names(CursorPaginator(catalog.fetch_page))

        assert exc_info.value.offset == 0
        assert len(catalog.page_calls) == 2

    @pytest.mark.asyncio
    async def test_max_pages_bound(self, fake_catalog, make_page):
        catalog = fake_catalog(
            pages={i: make_page([f"item-{i}"], next_offset=i + 1) for i in range(10)}
        )

        with pytest.raises(PaginationLoopError):
            await _names(CursorPaginator(catalog.fetch_page, max_pages=3))

        assert len(catalog.page_calls) == 3

    @pytest.mark.asyncio
    async def test_max_pages_not_hit_by_exact_chain(self, fake_catalog, item_pages):
        catalog = fake_catalog(pages=item_pages)

        names = await _names(CursorPaginator(catalog.fetch_page, max_pages=2))

        assert names == ["potion", "antidote", "poke-ball"]

    def test_max_pages_must_be_positive(self, fake_catalog):
        with pytest.raises(ValueError):
            CursorPaginator(fake_catalog().fetch_page, max_pages=0)

    @pytest.mark.asyncio
    async def test_cancelled_context_stops_requests(self, fake_catalog, item_pages):
        catalog = fake_catalog(pages=item_pages)
        ctx = QueryContext(table="pokemon_item")
        seen: list[str] = []

        async for ref in CursorPaginator(catalog.fetch_page).list_all("item", ctx):
            seen.append(ref.name)
            ctx.cancel()

        assert seen == ["potion", "antidote"]
        assert catalog.page_calls == [("item", 0)]

    @pytest.mark.asyncio
    async def test_fresh_call_rewalks_from_zero(self, fake_catalog, item_pages):
        catalog = fake_catalog(pages=item_pages)
        paginator = CursorPaginator(catalog.fetch_page)

        first = await _names(paginator)
        second = await _names(paginator)

        assert first == second
        assert [offset for _, offset in catalog.page_calls] == [0, 2, 0, 2]
