"""pokemon_item table: items from the remote catalog.

Listing streams item references page by page; every column beyond ``name``
and ``title`` needs the detailed item record and is hydrated on demand.
Only ``name`` is a key column. Lookup by numeric ``id`` is not supported.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import aclosing

from ..core.context import QueryContext
from ..core.enums import ColumnType
from ..models import Item, ResourceReference
from ..runtime.classifier import is_not_found_error
from ..runtime.hydrator import HydrateSource, ResourceHydrator
from ..runtime.pagination import CursorPaginator
from .schema import (
    Column,
    GetConfig,
    KeyColumnSet,
    ListConfig,
    QueryData,
    TableDefinition,
    from_field,
)

RESOURCE_TYPE = "item"

# A missing item surfaces either as a 404 or, through some clients, as a decode
# failure of the plain-text "Not Found" body.
NOT_FOUND_PATTERNS = (
    "invalid character 'N' looking for beginning of value",
    "Expecting value: line 1 column 1",
    "404 Not Found",
)


async def list_item(ctx: QueryContext, d: QueryData) -> AsyncIterator[ResourceReference]:
    paginator = CursorPaginator(d.provider.fetch_page, max_pages=d.max_pages)
    async with aclosing(paginator.list_all(RESOURCE_TYPE, ctx)) as references:
        async for reference in references:
            yield reference


async def get_item(ctx: QueryContext, d: QueryData, source: HydrateSource) -> Item:
    hydrator = ResourceHydrator(d.provider.fetch_detail, RESOURCE_TYPE)
    return await hydrator.hydrate(source, ctx)


def table_pokemon_item() -> TableDefinition:
    return TableDefinition(
        name="pokemon_item",
        description="Items that can be held, used or bought in the Pokémon games.",
        list_config=ListConfig(hydrate=list_item),
        get_config=GetConfig(
            key_columns=KeyColumnSet.any_of(["name"]),
            hydrate=get_item,
            should_ignore_error=is_not_found_error(NOT_FOUND_PATTERNS),
        ),
        columns=[
            Column(
                name="name",
                type=ColumnType.STRING,
                description="The name for this resource.",
            ),
            Column(
                name="cost",
                type=ColumnType.INT,
                description="The price of this item in stores.",
                hydrate=get_item,
            ),
            Column(
                name="fling_power",
                type=ColumnType.INT,
                description="The power of the move Fling when used with this item.",
                hydrate=get_item,
            ),
            Column(
                name="fling_effect",
                type=ColumnType.JSON,
                description="The effect of the move Fling when used with this item.",
                hydrate=get_item,
            ),
            Column(
                name="attributes",
                type=ColumnType.JSON,
                description="A list of attributes this item has.",
                hydrate=get_item,
            ),
            Column(
                name="category",
                type=ColumnType.JSON,
                description="The category of items this item falls into.",
                hydrate=get_item,
            ),
            Column(
                name="effect_entries",
                type=ColumnType.JSON,
                description="The effect of this item listed in different languages.",
                hydrate=get_item,
            ),
            Column(
                name="flavor_text_entries",
                type=ColumnType.JSON,
                description="The flavor text of this item listed in different languages.",
                hydrate=get_item,
            ),
            Column(
                name="game_indices",
                type=ColumnType.JSON,
                description="A list of game indices relevant to this item by generation.",
                hydrate=get_item,
            ),
            Column(
                name="sprites",
                type=ColumnType.JSON,
                description="A set of sprites used to depict this item in the game.",
                hydrate=get_item,
            ),
            Column(
                name="held_by_pokemon",
                type=ColumnType.JSON,
                description="A list of Pokémon that might be found in the wild holding this item.",
                hydrate=get_item,
            ),
            Column(
                name="baby_trigger_for",
                type=ColumnType.JSON,
                description=(
                    "An evolution chain this item requires to produce a baby during mating."
                ),
                hydrate=get_item,
            ),
            Column(
                name="machines",
                type=ColumnType.JSON,
                description="A list of the machines related to this item.",
                hydrate=get_item,
            ),
            Column(
                name="id",
                type=ColumnType.INT,
                description="The identifier for this resource.",
                hydrate=get_item,
            ),
            # Standard columns
            Column(
                name="title",
                type=ColumnType.STRING,
                description="Title of the resource.",
                transform=from_field("name"),
            ),
        ],
    )
