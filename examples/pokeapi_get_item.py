#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json

from pokedex.catalog import CatalogPlugin


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Look up one item by name")
    p.add_argument("name", nargs="?", default="potion")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with CatalogPlugin() as plugin:
        rows = [row async for row in plugin.query("pokemon_item", quals={"name": args.name})]

    if not rows:
        print(f"No item named {args.name!r}")
        return
    row = rows[0]
    print(f"{row['name']} (id {row['id']}) costs {row['cost']}")
    print(json.dumps(row["category"], indent=2))


if __name__ == "__main__":
    asyncio.run(main())
