#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from pokedex.catalog import CatalogPlugin, ConnectionConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List rows of the pokemon_item table")
    p.add_argument("limit", nargs="?", type=int, default=25, help="rows to print")
    p.add_argument("--columns", default="name,title", help="comma separated column names")
    p.add_argument("--page-limit", type=int, default=20)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    columns = [c.strip() for c in args.columns.split(",") if c.strip()]

    async with CatalogPlugin(ConnectionConfig(page_limit=args.page_limit)) as plugin:
        shown = 0
        rows = plugin.query("pokemon_item", columns=columns)
        async for row in rows:
            print(" | ".join(f"{row[c]!s:>20}" for c in columns))
            shown += 1
            if shown >= args.limit:
                break
        await rows.aclose()
    print(f"-- {shown} rows")


if __name__ == "__main__":
    asyncio.run(main())
