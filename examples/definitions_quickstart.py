#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from clearly.defined import DEFAULT_ROOT, DefinitionsClient, parse_coordinate


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch ClearlyDefined definitions for coordinates")
    p.add_argument(
        "coordinates",
        nargs="*",
        default=["crate/cratesio/-/syn/1.0.14", "npm/npmjs/-/lodash/4.17.21"],
    )
    p.add_argument("--root", default=DEFAULT_ROOT)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    coords = [parse_coordinate(c) for c in args.coordinates]

    async with DefinitionsClient(args.root) as client:
        response = await client.get_definitions(coords)

    index = response.by_coordinate()
    print("=" * 90)
    print(f"{'Coordinate':50} | {'Declared':25} | {'Score':>5}")
    print("-" * 90)
    for coord in coords:
        definition = index.get(str(coord))
        if definition is None or definition.licensed is None:
            print(f"{str(coord):50} | {'(not harvested)':25} | {'-':>5}")
            continue
        licensed = definition.licensed
        score = licensed.score.total if licensed.score else 0
        print(f"{str(coord):50} | {licensed.declared or 'NOASSERTION':25} | {score:>5}")
    print("=" * 90)


if __name__ == "__main__":
    asyncio.run(main())
