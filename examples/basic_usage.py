#!/usr/bin/env python3
"""Basic usage example for pbfway.

This example demonstrates:
1. Building ways with Pydantic entities
2. Encoding them into a primitive group
3. Serializing the group and its string table
4. Decoding back to ways
"""

from __future__ import annotations

import logging

from pbfway import (
    GridParameters,
    Info,
    StringTable,
    StringTableEncoder,
    Way,
    WayEncoder,
    decode_group,
)


def main() -> None:
    """Run the basic usage example."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=" * 60)
    print("pbfway Basic Usage Example")
    print("=" * 60)
    print()

    grid = GridParameters(granularity=100)
    strings = StringTableEncoder()
    encoder = WayEncoder(strings, grid)

    print("1. Adding ways...")
    encoder.add(
        Way(
            id=4001,
            tags={"highway": "residential", "name": "Main Street"},
            info=Info(changeset=9001, timestamp=1700000000, uid=17, username="mapper", version=2),
            nodes=[100, 105, 110],
            lat=[52.5200, 52.5203, 52.5207],
            lon=[13.4050, 13.4056, 13.4061],
        )
    )
    encoder.add(Way(id=4002, tags={"building": "yes"}, nodes=[200, 201, 202, 200]))
    print(f"   Estimated size: {encoder.estimate_size()} bytes")
    print()

    print("2. Finalizing the group...")
    group_bytes = encoder.finalize().SerializeToString()
    table_bytes = strings.to_bytes()
    print(f"   Group: {len(group_bytes)} bytes, string table: {len(table_bytes)} bytes")
    print(f"   Hex: {group_bytes.hex()}")
    print()

    print("3. Decoding...")
    for way in decode_group(group_bytes, StringTable.from_bytes(table_bytes), grid):
        print(f"   Way {way.id}: {way.tags}")
        print(f"     nodes={way.nodes}")
        if way.has_coordinates:
            coords = ", ".join(f"({lat:.7f}, {lon:.7f})" for lat, lon in zip(way.lat, way.lon))
            print(f"     coords={coords}")
    print()


if __name__ == "__main__":
    main()
