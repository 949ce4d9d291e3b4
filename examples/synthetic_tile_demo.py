#!/usr/bin/env python3
"""
Synthetic Tile Demo -- chuk-mcp-srtm

Writes a small SRTM3 tile with a cone-shaped hill into a temporary
folder, then queries it through the MCP tools: single points, a
transect across the summit, and a missing tile.

Usage:
    python examples/synthetic_tile_demo.py
"""

import asyncio
import math
import struct
import tempfile
from pathlib import Path

from tool_runner import ToolRunner

from chuk_mcp_srtm.core.resolution import Resolution

TILE = "N45E007.hgt"
PEAK_M = 3000
RADIUS = 400  # samples


def write_cone_tile(folder: Path) -> Path:
    """Write an SRTM3 tile whose elevation falls off linearly from the centre."""
    side = Resolution.SRTM3.side
    centre = side // 2
    row = struct.Struct(f">{side}h")
    path = folder / TILE
    with open(path, "wb") as f:
        for y in range(side):
            values = []
            for x in range(side):
                d = math.hypot(x - centre, y - centre)
                values.append(max(0, int(PEAK_M * (1 - d / RADIUS))))
            f.write(row.pack(*values))
    return path


async def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        folder = Path(tmp)
        write_cone_tile(folder)

        runner = ToolRunner(folder)

        print("=" * 60)
        print("chuk-mcp-srtm -- Synthetic Tile Demo")
        print("=" * 60)

        print("\nSummit:")
        print(await runner.run_text("srtm_elevation", lat=45.5, lon=7.5))

        print("\nWest-east transect through the summit:")
        points = [[45.5, 7.5 + dx / 20] for dx in range(-8, 9)]
        transect = await runner.run("srtm_elevations", points=points)
        for p in transect["points"]:
            bar = "#" * (p["elevation_m"] // 100)
            print(f"  {p['lon']:.3f}  {p['elevation_m']:5d}m  {bar}")
        low, high = transect["elevation_range"]
        print(f"  range {low}m to {high}m")

        print("\nTile that is not on disk:")
        missing = await runner.run("srtm_elevation", lat=46.2, lon=8.1)
        print(f"  {missing['error_type']}: {missing['error']}")

        status = await runner.run("srtm_status")
        print(f"\nOpen tiles: {', '.join(status['open_tiles'])}")

        runner.close()


if __name__ == "__main__":
    asyncio.run(main())
