#!/usr/bin/env python3
"""
Capabilities Demo -- chuk-mcp-srtm

Quick-start script showing what the server can do without any tiles on
disk. Lists server status and capabilities, resolves tile names for a
few well-known places, and demonstrates the dual output mode.

Usage:
    python examples/capabilities_demo.py
"""

import asyncio

from tool_runner import ToolRunner

PLACES = [
    ("Mont Blanc", 45.8326, 6.8652),
    ("Stonehenge", 51.1789, -1.8262),
    ("Aconcagua", -32.6532, -70.0109),
    ("Mount Kosciuszko", -36.4560, 148.2634),
    ("Taveuni (antimeridian)", -16.8, 180.0),
]


async def main() -> None:
    runner = ToolRunner()

    print("=" * 60)
    print("chuk-mcp-srtm -- Server Capabilities")
    print("=" * 60)

    print(f"\nRegistered tools ({len(runner.tool_names)}):")
    for name in sorted(runner.tool_names):
        print(f"  - {name}")

    status = await runner.run("srtm_status")
    print("\nServer Status:")
    print(f"  {status['server']} v{status['version']}")
    found = "found" if status["tiles_folder_exists"] else "missing"
    print(f"  Tiles folder: {status['tiles_folder']} ({found})")

    caps = await runner.run("srtm_capabilities")
    print("\nSupported resolutions:")
    for r in caps["resolutions"]:
        print(f"  {r['name']}: {r['side']}x{r['side']}, {r['file_size_bytes']} bytes")

    # Tile naming needs no files
    print("\nTile names:")
    for label, lat, lon in PLACES:
        result = await runner.run("srtm_tile_name", lat=lat, lon=lon)
        print(f"  {label:24s} ({lat:9.4f}, {lon:9.4f}) -> {result['tile']}")

    print("\n" + "-" * 60)
    print("Dual Output Mode Demo")
    print("-" * 60)

    print("\nsrtm_capabilities (output_mode='text'):")
    print(await runner.run_text("srtm_capabilities"))

    runner.close()


if __name__ == "__main__":
    asyncio.run(main())
