"""
chuk-mcp-srtm: SRTM .hgt Tile Elevation Lookup MCP Server

Reads elevations straight from a directory of SRTM1/SRTM3 .hgt tiles:
derives the tile for a coordinate, keeps tile files open between lookups,
and decodes the nearest big-endian sample.
"""

from .core import ElevationService, Resolution, pixel_coordinate, tile_filename
from .errors import (
    CoordinateRangeError,
    SrtmError,
    TileClosedError,
    TileFormatError,
    TileIOError,
    TileNotFoundError,
    TilePermissionError,
    TileReadError,
)

__all__ = [
    "ElevationService",
    "Resolution",
    "pixel_coordinate",
    "tile_filename",
    "SrtmError",
    "TileClosedError",
    "TileFormatError",
    "TileIOError",
    "TileNotFoundError",
    "TilePermissionError",
    "TileReadError",
    "CoordinateRangeError",
]
