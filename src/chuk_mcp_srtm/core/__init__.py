"""Tile addressing, resolution detection, handle caching and sample decoding."""

from .addressing import PixelCoordinate, pixel_coordinate, tile_filename, tile_origin
from .elevation_service import ElevationService, PointResult
from .resolution import Resolution
from .tile_cache import TileHandle, TileHandleCache

__all__ = [
    "ElevationService",
    "PixelCoordinate",
    "PointResult",
    "Resolution",
    "TileHandle",
    "TileHandleCache",
    "pixel_coordinate",
    "tile_filename",
    "tile_origin",
]
