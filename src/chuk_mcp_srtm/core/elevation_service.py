"""
Elevation Service: central orchestrator for SRTM point lookups.

Resolves the tile for a coordinate, keeps its handle open in the tile cache,
detects the tile resolution and decodes one big-endian sample. Public async
methods wrap the blocking file I/O via asyncio.to_thread().
"""

import asyncio
import logging
import struct
from dataclasses import dataclass
from pathlib import Path

from ..constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    SAMPLE_BYTES,
    ErrorMessages,
)
from ..errors import CoordinateRangeError, TileClosedError
from .addressing import PixelCoordinate, pixel_coordinate, sample_offset, tile_filename
from .resolution import Resolution
from .tile_cache import Opener, TileHandleCache, open_tile_file

logger = logging.getLogger(__name__)

_SAMPLE = struct.Struct(">h")


@dataclass
class PointResult:
    """Result of a single-point elevation lookup."""

    tile: str
    resolution: Resolution
    pixel: PixelCoordinate
    elevation_m: int


class ElevationService:
    """Elevation lookups against a fixed directory of .hgt tiles."""

    def __init__(
        self,
        directory: str | Path,
        validate_coordinates: bool = False,
        opener: Opener = open_tile_file,
    ) -> None:
        self.directory = Path(directory)
        self.validate_coordinates = validate_coordinates
        self._cache = TileHandleCache(self.directory, opener=opener)

    # ------------------------------------------------------------------
    # Sync lookups
    # ------------------------------------------------------------------

    def tile_name(self, lat: float, lng: float) -> str:
        """Filename of the tile holding (lat, lng). No I/O."""
        self._check_range(lat, lng)
        return tile_filename(lat, lng)

    def sample(self, lat: float, lng: float) -> PointResult:
        """
        Look up the nearest sample for a coordinate.

        The resolution is recomputed from the open handle on every call, so
        a tile whose size changes under the same descriptor is re-read with
        the right grid.

        Raises:
            CoordinateRangeError: Non-finite (or, with validation on, out of range) input
            TileIOError: Tile missing, unreadable, or truncated at the sample
            TileFormatError: Tile size is not SRTM1 or SRTM3
        """
        tile = self.tile_name(lat, lng)
        try:
            resolution, pixel, elevation = self._read_sample(tile, lat, lng)
        except TileClosedError:
            # Discarded between lookup and read; the retry reopens the file
            logger.debug(f"Tile {tile} closed during lookup, reopening")
            resolution, pixel, elevation = self._read_sample(tile, lat, lng)
        return PointResult(
            tile=tile,
            resolution=resolution,
            pixel=pixel,
            elevation_m=elevation,
        )

    def elevation(self, lat: float, lng: float) -> int:
        """
        Return the elevation in metres of the sample nearest to (lat, lng).

        This is the nearest grid point without its true position: the same
        height is returned for a square around each sample. Void markers
        such as -32768 come back unchanged.
        """
        return self.sample(lat, lng).elevation_m

    # ------------------------------------------------------------------
    # Async wrappers
    # ------------------------------------------------------------------

    async def fetch_point(self, lat: float, lng: float) -> PointResult:
        """Look up one point on a worker thread."""
        return await asyncio.to_thread(self.sample, lat, lng)

    async def fetch_points(self, points: list[list[float]]) -> list[PointResult]:
        """Look up a list of [lat, lng] pairs. The first failure aborts the batch."""
        if not points:
            raise ValueError(ErrorMessages.EMPTY_POINTS)
        for point in points:
            if len(point) != 2:
                raise ValueError(ErrorMessages.INVALID_POINT.format(point))

        results = []
        for lat, lng in points:
            results.append(await asyncio.to_thread(self.sample, lat, lng))
        return results

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def open_tiles(self) -> list[str]:
        """Names of the tiles currently held open."""
        return self._cache.tiles()

    def discard(self, tile: str) -> bool:
        """Close one tile so the next lookup reopens it from disk."""
        return self._cache.discard(tile)

    def close(self) -> None:
        """Release every open tile handle."""
        self._cache.close()

    def __enter__(self) -> "ElevationService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_sample(
        self, tile: str, lat: float, lng: float
    ) -> tuple[Resolution, PixelCoordinate, int]:
        handle = self._cache.get_or_open(tile)
        # Size and sample must come from the same open file
        with handle.reading():
            resolution = Resolution.from_size(handle.size())
            pixel = pixel_coordinate(lat, lng, resolution)
            data = handle.read_at(sample_offset(pixel, resolution), SAMPLE_BYTES)
        (elevation,) = _SAMPLE.unpack(data)
        return resolution, pixel, elevation

    def _check_range(self, lat: float, lng: float) -> None:
        """Reject out-of-range coordinates when validation is enabled."""
        if not self.validate_coordinates:
            return
        if not MIN_LATITUDE <= lat <= MAX_LATITUDE:
            raise CoordinateRangeError(ErrorMessages.LATITUDE_OUT_OF_RANGE.format(lat))
        if not MIN_LONGITUDE <= lng <= MAX_LONGITUDE:
            raise CoordinateRangeError(ErrorMessages.LONGITUDE_OUT_OF_RANGE.format(lng))
