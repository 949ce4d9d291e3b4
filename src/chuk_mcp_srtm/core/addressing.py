"""
Coordinate addressing for SRTM tiles.

Pure functions, no I/O. A tile is named after the integer south-west corner
of the 1x1 degree cell it covers (e.g. N49W002.hgt spans lat 49..50,
lon -2..-1). Inside a tile, row 0 is the northern edge and column 0 the
western edge.
"""

import math
from typing import NamedTuple

from ..constants import HGT_EXTENSION, SAMPLE_BYTES, ErrorMessages
from ..errors import CoordinateRangeError
from .resolution import Resolution


class PixelCoordinate(NamedTuple):
    """Zero-based sample position inside a tile."""

    x: int
    y: int


def _check_finite(lat: float, lng: float) -> None:
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise CoordinateRangeError(ErrorMessages.NON_FINITE_COORDINATE.format(lat, lng))


def _frac(v: float) -> float:
    """Fractional part towards -inf, always in [0, 1)."""
    return v - math.floor(v)


def _round_half_away(v: float) -> int:
    # Only ever called with non-negative values. Compare the remainder
    # instead of adding 0.5, which can round up just below a half.
    f = math.floor(v)
    return int(f + (v - f >= 0.5))


def tile_origin(lat: float, lng: float) -> tuple[int, int]:
    """Return the (lat, lng) integer south-west corner of the containing tile."""
    _check_finite(lat, lng)
    return math.floor(lat), math.floor(lng)


def tile_filename(lat: float, lng: float) -> str:
    """
    Build the .hgt filename holding the elevation for a coordinate.

    Latitude/longitude are not range-checked: out-of-range values give a
    filename that simply does not exist on disk. Longitude 180 is treated
    as the western edge (W180), and negative zero counts as N/E.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees

    Returns:
        Filename such as "N49W002.hgt"
    """
    south, west = tile_origin(lat, lng)
    ns = "N" if lat >= 0 else "S"
    ew = "E" if 0 <= lng < 180 else "W"
    return f"{ns}{abs(south):02d}{ew}{abs(west):03d}{HGT_EXTENSION}"


def pixel_coordinate(lat: float, lng: float, resolution: Resolution) -> PixelCoordinate:
    """
    Map a coordinate to the nearest sample of its tile.

    x grows eastward, y grows southward. No interpolation: the same sample
    is returned for a square neighbourhood around each grid point.
    """
    _check_finite(lat, lng)
    side = resolution.side - 1
    x = _round_half_away(_frac(lng) * side)
    y = side - _round_half_away(_frac(lat) * side)
    return PixelCoordinate(x, y)


def sample_offset(pixel: PixelCoordinate, resolution: Resolution) -> int:
    """Byte offset of a sample in a row-major tile."""
    return (pixel.x + pixel.y * resolution.side) * SAMPLE_BYTES
