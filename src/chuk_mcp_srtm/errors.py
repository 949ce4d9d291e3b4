"""
Error hierarchy for SRTM tile lookups.

Format problems (a file that is not a tile) and I/O problems (a tile that
cannot be opened or read) are separate branches of SrtmError.
"""

from .constants import SRTM1_FILE_SIZE, SRTM3_FILE_SIZE, ErrorMessages


class SrtmError(Exception):
    """Base error for SRTM tile operations."""


class TileFormatError(SrtmError):
    """File length matches neither SRTM1 nor SRTM3.

    Attributes:
        size: The offending byte length
    """

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            ErrorMessages.UNSUPPORTED_SIZE.format(size, SRTM1_FILE_SIZE, SRTM3_FILE_SIZE)
        )


class TileIOError(SrtmError):
    """Tile could not be opened or read."""

    def __init__(self, message: str, tile: str | None = None) -> None:
        self.tile = tile
        super().__init__(message)


class TileNotFoundError(TileIOError):
    """Tile file does not exist in the tiles folder."""


class TilePermissionError(TileIOError):
    """Tile file exists but cannot be opened for reading."""


class TileClosedError(TileIOError):
    """Tile handle was closed by discard() or close() before the read."""


class TileReadError(TileIOError):
    """Fewer bytes than requested came back from a tile."""


class CoordinateRangeError(SrtmError, ValueError):
    """Coordinate cannot be mapped to a tile."""
