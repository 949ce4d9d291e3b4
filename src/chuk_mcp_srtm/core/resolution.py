"""
Tile resolution detection.

SRTM tiles carry no header: the only way to tell a 1 arc-second tile from a
3 arc-second one is its byte length.
"""

from enum import Enum

from ..constants import SAMPLE_BYTES, SRTM1_SIDE, SRTM3_SIDE
from ..errors import TileFormatError


class Resolution(Enum):
    """Tile grid resolution.

    Tiles are square. One degree holds 3600 (SRTM1) or 1200 (SRTM3)
    intervals, plus one overlapping row/column shared with the neighbour.
    """

    SRTM1 = SRTM1_SIDE
    SRTM3 = SRTM3_SIDE

    @property
    def side(self) -> int:
        """Number of samples along one tile edge."""
        return self.value

    @property
    def file_size(self) -> int:
        return self.side * self.side * SAMPLE_BYTES

    @property
    def arc_seconds(self) -> int:
        return 3600 // (self.side - 1)

    @property
    def spacing_m(self) -> int:
        # approximate, at the equator
        return 30 * self.arc_seconds

    @classmethod
    def from_size(cls, byte_len: int) -> "Resolution":
        """
        Classify a tile from its byte length.

        Args:
            byte_len: Size of the tile file in bytes

        Returns:
            The matching Resolution

        Raises:
            TileFormatError: If the size matches neither resolution
        """
        for resolution in cls:
            if resolution.file_size == byte_len:
                return resolution
        raise TileFormatError(byte_len)
