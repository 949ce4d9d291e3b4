"""Tests for chuk_mcp_srtm.core.resolution."""

import pytest

from chuk_mcp_srtm.constants import SRTM1_FILE_SIZE, SRTM3_FILE_SIZE
from chuk_mcp_srtm.core.resolution import Resolution
from chuk_mcp_srtm.errors import SrtmError, TileFormatError


class TestResolutionMembers:
    def test_srtm1_side(self):
        assert Resolution.SRTM1.side == 3601

    def test_srtm3_side(self):
        assert Resolution.SRTM3.side == 1201

    def test_file_sizes(self):
        assert Resolution.SRTM1.file_size == 3601 * 3601 * 2 == SRTM1_FILE_SIZE
        assert Resolution.SRTM3.file_size == 1201 * 1201 * 2 == SRTM3_FILE_SIZE

    def test_arc_seconds(self):
        assert Resolution.SRTM1.arc_seconds == 1
        assert Resolution.SRTM3.arc_seconds == 3

    def test_spacing(self):
        assert Resolution.SRTM1.spacing_m == 30
        assert Resolution.SRTM3.spacing_m == 90

    def test_exactly_two_members(self):
        assert len(Resolution) == 2


class TestFromSize:
    def test_srtm1(self):
        assert Resolution.from_size(3601 * 3601 * 2) is Resolution.SRTM1

    def test_srtm3(self):
        assert Resolution.from_size(1201 * 1201 * 2) is Resolution.SRTM3

    @pytest.mark.parametrize(
        "size",
        [
            0,
            1,
            2,
            SRTM1_FILE_SIZE - 1,
            SRTM1_FILE_SIZE + 1,
            SRTM3_FILE_SIZE - 2,
            SRTM3_FILE_SIZE + 2,
            3601 * 3601,
            1201 * 1201,
            SRTM1_FILE_SIZE * 2,
        ],
    )
    def test_other_sizes_rejected(self, size):
        with pytest.raises(TileFormatError) as exc_info:
            Resolution.from_size(size)
        assert exc_info.value.size == size

    def test_exactly_two_sizes_accepted(self):
        candidates = range(SRTM3_FILE_SIZE - 4, SRTM3_FILE_SIZE + 5)
        accepted = []
        for size in list(candidates) + [SRTM1_FILE_SIZE]:
            try:
                accepted.append(Resolution.from_size(size))
            except TileFormatError:
                pass
        assert accepted == [Resolution.SRTM3, Resolution.SRTM1]

    def test_error_message_names_size(self):
        with pytest.raises(TileFormatError, match="12345"):
            Resolution.from_size(12345)

    def test_format_error_is_srtm_error(self):
        with pytest.raises(SrtmError):
            Resolution.from_size(7)
