"""Tests for chuk_mcp_srtm.constants module."""

from chuk_mcp_srtm.constants import (
    ALL_TOOLS,
    DEFAULT_TILES_FOLDER,
    DISCOVERY_TOOLS,
    ELEVATION_TOOLS,
    HGT_EXTENSION,
    SAMPLE_BYTES,
    SRTM1_FILE_SIZE,
    SRTM1_SIDE,
    SRTM3_FILE_SIZE,
    SRTM3_SIDE,
    TRUTHY_VALUES,
    EnvVar,
    ErrorMessages,
    ServerConfig,
    SuccessMessages,
)


class TestServerConfig:
    def test_name(self):
        assert ServerConfig.NAME == "chuk-mcp-srtm"

    def test_version(self):
        assert ServerConfig.VERSION == "0.1.0"

    def test_description_is_nonempty(self):
        assert len(ServerConfig.DESCRIPTION) > 10


class TestEnvVar:
    def test_tiles_folder(self):
        assert EnvVar.HGT_TILES_FOLDER == "HGT_TILES_FOLDER"

    def test_validate_coordinates(self):
        assert EnvVar.VALIDATE_COORDINATES == "SRTM_VALIDATE_COORDINATES"

    def test_mcp_stdio(self):
        assert EnvVar.MCP_STDIO == "MCP_STDIO"


class TestTileFormat:
    def test_sides(self):
        assert SRTM1_SIDE == 3601
        assert SRTM3_SIDE == 1201

    def test_file_sizes(self):
        assert SRTM1_FILE_SIZE == 25934402
        assert SRTM3_FILE_SIZE == 2884802

    def test_sample_bytes(self):
        assert SAMPLE_BYTES == 2

    def test_extension(self):
        assert HGT_EXTENSION == ".hgt"


class TestDefaults:
    def test_tiles_folder(self):
        assert DEFAULT_TILES_FOLDER == "hgt"

    def test_truthy_values_lowercase(self):
        assert all(v == v.lower() for v in TRUTHY_VALUES)


class TestToolLists:
    def test_all_tools_is_union(self):
        assert ALL_TOOLS == DISCOVERY_TOOLS + ELEVATION_TOOLS

    def test_no_duplicates(self):
        assert len(set(ALL_TOOLS)) == len(ALL_TOOLS)

    def test_all_prefixed(self):
        assert all(name.startswith("srtm_") for name in ALL_TOOLS)


class TestMessages:
    def test_unsupported_size_format(self):
        msg = ErrorMessages.UNSUPPORTED_SIZE.format(10, SRTM1_FILE_SIZE, SRTM3_FILE_SIZE)
        assert "10" in msg
        assert str(SRTM1_FILE_SIZE) in msg

    def test_tile_not_found_format(self):
        msg = ErrorMessages.TILE_NOT_FOUND.format("N00E000.hgt", "/data")
        assert msg == "Tile 'N00E000.hgt' not found in /data"

    def test_short_read_format(self):
        msg = ErrorMessages.SHORT_READ.format("N00E000.hgt", 2, 100, 1)
        assert "expected 2 bytes at offset 100, got 1" in msg

    def test_point_elevation_format(self):
        assert SuccessMessages.POINT_ELEVATION.format(118, "N49W001.hgt") == (
            "Elevation at point: 118m (N49W001.hgt)"
        )

    def test_tile_closed_format(self):
        assert ErrorMessages.TILE_CLOSED.format("N49W001.hgt") == "Tile 'N49W001.hgt' was closed"
