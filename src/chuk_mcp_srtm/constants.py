"""
Constants for chuk-mcp-srtm server.

All magic strings, tile format metadata, and configuration values live here.
"""


class ServerConfig:
    NAME = "chuk-mcp-srtm"
    VERSION = "0.1.0"
    DESCRIPTION = "SRTM .hgt Tile Elevation Lookup MCP Server"


class EnvVar:
    HGT_TILES_FOLDER = "HGT_TILES_FOLDER"
    VALIDATE_COORDINATES = "SRTM_VALIDATE_COORDINATES"
    MCP_STDIO = "MCP_STDIO"


DEFAULT_TILES_FOLDER = "hgt"
TRUTHY_VALUES = ("1", "true", "yes", "on")

# Tile file format
HGT_EXTENSION = ".hgt"
SAMPLE_BYTES = 2  # signed 16-bit big-endian
SRTM1_SIDE = 3601
SRTM3_SIDE = 1201
SRTM1_FILE_SIZE = SRTM1_SIDE * SRTM1_SIDE * SAMPLE_BYTES
SRTM3_FILE_SIZE = SRTM3_SIDE * SRTM3_SIDE * SAMPLE_BYTES

# Geographic bounds (only enforced when coordinate validation is enabled)
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

ELEVATION_TOOLS = ["srtm_tile_name", "srtm_elevation", "srtm_elevations"]
DISCOVERY_TOOLS = ["srtm_status", "srtm_capabilities"]
ALL_TOOLS = DISCOVERY_TOOLS + ELEVATION_TOOLS


class ErrorMessages:
    UNSUPPORTED_SIZE = (
        "File size {} is not SRTM compatible (expected {} for SRTM1 or {} for SRTM3)"
    )
    TILE_NOT_FOUND = "Tile '{}' not found in {}"
    TILE_PERMISSION = "Permission denied opening tile '{}'"
    TILE_NOT_REGULAR = "Tile '{}' is not a regular file"
    TILE_OPEN_FAILED = "Failed to open tile '{}': {}"
    READ_FAILED = "Failed to read tile '{}': {}"
    TILE_CLOSED = "Tile '{}' was closed"
    SHORT_READ = "Short read in tile '{}': expected {} bytes at offset {}, got {}"
    NON_FINITE_COORDINATE = "Coordinate ({}, {}) is not finite"
    LATITUDE_OUT_OF_RANGE = "Latitude {} outside [-90, 90]"
    LONGITUDE_OUT_OF_RANGE = "Longitude {} outside [-180, 180]"
    INVALID_POINT = "Each point must be [lat, lon], got {}"
    EMPTY_POINTS = "points must contain at least one [lat, lon] pair"


class SuccessMessages:
    TILE_NAME = "Tile for ({}, {}): {}"
    POINT_ELEVATION = "Elevation at point: {}m ({})"
    POINTS_ELEVATION = "Retrieved elevation for {} points"
    CAPABILITIES = "{} v{} capabilities"
