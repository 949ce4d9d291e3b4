"""Response models for chuk-mcp-srtm."""

from .responses import (
    CapabilitiesResponse,
    ErrorResponse,
    MultiPointResponse,
    PointElevationResponse,
    PointInfo,
    ResolutionInfo,
    StatusResponse,
    TileNameResponse,
    format_response,
)

__all__ = [
    "ErrorResponse",
    "ResolutionInfo",
    "TileNameResponse",
    "PointElevationResponse",
    "PointInfo",
    "MultiPointResponse",
    "StatusResponse",
    "CapabilitiesResponse",
    "format_response",
]
