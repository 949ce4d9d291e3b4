"""
Response models for chuk-mcp-srtm tools.

All tool responses are Pydantic models for type safety and consistent API.
"""

from pydantic import BaseModel, ConfigDict, Field


def format_response(model: BaseModel, output_mode: str = "json") -> str:
    """Format a response model as JSON or human-readable text.

    Args:
        model: Pydantic response model instance
        output_mode: "json" (default) or "text"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json())


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")
    error_type: str | None = Field(None, description="Exception class name")

    def to_text(self) -> str:
        return f"Error: {self.error}"


class ResolutionInfo(BaseModel):
    """Grid metadata for one supported tile resolution."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Resolution name (SRTM1 or SRTM3)")
    side: int = Field(..., description="Samples along one tile edge")
    file_size_bytes: int = Field(..., description="Exact tile size in bytes")
    arc_seconds: int = Field(..., description="Sample spacing in arc-seconds")
    spacing_m: int = Field(..., description="Approximate sample spacing in metres")

    def to_text(self) -> str:
        return (
            f"{self.name}: {self.side}x{self.side} samples, "
            f"{self.arc_seconds} arc-second (~{self.spacing_m}m), {self.file_size_bytes} bytes"
        )


class TileNameResponse(BaseModel):
    """Response model for tile addressing."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Latitude of the query point")
    lon: float = Field(..., description="Longitude of the query point")
    tile: str = Field(..., description="Tile filename (e.g. N49W002.hgt)")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        return self.message


class PointElevationResponse(BaseModel):
    """Response model for single-point elevation query."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Latitude of the query point")
    lon: float = Field(..., description="Longitude of the query point")
    tile: str = Field(..., description="Tile the sample was read from")
    resolution: str = Field(..., description="Tile resolution (SRTM1 or SRTM3)")
    pixel: list[int] = Field(..., description="Sample position [x, y] inside the tile")
    elevation_m: int = Field(..., description="Elevation in metres (raw sample)")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"Elevation at ({self.lat:.6f}, {self.lon:.6f}): {self.elevation_m}m",
            f"Tile: {self.tile} ({self.resolution})",
            f"Pixel: x={self.pixel[0]}, y={self.pixel[1]}",
        ]
        return "\n".join(lines)


class PointInfo(BaseModel):
    """Elevation data for a single point in a multi-point query."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")
    tile: str = Field(..., description="Tile the sample was read from")
    elevation_m: int = Field(..., description="Elevation in metres")


class MultiPointResponse(BaseModel):
    """Response model for multi-point elevation query."""

    model_config = ConfigDict(extra="forbid")

    point_count: int = Field(..., description="Number of points queried")
    points: list[PointInfo] = Field(..., description="Per-point elevations")
    elevation_range: list[int] = Field(..., description="[min, max] elevation in metres")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            self.message,
            f"Range: {self.elevation_range[0]}m to {self.elevation_range[1]}m",
            "",
        ]
        for p in self.points:
            lines.append(f"  ({p.lat:.6f}, {p.lon:.6f}) {p.tile}: {p.elevation_m}m")
        return "\n".join(lines)


class StatusResponse(BaseModel):
    """Response model for server status queries."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(default="chuk-mcp-srtm", description="Server name")
    version: str = Field(default="0.1.0", description="Server version")
    tiles_folder: str = Field(..., description="Directory the tiles are read from")
    tiles_folder_exists: bool = Field(..., description="Whether the tiles folder exists")
    open_tiles: list[str] = Field(default_factory=list, description="Tiles currently held open")
    validate_coordinates: bool = Field(
        default=False, description="Whether out-of-range coordinates are rejected"
    )

    def to_text(self) -> str:
        folder_status = "found" if self.tiles_folder_exists else "missing"
        opened = ", ".join(self.open_tiles) if self.open_tiles else "none"
        lines = [
            f"{self.server} v{self.version}",
            f"Tiles folder: {self.tiles_folder} ({folder_status})",
            f"Open tiles: {opened}",
            f"Coordinate validation: {'on' if self.validate_coordinates else 'off'}",
        ]
        return "\n".join(lines)


class CapabilitiesResponse(BaseModel):
    """Response model for server capabilities listing."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    resolutions: list[ResolutionInfo] = Field(..., description="Supported tile resolutions")
    tools: list[str] = Field(..., description="Registered tool names")
    tool_count: int = Field(..., description="Number of registered tools")
    llm_guidance: str = Field(..., description="How to use the tools")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message, "", "Resolutions:"]
        for r in self.resolutions:
            lines.append(f"  {r.to_text()}")
        lines.append("")
        lines.append(f"Tools ({self.tool_count}): {', '.join(self.tools)}")
        lines.append("")
        lines.append(self.llm_guidance)
        return "\n".join(lines)
