"""
Elevation tools: tile addressing and point elevation lookups.

These tools read local .hgt tiles through the shared ElevationService.
"""

import logging

from ...constants import SuccessMessages
from ...models.responses import (
    ErrorResponse,
    MultiPointResponse,
    PointElevationResponse,
    PointInfo,
    TileNameResponse,
    format_response,
)

logger = logging.getLogger(__name__)


def register_elevation_tools(mcp, manager):
    """Register elevation tools with the MCP server."""

    @mcp.tool()
    async def srtm_tile_name(lat: float, lon: float, output_mode: str = "json") -> str:
        """Get the .hgt tile filename covering a geographic point. Reads no files.

        Args:
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)
            output_mode: "json" or "text"

        Returns:
            Tile filename such as N49W002.hgt
        """
        try:
            tile = manager.tile_name(lat, lon)
            response = TileNameResponse(
                lat=lat,
                lon=lon,
                tile=tile,
                message=SuccessMessages.TILE_NAME.format(lat, lon, tile),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"srtm_tile_name failed: {e}")
            return format_response(
                ErrorResponse(error=str(e), error_type=type(e).__name__), output_mode
            )

    @mcp.tool()
    async def srtm_elevation(lat: float, lon: float, output_mode: str = "json") -> str:
        """Get elevation at a single geographic point from the nearest tile sample.

        Args:
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)
            output_mode: "json" or "text"

        Returns:
            Elevation in metres with the tile, resolution and pixel it came from
        """
        try:
            result = await manager.fetch_point(lat, lon)

            response = PointElevationResponse(
                lat=lat,
                lon=lon,
                tile=result.tile,
                resolution=result.resolution.name,
                pixel=[result.pixel.x, result.pixel.y],
                elevation_m=result.elevation_m,
                message=SuccessMessages.POINT_ELEVATION.format(
                    result.elevation_m, result.tile
                ),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"srtm_elevation failed: {e}")
            return format_response(
                ErrorResponse(error=str(e), error_type=type(e).__name__), output_mode
            )

    @mcp.tool()
    async def srtm_elevations(points: list[list[float]], output_mode: str = "json") -> str:
        """Get elevations for a list of points. Fails as a whole if any point fails.

        Args:
            points: List of [lat, lon] pairs
            output_mode: "json" or "text"

        Returns:
            Per-point elevations and the overall elevation range
        """
        try:
            results = await manager.fetch_points(points)

            infos = [
                PointInfo(lat=lat, lon=lon, tile=r.tile, elevation_m=r.elevation_m)
                for (lat, lon), r in zip(points, results)
            ]
            elevations = [r.elevation_m for r in results]

            response = MultiPointResponse(
                point_count=len(infos),
                points=infos,
                elevation_range=[min(elevations), max(elevations)],
                message=SuccessMessages.POINTS_ELEVATION.format(len(infos)),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"srtm_elevations failed: {e}")
            return format_response(
                ErrorResponse(error=str(e), error_type=type(e).__name__), output_mode
            )
