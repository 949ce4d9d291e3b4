"""
Discovery tools: server status and capabilities.

These tools touch no tile data and describe the server configuration and
the tile formats it understands.
"""

import logging

from ...constants import ALL_TOOLS, ServerConfig, SuccessMessages
from ...core.resolution import Resolution
from ...models.responses import (
    CapabilitiesResponse,
    ErrorResponse,
    ResolutionInfo,
    StatusResponse,
    format_response,
)

logger = logging.getLogger(__name__)


def register_discovery_tools(mcp, manager):
    """Register discovery tools with the MCP server."""

    @mcp.tool()
    async def srtm_status(output_mode: str = "json") -> str:
        """Get server status including version, tiles folder, and currently open tiles.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Server status information
        """
        try:
            response = StatusResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                tiles_folder=str(manager.directory),
                tiles_folder_exists=manager.directory.is_dir(),
                open_tiles=manager.open_tiles(),
                validate_coordinates=manager.validate_coordinates,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"srtm_status failed: {e}")
            return format_response(
                ErrorResponse(error=str(e), error_type=type(e).__name__), output_mode
            )

    @mcp.tool()
    async def srtm_capabilities(output_mode: str = "json") -> str:
        """Get server capabilities: supported tile resolutions, tools, and usage guidance.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Complete server capabilities
        """
        try:
            resolutions = [
                ResolutionInfo(
                    name=r.name,
                    side=r.side,
                    file_size_bytes=r.file_size,
                    arc_seconds=r.arc_seconds,
                    spacing_m=r.spacing_m,
                )
                for r in Resolution
            ]

            response = CapabilitiesResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                resolutions=resolutions,
                tools=ALL_TOOLS,
                tool_count=len(ALL_TOOLS),
                llm_guidance=(
                    "Use srtm_tile_name to find which .hgt file covers a coordinate. "
                    "Use srtm_elevation for a single point and srtm_elevations for a "
                    "list of [lat, lon] points. Elevations are the nearest raw sample "
                    "in metres; -32768 marks a void in the source data."
                ),
                message=SuccessMessages.CAPABILITIES.format(
                    ServerConfig.NAME, ServerConfig.VERSION
                ),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"srtm_capabilities failed: {e}")
            return format_response(
                ErrorResponse(error=str(e), error_type=type(e).__name__), output_mode
            )
