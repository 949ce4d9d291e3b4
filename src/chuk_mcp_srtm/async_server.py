#!/usr/bin/env python3
"""
Async SRTM MCP Server using chuk-mcp-server

Elevation lookups from a local directory of SRTM .hgt tiles. The tiles
folder and coordinate validation mode are read from the environment when
this module is imported.
"""

import logging
import os

from chuk_mcp_server import ChukMCPServer

from .constants import DEFAULT_TILES_FOLDER, TRUTHY_VALUES, EnvVar
from .core.elevation_service import ElevationService
from .tools.discovery import register_discovery_tools
from .tools.elevation import register_elevation_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUTHY_VALUES


# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-srtm")

# Create elevation service instance
manager = ElevationService(
    os.environ.get(EnvVar.HGT_TILES_FOLDER, DEFAULT_TILES_FOLDER),
    validate_coordinates=_env_flag(EnvVar.VALIDATE_COORDINATES),
)

# Register all tool modules
register_discovery_tools(mcp, manager)
register_elevation_tools(mcp, manager)

# Run the server
if __name__ == "__main__":
    logger.info("Starting SRTM MCP Server...")
    logger.info(f"Tiles folder: {manager.directory}")
    mcp.run(stdio=True)
