#!/usr/bin/env python3
"""
SRTM MCP Server - Entry Point

This module provides the async MCP server for elevation lookups from local
SRTM .hgt tiles.
Supports both stdio (for Claude Desktop) and HTTP (for API access) transports.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_TILES_FOLDER, EnvVar

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)


def _check_tiles_folder() -> bool:
    """
    Check that the configured tiles folder exists.

    Tiles are opened lazily, so a missing folder is not fatal: every lookup
    will simply report the tile as not found.

    Returns:
        True if the tiles folder is an existing directory, False otherwise
    """
    folder = os.environ.get(EnvVar.HGT_TILES_FOLDER)
    if not folder:
        logger.warning(
            f"{EnvVar.HGT_TILES_FOLDER} not set. "
            f"Defaulting to '{DEFAULT_TILES_FOLDER}' relative to the working directory."
        )
        folder = DEFAULT_TILES_FOLDER

    path_obj = Path(folder)
    if not path_obj.is_dir():
        logger.warning(f"Tiles folder {path_obj} does not exist; elevation lookups will fail")
        return False

    logger.info(f"Using tiles folder {path_obj}")
    return True


# Import mcp instance and all registered tools from async server
from .async_server import mcp  # noqa: F401, E402


def main() -> None:
    """Main entry point for the MCP server."""
    import argparse

    # Check configuration at startup, not at import time
    _check_tiles_folder()

    parser = argparse.ArgumentParser(description="SRTM MCP Server")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["stdio", "http"],
        default=None,
        help="Transport mode (stdio for Claude Desktop, http for API)",
    )
    parser.add_argument(
        "--host", default="localhost", help="Host for HTTP mode (default: localhost)"
    )
    parser.add_argument("--port", type=int, default=8004, help="Port for HTTP mode (default: 8004)")

    args = parser.parse_args()

    if args.mode == "stdio":
        print("SRTM MCP Server starting in STDIO mode", file=sys.stderr)
        mcp.run(stdio=True)
    elif args.mode == "http":
        print(
            f"SRTM MCP Server starting in HTTP mode on {args.host}:{args.port}",
            file=sys.stderr,
        )
        mcp.run(host=args.host, port=args.port, stdio=False)
    else:
        if os.environ.get(EnvVar.MCP_STDIO) or (not sys.stdin.isatty()):
            print("SRTM MCP Server starting in STDIO mode (auto-detected)", file=sys.stderr)
            mcp.run(stdio=True)
        else:
            print(
                f"SRTM MCP Server starting in HTTP mode on {args.host}:{args.port}",
                file=sys.stderr,
            )
            mcp.run(host=args.host, port=args.port, stdio=False)


if __name__ == "__main__":
    main()
