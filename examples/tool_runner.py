"""
Shared helper for running chuk-mcp-srtm MCP tools directly from Python.

Provides a ToolRunner class that registers all MCP tools against an
ElevationService, without requiring a full MCP transport layer.
Demo scripts use this to call tools as plain async functions.

Usage:
    from tool_runner import ToolRunner

    async def main():
        runner = ToolRunner("/data/hgt")
        result = await runner.run("srtm_elevation", lat=45.5, lon=7.5)
        print(result)
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from chuk_mcp_srtm.constants import DEFAULT_TILES_FOLDER, EnvVar
from chuk_mcp_srtm.core.elevation_service import ElevationService
from chuk_mcp_srtm.tools.discovery import register_discovery_tools
from chuk_mcp_srtm.tools.elevation import register_elevation_tools


class _MiniMCP:
    """Minimal MCP server that captures tools registered via @mcp.tool."""

    def __init__(self) -> None:
        self._tools: dict[str, Any] = {}

    def tool(self) -> Any:
        """Decorator factory matching @mcp.tool() usage."""

        def decorator(fn: Any) -> Any:
            self._tools[fn.__name__] = fn
            return fn

        return decorator

    def get_tool(self, name: str) -> Any:
        return self._tools[name]


class ToolRunner:
    """
    Run chuk-mcp-srtm MCP tools directly from Python.

    All 5 tools are registered and callable via run(tool_name, **kwargs).
    Returns parsed JSON by default. Use run_text() for human-readable
    output. The tiles folder defaults to HGT_TILES_FOLDER.
    """

    def __init__(self, tiles_folder: str | Path | None = None, **service_kwargs: Any) -> None:
        if tiles_folder is None:
            tiles_folder = os.environ.get(EnvVar.HGT_TILES_FOLDER, DEFAULT_TILES_FOLDER)
        self._mcp = _MiniMCP()
        self.manager = ElevationService(tiles_folder, **service_kwargs)
        register_discovery_tools(self._mcp, self.manager)
        register_elevation_tools(self._mcp, self.manager)

    @property
    def tool_names(self) -> list[str]:
        return list(self._mcp._tools.keys())

    async def run(self, tool_name: str, **kwargs: Any) -> dict[str, Any]:
        """Call a tool by name and return parsed JSON."""
        fn = self._mcp.get_tool(tool_name)
        raw = await fn(**kwargs)
        return json.loads(raw)

    async def run_text(self, tool_name: str, **kwargs: Any) -> str:
        """Call a tool by name with output_mode='text' and return plaintext."""
        fn = self._mcp.get_tool(tool_name)
        return await fn(output_mode="text", **kwargs)

    def close(self) -> None:
        self.manager.close()
