"""Elevation tools: tile addressing and point elevation lookups."""

from .api import register_elevation_tools

__all__ = ["register_elevation_tools"]
