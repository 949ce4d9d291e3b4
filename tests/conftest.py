"""Shared test fixtures for chuk-mcp-srtm."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from chuk_mcp_srtm.core.elevation_service import ElevationService
from chuk_mcp_srtm.core.resolution import Resolution

# Seeded samples: tile name -> {sample index: elevation}
SRTM1_TILE = "N49W001.hgt"
SRTM3_TILE = "N45E007.hgt"
SRTM1_SAMPLES = {
    1 + 1 * 3601: 118,  # (49.99972, -0.99972224) -> pixel (1, 1)
    1 + 3500 * 3601: 151,  # (49.02778, -0.99972224) -> pixel (1, 3500)
    3500 + 2000 * 3601: -32768,  # (49.444443, -0.027777791) -> void marker
    0 + 3600 * 3601: -12,  # south-west corner (49.0, -1.0)
}
SRTM3_SAMPLES = {
    600 + 600 * 1201: 2345,  # (45.5, 7.5) -> pixel (600, 600)
}


def write_tile(
    directory: Path, name: str, resolution: Resolution, samples: dict[int, int]
) -> Path:
    """Write a sparse tile of the exact resolution size with seeded samples."""
    path = directory / name
    with open(path, "wb") as f:
        f.truncate(resolution.file_size)
        for index, value in samples.items():
            f.seek(index * 2)
            f.write(value.to_bytes(2, "big", signed=True))
    return path


@pytest.fixture
def tiles_dir(tmp_path):
    """Directory holding one SRTM1 and one SRTM3 tile."""
    write_tile(tmp_path, SRTM1_TILE, Resolution.SRTM1, SRTM1_SAMPLES)
    write_tile(tmp_path, SRTM3_TILE, Resolution.SRTM3, SRTM3_SAMPLES)
    return tmp_path


@pytest.fixture
def service(tiles_dir):
    """ElevationService over the fixture tiles, closed after the test."""
    svc = ElevationService(tiles_dir)
    yield svc
    svc.close()


@pytest.fixture
def counting_opener():
    """Opener double that counts calls and delegates to a real open."""
    calls: list[Path] = []

    def opener(path: Path):
        calls.append(path)
        return open(path, "rb")

    opener.calls = calls
    return opener


@pytest.fixture
def mock_manager():
    """ElevationService stand-in for tool error paths."""
    manager = MagicMock()
    manager.directory = Path("/nonexistent/hgt")
    manager.validate_coordinates = False
    manager.open_tiles = MagicMock(return_value=[])
    return manager


def capture_tools(register, manager) -> dict:
    """Run a register_* function and return a dict mapping name -> coroutine function."""
    tools = {}
    mcp = MagicMock()

    def capture_tool(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn

        return decorator

    mcp.tool = capture_tool
    register(mcp, manager)
    return tools
