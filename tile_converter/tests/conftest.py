"""
Shared pytest fixtures and configuration for tile converter tests
"""

import logging
import random
import tempfile
from pathlib import Path

import pytest

from tile_converter.logging_config import LOGGER_NAME


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() so every test starts with a propagating logger"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible"""
    return random.Random(0x5EED)


@pytest.fixture
def sample_4bpp_tile():
    """Create a sample SNES 4bpp tile (32 bytes) with a diagonal in bitplane 0"""
    tile_data = bytearray(32)
    for y in range(8):
        tile_data[y * 2] = 1 << (7 - y)
    return bytes(tile_data)


@pytest.fixture
def nes_tile_row_data():
    """One full tile row of 2bpp planar data (16 tiles, 256 bytes) with every pixel = 3"""
    return b"\xff" * 256


@pytest.fixture
def tile_file(temp_dir, nes_tile_row_data):
    """Create a temporary tile data file"""
    path = temp_dir / "tiles.chr"
    path.write_bytes(nes_tile_row_data)
    return path
