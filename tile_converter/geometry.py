"""
Sheet geometry calculations.

Pure functions relating a tile stream's byte length to the size of the
pixel grid it decodes to. The sheet is always ROW_SIZE (128) pixels wide.
"""

from .constants import MAX_BPP, MIN_BPP, TILE_HEIGHT, TILES_PER_ROW
from .exceptions import ConfigurationError


def bytes_per_tile_row(bpp: int) -> int:
    """
    Number of bytes in one full row of TILES_PER_ROW tiles.

    Raises:
        ConfigurationError: If bpp is outside [1, 8]
    """
    if not MIN_BPP <= bpp <= MAX_BPP:
        raise ConfigurationError(f"bpp must be between {MIN_BPP} and {MAX_BPP}, got {bpp}")
    return bpp * TILE_HEIGHT * TILES_PER_ROW


def img_height(num_bytes: int, bpp: int) -> int:
    """
    Height in pixels of the image that ``num_bytes`` of tile data decode to.

    The byte count is rounded up to whole tile rows, so a trailing partial
    row still gets a full 8 pixel strip.

    Args:
        num_bytes: Size of the tile data
        bpp: Bits per pixel

    Returns:
        Image height, always a multiple of 8

    Example:
        2bpp data is 256 bytes per tile row, so ``img_height(256, 2) == 8``
        and ``img_height(257, 2) == 16``.
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes can't be negative: {num_bytes}")
    row_bytes = bytes_per_tile_row(bpp)
    rounded = -(-num_bytes // row_bytes) * row_bytes
    return rounded // (bpp * TILE_HEIGHT) // TILES_PER_ROW * TILE_HEIGHT


def tile_count(num_bytes: int, bpp: int) -> int:
    """Number of whole tiles in ``num_bytes`` of data. Leftover bytes are ignored."""
    return num_bytes // (bytes_per_tile_row(bpp) // TILES_PER_ROW)
