#!/usr/bin/env python3
"""
Tile sheet encoding/decoding
Walks tile data as a sheet of TILES_PER_ROW (16) tiles per row and converts
it to and from a row-major grid of palette indices.
"""

from collections.abc import Iterator, Sequence

from .constants import ROW_SIZE, TILE_HEIGHT, TILE_WIDTH, TILES_PER_ROW
from .exceptions import DimensionError
from .formats import Format, TileCodec, get_codec
from .logging_config import get_logger

logger = get_logger(__name__)


def decode_tile(tile: Sequence[int], bpp: int, fmt: Format) -> list[list[int]]:
    """
    Decode a single 8x8 tile.

    Args:
        tile: Raw tile bytes (bpp * 8 of them)
        bpp: Bits per pixel
        fmt: Tile format

    Returns:
        8 rows of 8 color indices

    Raises:
        ConfigurationError: If the format doesn't support bpp
        IndexError: If the tile data is too short
    """
    codec = get_codec(fmt, bpp)
    if len(tile) < codec.bytes_per_tile:
        raise IndexError(f"Expected {codec.bytes_per_tile} bytes of tile data, got {len(tile)}")
    return [
        [codec.decode_pixel(tile, y, x, bpp) for x in range(TILE_WIDTH)]
        for y in range(TILE_HEIGHT)
    ]


def encode_tile(rows: Sequence[Sequence[int]], bpp: int, fmt: Format) -> bytes:
    """
    Encode a single 8x8 tile.

    Args:
        rows: 8 rows of 8 color indices
        bpp: Bits per pixel
        fmt: Tile format

    Returns:
        bpp * 8 bytes of encoded tile data

    Raises:
        ConfigurationError: If the format doesn't support bpp
        ValueError: If rows isn't 8x8
    """
    if len(rows) != TILE_HEIGHT or any(len(row) != TILE_WIDTH for row in rows):
        raise ValueError(f"Expected {TILE_HEIGHT} rows of {TILE_WIDTH} pixels")
    return _encode_tile(rows, get_codec(fmt, bpp))


def _encode_tile(rows: Sequence[Sequence[int]], codec: TileCodec) -> bytes:
    res = bytearray(codec.bytes_per_tile)
    for y in range(TILE_HEIGHT):
        codec.encode_row(res, rows[y], codec.bpp, y)
    return bytes(res)


def decode_row(tiles: bytes, y: int, num_tiles: int, codec: TileCodec) -> list[int]:
    """
    Decode pixel row ``y`` across one row of tiles.

    Tiles at positions ``num_tiles`` and above are missing from the data and
    come out as zeros.

    Args:
        tiles: Data for one tile row (may be short)
        y: Pixel row inside the tiles (0-7)
        num_tiles: Number of complete tiles present in ``tiles``
        codec: Codec to decode with

    Returns:
        ROW_SIZE (128) color indices
    """
    bpt = codec.bytes_per_tile
    row = [0] * ROW_SIZE
    for n in range(min(num_tiles, TILES_PER_ROW)):
        tile = tiles[n * bpt:(n + 1) * bpt]
        for x in range(TILE_WIDTH):
            row[n * TILE_WIDTH + x] = codec.decode_pixel(tile, y, x, codec.bpp)
    return row


def decode_to_indices(data: bytes, bpp: int, fmt: Format) -> Iterator[list[int]]:
    """
    Decode tile data into rows of palette indices.

    The format is validated immediately; decoding happens lazily as the
    returned iterator is consumed. Each row is ROW_SIZE (128) indices wide
    and rows come out top to bottom. If the data ends partway through a tile
    row, the missing tiles are filled with index 0, and the bytes of a
    trailing partial tile are ignored.

    Args:
        data: Raw tile data
        bpp: Bits per pixel
        fmt: Tile format

    Returns:
        Iterator over pixel rows (img_height(len(data), bpp) of them)

    Raises:
        ConfigurationError: If the format doesn't support bpp
    """
    codec = get_codec(fmt, bpp)
    return _decode_rows(bytes(data), codec)


def _decode_rows(data: bytes, codec: TileCodec) -> Iterator[list[int]]:
    bpt = codec.bytes_per_tile
    row_bytes = bpt * TILES_PER_ROW
    logger.debug(
        f"Decoding {len(data)} bytes as {codec.format.value} {codec.bpp}bpp "
        f"({len(data) // bpt} tiles)"
    )
    for offset in range(0, len(data), row_bytes):
        tiles = data[offset:offset + row_bytes]
        num_tiles = len(tiles) // bpt
        if num_tiles < TILES_PER_ROW:
            logger.debug(
                f"Tile row at 0x{offset:X} has {num_tiles} tiles, "
                f"padding {TILES_PER_ROW - num_tiles} with zeros"
            )
        for y in range(TILE_HEIGHT):
            yield decode_row(tiles, y, num_tiles, codec)


def check_dimensions(width: int, height: int) -> None:
    """
    Check that a pixel grid splits evenly into 8x8 tiles.

    Raises:
        DimensionError: If width or height is negative or not a multiple of 8
    """
    if width < 0 or height < 0:
        raise DimensionError(f"Invalid dimensions {width}x{height}")
    if width % TILE_WIDTH != 0 or height % TILE_HEIGHT != 0:
        raise DimensionError(
            f"Width and height must be multiples of {TILE_WIDTH}, got {width}x{height}"
        )


def encode_from_indices(indices: Sequence[int], width: int, height: int,
                        bpp: int, fmt: Format) -> Iterator[bytes]:
    """
    Encode a grid of palette indices into tile data.

    Arguments are validated immediately, so an invalid grid never produces
    any output. The grid is cut into 8x8 tiles left to right, top to bottom,
    and the returned iterator yields each tile's encoded bytes in that order.
    Index bits above ``bpp`` are dropped.

    Args:
        indices: Row-major palette indices, width * height of them
        width: Grid width in pixels (multiple of 8)
        height: Grid height in pixels (multiple of 8)
        bpp: Bits per pixel
        fmt: Tile format

    Returns:
        Iterator over encoded tiles, bpp * 8 bytes each

    Raises:
        ConfigurationError: If the format doesn't support bpp
        DimensionError: If the grid can't be split into 8x8 tiles
    """
    codec = get_codec(fmt, bpp)
    check_dimensions(width, height)
    if len(indices) != width * height:
        raise DimensionError(
            f"Expected {width * height} indices for {width}x{height}, got {len(indices)}"
        )
    return _encode_tiles(indices, width, height, codec)


def _encode_tiles(indices: Sequence[int], width: int, height: int,
                  codec: TileCodec) -> Iterator[bytes]:
    logger.debug(
        f"Encoding {width}x{height} pixels as {codec.format.value} {codec.bpp}bpp "
        f"({(width // TILE_WIDTH) * (height // TILE_HEIGHT)} tiles)"
    )
    for tile_y in range(0, height, TILE_HEIGHT):
        for tile_x in range(0, width, TILE_WIDTH):
            rows = []
            for y in range(TILE_HEIGHT):
                start = (tile_y + y) * width + tile_x
                rows.append(indices[start:start + TILE_WIDTH])
            yield _encode_tile(rows, codec)


def decode_tiles(data: bytes, bpp: int, fmt: Format) -> list[int]:
    """Decode tile data into one flat row-major list of indices."""
    indices = []
    for row in decode_to_indices(data, bpp, fmt):
        indices.extend(row)
    return indices


def encode_tiles(indices: Sequence[int], width: int, height: int,
                 bpp: int, fmt: Format) -> bytes:
    """Encode a grid of indices into one block of tile data."""
    return b"".join(encode_from_indices(indices, width, height, bpp, fmt))
