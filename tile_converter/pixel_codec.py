#!/usr/bin/env python3
"""
Per-format pixel codecs
Read or write the color index of one pixel inside one 8x8 tile.

Every decoder has the signature ``(tile, y, x, bpp) -> int`` and every row
encoder ``(res, row, bpp, y) -> None``, where ``res`` is the tile's mutable
byte buffer and ``row`` holds the 8 indices of tile row ``y``. Column ``x = 0``
is the leftmost pixel, which the bitplane formats store in bit 7.
"""

from collections.abc import Sequence

from .bitfield import getbit, getbits, setbit, setbits
from .constants import GBA_BPP_VALUES, INTERWINED_PAIR_SIZE, TILE_HEIGHT, TILE_WIDTH
from .exceptions import ConfigurationError


def check_gba_bpp(bpp: int) -> None:
    """
    Raise ConfigurationError unless ``bpp`` is a GBA bit depth.

    Raises:
        ConfigurationError: If bpp is not 4 or 8
    """
    if bpp not in GBA_BPP_VALUES:
        raise ConfigurationError(
            f"GBA format only supports {GBA_BPP_VALUES[0]} or {GBA_BPP_VALUES[1]} bpp, got {bpp}"
        )


# Decoders

def decode_pixel_planar(tile: Sequence[int], y: int, x: int, bpp: int) -> int:
    """
    Decode one pixel of a planar tile.

    Bitplane ``i`` keeps one byte per tile row at offset ``y + i * 8``.

    Args:
        tile: Raw tile bytes (bpp * 8 of them)
        y: Pixel row inside the tile (0-7)
        x: Pixel column inside the tile (0-7)
        bpp: Bits per pixel

    Returns:
        Color index of the pixel
    """
    nbit = 7 - x
    value = 0
    for i in range(bpp):
        value = setbit(value, i, getbit(tile[y + i * TILE_HEIGHT], nbit))
    return value


def decode_pixel_interwined(tile: Sequence[int], y: int, x: int, bpp: int) -> int:
    """
    Decode one pixel of an interwined (SNES/Game Boy style) tile.

    Bitplanes are stored in pairs: pair ``i`` takes 16 bytes starting at
    ``i * 16``, with the low and high plane bytes of each row next to each
    other. With an odd bpp the last plane is stored alone, one byte per row.
    """
    nbit = 7 - x
    value = 0
    for i in range(bpp // 2):
        base = i * INTERWINED_PAIR_SIZE + y * 2
        value = setbit(value, i * 2, getbit(tile[base], nbit))
        value = setbit(value, i * 2 + 1, getbit(tile[base + 1], nbit))
    if bpp % 2 != 0:
        i = bpp // 2
        value = setbit(value, i * 2, getbit(tile[i * INTERWINED_PAIR_SIZE + y], nbit))
    return value


def decode_pixel_gba(tile: Sequence[int], y: int, x: int, bpp: int) -> int:
    """
    Decode one pixel of a GBA tile.

    At 8bpp each byte is one pixel. At 4bpp each byte holds two pixels: the
    left one in the low nibble and the right one in the high nibble.

    Raises:
        ConfigurationError: If bpp is not 4 or 8
    """
    check_gba_bpp(bpp)
    if bpp == 8:
        return tile[y * TILE_WIDTH + x]
    return getbits(tile[y * 4 + x // 2], (x & 1) * 4, 4)


# Encoders

def encode_planar_row(row: Sequence[int], bpp: int) -> list[int]:
    """
    Split one 8-pixel tile row into bitplanes.

    Args:
        row: 8 color indices, leftmost first
        bpp: Bits per pixel

    Returns:
        List of ``bpp`` bytes, the byte for bitplane 0 first
    """
    planes = []
    for i in range(bpp):
        byte = 0
        for c in range(TILE_WIDTH):
            byte = setbit(byte, 7 - c, getbit(row[c], i))
        planes.append(byte)
    return planes


def encode_row_planar(res: bytearray, row: Sequence[int], bpp: int, y: int) -> None:
    """Write tile row ``y`` in planar layout."""
    for i, byte in enumerate(encode_planar_row(row, bpp)):
        res[y + i * TILE_HEIGHT] = byte


def encode_row_interwined(res: bytearray, row: Sequence[int], bpp: int, y: int) -> None:
    """Write tile row ``y`` in interwined layout."""
    planes = encode_planar_row(row, bpp)
    for i in range(bpp // 2):
        base = i * INTERWINED_PAIR_SIZE + y * 2
        res[base] = planes[i * 2]
        res[base + 1] = planes[i * 2 + 1]
    if bpp % 2 != 0:
        i = bpp // 2
        res[i * INTERWINED_PAIR_SIZE + y] = planes[i * 2]


def encode_row_gba(res: bytearray, row: Sequence[int], bpp: int, y: int) -> None:
    """
    Write tile row ``y`` in GBA layout.

    Raises:
        ConfigurationError: If bpp is not 4 or 8
    """
    check_gba_bpp(bpp)
    if bpp == 8:
        for x in range(TILE_WIDTH):
            res[y * TILE_WIDTH + x] = row[x] & 0xFF
        return

    for x in range(TILE_WIDTH):
        i = y * 4 + x // 2
        res[i] = setbits(res[i], (x & 1) * 4, 4, row[x])
