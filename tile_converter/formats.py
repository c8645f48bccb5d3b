#!/usr/bin/env python3
"""
Format registry
Maps format names to their pixel codecs and knows which bit depths each
format accepts.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .constants import GBA_BPP_VALUES, MAX_BPP, MIN_BPP, TILE_HEIGHT
from .exceptions import ConfigurationError
from .pixel_codec import (
    decode_pixel_gba,
    decode_pixel_interwined,
    decode_pixel_planar,
    encode_row_gba,
    encode_row_interwined,
    encode_row_planar,
)


class Format(Enum):
    """Hardware byte layouts for tile data."""

    # Bitplane i holds bit i of every pixel, one byte per tile row (NES)
    PLANAR = "planar"
    # Bitplanes interleaved two at a time (SNES, Game Boy)
    INTERWINED = "interwined"
    # Packed pixels, a nibble (4bpp) or a byte (8bpp) each
    GBA = "gba"


@dataclass(frozen=True)
class TileCodec:
    """Pixel decoder and row encoder bound to one format and bit depth"""

    format: Format
    bpp: int
    decode_pixel: Callable
    encode_row: Callable

    @property
    def bytes_per_tile(self) -> int:
        return bytes_per_tile(self.bpp)


_CODECS = {
    Format.PLANAR: (decode_pixel_planar, encode_row_planar),
    Format.INTERWINED: (decode_pixel_interwined, encode_row_interwined),
    Format.GBA: (decode_pixel_gba, encode_row_gba),
}

# Named hardware presets: (format, bpp)
PRESETS = {
    "nes": (Format.PLANAR, 2),
    "gb": (Format.INTERWINED, 2),
    "snes": (Format.INTERWINED, 4),
    "gba": (Format.GBA, 4),
}


def string_to_format(name: str) -> Format:
    """
    Look up a format by name.

    Args:
        name: Format name, case-insensitive ("planar", "interwined", "gba")

    Returns:
        The matching Format

    Raises:
        ConfigurationError: If no format has that name
    """
    try:
        return Format(name.strip().lower())
    except ValueError:
        names = ", ".join(format_names())
        raise ConfigurationError(f"Unknown format '{name}' (expected one of: {names})") from None


def format_to_string(fmt: Format) -> str:
    """Return the symbolic name of a format."""
    return fmt.value


def format_names() -> list[str]:
    """Names of all supported formats."""
    return [fmt.value for fmt in Format]


def supported_bpp(fmt: Format) -> tuple[int, ...]:
    """Bit depths a format can encode."""
    if fmt is Format.GBA:
        return GBA_BPP_VALUES
    return tuple(range(MIN_BPP, MAX_BPP + 1))


def check_bpp(fmt: Format, bpp: int) -> None:
    """
    Validate a (format, bpp) pair.

    Raises:
        ConfigurationError: If the format can't use that bit depth
    """
    if not isinstance(bpp, int) or isinstance(bpp, bool):
        raise ConfigurationError(f"bpp must be an integer, got {bpp!r}")
    if bpp not in supported_bpp(fmt):
        allowed = ", ".join(str(b) for b in supported_bpp(fmt))
        raise ConfigurationError(
            f"{format_to_string(fmt)} format doesn't support {bpp} bpp (allowed: {allowed})"
        )


def get_codec(fmt: Format, bpp: int) -> TileCodec:
    """
    Get the codec for a format at a given bit depth.

    Raises:
        ConfigurationError: If the pair is unsupported
    """
    if not isinstance(fmt, Format):
        raise ConfigurationError(f"Not a tile format: {fmt!r}")
    check_bpp(fmt, bpp)
    decode_pixel, encode_row = _CODECS[fmt]
    return TileCodec(fmt, bpp, decode_pixel, encode_row)


def get_preset(name: str) -> tuple[Format, int]:
    """
    Look up a named hardware preset.

    Raises:
        ConfigurationError: If the preset is unknown
    """
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        names = ", ".join(PRESETS)
        raise ConfigurationError(f"Unknown mode '{name}' (expected one of: {names})") from None


def bytes_per_tile(bpp: int) -> int:
    """Raw size of one 8x8 tile. The same for every format."""
    return bpp * TILE_HEIGHT
