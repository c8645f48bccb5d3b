#!/usr/bin/env python3
"""
Palette utilities
Match concrete colors to palette indices and back, and build the default
grayscale palettes used when no palette is given.

A palette is a sequence of colors; a color is a tuple of 1 to 4 byte
channels (L, LA, RGB or RGBA). All colors in one palette share a channel
count.
"""

from collections.abc import Sequence
from functools import lru_cache
from typing import Optional

from .constants import (
    ALPHA_OPAQUE,
    GRAY_MAX_VALUE,
    MAX_BPP,
    MIN_BPP,
    SUPPORTED_CHANNELS,
)
from .exceptions import ConfigurationError, IndexOutOfRangeError, PaletteMismatchError
from .logging_config import get_logger

logger = get_logger(__name__)

Color = tuple[int, ...]
Palette = Sequence[Color]


def palette_size(bpp: int) -> int:
    """Number of colors addressable at a bit depth."""
    return 1 << bpp


def palette_channels(palette: Palette) -> int:
    """
    Get the channel count shared by every color of a palette.

    Raises:
        PaletteMismatchError: If the palette is empty, mixes channel counts
            or uses an unsupported count
    """
    if not palette:
        raise PaletteMismatchError("Palette is empty")
    channels = len(palette[0])
    if channels not in SUPPORTED_CHANNELS:
        raise PaletteMismatchError(f"Unsupported number of channels in palette: {channels}")
    for i, color in enumerate(palette):
        if len(color) != channels:
            raise PaletteMismatchError(
                f"Palette color {i} has {len(color)} channels, expected {channels}"
            )
    return channels


def check_substitute(substitute: Optional[int], palette: Palette) -> None:
    """
    Check that a substitute index points into the palette.

    Raises:
        ConfigurationError: If substitute is given and out of range
    """
    if substitute is not None and not 0 <= substitute < len(palette):
        raise ConfigurationError(
            f"Substitute index {substitute} is out of range for a palette of {len(palette)} colors"
        )


def match_to_indices(pixels: Sequence[Sequence[int]], palette: Palette,
                     substitute: Optional[int] = None) -> list[int]:
    """
    Turn colors into palette indices by exact match.

    When a color occurs more than once in the palette the first entry wins.
    No nearest-color search is done.

    Args:
        pixels: Colors to look up, each with the palette's channel count
        palette: Palette to match against
        substitute: Index to use for colors missing from the palette. By
            default a missing color is an error.

    Returns:
        One palette index per pixel

    Raises:
        PaletteMismatchError: On a channel count mismatch, or for a missing
            color when no substitute is given. ``position`` is the index of
            the first offending pixel.
        ConfigurationError: If substitute is outside the palette
    """
    channels = palette_channels(palette)
    check_substitute(substitute, palette)
    lookup = {}
    for i, entry in enumerate(palette):
        lookup.setdefault(tuple(entry), i)

    indices = []
    missing = 0
    for position, pixel in enumerate(pixels):
        color = tuple(pixel)
        if len(color) != channels:
            raise PaletteMismatchError(
                f"Pixel {position} has {len(color)} channels but the palette has {channels}",
                position,
            )
        index = lookup.get(color)
        if index is None:
            if substitute is None:
                raise PaletteMismatchError(
                    f"Color {color} of pixel {position} is not in the palette", position
                )
            if missing == 0:
                logger.warning(
                    f"Color {color} of pixel {position} is not in the palette, "
                    f"using index {substitute}"
                )
            missing += 1
            index = substitute
        indices.append(index)

    if missing > 1:
        logger.warning(f"{missing} pixels had colors missing from the palette")
    return indices


def apply_palette(indices: Sequence[int], palette: Palette) -> list[Color]:
    """
    Turn palette indices into colors.

    Raises:
        IndexOutOfRangeError: If an index is negative or past the end of the
            palette
    """
    size = len(palette)
    colors = []
    for position, index in enumerate(indices):
        if not 0 <= index < size:
            raise IndexOutOfRangeError(
                f"Index {index} of pixel {position} is out of range for a "
                f"palette of {size} colors",
                position,
                index,
            )
        colors.append(tuple(palette[index]))
    return colors


@lru_cache(maxsize=None)
def grayscale_palette(bpp: int, channels: int = 4) -> tuple[Color, ...]:
    """
    Build the default palette for a bit depth.

    Gray levels go from black at index 0 to white at the last index in even
    steps. Alpha, when present, is opaque.

    Args:
        bpp: Bits per pixel (1-8)
        channels: 1 (L), 2 (LA), 3 (RGB) or 4 (RGBA)

    Returns:
        2**bpp colors

    Raises:
        ConfigurationError: If bpp or channels is out of range
    """
    if not MIN_BPP <= bpp <= MAX_BPP:
        raise ConfigurationError(f"No default palette for {bpp} bpp")
    if channels not in SUPPORTED_CHANNELS:
        raise ConfigurationError(f"Unsupported number of channels: {channels}")

    last = palette_size(bpp) - 1
    palette = []
    for t in range(last + 1):
        value = round(GRAY_MAX_VALUE * t / last)
        if channels == 1:
            palette.append((value,))
        elif channels == 2:
            palette.append((value, ALPHA_OPAQUE))
        elif channels == 3:
            palette.append((value, value, value))
        else:
            palette.append((value, value, value, ALPHA_OPAQUE))
    return tuple(palette)
