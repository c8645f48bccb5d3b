#!/usr/bin/env python3
"""
Image conversion helpers
Bridges tile data and Pillow images: decoding tile data to a colored sheet
and encoding an image back to tile data through a palette.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from .constants import CHANNEL_MODES, ROW_SIZE
from .exceptions import DimensionError
from .formats import Format, get_codec
from .geometry import img_height
from .logging_config import get_logger
from .palette_utils import (
    Color,
    Palette,
    apply_palette,
    grayscale_palette,
    match_to_indices,
    palette_channels,
)
from .tile_utils import check_dimensions, decode_tiles, encode_tiles

logger = get_logger(__name__)

ImageSource = Union[str, Path, Image.Image]

MODE_CHANNELS = {mode: channels for channels, mode in CHANNEL_MODES.items()}


@dataclass
class Raster:
    """Decoded image pixels as color tuples, row-major"""

    width: int
    height: int
    channels: int
    pixels: list[Color]


def open_image(source: ImageSource) -> Image.Image:
    """Open an image file, or pass an already open image through."""
    if isinstance(source, Image.Image):
        return source
    with Image.open(source) as img:
        img.load()
        return img.copy()


def normalize_mode(img: Image.Image, channels: Optional[int] = None) -> Image.Image:
    """
    Convert an image to L, LA, RGB or RGBA.

    Args:
        img: Image to convert
        channels: Channel count to convert to. By default L/LA/RGB/RGBA
            images are kept as they are and anything else becomes RGBA.

    Returns:
        Image in one of the supported modes
    """
    if channels is not None:
        mode = CHANNEL_MODES[channels]
    elif img.mode in MODE_CHANNELS:
        mode = img.mode
    else:
        mode = "RGBA"

    if img.mode != mode:
        logger.debug(f"Converting image from {img.mode} to {mode}")
        img = img.convert(mode)
    return img


def load_raster(source: ImageSource, channels: Optional[int] = None) -> Raster:
    """
    Read an image's pixels as color tuples.

    Args:
        source: Image file path or Pillow image
        channels: Channel count to convert to (see normalize_mode)

    Returns:
        Raster with one color tuple per pixel
    """
    img = normalize_mode(open_image(source), channels)
    pixels = np.asarray(img, dtype=np.uint8)
    count = 1 if pixels.ndim == 2 else pixels.shape[2]
    colors = [tuple(p) for p in pixels.reshape(-1, count).tolist()]
    return Raster(img.width, img.height, count, colors)


def load_palette_image(source: ImageSource) -> list[Color]:
    """
    Read a palette from an image.

    Every pixel is one palette entry, in row-major order, so a 16x1 strip
    gives a 16 color palette.
    """
    raster = load_raster(source)
    logger.debug(f"Loaded {len(raster.pixels)} color palette with {raster.channels} channels")
    return raster.pixels


def tiles_to_image(data: bytes, bpp: int, fmt: Format,
                   palette: Optional[Palette] = None) -> Image.Image:
    """
    Decode tile data into an image 16 tiles (128 pixels) wide.

    Args:
        data: Raw tile data
        bpp: Bits per pixel
        fmt: Tile format
        palette: Colors for each index; defaults to an RGBA grayscale ramp

    Returns:
        Image whose mode follows the palette's channel count

    Raises:
        ConfigurationError: If the format doesn't support bpp
        DimensionError: If there is no data
        IndexOutOfRangeError: If the palette is too small for the data
    """
    indices = decode_tiles(data, bpp, fmt)
    height = img_height(len(data), bpp)
    if height == 0:
        raise DimensionError("No tile data to decode")

    if palette is None:
        palette = grayscale_palette(bpp)
    channels = palette_channels(palette)

    colors = apply_palette(indices, palette)

    pixels = np.array(colors, dtype=np.uint8).reshape(height, ROW_SIZE, channels)
    if channels == 1:
        pixels = pixels[:, :, 0]
    logger.debug(f"Decoded {len(data)} bytes to a {ROW_SIZE}x{height} image")
    return Image.fromarray(pixels)


def image_to_tiles(source: ImageSource, bpp: int, fmt: Format,
                   palette: Optional[Palette] = None,
                   substitute: Optional[int] = None) -> bytes:
    """
    Encode an image into tile data.

    Each pixel's color is looked up in the palette. If an explicit palette
    has a different channel count than the image, the image is converted to
    the palette's mode first.

    Args:
        source: Image file path or Pillow image
        bpp: Bits per pixel
        fmt: Tile format
        palette: Colors for each index; defaults to a grayscale ramp with
            the image's channel count
        substitute: Index for colors missing from the palette (by default
            they are an error)

    Returns:
        Encoded tile data, bpp * 8 bytes per tile

    Raises:
        ConfigurationError: If the format doesn't support bpp, or substitute
            is outside the palette
        DimensionError: If the image size isn't a multiple of 8
        PaletteMismatchError: If a color isn't in the palette
    """
    get_codec(fmt, bpp)
    channels = palette_channels(palette) if palette is not None else None
    raster = load_raster(source, channels)
    check_dimensions(raster.width, raster.height)

    if palette is None:
        palette = grayscale_palette(bpp, raster.channels)
    indices = match_to_indices(raster.pixels, palette, substitute)
    data = encode_tiles(indices, raster.width, raster.height, bpp, fmt)
    logger.debug(f"Encoded a {raster.width}x{raster.height} image to {len(data)} bytes")
    return data
