"""
Tile Converter
Converts retro console tile graphics (NES, Game Boy, SNES, GBA) to indexed
images and back
"""

from .exceptions import (
    ConfigurationError,
    DimensionError,
    IndexOutOfRangeError,
    PaletteMismatchError,
    TileConverterError,
)
from .formats import Format, format_to_string, get_codec, string_to_format, supported_bpp
from .geometry import img_height
from .palette_utils import apply_palette, grayscale_palette, match_to_indices
from .tile_utils import decode_to_indices, encode_from_indices

__version__ = "1.0.0"
__all__ = [
    "ConfigurationError",
    "DimensionError",
    "Format",
    "IndexOutOfRangeError",
    "PaletteMismatchError",
    "TileConverterError",
    "apply_palette",
    "decode_to_indices",
    "encode_from_indices",
    "format_to_string",
    "get_codec",
    "grayscale_palette",
    "img_height",
    "match_to_indices",
    "string_to_format",
    "supported_bpp",
]
