"""Custom exceptions for the tile converter"""

from typing import Optional


class TileConverterError(Exception):
    """Base exception for all tile converter errors."""


class ConfigurationError(TileConverterError):
    """Raised for an unsupported format, bit depth or channel count."""


class DimensionError(TileConverterError):
    """Raised when pixel grid dimensions can't be split into 8x8 tiles."""


class PaletteMismatchError(TileConverterError):
    """
    Raised when image colors and a palette don't fit together.

    Attributes:
        position: Index of the first offending pixel, or None when the
            palette itself is malformed
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class IndexOutOfRangeError(TileConverterError):
    """Raised when an indexed pixel points past the end of the palette."""

    def __init__(self, message: str, position: int, index: int):
        super().__init__(message)
        self.position = position
        self.index = index
