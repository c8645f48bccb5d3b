#!/usr/bin/env python3
"""
Conversion options
Resolves defaults, hardware presets and explicit settings into one validated
set of options.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_BPP, DEFAULT_FORMAT
from .formats import Format, check_bpp, get_preset, string_to_format
from .palette_utils import Palette, check_substitute, grayscale_palette, palette_channels


@dataclass
class ConversionOptions:
    """Everything a conversion needs besides the data itself"""

    format: Format = Format(DEFAULT_FORMAT)
    bpp: int = DEFAULT_BPP
    palette: Optional[Palette] = None
    substitute: Optional[int] = None

    def validate(self) -> "ConversionOptions":
        """
        Check that the options can be used together.

        Raises:
            ConfigurationError: If the format can't use bpp
            PaletteMismatchError: If the palette is malformed
        """
        check_bpp(self.format, self.bpp)
        if self.palette is not None:
            palette_channels(self.palette)
        check_substitute(self.substitute, self.palette_or_default())
        return self

    def palette_or_default(self, channels: int = 4) -> Palette:
        """The explicit palette, or the grayscale one for this bit depth."""
        if self.palette is not None:
            return self.palette
        return grayscale_palette(self.bpp, channels)


def resolve_options(bpp: Optional[int] = None,
                    format_name: Optional[str] = None,
                    preset: Optional[str] = None,
                    palette: Optional[Palette] = None,
                    substitute: Optional[int] = None) -> ConversionOptions:
    """
    Build validated conversion options.

    Defaults are applied first, then the preset, then explicit ``bpp`` and
    ``format_name`` values, so ``preset="snes", bpp=2`` gives interwined 2bpp.

    Raises:
        ConfigurationError: For unknown names or an unsupported combination
    """
    options = ConversionOptions()
    if preset is not None:
        options.format, options.bpp = get_preset(preset)
    if format_name is not None:
        options.format = string_to_format(format_name)
    if bpp is not None:
        options.bpp = bpp
    options.palette = palette
    options.substitute = substitute
    return options.validate()
