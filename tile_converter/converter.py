#!/usr/bin/env python3
"""
Tile data <-> PNG converter

Usage:
    tile-converter input.chr [-o output.png] [options]
    tile-converter -r input.png [-o output.chr] [options]

Options:
    -o, --output <file>    Output file (default: output.png, or output.chr with -r)
    -r, --reverse          Convert an image to tile data
    -b, --bpp <n>          Bits per pixel, 1-8 (default: 2)
    -f, --format <name>    planar, interwined or gba (default: planar)
    -m, --mode <preset>    nes, gb, snes or gba; sets format and bpp
    -p, --palette <file>   Palette image, one pixel per color
    --substitute <index>   Index for colors missing from the palette
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config import ConversionOptions, resolve_options
from .constants import DEFAULT_IMAGE_OUTPUT, DEFAULT_TILE_OUTPUT
from .exceptions import PaletteMismatchError, TileConverterError
from .formats import PRESETS, format_names, format_to_string
from .geometry import img_height, tile_count
from .imaging import image_to_tiles, load_palette_image, tiles_to_image
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def chr_to_image(input_file: str, output_file: str, options: ConversionOptions) -> None:
    """Decode a tile data file and save it as an image."""
    data = Path(input_file).read_bytes()
    img = tiles_to_image(data, options.bpp, options.format, options.palette)
    img.save(output_file, "PNG")
    logger.info(
        f"Converted {len(data)} bytes ({tile_count(len(data), options.bpp)} tiles) "
        f"to {output_file}"
    )
    logger.info(f"Image size: {img.width}x{img_height(len(data), options.bpp)} pixels")


def image_to_chr(input_file: str, output_file: str, options: ConversionOptions) -> None:
    """Encode an image file and save it as tile data."""
    data = image_to_tiles(
        input_file, options.bpp, options.format, options.palette, options.substitute
    )
    Path(output_file).write_bytes(data)
    logger.info(
        f"Wrote {len(data)} bytes ({tile_count(len(data), options.bpp)} tiles) to {output_file}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tile-converter",
        description="Convert retro console tile data to PNG images and back",
    )
    parser.add_argument("input", help="Input file (tile data, or an image with -r)")
    parser.add_argument("-o", "--output", help="Output file")
    parser.add_argument("-r", "--reverse", action="store_true",
                        help="Convert an image to tile data")
    parser.add_argument("-b", "--bpp", type=int, help="Bits per pixel (default: 2)")
    parser.add_argument("-f", "--format", choices=format_names(),
                        help="Tile data format (default: planar)")
    parser.add_argument("-m", "--mode", choices=list(PRESETS),
                        help="Hardware preset setting format and bpp")
    parser.add_argument("-p", "--palette", help="Palette image, one pixel per color")
    parser.add_argument("--substitute", type=int,
                        help="Palette index for colors missing from the palette")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        palette = load_palette_image(args.palette) if args.palette else None
        options = resolve_options(
            bpp=args.bpp,
            format_name=args.format,
            preset=args.mode,
            palette=palette,
            substitute=args.substitute,
        )
        logger.debug(f"Using {format_to_string(options.format)} format at {options.bpp}bpp")

        if args.reverse:
            image_to_chr(args.input, args.output or DEFAULT_TILE_OUTPUT, options)
        else:
            chr_to_image(args.input, args.output or DEFAULT_IMAGE_OUTPUT, options)
    except PaletteMismatchError as e:
        logger.error(f"Palette mismatch: {e}")
        if e.position is not None:
            logger.error("Use --substitute to map missing colors to a palette index")
        return 1
    except (TileConverterError, OSError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
