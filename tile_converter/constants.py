#!/usr/bin/env python3
"""
Constants for the tile converter
All magic numbers and hardware layout specifications in one place
"""

# Tile specifications
TILE_WIDTH = 8  # pixels
TILE_HEIGHT = 8  # pixels

# Tile sheet layout
TILES_PER_ROW = 16
ROW_SIZE = TILES_PER_ROW * TILE_WIDTH  # 128 pixels

# Bit depth limits
MIN_BPP = 1
MAX_BPP = 8
GBA_BPP_VALUES = (4, 8)

# Interwined format: each pair of bitplanes spans 16 bytes
INTERWINED_PAIR_SIZE = 16

# Palette specifications
GRAY_MAX_VALUE = 255
ALPHA_OPAQUE = 255
SUPPORTED_CHANNELS = (1, 2, 3, 4)

# Pillow modes for each channel count
CHANNEL_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}

# Command line defaults
DEFAULT_BPP = 2
DEFAULT_FORMAT = "planar"
DEFAULT_IMAGE_OUTPUT = "output.png"
DEFAULT_TILE_OUTPUT = "output.chr"
