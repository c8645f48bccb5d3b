#!/usr/bin/env python3
"""
Tests for palette_utils.py
Exact color matching, palette application and default grayscale palettes
"""

import logging

import pytest

from tile_converter.exceptions import (
    ConfigurationError,
    IndexOutOfRangeError,
    PaletteMismatchError,
)
from tile_converter.palette_utils import (
    apply_palette,
    grayscale_palette,
    match_to_indices,
    palette_channels,
    palette_size,
)

RGB_PALETTE = [(0, 0, 0), (255, 0, 0), (0, 255, 0), (0, 0, 255)]


class TestMatchToIndices:
    """Test color -> index matching"""

    def test_exact_matches(self):
        pixels = [(0, 255, 0), (0, 0, 0), (0, 0, 255), (255, 0, 0)]
        assert match_to_indices(pixels, RGB_PALETTE) == [2, 0, 3, 1]

    def test_accepts_lists(self):
        assert match_to_indices([[255, 0, 0]], [[0, 0, 0], [255, 0, 0]]) == [1]

    def test_duplicate_palette_color_first_wins(self):
        palette = [(9, 9, 9), (1, 2, 3), (9, 9, 9), (1, 2, 3)]
        assert match_to_indices([(9, 9, 9), (1, 2, 3)], palette) == [0, 1]

    def test_missing_color_reports_first_position(self):
        pixels = [(0, 0, 0), (1, 1, 1), (2, 2, 2)]
        with pytest.raises(PaletteMismatchError) as exc_info:
            match_to_indices(pixels, RGB_PALETTE)
        assert exc_info.value.position == 1

    def test_no_nearest_color_approximation(self):
        with pytest.raises(PaletteMismatchError):
            match_to_indices([(254, 0, 0)], RGB_PALETTE)

    def test_channel_mismatch(self):
        pixels = [(0, 0, 0), (0, 0, 0, 255)]
        with pytest.raises(PaletteMismatchError, match="channels") as exc_info:
            match_to_indices(pixels, RGB_PALETTE)
        assert exc_info.value.position == 1

    def test_substitute_is_callers_choice(self, caplog):
        pixels = [(1, 1, 1), (255, 0, 0), (2, 2, 2)]
        with caplog.at_level(logging.WARNING, logger="tile_converter"):
            indices = match_to_indices(pixels, RGB_PALETTE, substitute=3)
        assert indices == [3, 1, 3]
        assert "not in the palette" in caplog.text
        assert "2 pixels had colors missing" in caplog.text

    @pytest.mark.parametrize("substitute", [4, 300, -1])
    def test_substitute_outside_palette(self, substitute):
        """A substitute must be a valid index of the palette being matched"""
        with pytest.raises(ConfigurationError, match="out of range"):
            match_to_indices([(9, 9, 9)], RGB_PALETTE, substitute=substitute)

    def test_substitute_checked_before_matching(self):
        with pytest.raises(ConfigurationError):
            match_to_indices([(0, 0, 0)], RGB_PALETTE, substitute=4)

    def test_last_palette_index_as_substitute(self):
        assert match_to_indices([(9, 9, 9)], RGB_PALETTE, substitute=3) == [3]

    def test_empty_input(self):
        assert match_to_indices([], RGB_PALETTE) == []

    def test_single_channel(self):
        palette = [(0,), (128,), (255,)]
        assert match_to_indices([(255,), (0,), (128,)], palette) == [2, 0, 1]


class TestApplyPalette:
    """Test index -> color lookup"""

    def test_lookup(self):
        assert apply_palette([3, 0, 1], RGB_PALETTE) == [(0, 0, 255), (0, 0, 0), (255, 0, 0)]

    def test_inverse_of_match(self):
        indices = [0, 1, 2, 3, 3, 2, 1, 0]
        assert match_to_indices(apply_palette(indices, RGB_PALETTE), RGB_PALETTE) == indices

    def test_index_past_end(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            apply_palette([0, 1, 4], RGB_PALETTE)
        assert exc_info.value.position == 2
        assert exc_info.value.index == 4

    def test_negative_index(self):
        """Negative indices don't wrap around like Python list indexing"""
        with pytest.raises(IndexOutOfRangeError):
            apply_palette([-1], RGB_PALETTE)


class TestPaletteHelpers:
    """Test channel detection and lookups"""

    def test_palette_size(self):
        assert [palette_size(b) for b in range(1, 9)] == [2, 4, 8, 16, 32, 64, 128, 256]

    def test_palette_channels(self):
        assert palette_channels(RGB_PALETTE) == 3
        assert palette_channels([(0, 0, 0, 0)]) == 4
        assert palette_channels([(0,)]) == 1

    def test_palette_channels_mixed(self):
        with pytest.raises(PaletteMismatchError) as exc_info:
            palette_channels([(0, 0, 0), (0, 0)])
        assert exc_info.value.position is None

    def test_palette_channels_unsupported(self):
        with pytest.raises(PaletteMismatchError):
            palette_channels([(0, 0, 0, 0, 0)])

    def test_palette_channels_empty(self):
        with pytest.raises(PaletteMismatchError):
            palette_channels([])


class TestGrayscalePalette:
    """Test the default grayscale palettes"""

    @pytest.mark.parametrize("bpp", range(1, 9))
    def test_size_and_range(self, bpp):
        palette = grayscale_palette(bpp, 1)
        values = [color[0] for color in palette]
        assert len(palette) == 2 ** bpp
        assert values[0] == 0
        assert values[-1] == 255
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_2bpp_values(self):
        assert grayscale_palette(2, 3) == ((0, 0, 0), (85, 85, 85), (170, 170, 170), (255, 255, 255))

    def test_3bpp_values_are_rounded(self):
        values = [c[0] for c in grayscale_palette(3, 1)]
        assert values == [0, 36, 73, 109, 146, 182, 219, 255]

    def test_4bpp_matches_snes_ramp(self):
        assert [c[0] for c in grayscale_palette(4, 1)] == [i * 17 for i in range(16)]

    def test_channel_layouts(self):
        assert grayscale_palette(1, 1) == ((0,), (255,))
        assert grayscale_palette(1, 2) == ((0, 255), (255, 255))
        assert grayscale_palette(1, 3) == ((0, 0, 0), (255, 255, 255))
        assert grayscale_palette(1, 4) == ((0, 0, 0, 255), (255, 255, 255, 255))

    def test_default_is_rgba(self):
        assert all(len(color) == 4 for color in grayscale_palette(4))

    def test_deterministic(self):
        assert grayscale_palette(5, 3) == grayscale_palette(5, 3)

    @pytest.mark.parametrize("bpp", [0, 9, -1])
    def test_invalid_bpp(self, bpp):
        with pytest.raises(ConfigurationError):
            grayscale_palette(bpp)

    def test_invalid_channels(self):
        with pytest.raises(ConfigurationError):
            grayscale_palette(2, 5)
