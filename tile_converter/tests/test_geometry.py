#!/usr/bin/env python3
"""
Tests for geometry.py
"""

import pytest

from tile_converter.exceptions import ConfigurationError
from tile_converter.geometry import bytes_per_tile_row, img_height, tile_count


class TestImgHeight:
    """Test output height calculation"""

    def test_one_full_row_2bpp(self):
        """256 bytes of 2bpp data is exactly one row of 16 tiles"""
        assert img_height(256, 2) == 8

    def test_rounds_up_partial_rows(self):
        assert img_height(1, 2) == 8
        assert img_height(160, 2) == 8
        assert img_height(257, 2) == 16
        assert img_height(511, 4) == 8
        assert img_height(513, 4) == 16

    def test_empty_data(self):
        assert img_height(0, 4) == 0

    @pytest.mark.parametrize("bpp", range(1, 9))
    def test_full_rows_every_bpp(self, bpp):
        row_bytes = bpp * 8 * 16
        assert img_height(row_bytes, bpp) == 8
        assert img_height(row_bytes * 5, bpp) == 40

    @pytest.mark.parametrize("bpp", range(1, 9))
    def test_idempotent_under_rerounding(self, bpp):
        for num_bytes in (0, 1, 7, 100, 1000, 4097, 65536):
            height = img_height(num_bytes, bpp)
            assert height % 8 == 0
            # height // 8 tile rows of bpp * 8 * 16 bytes each
            assert img_height(height // 8 * bpp * 8 * 16, bpp) == height

    def test_negative_bytes(self):
        with pytest.raises(ValueError):
            img_height(-1, 2)

    @pytest.mark.parametrize("bpp", [0, 9])
    def test_invalid_bpp(self, bpp):
        with pytest.raises(ConfigurationError):
            img_height(256, bpp)


class TestTileRowHelpers:
    """Test byte and tile count helpers"""

    def test_bytes_per_tile_row(self):
        assert bytes_per_tile_row(1) == 128
        assert bytes_per_tile_row(2) == 256
        assert bytes_per_tile_row(4) == 512
        assert bytes_per_tile_row(8) == 1024

    def test_tile_count_ignores_partial_tile(self):
        assert tile_count(48, 4) == 1
        assert tile_count(64, 4) == 2
        assert tile_count(15, 2) == 0
