# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""Tests for HSV/RGB/hex conversions and color helpers."""

import numpy as np
import pytest

from shadecurve.curve.colorspace import (
    contrast_text_color,
    desaturated_color,
    format_rgb_string,
    hex_to_hsv,
    hex_to_rgb,
    hsv_to_hex,
    hsv_to_srgb,
    parse_rgb_string,
    rgb_to_hex,
    rgb_to_hsv,
    srgb_to_hsv,
)


class TestHsvToHex:

    @pytest.mark.parametrize("hsv,expected", [
        ((0, 100, 100), "#FF0000"),
        ((120, 100, 100), "#00FF00"),
        ((240, 100, 100), "#0000FF"),
        ((60, 100, 100), "#FFFF00"),
        ((0, 0, 0), "#000000"),
        ((0, 0, 100), "#FFFFFF"),
    ])
    def test_primaries(self, hsv, expected):
        assert hsv_to_hex(*hsv) == expected

    def test_gray_rounds_half_up(self):
        # 0.5 * 255 = 127.5
        assert hsv_to_hex(0, 0, 50) == "#808080"

    def test_hue_360_wraps_to_red(self):
        assert hsv_to_hex(360, 100, 100) == "#FF0000"

    def test_hue_ignored_for_gray(self):
        assert hsv_to_hex(0, 0, 40) == hsv_to_hex(200, 0, 40)

    def test_uppercase_format(self):
        assert rgb_to_hex(1, 2, 255) == "#0102FF"


class TestHexParsing:

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#3941C8") == (57, 65, 200)
        assert hex_to_rgb("3941c8") == (57, 65, 200)

    @pytest.mark.parametrize("bad", ["#12345", "#GGGGGG", "", "#1234567"])
    def test_invalid_hex(self, bad):
        with pytest.raises(ValueError, match="Invalid hex color"):
            hex_to_rgb(bad)

    @pytest.mark.parametrize("hex_color,expected", [
        ("#FF0000", (0, 100, 100)),
        ("#00FF00", (120, 100, 100)),
        ("#0000FF", (240, 100, 100)),
        ("#808080", (0, 0, 50)),
        ("#000000", (0, 0, 0)),
    ])
    def test_hex_to_hsv(self, hex_color, expected):
        assert hex_to_hsv(hex_color) == expected

    def test_rgb_to_hsv_returns_ints(self):
        h, s, v = rgb_to_hsv(16, 95, 231)
        assert all(isinstance(c, int) for c in (h, s, v))
        assert 0 <= h < 360

    def test_hex_roundtrip_is_close(self):
        for hex_color in ("#105FE7", "#D5AF1B", "#7102EF"):
            r, g, b = hex_to_rgb(hex_color)
            r2, g2, b2 = hex_to_rgb(hsv_to_hex(*hex_to_hsv(hex_color)))
            assert max(abs(r - r2), abs(g - g2), abs(b - b2)) <= 6


class TestRgbStrings:

    def test_parse(self):
        assert parse_rgb_string("rgb(12, 34, 56)") == (12, 34, 56)
        assert parse_rgb_string("rgb(1,2,3)") == (1, 2, 3)

    def test_parse_failure_returns_none(self):
        assert parse_rgb_string("not a color") is None
        assert parse_rgb_string("#FFFFFF") is None

    def test_format(self):
        assert format_rgb_string(12, 34, 56) == "rgb(12, 34, 56)"
        assert parse_rgb_string(format_rgb_string(7, 8, 9)) == (7, 8, 9)


class TestContrastTextColor:

    @pytest.mark.parametrize("background,expected", [
        ("#FFFFFF", "black"),
        ("#000000", "white"),
        ("#0000FF", "white"),
        ("#FFFF00", "black"),
    ])
    def test_text_color(self, background, expected):
        assert contrast_text_color(background) == expected


class TestArrayConversions:

    def test_roundtrip(self):
        hsv = np.array([
            [10.0, 50.0, 60.0],
            [100.0, 20.0, 90.0],
            [220.0, 81.0, 78.0],
            [330.0, 100.0, 30.0],
        ])
        np.testing.assert_allclose(srgb_to_hsv(hsv_to_srgb(hsv)), hsv, atol=1e-9)

    def test_shape_preserved(self):
        hsv = np.zeros((4, 5, 3))
        assert hsv_to_srgb(hsv).shape == (4, 5, 3)
        assert srgb_to_hsv(hsv_to_srgb(hsv)).shape == (4, 5, 3)

    def test_output_in_unit_range(self):
        rng = np.random.default_rng(0)
        hsv = rng.uniform([0, 0, 0], [360, 100, 100], size=(200, 3))
        srgb = hsv_to_srgb(hsv)
        assert np.all((srgb >= 0.0) & (srgb <= 1.0))


class TestDesaturatedColor:

    def test_full_saturation_is_identity(self):
        assert desaturated_color(220, 81, 78, 100.0) == hsv_to_hex(220, 81, 78)

    def test_zero_saturation_is_near_gray(self):
        r, g, b = hex_to_rgb(desaturated_color(220, 81, 78, 0.0))
        assert max(r, g, b) - min(r, g, b) <= 2

    def test_partial_saturation_is_muted(self):
        _, s_full, _ = hex_to_hsv(hsv_to_hex(220, 81, 78))
        _, s_muted, _ = hex_to_hsv(desaturated_color(220, 81, 78, 30.0))
        assert s_muted < s_full
