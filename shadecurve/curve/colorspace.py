# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: HSV (degrees, percent) ↔ sRGB [0,1] ↔ hex / 0-255 RGB

The curve engine works in the unit saturation/value square; this module
turns (hue, x * 100, y * 100) into displayable colors and parses colors
coming back from users.

Array conversions are pure NumPy; scalar helpers wrap them.
"""

from __future__ import annotations

import re
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from shadecurve.curve.config import CurveConfig
from shadecurve.curve.superellipse import (
    find_closest_point,
    find_exponent,
    find_point_at_arc_length,
    generate_curve_points,
    generate_desaturated_curve,
)


# =============================================================================
# HSV ↔ sRGB
# =============================================================================


def hsv_to_srgb(hsv: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSV to sRGB values [0,1].

    Args:
        hsv: Array of shape (..., 3) with H in degrees [0, 360],
            S and V in percent [0, 100]

    Returns:
        Array of shape (..., 3) with sRGB values [0, 1]
    """
    hsv = np.asarray(hsv, dtype=np.float64)

    h = hsv[..., 0]
    s = hsv[..., 1] / 100.0
    v = hsv[..., 2] / 100.0

    c = v * s
    x = c * (1.0 - np.abs((h / 60.0) % 2.0 - 1.0))
    m = v - c
    zero = np.zeros_like(c)

    # Hue sextant; 360 falls into the last one
    sector = np.clip(np.floor(h / 60.0), 0, 5).astype(np.int64)

    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1)
    return np.clip(rgb, 0.0, 1.0)


def srgb_to_hsv(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSV (unrounded).

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with H in degrees [0, 360),
        S and V in percent [0, 100]
    """
    srgb = np.asarray(srgb, dtype=np.float64)

    r = srgb[..., 0]
    g = srgb[..., 1]
    b = srgb[..., 2]

    cmax = np.max(srgb, axis=-1)
    cmin = np.min(srgb, axis=-1)
    diff = cmax - cmin
    safe_diff = np.where(diff == 0, 1.0, diff)

    h = np.where(
        cmax == r,
        ((g - b) / safe_diff) % 6.0,
        np.where(cmax == g, (b - r) / safe_diff + 2.0, (r - g) / safe_diff + 4.0),
    )
    h = np.where(diff == 0, 0.0, h * 60.0) % 360.0

    s = np.where(cmax == 0, 0.0, diff / np.where(cmax == 0, 1.0, cmax)) * 100.0
    v = cmax * 100.0

    return np.stack([h, s, v], axis=-1)


# =============================================================================
# Scalar helpers
# =============================================================================


def _to_uint8(srgb: NDArray[np.float64]) -> NDArray[np.int64]:
    """Scale [0,1] to 0-255 rounding halves up."""
    return np.floor(np.clip(srgb, 0.0, 1.0) * 255.0 + 0.5).astype(np.int64)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 0-255 channels as "#RRGGBB"."""
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """
    Convert HSV to hex color string.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in percent [0, 100]
        v: Value in percent [0, 100]

    Returns:
        Hex color string like "#3C64C7"
    """
    srgb = hsv_to_srgb(np.array([h, s, v], dtype=np.float64))
    r, g, b = _to_uint8(srgb)
    return rgb_to_hex(r, g, b)


_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex color string into 0-255 channels.

    Args:
        hex_color: Hex string like "#3941C8" or "3941C8"

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    m = _HEX_RE.match(hex_color.strip())
    if not m:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    raw = m.group(1)
    return int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16)


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert 0-255 channels to HSV rounded to whole degrees and percent.

    Returns:
        (h, s, v) with h in [0, 360), s and v in [0, 100]
    """
    srgb = np.array([r, g, b], dtype=np.float64) / 255.0
    h, s, v = srgb_to_hsv(srgb)
    h = int(np.floor(h + 0.5)) % 360
    return h, int(np.floor(s + 0.5)), int(np.floor(v + 0.5))


def hex_to_hsv(hex_color: str) -> tuple[int, int, int]:
    """Convert a hex color string to rounded HSV (see rgb_to_hsv)."""
    return rgb_to_hsv(*hex_to_rgb(hex_color))


_RGB_RE = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)")


def parse_rgb_string(rgb_string: str) -> Optional[tuple[int, int, int]]:
    """
    Parse "rgb(r, g, b)".

    Returns:
        (r, g, b) tuple, or None if the string does not match
    """
    m = _RGB_RE.search(rgb_string)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def format_rgb_string(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def contrast_text_color(hex_color: str) -> str:
    """
    Pick readable label text for a background color.

    Uses a weighted channel sum; backgrounds above 0.4 get black text.

    Returns:
        "black" or "white"
    """
    r, g, b = hex_to_rgb(hex_color)
    luminance = (0.25 * r + 0.35 * g + 0.15 * b) / 255.0
    return "black" if luminance > 0.4 else "white"


def desaturated_color(
    h: float,
    s: float,
    v: float,
    saturation_percent: float,
    config: Optional[CurveConfig] = None,
) -> str:
    """
    Muted variant of a single HSV color.

    Projects (s, v) onto its fitted curve, then reads the desaturated curve
    at the same arc length. At 100% the input color is returned unchanged.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        v: Value in percent
        saturation_percent: Share of saturation to keep (0-100)
        config: Optional CurveConfig

    Returns:
        Hex color string
    """
    if saturation_percent >= 100.0:
        return hsv_to_hex(h, s, v)

    x = s / 100.0
    y = v / 100.0
    n = find_exponent(x, y, config)
    main_curve = generate_curve_points(n, config)
    arc_length = find_closest_point(x, y, main_curve, config).normalized_arc_length

    muted_curve = generate_desaturated_curve(n, saturation_percent, config)
    point = find_point_at_arc_length(arc_length, muted_curve)
    return hsv_to_hex(h, point.x * 100.0, point.y * 100.0)
