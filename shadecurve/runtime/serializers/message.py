# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Palette message serializer for host integrations.

Formats a Palette as the "create-palette" payload a design-tool host
consumes to build swatch frames and color variables. The host owns
rendering and persistence; this module only shapes the data.

Channel values in "rgb" and "textColor" are floats in [0, 1], the way
design-tool APIs expect them.
"""

from __future__ import annotations

from typing import Optional

from shadecurve.curve.colorspace import contrast_text_color, format_rgb_string
from shadecurve.runtime.serializers.base import SerializerFormat, dump_json
from shadecurve.schema import Palette, Swatch

MESSAGE_TYPE = "create-palette"

_BLACK_TEXT = {"r": 0, "g": 0, "b": 0}
_WHITE_TEXT = {"r": 1, "g": 1, "b": 1}


def _color_entry(swatch: Swatch) -> dict:
    r, g, b = swatch.rgb
    text = contrast_text_color(swatch.hex)
    return {
        "hex": swatch.hex,
        "name": swatch.name,
        "rgb": {"r": r / 255, "g": g / 255, "b": b / 255},
        "textColor": dict(_WHITE_TEXT if text == "white" else _BLACK_TEXT),
        "rgbString": format_rgb_string(r, g, b),
        "isSelected": swatch.position.is_anchor,
        "isBlack": swatch.position.is_black,
        "isWhite": swatch.position.is_white,
    }


def build_palette_message(
    palette: Palette,
    *,
    name: Optional[str] = None,
    reverse_order: bool = False,
    rgb_format: bool = False,
    with_variables: bool = True,
) -> dict:
    """Build the palette message as a dictionary.

    Args:
        palette: The Palette to serialize.
        name: Palette name; defaults to palette.name. Blank names fall
            back to "Color".
        reverse_order: List colors dark → light instead of the default
            light → dark.
        rgb_format: Ask the host to label swatches with rgb() strings.
        with_variables: Ask the host to create color variables.

    Returns:
        Dictionary with keys type, colors, paletteName, isRgbFormat,
        withVariables.
    """
    swatches = list(palette.swatches)
    if not reverse_order:
        swatches.reverse()

    palette_name = (name if name is not None else palette.name).strip() or "Color"

    return {
        "type": MESSAGE_TYPE,
        "colors": [_color_entry(s) for s in swatches],
        "paletteName": palette_name,
        "isRgbFormat": rgb_format,
        "withVariables": with_variables,
    }


def to_palette_message(
    palette: Palette,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    name: Optional[str] = None,
    reverse_order: bool = False,
    rgb_format: bool = False,
    with_variables: bool = True,
) -> str:
    """Serialize a Palette as a palette message JSON string.

    Example::

        {
          "type": "create-palette",
          "colors": [
            { "hex": "#E9EEF8", "name": "Blue 10", "rgb": {...},
              "textColor": {"r": 0, "g": 0, "b": 0},
              "rgbString": "rgb(233, 238, 248)",
              "isSelected": false, "isBlack": false, "isWhite": false }
          ],
          "paletteName": "Blue",
          "isRgbFormat": false,
          "withVariables": true
        }
    """
    data = build_palette_message(
        palette,
        name=name,
        reverse_order=reverse_order,
        rgb_format=rgb_format,
        with_variables=with_variables,
    )
    return dump_json(data, format)
