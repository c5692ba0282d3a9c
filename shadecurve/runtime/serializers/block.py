# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a Palette as a self-contained text block (JSON, CSS custom
properties, or a Markdown table) for pasting into stylesheets, docs or
design tokens.
"""

from __future__ import annotations

import json
from enum import Enum

from shadecurve.curve.colorspace import format_rgb_string
from shadecurve.runtime.serializers.base import slugify
from shadecurve.schema import Palette, Swatch


class BlockFormat(Enum):
    """Block format options."""

    JSON = "json"
    CSS = "css"
    MARKDOWN = "markdown"


def to_context_block(
    palette: Palette,
    *,
    format: BlockFormat = BlockFormat.JSON,
    reverse_order: bool = False,
    rgb_format: bool = False,
) -> str:
    """Serialize a Palette as a context block.

    Swatches are listed light → dark unless reverse_order is set.

    Args:
        palette: The Palette to serialize.
        format: Block format (JSON, CSS, or MARKDOWN).
        reverse_order: List dark → light.
        rgb_format: Use rgb() strings instead of hex values.

    Returns:
        Formatted block string.

    Example (CSS)::

        :root {
          --blue-10: #E9EEF8;
          --blue-20: #C3D1EE;
          ...
        }
    """
    swatches = list(palette.swatches)
    if not reverse_order:
        swatches.reverse()

    if format == BlockFormat.CSS:
        return _to_css(swatches, rgb_format)
    elif format == BlockFormat.JSON:
        return _to_json(palette, swatches, rgb_format)
    else:
        return _to_markdown(palette, swatches, rgb_format)


def _value(swatch: Swatch, rgb_format: bool) -> str:
    if rgb_format:
        return format_rgb_string(*swatch.rgb)
    return swatch.hex


def _label(swatch: Swatch) -> str:
    return swatch.name if swatch.name is not None else f"swatch {swatch.position.index}"


def _to_css(swatches: list[Swatch], rgb_format: bool) -> str:
    """Generate CSS custom properties."""
    lines = [":root {"]
    for s in swatches:
        lines.append(f"  --{slugify(_label(s))}: {_value(s, rgb_format)};")
    lines.append("}")
    return "\n".join(lines)


def _to_json(palette: Palette, swatches: list[Swatch], rgb_format: bool) -> str:
    """Generate a JSON name → color map."""
    data = {
        "name": palette.name,
        "anchor": _label(palette.anchor),
        "colors": {_label(s): _value(s, rgb_format) for s in swatches},
    }
    return json.dumps(data, indent=2)


def _to_markdown(palette: Palette, swatches: list[Swatch], rgb_format: bool) -> str:
    """Generate a Markdown table; the anchor row is bold."""
    header = "RGB" if rgb_format else "Hex"
    lines = [
        f"### {palette.name}",
        "",
        f"| Name | {header} |",
        "| --- | --- |",
    ]
    for s in swatches:
        name = _label(s)
        value = _value(s, rgb_format)
        if s.position.is_anchor:
            lines.append(f"| **{name}** | **{value}** |")
        else:
            lines.append(f"| {name} | {value} |")
    return "\n".join(lines)
