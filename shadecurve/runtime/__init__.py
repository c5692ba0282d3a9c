# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Shadecurve.

Serialization of generated palettes for the outside world:

1. Palette Message -- Payload for design-tool host integrations
2. Context Block -- JSON, CSS custom properties, or Markdown

The delivery layer never modifies palette content.
"""

from shadecurve.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    build_palette_message,
    to_context_block,
    to_palette_message,
)

__all__ = [
    "to_palette_message",
    "build_palette_message",
    "to_context_block",
    "SerializerFormat",
    "BlockFormat",
]
