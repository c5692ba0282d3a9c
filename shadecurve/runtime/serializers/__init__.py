# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Serializers for Palette delivery to hosts and documents.

Each serializer formats a Palette for a specific consumer.
All serializers preserve the palette exactly -- no recoloring or reordering
beyond the requested light/dark direction.
"""

from shadecurve.runtime.serializers.base import SerializerFormat
from shadecurve.runtime.serializers.block import BlockFormat, to_context_block
from shadecurve.runtime.serializers.message import (
    build_palette_message,
    to_palette_message,
)

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "build_palette_message",
    "to_palette_message",
    "to_context_block",
]
