# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

import json
import re
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def dump_json(data: dict, format: SerializerFormat) -> str:
    """Encode data in the requested JSON flavor."""
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase, dash-separated identifier ("Atlantic Blue 50" → "atlantic-blue-50")."""
    return _SLUG_RE.sub("-", name.lower()).strip("-")
