# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Schema definitions for curve samples and palettes.

All types in this module are immutable (frozen dataclasses).
Every generation produces fresh values; nothing is updated in place.
"""

from shadecurve.schema.palette import (
    CONTRAST_MAX,
    CONTRAST_MIN,
    COUNT_MAX,
    COUNT_MIN,
    SATURATION_MAX,
    SATURATION_MIN,
    CurvePoint,
    CurveSample,
    DistributionRequest,
    FitResult,
    Palette,
    Swatch,
    SwatchPosition,
)

__all__ = [
    # Input constraints
    "COUNT_MIN",
    "COUNT_MAX",
    "CONTRAST_MIN",
    "CONTRAST_MAX",
    "SATURATION_MIN",
    "SATURATION_MAX",
    # Curve types
    "CurvePoint",
    "CurveSample",
    # Request
    "DistributionRequest",
    # Distribution output
    "SwatchPosition",
    "FitResult",
    # Colored output
    "Swatch",
    "Palette",
]
