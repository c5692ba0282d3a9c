# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Shadecurve -- Superellipse palette generator.

Fits a superellipse through an anchor color in the saturation/value plane
and spreads tints and shades along the curve's arc length.

Quick start::

    from shadecurve import generate_palette

    p = generate_palette(220, 81, 78, count=10, name="Blue")
    p.hexes()          # Dark → light hex colors
    p.anchor.name      # e.g. "Blue 50"
"""

from __future__ import annotations

__version__ = "1.0.0"

from shadecurve.curve import (
    CurveConfig,
    fit_and_distribute,
    generate_palette,
)
from shadecurve.schema import (
    CurvePoint,
    CurveSample,
    DistributionRequest,
    FitResult,
    Palette,
    Swatch,
    SwatchPosition,
)

__all__ = [
    # Core API
    "generate_palette",
    "fit_and_distribute",
    "CurveConfig",
    # Types (commonly needed)
    "DistributionRequest",
    "FitResult",
    "Palette",
    "Swatch",
    "SwatchPosition",
    "CurvePoint",
    "CurveSample",
    # Version
    "__version__",
]
