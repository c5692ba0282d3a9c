# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Curve engine for Shadecurve.

This module fits superellipses through anchor colors and distributes
palette swatches along their arc length. All operations are pure functions
of their inputs.
"""

from shadecurve.curve.config import DEFAULT_CONFIG, CurveConfig
from shadecurve.curve.distribution import (
    ContrastMode,
    assemble,
    compute_swatch_arc_lengths,
    split_points,
)
from shadecurve.curve.generate import (
    fit_and_distribute,
    fit_and_distribute_values,
    generate_palette,
    palette_from_request,
)
from shadecurve.curve.superellipse import (
    find_closest_point,
    find_exponent,
    find_point_at_arc_length,
    generate_curve_points,
    generate_desaturated_curve,
)

__all__ = [
    "CurveConfig",
    "DEFAULT_CONFIG",
    # Curve engine
    "find_exponent",
    "generate_curve_points",
    "generate_desaturated_curve",
    "find_closest_point",
    "find_point_at_arc_length",
    # Distributor
    "ContrastMode",
    "split_points",
    "compute_swatch_arc_lengths",
    "assemble",
    # Entry points
    "fit_and_distribute",
    "fit_and_distribute_values",
    "generate_palette",
    "palette_from_request",
]
