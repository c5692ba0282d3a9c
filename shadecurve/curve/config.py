# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""Numeric bounds and resolutions for the curve engine."""

from __future__ import annotations

from dataclasses import dataclass

from shadecurve.schema import (
    CONTRAST_MAX,
    CONTRAST_MIN,
    COUNT_MAX,
    COUNT_MIN,
)


@dataclass(frozen=True)
class CurveConfig:
    """Configuration for exponent fitting, sampling and lookup."""

    # Exponent search range for x^n + y^n = 1
    # n → 0.1: curve hugs the axes
    # n = 1:   straight diagonal
    # n = 2:   quarter circle
    # n → 25:  curve approaches the square corner
    n_min: float = 0.1
    n_max: float = 25.0

    # Bisection stops once |x^n + y^n - 1| drops below this
    tolerance: float = 0.001
    max_iterations: int = 100

    # Anchor coordinates at or below this collapse to n_min
    min_threshold: float = 0.001
    # Anchors with both coordinates at or above this collapse to n_max
    max_threshold: float = 0.99

    # Number of segments (samples - 1) per curve
    curve_resolution: int = 400

    # Segments shorter than this add no arc length
    min_segment_length: float = 1e-10

    # Samples on each side of the coarse nearest point refined by projection
    search_radius: int = 3

    # Smallest x-axis compression of the desaturated curve
    min_compression: float = 0.005

    # Input bounds (mirrored from the schema)
    contrast_min: float = CONTRAST_MIN
    contrast_max: float = CONTRAST_MAX
    count_min: int = COUNT_MIN
    count_max: int = COUNT_MAX

    def __post_init__(self) -> None:
        if not 0.0 < self.n_min < self.n_max:
            raise ValueError(
                f"Exponent bounds must satisfy 0 < n_min < n_max, "
                f"got {self.n_min}, {self.n_max}"
            )
        if self.curve_resolution < 1:
            raise ValueError(
                f"Curve resolution must be >= 1, got {self.curve_resolution}"
            )
        if not 1 <= self.count_min <= self.count_max:
            raise ValueError(
                f"Count bounds must satisfy 1 <= count_min <= count_max, "
                f"got {self.count_min}, {self.count_max}"
            )
        if not 0.0 < self.contrast_min <= 1.0 <= self.contrast_max:
            raise ValueError(
                f"Contrast bounds must bracket 1.0, "
                f"got {self.contrast_min}, {self.contrast_max}"
            )
        if self.search_radius < 1:
            raise ValueError(f"Search radius must be >= 1, got {self.search_radius}")


DEFAULT_CONFIG = CurveConfig()
