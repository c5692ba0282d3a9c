# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Superellipse fitting and arc-length parameterization.

The curve family is the quarter superellipse in the unit square:

    x^n + y^n = 1,   x, y in [0, 1]

parameterized as x = cos(t)^(2/n), y = sin(t)^(2/n) for t in [0, π/2].
The parameter t is not uniform along the curve, so every sample also
carries its cumulative arc length; palette positions are expressed in
normalized arc length so that equal steps look like equal steps.

Sampling is vectorized with NumPy. Lookups (nearest point, point at arc
length) operate on the resulting CurveSample.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from shadecurve.curve.config import DEFAULT_CONFIG, CurveConfig
from shadecurve.schema import CurvePoint, CurveSample

log = logging.getLogger(__name__)


# =============================================================================
# Exponent Fitting
# =============================================================================


def find_exponent(
    x: float,
    y: float,
    config: Optional[CurveConfig] = None,
) -> float:
    """
    Find the exponent n of the superellipse passing through (x, y).

    Bisects f(n) = x^n + y^n - 1 on [n_min, n_max]. For x, y in (0, 1)
    f is strictly decreasing in n, so the bracket always shrinks toward
    the single root.

    Degenerate anchors:
    - Either coordinate at or below min_threshold → n_min
    - Both coordinates at or above max_threshold → n_max

    Args:
        x: Saturation [0, 1]
        y: Value [0, 1]
        config: Engine configuration (uses defaults if None)

    Returns:
        Exponent in [n_min, n_max]
    """
    config = config or DEFAULT_CONFIG

    if x <= config.min_threshold or y <= config.min_threshold:
        return config.n_min
    if x >= config.max_threshold and y >= config.max_threshold:
        return config.n_max

    n_lo = config.n_min
    n_hi = config.n_max

    for _ in range(config.max_iterations):
        n_mid = (n_lo + n_hi) / 2
        f_mid = x**n_mid + y**n_mid - 1

        if abs(f_mid) < config.tolerance:
            return min(n_mid, config.n_max)

        f_lo = x**n_lo + y**n_lo - 1
        if f_mid * f_lo < 0:
            n_hi = n_mid
        else:
            n_lo = n_mid

    n = min((n_lo + n_hi) / 2, config.n_max)
    log.debug("Exponent search for (%.4f, %.4f) hit the iteration cap: n=%.4f", x, y, n)
    return n


# =============================================================================
# Curve Sampling
# =============================================================================


def _normalized_arc_lengths(
    x: NDArray[np.float64],
    y: NDArray[np.float64],
    min_segment_length: float,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Cumulative and normalized arc lengths of a polyline.

    Segments no longer than min_segment_length contribute nothing. A
    zero-length polyline falls back to index-uniform normalization.

    Returns:
        (arc, normalized) arrays of shape (N,)
    """
    segments = np.hypot(np.diff(x), np.diff(y))
    segments = np.where(segments > min_segment_length, segments, 0.0)
    arc = np.concatenate(([0.0], np.cumsum(segments)))

    total = arc[-1]
    if total > 0:
        normalized = arc / total
    elif len(arc) > 1:
        log.debug("Degenerate curve with zero length; using uniform parameterization")
        normalized = np.arange(len(arc), dtype=np.float64) / (len(arc) - 1)
    else:
        normalized = np.zeros(1, dtype=np.float64)

    return arc, normalized


def _sample_superellipse(
    exponent: float,
    x_scale: float,
    config: CurveConfig,
) -> CurveSample:
    """Sample x = a·cos(t)^(2/n), y = sin(t)^(2/n) over t in [0, π/2]."""
    t = np.linspace(0.0, math.pi / 2, config.curve_resolution + 1)

    with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
        px = x_scale * np.power(np.cos(t), 2.0 / exponent)
        py = np.power(np.sin(t), 2.0 / exponent)

    # Drop samples whose power blew up instead of failing the whole curve
    valid = np.isfinite(px) & np.isfinite(py)
    if not np.all(valid):
        log.debug(
            "Dropped %d non-finite samples for n=%.4f",
            int(np.count_nonzero(~valid)),
            exponent,
        )
        t, px, py = t[valid], px[valid], py[valid]

    x = np.clip(px, 0.0, 1.0)
    y = np.clip(py, 0.0, 1.0)
    arc, normalized = _normalized_arc_lengths(x, y, config.min_segment_length)

    points = tuple(
        CurvePoint(
            t=float(t[i]),
            x=float(x[i]),
            y=float(y[i]),
            arc_length=float(arc[i]),
            normalized_arc_length=float(normalized[i]),
        )
        for i in range(len(t))
    )
    return CurveSample(points=points, exponent=exponent, x_scale=x_scale)


def generate_curve_points(
    exponent: float,
    config: Optional[CurveConfig] = None,
) -> CurveSample:
    """
    Sample the main superellipse with arc-length parameterization.

    Args:
        exponent: Superellipse exponent n
        config: Engine configuration (uses defaults if None)

    Returns:
        CurveSample with curve_resolution + 1 points (fewer only if some
        samples were not finite), normalized arc length running 0 → 1
    """
    config = config or DEFAULT_CONFIG
    return _sample_superellipse(exponent, 1.0, config)


def generate_desaturated_curve(
    main_exponent: float,
    saturation_percent: float,
    config: Optional[CurveConfig] = None,
) -> CurveSample:
    """
    Sample the desaturation-compressed companion of the main curve.

    The curve is squeezed along the saturation axis by
    a = max(min_compression, saturation_percent / 100) and its exponent
    relaxes toward 1 as saturation drops:

        n2 = 1 + (n_main - 1) * saturation_percent / 100

    At 100% the companion is identical to the main curve. Reading both
    curves at the same arc length gives a muted variant of each swatch
    with the same place in the light/dark progression.

    Args:
        main_exponent: Exponent of the main curve
        saturation_percent: Share of saturation to keep (0-100)
        config: Engine configuration (uses defaults if None)

    Returns:
        CurveSample of the compressed curve
    """
    config = config or DEFAULT_CONFIG
    fraction = saturation_percent / 100.0
    x_scale = max(config.min_compression, fraction)
    secondary_exponent = 1.0 + (main_exponent - 1.0) * fraction
    return _sample_superellipse(secondary_exponent, x_scale, config)


# =============================================================================
# Lookups
# =============================================================================


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _interpolate(p1: CurvePoint, p2: CurvePoint, u: float) -> CurvePoint:
    """Point a fraction u of the way from p1 to p2."""
    return CurvePoint(
        t=_lerp(p1.t, p2.t, u),
        x=_clamp_unit(_lerp(p1.x, p2.x, u)),
        y=_clamp_unit(_lerp(p1.y, p2.y, u)),
        arc_length=_lerp(p1.arc_length, p2.arc_length, u),
        normalized_arc_length=_clamp_unit(
            _lerp(p1.normalized_arc_length, p2.normalized_arc_length, u)
        ),
    )


def find_closest_point(
    target_x: float,
    target_y: float,
    curve: CurveSample,
    config: Optional[CurveConfig] = None,
) -> CurvePoint:
    """
    Find the point on a sampled curve nearest to a target.

    Two passes:
    1. Coarse: nearest sample by squared distance (lowest index wins ties)
    2. Refine: project the target onto each segment within search_radius
       samples of the coarse hit, clamping to the segment ends

    Args:
        target_x: Target saturation [0, 1]
        target_y: Target value [0, 1]
        curve: Curve to search
        config: Engine configuration (uses defaults if None)

    Returns:
        The coarse sample itself, or an interpolated point carrying
        linearly interpolated arc length when a segment projection is closer
    """
    config = config or DEFAULT_CONFIG

    distances = (curve.xs - target_x) ** 2 + (curve.ys - target_y) ** 2
    closest_index = int(np.argmin(distances))
    best_point = curve[closest_index]
    best_distance = float(distances[closest_index])

    start = max(0, closest_index - config.search_radius)
    end = min(len(curve) - 1, closest_index + config.search_radius)

    for i in range(start, end):
        p1 = curve[i]
        p2 = curve[i + 1]

        seg_x = p2.x - p1.x
        seg_y = p2.y - p1.y
        length_sq = seg_x * seg_x + seg_y * seg_y
        if length_sq <= config.min_segment_length:
            continue

        u = ((target_x - p1.x) * seg_x + (target_y - p1.y) * seg_y) / length_sq
        u = max(0.0, min(1.0, u))

        proj_x = p1.x + u * seg_x
        proj_y = p1.y + u * seg_y
        distance = (proj_x - target_x) ** 2 + (proj_y - target_y) ** 2

        if distance < best_distance:
            best_distance = distance
            best_point = _interpolate(p1, p2, u)

    return best_point


def find_point_at_arc_length(
    normalized_arc_length: float,
    curve: CurveSample,
) -> CurvePoint:
    """
    Resolve the point at a normalized arc length by linear interpolation.

    Queries at or below 0 return the first sample; at or above 1 the last.
    Interior queries interpolate within the first pair of samples whose arc
    lengths bracket the query, and the result carries the query value as its
    normalized arc length.

    Args:
        normalized_arc_length: Position along the curve [0, 1]
        curve: Curve to read

    Returns:
        CurvePoint at the requested position
    """
    if normalized_arc_length <= 0:
        return curve.first
    if normalized_arc_length >= 1:
        return curve.last

    arcs = curve.normalized_arc_lengths
    # First sample at or beyond the query; its predecessor is strictly below
    j = int(np.searchsorted(arcs, normalized_arc_length, side="left"))
    if j == 0 or j >= len(curve):
        return curve.last

    prev = curve[j - 1]
    curr = curve[j]
    u = (normalized_arc_length - prev.normalized_arc_length) / (
        curr.normalized_arc_length - prev.normalized_arc_length
    )
    point = _interpolate(prev, curr, u)
    return CurvePoint(
        t=point.t,
        x=point.x,
        y=point.y,
        arc_length=point.arc_length,
        normalized_arc_length=normalized_arc_length,
    )
