# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Main palette generation API.

This is the primary entry point for Shadecurve's curve engine.
"""

from __future__ import annotations

import logging
from typing import Optional

from shadecurve.curve.colorspace import hsv_to_hex
from shadecurve.curve.config import DEFAULT_CONFIG, CurveConfig
from shadecurve.curve.distribution import (
    assemble,
    compute_swatch_arc_lengths,
    split_points,
)
from shadecurve.curve.naming import name_swatches
from shadecurve.curve.superellipse import (
    find_closest_point,
    find_exponent,
    find_point_at_arc_length,
    generate_curve_points,
    generate_desaturated_curve,
)
from shadecurve.schema import (
    CurveSample,
    DistributionRequest,
    FitResult,
    Palette,
    Swatch,
    SwatchPosition,
)

log = logging.getLogger(__name__)


def _resolve(
    arc_length: float,
    main_curve: CurveSample,
    desaturated_curve: CurveSample,
) -> SwatchPosition:
    """Read both curves at one arc length."""
    main = find_point_at_arc_length(arc_length, main_curve)
    muted = find_point_at_arc_length(arc_length, desaturated_curve)
    return SwatchPosition(
        index=0,
        arc_length=arc_length,
        main_x=main.x,
        main_y=main.y,
        x=muted.x,
        y=muted.y,
    )


def _check_bounds(request: DistributionRequest, config: CurveConfig) -> None:
    """Validate a request against the configured input bounds."""
    if not config.count_min <= request.count <= config.count_max:
        raise ValueError(
            f"Count must be {config.count_min}-{config.count_max}, got {request.count}"
        )
    if not config.contrast_min <= request.contrast <= config.contrast_max:
        raise ValueError(
            f"Contrast must be {config.contrast_min}-{config.contrast_max}, "
            f"got {request.contrast}"
        )


def fit_and_distribute(
    request: DistributionRequest,
    config: Optional[CurveConfig] = None,
) -> FitResult:
    """
    Fit a curve through the anchor and place every swatch on it.

    Steps:
    1. Fit the superellipse exponent through (anchor_x, anchor_y)
    2. Sample the main and desaturated curves
    3. Project the anchor onto the main curve to get its arc length
    4. Distribute the remaining swatches around that arc length
    5. Resolve each position on both curves

    The anchor swatch keeps the exact anchor as its main coordinates; its
    desaturated coordinates come from the desaturated curve.

    Args:
        request: Distribution parameters
        config: Engine configuration (uses defaults if None)

    Returns:
        FitResult with both curves and the ordered swatch positions

    Raises:
        ValueError: If count or contrast falls outside the config's bounds

    Example:
        >>> from shadecurve.schema import DistributionRequest
        >>> result = fit_and_distribute(DistributionRequest(0.81, 0.78, count=10))
        >>> len(result.swatches)
        10
    """
    config = config or DEFAULT_CONFIG
    _check_bounds(request, config)

    exponent = find_exponent(request.anchor_x, request.anchor_y, config)
    main_curve = generate_curve_points(exponent, config)
    desaturated_curve = generate_desaturated_curve(
        exponent, request.desaturation, config
    )

    anchor_point = find_closest_point(
        request.anchor_x, request.anchor_y, main_curve, config
    )
    anchor_arc = anchor_point.normalized_arc_length
    log.debug(
        "Anchor (%.4f, %.4f): n=%.4f, arc length=%.4f",
        request.anchor_x,
        request.anchor_y,
        exponent,
        anchor_arc,
    )

    arc_lengths = compute_swatch_arc_lengths(request, anchor_arc)
    n_before, _ = split_points(
        request.count,
        anchor_arc,
        smart_spacing=request.smart_spacing,
        contrast=request.contrast,
    )

    before = [_resolve(a, main_curve, desaturated_curve) for a in arc_lengths[:n_before]]
    after = [
        _resolve(a, main_curve, desaturated_curve) for a in arc_lengths[n_before + 1 :]
    ]

    muted_anchor = find_point_at_arc_length(anchor_arc, desaturated_curve)
    anchor = SwatchPosition(
        index=0,
        arc_length=anchor_arc,
        main_x=request.anchor_x,
        main_y=request.anchor_y,
        x=muted_anchor.x,
        y=muted_anchor.y,
        is_anchor=True,
    )

    swatches = assemble(before, anchor, after, request.include_black_white)

    return FitResult(
        exponent=exponent,
        anchor_arc_length=anchor_arc,
        main_curve=main_curve,
        desaturated_curve=desaturated_curve,
        swatches=swatches,
    )


def fit_and_distribute_values(
    anchor_x: float,
    anchor_y: float,
    count: int,
    contrast: float = 1.0,
    smart_spacing: bool = False,
    desaturation: float = 100.0,
    *,
    include_black_white: bool = False,
    config: Optional[CurveConfig] = None,
) -> FitResult:
    """Plain-argument form of fit_and_distribute."""
    request = DistributionRequest(
        anchor_x=anchor_x,
        anchor_y=anchor_y,
        count=count,
        contrast=contrast,
        smart_spacing=smart_spacing,
        desaturation=desaturation,
        include_black_white=include_black_white,
    )
    return fit_and_distribute(request, config)


def palette_from_request(
    hue: float,
    request: DistributionRequest,
    *,
    name: str = "Color",
    config: Optional[CurveConfig] = None,
) -> Palette:
    """
    Color and name the swatches of a request.

    Each swatch gets two colors: hex from the desaturated curve and
    main_hex from the main curve, both at the given hue.

    Args:
        hue: Hue in degrees [0, 360]
        request: Distribution parameters
        name: Base name for step labels
        config: Engine configuration (uses defaults if None)

    Returns:
        Palette ordered dark → light
    """
    fit = fit_and_distribute(request, config)

    swatches = tuple(
        Swatch(
            position=p,
            hex=hsv_to_hex(hue, p.x * 100.0, p.y * 100.0),
            main_hex=hsv_to_hex(hue, p.main_x * 100.0, p.main_y * 100.0),
        )
        for p in fit.swatches
    )

    return Palette(
        hue=hue,
        request=request,
        exponent=fit.exponent,
        anchor_arc_length=fit.anchor_arc_length,
        swatches=name_swatches(swatches, name),
        name=name,
    )


def generate_palette(
    hue: float,
    saturation: float,
    value: float,
    *,
    count: int = 10,
    contrast: float = 1.0,
    smart_spacing: bool = False,
    include_black_white: bool = False,
    desaturation: float = 100.0,
    name: str = "Color",
    config: Optional[CurveConfig] = None,
) -> Palette:
    """
    Generate a palette from an anchor color in HSV.

    Args:
        hue: Hue in degrees [0, 360]
        saturation: Anchor saturation in percent [0, 100]
        value: Anchor value/brightness in percent [0, 100]
        count: Number of curve swatches, anchor included (1-50)
        contrast: Distribution factor (0.1-5.0, 1.0 = linear)
        smart_spacing: Split swatches in proportion to the anchor position.
            Forces contrast to 1.0.
        include_black_white: Add pure black and white at the ends
        desaturation: Share of saturation kept in hex colors (0-100)
        name: Base name for step labels
        config: Engine configuration (uses defaults if None)

    Returns:
        Palette ordered dark → light

    Example:
        >>> palette = generate_palette(220, 81, 78, count=10, name="Blue")
        >>> palette.anchor.main_hex
        '#265BC7'
    """
    request = DistributionRequest(
        anchor_x=saturation / 100.0,
        anchor_y=value / 100.0,
        count=count,
        contrast=contrast,
        smart_spacing=smart_spacing,
        desaturation=desaturation,
        include_black_white=include_black_white,
    )
    return palette_from_request(hue, request, name=name, config=config)
