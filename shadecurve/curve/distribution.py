# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Swatch distribution along the arc length of a fitted curve.

The anchor swatch sits at its own arc length. The remaining count - 1
swatches are split into a "before" side (darker/more saturated, arc length
below the anchor) and an "after" side (lighter, above the anchor).

Two policies decide the split, and they never run together:
1. Smart spacing: split in proportion to the anchor's arc length
2. Centered: split evenly, giving any odd point to the longer side

Within a side, points are either spaced linearly or, when contrast != 1.0,
warped by a power curve blended with the identity.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from enum import Enum
from typing import Sequence

from shadecurve.schema import DistributionRequest, SwatchPosition

log = logging.getLogger(__name__)


# =============================================================================
# Contrast Warp
# =============================================================================

# Contrast span over which the high warp blends from identity to full strength
HIGH_CONTRAST_RANGE = 4.0
# Contrast span over which the low warp blends from identity to full strength
LOW_CONTRAST_RANGE = 0.9
WARP_EXPONENT = 1.5


class ContrastMode(Enum):
    """
    Shape of the per-side distribution.

    LINEAR: contrast == 1.0, identity
    HIGH:   contrast > 1.0, blend toward d^(1/1.5) (denser near the curve ends)
    LOW:    contrast < 1.0, blend toward d^1.5 (denser near the anchor)
    """
    LINEAR = "linear"
    HIGH = "high"
    LOW = "low"

    @classmethod
    def classify(cls, contrast: float) -> ContrastMode:
        if contrast > 1.0:
            return cls.HIGH
        if contrast < 1.0:
            return cls.LOW
        return cls.LINEAR

    def blend_factor(self, contrast: float) -> float:
        """Weight of the warped curve in the blend, in [0, 1]."""
        if self is ContrastMode.HIGH:
            return min((contrast - 1.0) / HIGH_CONTRAST_RANGE, 1.0)
        if self is ContrastMode.LOW:
            return min((1.0 - contrast) / LOW_CONTRAST_RANGE, 1.0)
        return 0.0

    def warp(self, distance: float, contrast: float) -> float:
        """
        Warp a normalized distance from the anchor.

        Args:
            distance: Normalized distance from the anchor [0, 1]
            contrast: Contrast factor that selected this mode

        Returns:
            (1 - t) * distance + t * distance^k for the mode's exponent k
        """
        if self is ContrastMode.LINEAR:
            return distance
        if self is ContrastMode.HIGH:
            curved = distance ** (1.0 / WARP_EXPONENT)
        else:
            curved = distance**WARP_EXPONENT
        t = self.blend_factor(contrast)
        return distance * (1.0 - t) + curved * t


# =============================================================================
# Split
# =============================================================================


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def split_points(
    count: int,
    anchor_arc_length: float,
    *,
    smart_spacing: bool = False,
    contrast: float = 1.0,
) -> tuple[int, int]:
    """
    Decide how many swatches fall before and after the anchor.

    Smart spacing (only honored when contrast == 1.0) puts
    round(anchor_arc_length * (count - 1)) points before the anchor. If that
    leaves one side empty while the other holds more than one point, one
    point moves across.

    Otherwise even counts give the larger half of count - 1 to the side
    with the longer arc span, and odd counts split exactly.

    An anchor at either curve end leaves no room on that side, so every
    point goes to the other side under both policies.

    Args:
        count: Total swatches including the anchor (>= 1)
        anchor_arc_length: Anchor position [0, 1]
        smart_spacing: Use the proportional split
        contrast: Contrast factor

    Returns:
        (points_before, points_after), summing to count - 1
    """
    to_distribute = count - 1

    if anchor_arc_length <= 0.0:
        return 0, to_distribute
    if anchor_arc_length >= 1.0:
        return to_distribute, 0

    if smart_spacing and contrast == 1.0:
        before = _round_half_up(anchor_arc_length * to_distribute)
        after = to_distribute - before

        if before == 0 and after > 1:
            before, after = 1, after - 1
        elif after == 0 and before > 1:
            before, after = before - 1, 1
        return before, after

    smaller = to_distribute // 2
    larger = to_distribute - smaller
    if count % 2 == 0:
        if anchor_arc_length >= 1.0 - anchor_arc_length:
            return larger, smaller
        return smaller, larger
    return smaller, smaller


def side_arc_length(
    index: int,
    side_count: int,
    anchor_arc_length: float,
    contrast: float = 1.0,
    *,
    before: bool,
) -> float:
    """
    Arc length of the index-th point on one side of the anchor.

    Points are numbered in ascending arc length on both sides, so index 0
    of the before side is the one nearest the dark end and index 0 of the
    after side is the one nearest the anchor.

    Args:
        index: Point index within the side
        side_count: Number of points on the side
        anchor_arc_length: Anchor position [0, 1]
        contrast: Contrast factor (1.0 = linear)
        before: True for the side below the anchor

    Returns:
        Normalized arc length of the point
    """
    mode = ContrastMode.classify(contrast)

    if mode is ContrastMode.LINEAR:
        step = (index + 1) / (side_count + 1)
        if before:
            return anchor_arc_length * step
        return anchor_arc_length + (1.0 - anchor_arc_length) * step

    distance = (side_count - index if before else index + 1) / (side_count + 1)
    warped = mode.warp(distance, contrast)
    if before:
        return anchor_arc_length - anchor_arc_length * warped
    return anchor_arc_length + (1.0 - anchor_arc_length) * warped


def compute_swatch_arc_lengths(
    request: DistributionRequest,
    anchor_arc_length: float,
) -> tuple[float, ...]:
    """
    Arc lengths of every curve swatch in ascending order.

    Exactly request.count values are returned and exactly one of them is
    the anchor arc length itself. Black/white end swatches are not included.

    Args:
        request: Distribution parameters
        anchor_arc_length: Normalized arc length of the projected anchor

    Returns:
        Tuple of arc lengths: before side, anchor, after side
    """
    before, after = split_points(
        request.count,
        anchor_arc_length,
        smart_spacing=request.smart_spacing,
        contrast=request.contrast,
    )
    log.debug(
        "Distributing %d swatches around arc %.4f: %d before, %d after (contrast=%.2f)",
        request.count,
        anchor_arc_length,
        before,
        after,
        request.contrast,
    )

    below = [
        side_arc_length(i, before, anchor_arc_length, request.contrast, before=True)
        for i in range(before)
    ]
    above = [
        side_arc_length(i, after, anchor_arc_length, request.contrast, before=False)
        for i in range(after)
    ]
    return tuple(below) + (anchor_arc_length,) + tuple(above)


# =============================================================================
# Assembly
# =============================================================================


def black_swatch() -> SwatchPosition:
    """Pure black: 0% saturation, 0% value, arc length 0."""
    return SwatchPosition(
        index=0, arc_length=0.0, main_x=0.0, main_y=0.0, x=0.0, y=0.0, is_black=True
    )


def white_swatch() -> SwatchPosition:
    """Pure white: 0% saturation, 100% value, arc length 1."""
    return SwatchPosition(
        index=0, arc_length=1.0, main_x=0.0, main_y=1.0, x=0.0, y=1.0, is_white=True
    )


def assemble(
    before: Sequence[SwatchPosition],
    anchor: SwatchPosition,
    after: Sequence[SwatchPosition],
    include_black_white: bool = False,
) -> tuple[SwatchPosition, ...]:
    """
    Concatenate swatches in ascending arc-length order and re-index them.

    Args:
        before: Swatches below the anchor, ascending
        anchor: The anchor swatch
        after: Swatches above the anchor, ascending
        include_black_white: Prepend pure black and append pure white

    Returns:
        Tuple of SwatchPosition with index equal to list position
    """
    ordered = [*before, anchor, *after]
    if include_black_white:
        ordered = [black_swatch(), *ordered, white_swatch()]
    return tuple(replace(s, index=i) for i, s in enumerate(ordered))
