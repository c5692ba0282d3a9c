# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Design-system step labels for palette swatches.

Swatches are labeled "<base> <step>" where the darkest curve swatch carries
the highest step and each lighter swatch ten less. The fixed end swatches
are labeled "Black" and "White" and do not consume a step.

For a 10-swatch palette named "Blue":

    Blue 100, Blue 90, ..., Blue 10   (dark → light)
"""

from __future__ import annotations

from typing import Sequence

from shadecurve.schema import Swatch

STEP_MULTIPLIER = 10
BLACK_NAME = "Black"
WHITE_NAME = "White"


def step_number(total_main: int, position_from_dark_end: int) -> int:
    """
    Step for a curve swatch.

    Args:
        total_main: Number of curve swatches (black/white excluded)
        position_from_dark_end: 0 for the darkest curve swatch

    Returns:
        (total_main - position_from_dark_end) * 10
    """
    return (total_main - position_from_dark_end) * STEP_MULTIPLIER


def name_swatches(
    swatches: Sequence[Swatch],
    base_name: str = "Color",
) -> tuple[Swatch, ...]:
    """
    Attach display names to swatches ordered dark → light.

    Args:
        swatches: Swatches in ascending arc-length order
        base_name: Palette name prefix

    Returns:
        New swatches with name set; order is unchanged
    """
    total_main = sum(1 for s in swatches if not s.position.is_fixed)

    named = []
    counter = 0
    for swatch in swatches:
        if swatch.position.is_black:
            name = BLACK_NAME
        elif swatch.position.is_white:
            name = WHITE_NAME
        else:
            name = f"{base_name} {step_number(total_main, counter)}"
            counter += 1
        named.append(swatch.with_name(name))
    return tuple(named)
