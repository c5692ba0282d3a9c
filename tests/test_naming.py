# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""Tests for swatch step labels."""

from shadecurve.curve.naming import name_swatches, step_number
from shadecurve.schema import Swatch, SwatchPosition


def _swatch(index, **flags):
    position = SwatchPosition(
        index=index,
        arc_length=min(1.0, index / 10),
        main_x=0.5,
        main_y=0.5,
        x=0.5,
        y=0.5,
        **flags,
    )
    return Swatch(position=position, hex="#808080", main_hex="#808080")


class TestStepNumber:

    def test_darkest_is_highest(self):
        assert step_number(10, 0) == 100
        assert step_number(10, 9) == 10

    def test_small_palette(self):
        assert [step_number(3, i) for i in range(3)] == [30, 20, 10]


class TestNameSwatches:

    def test_steps_descend(self):
        named = name_swatches([_swatch(i) for i in range(5)], "Teal")
        assert [s.name for s in named] == ["Teal 50", "Teal 40", "Teal 30", "Teal 20", "Teal 10"]

    def test_default_base_name(self):
        named = name_swatches([_swatch(0), _swatch(1)])
        assert [s.name for s in named] == ["Color 20", "Color 10"]

    def test_black_and_white_skip_steps(self):
        swatches = [
            _swatch(0, is_black=True),
            _swatch(1),
            _swatch(2, is_anchor=True),
            _swatch(3),
            _swatch(4, is_white=True),
        ]
        named = name_swatches(swatches, "Sand")
        assert [s.name for s in named] == ["Black", "Sand 30", "Sand 20", "Sand 10", "White"]

    def test_order_and_positions_unchanged(self):
        swatches = [_swatch(i) for i in range(4)]
        named = name_swatches(swatches)
        assert [s.position for s in named] == [s.position for s in swatches]

    def test_single_swatch(self):
        named = name_swatches([_swatch(0, is_anchor=True)], "Solo")
        assert named[0].name == "Solo 10"
