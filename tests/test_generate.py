# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""Tests for the end-to-end fit_and_distribute and generate_palette API."""

import pytest

from shadecurve import generate_palette
from shadecurve.curve.colorspace import hex_to_hsv, hsv_to_hex
from shadecurve.curve.config import CurveConfig
from shadecurve.curve.generate import (
    fit_and_distribute,
    fit_and_distribute_values,
    palette_from_request,
)
from shadecurve.schema import DistributionRequest


@pytest.fixture
def default_fit():
    """The default anchor: saturation 81%, value 78%, ten swatches."""
    return fit_and_distribute(DistributionRequest(anchor_x=0.81, anchor_y=0.78, count=10))


class TestFitAndDistribute:

    def test_default_scenario(self, default_fit):
        swatches = default_fit.swatches
        assert len(swatches) == 10

        anchors = [s for s in swatches if s.is_anchor]
        assert len(anchors) == 1
        # Nine non-anchor swatches split 4/5 or 5/4
        assert anchors[0].index in (4, 5)

        arcs = default_fit.arc_lengths
        assert all(a < b for a, b in zip(arcs, arcs[1:]))
        assert arcs[0] >= 0.0
        assert arcs[-1] < 1.0

    def test_exponent_fits_anchor(self, default_fit):
        n = default_fit.exponent
        assert abs(0.81**n + 0.78**n - 1) < 0.01

    def test_anchor_keeps_exact_main_coordinates(self, default_fit):
        anchor = default_fit.anchor
        assert anchor.main_x == 0.81
        assert anchor.main_y == 0.78
        assert anchor.arc_length == default_fit.anchor_arc_length

    def test_swatches_lie_on_main_curve(self, default_fit):
        n = default_fit.exponent
        for s in default_fit.swatches:
            assert abs(s.main_x**n + s.main_y**n - 1) < 0.01

    def test_full_saturation_curves_coincide(self, default_fit):
        for s in default_fit.swatches:
            if s.is_anchor:
                assert s.x == pytest.approx(s.main_x, abs=0.01)
                assert s.y == pytest.approx(s.main_y, abs=0.01)
            else:
                assert s.x == pytest.approx(s.main_x, abs=1e-9)
                assert s.y == pytest.approx(s.main_y, abs=1e-9)

    def test_zero_saturation_is_gray(self):
        result = fit_and_distribute(
            DistributionRequest(anchor_x=0.81, anchor_y=0.78, count=10, desaturation=0.0)
        )
        assert all(s.x <= 0.005 for s in result.swatches)

    def test_brightness_increases(self, default_fit):
        ys = [s.main_y for s in default_fit.swatches]
        assert all(a <= b for a, b in zip(ys, ys[1:]))

    def test_single_swatch(self):
        for smart in (False, True):
            result = fit_and_distribute(
                DistributionRequest(anchor_x=0.6, anchor_y=0.4, count=1, smart_spacing=smart)
            )
            assert len(result.swatches) == 1
            assert result.swatches[0].is_anchor

    def test_black_and_white(self):
        result = fit_and_distribute(
            DistributionRequest(
                anchor_x=0.81, anchor_y=0.78, count=10, include_black_white=True
            )
        )
        assert len(result.swatches) == 12

        first, last = result.swatches[0], result.swatches[-1]
        assert first.is_black
        assert first.arc_length == 0.0
        assert (first.x, first.y) == (0.0, 0.0)
        assert (first.main_x, first.main_y) == (0.0, 0.0)
        assert last.is_white
        assert last.arc_length == 1.0
        assert (last.x, last.y) == (0.0, 1.0)
        assert (last.main_x, last.main_y) == (0.0, 1.0)
        assert [s.index for s in result.swatches] == list(range(12))

    def test_smart_spacing_forces_linear_contrast(self):
        request = DistributionRequest(
            anchor_x=0.81, anchor_y=0.78, count=10, contrast=3.0, smart_spacing=True
        )
        assert request.contrast == 1.0
        result = fit_and_distribute(request)
        assert len(result.swatches) == 10

    @pytest.mark.parametrize("anchor", [(0.0, 0.0), (0.0, 0.5), (1.0, 1.0), (1.0, 0.3)])
    def test_degenerate_anchors(self, anchor):
        x, y = anchor
        result = fit_and_distribute(DistributionRequest(anchor_x=x, anchor_y=y, count=5))
        assert len(result.swatches) == 5
        assert sum(1 for s in result.swatches if s.is_anchor) == 1

    def test_anchor_on_saturated_end(self):
        result = fit_and_distribute(DistributionRequest(anchor_x=1.0, anchor_y=0.0, count=10))
        arcs = result.arc_lengths
        assert result.anchor_arc_length == 0.0
        assert arcs.count(0.0) == 1
        assert result.swatches[0].is_anchor
        assert all(a < b for a, b in zip(arcs, arcs[1:]))

    def test_config_bounds_reject_request(self):
        config = CurveConfig(count_max=5, contrast_max=2.0)
        with pytest.raises(ValueError, match="Count must be 1-5, got 40"):
            fit_and_distribute(DistributionRequest(anchor_x=0.5, anchor_y=0.5, count=40), config)
        with pytest.raises(ValueError, match="Contrast"):
            fit_and_distribute(
                DistributionRequest(anchor_x=0.5, anchor_y=0.5, count=5, contrast=4.0), config
            )

    def test_config_bounds_accept_request(self):
        config = CurveConfig(count_max=5, contrast_max=2.0)
        result = fit_and_distribute(
            DistributionRequest(anchor_x=0.5, anchor_y=0.5, count=5, contrast=2.0), config
        )
        assert len(result.swatches) == 5

    def test_invalid_config_bounds(self):
        with pytest.raises(ValueError, match="Count bounds"):
            CurveConfig(count_min=10, count_max=5)
        with pytest.raises(ValueError, match="Contrast bounds"):
            CurveConfig(contrast_max=0.5)

    def test_values_form_matches_request_form(self):
        a = fit_and_distribute_values(0.5, 0.9, 7, 2.0, False, 40.0)
        b = fit_and_distribute(
            DistributionRequest(
                anchor_x=0.5, anchor_y=0.9, count=7, contrast=2.0, desaturation=40.0
            )
        )
        assert a.arc_lengths == b.arc_lengths
        assert a.exponent == b.exponent

    def test_deterministic(self):
        request = DistributionRequest(anchor_x=0.33, anchor_y=0.66, count=13, contrast=0.6)
        assert fit_and_distribute(request).to_dict() == fit_and_distribute(request).to_dict()

    def test_to_dict_optionally_includes_curves(self, default_fit):
        assert "main_curve" not in default_fit.to_dict()
        d = default_fit.to_dict(include_curves=True)
        assert len(d["main_curve"]["points"]) == 401
        assert len(d["swatches"]) == 10


class TestGeneratePalette:

    def test_anchor_color(self):
        palette = generate_palette(220, 81, 78, count=10, name="Blue")
        assert palette.anchor.main_hex == hsv_to_hex(220, 81, 78)

    def test_hex_per_swatch(self):
        palette = generate_palette(220, 81, 78, count=10)
        assert len(palette.hexes()) == 10
        assert len(palette.hexes(main=True)) == 10
        assert all(h.startswith("#") and len(h) == 7 for h in palette.hexes())

    def test_dark_to_light(self):
        palette = generate_palette(220, 81, 78, count=10)
        values = [hex_to_hsv(h)[2] for h in palette.hexes()]
        assert values[0] < values[-1]

    def test_black_and_white_hex(self):
        palette = generate_palette(30, 60, 60, count=5, include_black_white=True)
        assert palette.hexes()[0] == "#000000"
        assert palette.hexes()[-1] == "#FFFFFF"
        assert palette.swatches[0].name == "Black"
        assert palette.swatches[-1].name == "White"

    def test_names(self):
        palette = generate_palette(220, 81, 78, count=10, name="Blue")
        names = [s.name for s in palette.swatches]
        assert names[0] == "Blue 100"
        assert names[-1] == "Blue 10"

    def test_desaturation_caps_saturation(self):
        palette = generate_palette(0, 90, 80, count=5, desaturation=20.0)
        for swatch in palette.swatches:
            assert swatch.s <= 20.0 + 1e-9
        assert palette.anchor.main_s == pytest.approx(90.0)

    def test_from_request(self):
        request = DistributionRequest(anchor_x=0.5, anchor_y=0.5, count=4)
        palette = palette_from_request(120, request, name="Green")
        assert palette.request is request
        assert palette.name == "Green"
        assert len(palette) == 4

    def test_invalid_count(self):
        with pytest.raises(ValueError, match="Count"):
            generate_palette(220, 81, 78, count=0)
