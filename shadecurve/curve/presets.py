# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Built-in palette presets.

A preset fixes an anchor color, a contrast and a saturation share. Applying
a preset always turns smart spacing off, since presets carry their own
contrast.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from shadecurve.curve.colorspace import desaturated_color, hex_to_hsv
from shadecurve.curve.config import CurveConfig
from shadecurve.curve.generate import palette_from_request
from shadecurve.schema import DistributionRequest, Palette

PREVIEW_COUNT = 10


@dataclass(frozen=True)
class Preset:
    """
    A named anchor color with distribution settings.

    Attributes:
        key: Stable identifier, e.g. "Atlantic-Blue"
        name: Display name, e.g. "Atlantic Blue"
        color: Anchor hex color
        contrast: Distribution factor
        saturation: Share of saturation kept (0-100); below 100 the preset
            produces a tinted gray family
    """
    key: str
    name: str
    color: str
    contrast: float = 1.0
    saturation: float = 100.0

    @property
    def hsv(self) -> tuple[int, int, int]:
        return hex_to_hsv(self.color)

    @property
    def is_gray(self) -> bool:
        """True for presets that mute the curve."""
        return self.saturation < 100.0

    def to_request(
        self,
        count: int = PREVIEW_COUNT,
        include_black_white: bool = False,
    ) -> DistributionRequest:
        """Distribution request for this preset (smart spacing off)."""
        _, s, v = self.hsv
        return DistributionRequest(
            anchor_x=s / 100.0,
            anchor_y=v / 100.0,
            count=count,
            contrast=self.contrast,
            smart_spacing=False,
            desaturation=self.saturation,
            include_black_white=include_black_white,
        )

    def palette(
        self,
        count: int = PREVIEW_COUNT,
        include_black_white: bool = False,
        config: Optional[CurveConfig] = None,
    ) -> Palette:
        """Generate the preset's palette."""
        h, _, _ = self.hsv
        return palette_from_request(
            h,
            self.to_request(count, include_black_white),
            name=self.name,
            config=config,
        )

    def swatch_color(self, config: Optional[CurveConfig] = None) -> str:
        """The anchor color after applying the preset's saturation share."""
        h, s, v = self.hsv
        return desaturated_color(h, s, v, self.saturation, config)


def _preset(key: str, name: str, color: str, contrast: float, saturation: float = 100.0) -> Preset:
    return Preset(key=key, name=name, color=color, contrast=contrast, saturation=saturation)


PRESETS: Mapping[str, Preset] = MappingProxyType({
    p.key: p
    for p in (
        _preset("Warm-Gray", "Warm Gray", "#BF3F1F", 1.0, saturation=10.0),
        _preset("Cool-Gray", "Cool Gray", "#1F54BF", 1.0, saturation=30.0),
        _preset("Atlantic-Blue", "Atlantic Blue", "#105FE7", 0.8),
        _preset("Himmel-Blue", "Himmel Blue", "#18A2CC", 1.2),
        _preset("Steppe-Green", "Steppe Green", "#25C454", 1.4),
        _preset("Wheat-Yellow", "Wheat Yellow", "#D5AF1B", 1.0),
        _preset("Fox-Orange", "Fox Orange", "#E36912", 0.7),
        _preset("Santa-Red", "Santa Red", "#D91E28", 0.8),
        _preset("Sakura-Magenta", "Sakura Pink", "#CC27AB", 1.2),
        _preset("Amethyst-Purple", "Amethyst Purple", "#7102EF", 0.9),
    )
})


def get_preset(key: str) -> Preset:
    """Look up a preset by key."""
    try:
        return PRESETS[key]
    except KeyError:
        raise KeyError(f"No preset with key '{key}'") from None


def preview_colors(
    preset: Preset,
    config: Optional[CurveConfig] = None,
) -> tuple[str, ...]:
    """
    Preview strip for a preset: PREVIEW_COUNT hex colors, lightest first.
    """
    return tuple(reversed(preset.palette(PREVIEW_COUNT, config=config).hexes()))
