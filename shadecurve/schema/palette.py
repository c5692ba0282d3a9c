# Copyright (c) 2026 Shadecurve
# SPDX-License-Identifier: MIT

"""
Palette schema: curve samples, distribution requests and swatches.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same request → same palette
- Pure: Nothing here carries state between generations
- Serializable: JSON-ready via to_dict / from_dict

Coordinate System:
    All curve math happens in the unit square of the saturation/value plane.

    - x: Saturation (0.0 = gray, 1.0 = fully saturated)
    - y: Value/brightness (0.0 = black, 1.0 = full brightness)

    A swatch's color is (hue, x * 100, y * 100) read as HSV.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Input Constraints
# =============================================================================

COUNT_MIN = 1
COUNT_MAX = 50

CONTRAST_MIN = 0.1
CONTRAST_MAX = 5.0

SATURATION_MIN = 0.0
SATURATION_MAX = 100.0


def _in_unit(value: float) -> bool:
    return 0.0 <= value <= 1.0


# =============================================================================
# Curve Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class CurvePoint:
    """
    A single sample on a parameterized superellipse.

    Attributes:
        t: Parameter angle in [0, π/2]
        x: Saturation coordinate [0, 1]
        y: Value coordinate [0, 1]
        arc_length: Cumulative (unnormalized) distance from the curve start
        normalized_arc_length: arc_length / total length, in [0, 1]
    """
    t: float
    x: float
    y: float
    arc_length: float
    normalized_arc_length: float

    def __post_init__(self) -> None:
        """Validate coordinates are inside the unit square."""
        if not _in_unit(self.x):
            raise ValueError(f"x must be 0-1, got {self.x}")
        if not _in_unit(self.y):
            raise ValueError(f"y must be 0-1, got {self.y}")
        if not _in_unit(self.normalized_arc_length):
            raise ValueError(
                f"Normalized arc length must be 0-1, got {self.normalized_arc_length}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "t": self.t,
            "x": self.x,
            "y": self.y,
            "arc_length": self.arc_length,
            "normalized_arc_length": self.normalized_arc_length,
        }

    @classmethod
    def from_dict(cls, data: dict) -> CurvePoint:
        """Deserialize from dictionary."""
        return cls(
            t=data["t"],
            x=data["x"],
            y=data["y"],
            arc_length=data["arc_length"],
            normalized_arc_length=data["normalized_arc_length"],
        )


@dataclass(frozen=True, slots=True)
class CurveSample:
    """
    An ordered, arc-length-parameterized sampling of one superellipse.

    The sequence runs from the saturated end (t = 0, y = 0) to the bright
    end (t = π/2, x = 0). Normalized arc length starts at exactly 0, ends at
    exactly 1 and never decreases in between.

    Attributes:
        points: Samples in parameter order
        exponent: Superellipse exponent the samples were generated from
        x_scale: Compression applied along the saturation axis (1.0 = none)
    """
    points: tuple[CurvePoint, ...]
    exponent: float
    x_scale: float = 1.0

    def __post_init__(self) -> None:
        """Validate the arc-length parameterization."""
        if not self.points:
            raise ValueError("Curve sample cannot be empty")
        if self.points[0].normalized_arc_length != 0.0:
            raise ValueError(
                "Curve must start at normalized arc length 0, "
                f"got {self.points[0].normalized_arc_length}"
            )
        if len(self.points) > 1 and self.points[-1].normalized_arc_length != 1.0:
            raise ValueError(
                "Curve must end at normalized arc length 1, "
                f"got {self.points[-1].normalized_arc_length}"
            )
        arcs = np.fromiter(
            (p.normalized_arc_length for p in self.points),
            dtype=np.float64,
            count=len(self.points),
        )
        if np.any(np.diff(arcs) < 0.0):
            raise ValueError("Normalized arc length must be non-decreasing")

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[CurvePoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> CurvePoint:
        return self.points[index]

    @property
    def first(self) -> CurvePoint:
        return self.points[0]

    @property
    def last(self) -> CurvePoint:
        return self.points[-1]

    @property
    def xs(self) -> NDArray[np.float64]:
        """Saturation coordinates as an array of shape (N,)."""
        return np.array([p.x for p in self.points], dtype=np.float64)

    @property
    def ys(self) -> NDArray[np.float64]:
        """Value coordinates as an array of shape (N,)."""
        return np.array([p.y for p in self.points], dtype=np.float64)

    @property
    def normalized_arc_lengths(self) -> NDArray[np.float64]:
        """Normalized arc lengths as an array of shape (N,)."""
        return np.array(
            [p.normalized_arc_length for p in self.points], dtype=np.float64
        )

    @property
    def total_length(self) -> float:
        """Unnormalized length of the sampled polyline."""
        return self.points[-1].arc_length

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "exponent": self.exponent,
            "x_scale": self.x_scale,
            "points": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict) -> CurveSample:
        """Deserialize from dictionary."""
        return cls(
            points=tuple(CurvePoint.from_dict(p) for p in data["points"]),
            exponent=data["exponent"],
            x_scale=data.get("x_scale", 1.0),
        )


# =============================================================================
# Request
# =============================================================================


@dataclass(frozen=True, slots=True)
class DistributionRequest:
    """
    Parameters for one palette generation.

    Smart spacing and a non-unit contrast never coexist: constructing a
    request with smart_spacing=True resets contrast to exactly 1.0.

    Attributes:
        anchor_x: Anchor saturation in the unit square
        anchor_y: Anchor value in the unit square
        count: Number of curve swatches (anchor included, black/white excluded)
        contrast: Distribution factor (1.0 = linear, >1 pushes swatches toward
            the curve ends, <1 pulls them toward the anchor)
        smart_spacing: Split swatches proportionally to the anchor's arc length
        desaturation: Percentage of saturation kept on the muted curve (0-100)
        include_black_white: Add pure black and pure white end swatches
    """
    anchor_x: float
    anchor_y: float
    count: int = 10
    contrast: float = 1.0
    smart_spacing: bool = False
    desaturation: float = 100.0
    include_black_white: bool = False

    def __post_init__(self) -> None:
        """Validate ranges and enforce the smart-spacing/contrast exclusion."""
        if not _in_unit(self.anchor_x):
            raise ValueError(f"Anchor x must be 0-1, got {self.anchor_x}")
        if not _in_unit(self.anchor_y):
            raise ValueError(f"Anchor y must be 0-1, got {self.anchor_y}")
        if not COUNT_MIN <= self.count <= COUNT_MAX:
            raise ValueError(
                f"Count must be {COUNT_MIN}-{COUNT_MAX}, got {self.count}"
            )
        if not CONTRAST_MIN <= self.contrast <= CONTRAST_MAX:
            raise ValueError(
                f"Contrast must be {CONTRAST_MIN}-{CONTRAST_MAX}, got {self.contrast}"
            )
        if not SATURATION_MIN <= self.desaturation <= SATURATION_MAX:
            raise ValueError(
                f"Desaturation must be 0-100, got {self.desaturation}"
            )
        if self.smart_spacing and self.contrast != 1.0:
            object.__setattr__(self, "contrast", 1.0)

    @property
    def use_contrast(self) -> bool:
        """True when the power-law distribution is active."""
        return self.contrast != 1.0

    def with_contrast(self, contrast: float) -> DistributionRequest:
        """Copy with a new contrast; a non-unit contrast disables smart spacing."""
        smart = self.smart_spacing and contrast == 1.0
        return replace(self, contrast=contrast, smart_spacing=smart)

    def with_smart_spacing(self, enabled: bool) -> DistributionRequest:
        """Copy with smart spacing toggled; enabling it resets contrast."""
        return replace(self, smart_spacing=enabled)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "anchor_x": self.anchor_x,
            "anchor_y": self.anchor_y,
            "count": self.count,
            "contrast": self.contrast,
            "smart_spacing": self.smart_spacing,
            "desaturation": self.desaturation,
            "include_black_white": self.include_black_white,
        }

    @classmethod
    def from_dict(cls, data: dict) -> DistributionRequest:
        """Deserialize from dictionary."""
        return cls(
            anchor_x=data["anchor_x"],
            anchor_y=data["anchor_y"],
            count=data.get("count", 10),
            contrast=data.get("contrast", 1.0),
            smart_spacing=data.get("smart_spacing", False),
            desaturation=data.get("desaturation", 100.0),
            include_black_white=data.get("include_black_white", False),
        )


# =============================================================================
# Swatches
# =============================================================================


@dataclass(frozen=True, slots=True)
class SwatchPosition:
    """
    One output slot of a distribution, resolved on both curves.

    Attributes:
        index: Position in ascending arc-length order (black first, if present)
        arc_length: Normalized arc length shared by both curves
        main_x, main_y: Coordinates on the main (full-saturation) curve
        x, y: Coordinates on the desaturated curve
        is_anchor: The swatch derived from the user's anchor color
        is_black: Fixed pure-black end swatch (arc length 0)
        is_white: Fixed pure-white end swatch (arc length 1)
    """
    index: int
    arc_length: float
    main_x: float
    main_y: float
    x: float
    y: float
    is_anchor: bool = False
    is_black: bool = False
    is_white: bool = False

    def __post_init__(self) -> None:
        """Validate the position."""
        if self.index < 0:
            raise ValueError(f"Index must be >= 0, got {self.index}")
        if not _in_unit(self.arc_length):
            raise ValueError(f"Arc length must be 0-1, got {self.arc_length}")
        if self.is_black and self.is_white:
            raise ValueError("A swatch cannot be both black and white")

    @property
    def is_fixed(self) -> bool:
        """True for the black/white swatches that bypass curve lookup."""
        return self.is_black or self.is_white

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "index": self.index,
            "arc_length": self.arc_length,
            "main": {"x": self.main_x, "y": self.main_y},
            "desaturated": {"x": self.x, "y": self.y},
        }
        if self.is_anchor:
            d["is_anchor"] = True
        if self.is_black:
            d["is_black"] = True
        if self.is_white:
            d["is_white"] = True
        return d

    @classmethod
    def from_dict(cls, data: dict) -> SwatchPosition:
        """Deserialize from dictionary."""
        return cls(
            index=data["index"],
            arc_length=data["arc_length"],
            main_x=data["main"]["x"],
            main_y=data["main"]["y"],
            x=data["desaturated"]["x"],
            y=data["desaturated"]["y"],
            is_anchor=data.get("is_anchor", False),
            is_black=data.get("is_black", False),
            is_white=data.get("is_white", False),
        )


@dataclass(frozen=True, slots=True)
class FitResult:
    """
    Complete numeric output of fitting a curve and distributing swatches.

    Attributes:
        exponent: Superellipse exponent passing through the anchor
        anchor_arc_length: Normalized arc length of the anchor's projection
        main_curve: Samples of the fitted curve
        desaturated_curve: Samples of the compressed curve
        swatches: Ordered swatch positions (ascending arc length)
    """
    exponent: float
    anchor_arc_length: float
    main_curve: CurveSample
    desaturated_curve: CurveSample
    swatches: tuple[SwatchPosition, ...]

    def __post_init__(self) -> None:
        """Validate that exactly one anchor swatch is present."""
        anchors = sum(1 for s in self.swatches if s.is_anchor)
        if anchors != 1:
            raise ValueError(f"Expected exactly one anchor swatch, got {anchors}")

    @property
    def anchor(self) -> SwatchPosition:
        """The anchor swatch."""
        return next(s for s in self.swatches if s.is_anchor)

    @property
    def arc_lengths(self) -> tuple[float, ...]:
        return tuple(s.arc_length for s in self.swatches)

    def to_dict(self, include_curves: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_curves: If True, include both full curve samplings
        """
        d = {
            "exponent": self.exponent,
            "anchor_arc_length": self.anchor_arc_length,
            "swatches": [s.to_dict() for s in self.swatches],
        }
        if include_curves:
            d["main_curve"] = self.main_curve.to_dict()
            d["desaturated_curve"] = self.desaturated_curve.to_dict()
        return d


@dataclass(frozen=True, slots=True)
class Swatch:
    """
    A colored swatch.

    Attributes:
        position: Where the swatch sits on the curves
        hex: Color from the desaturated curve ("#RRGGBB")
        main_hex: Color from the main curve ("#RRGGBB")
        name: Display label, e.g. "Color 50" (None until named)
    """
    position: SwatchPosition
    hex: str
    main_hex: str
    name: Optional[str] = None

    @property
    def s(self) -> float:
        """Desaturated saturation in percent."""
        return self.position.x * 100.0

    @property
    def v(self) -> float:
        """Desaturated value in percent."""
        return self.position.y * 100.0

    @property
    def main_s(self) -> float:
        return self.position.main_x * 100.0

    @property
    def main_v(self) -> float:
        return self.position.main_y * 100.0

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Desaturated color as 0-255 integers."""
        raw = self.hex.lstrip("#")
        return int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16)

    def with_name(self, name: str) -> Swatch:
        return replace(self, name=name)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "hex": self.hex,
            "main_hex": self.main_hex,
            "position": self.position.to_dict(),
        }
        if self.name is not None:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Swatch:
        """Deserialize from dictionary."""
        return cls(
            position=SwatchPosition.from_dict(data["position"]),
            hex=data["hex"],
            main_hex=data["main_hex"],
            name=data.get("name"),
        )


@dataclass(frozen=True, slots=True)
class Palette:
    """
    A generated palette: colored swatches in ascending arc-length order.

    Ascending arc length means dark/saturated first, light last.

    Attributes:
        hue: Hue shared by every swatch, in degrees [0, 360]
        request: Request that produced the palette
        exponent: Fitted superellipse exponent
        anchor_arc_length: Normalized arc length of the anchor
        swatches: Colored swatches
        name: Base name used for labels
    """
    hue: float
    request: DistributionRequest
    exponent: float
    anchor_arc_length: float
    swatches: tuple[Swatch, ...]
    name: str = "Color"

    def __post_init__(self) -> None:
        """Validate palette structure."""
        if not 0.0 <= self.hue <= 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.hue}")
        if not self.swatches:
            raise ValueError("Palette cannot be empty")

    def __len__(self) -> int:
        return len(self.swatches)

    def __iter__(self) -> Iterator[Swatch]:
        return iter(self.swatches)

    @property
    def anchor(self) -> Swatch:
        """The swatch derived from the anchor color."""
        return next(s for s in self.swatches if s.position.is_anchor)

    def hexes(self, main: bool = False) -> tuple[str, ...]:
        """
        Hex values in palette order.

        Args:
            main: If True, use the full-saturation colors
        """
        if main:
            return tuple(s.main_hex for s in self.swatches)
        return tuple(s.hex for s in self.swatches)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "hue": self.hue,
            "exponent": self.exponent,
            "anchor_arc_length": self.anchor_arc_length,
            "request": self.request.to_dict(),
            "swatches": [s.to_dict() for s in self.swatches],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(
            hue=data["hue"],
            request=DistributionRequest.from_dict(data["request"]),
            exponent=data["exponent"],
            anchor_arc_length=data["anchor_arc_length"],
            swatches=tuple(Swatch.from_dict(s) for s in data["swatches"]),
            name=data.get("name", "Color"),
        )
