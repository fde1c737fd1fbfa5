"""
Color types and the HSV -> RGB conversion used by the domain-coloring renderer.

Hue can be carried in degrees ([0, 360]) or normalized ([0, 1]); the active
convention is named by HueScale and travels with the HSVColor, so the
conversion always knows which one it is looking at.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from domain_coloring.utils import clamp


class HueScale(Enum):
    DEGREES = "degrees"
    NORMALIZED = "normalized"

    @property
    def maximum(self) -> float:
        return 360.0 if self is HueScale.DEGREES else 1.0

    @classmethod
    def from_name(cls, name: str | HueScale) -> HueScale:
        if isinstance(name, HueScale):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValueError(
                f"Unknown hue scale: {name!r} (expected 'degrees' or 'normalized')"
            ) from None


class RGBColor(NamedTuple):
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class HSVColor:
    """HSV triple, clamped into its domain on construction."""

    hue: float
    saturation: float
    value: float
    scale: HueScale = HueScale.DEGREES

    def __post_init__(self):
        object.__setattr__(self, "hue", clamp(float(self.hue), 0.0, self.scale.maximum))
        object.__setattr__(self, "saturation", clamp(float(self.saturation), 0.0, 1.0))
        object.__setattr__(self, "value", clamp(float(self.value), 0.0, 1.0))

    def degrees(self) -> float:
        """Hue expressed in degrees regardless of the stored convention."""
        if self.scale is HueScale.DEGREES:
            return self.hue
        return self.hue * 360.0


# (red, green, blue) picked from (value, p, q, t) per 60-degree sector
_SECTORS = (
    lambda v, p, q, t: (v, t, p),
    lambda v, p, q, t: (q, v, p),
    lambda v, p, q, t: (p, v, t),
    lambda v, p, q, t: (p, q, v),
    lambda v, p, q, t: (t, p, v),
    lambda v, p, q, t: (v, p, q),
)


def _to_channel(x: float) -> int:
    # truncate toward zero, not round
    return int(clamp(x * 255.0, 0.0, 255.0))


def hsv_to_rgb(hsv: HSVColor) -> RGBColor:
    """
    Convert an HSVColor to 8-bit RGB.

    Achromatic colors (saturation 0) round value*255 into all three channels.
    Otherwise the hue is split into six 60-degree sectors; hue 360 wraps to 0
    and any sector index outside 0..5 falls back to the last sector.
    """
    s = hsv.saturation
    v = hsv.value

    if s == 0.0:
        gray = int(round(v * 255.0))
        return RGBColor(gray, gray, gray)

    h = hsv.degrees()
    if h == 360.0:
        h = 0.0
    else:
        h = h / 60.0

    i = int(math.floor(h))
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    pick = _SECTORS[i] if 0 <= i < len(_SECTORS) else _SECTORS[-1]
    r, g, b = pick(v, p, q, t)
    return RGBColor(_to_channel(r), _to_channel(g), _to_channel(b))
