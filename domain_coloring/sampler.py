"""
Per-sample domain coloring: turn f(x + iy) into an HSV color.

    hue        = phase of w               (pi + atan2(-Im w, -Re w)) / 2pi
    saturation = magnitude sawtooth       0.5 + 0.5 * (|w| - floor(|w|))
    value      = gridlines                |sin(pi Re w)|^t * |sin(pi Im w)|^t

where w = f(x + iy) and t is the gridline threshold. See
https://www.algorithm-archive.org/contents/domain_coloring/domain_coloring.html
"""

from __future__ import annotations

import logging
import math
from typing import Callable

import numpy as np

from domain_coloring.color import HSVColor, HueScale

logger = logging.getLogger(__name__)

ComplexFunction = Callable[[complex], complex]

DEFAULT_THRESHOLD = 0.1

UNDEFINED = complex(math.nan, math.nan)


def evaluate(f: ComplexFunction, z: complex) -> complex:
    """
    Evaluate f at z, mapping points where f is undefined to NaN.

    z is passed as numpy.complex128 so that division by zero and overflow
    produce inf/nan instead of raising; plain-Python arithmetic inside f can
    still raise, and those errors are folded into NaN as well.
    """
    with np.errstate(all="ignore"):
        try:
            w = f(np.complex128(z))
        except (ZeroDivisionError, OverflowError, ValueError):
            logger.debug("f undefined at %r", z)
            return UNDEFINED
    return complex(w)


def phase_hue(w: complex) -> float:
    """Phase of w mapped onto [0, 1], with the cut opposite the positive real axis."""
    return (math.pi + math.atan2(-w.imag, -w.real)) / (2.0 * math.pi)


def magnitude_shading(w: complex) -> float:
    # finite parts can still overflow |w|; that must come out as inf, not raise
    with np.errstate(all="ignore"):
        mag = float(np.hypot(w.real, w.imag))
    if not math.isfinite(mag):
        return math.nan
    return 0.5 + 0.5 * (mag - math.floor(mag))


def gridlines(w: complex, threshold: float = DEFAULT_THRESHOLD) -> float:
    """Periodic intensity that dips to 0 at integer Re(w) and Im(w); NaN/Inf -> 1.0."""
    with np.errstate(all="ignore"):
        value = float(
            np.abs(np.sin(np.pi * w.real)) ** threshold
            * np.abs(np.sin(np.pi * w.imag)) ** threshold
        )
    if math.isnan(value) or math.isinf(value):
        return 1.0
    return value


def is_undefined(w: complex) -> bool:
    return not (math.isfinite(w.real) and math.isfinite(w.imag))


def color_of(w: complex, threshold: float = DEFAULT_THRESHOLD,
             hue_scale: HueScale = HueScale.DEGREES) -> HSVColor:
    """HSV color for an already evaluated output w."""
    return HSVColor(
        hue=phase_hue(w) * hue_scale.maximum,
        saturation=magnitude_shading(w),
        value=gridlines(w, threshold),
        scale=hue_scale,
    )


def sample_hsv(
    f: ComplexFunction,
    x: float,
    y: float,
    threshold: float = DEFAULT_THRESHOLD,
    hue_scale: HueScale = HueScale.DEGREES,
) -> HSVColor:
    """Sample f at the plane point (x, y), i.e. at z = x + iy."""
    return color_of(evaluate(f, complex(x, y)), threshold, hue_scale)
