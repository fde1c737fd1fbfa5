import logging
import math

from domain_coloring.canvas import Canvas, ImageSize, PixelCoordinate
from domain_coloring.color import HueScale, hsv_to_rgb
from domain_coloring.sampler import DEFAULT_THRESHOLD, color_of, evaluate, is_undefined

logger = logging.getLogger(__name__)


def _check_range(name, v):
    try:
        r = float(v)
    except (TypeError, ValueError):
        r = math.nan
    if not (math.isfinite(r) and r > 0):
        raise ValueError(f"{name} must be a positive finite number, got {v!r}")
    return r


def _axis(p, n, half_width):
    # linspace(-half_width, half_width, n) evaluated at index p, with the
    # middle index of an odd-sized axis landing exactly on 0
    if n == 1:
        return 0.0
    return (p / (n - 1) - 0.5) * 2.0 * half_width


def pixel_to_plane(px, py, size: ImageSize, x_range, y_range):
    """
    Map a pixel to its plane coordinate.

    Ranges are half-widths: column 0 sits at -x_range and column width-1 at
    +x_range; rows likewise span [-y_range, +y_range], row 0 first.
    """
    return _axis(px, size.width, x_range), _axis(py, size.height, y_range)


def render(
    canvas: Canvas,
    x_range,
    y_range,
    f,
    threshold=DEFAULT_THRESHOLD,
    hue_scale=HueScale.DEGREES,
):
    """
    Domain-color f into canvas, one sample per pixel, row by row.

    Points where f is undefined (NaN/Inf output) are still written; they come
    out as the bright pole marker rather than aborting the render.
    """
    x_range = _check_range("x_range", x_range)
    y_range = _check_range("y_range", y_range)
    hue_scale = HueScale.from_name(hue_scale)

    size = canvas.size
    xs = [_axis(px, size.width, x_range) for px in range(size.width)]

    undefined = 0
    for py in range(size.height):
        yf = _axis(py, size.height, y_range)
        for px, xf in enumerate(xs):
            w = evaluate(f, complex(xf, yf))
            if is_undefined(w):
                undefined += 1
            canvas.write(PixelCoordinate(px, py), hsv_to_rgb(color_of(w, threshold, hue_scale)))

    logger.debug(
        "rendered %dx%d over [-%g, %g] x [-%g, %g], %d undefined samples",
        size.width, size.height, x_range, x_range, y_range, y_range, undefined,
    )
    return canvas
