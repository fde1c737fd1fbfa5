import sys
from pathlib import Path
import math

import numpy as np
import pytest

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from domain_coloring.canvas import Canvas, ImageSize, PixelCoordinate
from domain_coloring.color import HueScale, hsv_to_rgb
from domain_coloring.render import pixel_to_plane, render
from domain_coloring.sampler import sample_hsv


def identity(z):
    return z


def rendered(*, f, width, height, x_range=2.0, y_range=2.0, **kwargs):
    """Render f on a fresh canvas and return a (height, width, 3) copy."""
    canvas = Canvas(ImageSize(width, height))
    render(canvas, x_range, y_range, f, **kwargs)
    return np.array(canvas.as_image())


def test_edges_reach_the_range():
    size = ImageSize(4, 4)
    assert pixel_to_plane(0, 0, size, 1.0, 2.0) == (-1.0, -2.0)
    assert pixel_to_plane(3, 3, size, 1.0, 2.0) == (1.0, 2.0)
    assert pixel_to_plane(3, 0, size, 1.0, 2.0) == (1.0, -2.0)


def test_odd_canvas_center_is_origin():
    for n in (3, 5, 401):
        size = ImageSize(n, n)
        c = (n - 1) // 2
        assert pixel_to_plane(c, c, size, 4.0, 3.0) == (0.0, 0.0)


def test_single_pixel_axis_maps_to_zero():
    assert pixel_to_plane(0, 0, ImageSize(1, 1), 5.0, 5.0) == (0.0, 0.0)


def test_identity_center_pixel_is_z_zero():
    """z = 0 at the center: the magnitude sawtooth gives saturation 0.5."""
    canvas = Canvas(ImageSize(5, 5))
    render(canvas, 1.0, 1.0, identity)

    xf, yf = pixel_to_plane(2, 2, canvas.size, 1.0, 1.0)
    hsv = sample_hsv(identity, xf, yf)
    assert hsv.saturation == 0.5
    assert canvas.pixel(PixelCoordinate(2, 2)) == hsv_to_rgb(hsv)


def test_corner_hues_rotate_by_quarter_turns():
    """Walking TL -> TR -> BR -> BL around a 4x4 identity plot turns the hue by 90 degrees each step."""
    size = ImageSize(4, 4)
    corners = [(0, 0), (3, 0), (3, 3), (0, 3)]
    hues = [sample_hsv(identity, *pixel_to_plane(px, py, size, 1.0, 1.0)).degrees()
            for px, py in corners]

    for a, b in zip(hues, hues[1:] + hues[:1]):
        assert (b - a) % 360.0 == pytest.approx(90.0, abs=1e-9)

    # at +-1 the gridlines darken every corner to black; step inside them
    canvas = Canvas(size)
    render(canvas, 0.75, 0.75, identity)
    colors = {canvas.pixel(PixelCoordinate(px, py)) for px, py in corners}
    assert len(colors) == 4


def test_every_pixel_is_written():
    canvas = Canvas(ImageSize(6, 5))
    canvas.pixels[:] = 7
    render(canvas, 1.5, 1.5, lambda z: z * z + 0.3j)
    expected = rendered(f=lambda z: z * z + 0.3j, width=6, height=5, x_range=1.5, y_range=1.5)
    np.testing.assert_array_equal(canvas.as_image(), expected)


@pytest.mark.parametrize("f", [
    lambda z: 1.0 / z,
    lambda z: 1 / complex(z),
    np.log,
    lambda z: np.exp(1.0 / z),
])
def test_poles_do_not_abort(f):
    canvas = Canvas(ImageSize(5, 5))
    canvas.pixels[:] = 0
    render(canvas, 1.0, 1.0, f)
    # z = 0 sits exactly on the center pixel; it comes out as the white marker
    assert canvas.pixel(PixelCoordinate(2, 2)) == (255, 255, 255)


def test_overflowing_magnitude_does_not_abort():
    """Finite Re/Im whose modulus exceeds the float range still render, as the pole marker."""
    canvas = Canvas(ImageSize(1, 1))
    canvas.pixels[:] = 0
    render(canvas, 1.0, 1.0, lambda z: (z + 1 + 1j) * 1.3e308)
    assert canvas.pixel(PixelCoordinate(0, 0)) == (255, 255, 255)


def test_render_is_deterministic():
    a = Canvas(ImageSize(9, 7))
    b = Canvas(ImageSize(9, 7))
    render(a, 2.0, 1.5, lambda z: z * z)
    render(b, 2.0, 1.5, lambda z: z * z)
    assert a.tobytes() == b.tobytes()


def test_hue_scale_does_not_change_pixels():
    deg = rendered(f=np.sin, width=8, height=8, x_range=3.0, y_range=1.0)
    norm = rendered(f=np.sin, width=8, height=8, x_range=3.0, y_range=1.0,
                    hue_scale=HueScale.NORMALIZED)
    np.testing.assert_array_equal(deg, norm)


@pytest.mark.parametrize("bad", [0.0, -1.0, math.nan, math.inf])
def test_rejects_bad_ranges(bad):
    canvas = Canvas(ImageSize(2, 2))
    with pytest.raises(ValueError):
        render(canvas, bad, 1.0, identity)
    with pytest.raises(ValueError):
        render(canvas, 1.0, bad, identity)
