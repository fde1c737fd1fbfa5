"""Domain coloring of complex functions, streamed as sixel images."""

from domain_coloring.canvas import Canvas, ImageSize, PixelCoordinate
from domain_coloring.color import HSVColor, HueScale, RGBColor, hsv_to_rgb
from domain_coloring.plot import complex_plot, save_png
from domain_coloring.render import render
from domain_coloring.sampler import sample_hsv
from domain_coloring.sixel import encode_sixel

__all__ = [
    "Canvas", "ImageSize", "PixelCoordinate",
    "HSVColor", "HueScale", "RGBColor", "hsv_to_rgb",
    "complex_plot", "save_png",
    "render", "sample_hsv", "encode_sixel",
]
