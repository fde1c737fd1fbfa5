import logging
from pathlib import Path

from domain_coloring.canvas import Canvas, ImageSize
from domain_coloring.color import HueScale
from domain_coloring.render import render
from domain_coloring.sampler import DEFAULT_THRESHOLD
from domain_coloring.sixel import encode_sixel

logger = logging.getLogger(__name__)


def complex_plot(
    size: ImageSize,
    x_range,
    y_range,
    f,
    sink=None,
    palette="xterm256",
    threshold=DEFAULT_THRESHOLD,
    hue_scale=HueScale.DEGREES,
) -> Canvas:
    """
    Render f on a fresh canvas and, if a sink is given, stream it there as sixel.

    The canvas is returned so callers can also save or inspect it.
    """
    canvas = Canvas(size)
    render(canvas, x_range, y_range, f, threshold=threshold, hue_scale=hue_scale)
    if sink is not None:
        encode_sixel(canvas.tobytes(), size.width, size.height, 3, palette, sink)
    return canvas


def save_png(canvas: Canvas, path) -> Path:
    from PIL import Image

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(canvas.as_image()).save(out_path)
    logger.debug("saved %s", out_path)
    return out_path
