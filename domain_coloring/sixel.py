"""
Sixel encoder for finished RGB buffers.

Pixels are quantized to a fixed xterm palette, then written six rows at a
time: every palette color present in a band gets one line of sixel
characters ('?' + 6-bit row mask), run-length compressed with '!count'.
"""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

DCS = "\x1bP0;1;0q"
ST = "\x1b\\"

SIXEL_BAND = 6
RLE_MIN_RUN = 4

_XTERM16 = [
    (0, 0, 0), (205, 0, 0), (0, 205, 0), (205, 205, 0),
    (0, 0, 238), (205, 0, 205), (0, 205, 205), (229, 229, 229),
    (127, 127, 127), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (92, 92, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
]


def _xterm256():
    levels = (0, 95, 135, 175, 215, 255)
    cube = [(r, g, b) for r in levels for g in levels for b in levels]
    grays = [(8 + 10 * i,) * 3 for i in range(24)]
    return _XTERM16 + cube + grays


PALETTES = {
    "xterm16": np.array(_XTERM16, dtype=np.int32),
    "xterm256": np.array(_xterm256(), dtype=np.int32),
}


def get_palette(name: str) -> np.ndarray:
    try:
        return PALETTES[name.lower()]
    except (KeyError, AttributeError):
        raise ValueError(
            f"Unknown palette: {name!r} (expected one of {sorted(PALETTES)})"
        ) from None


def quantize(rgb: np.ndarray, palette: np.ndarray, chunk=4096) -> np.ndarray:
    """Index of the nearest palette entry (squared RGB distance) per pixel."""
    flat = rgb.reshape(-1, 3).astype(np.int32)
    index = np.empty(flat.shape[0], dtype=np.intp)
    for start in range(0, flat.shape[0], chunk):
        block = flat[start:start + chunk]
        d = ((block[:, None, :] - palette[None, :, :]) ** 2).sum(axis=-1)
        index[start:start + chunk] = d.argmin(axis=1)
    return index.reshape(rgb.shape[:-1])


def _run_length(chars: str) -> str:
    out = []
    i = 0
    n = len(chars)
    while i < n:
        j = i
        while j < n and chars[j] == chars[i]:
            j += 1
        run = j - i
        if run >= RLE_MIN_RUN:
            out.append(f"!{run}{chars[i]}")
        else:
            out.append(chars[i] * run)
        i = j
    return "".join(out)


def _band_lines(band: np.ndarray) -> list[str]:
    lines = []
    for color in np.unique(band):
        bits = np.zeros(band.shape[1], dtype=np.int32)
        for k in range(band.shape[0]):
            bits |= (band[k] == color).astype(np.int32) << k
        chars = "".join(chr(63 + int(b)) for b in bits)
        lines.append(f"#{int(color)}{_run_length(chars)}")
    return lines


def encode_sixel(pixels, width, height, channels=3, palette="xterm256", sink=None) -> bytes:
    """
    Encode a row-major RGB buffer as a sixel stream.

    pixels is anything bytes-like (or a uint8 array) of exactly
    width*height*channels bytes. The stream is written to sink (a binary
    file-like object) when one is given, and returned either way.
    """
    if channels != 3:
        raise ValueError(f"only 3-channel RGB buffers are supported, got {channels}")
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    buf = np.frombuffer(bytes(pixels), dtype=np.uint8)
    expected = width * height * channels
    if buf.size != expected:
        raise ValueError(f"buffer holds {buf.size} bytes, expected {expected} for {width}x{height}x{channels}")

    pal = get_palette(palette)
    index = quantize(buf.reshape(height, width, channels), pal)

    out = [DCS, f'"1;1;{width};{height}']
    for n in np.unique(index):
        r, g, b = (int(round(c * 100 / 255)) for c in pal[n])
        out.append(f"#{int(n)};2;{r};{g};{b}")

    for y in range(0, height, SIXEL_BAND):
        out.append("$".join(_band_lines(index[y:y + SIXEL_BAND])))
        out.append("$-")
    out.append(ST)

    data = "".join(out).encode("ascii")
    logger.debug("sixel: %dx%d, %d colors, %d bytes", width, height, len(np.unique(index)), len(data))
    if sink is not None:
        sink.write(data)
        if hasattr(sink, "flush"):
            sink.flush()
    return data
