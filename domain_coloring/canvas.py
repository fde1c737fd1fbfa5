from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from domain_coloring.color import RGBColor

FILL_VALUE = 0xFF  # white


@dataclass(frozen=True)
class ImageSize:
    width: int
    height: int

    def __post_init__(self):
        for name in ("width", "height"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or v <= 0:
                raise ValueError(f"ImageSize.{name} must be a positive int, got {v!r}")
            object.__setattr__(self, name, int(v))

    def area(self) -> int:
        return self.width * self.height


class PixelCoordinate(NamedTuple):
    x: int
    y: int


class Canvas:
    """
    RGB pixel buffer: size.area() * 3 bytes, row-major, red/green/blue
    interleaved, pre-filled with white. The buffer is never resized.
    """

    def __init__(self, size: ImageSize):
        self.size = size
        self.pixels = np.full(size.area() * 3, FILL_VALUE, dtype=np.uint8)

    def contains(self, p: PixelCoordinate) -> bool:
        return 0 <= p.x < self.size.width and 0 <= p.y < self.size.height

    def _offset(self, p: PixelCoordinate) -> int:
        return (p.y * self.size.width + p.x) * 3

    def write(self, p: PixelCoordinate, color: RGBColor) -> None:
        """Set one pixel. Coordinates outside the canvas are ignored."""
        if not self.contains(p):
            return
        i = self._offset(p)
        self.pixels[i] = color.red
        self.pixels[i + 1] = color.green
        self.pixels[i + 2] = color.blue

    def pixel(self, p: PixelCoordinate) -> RGBColor:
        if not self.contains(p):
            raise IndexError(f"{p} outside canvas of {self.size.width}x{self.size.height}")
        i = self._offset(p)
        r, g, b = (int(c) for c in self.pixels[i:i + 3])
        return RGBColor(r, g, b)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def as_image(self) -> np.ndarray:
        """Read-only (height, width, 3) view of the buffer."""
        view = self.pixels.reshape(self.size.height, self.size.width, 3).view()
        view.flags.writeable = False
        return view
