"""
Plot requests and their YAML configuration.

A config file looks like:

    defaults:
      width: 400
      height: 400
      x_range: 2.0
      y_range: 2.0
    plots:
      - function: identity
      - function: square
        outfile: figures/square.png

Keys under `defaults` apply to every entry in `plots`; entries override them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import List, Optional

import yaml

from domain_coloring.canvas import ImageSize
from domain_coloring.color import HueScale
from domain_coloring.functions import pick_function
from domain_coloring.sixel import get_palette
from domain_coloring.utils import parse_complex


@dataclass
class PlotRequest:
    function: str = "identity"
    c: complex = 0j
    width: int = 400
    height: int = 400
    x_range: float = 2.0  # half-width: the plane spans [-x_range, x_range]
    y_range: float = 2.0
    threshold: float = 0.1
    palette: str = "xterm256"
    hue_scale: str = "degrees"
    outfile: Optional[str] = None  # PNG path; None => sixel to stdout

    @property
    def size(self) -> ImageSize:
        return ImageSize(self.width, self.height)

    def validate(self) -> PlotRequest:
        """Raise ValueError on anything a render could not use; return self."""
        ImageSize(self.width, self.height)
        for name in ("x_range", "y_range"):
            v = getattr(self, name)
            if not (math.isfinite(v) and v > 0):
                raise ValueError(f"{name} must be a positive finite number, got {v!r}")
        if not (math.isfinite(self.threshold) and self.threshold > 0):
            raise ValueError(f"threshold must be positive, got {self.threshold!r}")
        pick_function(self.function, self.c)
        get_palette(self.palette)
        HueScale.from_name(self.hue_scale)
        return self

    def make_function(self):
        return pick_function(self.function, self.c)


DEMO_REQUESTS = (
    PlotRequest(function="identity"),
    PlotRequest(function="square"),
)

_FIELD_NAMES = {f.name for f in fields(PlotRequest)}


def _to_complex(c):
    return parse_complex(c) if isinstance(c, str) else complex(c)


_CONVERTERS = {
    "c": _to_complex,
    "width": int,
    "height": int,
    "x_range": float,
    "y_range": float,
    "threshold": float,
}


def _coerce(entry: dict) -> dict:
    unknown = set(entry) - _FIELD_NAMES
    if unknown:
        raise ValueError(f"Unknown plot keys: {sorted(unknown)}")
    out = dict(entry)
    for key, convert in _CONVERTERS.items():
        if key not in out:
            continue
        try:
            out[key] = convert(out[key])
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value for {key!r}: {out[key]!r}") from None
    if out.get("outfile") is not None:
        out["outfile"] = str(out["outfile"])
    return out


def request_from_dict(entry: dict, base: Optional[PlotRequest] = None) -> PlotRequest:
    base = base or PlotRequest()
    return replace(base, **_coerce(entry)).validate()


def load_config(path: str | Path) -> List[PlotRequest]:
    with open(path, "r") as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    unknown = set(cfg) - {"defaults", "plots"}
    if unknown:
        raise ValueError(f"{path}: unknown top-level keys {sorted(unknown)}")

    defaults = request_from_dict(cfg.get("defaults") or {})
    plots = cfg.get("plots") or [{}]
    return [request_from_dict(entry or {}, defaults) for entry in plots]
