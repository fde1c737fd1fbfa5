"""
Domain-color complex functions straight into the terminal (sixel) or to PNG.

Run:
    python scripts/plot_complex.py                      # demo: f(z)=z, then f(z)=z*z
    python scripts/plot_complex.py --function pole --c 1+1j
    python scripts/plot_complex.py --config configs/demo.yaml
    python scripts/plot_complex.py --function sin --outfile figures/sin.png
"""

import argparse
import logging
import os
import sys
from dataclasses import replace

# Ensure repository root is on sys.path so `from domain_coloring...` works when
# running this script directly (e.g. `python scripts/plot_complex.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from domain_coloring.config import DEMO_REQUESTS, load_config
from domain_coloring.functions import FUNCTION_NAMES, describe
from domain_coloring.plot import complex_plot, save_png
from domain_coloring.sixel import PALETTES
from domain_coloring.utils import parse_complex


def log(msg):
    # stdout carries the image stream
    print(msg, file=sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(description="Domain coloring plots for complex functions")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML file with `defaults` and `plots`")
    parser.add_argument("--function", type=str, default=None, choices=FUNCTION_NAMES)
    parser.add_argument("--c", type=str, default=None,
                        help="complex parameter for 'pole' and 'shift', e.g. 0.5-1j")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--x_range", type=float, default=None,
                        help="half-width of the real axis window")
    parser.add_argument("--y_range", type=float, default=None,
                        help="half-height of the imaginary axis window")
    parser.add_argument("--threshold", type=float, default=None,
                        help="gridline sharpness exponent (default 0.1)")
    parser.add_argument("--palette", type=str, default=None, choices=sorted(PALETTES))
    parser.add_argument("--hue_scale", type=str, default=None,
                        choices=["degrees", "normalized"])
    parser.add_argument("--outfile", type=str, default=None,
                        help="save PNG here instead of writing sixel to stdout")
    parser.add_argument("--verbose", action="store_true")
    return parser


def overrides_from_args(args):
    out = {}
    for key in ("function", "width", "height", "x_range", "y_range",
                "threshold", "palette", "hue_scale", "outfile"):
        v = getattr(args, key)
        if v is not None:
            out[key] = v
    if args.c is not None:
        out["c"] = parse_complex(args.c)
    return out


def plan_requests(args):
    if args.config:
        requests = load_config(args.config)
    elif args.function:
        requests = [DEMO_REQUESTS[0]]
    else:
        requests = list(DEMO_REQUESTS)

    overrides = overrides_from_args(args)
    if args.outfile and len(requests) > 1:
        raise ValueError("--outfile needs a single plot; use `outfile` per plot in the config instead")
    return [replace(r, **overrides).validate() for r in requests]


def run(requests, stream):
    for req in requests:
        label = describe(req.function, req.c)
        log(f"[run] {label} {req.width}x{req.height} "
            f"x=[-{req.x_range:g}, {req.x_range:g}] y=[-{req.y_range:g}, {req.y_range:g}]")

        sink = None if req.outfile else stream
        if sink is not None:
            sink.write(b"\t")
        canvas = complex_plot(
            req.size, req.x_range, req.y_range, req.make_function(),
            sink=sink,
            palette=req.palette,
            threshold=req.threshold,
            hue_scale=req.hue_scale,
        )
        if req.outfile:
            out_path = save_png(canvas, req.outfile)
            log(f"[run] saved {out_path}")
        else:
            stream.write(f"{label}\n\n".encode("utf-8"))
            stream.flush()


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(levelname)s %(name)s: %(message)s")

    try:
        requests = plan_requests(args)
        run(requests, sys.stdout.buffer)
    except (ValueError, OSError) as e:
        log(f"[error] {e}")
        return 2
    log("[run] done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
