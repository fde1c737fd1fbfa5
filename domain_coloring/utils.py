# domain_coloring/utils.py
import math


def parse_complex(s: str) -> complex:
    """
    Parse strings like '0.3+0.5j', '-0.4-0.6j' or '2j' into a complex number.
    """
    s = s.strip().lower().replace(" ", "")
    if s.endswith("i"):
        s = s[:-1] + "j"
    if s.endswith("j"):
        return complex(s)
    # allow plain real numbers too
    return complex(float(s), 0.0)


def clamp(v, vmin, vmax):
    """Clamp v into [vmin, vmax]. NaN clamps to vmin."""
    if math.isnan(v):
        return vmin
    return max(vmin, min(v, vmax))
