import numpy as np

# name -> (formula, factory taking the parameter c)
_FUNCTIONS = {
    "identity": ("z", lambda c: lambda z: z),
    "square": ("z*z", lambda c: lambda z: z * z),
    "cube": ("z*z*z", lambda c: lambda z: z * z * z),
    "reciprocal": ("1/z", lambda c: lambda z: 1.0 / z),
    "pole": ("1/(z - {c})", lambda c: lambda z: 1.0 / (z - c)),
    "shift": ("z + {c}", lambda c: lambda z: z + c),
    "rational": ("(z*z - 1)/(z*z + 1)", lambda c: lambda z: (z * z - 1.0) / (z * z + 1.0)),
    "sin": ("sin(z)", lambda c: np.sin),
    "cos": ("cos(z)", lambda c: np.cos),
    "tan": ("tan(z)", lambda c: np.tan),
    "exp": ("exp(z)", lambda c: np.exp),
    "log": ("log(z)", lambda c: np.log),
    "sqrt": ("sqrt(z)", lambda c: np.sqrt),
}

FUNCTION_NAMES = tuple(_FUNCTIONS)


def _lookup(name: str):
    try:
        return _FUNCTIONS[name.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown function: {name!r} (expected one of {', '.join(FUNCTION_NAMES)})") from None


def pick_function(name: str, c: complex = 0j):
    """Return f(z) for a registered name. c parameterizes 'pole' and 'shift'."""
    _, factory = _lookup(name)
    return factory(complex(c))


def describe(name: str, c: complex = 0j) -> str:
    formula, _ = _lookup(name)
    formula = formula.format(c=f"({complex(c):g})")
    return f"f(z) := {formula}"
