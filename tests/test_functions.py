import sys
from pathlib import Path
import numpy as np
import pytest

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from domain_coloring.functions import FUNCTION_NAMES, describe, pick_function
from domain_coloring.sampler import evaluate, is_undefined


def test_demo_functions():
    assert pick_function("identity")(2 + 1j) == 2 + 1j
    assert pick_function("square")(1j) == -1
    assert pick_function("cube")(2) == 8


def test_parameterized_functions():
    c = 1 + 1j
    assert pick_function("shift", c)(1) == 2 + 1j
    assert is_undefined(evaluate(pick_function("pole", c), c))
    assert evaluate(pick_function("pole", c), 0j) == pytest.approx(1 / (-c))


def test_every_name_evaluates():
    for name in FUNCTION_NAMES:
        w = evaluate(pick_function(name, 0.5j), 0.3 - 0.7j)
        assert isinstance(w, complex), name
        assert np.isfinite(w), name


def test_unknown_function():
    with pytest.raises(ValueError):
        pick_function("gamma")


def test_describe():
    assert describe("identity") == "f(z) := z"
    assert describe("square") == "f(z) := z*z"
    assert describe("pole", 1 + 1j) == "f(z) := 1/(z - (1+1j))"
    assert describe("cos") == "f(z) := cos(z)"
