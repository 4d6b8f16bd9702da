import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import math

import numpy as np
import pytest

from arcus import Arc

EPS = np.finfo(np.float64).eps


def reference(w):
    s, c, t = math.sin(w), math.cos(w), math.tan(w)
    with np.errstate(divide="ignore"):
        return {
            "sin": s,
            "cos": c,
            "tan": t,
            "csc": float(np.divide(1.0, s)),
            "sec": float(np.divide(1.0, c)),
            "cot": float(np.divide(1.0, t)),
        }


def close(actual, expected, ulps=4):
    """Agreement within a few units in the last place of *expected*."""
    if math.isinf(expected) or math.isinf(actual):
        return actual == expected
    return abs(actual - expected) <= ulps * math.ulp(expected)


@pytest.mark.parametrize("w", np.linspace(0.0, 2 * math.pi - 10 * EPS, 18))
def test_trigonometric_functions(w):
    a = Arc(w)
    expected = reference(w)
    for name, value in expected.items():
        assert close(getattr(a, name)(), value), name


@pytest.mark.parametrize("w", np.linspace(-math.pi, math.pi, 73)[1:] + 1 / math.e)
def test_irrational_sweep(w):
    a = Arc(w)
    s, c = a.sincos()
    assert s == a.sin()
    assert c == a.cos()
    assert close(s, math.sin(w), ulps=2)
    assert close(c, math.cos(w), ulps=2)
    assert close(a.tan(), math.tan(w))
    assert s * s + c * c == pytest.approx(1.0, abs=4 * EPS)


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0, (0.0, 1.0)),
        (90, (1.0, 0.0)),
        (180, (0.0, -1.0)),
        (270, (-1.0, 0.0)),
        (360, (0.0, 1.0)),
    ],
)
def test_exact_quadrant_boundaries(degrees, expected):
    a = Arc.from_degrees(degrees)
    assert a.sincos() == expected
    assert (a.sin(), a.cos()) == expected


def test_every_45_degrees():
    h = math.sqrt(0.5)
    for k in range(9):
        a = Arc.from_degrees(45 * k)
        s, c = a.sincos()
        assert s == pytest.approx(math.sin(k * math.pi / 4), abs=4 * EPS)
        assert c == pytest.approx(math.cos(k * math.pi / 4), abs=4 * EPS)
        if k % 2:
            assert abs(s) == pytest.approx(h, abs=4 * EPS)
            assert abs(a.tan()) == pytest.approx(1.0, abs=8 * EPS)


def test_reciprocals_propagate_infinity():
    right = Arc.from_degrees(90)
    assert right.tan() == math.inf
    assert right.sec() == math.inf
    assert right.cot() == 0.0
    assert Arc.from_degrees(270).tan() == -math.inf
    assert Arc.zero().csc() == math.inf
    assert Arc.zero().cot() == math.inf
    assert Arc.from_degrees(180).csc() == math.inf


def test_nan_angle_trig_is_nan():
    a = Arc(math.inf)
    assert math.isnan(a.sin())
    assert math.isnan(a.cos())
    assert math.isnan(a.tan())
