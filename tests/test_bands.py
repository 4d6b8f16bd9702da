import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import math

import pytest

from arcus.bands import BANDS, Bands, band_of, classify


def test_band_factors():
    assert BANDS.expomax == 341
    assert BANDS.f0 == 1.0
    assert BANDS.f1 == 2.0 ** 341
    assert BANDS.f2 == BANDS.f1 * BANDS.f1
    assert BANDS.f3 == 2.0 ** 1023
    assert math.isfinite(BANDS.f3)
    assert BANDS.fmin * BANDS.f1 == 1.0
    assert Bands.for_float64() == BANDS


def test_bands_are_frozen():
    with pytest.raises(AttributeError):
        BANDS.f1 = 2.0


def test_classify_quadrants():
    h = math.sqrt(0.5)
    assert classify(0.0, 1.0) == (0, 0.0)
    assert classify(0.6, 0.8) == (0, 0.6)
    assert classify(0.8, 0.6) == (1, 0.6)
    assert classify(0.6, -0.8) == (2, 0.6)
    assert classify(-0.6, -0.8) == (2, -0.6)
    assert classify(-0.8, 0.6) == (3, 0.6)
    # diagonals belong to the cosine dominated quadrants
    assert classify(h, h)[0] == 0
    assert classify(h, -h)[0] == 2
    assert classify(-h, h)[0] == 0


def test_band_of():
    assert band_of(0.0) == 0
    assert band_of(-0.99) == 0
    assert band_of(1.0) == 1
    assert band_of(-0.5 * BANDS.f1) == 1
    assert band_of(BANDS.f1) == 2
    assert band_of(BANDS.f2) == 3
    assert band_of(-0.7 * BANDS.f3) == 3
