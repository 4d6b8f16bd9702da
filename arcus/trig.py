"""Trigonometric functions evaluated directly on packed values.

The stored payload is one of ``sin``/``cos``; the other is recovered with a
single square root.  Reciprocal functions follow IEEE-754 division, so a
zero denominator gives ``inf`` or ``nan`` rather than an exception.
"""

from __future__ import annotations

import math

import numpy as np

from .bands import BANDS
from .codec import unpack


def _complement(p: float) -> float:
    return math.sqrt(1.0 - p * p)


def _ieee_div(num: float, den: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(num, den))


def sincos(raw: float) -> tuple[float, float]:
    """Return ``(sin, cos)`` of the packed value *raw*."""
    band, p = unpack(raw)
    if band == 0:
        return p, _complement(p)
    on_axis = abs(p) <= BANDS.fmin
    if band == 1:
        return (1.0, 0.0) if on_axis else (_complement(p), p)
    if band == 2:
        return (0.0, -1.0) if on_axis else (p, -_complement(p))
    return (-1.0, 0.0) if on_axis else (-_complement(p), p)


def sin(raw: float) -> float:
    band, p = unpack(raw)
    if band == 0:
        return p
    if band == 1:
        return 1.0 if abs(p) <= BANDS.fmin else _complement(p)
    if band == 2:
        return 0.0 if abs(p) <= BANDS.fmin else p
    return -1.0 if abs(p) <= BANDS.fmin else -_complement(p)


def cos(raw: float) -> float:
    band, p = unpack(raw)
    if band == 0:
        return _complement(p)
    if band == 2:
        return -1.0 if abs(p) <= BANDS.fmin else -_complement(p)
    # bands 1 and 3 store the cosine
    return 0.0 if abs(p) <= BANDS.fmin else p


def tan(raw: float) -> float:
    s, c = sincos(raw)
    return _ieee_div(s, c)


def sec(raw: float) -> float:
    return _ieee_div(1.0, cos(raw))


def csc(raw: float) -> float:
    return _ieee_div(1.0, sin(raw))


def cot(raw: float) -> float:
    return _ieee_div(1.0, tan(raw))


__all__ = ["sincos", "sin", "cos", "tan", "sec", "csc", "cot"]
