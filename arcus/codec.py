"""Encoder and decoder between angles and packed float64 values.

These functions work on plain floats; :class:`arcus.arc.Arc` wraps the
result.  Every encoder ends in :func:`pack`, every query on a packed value
starts in :func:`unpack`.
"""

from __future__ import annotations

import math

import numpy as np

from .bands import BANDS, band_of, classify

TWO_PI = 2.0 * math.pi
HALF_PI = math.pi / 2.0
PI_180 = math.pi / 180.0

# (sin, cos) of the four quarter turns, exact
_AXES = ((0.0, 1.0), (1.0, 0.0), (0.0, -1.0), (-1.0, 0.0))


def unit_axis(quarter: int) -> tuple[float, float]:
    """Exact ``(sin, cos)`` of ``quarter`` quarter turns."""
    return _AXES[quarter % 4]


def pack(s: float, c: float) -> float:
    """Pack the unit point ``(s, c)`` into one float64.

    Payloads of quadrants 1-3 too small to survive scaling are clamped to
    ``fmin`` so the packed value stays inside its band and away from 0.0.
    """
    quadrant, v = classify(s, c)
    if quadrant == 0:
        # -0.0 would be a second pattern for angle 0
        return v + 0.0
    if abs(v) <= BANDS.fmin:
        v = math.copysign(BANDS.fmin, v) if v != 0.0 else BANDS.fmin
    return v * BANDS.factor(quadrant)


def encode_sincos(s: float, c: float) -> float:
    """Pack an arbitrary non-zero cartesian point, normalized to unit length."""
    s, c = float(s), float(c)
    h = math.hypot(s, c)
    if h == 0.0:
        raise ValueError("cannot derive an angle from the zero vector (0, 0)")
    return pack(s / h, c / h)


def _reduce(value: float, period: float) -> float:
    # numpy keeps fmod(inf) and fmod(nan) as NaN instead of raising
    with np.errstate(invalid="ignore"):
        return float(np.fmod(value, period))


def encode_radians(r: float) -> float:
    """Pack a radian value; any real input is reduced modulo 2π first."""
    r = _reduce(float(r), TWO_PI)
    if r % HALF_PI == 0.0:
        return pack(*unit_axis(int(r // HALF_PI)))
    return pack(math.sin(r), math.cos(r))


def encode_degrees(d: float) -> float:
    """Pack a degree value, exact for multiples of 90."""
    d = d % 360
    if d % 90 == 0:
        return pack(*unit_axis(int(d // 90)))
    return encode_radians(float(d) * PI_180)


def unpack(raw: float) -> tuple[int, float]:
    """Return ``(band, payload)`` with the band scale removed."""
    band = band_of(raw)
    if band == 0:
        return 0, raw
    return band, raw / BANDS.factor(band)


def decode(raw: float) -> float:
    """Radian value in (-π, π] of the packed value *raw*."""
    band, p = unpack(raw)
    if band == 0:
        return math.asin(p)
    on_axis = abs(p) <= BANDS.fmin
    if band == 1:
        return HALF_PI if on_axis else math.acos(p)
    if band == 2:
        return math.pi if on_axis else math.copysign(math.pi, p) - math.asin(p)
    return -HALF_PI if on_axis else -math.acos(p)


def decode_degrees(raw: float) -> float:
    return decode(raw) * 180.0 / math.pi


__all__ = [
    "TWO_PI",
    "HALF_PI",
    "unit_axis",
    "pack",
    "encode_sincos",
    "encode_radians",
    "encode_degrees",
    "unpack",
    "decode",
    "decode_degrees",
]
