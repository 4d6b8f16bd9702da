"""Magnitude bands of the packed representation.

A packed angle is a single float64 whose magnitude tells which quarter of
the circle it belongs to.  Quadrant 0 stores ``sin`` unscaled, quadrants 1-3
store the smaller of ``sin``/``cos`` multiplied by ``f1``, ``f2`` or ``f3``.
The factors split the exponent range of a double into three equal parts so
that no scaled payload overflows.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Bands:
    expomax: int
    f0: float
    f1: float
    f2: float
    f3: float
    fmin: float

    @staticmethod
    def for_float64() -> "Bands":
        """Derive the band factors from the float64 exponent range."""
        info = np.finfo(np.float64)
        # maxexp is one past the exponent of the largest finite double
        expomax = (int(info.maxexp) - 1) // 3
        f1 = 2.0 ** expomax
        return Bands(
            expomax=expomax,
            f0=1.0,
            f1=f1,
            f2=f1 * f1,
            f3=f1 * f1 * f1,
            fmin=2.0 ** -expomax,
        )

    def factor(self, quadrant: int) -> float:
        """Scale factor applied to the payload of *quadrant*."""
        return (self.f0, self.f1, self.f2, self.f3)[quadrant]


BANDS = Bands.for_float64()


def classify(s: float, c: float) -> tuple[int, float]:
    """Return ``(quadrant, payload)`` for the unit point ``(s, c)``.

    The payload is whichever component has the smaller magnitude, so the
    other one can be recovered as ``sqrt(1 - payload**2)`` without loss.
    """
    if abs(s) <= abs(c):
        return (0, s) if c > 0 else (2, s)
    return (1, c) if s > 0 else (3, c)


def band_of(raw: float) -> int:
    m = abs(raw)
    if m < BANDS.f0:
        return 0
    if m < BANDS.f1:
        return 1
    if m < BANDS.f2:
        return 2
    return 3


__all__ = ["Bands", "BANDS", "classify", "band_of"]
