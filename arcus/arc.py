"""The :class:`Arc` value type.

An ``Arc`` is an angle in (-π, π] held in one float64.  The float is not
the angle itself but a packed ``sin``/``cos`` payload (see
:mod:`arcus.bands`), which lets the trigonometric functions be evaluated
without another transcendental call.
"""

from __future__ import annotations

import math
from numbers import Integral, Real

import numpy as np

from . import codec, trig
from .config import get_config

_EPS = float(np.finfo(np.float64).eps)


class Arc:
    """Immutable angle in (-π, π] packed into one double.

    ``Arc(radians)`` reduces any real input modulo 2π.  Use
    :meth:`from_degrees` or :meth:`from_sincos` for the other inputs.
    """

    __slots__ = ("_raw",)

    def __init__(self, radians: float = 0.0) -> None:
        object.__setattr__(self, "_raw", codec.encode_radians(radians))

    @classmethod
    def _wrap(cls, raw: float) -> "Arc":
        arc = cls.__new__(cls)
        object.__setattr__(arc, "_raw", raw)
        return arc

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_degrees(cls, degrees: float) -> "Arc":
        return cls._wrap(codec.encode_degrees(degrees))

    @classmethod
    def from_sincos(cls, s: float, c: float) -> "Arc":
        """Angle of the point ``(c, s)``; raises ``ValueError`` for (0, 0)."""
        return cls._wrap(codec.encode_sincos(s, c))

    @classmethod
    def from_raw(cls, raw: float) -> "Arc":
        """Wrap an already packed value, e.g. one read back from storage."""
        return cls._wrap(float(raw))

    @staticmethod
    def zero() -> "Arc":
        return ZERO

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def raw(self) -> float:
        """The packed float64, for serialization and inspection only."""
        return self._raw

    @property
    def bits(self) -> int:
        return int(np.float64(self._raw).view(np.uint64))

    @property
    def radians(self) -> float:
        return codec.decode(self._raw)

    @property
    def degrees(self) -> float:
        return codec.decode_degrees(self._raw)

    def __float__(self) -> float:
        return self.radians

    def sincos(self) -> tuple[float, float]:
        return trig.sincos(self._raw)

    def sin(self) -> float:
        return trig.sin(self._raw)

    def cos(self) -> float:
        return trig.cos(self._raw)

    def tan(self) -> float:
        return trig.tan(self._raw)

    def cot(self) -> float:
        return trig.cot(self._raw)

    def sec(self) -> float:
        return trig.sec(self._raw)

    def csc(self) -> float:
        return trig.csc(self._raw)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: "Arc") -> "Arc":
        if not isinstance(other, Arc):
            return NotImplemented
        return Arc(self.radians + other.radians)

    def __sub__(self, other: "Arc") -> "Arc":
        if not isinstance(other, Arc):
            return NotImplemented
        return Arc(self.radians - other.radians)

    def __neg__(self) -> "Arc":
        s, c = self.sincos()
        return Arc._wrap(codec.pack(-s, c))

    def __pos__(self) -> "Arc":
        return self

    def _scale(self, factor: float) -> "Arc":
        return Arc(self.radians * factor)

    def __mul__(self, factor: Real) -> "Arc":
        if isinstance(factor, Arc) or not isinstance(factor, Real):
            return NotImplemented
        if isinstance(factor, Integral):
            f = int(factor)
            if f == 0:
                return ZERO
            if f == 1:
                return self
            if f == -1:
                return -self
            if f == 2:
                return self + self
            if f == -2:
                return -(self + self)
        return self._scale(float(factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: Real) -> "Arc":
        if isinstance(divisor, Arc) or not isinstance(divisor, Real):
            return NotImplemented
        with np.errstate(divide="ignore"):
            factor = float(np.divide(1.0, float(divisor)))
        return self._scale(factor)

    # ------------------------------------------------------------------
    # Comparison and hashing support
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arc):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def isclose(self, other: "Arc", *, abs_tol: float | None = None) -> bool:
        return isclose(self, other, abs_tol=abs_tol)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        config = get_config()
        digits = config.get("display", "digits")
        if config.get("display", "unit") == "deg":
            value, suffix = self.degrees, "°"
        else:
            value, suffix = self.radians, "r"
        if digits is None:
            return f"{value!r}{suffix}"
        return f"{value:.{int(digits)}f}{suffix}"

    def __repr__(self) -> str:
        return f"Arc({self.radians!r}r)"

    def __reduce__(self):
        return (Arc.from_raw, (self._raw,))


ZERO = Arc._wrap(0.0)


def isclose(a: Arc, b: Arc, *, abs_tol: float | None = None) -> bool:
    """Angular closeness of *a* and *b*, treating -π and π as neighbours.

    Without *abs_tol* the tolerance is ``isclose.eps_multiple`` machine
    epsilons from the active configuration.
    """
    if abs_tol is None:
        abs_tol = float(get_config().get("isclose", "eps_multiple", 10)) * _EPS
    diff = math.remainder(a.radians - b.radians, codec.TWO_PI)
    return abs(diff) <= abs_tol


__all__ = ["Arc", "ZERO", "isclose"]
