"""Angles packed into a single float64.

An :class:`Arc` represents a point on the unit circle, or an angle in
(-π, π].  Of ``(sin(α), cos(α))`` only the component with the smaller
magnitude is stored; the quadrant is encoded by multiplying it with a power
of two.  For ``α`` in [-π/4, π/4] the stored value is ``sin(α)`` unchanged.
"""

from .arc import Arc, ZERO, isclose
from .bands import BANDS, Bands
from .config import ArcusConfig, get_config, reload_config
from .stream import bits, from_bytes, read_arc, to_bytes, write_arc

__all__ = [
    "Arc",
    "ZERO",
    "isclose",
    "Bands",
    "BANDS",
    "ArcusConfig",
    "get_config",
    "reload_config",
    "bits",
    "to_bytes",
    "from_bytes",
    "read_arc",
    "write_arc",
]
