"""Raw 8-byte storage of packed angles.

The packed float64 is written as-is in native byte order.  There is no
header, version or validation: reading back any 8 bytes yields an ``Arc``.
"""
from __future__ import annotations

import logging
from typing import BinaryIO

import numpy as np

from .arc import Arc

_logger = logging.getLogger(__name__)

ARC_SIZE = np.dtype(np.float64).itemsize


def to_bytes(arc: Arc) -> bytes:
    return np.float64(arc.raw).tobytes()


def from_bytes(data: bytes) -> Arc:
    if len(data) != ARC_SIZE:
        raise ValueError(f"expected {ARC_SIZE} bytes, got {len(data)}")
    return Arc.from_raw(np.frombuffer(data, dtype=np.float64)[0])


def write_arc(stream: BinaryIO, arc: Arc) -> int:
    """Write *arc* to *stream* and return the number of bytes written."""
    written = stream.write(to_bytes(arc))
    _logger.debug("Wrote %s as %d raw bytes", arc, written)
    return written


def read_arc(stream: BinaryIO) -> Arc:
    """Read exactly one packed angle from *stream*."""
    data = stream.read(ARC_SIZE)
    if len(data) < ARC_SIZE:
        raise EOFError(f"needed {ARC_SIZE} bytes for an Arc, got {len(data)}")
    return from_bytes(data)


def bits(arc: Arc) -> str:
    """The 64-bit pattern of *arc* as a string of ``0``/``1``."""
    return format(arc.bits, "064b")


__all__ = ["ARC_SIZE", "to_bytes", "from_bytes", "write_arc", "read_arc", "bits"]
