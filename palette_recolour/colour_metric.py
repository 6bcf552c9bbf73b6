# palette_recolour/colour_metric.py
from __future__ import annotations

import math

import numpy as np

from .constants import MAX_DISTANCE
from .core_types import RGBTuple

"""
Euclidean RGB distance, rounded to an integer.

Rounding is half away from zero. The radicand is always an integer, so the
square root never lands exactly on .5 and the rule only matters on paper, but
it is fixed here so the scalar and vector forms agree bit for bit.

Exports:
- distance(a, b) -> int
- distance_to_pixels(pixels, colour) -> int32 array
- MAX_DISTANCE
"""


def _round_half_away(x: float) -> int:
    return int(math.floor(x + 0.5))


def distance(a: RGBTuple, b: RGBTuple) -> int:
    """Rounded Euclidean distance between two RGB triples (0..442)."""
    dr = int(a[0]) - int(b[0])
    dg = int(a[1]) - int(b[1])
    db = int(a[2]) - int(b[2])
    return _round_half_away(math.sqrt(dr * dr + dg * dg + db * db))


def distance_to_pixels(pixels: np.ndarray, colour: np.ndarray) -> np.ndarray:
    """
    Vectorised distance() from every pixel row to one colour.

    pixels: integer array (..., 3) or (..., 4); only the first three channels
    are read. colour: length-3 sequence. Returns int32 with pixels' leading shape.
    """
    diff = pixels[..., :3].astype(np.int32) - np.asarray(colour, dtype=np.int32)[:3]
    sq = np.einsum("...c,...c->...", diff, diff)
    return np.floor(np.sqrt(sq.astype(np.float64)) + 0.5).astype(np.int32)


__all__ = ["MAX_DISTANCE", "distance", "distance_to_pixels"]
