# palette_recolour/core_types.py
from __future__ import annotations

"""
Core type aliases and small colour helpers.
"""

import string
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidColorError

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str
Palette = Tuple[RGBTuple, ...]

RGBAImage = NDArray[np.uint8]  # (H, W, 4)
PaletteArray = NDArray[np.int32]  # (P, 3)

_HEX_DIGITS = frozenset(string.hexdigits)


# Helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """
    Parse '#rrggbb' or 'rrggbb' (case-insensitive) into an RGB tuple.

    Raises InvalidColorError unless exactly six hex digits remain after
    stripping whitespace and one optional leading '#'.
    """
    if not isinstance(hex_str, str):
        raise InvalidColorError(f"colour must be a hex string, got {hex_str!r}")
    s = hex_str.strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) != 6 or not all(ch in _HEX_DIGITS for ch in s):
        raise InvalidColorError(
            f"invalid colour {hex_str!r}: expected '#RRGGBB' or 'RRGGBB'"
        )
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


def palette_to_array(palette: Sequence[RGBTuple]) -> PaletteArray:
    """Read-only (P,3) int32 view of a palette, shared by engine workers."""
    arr = np.array(palette, dtype=np.int32).reshape(-1, 3)
    arr.setflags(write=False)
    return arr


def assert_u8_image_rgba(image: np.ndarray) -> RGBAImage:
    """Validate a uint8 (H,W,4) image and return it typed as RGBAImage."""
    if (
        not isinstance(image, np.ndarray)
        or image.dtype != np.uint8
        or image.ndim != 3
        or image.shape[-1] != 4
    ):
        raise TypeError("expected uint8 (H,W,4) RGBA image")
    return image


__all__ = [
    "RGBTuple",
    "HexStr",
    "Palette",
    "RGBAImage",
    "PaletteArray",
    "rgb_to_hex",
    "hex_to_rgb",
    "palette_to_array",
    "assert_u8_image_rgba",
]
