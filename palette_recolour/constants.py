# palette_recolour/constants.py
"""
Defaults and tunables used across the project.

- Distance bounds (MAX_DISTANCE, NO_MATCH_DISTANCE)
- Denoise defaults
- Output naming and scheme file defaults
"""
from __future__ import annotations

from pathlib import Path

# =========================
# Colour metric bounds
# =========================

# round(sqrt(3 * 255^2)) = round(441.67); black to white.
MAX_DISTANCE = 442

# Initial best distance for the nearest search. Strictly above every
# reachable distance so any real palette entry always wins.
NO_MATCH_DISTANCE = MAX_DISTANCE + 1

# =========================
# Denoise
# =========================

# radius 1 => 3x3 window
DEFAULT_RADIUS = 1

# =========================
# Schemes / output
# =========================

DEFAULT_SCHEME = "gruvbox"
DEFAULT_SCHEMES_PATH = Path(__file__).resolve().parent / "schemes.yaml"
SCHEMES_ENV_VAR = "PALETTE_RECOLOUR_SCHEMES"

DENOISED_SUFFIX = "_denoised"

# Extensions Pillow cannot store alpha in; saved as RGB.
NO_ALPHA_EXTS = frozenset({".jpg", ".jpeg", ".bmp"})

__all__ = [
    "MAX_DISTANCE",
    "NO_MATCH_DISTANCE",
    "DEFAULT_RADIUS",
    "DEFAULT_SCHEME",
    "DEFAULT_SCHEMES_PATH",
    "SCHEMES_ENV_VAR",
    "DENOISED_SUFFIX",
    "NO_ALPHA_EXTS",
]
