# palette_recolour/recolour.py
from __future__ import annotations

"""
Nearest-colour recolouring engine.

Each pixel is mapped to the palette entry with the smallest rounded Euclidean
RGB distance. Entries are visited in palette order and only a strictly
smaller distance replaces the current best, so the first entry reaching the
minimum wins. Alpha is never written.

Rows are split into disjoint bands and processed on a thread pool. Workers
share one read-only palette array and write only their own rows of a staging
buffer; the caller's image is updated once every band has finished, so a
failure in any band leaves it untouched.

Exports:
  recolour(image, palette, *, workers=1) -> RGBAImage
  nearest_colour(rgb, palette) -> RGBTuple
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

import numpy as np

from .colour_metric import distance, distance_to_pixels
from .constants import NO_MATCH_DISTANCE
from .core_types import (
    PaletteArray,
    RGBAImage,
    RGBTuple,
    assert_u8_image_rgba,
    palette_to_array,
)
from .errors import EmptyPaletteError
from .utils import split_rows_into_parts


def nearest_colour(rgb: RGBTuple, palette: Sequence[RGBTuple]) -> RGBTuple:
    """Scalar nearest search with the engine's first-wins tie-break."""
    if len(palette) == 0:
        raise EmptyPaletteError("palette is empty; nothing to map to")
    best: RGBTuple = (0, 0, 0)
    best_dist = NO_MATCH_DISTANCE
    for colour in palette:
        d = distance(rgb, colour)
        if d < best_dist:
            best = (int(colour[0]), int(colour[1]), int(colour[2]))
            best_dist = d
    return best


def _recolour_band(src: RGBAImage, dst: RGBAImage, pal: PaletteArray) -> None:
    """Write nearest palette RGB for every pixel of src into dst[..., :3]."""
    shape = src.shape[:2]
    best_dist = np.full(shape, NO_MATCH_DISTANCE, dtype=np.int32)
    chosen = np.zeros(shape + (3,), dtype=np.uint8)  # placeholder: black

    for j in range(pal.shape[0]):
        d = distance_to_pixels(src, pal[j])
        better = d < best_dist
        best_dist[better] = d[better]
        chosen[better] = pal[j].astype(np.uint8)

    dst[..., :3] = chosen


def recolour(
    image: RGBAImage, palette: Sequence[RGBTuple], *, workers: int = 1
) -> RGBAImage:
    """
    Map every pixel of an RGBA image to its nearest palette colour, in place.

    Args:
      image   : uint8 [H,W,4]; RGB is rewritten, alpha is preserved.
      palette : ordered, non-empty sequence of RGB tuples.
      workers : thread count for row bands (1 = run inline).

    Returns:
      The same array, for chaining.

    Raises:
      EmptyPaletteError if palette has no entries (image unmodified).
    """
    if len(palette) == 0:
        raise EmptyPaletteError("palette is empty; nothing to map to")
    assert_u8_image_rgba(image)

    pal = palette_to_array(palette)
    height = image.shape[0]
    if height == 0 or image.shape[1] == 0:
        return image

    staging = image.copy()
    bands = split_rows_into_parts(height, workers)

    if workers <= 1 or len(bands) == 1:
        for y0, y1 in bands:
            _recolour_band(image[y0:y1], staging[y0:y1], pal)
    else:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [
                ex.submit(_recolour_band, image[y0:y1], staging[y0:y1], pal)
                for y0, y1 in bands
            ]
            for fu in futures:
                fu.result()

    image[..., :3] = staging[..., :3]
    return image


__all__ = ["recolour", "nearest_colour"]
