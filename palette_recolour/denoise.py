# palette_recolour/denoise.py
from __future__ import annotations

"""
Median-filter cleanup for hard-quantised images.

Each of R, G, B and A is filtered on its own with a (2r+1)x(2r+1) window.
Borders clamp to the nearest edge pixel. Input is read-only; the result is
always a new buffer.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
from scipy.ndimage import median_filter

from .constants import DEFAULT_RADIUS
from .core_types import RGBAImage, assert_u8_image_rgba
from .errors import ConfigError

EDGE_MODE = "nearest"  # clamp-to-edge


def _median_channel(src: RGBAImage, dst: RGBAImage, channel: int, size: int) -> None:
    dst[..., channel] = median_filter(src[..., channel], size=size, mode=EDGE_MODE)


def denoise(
    image: RGBAImage, radius: int = DEFAULT_RADIUS, *, workers: int = 1
) -> RGBAImage:
    """Per-channel median filter; returns a new uint8 [H,W,4] array."""
    assert_u8_image_rgba(image)
    if radius < 0:
        raise ConfigError(f"radius must be >= 0, got {radius}")

    out = np.empty_like(image)
    if radius == 0 or image.size == 0:
        out[...] = image
        return out

    size = 2 * int(radius) + 1
    channels = range(image.shape[-1])
    if workers <= 1:
        for c in channels:
            _median_channel(image, out, c, size)
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(channels))) as ex:
            futures = [ex.submit(_median_channel, image, out, c, size) for c in channels]
            for fu in futures:
                fu.result()
    return out


__all__ = ["EDGE_MODE", "denoise"]
