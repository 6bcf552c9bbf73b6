# palette_recolour/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import NO_ALPHA_EXTS
from .core_types import RGBAImage, assert_u8_image_rgba
from .errors import ImageLoadError, ImageSaveError

"""
Image I/O helpers (RGBA, 8 bits per channel).
"""


def load_image_rgba(path: Union[str, Path]) -> RGBAImage:
    """Open any Pillow-readable image as a uint8 (H,W,4) array."""
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"image not found: {path}")
    try:
        with Image.open(path) as im0:
            im = ImageOps.exif_transpose(im0).convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageLoadError(f"cannot decode image {path}: {e}") from e
    return np.array(im, dtype=np.uint8)


def save_image_rgba(path: Union[str, Path], image: RGBAImage) -> Path:
    """
    Write an RGBA array. Formats without alpha (JPEG, BMP) get RGB only.
    The format is chosen from the file extension.
    """
    path = Path(path)
    assert_u8_image_rgba(image)
    im = Image.fromarray(np.ascontiguousarray(image))
    if path.suffix.lower() in NO_ALPHA_EXTS:
        im = im.convert("RGB")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        im.save(path)
    except (OSError, ValueError, KeyError) as e:
        raise ImageSaveError(f"cannot save image {path}: {e}") from e
    return path


__all__ = ["load_image_rgba", "save_image_rgba"]
