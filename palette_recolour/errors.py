# palette_recolour/errors.py
"""
Error taxonomy.

Every failure the tool reports to the user derives from RecolourError so the
CLI can catch one type and print a single readable line.
"""

from __future__ import annotations


class RecolourError(Exception):
    """Base class for all user-facing recolouring failures."""


class NotFoundError(RecolourError):
    """A scheme file (or other backing resource) does not exist."""


class ParseError(RecolourError):
    """A scheme document is malformed."""


class InvalidColorError(RecolourError):
    """A colour entry is not a 6-digit hex string."""


class UnknownSchemeError(RecolourError, KeyError):
    """Requested scheme name is not in the catalog."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class EmptyPaletteError(RecolourError):
    """A zero-length palette was handed to the engine."""


class ConfigError(RecolourError, ValueError):
    """A run option is out of range or inconsistent."""


class InvalidSelectionError(RecolourError):
    """Interactive menu input was not a valid 1-based index."""


class ImageLoadError(RecolourError):
    """Image could not be opened or decoded."""


class ImageSaveError(RecolourError):
    """Image could not be encoded or written."""


__all__ = [
    "RecolourError",
    "NotFoundError",
    "ParseError",
    "InvalidColorError",
    "UnknownSchemeError",
    "EmptyPaletteError",
    "ConfigError",
    "InvalidSelectionError",
    "ImageLoadError",
    "ImageSaveError",
]
