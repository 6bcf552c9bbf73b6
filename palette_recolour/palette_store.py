# palette_recolour/palette_store.py
from __future__ import annotations

"""
Scheme definitions and the read-only catalog built from them.

A scheme file is a YAML mapping of scheme name to an ordered list of hex
colours:

  gruvbox:
    - "#282828"
    - "#cc241d"
  mono: ["#000000", "#ffffff"]

Exports:
  SchemeCatalog            : immutable name -> Palette mapping
  parse_catalog(text, origin="<string>") -> SchemeCatalog
  load(source) -> SchemeCatalog
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Union

import yaml

from .core_types import Palette, hex_to_rgb
from .errors import InvalidColorError, NotFoundError, ParseError, UnknownSchemeError
from .utils import warn


class SchemeCatalog:
    """Named palettes, loaded once and read-only afterwards."""

    __slots__ = ("_schemes", "origin")

    def __init__(self, schemes: Mapping[str, Palette], origin: str = "<memory>"):
        frozen: Dict[str, Palette] = {name: tuple(pal) for name, pal in schemes.items()}
        self._schemes = MappingProxyType(frozen)
        self.origin = origin

    @classmethod
    def from_file(cls, source: Union[str, Path]) -> "SchemeCatalog":
        return load(source)

    @property
    def schemes(self) -> Mapping[str, Palette]:
        return self._schemes

    def scheme(self, name: str) -> Palette:
        """Exact-match lookup; no case folding."""
        try:
            return self._schemes[name]
        except KeyError:
            raise UnknownSchemeError(
                f"unknown scheme {name!r} in {self.origin} "
                f"(available: {', '.join(self.list_names()) or 'none'})"
            ) from None

    def list_names(self) -> List[str]:
        """Scheme names, sorted ascending."""
        return sorted(self._schemes)

    def __contains__(self, name: object) -> bool:
        return name in self._schemes

    def __len__(self) -> int:
        return len(self._schemes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_names())

    def __repr__(self) -> str:
        return f"SchemeCatalog(origin={self.origin!r}, schemes={self.list_names()!r})"


def _parse_scheme(name: str, entries: object, origin: str) -> Palette:
    if not isinstance(entries, list):
        raise ParseError(
            f"{origin}: scheme {name!r} must be a list of hex colours, "
            f"got {type(entries).__name__}"
        )
    colours = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise ParseError(
                f"{origin}: scheme {name!r} entry {idx} must be a string, got {entry!r}"
            )
        try:
            colours.append(hex_to_rgb(entry))
        except InvalidColorError as e:
            raise InvalidColorError(f"{origin}: scheme {name!r} entry {idx}: {e}") from e
    return tuple(colours)


def parse_catalog(text: str, origin: str = "<string>") -> SchemeCatalog:
    """
    Parse a YAML scheme document. One bad entry fails the whole catalog.

    Every scalar is read as a string (no YAML 1.1 int/bool resolution), so
    unquoted entries like 000000 or names like `on` stay as written.

    Raises ParseError for malformed YAML or structure and InvalidColorError
    for a bad hex string.
    """
    try:
        doc = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ParseError(f"{origin}: malformed scheme document: {e}") from e

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise ParseError(
            f"{origin}: expected a mapping of scheme name to colours, "
            f"got {type(doc).__name__}"
        )

    schemes: Dict[str, Palette] = {}
    for name, entries in doc.items():
        if not isinstance(name, str):
            raise ParseError(f"{origin}: scheme name {name!r} must be a string")
        schemes[name] = _parse_scheme(name, entries, origin)
    if not schemes:
        warn(f"{origin}: no schemes defined")
    return SchemeCatalog(schemes, origin=origin)


def load(source: Union[str, Path]) -> SchemeCatalog:
    """Read and parse a scheme file."""
    path = Path(source)
    if not path.is_file():
        raise NotFoundError(f"scheme file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"{path}: cannot read scheme file: {e}") from e
    return parse_catalog(text, origin=str(path))


__all__ = ["SchemeCatalog", "parse_catalog", "load"]
