# palette_recolour/selection.py
from __future__ import annotations

"""
Interactive scheme picker.

Prints the sorted scheme names with 1-based indices and reads one line from
stdin. Anything but a valid index raises InvalidSelectionError; there is no
silent default.
"""

import sys
from typing import Callable, Optional, Sequence, TextIO

from .errors import InvalidSelectionError


def format_menu(names: Sequence[str]) -> str:
    width = len(str(len(names)))
    return "\n".join(f"  {i:>{width}}) {name}" for i, name in enumerate(names, start=1))


def parse_selection(raw: str, names: Sequence[str]) -> str:
    """Resolve a typed 1-based index to a scheme name."""
    text = raw.strip()
    try:
        idx = int(text)
    except ValueError:
        raise InvalidSelectionError(f"not a number: {text!r}") from None
    if not 1 <= idx <= len(names):
        raise InvalidSelectionError(
            f"selection {idx} out of range (choose 1-{len(names)})"
        )
    return names[idx - 1]


def prompt_scheme(
    names: Sequence[str],
    *,
    read_line: Optional[Callable[[], str]] = None,
    out: Optional[TextIO] = None,
) -> str:
    """Show the menu, read one line, return the chosen scheme name."""
    if not names:
        raise InvalidSelectionError("no schemes to choose from")
    out = out if out is not None else sys.stdout
    read_line = read_line if read_line is not None else sys.stdin.readline

    print("Available colour schemes:", file=out)
    print(format_menu(names), file=out)
    print(f"Select a scheme [1-{len(names)}]: ", end="", file=out, flush=True)

    raw = read_line()
    if not raw:
        raise InvalidSelectionError("no selection given (end of input)")
    return parse_selection(raw, names)


__all__ = ["format_menu", "parse_selection", "prompt_scheme"]
