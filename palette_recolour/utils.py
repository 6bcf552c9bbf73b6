# palette_recolour/utils.py
from __future__ import annotations

"""
Shared utilities for palette_recolour.

Includes worker sizing, row partitioning, a colour usage report, duration
formatting, and tidy print-based logging.
"""

import os
from typing import Any, Iterable, List, Tuple

import numpy as np

from .core_types import RGBAImage, rgb_to_hex


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_total_duration_compact(seconds: float) -> str:
    """Compact total duration: 'Mm Ss', 'Ss.s', or 'ms'."""
    if seconds >= 60.0:
        minutes = int(seconds // 60)
        rem = int(round(seconds - 60 * minutes))
        return f"{minutes}m {rem}s"
    if seconds >= 1.0:
        return f"{seconds:.1f}s"
    return f"{seconds * 1000.0:.1f}ms"


# Parallel helpers


def default_workers() -> int:
    """Leave a few cores free for the system; returns a sensible worker count."""
    n = os.cpu_count() or 4
    reserve = 1 if n <= 6 else 2 if n <= 12 else 3 if n <= 18 else 4
    return max(1, n - reserve)


def split_rows_into_parts(height: int, parts: int) -> List[Tuple[int, int]]:
    """Partition range [0, height) into ~parts contiguous [start, end) row spans."""
    parts = max(1, int(parts))
    step = max(1, (height + parts - 1) // parts)
    return [(start, min(start + step, height)) for start in range(0, height, step)]


# Reports


def colour_usage_report(image: RGBAImage) -> List[Tuple[str, int]]:
    """
    Count pixels per RGB colour over the whole image.

    Returns a list of (hex, count) sorted by count descending, then hex.
    """
    flat = image[..., :3].reshape(-1, 3)
    if flat.shape[0] == 0:
        return []
    uniques, counts = np.unique(flat, axis=0, return_counts=True)
    report = [
        (rgb_to_hex((int(r), int(g), int(b))), int(c))
        for (r, g, b), c in zip(uniques.tolist(), counts.tolist())
    ]
    report.sort(key=lambda item: (-item[1], item[0]))
    return report


# Pretty logging


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, bool):
        return format_bool_on_off(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """Format (name, value) pairs as 'Name: value' blocks separated by sep."""
    return sep.join(f"{name}{eq}{format_number_compact(value)}" for name, value in pairs)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [run] Scheme: gruvbox  Denoise: on  Radius: 1  Workers: 6
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def enable_line_buffered_stdout() -> None:
    """
    Enable line-buffered stdout when supported.
    Keeps log lines in order when output is piped.
    """
    import sys

    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    import sys

    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_total_duration_compact",
    "default_workers",
    "split_rows_into_parts",
    "colour_usage_report",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "print_config_line",
    "enable_line_buffered_stdout",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
