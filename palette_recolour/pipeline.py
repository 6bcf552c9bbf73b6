# palette_recolour/pipeline.py
from __future__ import annotations

"""
One configurable recolouring run.

  load schemes -> pick scheme (fixed | interactive) -> load image
  -> recolour -> save -> [denoise -> save]

Exports:
  RunConfig
  output_path(src, scheme, suffix="", outdir=None) -> Path
  resolve_schemes_path(explicit) -> Path
  run_pipeline(config, *, catalog=None, read_line=None) -> List[Path]
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

import numpy as np

from .constants import (
    DEFAULT_RADIUS,
    DEFAULT_SCHEME,
    DEFAULT_SCHEMES_PATH,
    DENOISED_SUFFIX,
    SCHEMES_ENV_VAR,
)
from .denoise import denoise
from .errors import ConfigError
from .image_io import load_image_rgba, save_image_rgba
from .palette_store import SchemeCatalog, load
from .recolour import recolour
from .selection import prompt_scheme
from .utils import (
    colour_usage_report,
    debug_log,
    default_workers,
    format_seconds_compact,
    format_total_duration_compact,
    log,
    print_banner,
    print_config_line,
)


@dataclass(frozen=True)
class RunConfig:
    """Everything a single run needs. Built by the CLI or directly."""

    input_path: Path
    scheme: Optional[str] = DEFAULT_SCHEME
    interactive: bool = False
    denoise: bool = False
    radius: int = DEFAULT_RADIUS
    workers: int = 1
    schemes_path: Optional[Path] = None
    outdir: Optional[Path] = None
    debug: bool = False

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ConfigError(f"radius must be >= 0, got {self.radius}")
        if self.workers < 1:
            raise ConfigError(f"workers must be >= 1, got {self.workers}")
        if not self.interactive and not self.scheme:
            raise ConfigError("a scheme name is required unless interactive")


def resolve_schemes_path(explicit: Optional[Path]) -> Path:
    """--schemes, then $PALETTE_RECOLOUR_SCHEMES, then the bundled file."""
    if explicit is not None:
        return Path(explicit)
    env = os.environ.get(SCHEMES_ENV_VAR)
    if env:
        return Path(env)
    return DEFAULT_SCHEMES_PATH


def output_path(
    src: Path, scheme: str, suffix: str = "", outdir: Optional[Path] = None
) -> Path:
    """<stem>_<scheme><suffix><ext>, next to src unless outdir is given."""
    src = Path(src)
    parent = Path(outdir) if outdir is not None else src.parent
    return parent / f"{src.stem}_{scheme}{suffix}{src.suffix}"


def _choose_scheme(
    config: RunConfig,
    catalog: SchemeCatalog,
    read_line: Optional[Callable[[], str]],
) -> str:
    if config.interactive:
        return prompt_scheme(catalog.list_names(), read_line=read_line)
    if config.scheme is None:
        raise ConfigError("a scheme name is required unless interactive")
    return config.scheme


def _log_usage(image: np.ndarray, debug: bool, top_k: int = 10) -> None:
    report = colour_usage_report(image)
    shown = report if debug else report[:top_k]
    log("Colours used:")
    for hex_code, count in shown:
        log(f"  {hex_code}: {count:,}")
    if len(shown) < len(report):
        log(f"  ... {len(report) - len(shown)} more")


def run_pipeline(
    config: RunConfig,
    *,
    catalog: Optional[SchemeCatalog] = None,
    read_line: Optional[Callable[[], str]] = None,
) -> List[Path]:
    """
    Run one recolouring job and return the written paths
    (recoloured first, then denoised if enabled).
    """
    t_start = time.perf_counter()
    src = Path(config.input_path)

    if catalog is None:
        catalog = load(resolve_schemes_path(config.schemes_path))
    scheme_name = _choose_scheme(config, catalog, read_line)
    palette = catalog.scheme(scheme_name)

    print_banner(src.name)
    print_config_line(
        "run",
        [
            ("Scheme", scheme_name),
            ("Colours", len(palette)),
            ("Denoise", config.denoise),
            ("Radius", config.radius),
            ("Workers", config.workers),
        ],
        debug=False,
    )

    image = load_image_rgba(src)
    height, width = image.shape[:2]
    t_loaded = time.perf_counter()
    if config.debug:
        debug_log(f"loaded {width}x{height} in {format_seconds_compact(t_loaded - t_start)}")

    recolour(image, palette, workers=config.workers)
    t_mapped = time.perf_counter()
    if config.debug:
        map_secs = t_mapped - t_loaded
        if map_secs > 0:
            rate = (width * height / map_secs) / 1e6
            debug_log(f"recolour {rate:.2f} MPx/s ({format_seconds_compact(map_secs)})")

    written: List[Path] = []
    dst = save_image_rgba(output_path(src, scheme_name, "", config.outdir), image)
    written.append(dst)
    log(f"Wrote {dst.name} | size={width}x{height} | palette_size={len(palette)}")
    _log_usage(image, config.debug)

    if config.denoise:
        t_dn0 = time.perf_counter()
        cleaned = denoise(image, config.radius, workers=config.workers)
        if config.debug:
            debug_log(f"denoise {format_seconds_compact(time.perf_counter() - t_dn0)}")
        dst2 = save_image_rgba(
            output_path(src, scheme_name, DENOISED_SUFFIX, config.outdir), cleaned
        )
        written.append(dst2)
        log(f"Wrote {dst2.name} | radius={config.radius}")

    log(f"Total time {format_total_duration_compact(time.perf_counter() - t_start)}")
    return written


def workers_or_default(requested: Optional[int]) -> int:
    return default_workers() if requested is None else max(1, int(requested))


__all__ = [
    "RunConfig",
    "output_path",
    "resolve_schemes_path",
    "run_pipeline",
    "workers_or_default",
]
