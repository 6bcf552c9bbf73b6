"""
palette_recolour CLI.
Recolour an image to a named colour scheme, optionally followed by a median
denoise pass.

Usage:
  palette-recolour INPUT [--scheme NAME | --interactive] [--schemes FILE]
                   [--outdir DIR] [--denoise] [--radius R] [--workers N]
                   [--list] [--debug]

Output:
  <stem>_<scheme><ext> next to INPUT (or in --outdir). With --denoise a second
  file <stem>_<scheme>_denoised<ext> is written too.

Schemes:
  YAML mapping of scheme name to hex colours. Defaults to the bundled
  schemes.yaml; $PALETTE_RECOLOUR_SCHEMES overrides it.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_RADIUS, DEFAULT_SCHEME
from .errors import RecolourError
from .palette_store import load
from .pipeline import RunConfig, resolve_schemes_path, run_pipeline, workers_or_default
from .utils import enable_line_buffered_stdout, error, log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-recolour",
        description="Recolour an image to the nearest colours of a named scheme.",
    )
    parser.add_argument("src", type=Path, nargs="?", help="Input image")
    pick = parser.add_mutually_exclusive_group()
    pick.add_argument(
        "--scheme",
        default=None,
        help=f"Scheme name (default: {DEFAULT_SCHEME})",
    )
    pick.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Choose the scheme from a numbered list",
    )
    parser.add_argument(
        "--schemes", type=Path, default=None, help="Scheme definition file (YAML)"
    )
    parser.add_argument(
        "--outdir", type=Path, default=None, help="Output directory (optional)"
    )
    parser.add_argument(
        "--denoise", action="store_true", help="Also write a median-filtered copy"
    )
    parser.add_argument(
        "--radius",
        type=int,
        default=DEFAULT_RADIUS,
        help="Median window radius; 1 => 3x3",
    )
    parser.add_argument(
        "--workers", type=int, default=None, help="Worker threads (default: auto)"
    )
    parser.add_argument(
        "--list", action="store_true", help="Print available scheme names and exit"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose timing details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    enable_line_buffered_stdout()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.list:
            catalog = load(resolve_schemes_path(args.schemes))
            for name in catalog.list_names():
                log(name)
            return 0

        if args.src is None:
            parser.error("the following arguments are required: src")

        config = RunConfig(
            input_path=args.src,
            scheme=None if args.interactive else (args.scheme or DEFAULT_SCHEME),
            interactive=args.interactive,
            denoise=args.denoise,
            radius=args.radius,
            workers=workers_or_default(args.workers),
            schemes_path=args.schemes,
            outdir=args.outdir,
            debug=args.debug,
        )
        run_pipeline(config)
    except RecolourError as e:
        error(str(e))
        return 2
    return 0
