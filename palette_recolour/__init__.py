# palette_recolour/__init__.py
"""
palette_recolour package.

Purpose:
  Recolour images to a named colour scheme by nearest RGB match, with an
  optional median denoise pass. See palette_recolour.cli for the CLI.

Public API:
  SchemeCatalog, load, parse_catalog : scheme definitions (palette_store)
  distance                           : rounded Euclidean RGB distance
  recolour, nearest_colour           : nearest-colour engine
  denoise                            : per-channel median filter
  load_image_rgba, save_image_rgba   : Pillow I/O
  RunConfig, run_pipeline            : one configurable run
  errors                             : RecolourError and subclasses

Quick start:
  from palette_recolour import load, recolour, load_image_rgba, save_image_rgba
  catalog = load("schemes.yaml")
  img = recolour(load_image_rgba("in.png"), catalog.scheme("gruvbox"))
  save_image_rgba("out.png", img)
"""

__version__ = "0.1.0"

from . import errors
from .colour_metric import distance
from .denoise import denoise
from .image_io import load_image_rgba, save_image_rgba
from .palette_store import SchemeCatalog, load, parse_catalog
from .pipeline import RunConfig, output_path, run_pipeline
from .recolour import nearest_colour, recolour

__all__ = [
    "__version__",
    "errors",
    "distance",
    "denoise",
    "load_image_rgba",
    "save_image_rgba",
    "SchemeCatalog",
    "load",
    "parse_catalog",
    "RunConfig",
    "output_path",
    "run_pipeline",
    "nearest_colour",
    "recolour",
]
