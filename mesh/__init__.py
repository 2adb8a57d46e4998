# -*- coding: utf-8 -*-
# Earclip/mesh/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/6/2026 (Updated: 10/9/2026)

Modules:
--------
- api:    triangulate / triangulate_indices with config merge over DEFAULTS.
- core:   ear-clipping engine (validation + clipping loop).
- checks: post-triangulation QA rules (count, coverage, overlap, quality).
- errors: typed rejection errors raised by triangulate.
- tools:  config helpers.
"""

from .api import triangulate, triangulate_indices
from .errors import (
    TriangulationError, InsufficientVerticesError, NonSimplePolygonError,
    ColinearEdgeError, DegenerateWindingError, EarClippingStalledError,
)

__all__ = [
    "api", "core", "checks", "errors", "tools",
    "triangulate", "triangulate_indices",
    "TriangulationError", "InsufficientVerticesError", "NonSimplePolygonError",
    "ColinearEdgeError", "DegenerateWindingError", "EarClippingStalledError",
]
