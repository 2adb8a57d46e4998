# -*- coding: utf-8 -*-
# Earclip/geometry/topology/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/3/2026

Topology Subfolder:
-------------------
Validity and orientation checks for implicitly closed 2D loops, run before a loop is
handed to the triangulator.

Modules:
--------
- loop:        Shoelace area, winding order (CW/CCW/INVALID) and clockwise
               canonicalization.

- simple:      Self-intersection test over non-adjacent edge pairs and colinear
               vertex detection (exact by default, optional tolerance).

- _validation: Input coercion to a defensive (N, 2) float copy.
"""

from .loop import WindingOrder, compute_polygon_area, winding_order, ensure_clockwise
from .simple import (
    self_intersections, is_simple_polygon,
    colinear_vertices, contains_colinear_edges,
)

__all__ = [
    "WindingOrder", "compute_polygon_area", "winding_order", "ensure_clockwise",
    "self_intersections", "is_simple_polygon",
    "colinear_vertices", "contains_colinear_edges",
]
