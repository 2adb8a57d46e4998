# -*- coding: utf-8 -*-
# Earclip/geometry/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/2/2026 (Updated: 10/9/2026)

Modules:
--------
- ops:      Leaf vector helpers (subtract, cross, cyclic_get) shared by everything else.

- topology: Loop-level predicates on implicitly closed polygons:
              * Shoelace area and winding order with the package's CW/CCW convention,
              * Simple-polygon (self-intersection) test,
              * Colinear-edge detection.

Usage:
    from geometry.topology import compute_polygon_area, is_simple_polygon
"""

__all__ = ["ops", "topology"]
