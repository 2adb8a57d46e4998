# -*- coding: utf-8 -*-
# Earclip/mesh/checks/helpers.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/7/2026

Purpose:
--------
Provide the shared data model (`TriangulationView`) and one-time precomputations
(`precompute_cache`) used by all triangulation checks.

Main Tasks:
-----------
- TriangulationView: immutable pairing of the input polygon and the produced triangles.
- precompute_cache: geometry reused across rules:
    * areas:      (T,) unsigned triangle areas.
    * bboxes:     (T,4) AABBs (x0, y0, x1, y1) per triangle.
    * min_angles: (T,) smallest interior angle per triangle, in degrees.

Notes:
------
- The view is read-only; checks should not mutate it.
"""


from dataclasses import dataclass
from typing import Any, Dict
import numpy as np
from geometry.topology._validation import as_xy
from geometry.topology.loop import compute_polygon_area
from .kernels import triangle_areas, angles_tri


# -------------------------
# Triangulation view
# -------------------------
@dataclass(frozen=True)
class TriangulationView:
    polygon: np.ndarray     # (N,2)
    triangles: np.ndarray   # (T,3,2)
    polygon_area: float


def build_view(vertices, triangles) -> TriangulationView:
    """
    Copy the polygon and triangles into an immutable view.

    `triangles` may be coordinates shaped (T,3,2) or indices shaped (T,3) into `vertices`.
    """
    P = as_xy(vertices)
    T = np.asarray(triangles)
    if T.ndim == 2 and T.shape[1] == 3 and np.issubdtype(T.dtype, np.integer):
        T = P[T]
    T = np.array(T, dtype=float, copy=True).reshape(-1, 3, 2)
    area, _ = compute_polygon_area(P)
    return TriangulationView(polygon=P, triangles=T, polygon_area=float(area))


# -------------------------
# Precomputations (cache)
# -------------------------
def precompute_cache(view: TriangulationView, th: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build per-triangle arrays shared by the rules.
    """
    T = view.triangles
    if len(T):
        bboxes = np.concatenate([T.min(axis=1), T.max(axis=1)], axis=1)
        min_angles = np.array([min(angles_tri(t[0], t[1], t[2])) for t in T], dtype=float)
    else:
        bboxes = np.zeros((0, 4), dtype=float)
        min_angles = np.zeros(0, dtype=float)
    return {
        "areas": triangle_areas(T),
        "bboxes": bboxes,
        "min_angles": min_angles,
    }
