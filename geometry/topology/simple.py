# -*- coding: utf-8 -*-
# Earclip/geometry/topology/simple.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/3/2026

Purpose:
--------
Rejection predicates run before triangulation. None of them repairs geometry; they
only report whether a loop is usable and, for error messages, *where* it is not.

Main Tasks:
-----------
   1. Self-intersection test over all pairs of non-adjacent edges.
   2. Exact (or optionally tolerant) colinear-vertex detection.

Conventions:
------------
   - Edge i joins vertex i-1 to vertex i (edge 0 is the closing edge n-1 → 0).
   - Two edges are "adjacent" when they share an endpoint by vertex index. Duplicate
     coordinates at different indices are distinct vertices.
   - Orientation is the strict test (r.y-p.y)(q.x-p.x) > (q.y-p.y)(r.x-p.x); touching
     and colinear-overlap configurations are therefore not reported as crossings.

Notes:
------
   - O(n^2) edge pairs evaluated with NumPy broadcasting; no spatial index.
"""

from typing import List, Tuple
import numpy as np
from ._validation import as_xy


def _ccw(p: np.ndarray, q: np.ndarray, r: np.ndarray) -> np.ndarray:
    """Strict counter-clockwise test for (p, q, r), broadcast over leading axes."""
    return (r[..., 1] - p[..., 1]) * (q[..., 0] - p[..., 0]) > (q[..., 1] - p[..., 1]) * (r[..., 0] - p[..., 0])


def self_intersections(vertices) -> List[Tuple[int, int]]:
    """
    Return every pair of crossing edges (i, j) with i < j, in lexicographic order.

    Parameters
    ----------
    vertices : array-like
        (N, 2) vertices of an implicitly closed loop.

    Returns
    -------
    list of (int, int)
        Edge index pairs; empty when the boundary does not self-cross.
    """
    P = as_xy(vertices)
    n = P.shape[0]
    if n < 4:
        # Every pair of edges in a triangle shares a vertex.
        return []

    A = np.roll(P, 1, axis=0)  # edge start (vertex i-1)
    B = P                      # edge end   (vertex i)

    a, b = A[:, None, :], B[:, None, :]
    c, d = A[None, :, :], B[None, :, :]
    crossing = (_ccw(a, c, d) != _ccw(b, c, d)) & (_ccw(a, b, c) != _ccw(a, b, d))

    idx = np.arange(n)
    I, J = idx[:, None], idx[None, :]
    # i < j, not consecutive, and not the (first, last) pair around the closing vertex
    non_adjacent = (J > I + 1) & ~((I == 0) & (J == n - 1))

    return [(int(i), int(j)) for i, j in np.argwhere(crossing & non_adjacent)]


def is_simple_polygon(vertices) -> bool:
    """True iff no two non-adjacent edges of the loop intersect."""
    return not self_intersections(vertices)


def colinear_vertices(vertices, tol: float = 0.0) -> np.ndarray:
    """
    Indices of vertices whose two incident edges are colinear.

    Parameters
    ----------
    vertices : array-like
        (N, 2) vertices of an implicitly closed loop.
    tol : float
        0.0 (default) compares cross(pred - v, succ - v) to zero exactly. A positive
        value flags |cross| <= tol instead.

    Returns
    -------
    np.ndarray
        Sorted int array of offending vertex indices (possibly empty).

    Raises
    ------
    ValueError
        If `tol` is negative.
    """
    if tol < 0.0:
        raise ValueError(f"tol must be >= 0 (got {tol}).")
    P = as_xy(vertices)
    if P.shape[0] == 0:
        return np.empty(0, dtype=int)

    u = np.roll(P, 1, axis=0) - P   # v -> predecessor
    w = np.roll(P, -1, axis=0) - P  # v -> successor
    cr = u[:, 0] * w[:, 1] - u[:, 1] * w[:, 0]
    if tol == 0.0:
        mask = cr == 0.0
    else:
        mask = np.abs(cr) <= tol
    return np.flatnonzero(mask)


def contains_colinear_edges(vertices, tol: float = 0.0) -> bool:
    """True iff some vertex has exactly colinear incident edges (see `colinear_vertices`)."""
    return bool(colinear_vertices(vertices, tol=tol).size)
