# -*- coding: utf-8 -*-
# Earclip/mesh/checks/kernels.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/4/2026

Purpose:
--------
Lightweight 2D triangle kernels shared by the ear-clipping loop and the
post-triangulation checks. Numpy-only routines operating in the XY plane.

Main Tasks:
-----------
   - Point-in-triangle predicate (boundary inclusive), scalar and vectorized.
   - Triangle areas and internal angles.
   - Interior-overlap test for triangle pairs (separating axis).

Notes:
------
   - `is_point_in_triangle` / `points_in_triangle` use exact comparisons; they decide
     ear validity and must not drift with a tolerance.
   - The quality kernels (angles, overlap) take explicit `eps` values.
"""

from typing import Tuple
import numpy as np
from geometry.ops.vector import cross, subtract


# ---------------------------
# Basic vector helpers
# ---------------------------
def _xy(a: np.ndarray) -> np.ndarray:
    """
    Return `a` as a float array with a trailing axis of length 2.

    Raises
    ------
    ValueError
        If `a` is not shaped (..., 2); Z or higher coordinates are not accepted.
    """
    a = np.asarray(a, dtype=float)
    if a.ndim == 0 or a.shape[-1] != 2:
        raise ValueError(f"Expected (..., 2) array of XY coordinates, got shape {a.shape}.")
    return a


# ---------------------------
# Point tests
# ---------------------------
def is_point_in_triangle(p, a, b, c) -> bool:
    """
    True iff `p` lies inside or on the boundary of triangle (a, b, c).

    Each edge vector is crossed with the vector from the edge start to `p`; the point
    is accepted when none of the three crosses is strictly positive. With the
    clockwise vertex order used by the ear-clipping loop that is the closed triangle.
    """
    ab = subtract(b, a)
    bc = subtract(c, b)
    ca = subtract(a, c)

    c1 = cross(ab, subtract(p, a))
    c2 = cross(bc, subtract(p, b))
    c3 = cross(ca, subtract(p, c))

    return not (c1 > 0 or c2 > 0 or c3 > 0)


def points_in_triangle(points: np.ndarray, a, b, c) -> np.ndarray:
    """
    Vectorized `is_point_in_triangle` over an (M, 2) array; returns an (M,) bool mask.
    """
    P = _xy(points).reshape(-1, 2)
    A = _xy(a); B = _xy(b); C = _xy(c)
    ab = B - A; bc = C - B; ca = A - C

    c1 = ab[0] * (P[:, 1] - A[1]) - ab[1] * (P[:, 0] - A[0])
    c2 = bc[0] * (P[:, 1] - B[1]) - bc[1] * (P[:, 0] - B[0])
    c3 = ca[0] * (P[:, 1] - C[1]) - ca[1] * (P[:, 0] - C[0])

    return ~((c1 > 0) | (c2 > 0) | (c3 > 0))


# ---------------------------
# Areas & angles
# ---------------------------
def signed_area_tri(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    """
    Signed area of triangle ABC in XY (CCW > 0).
    """
    a = _xy(a); b = _xy(b); c = _xy(c)
    return 0.5 * float((b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0]))


def triangle_area(a, b, c) -> float:
    """Unsigned area of triangle ABC."""
    return abs(signed_area_tri(a, b, c))


def triangle_areas(tris: np.ndarray) -> np.ndarray:
    """
    Unsigned areas of a stack of triangles shaped (T, 3, 2); returns (T,).
    """
    T = _xy(tris).reshape(-1, 3, 2)
    a, b, c = T[:, 0], T[:, 1], T[:, 2]
    return 0.5 * np.abs((b[:, 0]-a[:, 0])*(c[:, 1]-a[:, 1]) - (b[:, 1]-a[:, 1])*(c[:, 0]-a[:, 0]))


def angles_tri(a: np.ndarray, b: np.ndarray, c: np.ndarray, deg: bool = True) -> Tuple[float, float, float]:
    """
    Internal angles at (A,B,C) of triangle ABC.
    Uses law of cosines with safe clamping.
    """
    A = _xy(a); B = _xy(b); C = _xy(c)

    la = np.linalg.norm(C - B)  # opposite A
    lb = np.linalg.norm(A - C)  # opposite B
    lc = np.linalg.norm(B - A)  # opposite C

    # avoid division by zero with tiny epsilon
    eps = 1e-30
    cosA = (lb*lb + lc*lc - la*la) / max(2.0*lb*lc, eps)
    cosB = (lc*lc + la*la - lb*lb) / max(2.0*lc*la, eps)
    cosC = (la*la + lb*lb - lc*lc) / max(2.0*la*lb, eps)

    angs = np.arccos(np.clip([cosA, cosB, cosC], -1.0, 1.0))
    if deg:
        angs = np.degrees(angs)
    return (float(angs[0]), float(angs[1]), float(angs[2]))


# ---------------------------
# Overlap
# ---------------------------
def triangles_overlap(t1: np.ndarray, t2: np.ndarray, eps: float = 1e-12) -> bool:
    """
    True if the interiors of two triangles overlap by more than `eps`.

    Separating-axis test over the six edge normals. Triangles that only share an
    edge or a vertex have touching projections and are NOT reported.
    """
    T1 = _xy(t1).reshape(3, 2)
    T2 = _xy(t2).reshape(3, 2)
    for T in (T1, T2):
        for k in range(3):
            e = T[(k + 1) % 3] - T[k]
            n = np.array([-e[1], e[0]])
            scale = float(np.linalg.norm(n))
            if scale == 0.0:
                continue
            n = n / scale
            p1 = T1 @ n
            p2 = T2 @ n
            if min(p1.max(), p2.max()) - max(p1.min(), p2.min()) <= eps:
                return False
    return True
