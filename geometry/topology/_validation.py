# -*- coding: utf-8 -*-
# Earclip/geometry/topology/_validation.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/2/2026

Purpose:
--------
Input coercion shared by the topology predicates and the triangulator. Every public
entry point runs caller data through `as_xy` so that it works on its own float copy
and never mutates the caller's sequence.
"""

from typing import Optional
import numpy as np


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def as_xy(vertices, check_finite: bool = False) -> np.ndarray:
    """
    Return a fresh (N, 2) float64 copy of `vertices`.

    Accepts lists of pairs, tuples or arrays. An empty input becomes a (0, 2) array so
    that callers can report "too few vertices" instead of a shape error.
    """
    if vertices is None:
        raise ValueError("No geometry provided (vertices is None).")
    pts = np.array(vertices, dtype=float, copy=True)
    if pts.size == 0:
        return pts.reshape(0, 2)
    _assert_xy(pts, check_finite=check_finite)
    return pts
