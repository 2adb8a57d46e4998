# -*- coding: utf-8 -*-
# Earclip/geometry/ops/vector.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/2/2026

Purpose
-------
Leaf 2D vector helpers shared by the validators, the point-in-triangle kernel and
the ear-clipping loop.

Main Tasks
----------
    1. `subtract` → component-wise difference of two points.
    2. `cross` → scalar 2D cross product (left turn > 0, right turn < 0, colinear == 0).
    3. `cyclic_get` → wrap-around indexing for closed loops and index lists.

Notes
-----
- Plain floating-point arithmetic; no epsilon anywhere in this module.
"""

from typing import Sequence, TypeVar
import numpy as np

T = TypeVar("T")


def subtract(a, b) -> np.ndarray:
    """Return a - b as a float (2,) array."""
    return np.asarray(a, dtype=float) - np.asarray(b, dtype=float)


def cross(a, b) -> float:
    """
    2D cross product a.x*b.y - a.y*b.x.

    The sign carries the orientation of b relative to a and is used as-is by every
    caller; zero means the vectors are exactly colinear.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def cyclic_get(sequence: Sequence[T], index: int) -> T:
    """
    Return `sequence[index]` with the index wrapped modulo the length.

    Negative indices wrap to the end and indices >= len wrap to the start, so
    `cyclic_get(s, -1)` is the last element and `cyclic_get(s, len(s))` the first.

    Raises
    ------
    IndexError
        If `sequence` is empty.
    """
    n = len(sequence)
    if n == 0:
        raise IndexError("cyclic_get on an empty sequence")
    return sequence[index % n]
