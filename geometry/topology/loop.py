# -*- coding: utf-8 -*-
# Earclip/geometry/topology/loop.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/3/2026

Purpose:
--------
This module owns *orientation-level* concerns of an implicitly closed loop:
   - Shoelace area and winding order (CW/CCW/INVALID),
   - Canonical clockwise ordering for the ear-clipping loop.

Conventions:
------------
   - Loops are (N, 2) arrays WITHOUT a repeated closing vertex; the last vertex
     connects back to the first.
   - The shoelace sum used here is  sum (prev.x + cur.x) * (prev.y - cur.y).
     A POSITIVE sum is reported as CLOCKWISE and a negative one as COUNTER_CLOCKWISE.
     The ear test in `mesh.core.earclip` is written against this mapping, so the
     two must change together or not at all.
   - Zero area is INVALID; there is no tolerance gate.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Functions never mutate their input; results are new arrays.
"""

from enum import Enum
from functools import reduce
from typing import Tuple
import operator
import numpy as np
from ._validation import as_xy


class WindingOrder(Enum):
    """Winding order of a loop, derived from the sign of its shoelace sum."""
    INVALID = "INVALID"
    CLOCKWISE = "CW"
    COUNTER_CLOCKWISE = "CCW"


# -----------------------
# Public API
# -----------------------
def shoelace_sum(vertices) -> float:
    """
    Unhalved signed shoelace sum over cyclic vertex pairs (prev, cur).

    Returns
    -------
    float
        Twice the signed area; positive means CLOCKWISE in this package's convention.
    """
    P = as_xy(vertices)
    if P.shape[0] == 0:
        return 0.0
    x = P[:, 0]
    y = P[:, 1]
    # Roll by +1 so row i holds vertex i-1 (implicitly connects last->first)
    xp = np.roll(x, 1)
    yp = np.roll(y, 1)
    terms = (xp + x) * (yp - y)
    # Strict left-to-right accumulation from vertex 0; np.sum would add pairwise and can
    # flip the sign of a near-zero sum.
    return float(reduce(operator.add, terms.tolist(), 0.0))


def compute_polygon_area(vertices) -> Tuple[float, WindingOrder]:
    """
    Unsigned area and winding order of a polygon.

    Parameters
    ----------
    vertices : array-like
        (N, 2) vertices of an implicitly closed loop.

    Returns
    -------
    (float, WindingOrder)
        |sum / 2| and the winding derived from the sign of the unhalved sum:
        0 → INVALID, > 0 → CLOCKWISE, < 0 → COUNTER_CLOCKWISE.
    """
    area2 = shoelace_sum(vertices)
    if area2 == 0.0:
        order = WindingOrder.INVALID
    elif area2 > 0.0:
        order = WindingOrder.CLOCKWISE
    else:
        order = WindingOrder.COUNTER_CLOCKWISE
    return abs(area2 / 2.0), order


def winding_order(vertices) -> WindingOrder:
    """Shorthand for `compute_polygon_area(vertices)[1]`."""
    return compute_polygon_area(vertices)[1]


def ensure_clockwise(vertices) -> Tuple[np.ndarray, bool]:
    """
    Return a CLOCKWISE copy of the loop and whether it had to be reversed.

    Behavior
    --------
    - COUNTER_CLOCKWISE input is reversed (plain row reversal, no re-sorting).
    - CLOCKWISE and INVALID input is returned as a copy, unchanged.
    """
    P = as_xy(vertices)
    if winding_order(P) is WindingOrder.COUNTER_CLOCKWISE:
        return P[::-1].copy(), True
    return P, False
