# -*- coding: utf-8 -*-
# Earclip/mesh/core/earclip.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/6/2026

Purpose:
--------
Ear-clipping engine. Validates a polygon, then repeatedly removes one ear from a
working index list until a single triangle is left.

Main Tasks:
-----------
   1. `validate_polygon` → run the rejection checks in a fixed order and raise the
      matching typed error on the first failure.
   2. `clip_ears` → ear-clipping loop over a CLOCKWISE loop, returning index triples.

Conventions:
------------
   - Ears are emitted as (prev, current, next) at the moment of clipping.
   - A candidate is rejected when cross(prev - cur, next - cur) < 0 (a reflex turn for
     the clockwise convention of `geometry.topology.loop`).
   - Intruder search covers EVERY vertex of the loop except the three ear vertices,
     including vertices that were already clipped.
   - After each clip the scan restarts at the head of the index list.

Stall handling:
---------------
   A full scan can find no ear on inputs that pass validation but are pathological in
   floating point. With `on_stall="fallback"` the least-bad candidate is clipped
   (fewest intruders, then widest turn, then earliest position) and a warning is
   logged; with `on_stall="raise"` an EarClippingStalledError is raised. Either way each
   pass removes one vertex, so the loop ends after n-3 clips.
"""

import logging
from typing import List, Optional, Tuple
import numpy as np
from geometry.ops.vector import cross, cyclic_get, subtract
from geometry.topology import (
    WindingOrder, compute_polygon_area, self_intersections, colinear_vertices,
)
from mesh.checks.kernels import points_in_triangle
from mesh.errors import (
    InsufficientVerticesError, NonSimplePolygonError, ColinearEdgeError,
    DegenerateWindingError, EarClippingStalledError,
)

logger = logging.getLogger(__name__)

STALL_MODES = ("fallback", "raise")

Ear = Tuple[int, int, int]


# -----------------------
# Validation
# -----------------------
def validate_polygon(P: np.ndarray, colinear_tol: float = 0.0) -> WindingOrder:
    """
    Run the preconditions of triangulation in order and return the winding order.

    Order: vertex count, simplicity, colinear edges, non-zero area. The first failing
    check raises; nothing after it runs.

    Raises
    ------
    InsufficientVerticesError, NonSimplePolygonError, ColinearEdgeError, DegenerateWindingError
    """
    n = int(P.shape[0])
    if n < 3:
        raise InsufficientVerticesError("there must be at least three vertices", {"n_vertices": n})

    crossings = self_intersections(P)
    if crossings:
        raise NonSimplePolygonError(
            "vertices do not form a simple polygon",
            {"edges": crossings[0], "n_crossings": len(crossings)},
        )

    colinear = colinear_vertices(P, tol=colinear_tol)
    if colinear.size:
        raise ColinearEdgeError("vertices contain colinear edges", {"vertices": colinear.tolist()})

    _, order = compute_polygon_area(P)
    if order is WindingOrder.INVALID:
        raise DegenerateWindingError("vertices do not form a valid polygon (zero area)", {"n_vertices": n})

    logger.debug("Polygon with %d vertices passed validation (%s).", n, order.value)
    return order


# -----------------------
# Ear tests
# -----------------------
def _neighbours(index_list: List[int], pos: int) -> Ear:
    """(prev, current, next) vertex indices around position `pos` of the index list."""
    return cyclic_get(index_list, pos - 1), index_list[pos], cyclic_get(index_list, pos + 1)


def _turn(P: np.ndarray, b: int, a: int, c: int) -> float:
    return cross(subtract(P[b], P[a]), subtract(P[c], P[a]))


def _intruders(P: np.ndarray, b: int, a: int, c: int) -> np.ndarray:
    """Mask of vertices (other than b, a, c) inside or on triangle (P[b], P[a], P[c])."""
    mask = points_in_triangle(P, P[b], P[a], P[c])
    mask[[a, b, c]] = False
    return mask


def _find_ear(P: np.ndarray, index_list: List[int]) -> Optional[int]:
    """Position of the first valid ear in the index list, or None after a full scan."""
    for pos in range(len(index_list)):
        b, a, c = _neighbours(index_list, pos)
        if _turn(P, b, a, c) < 0:
            continue
        if _intruders(P, b, a, c).any():
            continue
        return pos
    return None


def _least_bad_ear(P: np.ndarray, index_list: List[int]) -> int:
    """Position minimizing (intruder count, -turn, position)."""
    best_key, best_pos = None, 0
    for pos in range(len(index_list)):
        b, a, c = _neighbours(index_list, pos)
        key = (int(_intruders(P, b, a, c).sum()), -_turn(P, b, a, c), pos)
        if best_key is None or key < best_key:
            best_key, best_pos = key, pos
    return best_pos


# -----------------------
# Loop
# -----------------------
def clip_ears(P: np.ndarray, on_stall: str = "fallback") -> List[Ear]:
    """
    Ear-clip a validated, CLOCKWISE loop.

    Parameters
    ----------
    P : np.ndarray
        (N, 2) vertices, N >= 3, already validated and in CLOCKWISE order.
    on_stall : {"fallback", "raise"}
        What to do when a full scan finds no ear (see module notes).

    Returns
    -------
    list of (int, int, int)
        N-2 index triples into `P`, in clipping order; the last one is the three
        indices left in the list.

    Raises
    ------
    ValueError
        If `on_stall` is not a known mode.
    EarClippingStalledError
        If a scan stalls and `on_stall == "raise"`.
    """
    if on_stall not in STALL_MODES:
        raise ValueError(f"on_stall must be one of {STALL_MODES} (got {on_stall!r}).")

    index_list = list(range(int(P.shape[0])))
    ears: List[Ear] = []

    while len(index_list) > 3:
        pos = _find_ear(P, index_list)
        if pos is None:
            if on_stall == "raise":
                raise EarClippingStalledError(
                    "no valid ear found in a full scan",
                    {"remaining": len(index_list), "clipped": len(ears)},
                )
            pos = _least_bad_ear(P, index_list)
            logger.warning(
                "No valid ear among %d remaining vertices; clipping least-bad candidate at vertex %d.",
                len(index_list), index_list[pos],
            )
        ears.append(_neighbours(index_list, pos))
        del index_list[pos]

    ears.append((index_list[0], index_list[1], index_list[2]))
    return ears
