# -*- coding: utf-8 -*-
# Earclip/mesh/api.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/6/2026 (Updated: 10/9/2026)

Purpose
-------
High-level API for triangulating simple 2D polygons by ear clipping. The module ties
together input coercion, validation, winding normalization and the clipping loop, and
exposes two entry points that differ only in what they return.

Main Tasks
----------
    1. Merge user config over `DEFAULTS` and validate it.
    2. Copy the input, run the rejection checks, and reverse COUNTER_CLOCKWISE loops.
    3. Run `clip_ears` on the clockwise copy.
    4. Return triangles as coordinates (`triangulate`) or as indices into the
       caller's original vertex order (`triangulate_indices`).

Notes
-----
- The caller's sequence is never mutated.
- Calls share no state; concurrent use with separate inputs is safe.
"""

from typing import Any, Dict, Optional, Tuple
import logging
import numpy as np
from geometry.topology._validation import as_xy
from geometry.topology.loop import WindingOrder, compute_polygon_area, ensure_clockwise
from geometry.topology.simple import is_simple_polygon, contains_colinear_edges
from mesh.checks.kernels import is_point_in_triangle
from mesh.core.earclip import STALL_MODES, validate_polygon, clip_ears
from mesh.tools.utils import deep_merge, reject_unknown_keys

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULTS", "resolve_config", "triangulate", "triangulate_indices",
    # re-exported building blocks (single source of truth stays in geometry / mesh.checks)
    "WindingOrder", "compute_polygon_area", "is_simple_polygon",
    "contains_colinear_edges", "is_point_in_triangle",
]


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "colinear_tol": 0.0,     # exact zero test; > 0 flags |cross| <= tol
    "check_finite": True,    # reject NaN/Inf coordinates up front
    "on_stall": "fallback",  # "fallback" | "raise"
}


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge `config` over DEFAULTS and validate the result.

    Raises
    ------
    ValueError
        On unknown keys, a negative `colinear_tol`, or an unknown `on_stall` mode.
    """
    cfg = deep_merge(DEFAULTS, config)
    reject_unknown_keys(cfg, DEFAULTS, where="triangulation config")

    tol = float(cfg["colinear_tol"])
    if not (tol >= 0.0):
        raise ValueError(f"colinear_tol must be >= 0 (got {cfg['colinear_tol']}).")
    cfg["colinear_tol"] = tol
    cfg["check_finite"] = bool(cfg["check_finite"])
    if cfg["on_stall"] not in STALL_MODES:
        raise ValueError(f"on_stall must be one of {STALL_MODES} (got {cfg['on_stall']!r}).")
    return cfg


def _run(vertices, config: Optional[Dict[str, Any]]) -> Tuple[np.ndarray, np.ndarray, bool]:
    """
    Shared pipeline: returns (clockwise vertices, (T,3) ears into them, reversed flag).
    """
    cfg = resolve_config(config)
    P = as_xy(vertices, check_finite=cfg["check_finite"])

    validate_polygon(P, colinear_tol=cfg["colinear_tol"])
    P, flipped = ensure_clockwise(P)
    if flipped:
        logger.debug("Reversed %d vertices to clockwise order.", P.shape[0])

    ears = np.asarray(clip_ears(P, on_stall=cfg["on_stall"]), dtype=int).reshape(-1, 3)
    logger.debug("Triangulated %d vertices into %d triangles.", P.shape[0], ears.shape[0])
    return P, ears, flipped


# -------------------------
# Public API
# -------------------------
def triangulate(vertices, config: Optional[Dict[str, Any]] = None) -> np.ndarray:
    """
    Ear-clipping triangulation of a simple polygon.

    Parameters
    ----------
    vertices : array-like
        (N, 2) vertices of an implicitly closed loop, in either winding order.
    config : dict, optional
        Overrides for `DEFAULTS` (keys: "colinear_tol", "check_finite", "on_stall").

    Returns
    -------
    np.ndarray
        (N-2, 3, 2) float array. Triangle k holds the (prev, current, next) vertex
        coordinates of the k-th clipped ear; the last row is the remaining triangle.
        Coordinates are copies of the input values.

    Raises
    ------
    InsufficientVerticesError
        Fewer than 3 vertices.
    NonSimplePolygonError
        Two non-adjacent edges cross.
    ColinearEdgeError
        A vertex has colinear incident edges.
    DegenerateWindingError
        The polygon has zero area.
    EarClippingStalledError
        Only with `on_stall="raise"`.
    ValueError
        Malformed input (not (N, 2), non-finite) or invalid config.
    """
    P, ears, _ = _run(vertices, config)
    return P[ears]


def triangulate_indices(vertices, config: Optional[Dict[str, Any]] = None) -> np.ndarray:
    """
    Same as `triangulate`, but returns an (N-2, 3) int array of indices into the
    caller's ORIGINAL vertex order (winding reversal is undone).
    """
    P, ears, flipped = _run(vertices, config)
    if flipped:
        ears = (P.shape[0] - 1) - ears
    return ears
