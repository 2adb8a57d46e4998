# -*- coding: utf-8 -*-
# Earclip/mesh/checks/errors.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/7/2026

Purpose:
--------
ERROR-tier triangulation rules. Each rule inspects a read-only `TriangulationView` and
returns one normalized "finding" record that callers can aggregate or turn into exit
codes.

Inputs/Contracts:
-----------------
- `tv` : TriangulationView (immutable) with `polygon (N,2)`, `triangles (T,3,2)`,
  `polygon_area`.
- `th` : dict of thresholds (`area_rtol`, `overlap_eps`). Unknown keys
  are ignored.
- `cache` : dict from `helpers.precompute_cache(tv, th)`.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,
      "count": int,
      "examples": [...],     # capped sample (triangle ids, pairs, ...)
      "details": {...},
    }
"""


from typing import Dict, List
import numpy as np
from .kernels import triangles_overlap


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict):
    return {
        "id": rule_id,
        "severity": "error",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],  # cap to keep payload small
        "details": details or {},
    }


def triangle_count(tv, th, cache) -> Dict:
    """A simple polygon with n vertices triangulates into exactly n-2 triangles."""
    expected = max(int(tv.polygon.shape[0]) - 2, 0)
    got = int(len(tv.triangles))
    return _finding(
        "triangle_count",
        ok=(got == expected),
        count=abs(got - expected),
        examples=[],
        details={"expected": expected, "got": got},
    )


def area_coverage(tv, th, cache) -> Dict:
    """Sum of triangle areas equals the polygon area within `area_rtol`."""
    rtol = float(th.get("area_rtol", 1e-9))
    total = float(np.sum(cache["areas"]))
    target = tv.polygon_area
    err = abs(total - target)
    ok = err <= rtol * max(target, np.finfo(float).tiny)
    return _finding(
        "area_coverage",
        ok=ok,
        count=0 if ok else 1,
        examples=[],
        details={"polygon_area": target, "triangle_area_sum": total, "abs_error": err, "rtol": rtol},
    )


def vertex_membership(tv, th, cache) -> Dict:
    """Every triangle corner must be (exactly) one of the input vertices."""
    corners = tv.triangles.reshape(-1, 2)
    if not len(corners):
        return _finding("vertex_membership", ok=True, count=0, examples=[], details={})
    hit = (corners[:, None, :] == tv.polygon[None, :, :]).all(axis=2).any(axis=1)
    bad_tris = np.unique(np.nonzero(~hit)[0] // 3)
    return _finding(
        "vertex_membership",
        ok=len(bad_tris) == 0,
        count=len(bad_tris),
        examples=bad_tris.tolist(),
        details={},
    )


def overlapping_triangles(tv, th, cache) -> Dict:
    """
    Pairs of triangles whose interiors overlap. Shared edges/vertices are allowed.
    Candidates are pre-filtered by strict AABB overlap.
    """
    eps = float(th.get("overlap_eps", 1e-12))
    T = tv.triangles
    bb = cache["bboxes"]
    pairs = []
    for i in range(len(T)):
        cand = np.nonzero(
            (bb[i + 1:, 0] < bb[i, 2]) & (bb[i + 1:, 2] > bb[i, 0]) &
            (bb[i + 1:, 1] < bb[i, 3]) & (bb[i + 1:, 3] > bb[i, 1])
        )[0] + i + 1
        for j in cand:
            if triangles_overlap(T[i], T[j], eps=eps):
                pairs.append((i, int(j)))
    return _finding(
        "overlapping_triangles",
        ok=len(pairs) == 0,
        count=len(pairs),
        examples=pairs,
        details={"overlap_eps": eps},
    )
