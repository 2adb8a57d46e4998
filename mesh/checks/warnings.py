# -*- coding: utf-8 -*-
# Earclip/mesh/checks/warnings.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/7/2026

Purpose:
--------
WARN-tier triangulation rules: advisory quality signals. Ear clipping makes no attempt
to avoid slivers, so these never fail a run on their own.
"""

from typing import Dict, List
import numpy as np


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict):
    return {
        "id": rule_id,
        "severity": "warn",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],
        "details": details or {},
    }


def min_angle_tris(tv, th, cache) -> Dict:
    """
    Flag triangles with minimum interior angle below `min_angle_deg` (degrees).
    """
    min_angles = cache["min_angles"]
    if not len(min_angles):
        return _finding("min_angle_tris", ok=True, count=0, examples=[], details={})

    thr = float(th.get("min_angle_deg", 5.0))
    bad_ids = np.nonzero(min_angles < thr)[0]
    return _finding(
        "min_angle_tris",
        ok=len(bad_ids) == 0,
        count=len(bad_ids),
        examples=bad_ids[:20].tolist(),
        details={"thr_deg": thr, "min_deg": float(np.min(min_angles))},
    )


def degenerate_triangles(tv, th, cache) -> Dict:
    """
    Triangles whose area is <= `tiny_area_abs`.

    A vertex whose incident edges turn by exactly zero is still clipped as an ear, so an
    otherwise valid triangulation can hold zero-area triangles (three corners on one
    line, e.g. a reflex notch lined up with the far corner). Coverage is unaffected.
    """
    floor = float(th.get("tiny_area_abs", 0.0))
    bad = np.nonzero(cache["areas"] <= floor)[0]
    return _finding(
        "degenerate_triangles",
        ok=len(bad) == 0,
        count=len(bad),
        examples=bad.tolist(),
        details={"tiny_area_abs": floor},
    )
