# -*- coding: utf-8 -*-
# Earclip/mesh/checks/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/7/2026

Purpose:
--------
Public API for running post-triangulation checks and returning normalized findings
suitable for CLI/CI consumption.

Main Tasks
----------
   - Provide defaults (`DEFAULTS`) for enable/disable policy and thresholds.
   - Orchestrate registry-defined rules over a TriangulationView and shared cache.
   - Aggregate findings and compute a top-level `ok` status.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "n_vertices": int, "n_triangles": int, "polygon_area": float,
    "thresholds": dict, "enabled": dict
  }
}
"""


from typing import Dict, Any, Optional
import copy
from mesh.tools.utils import deep_merge, reject_unknown_keys
from .helpers import build_view, precompute_cache
from .registry import REGISTRY, RULES_ORDER, get_enabled_ids


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {
        # errors
        "triangle_count": True,
        "vertex_membership": True,
        "area_coverage": True,
        "overlapping_triangles": True,
        # warnings
        "degenerate_triangles": True,
        "min_angle_tris": True,
    },
    "thresholds": {
        "area_rtol": 1e-9,        # relative to polygon area
        "tiny_area_abs": 0.0,     # area floor for degenerate triangles
        "overlap_eps": 1e-12,     # min projection overlap counted as interior overlap
        "min_angle_deg": 5.0,
    },
}


def _meta(tv, cfg):
    """
    Assemble metadata snapshot (sizes, thresholds, enabled map) for the results payload.
    """
    return {
        "n_vertices": int(tv.polygon.shape[0]),
        "n_triangles": int(len(tv.triangles)),
        "polygon_area": float(tv.polygon_area),
        "thresholds": copy.deepcopy(cfg.get("thresholds", {})),
        "enabled": copy.deepcopy(cfg.get("enabled", {})),
    }


def run_checks(vertices, triangles, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) against a triangulation.

    Parameters
    ----------
    vertices : array-like
        (N, 2) input polygon.
    triangles : array-like
        (T, 3, 2) coordinates (as returned by `triangulate`) or (T, 3) int indices
        into `vertices` (as returned by `triangulate_indices`).
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        Payload with keys:
          - "ok": bool: False iff any ERROR-severity rule fails.
          - "rules": dict: rule_id -> finding dict.
          - "meta": dict: sizes, thresholds, enabled map.
    """
    cfg = deep_merge(DEFAULTS, config or {})
    reject_unknown_keys(cfg, DEFAULTS, where="checks config")
    reject_unknown_keys(cfg["enabled"], REGISTRY, where="rule id")

    tv = build_view(vertices, triangles)
    th = cfg.get("thresholds", {})
    cache = precompute_cache(tv, th)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY[rid]
        finding = spec.fn(tv, th, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        results[rid] = finding

    ok = all(
        f.get("ok", False) for rid, f in results.items() if REGISTRY[rid].severity == "error"
    )

    return {
        "ok": ok,
        "rules": results,
        "meta": _meta(tv, cfg),
    }


__all__ = ["DEFAULTS", "run_checks", "REGISTRY", "RULES_ORDER"]
