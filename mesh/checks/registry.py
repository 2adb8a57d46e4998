# -*- coding: utf-8 -*-
# Earclip/mesh/checks/registry.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/7/2026

Purpose:
--------
Central registry of triangulation validation rules. Each rule is defined once here
with its metadata (id, function, severity), providing a single source of truth for
execution order and selection.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
"""


from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from . import errors as _err
from . import warnings as _wrn


# ---- Rule spec ----

@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(tv, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"


# ---- Build registry ----

REGISTRY: Dict[str, RuleSpec] = {}

def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (hard failures)
_add(RuleSpec("triangle_count",        _err.triangle_count,        "error"))
_add(RuleSpec("vertex_membership",     _err.vertex_membership,     "error"))
_add(RuleSpec("area_coverage",         _err.area_coverage,         "error"))
_add(RuleSpec("overlapping_triangles", _err.overlapping_triangles, "error"))

# Warnings (advisories)
_add(RuleSpec("degenerate_triangles",  _wrn.degenerate_triangles,  "warn"))
_add(RuleSpec("min_angle_tris",        _wrn.min_angle_tris,        "warn"))


# ---- Deterministic execution order ----
# Counts and membership first; then geometry; then quality.
RULES_ORDER: List[str] = [
    "triangle_count",
    "vertex_membership",
    "area_coverage",
    "overlapping_triangles",
    "degenerate_triangles",
    "min_angle_tris",
]


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER by an enable/disable map (absent ids default to enabled).
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
