# -*- coding: utf-8 -*-
# Earclip/mesh/tools/utils.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/5/2026

Purpose
-------
Utility helpers for the triangulation pipeline:
    1. Right-biased deep merge of nested config dicts over module DEFAULTS.
    2. Strict key checking so typos in user config fail loudly.

Notes:
------
    - Inputs are never mutated; merged results are deep copies.
"""

import copy
from typing import Any, Dict, Iterable, Optional


def deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = copy.deepcopy(v)
    return out


def reject_unknown_keys(cfg: Dict[str, Any], known: Iterable[str], where: str = "config") -> None:
    """
    Raise ValueError if `cfg` has keys outside `known`.
    """
    unknown = sorted(set(cfg) - set(known))
    if unknown:
        raise ValueError(f"Unknown {where} key(s): {', '.join(unknown)}.")
