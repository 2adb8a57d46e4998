# -*- coding: utf-8 -*-
# Earclip/mesh/errors.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/4/2026

Purpose
-------
Typed exceptions for the triangulation layer with compact, context-aware messages, so
callers can tell the rejection reasons apart and log where a polygon went wrong.

Main Tasks
----------
    1. Define TriangulationError(message, context) with a compact context suffix in __str__.
    2. Provide one subclass per precondition of `triangulate`, plus the stall error
       raised only when the stall fallback is disabled.

Notes
-----
- All of these are input-validation failures: deterministic, never retried.
- TriangulationError derives from ValueError so generic `except ValueError` callers
  keep working.
"""

__all__ = [
    "TriangulationError",
    "InsufficientVerticesError",
    "NonSimplePolygonError",
    "ColinearEdgeError",
    "DegenerateWindingError",
    "EarClippingStalledError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class TriangulationError(ValueError):
    """
    Base class for all polygon rejections raised by `triangulate`.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"edges": (1, 3)}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(TriangulationError, self).__init__(message)

    def __str__(self):
        base = super(TriangulationError, self).__str__()
        return base + _format_context(self.context)


class InsufficientVerticesError(TriangulationError):
    """Fewer than three vertices were supplied."""


class NonSimplePolygonError(TriangulationError):
    """Two non-adjacent boundary edges cross each other."""


class ColinearEdgeError(TriangulationError):
    """A vertex has exactly colinear incident edges (zero cross product)."""


class DegenerateWindingError(TriangulationError):
    """The shoelace area is exactly zero, so no winding order can be derived."""


class EarClippingStalledError(TriangulationError):
    """
    A full scan of the remaining index list found no valid ear.

    Only raised with config `on_stall="raise"`; the default fallback clips the
    least-bad candidate instead.
    """
