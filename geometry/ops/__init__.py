# -*- coding: utf-8 -*-
# Earclip/geometry/ops/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/2/2026

Ops Subfolder:
--------------
Leaf 2D vector utilities used by the topology predicates and the ear-clipping loop.

Contents
--------
- vector:   subtract, cross (scalar 2D cross product), cyclic_get (wrap-around indexing)
"""

from .vector import subtract, cross, cyclic_get

__all__ = ["subtract", "cross", "cyclic_get"]
