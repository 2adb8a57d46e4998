# -*- coding: utf-8 -*-
# Earclip/mesh/core/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/6/2026

Core Subpackage:
----------------
Ear-clipping engine: precondition checks and the clipping loop over a clockwise loop.

Modules:
--------
- earclip: validate_polygon (ordered rejection checks), clip_ears (index-list loop
           with stall fallback)
"""

from .earclip import validate_polygon, clip_ears, STALL_MODES

__all__ = ["validate_polygon", "clip_ears", "STALL_MODES"]
