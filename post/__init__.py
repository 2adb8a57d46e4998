# -*- coding: utf-8 -*-
# Earclip/post/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/8/2026

Modules:
--------
- plot_mesh:   Polygon outline + triangle wireframe plot of a triangulation.
               Uses matplotlib; headless-safe backend selection.
"""

__all__ = ["plot_mesh"]
