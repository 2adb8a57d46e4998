# -*- coding: utf-8 -*-
# Earclip/mesh/tools/__init__.py

"""
Project: Earclip
Author: Erfan Vaezi
Date: 10/5/2026

Tools Subpackage:
-----------------
Config helpers shared by the triangulation API and the post-triangulation checks.

Modules:
--------
- utils:    deep_merge over DEFAULTS and unknown-key rejection.
"""

from .utils import deep_merge, reject_unknown_keys

__all__ = ["utils", "deep_merge", "reject_unknown_keys"]
