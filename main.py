# -*- coding: utf-8 -*-
# Earclip/main.py

"""
End-to-end driver:
  1) Validate a sample polygon (simplicity, colinear edges, winding)
  2) Triangulate it by ear clipping
  3) QA summary of the triangulation
  4) Plot polygon + triangles
"""

import json
import logging
import sys

from geometry.topology import compute_polygon_area, is_simple_polygon, contains_colinear_edges
from mesh.api import triangulate, triangulate_indices
from mesh.checks import run_checks
from mesh.errors import TriangulationError
from post.plot_mesh import plot_triangulation


# Counter-clockwise "comb" with three teeth: several reflex vertices, no colinear runs.
SAMPLE_POLYGON = [
    (0.0, 0.0), (6.0, 0.0), (6.0, 4.0), (5.0, 4.0), (4.5, 1.5),
    (4.0, 4.0), (3.0, 4.0), (2.5, 1.5), (2.0, 4.0), (1.0, 4.0), (0.5, 1.0),
]


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Earclip")

    # ------------------------------------------------------------------
    # 1) Validate
    # ------------------------------------------------------------------
    area, order = compute_polygon_area(SAMPLE_POLYGON)
    log.info(
        "Polygon: %d vertices, area=%.4f, winding=%s, simple=%s, colinear=%s",
        len(SAMPLE_POLYGON), area, order.value,
        is_simple_polygon(SAMPLE_POLYGON), contains_colinear_edges(SAMPLE_POLYGON),
    )

    # ------------------------------------------------------------------
    # 2) Triangulate
    #    - colinear_tol > 0 relaxes the exact colinear test
    #    - on_stall="raise" turns the no-ear fallback into an error
    # ------------------------------------------------------------------
    config = {"colinear_tol": 0.0, "on_stall": "fallback"}
    try:
        triangles = triangulate(SAMPLE_POLYGON, config)
        faces = triangulate_indices(SAMPLE_POLYGON, config)
    except TriangulationError as e:
        log.error("Triangulation rejected: %s", e)
        sys.exit(1)
    log.info("Triangulated into %d triangles; faces=%s", len(triangles), faces.tolist())

    # ------------------------------------------------------------------
    # 3) QA summary (hard stop on errors)
    # ------------------------------------------------------------------
    findings = run_checks(SAMPLE_POLYGON, triangles)
    if not findings["ok"]:
        failures = [rid for rid, f in findings["rules"].items()
                    if f["severity"] == "error" and not f["ok"]]
        print("Triangulation checks failed: {}".format(", ".join(failures)), file=sys.stderr)
        print(json.dumps(findings, indent=2), file=sys.stderr)
        sys.exit(1)
    log.info("Checks passed: %s", json.dumps(findings["meta"]))
    for rid, f in findings["rules"].items():
        if f["severity"] == "warn" and not f["ok"]:
            log.warning("Check %s: %d triangle(s) flagged %s", rid, f["count"], f["examples"])

    # ------------------------------------------------------------------
    # 4) Plot (optional)
    # ------------------------------------------------------------------
    try:
        plot_triangulation(SAMPLE_POLYGON, triangles, show=True, save_path="triangulation.png",
                           label_order=True)
    except RuntimeError as e:
        log.warning("Skipping plot: %s", e)
