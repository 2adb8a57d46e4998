import unittest

import numpy as np

from mesh.api import triangulate, triangulate_indices
from mesh.checks import DEFAULTS, RULES_ORDER, run_checks

SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


class RunChecksTests(unittest.TestCase):
    def test_valid_triangulation_passes_every_rule(self):
        report = run_checks(SQUARE, triangulate(SQUARE))
        self.assertTrue(report["ok"])
        self.assertEqual(list(report["rules"]), RULES_ORDER)
        self.assertTrue(all(f["ok"] for f in report["rules"].values()))
        self.assertEqual(report["meta"]["n_triangles"], 2)
        self.assertAlmostEqual(report["meta"]["polygon_area"], 1.0)

    def test_accepts_index_triangles(self):
        report = run_checks(SQUARE, triangulate_indices(SQUARE))
        self.assertTrue(report["ok"])

    def test_missing_triangle(self):
        tris = triangulate(SQUARE)[:1]
        report = run_checks(SQUARE, tris)
        self.assertFalse(report["ok"])
        self.assertFalse(report["rules"]["triangle_count"]["ok"])
        self.assertEqual(report["rules"]["triangle_count"]["details"], {"expected": 2, "got": 1})
        self.assertFalse(report["rules"]["area_coverage"]["ok"])

    def test_overlap_detected(self):
        tris = np.array([
            [(0, 0), (1, 0), (1, 1)],
            [(0, 0), (1, 0), (0, 1)],
        ], dtype=float)
        report = run_checks(SQUARE, tris)
        self.assertFalse(report["ok"])
        self.assertEqual(report["rules"]["overlapping_triangles"]["examples"], [(0, 1)])
        self.assertTrue(report["rules"]["triangle_count"]["ok"])

    def test_foreign_vertex_detected(self):
        tris = np.array([
            [(0, 0), (1, 0), (0.5, 0.5)],
            [(0, 0), (0.5, 0.5), (0, 1)],
        ], dtype=float)
        report = run_checks(SQUARE, tris)
        self.assertEqual(report["rules"]["vertex_membership"]["examples"], [0, 1])

    def test_sliver_is_only_a_warning(self):
        sliver = [(0.0, 0.0), (10.0, 0.0), (0.0, 0.1)]
        report = run_checks(sliver, triangulate(sliver))
        self.assertTrue(report["ok"])
        self.assertFalse(report["rules"]["min_angle_tris"]["ok"])
        self.assertEqual(report["rules"]["min_angle_tris"]["severity"], "warn")

    def test_zero_area_ear_is_only_a_warning(self):
        # The second ear of this comb is (0,0), (0.5,1), (2,4): three points on y = 2x.
        comb = [
            (0.0, 0.0), (6.0, 0.0), (6.0, 4.0), (5.0, 4.0), (4.5, 1.5),
            (4.0, 4.0), (3.0, 4.0), (2.5, 1.5), (2.0, 4.0), (1.0, 4.0), (0.5, 1.0),
        ]
        report = run_checks(comb, triangulate(comb))
        self.assertTrue(report["ok"])
        degenerate = report["rules"]["degenerate_triangles"]
        self.assertEqual(degenerate["severity"], "warn")
        self.assertFalse(degenerate["ok"])
        self.assertEqual(degenerate["examples"], [1])
        self.assertTrue(report["rules"]["area_coverage"]["ok"])

    def test_disabling_rules_and_thresholds(self):
        sliver = [(0.0, 0.0), (10.0, 0.0), (0.0, 0.1)]
        report = run_checks(sliver, triangulate(sliver),
                            {"enabled": {"overlapping_triangles": False},
                             "thresholds": {"min_angle_deg": 0.1}})
        self.assertNotIn("overlapping_triangles", report["rules"])
        self.assertTrue(report["rules"]["min_angle_tris"]["ok"])
        self.assertEqual(DEFAULTS["thresholds"]["min_angle_deg"], 5.0)

    def test_unknown_keys_rejected(self):
        with self.assertRaises(ValueError):
            run_checks(SQUARE, triangulate(SQUARE), {"enabled": {"no_such_rule": True}})
        with self.assertRaises(ValueError):
            run_checks(SQUARE, triangulate(SQUARE), {"threshold": {}})


if __name__ == "__main__":
    unittest.main()
