import unittest

import numpy as np

from geometry.topology import compute_polygon_area
from mesh.api import DEFAULTS, resolve_config, triangulate, triangulate_indices
from mesh.checks import run_checks
from mesh.checks.kernels import triangle_areas
from mesh.core.earclip import clip_ears
from mesh.errors import (
    ColinearEdgeError,
    DegenerateWindingError,
    EarClippingStalledError,
    InsufficientVerticesError,
    NonSimplePolygonError,
    TriangulationError,
)

SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
COMB = [
    (0.0, 0.0), (6.0, 0.0), (6.0, 4.0), (5.0, 4.0), (4.5, 1.5),
    (4.0, 4.0), (3.0, 4.0), (2.5, 1.5), (2.0, 4.0), (1.0, 4.0), (0.5, 1.0),
]


def star_polygon(n, seed):
    """Star-shaped (hence simple) polygon around the origin, counter-clockwise."""
    rng = np.random.default_rng(seed)
    theta = 2.0 * np.pi * (np.arange(n) + rng.uniform(0.1, 0.9, n)) / n
    r = rng.uniform(0.3, 1.0, n)
    return np.column_stack([r * np.cos(theta), r * np.sin(theta)])


class TriangulateTests(unittest.TestCase):
    def test_square_gives_two_triangles_in_ear_order(self):
        tris = triangulate(SQUARE)
        self.assertEqual(tris.shape, (2, 3, 2))
        # CCW input is reversed to (0,1),(1,1),(1,0),(0,0); first ear is at (0,1)
        np.testing.assert_array_equal(tris[0], [(0, 0), (0, 1), (1, 1)])
        np.testing.assert_array_equal(tris[1], [(1, 1), (1, 0), (0, 0)])

    def test_single_triangle(self):
        tri = [(0, 0), (2, 0), (0, 2)]
        tris = triangulate(tri)
        self.assertEqual(tris.shape, (1, 3, 2))
        self.assertAlmostEqual(float(triangle_areas(tris).sum()), 2.0)

    def test_concave_comb(self):
        tris = triangulate(COMB)
        self.assertEqual(len(tris), len(COMB) - 2)
        area, _ = compute_polygon_area(COMB)
        self.assertAlmostEqual(float(triangle_areas(tris).sum()), area, places=9)
        self.assertTrue(run_checks(COMB, tris)["ok"])

    def test_zero_turn_is_clipped_as_ear(self):
        tris = triangulate(COMB)
        self.assertEqual(len(tris), len(COMB) - 2)
        np.testing.assert_array_equal(tris[1], [(0.0, 0.0), (0.5, 1.0), (2.0, 4.0)])
        self.assertEqual(float(triangle_areas(tris)[1]), 0.0)

    def test_clockwise_input_is_not_reversed(self):
        cw = SQUARE[::-1]
        tris = triangulate(cw)
        self.assertEqual(len(tris), 2)
        self.assertTrue(run_checks(cw, tris)["ok"])

    def test_star_polygons_tile_exactly(self):
        for seed, n in [(0, 8), (1, 13), (2, 21), (3, 34)]:
            poly = star_polygon(n, seed)
            tris = triangulate(poly)
            self.assertEqual(len(tris), n - 2)
            area, _ = compute_polygon_area(poly)
            np.testing.assert_allclose(triangle_areas(tris).sum(), area, rtol=1e-9)
            report = run_checks(poly, tris)
            self.assertTrue(report["ok"], msg=str(report["rules"]))

    def test_triangle_corners_are_input_values(self):
        tris = triangulate(COMB)
        inputs = {tuple(p) for p in COMB}
        for corner in tris.reshape(-1, 2):
            self.assertIn(tuple(corner), inputs)

    def test_input_is_not_mutated(self):
        as_list = [list(p) for p in SQUARE]
        as_array = np.array(SQUARE)
        snapshot = as_array.copy()
        triangulate(as_list)
        triangulate(as_array)
        self.assertEqual(as_list, [list(p) for p in SQUARE])
        np.testing.assert_array_equal(as_array, snapshot)

    def test_indices_refer_to_original_order(self):
        faces = triangulate_indices(SQUARE)
        self.assertEqual(faces.shape, (2, 3))
        self.assertEqual({frozenset(f) for f in faces.tolist()}, {frozenset({0, 3, 2}), frozenset({2, 1, 0})})
        np.testing.assert_array_equal(np.array(SQUARE)[faces], triangulate(SQUARE))

        faces_cw = triangulate_indices(COMB[::-1])
        np.testing.assert_array_equal(np.array(COMB[::-1])[faces_cw], triangulate(COMB[::-1]))

    def test_api_reexports_building_blocks(self):
        import mesh.api as api
        from geometry.topology import loop, simple
        from mesh.checks import kernels

        self.assertIs(api.compute_polygon_area, loop.compute_polygon_area)
        self.assertIs(api.WindingOrder, loop.WindingOrder)
        self.assertIs(api.is_simple_polygon, simple.is_simple_polygon)
        self.assertIs(api.contains_colinear_edges, simple.contains_colinear_edges)
        self.assertIs(api.is_point_in_triangle, kernels.is_point_in_triangle)


class RejectionTests(unittest.TestCase):
    def test_too_few_vertices(self):
        for pts in ([], [(0, 0)], [(0, 0), (1, 1)]):
            with self.assertRaises(InsufficientVerticesError):
                triangulate(pts)

    def test_self_intersecting(self):
        with self.assertRaises(NonSimplePolygonError) as cm:
            triangulate([(0, 0), (1, 1), (1, 0), (0, 1)])
        self.assertEqual(cm.exception.context["edges"], (1, 3))
        self.assertIn("edges=(1, 3)", str(cm.exception))

    def test_colinear_vertex_triple(self):
        with self.assertRaises(ColinearEdgeError) as cm:
            triangulate([(0, 0), (1, 0), (2, 0), (2, 2), (0, 2)])
        self.assertEqual(cm.exception.context["vertices"], [1])

    def test_zero_area(self):
        # Exact arithmetic gives area 1; the shoelace terms round to a zero sum at 2**53.
        x0 = float(2 ** 53)
        with self.assertRaises(DegenerateWindingError):
            triangulate([(x0, 0.0), (x0, 1.0), (x0 + 2.0, 0.0)])

    def test_errors_share_a_base(self):
        for exc in (InsufficientVerticesError, NonSimplePolygonError, ColinearEdgeError,
                    DegenerateWindingError, EarClippingStalledError):
            self.assertTrue(issubclass(exc, TriangulationError))
            self.assertTrue(issubclass(exc, ValueError))

    def test_malformed_and_non_finite_input(self):
        with self.assertRaises(ValueError):
            triangulate([(0, 0, 0), (1, 0, 0), (0, 1, 0)])
        with self.assertRaises(ValueError):
            triangulate([(0, 0), (1, np.nan), (0, 1)])


class ConfigTests(unittest.TestCase):
    def test_defaults_are_not_mutated(self):
        cfg = resolve_config({"on_stall": "raise"})
        self.assertEqual(cfg["on_stall"], "raise")
        self.assertEqual(DEFAULTS["on_stall"], "fallback")

    def test_invalid_config(self):
        for bad in ({"colinear_tolerance": 1.0}, {"colinear_tol": -1.0}, {"on_stall": "loop"}):
            with self.assertRaises(ValueError):
                resolve_config(bad)

    def test_colinear_tolerance_extension(self):
        poly = [(0, 0), (1, 1e-12), (2, 0), (2, 2), (0, 2)]
        self.assertEqual(len(triangulate(poly)), 3)
        with self.assertRaises(ColinearEdgeError):
            triangulate(poly, {"colinear_tol": 1e-9})


class StallTests(unittest.TestCase):
    # A counter-clockwise square fed straight to the engine: every turn is reflex
    # under the clockwise convention, so no scan ever finds an ear.
    CCW = np.array(SQUARE)

    def test_raise_mode(self):
        with self.assertRaises(EarClippingStalledError) as cm:
            clip_ears(self.CCW, on_stall="raise")
        self.assertEqual(cm.exception.context["remaining"], 4)

    def test_fallback_terminates_and_warns(self):
        with self.assertLogs("mesh.core.earclip", level="WARNING") as logs:
            ears = clip_ears(self.CCW, on_stall="fallback")
        # all candidates tie (no intruders, same turn) so the earliest position wins
        self.assertEqual(ears, [(3, 0, 1), (1, 2, 3)])
        self.assertTrue(any("least-bad" in line for line in logs.output))

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            clip_ears(self.CCW, on_stall="spin")


if __name__ == "__main__":
    unittest.main()
