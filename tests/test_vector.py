import unittest

import numpy as np

from geometry.ops.vector import subtract, cross, cyclic_get


class VectorTests(unittest.TestCase):
    def test_subtract_is_componentwise(self):
        np.testing.assert_array_equal(subtract((3.0, 5.0), (1.0, 7.0)), [2.0, -2.0])

    def test_cross_sign_encodes_turn(self):
        self.assertEqual(cross((1.0, 0.0), (0.0, 1.0)), 1.0)
        self.assertEqual(cross((0.0, 1.0), (1.0, 0.0)), -1.0)
        self.assertEqual(cross((2.0, 2.0), (1.0, 1.0)), 0.0)

    def test_cyclic_get_wraps_both_directions(self):
        seq = [10, 20, 30]
        self.assertEqual(cyclic_get(seq, 0), 10)
        self.assertEqual(cyclic_get(seq, -1), 30)
        self.assertEqual(cyclic_get(seq, 3), 10)
        self.assertEqual(cyclic_get(seq, 7), 20)
        self.assertEqual(cyclic_get(seq, -4), 30)

    def test_cyclic_get_empty_raises(self):
        with self.assertRaises(IndexError):
            cyclic_get([], 0)


if __name__ == "__main__":
    unittest.main()
