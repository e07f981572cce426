import unittest

import numpy as np

from pyuvw.coordinate.broadcast import as_points, broadcast_positions, broadcast_rotations
from pyuvw.core.exceptions import ShapeMismatchError


class TestAsPoints(unittest.TestCase):

    def test_batch(self):
        pts, single = as_points([[1, 2, 3], [4, 5, 6]])
        self.assertFalse(single)
        self.assertEqual(pts.shape, (2, 3))
        self.assertEqual(pts.dtype, np.float64)

    def test_single(self):
        pts, single = as_points(np.array([1.0, 2.0, 3.0]))
        self.assertTrue(single)
        np.testing.assert_array_equal(pts, [[1.0, 2.0, 3.0]])

    def test_empty(self):
        pts, single = as_points([])
        self.assertFalse(single)
        self.assertEqual(pts.shape, (0, 3))

    def test_invalid(self):
        for bad in (np.ones(4), np.ones((2, 4)), np.ones((2, 3, 3)), 5.0):
            with self.assertRaises(ShapeMismatchError):
                as_points(bad)


class TestBroadcastPositions(unittest.TestCase):

    def test_default_origin(self):
        np.testing.assert_array_equal(broadcast_positions(None, 4), np.zeros((4, 3)))
        np.testing.assert_array_equal(broadcast_positions(np.empty((0, 3)), 4), np.zeros((4, 3)))

    def test_single_vector(self):
        out = broadcast_positions(np.array([1.0, 2.0, 3.0]), 3)
        np.testing.assert_array_equal(out, [[1.0, 2.0, 3.0]] * 3)
        out = broadcast_positions(np.array([[1.0, 2.0, 3.0]]), 3)
        self.assertEqual(out.shape, (3, 3))

    def test_one_to_one_is_copy(self):
        rx = np.arange(6.0).reshape(2, 3)
        out = broadcast_positions(rx, 2)
        np.testing.assert_array_equal(out, rx)
        out[0, 0] = 99.0
        self.assertEqual(rx[0, 0], 0.0)

    def test_count_mismatch(self):
        with self.assertRaises(ShapeMismatchError) as ctx:
            broadcast_positions(np.zeros((2, 3)), 5)
        self.assertIn("expected 0, 1 or 5", str(ctx.exception))

    def test_wrong_dimension(self):
        with self.assertRaises(ShapeMismatchError):
            broadcast_positions(np.zeros(2), 2)
        with self.assertRaises(ShapeMismatchError):
            broadcast_positions(np.zeros((2, 2)), 2)

    def test_zero_points(self):
        self.assertEqual(broadcast_positions(np.ones(3), 0).shape, (0, 3))
        with self.assertRaises(ShapeMismatchError):
            broadcast_positions(np.ones((2, 3)), 0)


class TestBroadcastRotations(unittest.TestCase):

    def test_default_identity(self):
        out = broadcast_rotations(None, 2)
        self.assertEqual(out.shape, (2, 3, 3))
        np.testing.assert_array_equal(out[1], np.eye(3))
        np.testing.assert_array_equal(broadcast_rotations(np.empty((0, 3, 3)), 2), out)

    def test_single_matrix(self):
        R = np.array([[0.0, 1.0, 0.0], [-1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        out = broadcast_rotations(R, 3)
        self.assertEqual(out.shape, (3, 3, 3))
        for M in out:
            np.testing.assert_array_equal(M, R)
        self.assertEqual(broadcast_rotations(R[np.newaxis], 3).shape, (3, 3, 3))

    def test_one_to_one(self):
        Rs = np.stack([np.eye(3), 2 * np.eye(3)])
        np.testing.assert_array_equal(broadcast_rotations(Rs, 2), Rs)

    def test_count_mismatch(self):
        with self.assertRaises(ShapeMismatchError) as ctx:
            broadcast_rotations(np.zeros((3, 3, 3)), 2)
        self.assertEqual(ctx.exception.name, "rotation")

    def test_wrong_dimension(self):
        with self.assertRaises(ShapeMismatchError):
            broadcast_rotations(np.eye(2), 1)
        with self.assertRaises(ShapeMismatchError):
            broadcast_rotations(np.zeros((2, 3, 2)), 2)


if __name__ == '__main__':
    unittest.main()
