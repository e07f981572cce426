#!/usr/bin/env python3
"""Test suite for data structures"""

import unittest

import numpy as np

from pyuvw.core.data_structures import DegeneratePolicy, ReceiverPose, stack_poses
from pyuvw.core.exceptions import ConfigurationError, DegenerateGeometryError, PyUVWError, ShapeMismatchError


class TestReceiverPose(unittest.TestCase):
    """Test receiver pose data structure"""

    def test_defaults(self):
        """Default pose sits at the origin aligned with the global frame"""
        pose = ReceiverPose()
        np.testing.assert_array_equal(pose.position, np.zeros(3))
        np.testing.assert_array_equal(pose.rotation, np.eye(3))
        np.testing.assert_array_equal(pose.boresight, [0.0, 0.0, 1.0])

    def test_defaults_not_shared(self):
        a = ReceiverPose()
        b = ReceiverPose()
        a.position[0] = 5.0
        self.assertEqual(b.position[0], 0.0)

    def test_inputs_copied(self):
        pos = np.array([1.0, 2.0, 3.0])
        pose = ReceiverPose(pos)
        pos[0] = 100.0
        self.assertEqual(pose.position[0], 1.0)

    def test_boresight_is_third_row(self):
        R = np.array([[0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [1.0, 0.0, 0.0]])
        pose = ReceiverPose([0, 0, 0], R)
        np.testing.assert_array_equal(pose.boresight, [1.0, 0.0, 0.0])

    def test_to_local(self):
        R = np.array([[0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [1.0, 0.0, 0.0]])
        pose = ReceiverPose([1.0, 1.0, 1.0], R)
        np.testing.assert_allclose(pose.to_local([5.0, 1.0, 1.0]), [0.0, 0.0, 4.0])

    def test_bad_shapes(self):
        with self.assertRaises(ShapeMismatchError):
            ReceiverPose([1.0, 2.0])
        with self.assertRaises(ShapeMismatchError):
            ReceiverPose([0.0, 0.0, 0.0], np.eye(2))

    def test_stack_poses(self):
        poses = [ReceiverPose([i, 0.0, 0.0]) for i in range(4)]
        positions, rotations = stack_poses(poses)
        self.assertEqual(positions.shape, (4, 3))
        self.assertEqual(rotations.shape, (4, 3, 3))
        np.testing.assert_array_equal(positions[:, 0], [0.0, 1.0, 2.0, 3.0])

    def test_stack_no_poses(self):
        positions, rotations = stack_poses([])
        self.assertEqual(positions.shape, (0, 3))
        self.assertEqual(rotations.shape, (0, 3, 3))


class TestDegeneratePolicy(unittest.TestCase):

    def test_parse(self):
        self.assertIs(DegeneratePolicy.parse('raise'), DegeneratePolicy.RAISE)
        self.assertIs(DegeneratePolicy.parse('NAN'), DegeneratePolicy.NAN)
        self.assertIs(DegeneratePolicy.parse(DegeneratePolicy.NAN), DegeneratePolicy.NAN)

    def test_parse_unknown(self):
        with self.assertRaises(ConfigurationError):
            DegeneratePolicy.parse('zero')


class TestPackageNamespace(unittest.TestCase):

    def test_constants_do_not_leak_numpy(self):
        import pyuvw
        import pyuvw.core
        from pyuvw.core import constants

        self.assertNotIn('np', constants.__all__)
        self.assertFalse(hasattr(pyuvw.core, 'np'))
        self.assertFalse(hasattr(pyuvw, 'np'))
        self.assertTrue(hasattr(pyuvw, 'IDENTITY'))


class TestExceptions(unittest.TestCase):

    def test_hierarchy(self):
        for exc in (ShapeMismatchError, DegenerateGeometryError, ConfigurationError):
            self.assertTrue(issubclass(exc, PyUVWError))
            self.assertTrue(issubclass(exc, ValueError))

    def test_degenerate_message_truncates(self):
        err = DegenerateGeometryError(range(25))
        self.assertEqual(len(err.indices), 25)
        self.assertIn("25 point(s)", str(err))
        self.assertIn("...", str(err))


if __name__ == '__main__':
    unittest.main()
