import unittest

import numpy as np

from pyuvw.core.config import DEFAULT_CONFIG, ConversionConfig
from pyuvw.core.constants import ROTATION_TOL
from pyuvw.core.data_structures import DegeneratePolicy
from pyuvw.core.exceptions import ConfigurationError


class TestConversionConfig(unittest.TestCase):

    def test_defaults(self):
        self.assertFalse(DEFAULT_CONFIG.include_w)
        self.assertIs(DEFAULT_CONFIG.degenerate, DegeneratePolicy.RAISE)
        self.assertFalse(DEFAULT_CONFIG.check_rotation)
        self.assertEqual(DEFAULT_CONFIG.rotation_tol, ROTATION_TOL)

    def test_policy_string_is_parsed(self):
        config = ConversionConfig(degenerate='NaN')
        self.assertIs(config.degenerate, DegeneratePolicy.NAN)

    def test_unknown_policy(self):
        with self.assertRaises(ConfigurationError):
            ConversionConfig(degenerate='ignore')

    def test_invalid_tolerances(self):
        with self.assertRaises(ConfigurationError):
            ConversionConfig(rotation_tol=0.0)
        with self.assertRaises(ConfigurationError):
            ConversionConfig(zero_tol=-1.0)

    def test_flags_must_be_bool(self):
        for d in ({'include_w': 'false'}, {'check_rotation': 'no'}, {'include_w': 1},
                  {'check_rotation': None}):
            with self.assertRaises(ConfigurationError):
                ConversionConfig.from_dict(d)

    def test_numpy_bool_accepted(self):
        config = ConversionConfig(include_w=np.bool_(True))
        self.assertIs(config.include_w, True)

    def test_tolerances_must_be_real(self):
        for d in ({'rotation_tol': '1e-6'}, {'zero_tol': None}, {'rotation_tol': True},
                  {'rotation_tol': float('nan')}, {'zero_tol': float('inf')}):
            with self.assertRaises(ConfigurationError):
                ConversionConfig.from_dict(d)

    def test_integer_tolerance_normalised(self):
        config = ConversionConfig(rotation_tol=1, zero_tol=np.float32(0.5))
        self.assertIsInstance(config.rotation_tol, float)
        self.assertEqual(config.zero_tol, 0.5)

    def test_override_validates(self):
        with self.assertRaises(ConfigurationError):
            ConversionConfig().override(include_w='yes')

    def test_from_dict_round_trip(self):
        d = {'include_w': True, 'degenerate': 'nan', 'check_rotation': True,
             'rotation_tol': 1e-6, 'zero_tol': 1e-3}
        config = ConversionConfig.from_dict(d)
        self.assertEqual(config.to_dict(), d)

    def test_from_dict_unknown_key(self):
        with self.assertRaises(ConfigurationError) as ctx:
            ConversionConfig.from_dict({'include_w': True, 'tolerance': 1.0})
        self.assertIn('tolerance', str(ctx.exception))

    def test_override(self):
        config = ConversionConfig()
        self.assertIs(config.override(), config)
        changed = config.override(include_w=True, degenerate='nan')
        self.assertTrue(changed.include_w)
        self.assertIs(changed.degenerate, DegeneratePolicy.NAN)
        self.assertFalse(config.include_w)

    def test_frozen(self):
        with self.assertRaises(AttributeError):
            DEFAULT_CONFIG.include_w = True


if __name__ == '__main__':
    unittest.main()
