#!/usr/bin/env python3
"""Test suite for angle arithmetic"""

import math
import unittest

import numpy as np

from pygeod.core.geomath import (
    ang_diff, ang_normalize, ang_round, atan2d, lat_fix, norm2,
    remainder, sincosd, sincosde, sum_x,
)


def signbit(x):
    return math.copysign(1.0, x) < 0


class TestSum(unittest.TestCase):
    """Test error-free summation"""

    def test_exact_error(self):
        s, t = sum_x(1.0, 2.0**-60)
        self.assertEqual(s, 1.0)
        self.assertEqual(t, 2.0**-60)

    def test_no_error(self):
        s, t = sum_x(0.5, 0.25)
        self.assertEqual(s, 0.75)
        self.assertEqual(t, 0.0)

    def test_zero_sum(self):
        s, t = sum_x(1.5, -1.5)
        self.assertEqual(s, 0.0)
        self.assertEqual(t, 0.0)


class TestAngles(unittest.TestCase):
    """Test angle reduction and differencing"""

    def test_remainder_non_finite(self):
        self.assertTrue(math.isnan(remainder(math.inf, 360.0)))
        self.assertTrue(math.isnan(remainder(math.nan, 360.0)))
        self.assertEqual(remainder(370.0, 360.0), 10.0)

    def test_ang_normalize(self):
        self.assertEqual(ang_normalize(0.0), 0.0)
        self.assertEqual(ang_normalize(190.0), -170.0)
        self.assertEqual(ang_normalize(-190.0), 170.0)
        self.assertEqual(ang_normalize(180.0), 180.0)
        self.assertEqual(ang_normalize(-180.0), -180.0)
        self.assertEqual(ang_normalize(540.0), 180.0)
        self.assertEqual(ang_normalize(-540.0), -180.0)
        self.assertEqual(ang_normalize(720.0), 0.0)
        self.assertTrue(math.isnan(ang_normalize(math.inf)))

    def test_lat_fix(self):
        self.assertEqual(lat_fix(90.0), 90.0)
        self.assertEqual(lat_fix(-90.0), -90.0)
        self.assertTrue(math.isnan(lat_fix(90.5)))
        self.assertTrue(math.isnan(lat_fix(-91.0)))
        self.assertTrue(math.isnan(lat_fix(math.nan)))

    def test_ang_diff(self):
        self.assertEqual(ang_diff(179.0, -179.0), (2.0, 0.0))
        self.assertEqual(ang_diff(-179.0, 179.0), (-2.0, 0.0))
        self.assertEqual(ang_diff(10.0, 370.0)[0], 0.0)

    def test_ang_diff_half_turn_sign(self):
        # the sign of a +-180 result follows y - x
        self.assertEqual(ang_diff(0.0, 180.0)[0], 180.0)
        self.assertEqual(ang_diff(0.0, -180.0)[0], -180.0)

    def test_ang_diff_error_term(self):
        # 1e-20 is lost in the rounded difference but kept in the error
        d, e = ang_diff(-1e-20, 10.0)
        self.assertEqual(d, 10.0)
        self.assertEqual(e, 1e-20)

    def test_ang_round(self):
        self.assertEqual(ang_round(45.0), 45.0)
        self.assertEqual(ang_round(1e-20), 0.0)
        self.assertTrue(signbit(ang_round(-1e-20)))
        self.assertEqual(ang_round(-1e-20), 0.0)
        self.assertFalse(signbit(ang_round(0.0)))


class TestTrig(unittest.TestCase):
    """Test trigonometric functions in degrees"""

    def test_sincosd_exact(self):
        self.assertEqual(sincosd(0.0), (0.0, 1.0))
        self.assertEqual(sincosd(90.0), (1.0, 0.0))
        self.assertEqual(sincosd(180.0), (0.0, -1.0))
        self.assertEqual(sincosd(-90.0), (-1.0, 0.0))
        self.assertEqual(sincosd(270.0), (-1.0, 0.0))
        self.assertEqual(sincosd(720.0), (0.0, 1.0))

    def test_sincosd_signed_zero(self):
        s, c = sincosd(-0.0)
        self.assertTrue(signbit(s))
        self.assertEqual(c, 1.0)
        s, c = sincosd(-180.0)
        self.assertTrue(signbit(s))
        # cos is never -0
        s, c = sincosd(-90.0)
        self.assertFalse(signbit(c))
        s, c = sincosd(90.0)
        self.assertFalse(signbit(c))

    def test_sincosd_values(self):
        for x in np.linspace(-400.0, 400.0, 33):
            s, c = sincosd(x)
            self.assertAlmostEqual(s, np.sin(np.radians(x)), places=14)
            self.assertAlmostEqual(c, np.cos(np.radians(x)), places=14)

    def test_sincosd_non_finite(self):
        s, c = sincosd(math.inf)
        self.assertTrue(math.isnan(s))
        self.assertTrue(math.isnan(c))

    def test_sincosde(self):
        s, c = sincosde(30.0, 1e-10)
        self.assertAlmostEqual(s, np.sin(np.radians(30.0 + 1e-10)), places=15)
        self.assertAlmostEqual(c, np.cos(np.radians(30.0 + 1e-10)), places=15)
        self.assertEqual(sincosde(90.0, 0.0), (1.0, 0.0))

    def test_atan2d(self):
        self.assertEqual(atan2d(1.0, 0.0), 90.0)
        self.assertEqual(atan2d(-1.0, 0.0), -90.0)
        self.assertEqual(atan2d(0.0, -1.0), 180.0)
        self.assertEqual(atan2d(-0.0, -1.0), -180.0)
        self.assertEqual(atan2d(0.0, 1.0), 0.0)
        self.assertAlmostEqual(atan2d(1.0, 1.0), 45.0, places=13)
        self.assertAlmostEqual(atan2d(-1.0, -1.0), -135.0, places=13)

    def test_norm2(self):
        s, c = norm2(3.0, 4.0)
        self.assertAlmostEqual(s, 0.6, places=15)
        self.assertAlmostEqual(c, 0.8, places=15)


if __name__ == '__main__':
    unittest.main()
