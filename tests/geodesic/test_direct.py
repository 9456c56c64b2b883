#!/usr/bin/env python3
"""Test suite for the direct geodesic problem"""

import math
import unittest

import numpy as np

from pygeod.geodesic.direct import (
    arc_direct, arc_direct_line, direct, direct_line, gen_direct,
)
from pygeod.geodesic.ellipsoid import WGS84, Ellipsoid
from pygeod.geodesic.inverse import inverse
from pygeod.geodesic.masks import (
    ALL, AREA, AZIMUTH, DISTANCE, LATITUDE, LONG_UNROLL, LONGITUDE,
    STANDARD,
)


class TestDirectKnownValues(unittest.TestCase):
    """Direct problem against published reference solutions"""

    def test_jfk_to_cdg(self):
        r = direct(WGS84, 40.63972222, -73.77888889, 53.5, 5850e3)
        self.assertAlmostEqual(r.lat2, 49.01467, delta=0.5e-5)
        self.assertAlmostEqual(r.lon2, 2.56106, delta=0.5e-5)
        self.assertAlmostEqual(r.azi2, 111.62947, delta=0.5e-5)

    def test_short_step(self):
        r = direct(WGS84, 40.0, -75.0, 45.0, 10000.0)
        self.assertAlmostEqual(r.lat2, 40.06365347268821, delta=1e-10)
        self.assertAlmostEqual(r.lon2, -74.91711764910883, delta=1e-10)
        # 10 km at 45 degrees moves about 7071 m north and east
        self.assertAlmostEqual((r.lat2 - 40.0) * 111035.0, 7071.0, delta=10.0)

    def test_through_pole(self):
        # azimuth 0 from near the equator reaches the pole after 1e7 m;
        # the longitude either stays or flips by 180 depending on rounding
        r = direct(WGS84, 0.01777745589997, 30, 0, 10e6)
        self.assertAlmostEqual(r.lat2, 90, delta=0.5e-5)
        if r.lon2 < 0:
            self.assertAlmostEqual(r.lon2, -150, delta=0.5e-5)
            self.assertAlmostEqual(abs(r.azi2), 180, delta=0.5e-5)
        else:
            self.assertAlmostEqual(r.lon2, 30, delta=0.5e-5)
            self.assertAlmostEqual(r.azi2, 0, delta=0.5e-5)

    def test_long_unroll(self):
        r = direct(WGS84, 40, -75, -10, 2e7, STANDARD | LONG_UNROLL)
        self.assertAlmostEqual(r.lat2, -39, delta=1)
        self.assertAlmostEqual(r.lon2, -254, delta=1)
        self.assertAlmostEqual(r.azi2, -170, delta=1)
        r = direct(WGS84, 40, -75, -10, 2e7)
        self.assertAlmostEqual(r.lat2, -39, delta=1)
        self.assertAlmostEqual(r.lon2, 105, delta=1)
        self.assertAlmostEqual(r.azi2, -170, delta=1)

    def test_tiny_negative_azimuth(self):
        r = direct(WGS84, 45, 0, -0.000000000000000003, 1e7,
                   STANDARD | LONG_UNROLL)
        self.assertAlmostEqual(r.lat2, 45.30632, delta=0.5e-5)
        self.assertAlmostEqual(r.lon2, -180, delta=0.5e-5)
        self.assertAlmostEqual(abs(r.azi2), 180, delta=0.5e-5)

    def test_from_pole(self):
        r = direct(WGS84, 90, 10, 180, -1e6)
        self.assertAlmostEqual(r.lat2, 81.04623, delta=0.5e-5)
        self.assertAlmostEqual(r.lon2, -170, delta=0.5e-5)
        self.assertAlmostEqual(r.azi2, 0, delta=0.5e-5)

    def test_area_prolate(self):
        geod = Ellipsoid(6.4e6, -1 / 150.0)
        r = direct(geod, 1, 2, 3, 4, AREA)
        self.assertAlmostEqual(r.S12, 23700, delta=0.5)

    def test_arc_length_eccentric(self):
        # |f| > 0.01 takes one Newton correction of the reverted series
        geod = Ellipsoid(6.4e6, 0.1)
        r = direct(geod, 1, 2, 10, 5e6)
        self.assertAlmostEqual(r.a12, 48.55570690, delta=0.5e-8)


class TestDirectBehaviour(unittest.TestCase):
    """Output selection and degenerate input"""

    def test_output_mask(self):
        r = direct(WGS84, 10, 20, 30, 1e5, LATITUDE)
        self.assertIsNotNone(r.lat2)
        self.assertIsNone(r.lon2)
        self.assertIsNone(r.s12)
        self.assertIsNone(r.S12)
        # a12 and the start point are always returned
        self.assertIsNotNone(r.a12)
        self.assertEqual((r.lat1, r.lon1, r.azi1), (10, 20, 30))

    def test_all_outputs(self):
        r = direct(WGS84, 10, 20, 30, 1e5, ALL)
        for value in r.to_dict().values():
            self.assertTrue(math.isfinite(value))
        self.assertEqual(r.s12, 1e5)
        # reduced length is close to the distance for short lines
        self.assertAlmostEqual(r.m12 / r.s12, 1.0, delta=1e-3)
        self.assertAlmostEqual(r.M12, 1.0, delta=1e-3)
        self.assertAlmostEqual(r.M21, 1.0, delta=1e-3)

    def test_zero_distance(self):
        r = direct(WGS84, 10, 20, 30, 0.0, ALL)
        self.assertAlmostEqual(r.lat2, 10, places=12)
        self.assertAlmostEqual(r.lon2, 20, places=12)
        self.assertAlmostEqual(r.azi2, 30, places=12)
        self.assertAlmostEqual(r.a12, 0.0, places=12)
        self.assertAlmostEqual(r.m12, 0.0, places=9)
        self.assertAlmostEqual(r.M12, 1.0, places=15)

    def test_invalid_latitude(self):
        r = direct(WGS84, 91, 0, 0, 1000)
        self.assertTrue(math.isnan(r.lat1))
        self.assertTrue(math.isnan(r.lat2))
        self.assertTrue(math.isnan(r.lon2))

    def test_infinite_distance(self):
        r = direct(WGS84, 10, 20, 30, math.inf)
        self.assertTrue(math.isnan(r.lat2))
        self.assertTrue(math.isnan(r.a12))

    def test_arc_direct_matches_direct(self):
        r = direct(WGS84, -20, 40, 75, 3e6, STANDARD)
        q = arc_direct(WGS84, -20, 40, 75, r.a12, STANDARD)
        self.assertAlmostEqual(q.s12, 3e6, delta=1e-6)
        self.assertAlmostEqual(q.lat2, r.lat2, places=12)
        self.assertAlmostEqual(q.lon2, r.lon2, places=12)
        self.assertAlmostEqual(q.azi2, r.azi2, places=12)

    def test_gen_direct(self):
        r = gen_direct(WGS84, 0, 0, 90, True, 90, LATITUDE | LONGITUDE | DISTANCE)
        # a quarter of the equator in arc length
        self.assertAlmostEqual(r.lat2, 0, places=12)
        self.assertAlmostEqual(r.lon2, 90 * (1 - WGS84.f), places=10)
        # arc length is measured on the auxiliary sphere of radius b
        self.assertAlmostEqual(r.s12, WGS84.b * math.pi / 2, delta=1e-6)

    def test_direct_line(self):
        line = direct_line(WGS84, 30, 40, 50, 1e6)
        self.assertEqual(line.distance, 1e6)
        r = direct(WGS84, 30, 40, 50, 1e6)
        self.assertAlmostEqual(line.arc, r.a12, places=12)
        line = arc_direct_line(WGS84, 30, 40, 50, r.a12)
        self.assertAlmostEqual(line.distance, 1e6, delta=1e-6)


def test_round_trip_random():
    rng = np.random.default_rng(42)
    for _ in range(200):
        lat1 = rng.uniform(-89.0, 89.0)
        lon1 = rng.uniform(-180.0, 180.0)
        azi1 = rng.uniform(-180.0, 180.0)
        s12 = rng.uniform(1.0, 1.9e7)
        r = direct(WGS84, lat1, lon1, azi1, s12, STANDARD | AZIMUTH)
        back = inverse(WGS84, lat1, lon1, r.lat2, r.lon2)
        np.testing.assert_allclose(back.s12, s12, rtol=0, atol=1e-6)
        np.testing.assert_allclose(back.azi1, azi1, rtol=0, atol=1e-9)
