#!/usr/bin/env python3
"""Test suite for the inverse geodesic problem"""

import math
import unittest

import numpy as np
import pytest
from scipy.integrate import quad

from pygeod.geodesic.direct import direct
from pygeod.geodesic.ellipsoid import WGS84, Ellipsoid
from pygeod.geodesic.inverse import astroid, gen_inverse, inverse, inverse_line
from pygeod.geodesic.masks import (
    ALL, AREA, AZIMUTH, DISTANCE, GEODESICSCALE, LONG_UNROLL, REDUCEDLENGTH,
    STANDARD,
)


class TestInverseKnownValues(unittest.TestCase):
    """Inverse problem against published reference solutions"""

    def test_jfk_to_cdg(self):
        r = inverse(WGS84, 40.6, -73.8, 49.01666667, 2.55)
        self.assertAlmostEqual(r.azi1, 53.47022, delta=0.5e-5)
        self.assertAlmostEqual(r.azi2, 111.59367, delta=0.5e-5)
        self.assertAlmostEqual(r.s12, 5853226, delta=0.5)

    def test_quarter_meridian(self):
        r = inverse(WGS84, 0, 0, 90, 0)
        self.assertAlmostEqual(r.s12, 10001965.7293, delta=1e-4)
        self.assertEqual(r.azi1, 0.0)
        self.assertEqual(r.azi2, 0.0)

    def test_one_degree_of_latitude(self):
        r = inverse(WGS84, 49, 2, 50, 2)
        self.assertAlmostEqual(r.s12, 111219.409, delta=1e-3)
        self.assertEqual(r.azi1, 0.0)

    def test_eccentric_near_antipodal(self):
        geod = Ellipsoid(6.4e6, -1 / 150.0)
        r = inverse(geod, 0.07476, 0, -0.07476, 180)
        self.assertAlmostEqual(r.azi1, 90.00078, delta=0.5e-5)
        self.assertAlmostEqual(r.azi2, 90.00078, delta=0.5e-5)
        self.assertAlmostEqual(r.s12, 20106193, delta=0.5)
        r = inverse(geod, 0.1, 0, -0.1, 180)
        self.assertAlmostEqual(r.azi1, 90.00105, delta=0.5e-5)
        self.assertAlmostEqual(r.azi2, 90.00105, delta=0.5e-5)
        self.assertAlmostEqual(r.s12, 20106193, delta=0.5)

    def test_nearly_coincident(self):
        r = inverse(WGS84, 36.493349428792, 0, 36.49334942879201, .0000008)
        self.assertAlmostEqual(r.s12, 0.072, delta=0.5e-3)

    def test_nearly_antipodal_meridians(self):
        cases = [
            (88.202499451857, -88.202499451857, 179.981022032992859592,
             20003898.214),
            (89.262080389218, -89.262080389218, 179.992207982775375662,
             20003925.854),
            (89.333123580033, -89.333123580032997687, 179.99295812360148422,
             20003926.881),
            (56.320923501171, -56.320923501171, 179.664747671772880215,
             19993558.287),
            (52.784459512564, -52.784459512563990912, 179.634407464943777557,
             19991596.095),
            (48.522876735459, -48.52287673545898293, 179.599720456223079643,
             19989144.774),
        ]
        for lat1, lat2, lon2, s12 in cases:
            r = inverse(WGS84, lat1, 0, lat2, lon2)
            self.assertAlmostEqual(r.s12, s12, delta=0.5e-3)

    def test_prolate_extreme(self):
        geod = Ellipsoid(89.8, -1.83)
        r = inverse(geod, 0, 0, -10, 160)
        self.assertAlmostEqual(r.azi1, 120.27, delta=1e-2)
        self.assertAlmostEqual(r.azi2, 105.15, delta=1e-2)
        self.assertAlmostEqual(r.s12, 266.7, delta=1e-1)

    def test_area_sphere(self):
        geod = Ellipsoid(6.4e6, 0)
        r = inverse(geod, 1, 2, 3, 4, AREA)
        self.assertAlmostEqual(r.S12, 49911046115.0, delta=0.5)

    def test_tiny_longitude_offset(self):
        r = inverse(WGS84, 5, 0.00000000000001, 10, 180)
        self.assertAlmostEqual(r.azi1, 0.000000000000035, delta=1.5e-14)
        self.assertAlmostEqual(r.azi2, 179.99999999999996, delta=1.5e-14)
        self.assertAlmostEqual(r.s12, 18345191.174332713, delta=5e-9)


class TestInverseEquatorial(unittest.TestCase):
    """Points on the equator on oblate, spherical and prolate ellipsoids"""

    def check(self, r, azi1, azi2, s12):
        self.assertAlmostEqual(r.azi1, azi1, delta=0.5e-5)
        self.assertAlmostEqual(r.azi2, azi2, delta=0.5e-5)
        self.assertAlmostEqual(r.s12, s12, delta=0.5)

    def test_oblate(self):
        self.check(inverse(WGS84, 0, 0, 0, 179), 90, 90, 19926189)
        self.check(inverse(WGS84, 0, 0, 0, 179.5), 55.96650, 124.03350, 19980862)
        self.check(inverse(WGS84, 0, 0, 0, 180), 0, 180, 20003931)
        self.check(inverse(WGS84, 0, 0, 1, 180), 0, 180, 19893357)

    def test_sphere(self):
        geod = Ellipsoid(6.4e6, 0)
        self.check(inverse(geod, 0, 0, 0, 179), 90, 90, 19994492)
        self.check(inverse(geod, 0, 0, 0, 180), 0, 180, 20106193)
        self.check(inverse(geod, 0, 0, 1, 180), 0, 180, 19994492)

    def test_prolate(self):
        geod = Ellipsoid(6.4e6, -1 / 300.0)
        self.check(inverse(geod, 0, 0, 0, 179), 90, 90, 19994492)
        self.check(inverse(geod, 0, 0, 0, 180), 90, 90, 20106193)
        self.check(inverse(geod, 0, 0, 0.5, 180), 33.02493, 146.97364, 20082617)
        self.check(inverse(geod, 0, 0, 1, 180), 0, 180, 20027270)


class TestInverseBehaviour(unittest.TestCase):
    """Canonicalization, output selection and degenerate input"""

    def test_nan_latitude(self):
        for args in [(math.nan, 0, 0, 90), (0, 0, math.nan, 90)]:
            r = inverse(WGS84, *args)
            self.assertTrue(math.isnan(r.azi1))
            self.assertTrue(math.isnan(r.azi2))
            self.assertTrue(math.isnan(r.s12))

    def test_infinite_longitude(self):
        r = inverse(WGS84, 0, 0, 1, math.inf)
        self.assertTrue(math.isnan(r.azi1))
        self.assertTrue(math.isnan(r.azi2))
        self.assertTrue(math.isnan(r.s12))

    def test_longitudes(self):
        r = inverse(WGS84, 0, 539, 0, 181)
        self.assertAlmostEqual(r.lon1, 179, delta=1e-10)
        self.assertAlmostEqual(r.lon2, -179, delta=1e-10)
        self.assertAlmostEqual(r.s12, 222639, delta=0.5)
        r = inverse(WGS84, 0, 539, 0, 181, STANDARD | LONG_UNROLL)
        self.assertAlmostEqual(r.lon1, 539, delta=1e-10)
        self.assertAlmostEqual(r.lon2, 541, delta=1e-10)
        self.assertAlmostEqual(r.s12, 222639, delta=0.5)

    def test_coincident(self):
        r = inverse(WGS84, 20.001, 0, 20.001, 0, ALL)
        self.assertEqual(r.s12, 0.0)
        self.assertEqual(r.a12, 0.0)
        self.assertEqual(r.m12, 0.0)
        self.assertAlmostEqual(r.M12, 1.0, places=15)
        self.assertFalse(math.copysign(1.0, r.s12) < 0)

    def test_poles(self):
        r = inverse(WGS84, 90, 0, 90, 180)
        self.assertAlmostEqual(r.s12, 0.0, places=6)
        r = inverse(WGS84, 90, 0, -90, 0)
        self.assertAlmostEqual(r.s12, 2 * 10001965.7293, delta=2e-4)

    def test_output_mask(self):
        r = inverse(WGS84, 10, 20, 30, 40, DISTANCE)
        self.assertIsNotNone(r.s12)
        self.assertIsNone(r.m12)
        self.assertIsNone(r.S12)
        self.assertIsNotNone(r.azi1)
        self.assertIsNotNone(r.a12)
        r = inverse(WGS84, 10, 20, 30, 40, REDUCEDLENGTH | GEODESICSCALE)
        self.assertIsNone(r.s12)
        self.assertIsNotNone(r.m12)
        self.assertIsNotNone(r.M21)

    def test_gen_inverse(self):
        a12, salp1, calp1, salp2, calp2, r = gen_inverse(
            WGS84, 10, 20, 30, 40, AZIMUTH)
        self.assertAlmostEqual(salp1**2 + calp1**2, 1.0, places=15)
        self.assertAlmostEqual(salp2**2 + calp2**2, 1.0, places=15)
        self.assertEqual(a12, r.a12)
        self.assertAlmostEqual(math.degrees(math.atan2(salp1, calp1)),
                               inverse(WGS84, 10, 20, 30, 40).azi1, places=12)

    def test_symmetry(self):
        r = inverse(WGS84, 10, 20, -35, 160, ALL)
        q = inverse(WGS84, -35, 160, 10, 20, ALL)
        self.assertAlmostEqual(r.s12, q.s12, delta=1e-8)
        self.assertAlmostEqual(r.m12, q.m12, delta=1e-8)
        self.assertAlmostEqual(r.M12, q.M21, places=14)
        self.assertAlmostEqual(r.S12, -q.S12, delta=0.1)
        self.assertAlmostEqual(math.remainder(r.azi1 - (q.azi2 + 180), 360), 0,
                               places=10)

    def test_inverse_line(self):
        line = inverse_line(WGS84, 40.6, -73.8, 49.01666667, 2.55)
        self.assertAlmostEqual(line.distance, 5853226, delta=0.5)
        p = line.position(line.distance)
        self.assertAlmostEqual(p.lat2, 49.01666667, places=9)
        self.assertAlmostEqual(p.lon2, 2.55, places=9)
        self.assertAlmostEqual(line.azi1, 53.47022, delta=0.5e-5)


class TestAstroid(unittest.TestCase):
    """Test the quartic solved for the antipodal starting guess"""

    def test_root(self):
        for x, y in [(-1.2, 0.3), (0.5, -0.2), (-0.9, 1.5), (2.0, 2.0)]:
            k = astroid(x, y)
            self.assertGreater(k, 0)
            residual = (k**4 + 2 * k**3 - (x**2 + y**2 - 1) * k**2
                        - 2 * y**2 * k - y**2)
            self.assertAlmostEqual(residual, 0.0, places=12)

    def test_degenerate(self):
        self.assertEqual(astroid(0.5, 0.0), 0.0)
        self.assertEqual(astroid(-1.0, 0.0), 0.0)


def test_meridian_arc_against_quadrature():
    # meridian distance = integral of the meridional radius of curvature
    a, e2 = WGS84.a, WGS84.e2

    def radius(phi):
        return a * (1 - e2) / (1 - e2 * np.sin(phi)**2)**1.5

    for lat in [1.0, 15.0, 45.0, 60.0, 89.0]:
        expected, _ = quad(radius, 0.0, np.radians(lat), epsabs=1e-9,
                           epsrel=1e-14)
        r = inverse(WGS84, 0, 10, lat, 10)
        assert r.s12 == pytest.approx(expected, abs=1e-5)


def geodesic_by_quadrature(ellipsoid, lat1, azi1, sig12):
    """End latitude (deg), longitude difference (deg) and length (m) of a
    geodesic, from the exact integrals on the auxiliary sphere"""
    f = ellipsoid.f
    bet1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    alp1 = math.radians(azi1)
    salp0 = math.sin(alp1) * math.cos(bet1)
    calp0 = math.hypot(math.cos(alp1), math.sin(alp1) * math.sin(bet1))
    sig1 = math.atan2(math.sin(bet1), math.cos(alp1) * math.cos(bet1))
    sig2 = sig1 + sig12
    k2 = calp0**2 * ellipsoid.ep2

    def ds(sig):
        return math.sqrt(1 + k2 * math.sin(sig)**2)

    def dlam(sig):
        return (2 - f) / (1 + (1 - f) * ds(sig))

    i1, _ = quad(ds, sig1, sig2, epsabs=0, epsrel=1e-14, limit=200)
    i3, _ = quad(dlam, sig1, sig2, epsabs=0, epsrel=1e-14, limit=200)

    ssig2, csig2 = math.sin(sig2), math.cos(sig2)
    # omg12 unrolled through any number of turns
    E = math.copysign(1.0, salp0)
    omg12 = E * (sig12 - (math.atan2(ssig2, csig2) - sig1)
                 + (math.atan2(E * salp0 * ssig2, csig2)
                    - math.atan2(E * salp0 * math.sin(sig1), math.cos(sig1))))
    lam12 = omg12 - f * salp0 * i3

    sbet2 = calp0 * ssig2
    cbet2 = math.hypot(salp0, calp0 * csig2)
    lat2 = math.degrees(math.atan2(sbet2, (1 - f) * cbet2))
    return lat2, math.degrees(lam12), ellipsoid.b * i1


@pytest.mark.parametrize("lat1", [-60.0, -15.0, 0.0, 3.0, 45.0])
def test_antipodal_eccentric(lat1):
    # near-antipodal pairs on an ellipsoid with f = 1/50 converge to the
    # geodesic given by direct integration
    geod = Ellipsoid(6.4e6, 1 / 50.0)
    for dlat, dlon in [(0.0, 0.0), (1e-6, 0.0), (0.0, 1e-6), (3e-7, -8e-7)]:
        lat2 = -lat1 + dlat
        lon2 = 180.0 + dlon
        r = inverse(geod, lat1, 0.0, lat2, lon2)
        assert r.is_valid
        lat2_ref, lon12_ref, s12_ref = geodesic_by_quadrature(
            geod, lat1, r.azi1, math.radians(r.a12))
        assert r.s12 == pytest.approx(s12_ref, rel=1e-10)
        assert lat2_ref == pytest.approx(lat2, abs=1e-9)
        assert math.remainder(lon12_ref - lon2, 360) == pytest.approx(0, abs=1e-9)
        back = direct(geod, lat1, 0.0, r.azi1, r.s12)
        assert back.lat2 == pytest.approx(lat2, abs=1e-9)
        assert math.remainder(back.lon2 - lon2, 360) == pytest.approx(0, abs=1e-9)


def test_quadrature_reference_on_known_case():
    # the integration reproduces the published JFK to CDG geodesic
    r = inverse(WGS84, 40.6, -73.8, 49.01666667, 2.55)
    lat2, lon12, s12 = geodesic_by_quadrature(
        WGS84, 40.6, r.azi1, math.radians(r.a12))
    assert s12 == pytest.approx(5853226, abs=0.5)
    assert lat2 == pytest.approx(49.01666667, abs=1e-9)
    assert lon12 == pytest.approx(2.55 + 73.8, abs=1e-9)



def test_near_antipodal_wgs84():
    r = inverse(WGS84, -30, 0, 29.9, 179.8)
    assert r.is_valid
    assert 1.99e7 < r.s12 < 2.01e7
    back = direct(WGS84, -30, 0, r.azi1, r.s12)
    assert back.lat2 == pytest.approx(29.9, abs=1e-8)
    assert back.lon2 == pytest.approx(179.8, abs=1e-8)


def test_short_line_branch():
    # really short lines are solved without iteration
    r = inverse(WGS84, 10, 20, 10 + 1e-9, 20 + 1e-9, ALL)
    assert 0 < r.s12 < 1.0
    assert r.m12 == pytest.approx(r.s12, rel=1e-9)
    back = direct(WGS84, 10, 20, r.azi1, r.s12)
    assert back.lat2 == pytest.approx(10 + 1e-9, abs=1e-13)
