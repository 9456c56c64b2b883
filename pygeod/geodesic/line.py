# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Geodesic line through a point with a given azimuth"""

import math

from ..core.constants import D2R, NC1, NC1P, NC2, NC3, NC4, TINY
from ..core.data_structures import GeodesicResult
from ..core.geomath import (
    ang_normalize,
    ang_round,
    atan2d,
    lat_fix,
    norm2,
    sincosd,
    sq,
)
from ..core.series import sin_cos_series
from .coefficients import a1m1f, a2m1f, c1f, c1pf, c2f
from .masks import (
    AREA,
    AZIMUTH,
    DISTANCE,
    DISTANCE_IN,
    GEODESICSCALE,
    LATITUDE,
    LONG_UNROLL,
    LONGITUDE,
    REDUCEDLENGTH,
    STANDARD,
    GeodesicMask,
)

_CAP_C1 = GeodesicMask.CAP_C1
_CAP_C1p = GeodesicMask.CAP_C1p
_CAP_C2 = GeodesicMask.CAP_C2
_CAP_C3 = GeodesicMask.CAP_C3
_CAP_C4 = GeodesicMask.CAP_C4
_OUT_ALL = GeodesicMask.OUT_ALL


class GeodesicLine:
    """A geodesic starting at a given point with a given azimuth

    The constructor evaluates everything that depends only on the starting
    point, so positions at many distances along the same geodesic are cheap
    to compute.  Only the series required by ``caps`` are evaluated; asking
    for an output that was not included in ``caps`` leaves that field of
    the result unset.

    Apart from the optional target distance set with set_distance or
    set_arc the line is immutable.
    """

    def __init__(self, ellipsoid, lat1: float, lon1: float, azi1: float,
                 caps: int = STANDARD | DISTANCE_IN,
                 salp1: float = math.nan, calp1: float = math.nan):
        """Initialize geodesic line

        Parameters:
        -----------
        ellipsoid : Ellipsoid
            Ellipsoid on which the line lies
        lat1, lon1 : float
            Starting point (deg); a latitude outside [-90, 90] gives NaN
        azi1 : float
            Azimuth at the starting point (deg)
        caps : int
            GeodesicMask of the capabilities the line must support;
            0 means DISTANCE_IN | LONGITUDE.  LATITUDE, AZIMUTH and
            LONG_UNROLL are always included.
        salp1, calp1 : float
            Sine and cosine of azi1, when already known (used by the
            inverse solver to avoid a round trip through degrees)
        """
        self._ellipsoid = ellipsoid
        self.a = ellipsoid.a
        self.f = ellipsoid.f
        self.b = ellipsoid.b
        self.c2 = ellipsoid.c2
        self.f1 = ellipsoid.f1
        self.caps = int((caps if caps else DISTANCE_IN | LONGITUDE) |
                        LATITUDE | AZIMUTH | LONG_UNROLL)

        self.lat1 = lat_fix(lat1)
        self.lon1 = lon1
        if math.isnan(salp1) or math.isnan(calp1):
            self.azi1 = ang_normalize(azi1)
            # guard against underflow in salp0
            self.salp1, self.calp1 = sincosd(ang_round(self.azi1))
        else:
            self.azi1 = azi1
            self.salp1 = salp1
            self.calp1 = calp1

        sbet1, cbet1 = sincosd(ang_round(self.lat1))
        sbet1 *= self.f1
        # ensure cbet1 = +epsilon at poles
        sbet1, cbet1 = norm2(sbet1, cbet1)
        cbet1 = max(TINY, cbet1)
        self.dn1 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet1))

        # sin(alp1) * cos(bet1) = sin(alp0), alp0 in [0, pi/2 - |bet1|]
        self.salp0 = self.salp1 * cbet1
        self.calp0 = math.hypot(self.calp1, self.salp1 * sbet1)
        # tan(bet1) = tan(sig1) * cos(alp1), sig = 0 at the northward
        # equator crossing; tan(omg1) = sin(alp0) * tan(sig1).  No atan2(0,0)
        # ambiguity at the poles since cbet1 = +epsilon.
        self.ssig1 = sbet1
        self.somg1 = self.salp0 * sbet1
        self.csig1 = self.comg1 = (cbet1 * self.calp1
                                   if sbet1 != 0 or self.calp1 != 0 else 1.0)
        self.ssig1, self.csig1 = norm2(self.ssig1, self.csig1)  # sig1 in (-pi, pi]
        # somg1, comg1 need not be normalized

        self.k2 = sq(self.calp0) * ellipsoid.ep2
        eps = self.k2 / (2 * (1 + math.sqrt(1 + self.k2)) + self.k2)

        if self.caps & _CAP_C1:
            self.A1m1 = a1m1f(eps)
            self.C1a = c1f(eps)
            self.B11 = sin_cos_series(True, self.ssig1, self.csig1, self.C1a, NC1)
            s = math.sin(self.B11)
            c = math.cos(self.B11)
            # tau1 = sig1 + B11
            self.stau1 = self.ssig1 * c + self.csig1 * s
            self.ctau1 = self.csig1 * c - self.ssig1 * s

        if self.caps & _CAP_C1p:
            self.C1pa = c1pf(eps)

        if self.caps & _CAP_C2:
            self.A2m1 = a2m1f(eps)
            self.C2a = c2f(eps)
            self.B21 = sin_cos_series(True, self.ssig1, self.csig1, self.C2a, NC2)

        if self.caps & _CAP_C3:
            self.C3a = ellipsoid.c3f(eps)
            self.A3c = -self.f * self.salp0 * ellipsoid.a3f(eps)
            self.B31 = sin_cos_series(True, self.ssig1, self.csig1, self.C3a, NC3 - 1)

        if self.caps & _CAP_C4:
            self.C4a = ellipsoid.c4f(eps)
            # multiplier = a^2 * e^2 * cos(alpha0) * sin(alpha0)
            self.A4 = sq(self.a) * self.calp0 * self.salp0 * ellipsoid.e2
            self.B41 = sin_cos_series(False, self.ssig1, self.csig1, self.C4a, NC4)

        self.s13 = math.nan
        self.a13 = math.nan

    @property
    def ellipsoid(self):
        """Ellipsoid of the line"""
        return self._ellipsoid

    @property
    def distance(self) -> float:
        """Distance to the target point, NaN if not set (m)"""
        return self.s13

    @property
    def arc(self) -> float:
        """Arc length to the target point, NaN if not set (deg)"""
        return self.a13

    def capabilities(self, testcaps: int = GeodesicMask.ALL) -> bool:
        """Check whether the line supports all of testcaps"""
        testcaps = int(testcaps) & int(GeodesicMask.OUT_ALL)
        return (self.caps & testcaps) == testcaps

    def gen_position(self, arcmode: bool, s12_a12: float,
                     outmask: int = STANDARD) -> GeodesicResult:
        """Compute a point on the line

        Parameters:
        -----------
        arcmode : bool
            Interpret s12_a12 as an arc length (deg) rather than a
            distance (m)
        s12_a12 : float
            Distance or arc length from the starting point
        outmask : int
            GeodesicMask of the requested outputs; LONG_UNROLL keeps the
            longitude continuous instead of reducing it to [-180, 180]

        Returns:
        --------
        GeodesicResult
            lat1, lon1, azi1 and a12 are always set; other fields as
            requested.  If a distance is given but the line was built
            without DISTANCE_IN, the result holds NaN.
        """
        outmask = int(outmask) & self.caps & int(_OUT_ALL | LONG_UNROLL)
        result = GeodesicResult(lat1=self.lat1, azi1=self.azi1,
                                a12=math.nan)
        result.lon1 = (self.lon1 if outmask & LONG_UNROLL
                       else ang_normalize(self.lon1))

        if not (arcmode or (self.caps & DISTANCE_IN & _OUT_ALL)):
            # impossible distance calculation requested
            self._fill_nan(result, outmask)
            return result
        if math.isinf(s12_a12):
            s12_a12 = math.nan

        B12 = 0.0
        AB1 = 0.0
        if arcmode:
            sig12 = s12_a12 * D2R
            ssig12, csig12 = sincosd(s12_a12)
        else:
            tau12 = s12_a12 / (self.b * (1 + self.A1m1))
            s = math.sin(tau12)
            c = math.cos(tau12)
            # tau2 = tau1 + tau12
            B12 = -sin_cos_series(True,
                                  self.stau1 * c + self.ctau1 * s,
                                  self.ctau1 * c - self.stau1 * s,
                                  self.C1pa, NC1P)
            sig12 = tau12 - (B12 - self.B11)
            ssig12 = math.sin(sig12)
            csig12 = math.cos(sig12)
            if abs(self.f) > 0.01:
                # the reverted distance series is inaccurate for
                # |f| > 1/100, so correct sig12 with one Newton iteration
                ssig2 = self.ssig1 * csig12 + self.csig1 * ssig12
                csig2 = self.csig1 * csig12 - self.ssig1 * ssig12
                B12 = sin_cos_series(True, ssig2, csig2, self.C1a, NC1)
                serr = ((1 + self.A1m1) * (sig12 + (B12 - self.B11)) -
                        s12_a12 / self.b)
                sig12 = sig12 - serr / math.sqrt(1 + self.k2 * sq(ssig2))
                ssig12 = math.sin(sig12)
                csig12 = math.cos(sig12)
                # B12 is updated below

        # sig2 = sig1 + sig12
        ssig2 = self.ssig1 * csig12 + self.csig1 * ssig12
        csig2 = self.csig1 * csig12 - self.ssig1 * ssig12
        dn2 = math.sqrt(1 + self.k2 * sq(ssig2))
        if outmask & (DISTANCE | REDUCEDLENGTH | GEODESICSCALE):
            if arcmode or abs(self.f) > 0.01:
                B12 = sin_cos_series(True, ssig2, csig2, self.C1a, NC1)
            AB1 = (1 + self.A1m1) * (B12 - self.B11)
        # sin(bet2) = cos(alp0) * sin(sig2)
        sbet2 = self.calp0 * ssig2
        cbet2 = math.hypot(self.salp0, self.calp0 * csig2)
        if cbet2 == 0:
            # salp0 = 0 and csig2 = 0; break the degeneracy
            cbet2 = csig2 = TINY
        # tan(alp0) = cos(sig2) * tan(alp2)
        salp2 = self.salp0
        calp2 = self.calp0 * csig2

        if outmask & DISTANCE & _OUT_ALL:
            result.s12 = (self.b * ((1 + self.A1m1) * sig12 + AB1)
                          if arcmode else s12_a12)

        if outmask & LONGITUDE & _OUT_ALL:
            E = math.copysign(1, self.salp0)  # east or west going
            # tan(omg2) = sin(alp0) * tan(sig2)
            somg2 = self.salp0 * ssig2
            comg2 = csig2
            if outmask & LONG_UNROLL:
                omg12 = E * (sig12
                             - (math.atan2(ssig2, csig2) -
                                math.atan2(self.ssig1, self.csig1))
                             + (math.atan2(E * somg2, comg2) -
                                math.atan2(E * self.somg1, self.comg1)))
            else:
                omg12 = math.atan2(somg2 * self.comg1 - comg2 * self.somg1,
                                   comg2 * self.comg1 + somg2 * self.somg1)
            lam12 = omg12 + self.A3c * (
                sig12 + (sin_cos_series(True, ssig2, csig2, self.C3a, NC3 - 1)
                         - self.B31))
            lon12 = lam12 / D2R
            if outmask & LONG_UNROLL:
                result.lon2 = self.lon1 + lon12
            else:
                result.lon2 = ang_normalize(ang_normalize(self.lon1) +
                                            ang_normalize(lon12))

        if outmask & LATITUDE & _OUT_ALL:
            result.lat2 = atan2d(sbet2, self.f1 * cbet2)

        if outmask & AZIMUTH & _OUT_ALL:
            result.azi2 = atan2d(salp2, calp2)

        if outmask & (REDUCEDLENGTH | GEODESICSCALE) & _OUT_ALL:
            B22 = sin_cos_series(True, ssig2, csig2, self.C2a, NC2)
            AB2 = (1 + self.A2m1) * (B22 - self.B21)
            J12 = (self.A1m1 - self.A2m1) * sig12 + (AB1 - AB2)
            if outmask & REDUCEDLENGTH & _OUT_ALL:
                # parens around (csig1 * ssig2) and (ssig1 * csig2) for
                # accurate cancellation with coincident points
                result.m12 = self.b * ((dn2 * (self.csig1 * ssig2) -
                                        self.dn1 * (self.ssig1 * csig2))
                                       - self.csig1 * csig2 * J12)
            if outmask & GEODESICSCALE & _OUT_ALL:
                t = (self.k2 * (ssig2 - self.ssig1) * (ssig2 + self.ssig1) /
                     (self.dn1 + dn2))
                result.M12 = (csig12 +
                              (t * ssig2 - csig2 * J12) * self.ssig1 / self.dn1)
                result.M21 = (csig12 -
                              (t * self.ssig1 - self.csig1 * J12) * ssig2 / dn2)

        if outmask & AREA & _OUT_ALL:
            B42 = sin_cos_series(False, ssig2, csig2, self.C4a, NC4)
            if self.calp0 == 0 or self.salp0 == 0:
                # alp12 = alp2 - alp1, used in atan2 so no need to normalize
                salp12 = salp2 * self.calp1 - calp2 * self.salp1
                calp12 = calp2 * self.calp1 + salp2 * self.salp1
            else:
                # tan(alp2 - alp1) from tan(alp) = tan(alp0) * sec(sig), with
                # csig1 - csig2 rewritten to avoid cancellation
                if csig12 <= 0:
                    dcsig = self.csig1 * (1 - csig12) + ssig12 * self.ssig1
                else:
                    dcsig = ssig12 * (self.csig1 * ssig12 / (1 + csig12) +
                                      self.ssig1)
                salp12 = self.calp0 * self.salp0 * dcsig
                calp12 = sq(self.salp0) + sq(self.calp0) * self.csig1 * csig2
            result.S12 = (self.c2 * math.atan2(salp12, calp12) +
                          self.A4 * (B42 - self.B41))

        result.a12 = s12_a12 if arcmode else sig12 / D2R
        return result

    @staticmethod
    def _fill_nan(result, outmask):
        if outmask & LATITUDE & _OUT_ALL:
            result.lat2 = math.nan
        if outmask & LONGITUDE & _OUT_ALL:
            result.lon2 = math.nan
        if outmask & AZIMUTH & _OUT_ALL:
            result.azi2 = math.nan
        if outmask & DISTANCE & _OUT_ALL:
            result.s12 = math.nan
        if outmask & REDUCEDLENGTH & _OUT_ALL:
            result.m12 = math.nan
        if outmask & GEODESICSCALE & _OUT_ALL:
            result.M12 = result.M21 = math.nan
        if outmask & AREA & _OUT_ALL:
            result.S12 = math.nan

    def position(self, s12: float, outmask: int = STANDARD) -> GeodesicResult:
        """Compute the point at distance s12 (m) from the start"""
        return self.gen_position(False, s12, outmask)

    def arc_position(self, a12: float, outmask: int = STANDARD) -> GeodesicResult:
        """Compute the point at arc length a12 (deg) from the start"""
        return self.gen_position(True, a12, outmask)

    def set_distance(self, s13: float):
        """Set the distance to the target point (m)"""
        self.s13 = s13
        self.a13 = self.gen_position(False, s13, GeodesicMask.EMPTY).a12

    def set_arc(self, a13: float):
        """Set the arc length to the target point (deg)"""
        self.a13 = a13
        self.s13 = self.gen_position(True, a13, DISTANCE).s12
        if self.s13 is None:
            self.s13 = math.nan

    def gen_set_distance(self, arcmode: bool, s13_a13: float):
        """Set the target point by distance or by arc length"""
        if arcmode:
            self.set_arc(s13_a13)
        else:
            self.set_distance(s13_a13)

    def __repr__(self):
        return (f"GeodesicLine(lat1={self.lat1!r}, lon1={self.lon1!r}, "
                f"azi1={self.azi1!r}, caps={self.caps:#x})")
