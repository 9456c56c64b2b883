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

"""
Inverse geodesic problem.

Finds the shortest geodesic between two points.  The points are first
brought into a canonical configuration (point 1 on or south of the equator
with the larger absolute latitude and point 2 east of it); meridional and
equatorial geodesics are then solved in closed form, short lines from a
spherical approximation, and everything else by Newton's method on the
longitude difference with a bisection safeguard.  Nearly antipodal points
are bootstrapped from the solution of an astroid.

References:
    C. F. F. Karney, Algorithms for geodesics, J. Geodesy 87, 43-55 (2013)
"""

import math

import numpy as np

from ..core.constants import (
    D2R,
    HD,
    MAXIT1,
    MAXIT2,
    NC3,
    NC4,
    QD,
    TINY,
    TOL0,
    TOL1,
    TOLB,
    XTHRESH,
)
from ..core.data_structures import GeodesicResult
from ..core.geomath import (
    ang_diff,
    ang_normalize,
    ang_round,
    atan2d,
    lat_fix,
    norm2,
    sincosd,
    sincosde,
    sq,
)
from ..core.series import sin_cos_series
from ..logger import get_logger
from .lengths import lengths
from .line import GeodesicLine
from .masks import (
    AREA,
    DISTANCE,
    DISTANCE_IN,
    GEODESICSCALE,
    LONG_UNROLL,
    LONGITUDE,
    OUT_ALL,
    REDUCEDLENGTH,
    STANDARD,
)

logger = get_logger(__name__)


def astroid(x, y):
    """
    Solve the astroid equation for the near-antipodal starting guess.

    Finds the positive root k of

        k^4 + 2*k^3 - (x^2 + y^2 - 1)*k^2 - 2*y^2*k - y^2 = 0

    Returns 0 when y = 0 and x^2 <= 1 (the root is then on the boundary).
    """
    p = sq(x)
    q = sq(y)
    r = (p + q - 1) / 6
    if q == 0 and r <= 0:
        # for y = 0 and |x| <= 1 the root is degenerate; take k = 0
        return 0.0

    S = p * q / 4          # S = r^3 * s
    r2 = sq(r)
    r3 = r * r2
    # the discriminant of the quadratic equation for T3; zero on the
    # evolute curve p^(1/3) + q^(1/3) = 1
    disc = S * (S + 2 * r3)
    u = r
    if disc >= 0:
        T3 = S + r3
        # pick the sign on the sqrt to maximize abs(T3) and minimize
        # roundoff
        T3 += -math.sqrt(disc) if T3 < 0 else math.sqrt(disc)
        # N.B. cbrt always returns the real root; cbrt(-8) = -2
        T = float(np.cbrt(T3))
        # T can be zero; but then r2 / T -> 0
        u += T + (r2 / T if T != 0 else 0.0)
    else:
        # T is complex, but the way u is defined the result is real
        ang = math.atan2(math.sqrt(-disc), -(S + r3))
        # there are three possible cube roots; pick the one which gives the
        # largest u and remember r < 0 here
        u += 2 * r * math.cos(ang / 3)
    v = math.sqrt(sq(u) + q)  # guaranteed positive
    # avoid loss of accuracy when u < 0
    uv = q / (v - u) if u < 0 else u + v  # u+v, guaranteed positive
    w = (uv - q) / (2 * v)                # positive?
    # rearrange expression for k to avoid loss of accuracy due to
    # subtraction; division by 0 not possible because uv > 0, w >= 0
    return uv / (math.sqrt(uv + sq(w)) + w)


def _inverse_start(ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
                   lam12, slam12, clam12):
    """
    Starting guess for Newton's method.

    Returns (sig12, salp1, calp1, salp2, calp2, dnm).  A non-negative
    sig12 means the line is short enough for the spherical solution to be
    final, in which case salp2, calp2 and dnm are also valid.
    """
    f = ellipsoid.f
    sig12 = -1.0
    salp2 = calp2 = dnm = math.nan
    # bet12 = bet2 - bet1 in [0, pi); bet12a = bet2 + bet1 in (-pi, 0]
    sbet12 = sbet2 * cbet1 - cbet2 * sbet1
    cbet12 = cbet2 * cbet1 + sbet2 * sbet1
    sbet12a = sbet2 * cbet1 + cbet2 * sbet1
    shortline = cbet12 >= 0 and sbet12 < 0.5 and cbet2 * lam12 < 0.5
    if shortline:
        sbetm2 = sq(sbet1 + sbet2)
        # sin((bet1 + bet2) / 2)^2 = (sbet1 + sbet2)^2 /
        #     ((sbet1 + sbet2)^2 + (cbet1 + cbet2)^2)
        sbetm2 /= sbetm2 + sq(cbet1 + cbet2)
        dnm = math.sqrt(1 + ellipsoid.ep2 * sbetm2)
        omg12 = lam12 / (ellipsoid.f1 * dnm)
        somg12 = math.sin(omg12)
        comg12 = math.cos(omg12)
    else:
        somg12 = slam12
        comg12 = clam12

    salp1 = cbet2 * somg12
    if comg12 >= 0:
        calp1 = sbet12 + cbet2 * sbet1 * sq(somg12) / (1 + comg12)
    else:
        calp1 = sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)

    ssig12 = math.hypot(salp1, calp1)
    csig12 = sbet1 * sbet2 + cbet1 * cbet2 * comg12

    if shortline and ssig12 < ellipsoid.etol2:
        # really short lines
        salp2 = cbet1 * somg12
        calp2 = sbet12 - cbet1 * sbet2 * (
            sq(somg12) / (1 + comg12) if comg12 >= 0 else 1 - comg12)
        salp2, calp2 = norm2(salp2, calp2)
        # set return value
        sig12 = math.atan2(ssig12, csig12)
    elif (abs(ellipsoid.n) > 0.1 or  # no astroid calc if too eccentric
          csig12 >= 0 or
          ssig12 >= 6 * abs(ellipsoid.n) * math.pi * sq(cbet1)):
        # nothing to do, zeroth order spherical approximation is OK
        pass
    else:
        # scale lam12 and bet2 to x, y coordinate system where antipodal
        # point is at origin and singular point is at y = 0, x = -1
        lam12x = math.atan2(-slam12, -clam12)  # lam12 - pi
        if f >= 0:
            # x = dlong, y = dlat
            k2 = sq(sbet1) * ellipsoid.ep2
            eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
            lamscale = f * cbet1 * ellipsoid.a3f(eps) * math.pi
            betscale = lamscale * cbet1
            x = lam12x / lamscale
            y = sbet12a / betscale
        else:
            # x = dlat, y = dlong
            cbet12a = cbet2 * cbet1 - sbet2 * sbet1
            bet12a = math.atan2(sbet12a, cbet12a)
            # in the case of lon12 = 180, this repeats a calculation made
            # in the meridian branch of the solver
            _, m12b, m0, _, _ = lengths(
                ellipsoid, ellipsoid.n, math.pi + bet12a,
                sbet1, -cbet1, dn1, sbet2, cbet2, dn2,
                cbet1, cbet2, REDUCEDLENGTH)
            x = -1 + m12b / (cbet1 * cbet2 * m0 * math.pi)
            betscale = (sbet12a / x if x < -0.01
                        else -f * sq(cbet1) * math.pi)
            lamscale = betscale / cbet1
            y = lam12x / lamscale

        if y > -TOL1 and x > -1 - XTHRESH:
            # strip near cut
            if f >= 0:
                salp1 = min(1.0, -x)
                calp1 = -math.sqrt(1 - sq(salp1))
            else:
                calp1 = max(0.0 if x > -TOL1 else -1.0, x)
                salp1 = math.sqrt(1 - sq(calp1))
        else:
            # estimate alp1 by solving the astroid problem; the solution
            # for x = -1, y = 0 (the singular point) gives k = 0
            k = astroid(x, y)
            omg12a = lamscale * (-x * k / (1 + k) if f >= 0
                                 else -y * (1 + k) / k)
            somg12 = math.sin(omg12a)
            comg12 = -math.cos(omg12a)
            # update spherical estimate of alp1 using omg12 instead of lam12
            salp1 = cbet2 * somg12
            calp1 = sbet12a - cbet2 * sbet1 * sq(somg12) / (1 - comg12)

    # sanity check on starting guess; backwards check allows NaN through
    if not salp1 <= 0:
        salp1, calp1 = norm2(salp1, calp1)
    else:
        salp1 = 1.0
        calp1 = 0.0
    return sig12, salp1, calp1, salp2, calp2, dnm


def _lambda12(ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
              salp1, calp1, slam120, clam120, diffp):
    """
    Longitude difference reached by the geodesic leaving at alp1.

    Returns (v, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2, eps,
    domg12, dv) where v is the excess of the longitude difference over the
    target given by slam120, clam120 and dv its derivative with respect
    to alp1 (only if diffp).
    """
    if sbet1 == 0 and calp1 == 0:
        # break degeneracy of equatorial line; this case has already been
        # handled
        calp1 = -TINY

    # sin(alp1) * cos(bet1) = sin(alp0)
    salp0 = salp1 * cbet1
    calp0 = math.hypot(calp1, salp1 * sbet1)  # calp0 > 0

    # tan(bet1) = tan(sig1) * cos(alp1); tan(omg1) = sin(alp0) * tan(sig1)
    ssig1 = sbet1
    somg1 = salp0 * sbet1
    csig1 = comg1 = calp1 * cbet1
    ssig1, csig1 = norm2(ssig1, csig1)
    # somg1, comg1 need not be normalized

    # enforce symmetries in the case abs(bet2) = -bet1
    salp2 = salp0 / cbet2 if cbet2 != cbet1 else salp1
    # calp2 = sqrt(1 - sq(salp2)) written to reduce the errors when
    # calp1 is small
    if cbet2 != cbet1 or abs(sbet2) != -sbet1:
        if cbet1 < -sbet1:
            dbet = (cbet2 - cbet1) * (cbet1 + cbet2)
        else:
            dbet = (sbet1 - sbet2) * (sbet1 + sbet2)
        calp2 = math.sqrt(sq(calp1 * cbet1) + dbet) / cbet2
    else:
        calp2 = abs(calp1)
    # tan(bet2) = tan(sig2) * cos(alp2); tan(omg2) = sin(alp0) * tan(sig2)
    ssig2 = sbet2
    somg2 = salp0 * sbet2
    csig2 = comg2 = calp2 * cbet2
    ssig2, csig2 = norm2(ssig2, csig2)

    # sig12 = sig2 - sig1, limit to [0, pi]
    sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2) + 0.0,
                       csig1 * csig2 + ssig1 * ssig2)
    # omg12 = omg2 - omg1, limit to [0, pi]
    somg12 = max(0.0, comg1 * somg2 - somg1 * comg2) + 0.0
    comg12 = comg1 * comg2 + somg1 * somg2
    # eta = omg12 - lam120
    eta = math.atan2(somg12 * clam120 - comg12 * slam120,
                     comg12 * clam120 + somg12 * slam120)
    k2 = sq(calp0) * ellipsoid.ep2
    eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
    C3a = ellipsoid.c3f(eps)
    B312 = (sin_cos_series(True, ssig2, csig2, C3a, NC3 - 1) -
            sin_cos_series(True, ssig1, csig1, C3a, NC3 - 1))
    domg12 = -ellipsoid.f * ellipsoid.a3f(eps) * salp0 * (sig12 + B312)
    lam12 = eta + domg12

    dlam12 = math.nan
    if diffp:
        if calp2 == 0:
            dlam12 = -2 * ellipsoid.f1 * dn1 / sbet1
        else:
            _, dlam12, _, _, _ = lengths(
                ellipsoid, eps, sig12, ssig1, csig1, dn1,
                ssig2, csig2, dn2, cbet1, cbet2, REDUCEDLENGTH)
            dlam12 *= ellipsoid.f1 / (calp2 * cbet2)

    return (lam12, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2,
            eps, domg12, dlam12)


def _inverse_area(ellipsoid, meridian, sbet1, cbet1, sbet2, cbet2,
                  salp1, calp1, salp2, calp2, omg12, somg12, comg12):
    """Area between the canonical geodesic and the equator (unsigned)"""
    # from _lambda12: sin(alp1) * cos(bet1) = sin(alp0)
    salp0 = salp1 * cbet1
    calp0 = math.hypot(calp1, salp1 * sbet1)  # calp0 > 0
    if calp0 != 0 and salp0 != 0:
        # from _lambda12: tan(bet) = tan(sig) * cos(alp)
        ssig1, csig1 = norm2(sbet1, calp1 * cbet1)
        ssig2, csig2 = norm2(sbet2, calp2 * cbet2)
        k2 = sq(calp0) * ellipsoid.ep2
        eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
        # multiplier = a^2 * e^2 * cos(alpha0) * sin(alpha0)
        A4 = sq(ellipsoid.a) * calp0 * salp0 * ellipsoid.e2
        C4a = ellipsoid.c4f(eps)
        B41 = sin_cos_series(False, ssig1, csig1, C4a, NC4)
        B42 = sin_cos_series(False, ssig2, csig2, C4a, NC4)
        S12 = A4 * (B42 - B41)
    else:
        # avoid problems with indeterminate sig1, sig2 on equator
        S12 = 0.0

    if not meridian and somg12 is None:
        somg12 = math.sin(omg12)
        comg12 = math.cos(omg12)

    if not meridian and comg12 > -0.7071 and sbet2 - sbet1 < 1.75:
        # long and lat differences not too big; use
        # tan(Gamma/2) = tan(omg12/2)
        #   * (tan(bet1/2) + tan(bet2/2)) / (1 + tan(bet1/2) * tan(bet2/2))
        # with tan(x/2) = sin(x) / (1 + cos(x))
        domg12 = 1 + comg12
        dbet1 = 1 + cbet1
        dbet2 = 1 + cbet2
        alp12 = 2 * math.atan2(somg12 * (sbet1 * dbet2 + sbet2 * dbet1),
                               domg12 * (sbet1 * sbet2 + dbet1 * dbet2))
    else:
        # alp12 = alp2 - alp1, used in atan2 so no need to normalize
        salp12 = salp2 * calp1 - calp2 * salp1
        calp12 = calp2 * calp1 + salp2 * salp1
        # alp1 = +-180 and alp2 = 0 must give alp12 = -180, which relies
        # on the sign of a zero salp12
        if salp12 == 0 and calp12 < 0:
            salp12 = TINY * calp1
            calp12 = -1.0
        alp12 = math.atan2(salp12, calp12)
    return S12 + ellipsoid.c2 * alp12


def gen_inverse(ellipsoid, lat1: float, lon1: float, lat2: float, lon2: float,
                outmask: int = STANDARD):
    """
    Solve the inverse problem returning the azimuths as sine/cosine pairs.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Ellipsoid on which to solve
    lat1, lon1 : float
        First point (deg)
    lat2, lon2 : float
        Second point (deg)
    outmask : int
        GeodesicMask of the requested outputs; with LONG_UNROLL the
        longitude of point 2 is returned as lon1 plus the signed
        longitude difference

    Returns
    -------
    a12 : float
        Arc length (deg) in [0, 180]
    salp1, calp1 : float
        Sine and cosine of the azimuth at point 1
    salp2, calp2 : float
        Sine and cosine of the azimuth at point 2
    result : GeodesicResult
        lat1, lon1, lat2, lon2, a12 and the requested extras
    """
    unroll = bool(int(outmask) & LONG_UNROLL)
    outmask = int(outmask) & OUT_ALL
    result = GeodesicResult(lat1=lat_fix(lat1), lat2=lat_fix(lat2))

    s12x = m12x = 0.0
    M12 = M21 = math.nan
    omg12 = 0.0
    somg12 = comg12 = None
    # compute the longitude difference carefully; the result is in
    # [-180, 180] with -180 only for west-going geodesics
    lon12, lon12s = ang_diff(lon1, lon2)
    if unroll:
        result.lon1 = lon1
        result.lon2 = (lon1 + lon12) + lon12s
    else:
        result.lon1 = ang_normalize(lon1)
        result.lon2 = ang_normalize(lon2)
    # make longitude difference positive
    lonsign = -1 if math.copysign(1.0, lon12) < 0 else 1
    lon12 *= lonsign
    lon12s *= lonsign
    lam12 = lon12 * D2R
    # sincos of lon12 + error (applies ang_round internally)
    slam12, clam12 = sincosde(lon12, lon12s)
    lon12s = (HD - lon12) - lon12s  # the supplementary longitude difference

    # if really close to the equator, treat as on equator
    lat1 = ang_round(lat_fix(lat1))
    lat2 = ang_round(lat_fix(lat2))
    # swap points so that the point with higher (abs) latitude is point 1;
    # a NaN latitude becomes lat1
    swapp = -1 if abs(lat1) < abs(lat2) or math.isnan(lat2) else 1
    if swapp < 0:
        lonsign *= -1
        lat1, lat2 = lat2, lat1
    # make lat1 <= -0
    latsign = 1 if math.copysign(1.0, lat1) < 0 else -1
    lat1 *= latsign
    lat2 *= latsign
    # now 0 <= lon12 <= 180, -90 <= lat1 <= -0 and lat1 <= lat2 <= -lat1

    sbet1, cbet1 = sincosd(lat1)
    sbet1 *= ellipsoid.f1
    # ensure cbet1 = +epsilon at poles
    sbet1, cbet1 = norm2(sbet1, cbet1)
    cbet1 = max(TINY, cbet1)

    sbet2, cbet2 = sincosd(lat2)
    sbet2 *= ellipsoid.f1
    sbet2, cbet2 = norm2(sbet2, cbet2)
    cbet2 = max(TINY, cbet2)

    # when cbet1 < -sbet1, cbet2 - cbet1 is a sensitive measure of
    # |bet1| - |bet2|, otherwise |sbet2| + sbet1 is; force bet2 = +-bet1
    # exactly when these vanish
    if cbet1 < -sbet1:
        if cbet2 == cbet1:
            sbet2 = math.copysign(sbet1, sbet2)
    elif abs(sbet2) == -sbet1:
        cbet2 = cbet1

    dn1 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet1))
    dn2 = math.sqrt(1 + ellipsoid.ep2 * sq(sbet2))

    meridian = lat1 == -QD or slam12 == 0
    scale_mask = outmask & GEODESICSCALE

    if meridian:
        # endpoints are on a single full meridian, so the geodesic might
        # lie on a meridian
        calp1 = clam12
        salp1 = slam12  # head to the target longitude
        calp2 = 1.0
        salp2 = 0.0     # at the target we're heading north

        # tan(bet) = tan(sig) * cos(alp)
        ssig1 = sbet1
        csig1 = calp1 * cbet1
        ssig2 = sbet2
        csig2 = calp2 * cbet2

        # sig12 = sig2 - sig1
        sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2) + 0.0,
                           csig1 * csig2 + ssig1 * ssig2)
        s12x, m12x, _, M12, M21 = lengths(
            ellipsoid, ellipsoid.n, sig12, ssig1, csig1, dn1,
            ssig2, csig2, dn2, cbet1, cbet2,
            DISTANCE | REDUCEDLENGTH | scale_mask)
        # a meridional geodesic with sig12 > pi/2 and m12 < 0 is not a
        # shortest path (prolate and too close to antipodal)
        if sig12 < 1 or m12x >= 0:
            # need at least 2 tiny, to handle 90 0 90 180; prevent
            # negative s12 or m12 for short lines
            if (sig12 < 3 * TINY or
                    (sig12 < TOL0 and (s12x < 0 or m12x < 0))):
                sig12 = m12x = s12x = 0.0
            m12x *= ellipsoid.b
            s12x *= ellipsoid.b
            a12 = sig12 / D2R
        else:
            meridian = False

    if (not meridian and sbet1 == 0 and
            # mimic the way _lambda12 works with calp1 = 0
            (ellipsoid.f <= 0 or lon12s >= ellipsoid.f * HD)):
        # geodesic runs along equator
        calp1 = calp2 = 0.0
        salp1 = salp2 = 1.0
        s12x = ellipsoid.a * lam12
        sig12 = omg12 = lam12 / ellipsoid.f1
        m12x = ellipsoid.b * math.sin(sig12)
        if scale_mask:
            M12 = M21 = math.cos(sig12)
        a12 = lon12 / ellipsoid.f1

    elif not meridian:
        # point 1 and point 2 belong within a hemisphere bounded by a
        # meridian and the geodesic is neither meridional nor equatorial;
        # figure a starting point for Newton's method
        sig12, salp1, calp1, salp2, calp2, dnm = _inverse_start(
            ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
            lam12, slam12, clam12)

        if sig12 >= 0:
            # short lines
            s12x = sig12 * ellipsoid.b * dnm
            m12x = sq(dnm) * ellipsoid.b * math.sin(sig12 / dnm)
            if scale_mask:
                M12 = M21 = math.cos(sig12 / dnm)
            a12 = sig12 / D2R
            omg12 = lam12 / (ellipsoid.f1 * dnm)
        else:
            # solve lambda12(alp1) - lam12 = 0 keeping a bracket
            # (alp1a, alp1b) around the single root in (0, pi); fall back
            # to bisection when the Newton step has the wrong sign or
            # leaves the bracket
            salp1a, calp1a = TINY, 1.0
            salp1b, calp1b = TINY, -1.0
            tripn = tripb = False
            for numit in range(MAXIT2 + 1):
                (v, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2,
                 eps, domg12, dv) = _lambda12(
                     ellipsoid, sbet1, cbet1, dn1, sbet2, cbet2, dn2,
                     salp1, calp1, slam12, clam12, numit < MAXIT1)
                # reversed test to allow escape with NaNs
                converged = tripb or not abs(v) >= (8 if tripn else 1) * TOL0
                if converged or numit == MAXIT2:
                    break
                # update bracketing values
                if v > 0 and (numit > MAXIT1 or
                              calp1 / salp1 > calp1b / salp1b):
                    salp1b, calp1b = salp1, calp1
                elif v < 0 and (numit > MAXIT1 or
                                calp1 / salp1 < calp1a / salp1a):
                    salp1a, calp1a = salp1, calp1
                if numit < MAXIT1 and dv > 0:
                    dalp1 = -v / dv
                    if abs(dalp1) < math.pi:
                        sdalp1 = math.sin(dalp1)
                        cdalp1 = math.cos(dalp1)
                        nsalp1 = salp1 * cdalp1 + calp1 * sdalp1
                        if nsalp1 > 0:
                            calp1 = calp1 * cdalp1 - salp1 * sdalp1
                            salp1 = nsalp1
                            salp1, calp1 = norm2(salp1, calp1)
                            # the slope can vanish near convergence, so
                            # switch to tolerances based on epsilon
                            tripn = abs(v) <= 16 * TOL0
                            continue
                # dv was not positive or the update left the legal range;
                # use the midpoint of the bracket as the next estimate
                salp1 = (salp1a + salp1b) / 2
                calp1 = (calp1a + calp1b) / 2
                salp1, calp1 = norm2(salp1, calp1)
                tripn = False
                tripb = (abs(salp1a - salp1) + (calp1a - calp1) < TOLB or
                         abs(salp1 - salp1b) + (calp1 - calp1b) < TOLB)

            if not converged:
                logger.debug("Inverse iteration hit the cap of %d steps "
                             "for lat1=%r lat2=%r lon12=%r",
                             MAXIT2, lat1, lat2, lon12)
            else:
                logger.trace("Inverse converged after %d iterations", numit)

            s12x, m12x, _, M12, M21 = lengths(
                ellipsoid, eps, sig12, ssig1, csig1, dn1,
                ssig2, csig2, dn2, cbet1, cbet2,
                DISTANCE | REDUCEDLENGTH | scale_mask)
            m12x *= ellipsoid.b
            s12x *= ellipsoid.b
            a12 = sig12 / D2R
            if outmask & AREA:
                # omg12 = lam12 - domg12
                sdomg12 = math.sin(domg12)
                cdomg12 = math.cos(domg12)
                somg12 = slam12 * cdomg12 - clam12 * sdomg12
                comg12 = clam12 * cdomg12 + slam12 * sdomg12

    if outmask & DISTANCE & OUT_ALL:
        result.s12 = 0.0 + s12x  # convert -0 to 0

    if outmask & REDUCEDLENGTH & OUT_ALL:
        result.m12 = 0.0 + m12x  # convert -0 to 0

    if outmask & AREA & OUT_ALL:
        S12 = _inverse_area(ellipsoid, meridian, sbet1, cbet1, sbet2, cbet2,
                            salp1, calp1, salp2, calp2,
                            omg12, somg12, comg12)
        result.S12 = 0.0 + S12 * (swapp * lonsign * latsign)

    # convert the azimuths back to the original configuration
    if swapp < 0:
        salp1, salp2 = salp2, salp1
        calp1, calp2 = calp2, calp1
        M12, M21 = M21, M12

    salp1 *= swapp * lonsign
    calp1 *= swapp * latsign
    salp2 *= swapp * lonsign
    calp2 *= swapp * latsign

    if outmask & GEODESICSCALE & OUT_ALL:
        result.M12 = M12
        result.M21 = M21

    result.a12 = a12
    return a12, salp1, calp1, salp2, calp2, result


def inverse(ellipsoid, lat1: float, lon1: float, lat2: float, lon2: float,
            outmask: int = STANDARD) -> GeodesicResult:
    """
    Solve the inverse geodesic problem.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Ellipsoid on which to solve
    lat1, lon1 : float
        First point (deg)
    lat2, lon2 : float
        Second point (deg)
    outmask : int
        GeodesicMask of the requested outputs

    Returns
    -------
    GeodesicResult
        azi1, azi2 and a12 are always set, together with the points and
        the requested s12, m12, M12, M21 and S12
    """
    _, salp1, calp1, salp2, calp2, result = gen_inverse(
        ellipsoid, lat1, lon1, lat2, lon2, outmask)
    result.azi1 = atan2d(salp1, calp1)
    result.azi2 = atan2d(salp2, calp2)
    return result


def inverse_line(ellipsoid, lat1: float, lon1: float, lat2: float,
                 lon2: float,
                 caps: int = STANDARD | DISTANCE_IN) -> GeodesicLine:
    """
    Geodesic line through two points.

    The line starts at point 1 with the azimuth of the inverse solution and
    has its target set to point 2 by arc length.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Ellipsoid on which to solve
    lat1, lon1, lat2, lon2 : float
        End points (deg)
    caps : int
        Capabilities of the returned line; 0 means DISTANCE_IN | LONGITUDE

    Returns
    -------
    GeodesicLine
    """
    caps = int(caps) if caps else int(DISTANCE_IN | LONGITUDE)
    # arc length needs DISTANCE when the line supports distance input
    if caps & DISTANCE_IN & OUT_ALL:
        caps |= int(DISTANCE)
    a12, salp1, calp1, _, _, _ = gen_inverse(
        ellipsoid, lat1, lon1, lat2, lon2, 0)
    azi1 = atan2d(salp1, calp1)
    line = GeodesicLine(ellipsoid, lat1, lon1, azi1, caps, salp1, calp1)
    line.set_arc(a12)
    return line
