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
Angle arithmetic in degrees.

The helpers in this module reduce angles exactly before any transcendental
function is evaluated so that results at multiples of 90 degrees are exact
and longitude differences keep their sub-ulp rounding error.  They are
scalar functions operating on Python floats; non-finite input yields NaN
instead of the ValueError raised by the math module.
"""

import math

from .constants import D2R, HD, QD, R2D, TD


def sq(x):
    """Square of x"""
    return x * x


def sum_x(u, v):
    """
    Error-free sum of two numbers.

    Parameters
    ----------
    u, v : float
        Summands

    Returns
    -------
    s : float
        Rounded sum round(u + v)
    t : float
        Rounding error, so that u + v = s + t exactly
    """
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = 0.0 - (up + vpp) if s != 0 else s
    return s, t


def remainder(x, y):
    """IEEE remainder of x / y, NaN when x is not finite"""
    return math.remainder(x, y) if math.isfinite(x) else math.nan


def norm2(sinx, cosx):
    """Scale a sine/cosine pair to unit length"""
    r = math.hypot(sinx, cosx)
    return sinx / r, cosx / r


def ang_normalize(x):
    """
    Reduce an angle to the range [-180, 180].

    An exact multiple of 180 odd times maps to +180 or -180 following
    the sign of x.
    """
    y = remainder(x, TD)
    return math.copysign(HD, x) if abs(y) == HD else y


def lat_fix(x):
    """Replace a latitude outside [-90, 90] by NaN"""
    return math.nan if abs(x) > QD else x


def ang_diff(x, y):
    """
    Exact difference of two angles reduced to [-180, 180].

    Parameters
    ----------
    x, y : float
        Angles in degrees

    Returns
    -------
    d : float
        Rounded value of y - x reduced to [-180, 180]
    e : float
        Error term, so that d + e equals the reduced y - x exactly

    Notes
    -----
    For d = 0 or +-180 the sign of d is taken from y - x when there is no
    rounding error and is opposite to e otherwise.
    """
    d, t = sum_x(remainder(-x, TD), remainder(y, TD))
    # the second sum only changes d when |d| < 128
    d, t = sum_x(remainder(d, TD), t)
    if d == 0 or abs(d) == HD:
        d = math.copysign(d, y - x if t == 0 else -t)
    return d, t


def ang_round(x):
    """
    Round tiny angles to a multiple of 1/16 degree.

    Values smaller than 1/16 in magnitude are snapped so that about 1/16
    of an ulp of a value near 90 survives; this stops underflow in
    paths that start exactly on the equator or on a meridian.
    """
    z = 1.0 / 16.0
    y = abs(x)
    w = z - y
    y = z - w if w > 0 else y
    return math.copysign(y, x)


def _quadrant_reduce(x):
    r = math.fmod(x, TD) if math.isfinite(x) else math.nan
    q = 0 if math.isnan(r) else int(round(r / QD))
    return r - QD * q, q


def _quadrant_sincos(r, q, x):
    s = math.sin(r)
    c = math.cos(r)
    q &= 3
    if q == 1:
        s, c = c, -s
    elif q == 2:
        s, c = -s, -c
    elif q == 3:
        s, c = -c, s
    c = 0.0 + c
    if s == 0:
        s = math.copysign(s, x)
    return s, c


def sincosd(x):
    """
    Sine and cosine of an angle in degrees.

    The argument is reduced exactly to [-45, 45] before conversion to
    radians, so sincosd(90) returns exactly (1, 0).

    Parameters
    ----------
    x : float
        Angle (deg)

    Returns
    -------
    sinx, cosx : float
        Sine and cosine; cosx is never -0 and a zero sinx carries the
        sign of x
    """
    r, q = _quadrant_reduce(x)
    return _quadrant_sincos(r * D2R, q, x)


def sincosde(x, t):
    """Sine and cosine of x + t degrees, where t is a small correction"""
    r, q = _quadrant_reduce(x)
    return _quadrant_sincos(ang_round(r + t) * D2R, q, x)


def atan2d(y, x):
    """
    Two-argument arctangent in degrees.

    The arguments are rearranged so that the native atan2 works in
    [-45, 45] and the quadrant is restored exactly afterwards.

    Returns
    -------
    float
        Angle in [-180, 180] (deg)
    """
    q = 0
    if abs(y) > abs(x):
        x, y = y, x
        q = 2
    if math.copysign(1.0, x) < 0:
        x = -x
        q += 1
    ang = math.atan2(y, x) * R2D
    if q == 1:
        ang = math.copysign(HD, y) - ang
    elif q == 2:
        ang = QD - ang
    elif q == 3:
        ang = -QD + ang
    return ang
