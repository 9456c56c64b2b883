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

"""Distance and reduced length between two points of a geodesic"""

import math

from ..core.constants import NC1, NC2
from ..core.series import sin_cos_series
from .coefficients import a1m1f, a2m1f, c1f, c2f
from .masks import DISTANCE, GEODESICSCALE, OUT_ALL, REDUCEDLENGTH


def lengths(ellipsoid, eps, sig12,
            ssig1, csig1, dn1, ssig2, csig2, dn2,
            cbet1, cbet2, outmask):
    """
    Evaluate the distance and reduced length integrals.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Ellipsoid of the geodesic
    eps : float
        Geodesic parameter
    sig12 : float
        Arc length between the points on the auxiliary sphere (rad)
    ssig1, csig1, dn1 : float
        sin(sigma1), cos(sigma1) and sqrt(1 + k2 sin(sigma1)^2) at point 1
    ssig2, csig2, dn2 : float
        The same at point 2
    cbet1, cbet2 : float
        Cosines of the reduced latitudes
    outmask : int
        Combination of DISTANCE, REDUCEDLENGTH and GEODESICSCALE; also
        pass REDUCEDLENGTH to get m0

    Returns
    -------
    s12b : float
        Distance / b
    m12b : float
        Reduced length / b
    m0 : float
        Coefficient of the secular term of the reduced length
    M12, M21 : float
        Geodesic scales

    Values which were not requested are NaN.
    """
    s12b = m12b = m0 = M12 = M21 = math.nan
    outmask = int(outmask) & (DISTANCE | REDUCEDLENGTH | GEODESICSCALE) & OUT_ALL
    if not outmask:
        return s12b, m12b, m0, M12, M21

    J12 = 0.0
    redlp = bool(outmask & (REDUCEDLENGTH | GEODESICSCALE))
    A1 = a1m1f(eps)
    Ca = c1f(eps)
    if redlp:
        A2 = a2m1f(eps)
        Cb = c2f(eps)
        m0x = A1 - A2
        A2 = 1 + A2
    A1 = 1 + A1

    if outmask & DISTANCE:
        B1 = (sin_cos_series(True, ssig2, csig2, Ca, NC1) -
              sin_cos_series(True, ssig1, csig1, Ca, NC1))
        s12b = A1 * (sig12 + B1)
        if redlp:
            B2 = (sin_cos_series(True, ssig2, csig2, Cb, NC2) -
                  sin_cos_series(True, ssig1, csig1, Cb, NC2))
            J12 = m0x * sig12 + (A1 * B1 - A2 * B2)
    elif redlp:
        # combine the two series into one, NC1 >= NC2
        Cb[1:NC2 + 1] = A1 * Ca[1:NC2 + 1] - A2 * Cb[1:NC2 + 1]
        J12 = m0x * sig12 + (sin_cos_series(True, ssig2, csig2, Cb, NC2) -
                             sin_cos_series(True, ssig1, csig1, Cb, NC2))

    if redlp:
        m0 = m0x
        # parens around (csig1 * ssig2) and (ssig1 * csig2) for accurate
        # cancellation with coincident points
        m12b = (dn2 * (csig1 * ssig2) - dn1 * (ssig1 * csig2) -
                csig1 * csig2 * J12)
        if outmask & GEODESICSCALE:
            csig12 = csig1 * csig2 + ssig1 * ssig2
            t = (ellipsoid.ep2 * (cbet1 - cbet2) * (cbet1 + cbet2) /
                 (dn1 + dn2))
            M12 = csig12 + (t * ssig2 - csig2 * J12) * ssig1 / dn1
            M21 = csig12 - (t * ssig1 - csig1 * J12) * ssig2 / dn2
    return s12b, m12b, m0, M12, M21
