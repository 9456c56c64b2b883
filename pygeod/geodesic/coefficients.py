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
Series coefficients of the geodesic integrals.

The distance (I1), reduced length (I2), longitude (I3) and area (I4)
integrals are expanded to sixth order in eps, the small parameter of the
geodesic, and in n, the third flattening of the ellipsoid.  The rational
coefficients below are universal; the functions in this module turn them
into numeric arrays for a given eps or n.

Coefficient arrays for the Fourier series have length NC = 7 and are
indexed by the order of the term (index 0 is unused by the sine series).

References:
    C. F. F. Karney, Algorithms for geodesics, J. Geodesy 87, 43-55 (2013)
"""

import numpy as np

from ..core.constants import NA1, NA2, NA3, NC, NC1, NC1P, NC2, NC3, NC3X, NC4, NC4X
from ..core.series import polyval

# (1-eps)*A1-1, polynomial in eps2 of order 3
_A1M1_COEFF = np.array([1, 4, 64, 0, 256], dtype=np.float64)

# C1[l]/eps^l, polynomials in eps2, each followed by its denominator
_C1_COEFF = np.array([
    -1, 6, -16, 32,
    -9, 64, -128, 2048,
    9, -16, 768,
    3, -5, 512,
    -7, 1280,
    -7, 2048,
], dtype=np.float64)

# C1p[l]/eps^l, the reverted series of C1
_C1P_COEFF = np.array([
    205, -432, 768, 1536,
    4005, -4736, 3840, 12288,
    -225, 116, 384,
    -7173, 2695, 7680,
    3467, 7680,
    38081, 61440,
], dtype=np.float64)

# (eps+1)*A2-1, polynomial in eps2 of order 3
_A2M1_COEFF = np.array([-11, -28, -192, 0, 256], dtype=np.float64)

# C2[l]/eps^l, polynomials in eps2
_C2_COEFF = np.array([
    1, 2, 16, 32,
    35, 64, 384, 2048,
    15, 80, 768,
    7, 35, 512,
    63, 1280,
    77, 2048,
], dtype=np.float64)

# A3, coefficients of eps^5 .. eps^0 as polynomials in n
_A3_COEFF = np.array([
    -3, 128,
    -2, -3, 64,
    -1, -3, -1, 16,
    3, -1, -2, 8,
    1, -1, 2,
    1, 1,
], dtype=np.float64)

# C3[l], coefficients of eps^5 .. eps^l as polynomials in n
_C3_COEFF = np.array([
    # C3[1]
    3, 128,
    2, 5, 128,
    -1, 3, 3, 64,
    -1, 0, 1, 8,
    -1, 1, 4,
    # C3[2]
    5, 256,
    1, 3, 128,
    -3, -2, 3, 64,
    1, -3, 2, 32,
    # C3[3]
    7, 512,
    -10, 9, 384,
    5, -9, 5, 192,
    # C3[4]
    7, 512,
    -14, 7, 512,
    # C3[5]
    21, 2560,
], dtype=np.float64)

# C4[l], coefficients of eps^5 .. eps^l as polynomials in n
_C4_COEFF = np.array([
    # C4[0]
    97, 15015,
    1088, 156, 45045,
    -224, -4784, 1573, 45045,
    -10656, 14144, -4576, -858, 45045,
    64, 624, -4576, 6864, -3003, 15015,
    100, 208, 572, 3432, -12012, 30030, 45045,
    # C4[1]
    1, 9009,
    -2944, 468, 135135,
    5792, 1040, -1287, 135135,
    5952, -11648, 9152, -2574, 135135,
    -64, -624, 4576, -6864, 3003, 135135,
    # C4[2]
    8, 10725,
    1856, -936, 225225,
    -8448, 4992, -1144, 225225,
    -1440, 4160, -4576, 1716, 225225,
    # C4[3]
    -136, 63063,
    1024, -208, 105105,
    3584, -3328, 1144, 315315,
    # C4[4]
    -128, 135135,
    -2560, 832, 405405,
    # C4[5]
    128, 99099,
], dtype=np.float64)


def a1m1f(eps):
    """Scale factor A1-1 = mean value of (d/dsigma)I1 - 1"""
    m = NA1 // 2
    t = polyval(m, _A1M1_COEFF, 0, eps * eps) / float(_A1M1_COEFF[m + 1])
    return (t + eps) / (1 - eps)


def _fourier_coefficients(coeff, nterms, eps):
    c = np.zeros(NC)
    eps2 = eps * eps
    d = eps
    o = 0
    for l in range(1, nterms + 1):
        m = (nterms - l) // 2  # order of polynomial in eps^2
        c[l] = d * polyval(m, coeff, o, eps2) / coeff[o + m + 1]
        o += m + 2
        d *= eps
    return c


def c1f(eps):
    """Coefficients C1[l] of the Fourier expansion of B1"""
    return _fourier_coefficients(_C1_COEFF, NC1, eps)


def c1pf(eps):
    """Coefficients C1p[l] of the Fourier expansion of B1p"""
    return _fourier_coefficients(_C1P_COEFF, NC1P, eps)


def a2m1f(eps):
    """Scale factor A2-1 = mean value of (d/dsigma)I2 - 1"""
    m = NA2 // 2
    t = polyval(m, _A2M1_COEFF, 0, eps * eps) / float(_A2M1_COEFF[m + 1])
    return (t - eps) / (1 + eps)


def c2f(eps):
    """Coefficients C2[l] of the Fourier expansion of B2"""
    return _fourier_coefficients(_C2_COEFF, NC2, eps)


def a3_coefficients(n):
    """
    Coefficients of A3 as a polynomial in eps for third flattening n.

    Returns
    -------
    A3x : ndarray, shape (NA3,)
        Coefficients of eps^5 .. eps^0
    """
    A3x = np.zeros(NA3)
    o = k = 0
    for j in range(NA3 - 1, -1, -1):
        m = min(NA3 - j - 1, j)  # order of polynomial in n
        A3x[k] = polyval(m, _A3_COEFF, o, n) / _A3_COEFF[o + m + 1]
        k += 1
        o += m + 2
    return A3x


def c3_coefficients(n):
    """
    Coefficients of C3[l] as polynomials in eps for third flattening n.

    Returns
    -------
    C3x : ndarray, shape (NC3X,)
        For l = 1..5, the coefficients of eps^5 .. eps^l
    """
    C3x = np.zeros(NC3X)
    o = k = 0
    for l in range(1, NC3):
        for j in range(NC3 - 1, l - 1, -1):
            m = min(NC3 - j - 1, j)
            C3x[k] = polyval(m, _C3_COEFF, o, n) / _C3_COEFF[o + m + 1]
            k += 1
            o += m + 2
    return C3x


def c4_coefficients(n):
    """
    Coefficients of C4[l] as polynomials in eps for third flattening n.

    Returns
    -------
    C4x : ndarray, shape (NC4X,)
        For l = 0..5, the coefficients of eps^5 .. eps^l
    """
    C4x = np.zeros(NC4X)
    o = k = 0
    for l in range(NC4):
        for j in range(NC4 - 1, l - 1, -1):
            m = NC4 - j - 1
            C4x[k] = polyval(m, _C4_COEFF, o, n) / _C4_COEFF[o + m + 1]
            k += 1
            o += m + 2
    return C4x
