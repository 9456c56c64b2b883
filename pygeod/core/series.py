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
Polynomial and trigonometric series kernels.

These are the inner loops of every geodesic calculation and are compiled
with Numba.  Coefficient storage is always a 1-D float64 numpy array.

References:
    C. F. F. Karney, Algorithms for geodesics, J. Geodesy 87, 43-55 (2013)
"""

from numba import njit


@njit(cache=True)
def polyval(n, p, s, x):
    """
    Evaluate a polynomial with Horner's method.

    Parameters
    ----------
    n : int
        Order of the polynomial; a negative order gives 0
    p : ndarray
        Coefficients, highest power first
    s : int
        Offset of the first coefficient in p
    x : float
        Argument

    Returns
    -------
    y : float
        p[s]*x^n + p[s+1]*x^(n-1) + ... + p[s+n]
    """
    if n < 0:
        return 0.0
    y = p[s]
    for i in range(1, n + 1):
        y = y * x + p[s + i]
    return y


@njit(cache=True)
def sin_cos_series(sinp, sinx, cosx, c, n):
    """
    Evaluate a Fourier series with Clenshaw summation.

    Computes

        sinp:     sum(c[i] * sin(2*i*x), i = 1..n)
        not sinp: sum(c[i] * cos((2*i+1)*x), i = 0..n-1)

    from sin(x) and cos(x) without forming 2*x.  c[0] is unused for the
    sine series.

    Parameters
    ----------
    sinp : bool
        Select the sine series
    sinx, cosx : float
        Sine and cosine of the argument
    c : ndarray
        Coefficients, length at least n + 1
    n : int
        Number of terms

    Returns
    -------
    y : float
        Value of the series
    """
    k = n + 1 if sinp else n
    ar = 2.0 * (cosx - sinx) * (cosx + sinx)  # 2 * cos(2 * x)
    y1 = 0.0
    if n & 1:
        k -= 1
        y0 = c[k]
    else:
        y0 = 0.0
    m = n // 2
    while m > 0:
        m -= 1
        k -= 1
        y1 = ar * y0 - y1 + c[k]
        k -= 1
        y0 = ar * y1 - y0 + c[k]
    if sinp:
        return 2.0 * sinx * cosx * y0  # sin(2 * x) * y0
    return cosx * (y0 - y1)            # cos(x) * (y0 - y1)
