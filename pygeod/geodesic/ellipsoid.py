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

"""Ellipsoid of revolution and its geodesic series tables"""

import math

import numpy as np

from ..core.constants import ELLIPSOIDS, NA3, NC, NC3, NC4, TOL2
from ..core.geomath import sq
from ..core.series import polyval
from .coefficients import a3_coefficients, c3_coefficients, c4_coefficients


class Ellipsoid:
    """Ellipsoid of revolution on which geodesics are computed

    The ellipsoid is defined by its equatorial radius and flattening.  All
    derived constants and the A3, C3 and C4 coefficient tables are computed
    once in the constructor; the object is read-only afterwards and may be
    shared by any number of lines, solvers and polygons.

    Callers must ensure a > 0 and f < 1; other values give undefined
    (generally non-finite) results.
    """

    def __init__(self, a: float, f: float):
        """Initialize ellipsoid

        Parameters:
        -----------
        a : float
            Equatorial radius (m)
        f : float
            Flattening; zero for a sphere, negative for a prolate ellipsoid
        """
        a = float(a)
        f = float(f)
        self._a = a
        self._f = f
        self._f1 = 1 - f
        self._e2 = f * (2 - f)
        self._ep2 = self._e2 / sq(self._f1)  # e2 / (1 - e2)
        self._n = f / (2 - f)
        self._b = a * self._f1
        e2 = self._e2
        if e2 == 0:
            ratio = 1.0
        elif e2 > 0:
            ratio = math.atanh(math.sqrt(e2)) / math.sqrt(abs(e2))
        else:
            ratio = math.atan(math.sqrt(-e2)) / math.sqrt(abs(e2))
        self._c2 = (sq(a) + sq(self._b) * ratio) / 2  # authalic radius squared
        # sig12 threshold for "really short" lines; 0.1 is a safety factor
        # and max(0.001, |f|) keeps it bounded for nearly spherical cases
        self._etol2 = 0.1 * TOL2 / math.sqrt(
            max(0.001, abs(f)) * min(1.0, 1 - f / 2) / 2)

        self._A3x = a3_coefficients(self._n)
        self._C3x = c3_coefficients(self._n)
        self._C4x = c4_coefficients(self._n)
        for table in (self._A3x, self._C3x, self._C4x):
            table.flags.writeable = False

    @classmethod
    def from_name(cls, name: str) -> 'Ellipsoid':
        """Create a named reference ellipsoid

        Parameters:
        -----------
        name : str
            One of the keys of pygeod.core.constants.ELLIPSOIDS
            (case insensitive), e.g. 'WGS84' or 'GRS80'

        Returns:
        --------
        Ellipsoid
        """
        key = name.upper().replace('-', '').replace(' ', '')
        if key not in ELLIPSOIDS:
            raise ValueError(f"Unknown ellipsoid: {name}. "
                             f"Available: {', '.join(sorted(ELLIPSOIDS))}")
        a, f = ELLIPSOIDS[key]
        return cls(a, f)

    @property
    def a(self) -> float:
        """Equatorial radius (m)"""
        return self._a

    @property
    def f(self) -> float:
        """Flattening"""
        return self._f

    @property
    def f1(self) -> float:
        """1 - f"""
        return self._f1

    @property
    def b(self) -> float:
        """Polar semi-axis (m)"""
        return self._b

    @property
    def e2(self) -> float:
        """Eccentricity squared"""
        return self._e2

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return self._ep2

    @property
    def n(self) -> float:
        """Third flattening"""
        return self._n

    @property
    def c2(self) -> float:
        """Authalic radius squared (m^2)"""
        return self._c2

    @property
    def etol2(self) -> float:
        """Arc length below which the short-line solution is accepted"""
        return self._etol2

    @property
    def area0(self) -> float:
        """Total surface area of the ellipsoid (m^2)"""
        return 4 * math.pi * self._c2

    @property
    def A3x(self) -> np.ndarray:
        return self._A3x

    @property
    def C3x(self) -> np.ndarray:
        return self._C3x

    @property
    def C4x(self) -> np.ndarray:
        return self._C4x

    def a3f(self, eps: float) -> float:
        """Evaluate A3 for the geodesic parameter eps"""
        return polyval(NA3 - 1, self._A3x, 0, eps)

    def c3f(self, eps: float) -> np.ndarray:
        """Evaluate C3[1] .. C3[5] for the geodesic parameter eps"""
        c = np.zeros(NC)
        mult = 1.0
        o = 0
        for l in range(1, NC3):
            m = NC3 - l - 1  # order of polynomial in eps
            mult *= eps
            c[l] = mult * polyval(m, self._C3x, o, eps)
            o += m + 1
        return c

    def c4f(self, eps: float) -> np.ndarray:
        """Evaluate C4[0] .. C4[5] for the geodesic parameter eps"""
        c = np.zeros(NC)
        mult = 1.0
        o = 0
        for l in range(NC4):
            m = NC4 - l - 1
            c[l] = mult * polyval(m, self._C4x, o, eps)
            o += m + 1
            mult *= eps
        return c

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return NotImplemented
        return self._a == other._a and self._f == other._f

    def __hash__(self):
        return hash((self._a, self._f))

    def __repr__(self):
        return f"Ellipsoid(a={self._a!r}, f={self._f!r})"


# Default ellipsoid
WGS84 = Ellipsoid.from_name('WGS84')
