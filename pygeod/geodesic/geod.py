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

"""Geodesic calculations bound to an ellipsoid"""

from typing import Optional

from ..core.data_structures import GeodesicResult, PolygonResult
from .direct import arc_direct, direct, direct_line
from .ellipsoid import WGS84, Ellipsoid
from .inverse import inverse, inverse_line
from .line import GeodesicLine
from .masks import DISTANCE_IN, STANDARD
from .polygon import PolygonArea, polygon_area


class Geod:
    """Solves geodesic problems on a fixed ellipsoid

    This class holds an Ellipsoid and forwards to the direct, inverse,
    line and polygon functions so that callers do not have to pass the
    ellipsoid around.
    """

    def __init__(self, ellipsoid: Optional[Ellipsoid] = None):
        """Initialize geodesic solver

        Parameters:
        -----------
        ellipsoid : Ellipsoid, optional
            Ellipsoid to use (WGS84 if None)
        """
        self._ellipsoid = ellipsoid if ellipsoid is not None else WGS84

    @classmethod
    def from_name(cls, name: str) -> 'Geod':
        """Create a solver for a named ellipsoid such as 'GRS80'"""
        return cls(Ellipsoid.from_name(name))

    @property
    def ellipsoid(self) -> Ellipsoid:
        """Ellipsoid in use"""
        return self._ellipsoid

    @property
    def a(self) -> float:
        return self._ellipsoid.a

    @property
    def f(self) -> float:
        return self._ellipsoid.f

    def direct(self, lat1: float, lon1: float, azi1: float, s12: float,
               outmask: int = STANDARD) -> GeodesicResult:
        """Point at distance s12 (m) from lat1, lon1 along azi1 (deg)"""
        return direct(self._ellipsoid, lat1, lon1, azi1, s12, outmask)

    def arc_direct(self, lat1: float, lon1: float, azi1: float, a12: float,
                   outmask: int = STANDARD) -> GeodesicResult:
        """Point at arc length a12 (deg) from lat1, lon1 along azi1 (deg)"""
        return arc_direct(self._ellipsoid, lat1, lon1, azi1, a12, outmask)

    def inverse(self, lat1: float, lon1: float, lat2: float, lon2: float,
                outmask: int = STANDARD) -> GeodesicResult:
        """Shortest geodesic between two points (deg)"""
        return inverse(self._ellipsoid, lat1, lon1, lat2, lon2, outmask)

    def line(self, lat1: float, lon1: float, azi1: float,
             caps: int = STANDARD | DISTANCE_IN) -> GeodesicLine:
        """Geodesic line from lat1, lon1 along azi1 (deg)"""
        return GeodesicLine(self._ellipsoid, lat1, lon1, azi1, caps)

    def direct_line(self, lat1: float, lon1: float, azi1: float, s12: float,
                    caps: int = STANDARD | DISTANCE_IN) -> GeodesicLine:
        """Geodesic line with its target point at distance s12 (m)"""
        return direct_line(self._ellipsoid, lat1, lon1, azi1, s12, caps)

    def inverse_line(self, lat1: float, lon1: float, lat2: float, lon2: float,
                     caps: int = STANDARD | DISTANCE_IN) -> GeodesicLine:
        """Geodesic line from point 1 with its target point at point 2"""
        return inverse_line(self._ellipsoid, lat1, lon1, lat2, lon2, caps)

    def polygon(self, polyline: bool = False) -> PolygonArea:
        """Empty polygon (or polyline) accumulator"""
        return PolygonArea(self._ellipsoid, polyline)

    def polygon_area(self, lats, lons) -> PolygonResult:
        """Perimeter and signed area of the polygon with the given vertices"""
        return polygon_area(self._ellipsoid, lats, lons)

    def __repr__(self):
        return f"Geod({self._ellipsoid!r})"
