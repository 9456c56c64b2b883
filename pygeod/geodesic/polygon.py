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

"""Perimeter and area of geodesic polygons"""

import math

from ..core.accumulator import Accumulator
from ..core.constants import TD
from ..core.data_structures import PolygonResult
from ..core.geomath import ang_diff, ang_normalize, remainder
from .direct import gen_direct
from .inverse import gen_inverse
from .masks import AREA, DISTANCE, LATITUDE, LONG_UNROLL, LONGITUDE


def transit(lon1, lon2):
    """Count crossings of the prime meridian by the edge lon1 -> lon2

    Returns 1 for an eastward crossing, -1 for a westward one and 0
    otherwise.  The longitude difference is reduced the same way as in the
    inverse solver.
    """
    lon12, _ = ang_diff(lon1, lon2)
    lon1 = ang_normalize(lon1)
    lon2 = ang_normalize(lon2)
    if lon12 > 0 and ((lon1 < 0 and lon2 >= 0) or (lon1 > 0 and lon2 == 0)):
        return 1
    if lon12 < 0 and lon1 >= 0 and lon2 < 0:
        return -1
    return 0


def transit_direct(lon1, lon2):
    """Parity of floor(lon2 / 360) - floor(lon1 / 360) for unrolled longitudes"""
    lon1 = remainder(lon1, 2 * TD)
    lon2 = remainder(lon2, 2 * TD)
    return ((0 if 0 <= lon2 < TD else 1) -
            (0 if 0 <= lon1 < TD else 1))


def _reduce_area(area, area0, crossings, reverse, sign):
    # area is an Accumulator or a float, accumulated clockwise
    if isinstance(area, Accumulator):
        area = area.remainder(area0)
        if crossings & 1:
            area = area.add((1 if area.value < 0 else -1) * area0 / 2)
        if not reverse:
            area = area.negate()
        if sign:
            if area.value > area0 / 2:
                area = area.add(-area0)
            elif area.value <= -area0 / 2:
                area = area.add(area0)
        else:
            if area.value >= area0:
                area = area.add(-area0)
            elif area.value < 0:
                area = area.add(area0)
        return 0.0 + area.value

    area = remainder(area, area0)
    if crossings & 1:
        area += (1 if area < 0 else -1) * area0 / 2
    if not reverse:
        area *= -1
    if sign:
        if area > area0 / 2:
            area -= area0
        elif area <= -area0 / 2:
            area += area0
    else:
        if area >= area0:
            area -= area0
        elif area < 0:
            area += area0
    return 0.0 + area


class PolygonArea:
    """Accumulate the perimeter and area of a polygon

    Vertices are added one at a time, either as points or as edges given
    by azimuth and length.  The polygon is closed implicitly by the
    geodesic from the last vertex back to the first.  Edges are shortest
    geodesics and longitudes may be given in any range; crossings of the
    prime meridian are counted so that polygons encircling a pole get the
    right area.

    Counter-clockwise traversal gives a positive area when reverse is
    False.  For a polyline (polyline=True) only the length is tracked.
    """

    def __init__(self, ellipsoid, polyline: bool = False):
        """Initialize polygon

        Parameters:
        -----------
        ellipsoid : Ellipsoid
            Ellipsoid on which the polygon lies
        polyline : bool
            Accumulate a polyline instead of a closed polygon
        """
        self.ellipsoid = ellipsoid
        self.polyline = polyline
        self.area0 = ellipsoid.area0
        self._mask = (LATITUDE | LONGITUDE | DISTANCE |
                      (0 if polyline else AREA))
        self.clear()

    def clear(self):
        """Remove all vertices"""
        self.lat0 = self.lon0 = self.lat = self.lon = math.nan
        self._perimeter = Accumulator()
        self._area = Accumulator()
        self._num = 0
        self._crossings = 0

    @property
    def num(self) -> int:
        """Number of vertices"""
        return self._num

    @property
    def crossings(self) -> int:
        """Signed count of prime meridian crossings"""
        return self._crossings

    @property
    def current_point(self):
        """Latitude and longitude of the last vertex (deg), NaN if empty"""
        return self.lat, self.lon

    def _edge(self, lat1, lon1, lat2, lon2):
        result = gen_inverse(self.ellipsoid, lat1, lon1, lat2, lon2,
                             self._mask)[-1]
        return result.s12, (0.0 if self.polyline else result.S12)

    def add_point(self, lat: float, lon: float):
        """Add a vertex (deg)"""
        if self._num == 0:
            self.lat0 = self.lat = lat
            self.lon0 = self.lon = lon
        else:
            s12, S12 = self._edge(self.lat, self.lon, lat, lon)
            self._perimeter = self._perimeter.add(s12)
            if not self.polyline:
                self._area = self._area.add(S12)
                self._crossings += transit(self.lon, lon)
            self.lat = lat
            self.lon = lon
        self._num += 1

    def add_edge(self, azi: float, s: float):
        """Add a vertex at distance s (m) from the last one along azi (deg)

        Does nothing if no vertex has been added yet.
        """
        if self._num == 0:
            return
        result = gen_direct(self.ellipsoid, self.lat, self.lon, azi, False, s,
                            self._mask | LONG_UNROLL)
        self._perimeter = self._perimeter.add(s)
        if not self.polyline:
            self._area = self._area.add(result.S12)
            self._crossings += transit_direct(self.lon, result.lon2)
        self.lat = result.lat2
        self.lon = result.lon2
        self._num += 1

    def compute(self, reverse: bool = False, sign: bool = True) -> PolygonResult:
        """Perimeter and area of the polygon

        Parameters:
        -----------
        reverse : bool
            Count clockwise traversal as positive
        sign : bool
            Return a signed area in (-area0/2, area0/2]; otherwise the
            area is in [0, area0)

        Returns:
        --------
        PolygonResult
            Vertex count, perimeter (m) and area (m^2); the area is NaN
            for a polyline
        """
        empty_area = math.nan if self.polyline else 0.0
        if self._num < 2:
            return PolygonResult(self._num, 0.0, empty_area)
        if self.polyline:
            return PolygonResult(self._num, self._perimeter.value, math.nan)

        s12, S12 = self._edge(self.lat, self.lon, self.lat0, self.lon0)
        perimeter = self._perimeter.sum(s12)
        area = _reduce_area(self._area.add(S12), self.area0,
                            self._crossings + transit(self.lon, self.lon0),
                            reverse, sign)
        return PolygonResult(self._num, perimeter, area)

    def test_point(self, lat: float, lon: float, reverse: bool = False,
                   sign: bool = True) -> PolygonResult:
        """Perimeter and area if lat, lon were added as the next vertex

        The polygon itself is not modified.
        """
        num = self._num + 1
        if num == 1:
            return PolygonResult(num, 0.0,
                                 math.nan if self.polyline else 0.0)

        perimeter = self._perimeter.value
        tempsum = 0.0 if self.polyline else self._area.value
        crossings = self._crossings
        edges = [(self.lat, self.lon, lat, lon)]
        if not self.polyline:
            edges.append((lat, lon, self.lat0, self.lon0))
        for lat1, lon1, lat2, lon2 in edges:
            s12, S12 = self._edge(lat1, lon1, lat2, lon2)
            perimeter += s12
            if not self.polyline:
                tempsum += S12
                crossings += transit(lon1, lon2)

        if self.polyline:
            return PolygonResult(num, perimeter, math.nan)
        return PolygonResult(num, perimeter,
                             _reduce_area(tempsum, self.area0, crossings,
                                          reverse, sign))

    def test_edge(self, azi: float, s: float, reverse: bool = False,
                  sign: bool = True) -> PolygonResult:
        """Perimeter and area if an edge (azi, s) were added next

        The polygon itself is not modified.  Without a first vertex the
        result has num 0 and NaN perimeter and area.
        """
        num = self._num + 1
        if num == 1:
            return PolygonResult(0, math.nan, math.nan)
        perimeter = self._perimeter.value + s
        if self.polyline:
            return PolygonResult(num, perimeter, math.nan)

        tempsum = self._area.value
        crossings = self._crossings
        result = gen_direct(self.ellipsoid, self.lat, self.lon, azi, False, s,
                            self._mask | LONG_UNROLL)
        tempsum += result.S12
        crossings += transit_direct(self.lon, result.lon2)
        s12, S12 = self._edge(result.lat2, result.lon2, self.lat0, self.lon0)
        perimeter += s12
        tempsum += S12
        crossings += transit(result.lon2, self.lon0)
        return PolygonResult(num, perimeter,
                             _reduce_area(tempsum, self.area0, crossings,
                                          reverse, sign))

    def __repr__(self):
        kind = "polyline" if self.polyline else "polygon"
        return f"PolygonArea({kind}, num={self._num})"


def polygon_area(ellipsoid, lats, lons) -> PolygonResult:
    """Perimeter and signed area of a polygon given its vertices

    Parameters:
    -----------
    ellipsoid : Ellipsoid
        Ellipsoid on which the polygon lies
    lats, lons : array_like
        Vertex latitudes and longitudes (deg); the polygon is closed
        implicitly

    Returns:
    --------
    PolygonResult
        Counter-clockwise traversal gives a positive area
    """
    polygon = PolygonArea(ellipsoid)
    for lat, lon in zip(lats, lons):
        polygon.add_point(float(lat), float(lon))
    return polygon.compute(reverse=False, sign=True)
