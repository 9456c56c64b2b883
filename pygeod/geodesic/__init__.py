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

"""Geodesics on an ellipsoid of revolution

This module solves the direct and inverse geodesic problems to round-off
accuracy and accumulates the perimeter and area of geodesic polygons:

- **Ellipsoid**: ellipsoid parameters and the coefficient tables of the
  series expansions (named presets such as WGS84 and GRS80)
- **Masks**: GeodesicMask flags selecting the requested outputs
- **Direct Problem**: destination from a start point, azimuth and distance
  or arc length
- **Inverse Problem**: distance and azimuths between two points, including
  nearly antipodal ones
- **Geodesic Lines**: repeated positions along one geodesic
- **Polygons**: perimeter and area with prime meridian crossing counts
- **Geod**: all of the above bound to one ellipsoid

Example Usage:
    >>> from pygeod.geodesic import Geod
    >>>
    >>> geod = Geod()                                  # WGS84
    >>> r = geod.inverse(40.6, -73.8, 49.01666667, 2.55)
    >>> r.s12                                          # ~5853226 m
    >>> r = geod.direct(40.0, -75.0, 45.0, 10000.0)
    >>> r.lat2, r.lon2                                 # ~40.06365, -74.91712
"""

from .direct import arc_direct, arc_direct_line, direct, direct_line, gen_direct, gen_direct_line
from .ellipsoid import WGS84, Ellipsoid
from .geod import Geod
from .inverse import gen_inverse, inverse, inverse_line
from .lengths import lengths
from .line import GeodesicLine
from .masks import (
    ALL,
    AREA,
    AZIMUTH,
    DISTANCE,
    DISTANCE_IN,
    EMPTY,
    GEODESICSCALE,
    LATITUDE,
    LONG_UNROLL,
    LONGITUDE,
    REDUCEDLENGTH,
    STANDARD,
    GeodesicMask,
)
from .polygon import PolygonArea, polygon_area, transit, transit_direct
