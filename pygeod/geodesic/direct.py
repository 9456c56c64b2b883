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

"""Direct geodesic problem"""

from ..core.data_structures import GeodesicResult
from .line import GeodesicLine
from .masks import DISTANCE_IN, STANDARD


def gen_direct(ellipsoid, lat1: float, lon1: float, azi1: float,
               arcmode: bool, s12_a12: float,
               outmask: int = STANDARD) -> GeodesicResult:
    """Solve the direct problem by distance or by arc length

    Parameters:
    -----------
    ellipsoid : Ellipsoid
        Ellipsoid on which to solve
    lat1, lon1, azi1 : float
        Starting point and azimuth (deg)
    arcmode : bool
        Interpret s12_a12 as an arc length (deg) instead of a distance (m)
    s12_a12 : float
        Distance or arc length to the destination
    outmask : int
        GeodesicMask of the requested outputs

    Returns:
    --------
    GeodesicResult
        Destination point and the requested extras
    """
    line = GeodesicLine(ellipsoid, lat1, lon1, azi1,
                        outmask | (0 if arcmode else DISTANCE_IN))
    return line.gen_position(arcmode, s12_a12, outmask)


def direct(ellipsoid, lat1: float, lon1: float, azi1: float, s12: float,
           outmask: int = STANDARD) -> GeodesicResult:
    """Destination at distance s12 (m) from lat1, lon1 along azi1"""
    return gen_direct(ellipsoid, lat1, lon1, azi1, False, s12, outmask)


def arc_direct(ellipsoid, lat1: float, lon1: float, azi1: float, a12: float,
               outmask: int = STANDARD) -> GeodesicResult:
    """Destination at arc length a12 (deg) from lat1, lon1 along azi1"""
    return gen_direct(ellipsoid, lat1, lon1, azi1, True, a12, outmask)


def gen_direct_line(ellipsoid, lat1: float, lon1: float, azi1: float,
                    arcmode: bool, s12_a12: float,
                    caps: int = STANDARD | DISTANCE_IN) -> GeodesicLine:
    """Geodesic line with its target point set by distance or arc length"""
    line = GeodesicLine(ellipsoid, lat1, lon1, azi1, caps)
    line.gen_set_distance(arcmode, s12_a12)
    return line


def direct_line(ellipsoid, lat1: float, lon1: float, azi1: float, s12: float,
                caps: int = STANDARD | DISTANCE_IN) -> GeodesicLine:
    """Geodesic line whose target point lies at distance s12 (m)"""
    return gen_direct_line(ellipsoid, lat1, lon1, azi1, False, s12, caps)


def arc_direct_line(ellipsoid, lat1: float, lon1: float, azi1: float,
                    a12: float,
                    caps: int = STANDARD | DISTANCE_IN) -> GeodesicLine:
    """Geodesic line whose target point lies at arc length a12 (deg)"""
    return gen_direct_line(ellipsoid, lat1, lon1, azi1, True, a12, caps)
