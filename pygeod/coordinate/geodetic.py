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

"""Geodetic computations on [lat, lon, height] arrays"""


import numpy as np

from ..core.constants import D2R, HD, R2D
from ..core.geomath import ang_normalize
from ..geodesic.direct import direct
from ..geodesic.ellipsoid import WGS84
from ..geodesic.inverse import inverse
from ..geodesic.line import GeodesicLine
from ..geodesic.masks import AZIMUTH, DISTANCE, DISTANCE_IN, LATITUDE, LONGITUDE


def geodetic_distance(llh1: np.ndarray, llh2: np.ndarray,
                      ellipsoid=WGS84) -> float:
    """
    Compute geodetic distance between two points

    Parameters:
    -----------
    llh1 : np.ndarray
        First point [lat, lon, height] (rad, rad, m)
    llh2 : np.ndarray
        Second point [lat, lon, height] (rad, rad, m)
    ellipsoid : Ellipsoid
        Reference ellipsoid (default WGS84)

    Returns:
    --------
    distance : float
        Geodesic distance combined with the height difference (m)
    """
    result = inverse(ellipsoid, llh1[0] * R2D, llh1[1] * R2D,
                     llh2[0] * R2D, llh2[1] * R2D, DISTANCE)
    s = result.s12

    # Add height difference
    dh = llh2[2] - llh1[2]
    return float(np.sqrt(s**2 + dh**2))


def geodetic_azimuth(llh1: np.ndarray, llh2: np.ndarray,
                     ellipsoid=WGS84) -> tuple[float, float]:
    """
    Compute forward and reverse azimuth between two points

    Parameters:
    -----------
    llh1 : np.ndarray
        First point [lat, lon, height] (rad, rad, m)
    llh2 : np.ndarray
        Second point [lat, lon, height] (rad, rad, m)
    ellipsoid : Ellipsoid
        Reference ellipsoid (default WGS84)

    Returns:
    --------
    fwd_azimuth : float
        Forward azimuth from point 1 to point 2 (rad)
    rev_azimuth : float
        Reverse azimuth from point 2 to point 1 (rad)
    """
    result = inverse(ellipsoid, llh1[0] * R2D, llh1[1] * R2D,
                     llh2[0] * R2D, llh2[1] * R2D, AZIMUTH)
    fwd_azimuth = result.azi1 * D2R
    # azi2 is the direction of travel at point 2; turn it around
    rev_azimuth = ang_normalize(result.azi2 + HD) * D2R
    return fwd_azimuth, rev_azimuth


def geodetic_direct(llh: np.ndarray, azimuth: float, distance: float,
                    ellipsoid=WGS84) -> np.ndarray:
    """
    Compute the point at a given distance and azimuth

    Parameters:
    -----------
    llh : np.ndarray
        Start point [lat, lon, height] (rad, rad, m)
    azimuth : float
        Azimuth at the start point (rad)
    distance : float
        Distance along the geodesic (m)
    ellipsoid : Ellipsoid
        Reference ellipsoid (default WGS84)

    Returns:
    --------
    llh2 : np.ndarray
        End point [lat, lon, height] (rad, rad, m); the height is carried
        over from the start point
    """
    result = direct(ellipsoid, llh[0] * R2D, llh[1] * R2D, azimuth * R2D,
                    distance, LATITUDE | LONGITUDE)
    return np.array([result.lat2 * D2R, result.lon2 * D2R, llh[2]])


def geodesic_points(llh1: np.ndarray, llh2: np.ndarray, npts: int,
                    ellipsoid=WGS84) -> np.ndarray:
    """
    Compute equally spaced intermediate points along a geodesic

    Parameters:
    -----------
    llh1 : np.ndarray
        First point [lat, lon, ...] (rad)
    llh2 : np.ndarray
        Last point [lat, lon, ...] (rad)
    npts : int
        Number of interior points, the end points are excluded
    ellipsoid : Ellipsoid
        Reference ellipsoid (default WGS84)

    Returns:
    --------
    points : np.ndarray
        Interior points [[lat, lon], ...] (rad), shape (npts, 2)
    """
    if npts < 0:
        raise ValueError(f"Number of points must be non-negative: {npts}")
    points = np.zeros((npts, 2))
    if npts == 0:
        return points

    result = inverse(ellipsoid, llh1[0] * R2D, llh1[1] * R2D,
                     llh2[0] * R2D, llh2[1] * R2D, AZIMUTH | DISTANCE)
    line = GeodesicLine(ellipsoid, llh1[0] * R2D, llh1[1] * R2D, result.azi1,
                        LATITUDE | LONGITUDE | DISTANCE_IN)
    step = result.s12 / (npts + 1)
    for i in range(npts):
        pos = line.position((i + 1) * step, LATITUDE | LONGITUDE)
        points[i] = [pos.lat2 * D2R, pos.lon2 * D2R]
    return points


def inverse_arrays(lat1, lon1, lat2, lon2, ellipsoid=WGS84):
    """
    Solve the inverse problem for arrays of points

    Parameters:
    -----------
    lat1, lon1, lat2, lon2 : array_like
        Point coordinates (deg), broadcast against each other

    Returns:
    --------
    azi1, azi2, s12 : np.ndarray
        Azimuths (deg) and distances (m) with the broadcast shape
    """
    lat1, lon1, lat2, lon2 = np.broadcast_arrays(
        *(np.asarray(x, dtype=np.float64) for x in (lat1, lon1, lat2, lon2)))
    azi1 = np.empty(lat1.shape)
    azi2 = np.empty(lat1.shape)
    s12 = np.empty(lat1.shape)
    for idx in np.ndindex(lat1.shape):
        r = inverse(ellipsoid, float(lat1[idx]), float(lon1[idx]),
                    float(lat2[idx]), float(lon2[idx]), AZIMUTH | DISTANCE)
        azi1[idx] = r.azi1
        azi2[idx] = r.azi2
        s12[idx] = r.s12
    return azi1, azi2, s12


def direct_arrays(lat1, lon1, azi1, s12, ellipsoid=WGS84):
    """
    Solve the direct problem for arrays of start points

    Parameters:
    -----------
    lat1, lon1, azi1 : array_like
        Start points and azimuths (deg), broadcast against s12
    s12 : array_like
        Distances (m)

    Returns:
    --------
    lat2, lon2, azi2 : np.ndarray
        End points and azimuths (deg) with the broadcast shape
    """
    lat1, lon1, azi1, s12 = np.broadcast_arrays(
        *(np.asarray(x, dtype=np.float64) for x in (lat1, lon1, azi1, s12)))
    lat2 = np.empty(lat1.shape)
    lon2 = np.empty(lat1.shape)
    azi2 = np.empty(lat1.shape)
    for idx in np.ndindex(lat1.shape):
        r = direct(ellipsoid, float(lat1[idx]), float(lon1[idx]),
                   float(azi1[idx]), float(s12[idx]),
                   LATITUDE | LONGITUDE | AZIMUTH)
        lat2[idx] = r.lat2
        lon2[idx] = r.lon2
        azi2[idx] = r.azi2
    return lat2, lon2, azi2
