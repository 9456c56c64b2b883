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

"""Result types for geodesic calculations"""

import math
from dataclasses import dataclass, fields
from typing import NamedTuple, Optional


@dataclass
class GeodesicResult:
    """Outputs of a direct or inverse geodesic calculation.

    Only the quantities requested through the output mask are filled in;
    the remaining fields stay None.

    Attributes
    ----------
    lat1, lon1, azi1 : float, optional
        Latitude, longitude and azimuth at point 1 (deg)
    lat2, lon2, azi2 : float, optional
        Latitude, longitude and azimuth at point 2 (deg)
    s12 : float, optional
        Distance from point 1 to point 2 (m)
    a12 : float, optional
        Arc length on the auxiliary sphere (deg)
    m12 : float, optional
        Reduced length of the geodesic (m)
    M12, M21 : float, optional
        Geodesic scales of point 2 relative to point 1 and vice versa
    S12 : float, optional
        Area between the geodesic and the equator (m^2)
    """
    lat1: Optional[float] = None
    lon1: Optional[float] = None
    azi1: Optional[float] = None
    lat2: Optional[float] = None
    lon2: Optional[float] = None
    azi2: Optional[float] = None
    s12: Optional[float] = None
    a12: Optional[float] = None
    m12: Optional[float] = None
    M12: Optional[float] = None
    M21: Optional[float] = None
    S12: Optional[float] = None

    def to_dict(self):
        """Return the populated fields as a dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}

    @property
    def is_valid(self) -> bool:
        """True if every populated field is a finite number"""
        return all(math.isfinite(v) for v in self.to_dict().values())


class PolygonResult(NamedTuple):
    """Perimeter and area of a polygon or polyline.

    Attributes
    ----------
    num : int
        Number of vertices
    perimeter : float
        Perimeter of the polygon or length of the polyline (m)
    area : float
        Area of the polygon (m^2); NaN for a polyline
    """
    num: int
    perimeter: float
    area: float
