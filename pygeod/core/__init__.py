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

"""Core Numerical Module.

This module provides the building blocks shared by all geodesic calculations:

- **Constants and Parameters**: reference ellipsoids, unit conversions, series
  order, iteration limits and tolerances derived from the floating point format
- **Angle Arithmetic**: exact reduction, differencing and rounding of angles in
  degrees, sine/cosine and arctangent in degrees
- **Series Kernels**: Horner and Clenshaw evaluation compiled with Numba
- **Compensated Summation**: the Accumulator value type used for perimeters
  and areas
- **Data Structures**: result types returned by the solvers

Example Usage:
    >>> from pygeod.core import *
    >>>
    >>> d, e = ang_diff(179.0, -179.0)   # 2.0, 0.0
    >>> s, c = sincosd(90.0)             # exactly (1.0, 0.0)
    >>> acc = Accumulator().add(1e16).add(1.0).add(-1e16)
    >>> acc.value                        # 1.0
"""

from .accumulator import Accumulator
from .constants import *
from .data_structures import GeodesicResult, PolygonResult
from .geomath import (
    ang_diff,
    ang_normalize,
    ang_round,
    atan2d,
    lat_fix,
    norm2,
    remainder,
    sincosd,
    sincosde,
    sq,
    sum_x,
)
from .series import polyval, sin_cos_series
