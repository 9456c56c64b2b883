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

"""Geodesic Constants and Numerical Parameters"""

import math
import sys

import numpy as np

# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
FE_WGS84 = 1.0 / 298.257223563 # earth flattening

# Other reference ellipsoids
RE_GRS80 = 6378137.0           # GRS80 semimajor axis (m)
FE_GRS80 = 1.0 / 298.257222101 # GRS80 flattening
RE_WGS72 = 6378135.0           # WGS72 semimajor axis (m)
FE_WGS72 = 1.0 / 298.26        # WGS72 flattening
RE_INTL = 6378388.0            # International 1924 semimajor axis (m)
FE_INTL = 1.0 / 297.0          # International 1924 flattening
RE_SPHERE = 6371008.8          # IUGG mean earth radius (m)

# Named ellipsoids as (a, f), used by Ellipsoid.from_name
ELLIPSOIDS = {
    'WGS84': (RE_WGS84, FE_WGS84),
    'GRS80': (RE_GRS80, FE_GRS80),
    'WGS72': (RE_WGS72, FE_WGS72),
    'INTL1924': (RE_INTL, FE_INTL),
    'SPHERE': (RE_SPHERE, 0.0),
}

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians

# Angles in degrees
QD = 90.0                      # quarter turn
HD = 180.0                     # half turn
TD = 360.0                     # full turn

# Floating point parameters
DIGITS = sys.float_info.mant_dig
EPSILON = sys.float_info.epsilon
REALMIN = sys.float_info.min
TINY = math.sqrt(REALMIN)      # floor for cos(beta) at the poles

# Series truncation
GEODESIC_ORDER = 6
NA1 = NC1 = NC1P = NA2 = NC2 = NA3 = NC3 = NC4 = GEODESIC_ORDER
NA3X = NA3
NC3X = (NC3 * (NC3 - 1)) // 2  # size of the C3 coefficient table
NC4X = (NC4 * (NC4 + 1)) // 2  # size of the C4 coefficient table
NC = GEODESIC_ORDER + 1        # length of a coefficient array

# Inverse problem iteration limits
MAXIT1 = 20                    # Newton iterations before pure bisection
MAXIT2 = MAXIT1 + DIGITS + 10  # hard cap on the total iteration count

# Tolerances
TOL0 = EPSILON
# tol1 uses 200 rather than 100 for the inverse case
# 52.784459512564 0 -52.784459512563990912 179.634407464943777557
TOL1 = 200 * TOL0
TOL2 = math.sqrt(TOL0)
TOLB = TOL0                    # bisection interval
XTHRESH = 1000 * TOL2          # astroid strip width
