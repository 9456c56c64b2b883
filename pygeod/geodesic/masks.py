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

"""Capability and output masks for geodesic calculations"""

from enum import IntFlag


class GeodesicMask(IntFlag):
    """Bit mask selecting the quantities a calculation returns.

    The low five bits name the coefficient series a GeodesicLine must
    precompute; each output bit carries the series it needs, so a mask
    built from outputs is also a valid capability mask.
    """
    CAP_NONE = 0
    CAP_C1 = 1 << 0
    CAP_C1p = 1 << 1
    CAP_C2 = 1 << 2
    CAP_C3 = 1 << 3
    CAP_C4 = 1 << 4
    CAP_ALL = 0x1F
    OUT_ALL = 0x7F80

    EMPTY = 0
    LATITUDE = 1 << 7 | CAP_NONE
    LONGITUDE = 1 << 8 | CAP_C3
    AZIMUTH = 1 << 9 | CAP_NONE
    DISTANCE = 1 << 10 | CAP_C1
    STANDARD = LATITUDE | LONGITUDE | AZIMUTH | DISTANCE
    DISTANCE_IN = 1 << 11 | CAP_C1 | CAP_C1p
    REDUCEDLENGTH = 1 << 12 | CAP_C1 | CAP_C2
    GEODESICSCALE = 1 << 13 | CAP_C1 | CAP_C2
    AREA = 1 << 14 | CAP_C4
    LONG_UNROLL = 1 << 15
    ALL = OUT_ALL | CAP_ALL


# Module level aliases
EMPTY = GeodesicMask.EMPTY
LATITUDE = GeodesicMask.LATITUDE
LONGITUDE = GeodesicMask.LONGITUDE
AZIMUTH = GeodesicMask.AZIMUTH
DISTANCE = GeodesicMask.DISTANCE
STANDARD = GeodesicMask.STANDARD
DISTANCE_IN = GeodesicMask.DISTANCE_IN
REDUCEDLENGTH = GeodesicMask.REDUCEDLENGTH
GEODESICSCALE = GeodesicMask.GEODESICSCALE
AREA = GeodesicMask.AREA
LONG_UNROLL = GeodesicMask.LONG_UNROLL
ALL = GeodesicMask.ALL
OUT_ALL = GeodesicMask.OUT_ALL
