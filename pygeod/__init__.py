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

"""
pygeod - Geodesics on an Ellipsoid of Revolution

A Python library for the direct and inverse geodesic problems, geodesic
lines and the perimeter and area of geodesic polygons, accurate to
round-off on any ellipsoid with moderate flattening.
"""

__version__ = "1.0.0"
__author__ = "pygeod Development Team"
__title__ = "pygeod"
__description__ = "Geodesic calculations on an ellipsoid of revolution"

from .logger import get_logger, setup_logger, setup_logger_from_config
from .core import *
from .geodesic import *
from .coordinate import *
