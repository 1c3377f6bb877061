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


"""Coordinate transformation utilities

This module provides:
- WGS84 transforms between LLA, earth-centered XYZ and local ENU, both on
  numpy arrays and on the typed value types
- AER (Azimuth-Elevation-Range) transforms on the local tangent plane
- Haversine great-circle distance
"""

from .aer_transforms import aer2enu, aer_to_enu, enu2aer, enu_to_aer
from .coordinate_system import WGS84, CoordinateSystem, WGS84CoordinateSystem, wgs84
from .geodetic import haversine, haversine_distance
from .transforms import (
    enu2lla,
    enu2xyz,
    enu_rotation_matrix,
    lla2enu,
    lla2xyz,
    xyz2enu,
    xyz2lla,
)
