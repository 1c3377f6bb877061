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


"""Geodetic constants and unit conversion factors"""

import numpy as np

# Earth Parameters (WGS84)
WGS84_A = 6378137.0                         # earth semimajor axis (m)
WGS84_B = 6356752.314245                    # earth semiminor axis (m)
WGS84_F = (WGS84_A - WGS84_B) / WGS84_A     # earth flattening
WGS84_F_INV = 1.0 / WGS84_F                 # inverse flattening
WGS84_A_SQ = WGS84_A * WGS84_A              # semimajor axis squared (m^2)
WGS84_B_SQ = WGS84_B * WGS84_B              # semiminor axis squared (m^2)
WGS84_E2 = WGS84_F * (2.0 - WGS84_F)        # first eccentricity squared
WGS84_EP2 = WGS84_E2 / (1.0 - WGS84_E2)     # second eccentricity squared

# Spherical earth approximation
RE_MEAN = 6371000.0                         # mean earth radius for haversine (m)

# Unit conversions
R2D = 180.0 / np.pi                         # radians to degrees
D2R = np.pi / 180.0                         # degrees to radians

__all__ = [
    "WGS84_A", "WGS84_B", "WGS84_F", "WGS84_F_INV", "WGS84_A_SQ", "WGS84_B_SQ",
    "WGS84_E2", "WGS84_EP2", "RE_MEAN", "R2D", "D2R",
]
