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
pygeoconv - Geographic coordinate conversions

Convert GPS-style latitude/longitude/altitude readings to earth-centered
Cartesian coordinates, to a local East/North/Up tangent plane and to
Azimuth/Elevation/Range, and compute great-circle distances.

    >>> import pygeoconv as geo
    >>> wgs = geo.wgs84()
    >>> ref = geo.LLA(38.897957, -77.036560, 30)
    >>> aer = wgs.lla_to_enu(ref, geo.LLA(38.8709455, -77.0552551, 30)).to_aer()
"""

__version__ = "1.0.0"
__author__ = "pygeoconv Development Team"
__title__ = "pygeoconv"
__description__ = "Geographic coordinate conversions and great-circle distances"

from .core import *
from .coordinate import *
