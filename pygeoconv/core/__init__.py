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


"""Core module: constants, units, value types and exceptions.

- **Constants**: WGS84 ellipsoid parameters, spherical earth radius and
  angle conversion factors
- **Units**: ``Meters``, ``Degrees`` and ``Radians`` tagged scalars
- **Data Structures**: ``LLA``, ``XYZ``, ``ENU`` and ``AER`` value types
- **Exceptions**: ``InvalidAltitudeError``

Example Usage:
    >>> from pygeoconv.core import *
    >>>
    >>> heading = Degrees(90)
    >>> heading.radians()
    Radians(1.5707963267948966)
    >>> LLA(51.510357, -0.116773).altitude
    Meters(0.0)
"""

from .constants import *
from .data_structures import *
from .exceptions import InvalidAltitudeError
from .units import *
