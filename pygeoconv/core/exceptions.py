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


"""Exceptions raised by pygeoconv"""


class InvalidAltitudeError(ValueError):
    """Raised when a spherical-earth computation receives a nonzero altitude.

    The haversine formula assumes both points sit on a sphere of fixed
    radius. Rather than silently ignoring the altitude and returning a
    plausible but wrong distance, the computation is refused.

    Attributes
    ----------
    origin : LLA
        First point passed to the computation
    position : LLA
        Second point passed to the computation
    """

    def __init__(self, origin, position, message: str = "altitude must be 0"):
        super().__init__(message)
        self.origin = origin
        self.position = position
