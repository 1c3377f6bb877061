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


"""Coordinate systems mapping LLA locations to absolute points in space

Different systems use different models of Earth's surface, and a
latitude/longitude must be understood within its coordinate system or
significant errors are introduced. Only WGS84, the system maintained by the
NGA and used by GPS, is provided.
"""

from abc import ABC, abstractmethod

from ..core.data_structures import ENU, LLA, XYZ
from .transforms import enu2xyz, lla2xyz, xyz2enu, xyz2lla


class CoordinateSystem(ABC):
    """Mapping between LLA, earth-centered XYZ and local ENU positions.

    Implementations are stateless; every method is a pure function of its
    arguments and the ellipsoid parameters of the system.
    """

    @abstractmethod
    def lla_to_xyz(self, lla: LLA) -> XYZ:
        """Return the absolute XYZ of an LLA inside this coordinate system"""

    @abstractmethod
    def xyz_to_lla(self, xyz: XYZ) -> LLA:
        """Return the LLA of an absolute XYZ"""

    @abstractmethod
    def xyz_to_enu(self, ref: LLA, xyz: XYZ) -> ENU:
        """Return an absolute XYZ on the ENU tangent plane at ``ref``"""

    @abstractmethod
    def enu_to_xyz(self, ref: LLA, enu: ENU) -> XYZ:
        """Return the absolute XYZ of an ENU relative to the tangent plane at ``ref``"""

    def lla_to_enu(self, ref: LLA, lla: LLA) -> ENU:
        """Return ``lla`` on the ENU tangent plane at ``ref``"""
        return self.xyz_to_enu(ref, self.lla_to_xyz(lla))

    def enu_to_lla(self, ref: LLA, enu: ENU) -> LLA:
        """Return the LLA of an ENU relative to the tangent plane at ``ref``"""
        return self.xyz_to_lla(self.enu_to_xyz(ref, enu))


class WGS84CoordinateSystem(CoordinateSystem):
    """World Geodetic System 1984

    Thin typed wrapper over the array functions in
    :mod:`pygeoconv.coordinate.transforms`.

    Examples
    --------
    >>> wgs = wgs84()
    >>> ref = LLA(38.897957, -77.036560, 30)
    >>> enu = wgs.lla_to_enu(ref, LLA(38.8709455, -77.0552551, 100))
    >>> position = wgs.xyz_to_lla(wgs.enu_to_xyz(ref, enu))
    """

    def lla_to_xyz(self, lla: LLA) -> XYZ:
        return XYZ.from_array(lla2xyz(lla.to_array()))

    def xyz_to_lla(self, xyz: XYZ) -> LLA:
        return LLA.from_array(xyz2lla(xyz.to_array()))

    def xyz_to_enu(self, ref: LLA, xyz: XYZ) -> ENU:
        return ENU.from_array(xyz2enu(xyz.to_array(), ref.to_array()))

    def enu_to_xyz(self, ref: LLA, enu: ENU) -> XYZ:
        return XYZ.from_array(enu2xyz(enu.to_array(), ref.to_array()))

    def __repr__(self):
        return "WGS84CoordinateSystem()"


WGS84 = WGS84CoordinateSystem()


def wgs84() -> CoordinateSystem:
    """Return the WGS84 coordinate system"""
    return WGS84


__all__ = ["CoordinateSystem", "WGS84CoordinateSystem", "WGS84", "wgs84"]
