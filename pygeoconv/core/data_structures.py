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


"""Coordinate value types

Four immutable value types describe a position:

- **LLA**: absolute and angular, latitude/longitude in degrees plus
  altitude above the ellipsoid in meters
- **XYZ**: absolute and cartesian, earth-centered earth-fixed meters
- **ENU**: relative and cartesian, East/North/Up meters on the tangent
  plane at some reference LLA
- **AER**: relative and angular, azimuth/elevation in degrees and range in
  meters as seen by an observer (for instance a RADAR)

Fields are coerced to their unit type on construction, so plain numbers are
accepted:

>>> LLA(38.897957, -77.036560, 30)
LLA(latitude=Degrees(38.897957), longitude=Degrees(-77.03656), altitude=Meters(30.0))
"""

from dataclasses import dataclass, fields

import numpy as np

from .units import Degrees, Meters, UnitFloat


class _Coordinate:
    """Shared behaviour of the coordinate value types"""

    __slots__ = ()

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, UnitFloat) and not isinstance(value, f.type):
                raise TypeError(
                    f"{type(self).__name__}.{f.name} expects {f.type.__name__}, "
                    f"got {type(value).__name__}"
                )
            object.__setattr__(self, f.name, f.type(value))

    def to_array(self) -> np.ndarray:
        """Return the fields, in declaration order, as a float array of shape (3,)"""
        return np.array([float(getattr(self, f.name)) for f in fields(self)])

    @classmethod
    def from_array(cls, arr):
        """Build a value from a sequence of 3 numbers in field order

        Raises
        ------
        ValueError
            If ``arr`` does not hold exactly 3 values
        """
        arr = np.asarray(arr, dtype=float)
        if arr.shape != (3,):
            raise ValueError(f"{cls.__name__} expects 3 values, got shape {arr.shape}")
        return cls(*(float(v) for v in arr))


@dataclass(frozen=True)
class LLA(_Coordinate):
    """Latitude, Longitude, Altitude: a location somewhere around Earth.

    Attributes
    ----------
    latitude : Degrees
        Geodetic latitude, -90 to 90
    longitude : Degrees
        Longitude, -180 to 180
    altitude : Meters
        Height above the reference ellipsoid, defaults to 0
    """
    latitude: Degrees
    longitude: Degrees
    altitude: Meters = Meters(0.0)


@dataclass(frozen=True)
class XYZ(_Coordinate):
    """Earth-centered cartesian position in meters"""
    x: Meters
    y: Meters
    z: Meters


@dataclass(frozen=True)
class ENU(_Coordinate):
    """East, North, Up in meters on the local tangent plane.

    Increasing ``north`` moves along the tangent plane and so further and
    further away from the Earth's surface.
    """
    east: Meters
    north: Meters
    up: Meters

    def to_aer(self) -> "AER":
        """Return this vector as azimuth, elevation and range"""
        from ..coordinate.aer_transforms import enu_to_aer
        return enu_to_aer(self)


@dataclass(frozen=True)
class AER(_Coordinate):
    """Azimuth, Elevation, Range relative to an observer.

    Attributes
    ----------
    azimuth : Degrees
        Angle from north towards east
    elevation : Degrees
        Angle above the tangent plane
    range : Meters
        Distance from the observer
    """
    azimuth: Degrees
    elevation: Degrees
    range: Meters

    def to_enu(self) -> ENU:
        """Return this vector on the ENU tangent plane"""
        from ..coordinate.aer_transforms import aer_to_enu
        return aer_to_enu(self)


__all__ = ["LLA", "XYZ", "ENU", "AER"]
