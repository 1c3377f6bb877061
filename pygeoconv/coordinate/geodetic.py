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


"""Great-circle distance on a spherical earth"""

import numpy as np

from ..core.constants import D2R, RE_MEAN
from ..core.data_structures import LLA
from ..core.exceptions import InvalidAltitudeError
from ..core.units import Meters
from ..logger import get_logger

logger = get_logger(__name__)


def haversine(lat1, lon1, lat2, lon2) -> np.ndarray:
    """
    Compute great-circle distance with the haversine formula

    Parameters:
    -----------
    lat1, lon1 : array_like
        First point(s) (deg, deg)
    lat2, lon2 : array_like
        Second point(s) (deg, deg), broadcast against the first

    Returns:
    --------
    distance : np.ndarray
        Distance along a sphere of radius RE_MEAN (m)
    """
    lat1 = np.asarray(lat1, dtype=float) * D2R
    lon1 = np.asarray(lon1, dtype=float) * D2R
    lat2 = np.asarray(lat2, dtype=float) * D2R
    lon2 = np.asarray(lon2, dtype=float) * D2R

    dlat = lat1 - lat2
    dlon = lon1 - lon2

    a = np.sin(dlat / 2)**2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2)**2
    # Rounding can push a just past 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return RE_MEAN * c


def haversine_distance(origin: LLA, position: LLA) -> Meters:
    """Return the great-circle distance between two points at zero altitude

    The distance is measured as if one were to traverse the surface of a
    spherical Earth. The sphere has a fixed radius, so the result only makes
    sense when both points have an altitude of 0.

    Parameters
    ----------
    origin : LLA
        Start point, altitude must be 0
    position : LLA
        End point, altitude must be 0

    Returns
    -------
    Meters
        Great-circle distance

    Raises
    ------
    InvalidAltitudeError
        If either point has a nonzero altitude

    Examples
    --------
    >>> d = haversine_distance(LLA(22.55, 43.12), LLA(13.45, 100.28))
    >>> print(f"{d.f64() / 1000:.1f} km")
    6094.5 km
    """
    if origin.altitude != 0 or position.altitude != 0:
        logger.debug("haversine_distance rejected altitudes %s and %s",
                     origin.altitude, position.altitude)
        raise InvalidAltitudeError(origin, position)

    distance = haversine(origin.latitude, origin.longitude,
                         position.latitude, position.longitude)
    return Meters(float(distance))


__all__ = ["haversine", "haversine_distance"]
