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


"""Azimuth-Elevation-Range (AER) coordinate transformations

AER is the angular counterpart of ENU on the same local tangent plane, so
no reference ellipsoid is involved. Azimuth is measured from north towards
east and elevation above the tangent plane, both in degrees.
"""


import numpy as np

from ..core.constants import D2R, R2D
from ..core.data_structures import AER, ENU
from .transforms import _as_vectors


def enu2aer(enu) -> np.ndarray:
    """Convert ENU vectors to Azimuth-Elevation-Range

    Parameters
    ----------
    enu : array_like
        ENU coordinates [e, n, u] in meters, shape (3,) or (N, 3)

    Returns
    -------
    np.ndarray
        AER coordinates [azimuth, elevation, range] where:
        - azimuth: angle from north towards east (-180 to 180 deg)
        - elevation: angle above horizontal plane (-90 to 90 deg)
        - range: distance from the origin (m)

    Notes
    -----
    A zero vector has no direction; it maps to azimuth = elevation = 0
    with zero range.

    Examples
    --------
    >>> aer = enu2aer([100.0, 100.0, 0.0])
    >>> print(f"Azimuth: {aer[0]:.1f}°")
    Azimuth: 45.0°
    """
    enu = _as_vectors(enu, "enu")
    e, n, u = enu[..., 0], enu[..., 1], enu[..., 2]

    r = np.hypot(e, n)
    az = np.arctan2(e, n)
    el = np.arctan2(u, r)
    rng = np.hypot(r, u)

    return np.stack([az * R2D, el * R2D, rng], axis=-1)


def aer2enu(aer) -> np.ndarray:
    """Convert Azimuth-Elevation-Range to ENU vectors

    This is the inverse operation of enu2aer().

    Parameters
    ----------
    aer : array_like
        AER coordinates [azimuth, elevation, range] in (deg, deg, m),
        shape (3,) or (N, 3)

    Returns
    -------
    np.ndarray
        ENU coordinates [e, n, u] in meters

    Notes
    -----
    North is ``range * cos(el) * cos(az)``. Writing it with ``sin(el)``
    instead would no longer be inverted by enu2aer().
    """
    aer = _as_vectors(aer, "aer")
    az = aer[..., 0] * D2R
    el = aer[..., 1] * D2R
    rng = aer[..., 2]

    # Horizontal range
    r = rng * np.cos(el)

    e = r * np.sin(az)
    n = r * np.cos(az)
    u = rng * np.sin(el)

    return np.stack([e, n, u], axis=-1)


def enu_to_aer(enu: ENU) -> AER:
    """Convert an ENU vector to an AER measurement"""
    return AER.from_array(enu2aer(enu.to_array()))


def aer_to_enu(aer: AER) -> ENU:
    """Convert an AER measurement to an ENU vector"""
    return ENU.from_array(aer2enu(aer.to_array()))


__all__ = ["enu2aer", "aer2enu", "enu_to_aer", "aer_to_enu"]
