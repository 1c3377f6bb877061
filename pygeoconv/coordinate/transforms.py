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


"""WGS84 coordinate transformations on numpy arrays

Every function accepts either a single vector of shape (3,) or a stack of
vectors of shape (N, 3) and returns the same shape. Geodetic vectors are
``[lat, lon, height]`` with angles in **degrees** and height in meters.

The reference point of the local frame (``org_lla``) is always a single
geodetic vector of shape (3,).
"""

import numpy as np

from ..core.constants import D2R, R2D, WGS84_A, WGS84_B, WGS84_E2, WGS84_EP2
from ..logger import LogLevel, get_logger

logger = get_logger(__name__)


def _as_vectors(arr, name: str) -> np.ndarray:
    """Return ``arr`` as a float array whose last dimension is 3"""
    arr = np.asarray(arr, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"{name} must have shape (3,) or (N, 3), got {arr.shape}")
    if arr.ndim > 1 and logger.isEnabledFor(LogLevel.TRACE.value):
        logger.log(LogLevel.TRACE.value, "converting %d %s vectors", arr.shape[0], name)
    return arr


def _as_reference(org_lla) -> np.ndarray:
    org_lla = np.asarray(org_lla, dtype=float)
    if org_lla.shape != (3,):
        raise ValueError(f"org_lla must have shape (3,), got {org_lla.shape}")
    return org_lla


def lla2xyz(lla) -> np.ndarray:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    lla : array_like
        Geodetic coordinates [lat, lon, height] where:
        - lat, lon: in degrees
        - height: height above WGS84 ellipsoid in meters

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters

    Notes
    -----
    Uses the prime vertical radius of curvature
    N = a / sqrt(1 - e^2 sin^2(lat)). This transformation is exact.

    Examples
    --------
    >>> xyz = lla2xyz([34.00000048, -117.3335693, 251.702])
    >>> print(f"ECEF: [{xyz[0]:.1f}, {xyz[1]:.1f}, {xyz[2]:.1f}] m")
    ECEF: [-2430601.8, -4702442.7, 3546587.4] m
    """
    lla = _as_vectors(lla, "lla")
    lat = lla[..., 0] * D2R
    lon = lla[..., 1] * D2R
    h = lla[..., 2]

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)

    x = (h + N) * cos_lat * cos_lon
    y = (h + N) * cos_lat * sin_lon
    z = (h + (1.0 - WGS84_E2) * N) * sin_lat

    return np.stack([x, y, z], axis=-1)


def xyz2lla(xyz) -> np.ndarray:
    """Convert ECEF coordinates to geodetic coordinates

    Closed-form (non-iterative) inversion using the parametric latitude
    q = atan2(z a, p b) as the first estimate.

    Parameters
    ----------
    xyz : array_like
        ECEF coordinates [x, y, z] in meters

    Returns
    -------
    np.ndarray
        Geodetic coordinates [lat, lon, height] where:
        - lat: latitude in degrees (-90 to 90)
        - lon: longitude in degrees (-180 to 180)
        - height: height above WGS84 ellipsoid in meters

    Notes
    -----
    Height is p / cos(lat) - N, which loses precision on the polar axis
    (cos(lat) -> 0). Points there are not rejected.
    """
    xyz = _as_vectors(xyz, "xyz")
    x, y, z = xyz[..., 0], xyz[..., 1], xyz[..., 2]

    p = np.sqrt(x**2 + y**2)
    if np.any(p == 0.0):
        logger.debug("xyz2lla: point on the polar axis, height is ill-conditioned")

    q = np.arctan2(z * WGS84_A, p * WGS84_B)
    sin_q3 = np.sin(q)**3
    cos_q3 = np.cos(q)**3

    lat = np.arctan2(z + WGS84_EP2 * WGS84_B * sin_q3,
                     p - WGS84_E2 * WGS84_A * cos_q3)
    lon = np.arctan2(y, x)

    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * np.sin(lat)**2)
    h = p / np.cos(lat) - N

    return np.stack([lat * R2D, lon * R2D, h], axis=-1)


def enu_rotation_matrix(org_lla) -> np.ndarray:
    """Rotation matrix from ECEF to ENU at a reference point

    Parameters
    ----------
    org_lla : array_like
        Reference geodetic coordinates [lat, lon, height] (deg, deg, m)

    Returns
    -------
    np.ndarray
        3x3 orthonormal matrix R with enu = R @ (xyz - org_xyz)
    """
    org_lla = _as_reference(org_lla)
    lat, lon = org_lla[0] * D2R, org_lla[1] * D2R
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    ])


def xyz2enu(xyz, org_lla) -> np.ndarray:
    """Convert ECEF to local ENU coordinates

    Parameters
    ----------
    xyz : array_like
        ECEF coordinates [x, y, z] in meters
    org_lla : array_like
        Origin geodetic coordinates [lat, lon, height] (deg, deg, m)

    Returns
    -------
    np.ndarray
        Local ENU coordinates [e, n, u] in meters

    Examples
    --------
    >>> org = np.array([34.00000048, -117.3335693, 251.702])
    >>> enu = xyz2enu(lla2xyz(org) + [1.0, 0.0, 0.0], org)
    >>> print(np.round(enu, 3))
    [ 0.888  0.257 -0.381]
    """
    xyz = _as_vectors(xyz, "xyz")
    org_lla = _as_reference(org_lla)

    # Vector from origin
    dx = xyz - lla2xyz(org_lla)

    return dx @ enu_rotation_matrix(org_lla).T


def enu2xyz(enu, org_lla) -> np.ndarray:
    """Convert local ENU to ECEF coordinates

    This is the inverse transformation of xyz2enu().

    Parameters
    ----------
    enu : array_like
        Local ENU coordinates [e, n, u] in meters
    org_lla : array_like
        Origin geodetic coordinates [lat, lon, height] (deg, deg, m)

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters
    """
    enu = _as_vectors(enu, "enu")
    org_lla = _as_reference(org_lla)

    # Transpose of the ECEF to ENU rotation
    return lla2xyz(org_lla) + enu @ enu_rotation_matrix(org_lla)


def lla2enu(lla, org_lla) -> np.ndarray:
    """Convert geodetic coordinates to ENU relative to org_lla"""
    return xyz2enu(lla2xyz(lla), org_lla)


def enu2lla(enu, org_lla) -> np.ndarray:
    """Convert ENU relative to org_lla to geodetic coordinates"""
    return xyz2lla(enu2xyz(enu, org_lla))


__all__ = [
    "lla2xyz", "xyz2lla", "enu_rotation_matrix",
    "xyz2enu", "enu2xyz", "lla2enu", "enu2lla",
]
