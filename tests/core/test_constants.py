#!/usr/bin/env python3
"""Test suite for geodetic constants"""

import math
import unittest

from pygeoconv.core.constants import (
    D2R, R2D, RE_MEAN, WGS84_A, WGS84_A_SQ, WGS84_B, WGS84_B_SQ,
    WGS84_E2, WGS84_EP2, WGS84_F, WGS84_F_INV
)


class TestWGS84Constants(unittest.TestCase):
    """Test WGS84 ellipsoid parameters"""

    def test_axes(self):
        """Test semimajor and semiminor axes"""
        self.assertEqual(WGS84_A, 6378137.0)
        self.assertEqual(WGS84_B, 6356752.314245)
        self.assertGreater(WGS84_A, WGS84_B)
        self.assertEqual(WGS84_A_SQ, WGS84_A * WGS84_A)
        self.assertEqual(WGS84_B_SQ, WGS84_B * WGS84_B)

    def test_flattening(self):
        """Flattening ~1/298.257"""
        self.assertEqual(WGS84_F, (WGS84_A - WGS84_B) / WGS84_A)
        self.assertAlmostEqual(WGS84_F_INV, 298.257223563, delta=1e-6)
        self.assertAlmostEqual(WGS84_F * WGS84_F_INV, 1.0, places=12)

    def test_eccentricity(self):
        """First and second eccentricity squared"""
        self.assertAlmostEqual(WGS84_E2, 0.00669437999014, places=12)
        self.assertAlmostEqual(WGS84_E2, (WGS84_A_SQ - WGS84_B_SQ) / WGS84_A_SQ, places=14)
        self.assertAlmostEqual(WGS84_EP2, (WGS84_A_SQ - WGS84_B_SQ) / WGS84_B_SQ, places=14)


class TestOtherConstants(unittest.TestCase):
    """Test spherical radius and conversion factors"""

    def test_mean_radius(self):
        """Haversine sphere radius"""
        self.assertEqual(RE_MEAN, 6371000.0)
        self.assertLess(WGS84_B, RE_MEAN)
        self.assertLess(RE_MEAN, WGS84_A)

    def test_angle_factors(self):
        """Degrees/radians factors are reciprocal"""
        self.assertAlmostEqual(D2R * R2D, 1.0, places=15)
        self.assertAlmostEqual(180 * D2R, math.pi, places=15)


if __name__ == '__main__':
    unittest.main()
