#!/usr/bin/env python3
"""Test suite for unit-tagged scalars"""

import math
import unittest

import numpy as np
from pygeoconv.core.units import Degrees, Meters, Radians


class TestAngleConversion(unittest.TestCase):
    """Test Degrees <-> Radians conversion"""

    def test_degrees_to_radians(self):
        """Test known degree values"""
        self.assertAlmostEqual(Degrees(180).radians(), math.pi, places=12)
        self.assertAlmostEqual(Degrees(90).radians(), math.pi / 2, places=12)
        self.assertAlmostEqual(Degrees(-45).radians(), -math.pi / 4, places=12)
        self.assertEqual(Degrees(0).radians(), Radians(0))

    def test_radians_to_degrees(self):
        """Test known radian values"""
        self.assertAlmostEqual(Radians(math.pi).degrees(), 180.0, places=10)
        self.assertAlmostEqual(Radians(-math.pi / 2).degrees(), -90.0, places=10)

    def test_conversion_types(self):
        """Conversions return the other unit"""
        self.assertIsInstance(Degrees(12.5).radians(), Radians)
        self.assertIsInstance(Radians(1.0).degrees(), Degrees)

    def test_round_trip(self):
        """Degrees -> Radians -> Degrees reproduces the input"""
        for x in [1e-9, 0.5, 34.00000048, -117.3335693, 180.0, 359.999, -720.0, 1e6]:
            result = Degrees(x).radians().degrees()
            self.assertLess(abs(result - x) / abs(x), 1e-9, msg=f"round trip failed for {x}")
        self.assertEqual(Degrees(0.0).radians().degrees(), Degrees(0.0))

    def test_numpy_interop(self):
        """Units are floats and work with numpy"""
        self.assertAlmostEqual(np.sin(Degrees(30).radians()), 0.5, places=12)
        arr = np.array([Meters(1), Meters(2)])
        self.assertEqual(arr.dtype, np.float64)

    def test_numpy_scalar_arithmetic(self):
        """numpy scalars drop the unit tag"""
        total = np.float64(1.0) + Meters(2)
        self.assertNotIsInstance(total, Meters)
        self.assertEqual(total, 3.0)
        self.assertIsInstance(Meters(total), Meters)


class TestUnitArithmetic(unittest.TestCase):
    """Test arithmetic and comparison between units"""

    def test_same_unit_arithmetic(self):
        """Adding and subtracting a unit keeps the unit"""
        total = Meters(10) + Meters(5)
        self.assertIsInstance(total, Meters)
        self.assertEqual(total, Meters(15))

        diff = Meters(10) - Meters(15)
        self.assertIsInstance(diff, Meters)
        self.assertEqual(diff, Meters(-5))

        self.assertIsInstance(Degrees(10) + Degrees(20), Degrees)

    def test_plain_numbers(self):
        """Plain numbers take on the unit of the tagged operand"""
        self.assertEqual(Meters(10) + 1, Meters(11))
        self.assertIsInstance(1 + Meters(10), Meters)
        self.assertIsInstance(1.5 + Meters(10), Meters)
        self.assertEqual(20 - Meters(5), Meters(15))
        self.assertIsInstance(Meters(2) * 3, Meters)
        self.assertEqual(3 * Meters(2), Meters(6))
        self.assertEqual(Meters(6) / 4, Meters(1.5))

    def test_mixed_units_rejected(self):
        """Combining different units raises TypeError"""
        with self.assertRaises(TypeError):
            Degrees(90) + Radians(1.0)
        with self.assertRaises(TypeError):
            Radians(1.0) - Degrees(90)
        with self.assertRaises(TypeError):
            Meters(1) + Degrees(1)
        with self.assertRaises(TypeError):
            Degrees(1) < Radians(1)

    def test_product_of_units_rejected(self):
        """A product of two lengths is not a length"""
        with self.assertRaises(TypeError):
            Meters(2) * Meters(3)

    def test_ratio_is_dimensionless(self):
        """Dividing two values of the same unit gives a plain float"""
        ratio = Meters(6) / Meters(3)
        self.assertIs(type(ratio), float)
        self.assertEqual(ratio, 2.0)

    def test_unary(self):
        """Negation and abs keep the unit"""
        self.assertEqual(-Meters(3), Meters(-3))
        self.assertIsInstance(-Meters(3), Meters)
        self.assertIsInstance(abs(Degrees(-3)), Degrees)

    def test_comparison(self):
        """Comparisons within a unit and against plain numbers"""
        self.assertLess(Meters(1), Meters(2))
        self.assertGreaterEqual(Meters(2), 2)
        self.assertTrue(Meters(0) == 0)
        self.assertFalse(Degrees(0) == Radians(0))
        self.assertTrue(Degrees(0) != Radians(0))
        self.assertEqual(max(Meters(3), Meters(7)), Meters(7))

    def test_hashable(self):
        """Units can be used as dict keys"""
        self.assertEqual(len({Meters(1), Meters(1.0)}), 1)


class TestUnitRepresentation(unittest.TestCase):
    """Test conversions to plain values and strings"""

    def test_f64(self):
        """f64 returns a plain float"""
        value = Meters(251.702).f64()
        self.assertIs(type(value), float)
        self.assertEqual(value, 251.702)
        self.assertEqual(float(Degrees(12.5)), 12.5)

    def test_str_repr(self):
        """String forms carry the unit"""
        self.assertEqual(str(Meters(1.5)), "1.5 m")
        self.assertEqual(str(Degrees(90)), "90.0 deg")
        self.assertEqual(repr(Radians(1.0)), "Radians(1.0)")


if __name__ == '__main__':
    unittest.main()
