"""
Tests for the unit system.
"""

import math
import unittest

from telemap.unit import Degree, Foot, Inch, Kilometer, Meter, Radian, Turn


class TestUnitFamilies(unittest.TestCase):
    """Test family root resolution."""

    def test_length_root(self):
        """Test that every length unit is rooted at Meter."""
        for unit in (Meter, Kilometer, Foot, Inch):
            self.assertIs(unit.ROOT, Meter)

    def test_angle_root(self):
        """Test that every angle unit is rooted at Radian."""
        for unit in (Radian, Degree, Turn):
            self.assertIs(unit.ROOT, Radian)

    def test_mixing_families_rejected(self):
        """Test that length and angle cannot be combined."""
        with self.assertRaises(TypeError):
            Meter(1) + Degree(1)
        with self.assertRaises(TypeError):
            Inch(1).to(Radian)
        with self.assertRaises(TypeError):
            Meter(1) == Radian(1)


class TestConversion(unittest.TestCase):
    """Test SI storage and conversion."""

    def test_si_storage(self):
        """Test values are stored in SI units."""
        self.assertAlmostEqual(float(Inch(1)), 0.0254)
        self.assertAlmostEqual(float(Kilometer(2)), 2000.0)
        self.assertAlmostEqual(float(Degree(180)), math.pi)
        self.assertAlmostEqual(float(Turn(1)), 2 * math.pi)

    def test_to(self):
        """Test conversion between units of a family."""
        self.assertAlmostEqual(Meter(1).to(Inch), 39.37007874015748)
        self.assertAlmostEqual(Foot(1).to(Inch), 12.0)
        self.assertAlmostEqual(Turn(0.25).to(Degree), 90.0)
        self.assertAlmostEqual(Degree(90).to(Radian), math.pi / 2)

    def test_as_unit_keeps_magnitude(self):
        """Test re-typing keeps the SI value."""
        inches = Meter(1).as_unit(Inch)
        self.assertIsInstance(inches, Inch)
        self.assertAlmostEqual(float(inches), 1.0)

    def test_from_si(self):
        """Test construction from an SI value."""
        self.assertAlmostEqual(Degree.from_si(math.pi).to(Degree), 180.0)
        self.assertEqual(Meter(3.5).base_magnitude(), 3.5)


class TestArithmetic(unittest.TestCase):
    """Test arithmetic and comparison."""

    def test_add_sub(self):
        """Test addition within a family keeps the left operand's type."""
        total = Meter(1) + Inch(10)
        self.assertIsInstance(total, Meter)
        self.assertAlmostEqual(float(total), 1.254)
        self.assertAlmostEqual(float(Meter(1) - Meter(0.25)), 0.75)

    def test_scale(self):
        """Test scaling by plain numbers."""
        self.assertAlmostEqual(float(Meter(2) * 3), 6.0)
        self.assertAlmostEqual(float(3 * Meter(2)), 6.0)
        self.assertAlmostEqual(float(Meter(3) / 2), 1.5)
        with self.assertRaises(TypeError):
            Meter(2) * Meter(3)

    def test_negation(self):
        """Test unary minus and abs keep the unit type."""
        self.assertIsInstance(-Degree(5), Degree)
        self.assertAlmostEqual((-Degree(5)).to(Degree), -5.0)
        self.assertAlmostEqual(abs(Degree(-5)).to(Degree), 5.0)

    def test_comparison(self):
        """Test comparisons within a family and against plain numbers."""
        self.assertTrue(Foot(1) < Meter(1))
        self.assertTrue(Meter(1) >= Inch(39))
        self.assertEqual(Meter(2), 2.0)
        self.assertNotEqual(Meter(2), Meter(3))
        self.assertFalse(Meter(1) == "1 m")

    def test_hashable(self):
        """Test units can be used as dictionary keys."""
        self.assertEqual(hash(Meter(2)), hash(2.0))
        self.assertIn(Meter(2), {Meter(2): "two"})

    def test_str_and_repr(self):
        """Test string representations use the unit's own scale."""
        self.assertEqual(str(Degree(90)), f"{Degree(90).to(Degree)} °")
        self.assertTrue(repr(Meter(2)).startswith("2 m"))


if __name__ == '__main__':
    unittest.main()
