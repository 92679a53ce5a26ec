"""
Tests for the unit system.
"""

from math import pi
import unittest

from geonav.unit import (
    ClockTime,
    Degree,
    Kilometer,
    Knot,
    Meter,
    MeterPerSecond,
    Radian,
    Second,
)


class TestUnitConversion(unittest.TestCase):
    """Test SI storage and conversion between scales."""

    def test_values_are_stored_in_si(self):
        """Values are stored in SI units."""
        self.assertEqual(float(Kilometer(5)), 5000.0)
        self.assertAlmostEqual(float(Knot(3600 / 1852)), 1.0)

    def test_to_converts_back_out(self):
        """to() converts back into the unit's own scale."""
        self.assertEqual(Meter(2500).to(Kilometer), 2.5)
        self.assertAlmostEqual(Degree(180).to(Radian), pi)
        self.assertAlmostEqual(MeterPerSecond(1852 / 3600).to(Knot), 1.0)

    def test_knot(self):
        """One knot is 1852 m per hour."""
        self.assertAlmostEqual(float(Knot(10)), 5.144444, places=5)

    def test_conversion_across_families_fails(self):
        """Conversion across families raises TypeError."""
        with self.assertRaises(TypeError):
            Meter(1).to(Second)


class TestUnitArithmetic(unittest.TestCase):
    """Test family-checked arithmetic and comparison."""

    def test_same_family_addition(self):
        """Adding units of one family keeps the left type."""
        total = Kilometer(1) + Meter(500)
        self.assertIsInstance(total, Kilometer)
        self.assertEqual(float(total), 1500.0)

    def test_cross_family_addition_fails(self):
        """Adding units of different families raises TypeError."""
        with self.assertRaises(TypeError):
            Meter(1) + Second(1)

    def test_scaling_by_number(self):
        """Units scale by plain numbers."""
        self.assertEqual(float(Meter(2) * 3), 6.0)
        self.assertEqual(float(3 * Meter(2)), 6.0)
        self.assertEqual(float(Meter(6) / 3), 2.0)

    def test_scaling_by_unit_fails(self):
        """Multiplying or dividing by a unit raises TypeError."""
        with self.assertRaises(TypeError):
            Meter(2) * Meter(3)
        with self.assertRaises(TypeError):
            Meter(2) / Second(1)

    def test_comparison(self):
        """Units of one family compare by SI value."""
        self.assertTrue(Meter(999) < Kilometer(1))
        self.assertEqual(Kilometer(1), Meter(1000))
        self.assertNotEqual(Kilometer(1), Meter(1))

    def test_comparison_with_plain_number_fails(self):
        """Comparing with a plain number raises TypeError."""
        with self.assertRaises(TypeError):
            Meter(3) < 5

    def test_negation_and_abs(self):
        """Negation and abs keep the unit."""
        self.assertEqual(float(-Meter(3)), -3.0)
        self.assertEqual(float(abs(Meter(-3))), 3.0)

    def test_hashable(self):
        """Equal units hash equally."""
        self.assertEqual(len({Meter(1), Meter(1)}), 1)


class TestClockTime(unittest.TestCase):
    """Test clock formatting of elapsed time."""

    def test_str(self):
        """Elapsed seconds print as HH:MM:SS.sss."""
        self.assertEqual(str(ClockTime(3725.5)), "01:02:05.500")

    def test_past_a_day(self):
        """Hours keep counting past a day."""
        self.assertEqual(str(ClockTime(27 * 3600)), "27:00:00.000")

    def test_not_finite(self):
        """Non-finite times print as dashes."""
        self.assertEqual(str(ClockTime(float("inf"))), "--:--:--")

    def test_same_family_as_second(self):
        """ClockTime adds with plain seconds."""
        self.assertEqual(ClockTime(90) + Second(30), ClockTime(120))


if __name__ == "__main__":
    unittest.main()
