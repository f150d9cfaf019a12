"""
Minimal test runner using only the standard library.
Run: python3 run_tests.py
"""

import sys
import unittest
from pathlib import Path

# Add src to path so osgbtools is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))


# ── Lattice Tests ─────────────────────────────────────────────

class TestLattice(unittest.TestCase):
    def test_positions(self):
        from osgbtools.lattice import letter_east_position, letter_north_position
        self.assertEqual(letter_east_position("S"), 2)
        self.assertEqual(letter_north_position("S"), 1)
        self.assertEqual(letter_east_position("e"), 4)

    def test_invalid_letter(self):
        from osgbtools.lattice import letter_east_position
        from osgbtools.exceptions import InvalidGridLetter
        with self.assertRaises(InvalidGridLetter):
            letter_east_position("I")


# ── Parser Tests ──────────────────────────────────────────────

class TestParser(unittest.TestCase):
    def test_valid(self):
        from osgbtools.parser import validate
        for ngr in ["TQ 12345 67890", "tq1234567890", "SU", "T 123456 123456", ""]:
            self.assertTrue(validate(ngr), f"Expected valid: {ngr}")

    def test_invalid(self):
        from osgbtools.parser import validate
        for ngr in ["TQZ1234567890", "TQ123", "TQ 12A 345", "TQ 123456 123456"]:
            self.assertFalse(validate(ngr), f"Expected invalid: {ngr}")

    def test_error_kinds(self):
        from osgbtools.exceptions import TooManyLetters, UnbalancedDigits
        from osgbtools.parser import parse
        with self.assertRaises(TooManyLetters):
            parse("TQZ1234567890")
        with self.assertRaises(UnbalancedDigits):
            parse("TQ123")


# ── GridSquare Tests ──────────────────────────────────────────

class TestGridSquare(unittest.TestCase):
    def _make_square(self):
        from osgbtools import GridSquare
        return GridSquare("TQ 12345 67890")

    def test_read_back(self):
        square = self._make_square()
        self.assertEqual(square.get_letters(), "TQ")
        self.assertEqual(square.get_easting(), "12345")
        self.assertEqual(square.get_northing(), "67890")
        self.assertEqual(square.get_size(), 1)

    def test_size_table(self):
        square = self._make_square()
        self.assertEqual(square.get_size(2, 5), 1)
        self.assertEqual(square.get_size(1, 0), 500_000)
        self.assertEqual(square.get_size(2, 0), 100_000)
        self.assertEqual(square.get_size(0, 0), 10_000_000)

    def test_precision_exchange(self):
        square = self._make_square()
        square.set_number_of_letters(0)
        self.assertEqual(square.get_number_of_digits(), 7)
        self.assertEqual(square.get_easting(), "0512345")
        self.assertEqual(square.get_size(), 1)

    def test_round_trip(self):
        from osgbtools import GridSquare
        for letters, digits in [("TQ", "098"), ("S", "123456"), ("", "42")]:
            square = GridSquare(letters + digits + digits)
            self.assertEqual(square.get_letters(), letters)
            self.assertEqual(square.get_easting(len(letters), len(digits)), digits)
            self.assertEqual(square.get_northing(len(letters), len(digits)), digits)

    def test_failed_parse_keeps_value(self):
        from osgbtools.exceptions import UnbalancedDigits
        square = self._make_square()
        with self.assertRaises(UnbalancedDigits):
            square.set_reference("NN 123")
        self.assertEqual(square.get_letters(), "TQ")


# ── Coordinate Tests ──────────────────────────────────────────

class TestCoordinate(unittest.TestCase):
    def test_normalises(self):
        from osgbtools import Coordinate
        c = Coordinate((100, 190))
        self.assertEqual(c.get_latitude(), 90.0)
        self.assertAlmostEqual(c.get_longitude(), -170.0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
