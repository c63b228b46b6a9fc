"""
Tests for the numeric capability helpers.
"""

import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as np

from categorical import numeric
from categorical.distribution import base, dense, hashed, ordered
from categorical.numeric import zero, one, reciprocal, is_zero, clone


class TestNumeric(unittest.TestCase):
    """Test cases for weight identities and reciprocals."""

    def test_identities_keep_the_weight_type(self):
        """zero and one are built in the requested type."""
        for weight_type in (float, int, Fraction, Decimal, np.float64):
            with self.subTest(weight_type=weight_type):
                self.assertIsInstance(zero(weight_type), weight_type)
                self.assertIsInstance(one(weight_type), weight_type)
                self.assertEqual(zero(weight_type), 0)
                self.assertEqual(one(weight_type), 1)

    def test_reciprocal(self):
        """reciprocal is exact for exact types."""
        self.assertEqual(reciprocal(Fraction(2, 3)), Fraction(3, 2))
        self.assertEqual(reciprocal(Decimal(4)), Decimal("0.25"))
        self.assertEqual(reciprocal(4.0), 0.25)
        self.assertIsInstance(reciprocal(np.float64(8)), np.float64)

    def test_reciprocal_of_int_promotes(self):
        """Integer weights divide into floats."""
        self.assertEqual(reciprocal(4), 0.25)

    def test_clone_is_equal_and_independent(self):
        value = np.array(0.5)
        copied = clone(value)

        copied *= 2

        self.assertEqual(float(value), 0.5)
        self.assertEqual(float(copied), 1.0)
        self.assertEqual(clone(Fraction(1, 3)), Fraction(1, 3))

    def test_distributions_share_the_weight_type_variable(self):
        """Every backend parameterizes its weights by the Weight-bound P."""
        for module in (base, dense, hashed, ordered):
            with self.subTest(module=module.__name__):
                self.assertIs(module.P, numeric.P)

    def test_is_zero(self):
        self.assertTrue(is_zero(0.0))
        self.assertTrue(is_zero(Fraction(0)))
        self.assertTrue(is_zero(np.float64(0)))
        self.assertFalse(is_zero(Fraction(1, 1000)))
        self.assertFalse(is_zero(float("nan")))


if __name__ == '__main__':
    unittest.main()
