"""
Tests for the dense (non-deduplicating) backend.
"""

import unittest
from fractions import Fraction

from categorical.distribution import CategoricalVec


class TestCategoricalVec(unittest.TestCase):
    """Test cases for CategoricalVec."""

    def test_from_pairs_keeps_order_and_duplicates(self):
        """Pairs are stored as given, duplicates included."""
        c = CategoricalVec.from_pairs([("b", 0.5), ("a", 0.25), ("b", 0.25)])

        self.assertEqual(len(c), 3)
        self.assertEqual(c.categories(), ["b", "a", "b"])
        self.assertEqual(c.probabilities(), [0.5, 0.25, 0.25])
        self.assertEqual(list(c), [("b", 0.5), ("a", 0.25), ("b", 0.25)])

    def test_probability_of_sums_duplicates(self):
        c = CategoricalVec.from_pairs([("b", Fraction(1, 2)), ("a", Fraction(1, 4)),
                                       ("b", Fraction(1, 8))])

        self.assertEqual(c.probability_of("b"), Fraction(5, 8))
        self.assertEqual(c.probability_of("a"), Fraction(1, 4))

    def test_probability_of_absent_is_zero(self):
        """An absent category has probability zero rather than raising."""
        c = CategoricalVec.from_pairs([("a", Fraction(1))])

        result = c.probability_of("z")

        self.assertEqual(result, 0)
        self.assertIsInstance(result, Fraction)

    def test_probability_of_on_empty(self):
        c = CategoricalVec([], [])
        self.assertEqual(c.probability_of("a"), 0.0)
        self.assertEqual(len(c), 0)

    def test_constructor_length_mismatch(self):
        """Mismatched categories and weights are rejected eagerly."""
        with self.assertRaises(ValueError):
            CategoricalVec(["a", "b"], [1.0])

    def test_constructor_copies_inputs(self):
        categories = ["a"]
        probabilities = [2.0]
        c = CategoricalVec(categories, probabilities)

        c.normalize_in_place()

        self.assertEqual(probabilities, [2.0])
        self.assertEqual(c.probabilities(), [1.0])

    def test_unhashable_categories(self):
        """Only equality is needed for the dense backend."""
        c = CategoricalVec.from_pairs([([1], 0.5), ({"k": 1}, 0.5)])
        self.assertEqual(c.probability_of([1]), 0.5)
        self.assertIn({"k": 1}, c)

    def test_uniform_counts_duplicates_separately(self):
        c = CategoricalVec.new_uniform(["a", "a", "b", "c"], weight_type=Fraction)

        self.assertEqual(len(c), 4)
        self.assertEqual(c.probabilities(), [Fraction(1, 4)] * 4)
        self.assertEqual(c.probability_of("a"), Fraction(1, 2))


if __name__ == '__main__':
    unittest.main()
