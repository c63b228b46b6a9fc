"""
Categorical probability distributions.

This library provides a type representing a categorical probability
distribution: a collection of categories, each associated with a weight.
Two distributions can be combined through a function of their categories,
giving the probability of each combination under the assumption that the two
are sampled independently.

    >>> from fractions import Fraction
    >>> from categorical import CategoricalHash
    >>> die = CategoricalHash.new_uniform(range(1, 7), weight_type=Fraction)
    >>> max_of_two = CategoricalHash.combined(die, die, max)
    >>> CategoricalHash.combined(max_of_two, die, lambda a, b: a > b).probability_of(True)
    Fraction(125, 216)
"""

__version__ = '0.1.0'

from categorical import numeric
from categorical import distribution
from categorical import utils
from categorical.distribution import (
    Categorical,
    CategoricalVec,
    CategoricalHash,
    CategoricalOrd,
    unit_categorical,
)

__all__ = [
    'numeric',
    'distribution',
    'utils',
    'Categorical',
    'CategoricalVec',
    'CategoricalHash',
    'CategoricalOrd',
    'unit_categorical'
]
