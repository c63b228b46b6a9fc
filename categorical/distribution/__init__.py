"""
Distribution module for the categorical library.

This module provides the Categorical contract and its three backends:
CategoricalVec (no deduplication), CategoricalHash (dedup by hash) and
CategoricalOrd (dedup by ordering).
"""

from categorical.distribution.base import Categorical, unit_categorical
from categorical.distribution.dense import CategoricalVec
from categorical.distribution.hashed import CategoricalHash
from categorical.distribution.ordered import CategoricalOrd

__all__ = [
    'Categorical',
    'unit_categorical',
    'CategoricalVec',
    'CategoricalHash',
    'CategoricalOrd'
]
