"""
Utility functions for the categorical library.

This module provides iteration helpers shared by the distribution backends.
"""

from categorical.utils.iterate import fold, unzip

__all__ = [
    'fold',
    'unzip'
]
