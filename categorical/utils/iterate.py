"""
Iteration utilities shared by the distribution backends.

This module provides the left fold used for totals and lookups and the
unzip used when building parallel category/weight sequences.
"""

import functools
from typing import TypeVar, Callable, Iterable, List, Tuple

# Type variables for values
T = TypeVar('T')
U = TypeVar('U')


def fold(iterable: Iterable[T], func: Callable[[U, T], U], initial: U) -> U:
    """
    Reduce an iterable from the left, starting from an explicit initial value.

    Unlike the builtin sum, the start value is always supplied by the caller,
    so the result keeps the caller's number type even for an empty input.

    Args:
        iterable: Input iterable
        func: Binary function taking (accumulator, item)
        initial: Starting accumulator

    Returns:
        The final accumulator
    """
    return functools.reduce(func, iterable, initial)


def unzip(pairs: Iterable[Tuple[T, U]]) -> Tuple[List[T], List[U]]:
    """
    Split an iterable of pairs into two lists, preserving order and multiplicity.

    Args:
        pairs: Iterable of (first, second) tuples

    Returns:
        Tuple of (list of firsts, list of seconds)
    """
    firsts: List[T] = []
    seconds: List[U] = []
    for first, second in pairs:
        firsts.append(first)
        seconds.append(second)
    return firsts, seconds
