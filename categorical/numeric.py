"""
Numeric capabilities required of probability weights.

Distributions never depend on a concrete number type. A weight type only has
to build its identities from the integers 0 and 1 and support the arithmetic
listed in the Weight protocol, which covers float, int, Fraction, Decimal and
numpy scalar types alike.
"""

import copy
from typing import Any, Protocol, Type, TypeVar

# Type variable for weight values
P = TypeVar('P', bound='Weight')


class Weight(Protocol):
    """
    Structural type for probability weights.

    Weights must also be duplicable with copy.copy; a stored weight is always
    a copy of the caller's object or a fresh result of arithmetic, so types
    whose in-place operators mutate (0-d numpy arrays, gmpy2 xmpz) are never
    shared between entries or with the caller.
    """

    def __add__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...


def zero(weight_type: Type[P]) -> P:
    """
    Return the additive identity of a weight type.

    Args:
        weight_type: Number type, e.g. float or fractions.Fraction

    Returns:
        weight_type(0)
    """
    return weight_type(0)


def one(weight_type: Type[P]) -> P:
    """
    Return the multiplicative identity of a weight type.

    Args:
        weight_type: Number type, e.g. float or fractions.Fraction

    Returns:
        weight_type(1)
    """
    return weight_type(1)


def reciprocal(value: P) -> P:
    """Return 1 / value in the value's own type."""
    return one(type(value)) / value


def is_zero(value: Any) -> bool:
    return value == zero(type(value))


def clone(value: P) -> P:
    """Return an independent copy of a weight."""
    return copy.copy(value)
