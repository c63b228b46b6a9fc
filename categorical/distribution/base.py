"""
Base class for categorical distributions.

A categorical distribution associates each category with a probability weight.
Three backends implement the same contract and differ only in how they store
entries and how they merge duplicate categories; everything that can be
expressed in terms of the contract (uniform construction, normalization,
combination) is defined once here.
"""

import itertools
import operator
from abc import ABC, abstractmethod
from typing import (Any, Callable, Generic, Iterable, Iterator, List, Tuple,
                    Type, TypeVar)

from categorical.logging import log_combination, log_normalization, log_phase
from categorical.numeric import P, is_zero, one, reciprocal, zero
from categorical.utils import fold

# Type variables for categories; weights use P, bound to the Weight protocol
T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
C = TypeVar('C', bound='Categorical')


class Categorical(ABC, Generic[T, P]):
    """
    Base class for categorical distributions over values of T with weights of type P.

    Ideally the weights sum to one, but this is not enforced; use
    normalize_in_place to rescale them. Weights are not required to be
    non-negative either. Category membership is fixed at construction, only
    weights change afterwards.
    """

    @classmethod
    @abstractmethod
    def from_pairs(cls: Type[C], pairs: Iterable[Tuple[T, P]]) -> C:
        """
        Build a distribution from (category, weight) pairs.

        Duplicate categories are handled by the backend's merge policy.

        Args:
            pairs: Iterable of (category, weight) pairs, consumed once

        Returns:
            New distribution
        """
        pass

    @abstractmethod
    def items(self) -> Iterator[Tuple[T, P]]:
        """
        Return an iterator over (category, weight) pairs.

        Returns:
            Iterator in the backend's iteration order
        """
        pass

    @abstractmethod
    def map_probabilities_in_place(self, f: Callable[[P], P]) -> None:
        """
        Replace every weight p with f(p), leaving categories untouched.

        Args:
            f: Function applied to each weight
        """
        pass

    @abstractmethod
    def probability_of(self, category: T) -> P:
        """
        Return the weight associated with a category.

        Args:
            category: Category to look up

        Returns:
            Weight of the category
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __iter__(self) -> Iterator[Tuple[T, P]]:
        return self.items()

    def __contains__(self, category: object) -> bool:
        return any(c == category for c, _ in self.items())

    def categories(self) -> List[T]:
        """Return the categories in iteration order."""
        return [category for category, _ in self.items()]

    def probabilities(self) -> List[P]:
        """Return the weights in iteration order."""
        return [p for _, p in self.items()]

    @property
    def weight_type(self) -> type:
        """
        Number type of the stored weights.

        Returns:
            Type of the first weight, or float for an empty distribution
        """
        for _, p in self.items():
            return type(p)
        return float

    def total(self) -> P:
        """
        Sum all weights, starting from the additive identity of the weight type.

        Returns:
            Total weight
        """
        return fold(self.probabilities(), operator.add, zero(self.weight_type))

    @classmethod
    def new_uniform(cls: Type[C], categories: Iterable[T], weight_type: type = float) -> C:
        """
        Construct a distribution giving the same probability to each category.

        Every category starts with weight one and the result is normalized.
        Repeated categories go through the backend's merge policy, so a
        deduplicating backend gives them proportionally more mass.

        Args:
            categories: Iterable of categories
            weight_type: Number type for the weights

        Returns:
            Normalized distribution

        Raises:
            ZeroDivisionError: If categories is empty
        """
        distribution = cls.from_pairs((category, one(weight_type)) for category in categories)
        distribution.normalize_in_place()
        return distribution

    def normalize_in_place(self: C) -> C:
        """
        Rescale weights so that they sum up to one.

        Floating point inaccuracy is not taken into account.

        Returns:
            self, for chaining

        Raises:
            ZeroDivisionError: If the weights sum to zero; no weight is changed
        """
        total = self.total()
        log_normalization(type(self).__name__, len(self), total)
        if is_zero(total):
            raise ZeroDivisionError(
                f"Cannot normalize {type(self).__name__}: weights sum to zero"
            )
        factor = reciprocal(total)

        self.map_probabilities_in_place(lambda p: p * factor)
        return self

    @classmethod
    def combined(
        cls: Type[C],
        c1: 'Categorical[T1, P]',
        c2: 'Categorical[T2, P]',
        f: Callable[[T1, T2], T]
    ) -> C:
        """
        Combine two distributions using a function that combines pairs of categories.

        Output probabilities are computed assuming the two distributions are
        independent: every pair (a, b) from the Cartesian product contributes
        weight(a) * weight(b) to the category f(a, b). The outer loop runs over
        c1 and the inner loop over c2. Pairs are collected with this class's
        from_pairs, so its merge policy decides what happens when f maps
        several pairs to the same category.

        Args:
            c1: Outer distribution, any backend
            c2: Inner distribution, any backend
            f: Function mapping (category of c1, category of c2) to an output category

        Returns:
            New distribution of this class
        """
        log_phase("combine", {
            "output": cls.__name__,
            "left_size": len(c1),
            "right_size": len(c2)
        })
        pairs = (
            (f(t1, t2), p1 * p2)
            for (t1, p1), (t2, p2) in itertools.product(c1.items(), c2.items())
        )
        result = cls.from_pairs(pairs)
        log_combination(cls.__name__, len(c1), len(c2), len(result))
        return result

    def expectation(self, f: Callable[[T], Any]) -> Any:
        """
        Return the expectation of f(X) where X is distributed by these weights.

        The weights are used as they are; normalize first for a true expectation.

        Args:
            f: Function to apply to each category

        Returns:
            Sum of weight * f(category)
        """
        return fold(
            self.items(),
            lambda acc, item: acc + item[1] * f(item[0]),
            zero(self.weight_type)
        )

    def __repr__(self) -> str:
        """
        Return a string representation of the distribution.

        Returns:
            String representation
        """
        entries = [f"{category!r}: {p!r}" for category, p in self.items()]
        if len(entries) <= 5:
            entries_str = ', '.join(entries)
        else:
            entries_str = f"{', '.join(entries[:3])}, ..., {entries[-1]}"
        return f"{type(self).__name__}({{{entries_str}}})"


def unit_categorical(cls: Type[C], weight_type: type = float) -> C:
    """
    Build a distribution with a single category, (), of probability one.

    Combining it with a distribution D through lambda _, b: b reproduces D.

    Args:
        cls: Backend class to build
        weight_type: Number type for the weight

    Returns:
        Single-category distribution
    """
    return cls.from_pairs([((), one(weight_type))])
