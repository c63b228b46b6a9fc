"""
Categorical distribution backed by two parallel lists.
"""

import operator
from typing import Callable, Iterable, Iterator, List, Sequence, Tuple, TypeVar

from categorical.distribution.base import Categorical
from categorical.numeric import P, clone, zero
from categorical.utils import fold, unzip

T = TypeVar('T')


class CategoricalVec(Categorical[T, P]):
    """
    Categorical distribution that performs no deduplication.

    Built from pairs containing equal categories, it keeps every entry as is.
    probability_of sums over all matching entries and returns zero for a
    category that never occurs, where the deduplicating backends raise
    KeyError. If duplicates are expected and categories are hashable or
    ordered, CategoricalHash or CategoricalOrd merge them instead.
    """

    def __init__(self, categories: Sequence[T], probabilities: Sequence[P]):
        """
        Initialize from explicit category and weight sequences.

        Args:
            categories: Categories, in order
            probabilities: Weights, aligned with categories; each is copied

        Raises:
            ValueError: If the two sequences differ in length
        """
        self._categories: List[T] = list(categories)
        self._probabilities: List[P] = [clone(p) for p in probabilities]

        if len(self._categories) != len(self._probabilities):
            raise ValueError(
                f"Got {len(self._categories)} categories but "
                f"{len(self._probabilities)} probabilities"
            )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[T, P]]) -> 'CategoricalVec[T, P]':
        categories, probabilities = unzip(pairs)
        return cls(categories, probabilities)

    def items(self) -> Iterator[Tuple[T, P]]:
        return zip(self._categories, self._probabilities)

    def map_probabilities_in_place(self, f: Callable[[P], P]) -> None:
        for i, p in enumerate(self._probabilities):
            self._probabilities[i] = f(p)

    def probability_of(self, category: T) -> P:
        """
        Return the summed weight of every entry equal to category.

        Args:
            category: Category to look up

        Returns:
            Sum of matching weights, zero if there are none
        """
        return fold(
            (p for c, p in self.items() if c == category),
            operator.add,
            zero(self.weight_type)
        )

    def __len__(self) -> int:
        return len(self._categories)
