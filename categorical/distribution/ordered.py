"""
Categorical distribution that deduplicates categories using their ordering.
"""

import bisect
from operator import itemgetter
from typing import Callable, Iterable, Iterator, List, Tuple, TypeVar

from categorical.distribution.base import Categorical
from categorical.numeric import P, clone

T = TypeVar('T')


class CategoricalOrd(Categorical[T, P]):
    """
    Categorical distribution kept sorted by category.

    Categories need a total order but no hash, so orderable values such as
    lists are accepted. Equal categories are merged at construction by adding
    their weights, as in CategoricalHash. Iteration is in ascending category
    order, which makes output reproducible.

    Entries are stored as two parallel lists sorted by category; lookups use
    binary search.
    """

    def __init__(self):
        """Initialize an empty distribution; use from_pairs or new_uniform to fill it."""
        self._categories: List[T] = []
        self._probabilities: List[P] = []

    def _locate(self, category: T) -> Tuple[int, bool]:
        """Return the insertion point of category and whether it is present there."""
        i = bisect.bisect_left(self._categories, category)
        return i, i < len(self._categories) and self._categories[i] == category

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[T, P]]) -> 'CategoricalOrd[T, P]':
        """
        Build a distribution from (category, weight) pairs.

        Pairs are stable-sorted by category and adjacent equal categories are
        merged, so equal categories are summed in input order.

        Args:
            pairs: Iterable of (category, weight) pairs

        Returns:
            New distribution
        """
        out = cls()
        for category, p in sorted(pairs, key=itemgetter(0)):
            if out._categories and out._categories[-1] == category:
                out._probabilities[-1] = out._probabilities[-1] + p
            else:
                out._categories.append(category)
                out._probabilities.append(clone(p))
        return out

    def items(self) -> Iterator[Tuple[T, P]]:
        return zip(self._categories, self._probabilities)

    def map_probabilities_in_place(self, f: Callable[[P], P]) -> None:
        for i, p in enumerate(self._probabilities):
            self._probabilities[i] = f(p)

    def probability_of(self, category: T) -> P:
        """
        Return the weight of a category.

        Args:
            category: Category to look up

        Returns:
            Weight of the category

        Raises:
            KeyError: If the category is not present
        """
        i, found = self._locate(category)
        if not found:
            raise KeyError(category)
        return self._probabilities[i]

    def __contains__(self, category: object) -> bool:
        return self._locate(category)[1]

    def __len__(self) -> int:
        return len(self._categories)
