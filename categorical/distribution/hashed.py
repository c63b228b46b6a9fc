"""
Categorical distribution that deduplicates categories with a hash table.
"""

from typing import Callable, Dict, Hashable, Iterable, Iterator, Tuple, TypeVar

from categorical.distribution.base import Categorical
from categorical.numeric import P, clone

T = TypeVar('T', bound=Hashable)


class CategoricalHash(Categorical[T, P]):
    """
    Categorical distribution keyed by a dict.

    Categories must be hashable. Equal categories are merged at construction
    by adding their weights. Iteration follows first-insertion order, which is
    stable for the life of the instance.
    """

    def __init__(self, weights: Dict[T, P]):
        """
        Initialize from a mapping of category to weight.

        Args:
            weights: Mapping of category to weight; copied
        """
        self._weights: Dict[T, P] = dict(weights)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[T, P]]) -> 'CategoricalHash[T, P]':
        weights: Dict[T, P] = {}
        for category, p in pairs:
            if category in weights:
                weights[category] = weights[category] + p
            else:
                weights[category] = clone(p)
        return cls(weights)

    def items(self) -> Iterator[Tuple[T, P]]:
        return iter(self._weights.items())

    def map_probabilities_in_place(self, f: Callable[[P], P]) -> None:
        for category, p in self._weights.items():
            self._weights[category] = f(p)

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
        return self._weights[category]

    def __contains__(self, category: object) -> bool:
        return category in self._weights

    def __len__(self) -> int:
        return len(self._weights)
