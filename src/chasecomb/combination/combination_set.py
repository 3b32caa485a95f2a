"""Immutable set of all k-element combinations of a collection."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import TypeVar

from chasecomb.counting import combinations

from .base import BaseCombination, CombinationSizeError
from .chase import ChaseGenerator

T = TypeVar("T", bound=Hashable)

logger = logging.getLogger(__name__)


class CombinationSet(BaseCombination[T]):
    """All k-subsets of ``elements``, enumerated in Chase's minimal-change order.

    Instances are immutable and can be shared between threads. Every call to
    ``produce_sequence()`` (or ``iter()``) returns a new, independent generator.
    """

    def __init__(self, elements: Iterable[T], k: int) -> None:
        if elements is None:
            raise TypeError("elements must not be None.")
        if isinstance(k, bool) or not isinstance(k, int):
            raise TypeError(f"k must be an int, got {type(k).__name__}.")

        # dict keeps first-seen order while dropping duplicates
        unique = tuple(dict.fromkeys(elements))
        if k < 0:
            raise CombinationSizeError("k must be a non-negative number.")
        if k > len(unique):
            raise CombinationSizeError(f"k is greater than the number of elements ({len(unique)}).")

        self._elements = unique
        self._k = k
        logger.debug("Created combination set with n=%d, k=%d", len(unique), k)

    @property
    def elements(self) -> tuple[T, ...]:
        """Elements in the fixed order used for bit positions."""
        return self._elements

    @property
    def n(self) -> int:
        return len(self._elements)

    @property
    def k(self) -> int:
        return self._k

    def size(self) -> int:
        """Return C(n, k) exactly."""
        return combinations(len(self._elements), self._k)

    def produce_sequence(self) -> ChaseGenerator[T]:
        """Return a fresh generator over all combinations."""
        return ChaseGenerator(self._elements, self._k)

    def __iter__(self) -> Iterator[frozenset[T]]:
        return self.produce_sequence()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self._elements)}, k={self._k})"


def create(elements: Iterable[T], k: int) -> CombinationSet[T]:
    """Build a CombinationSet of all k-element subsets of ``elements``."""
    return CombinationSet(elements, k)
