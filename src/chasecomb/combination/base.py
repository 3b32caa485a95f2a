"""Base types for combinatorial sets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from chasecomb.counting import to_int64

T = TypeVar("T", bound=Hashable)


class CombinationSizeError(ValueError):
    """Raised when the requested subset size is outside 0..n."""


class BaseCombination(ABC, Generic[T]):
    """All k-element subsets of a fixed collection, iterable as frozensets."""

    @abstractmethod
    def size(self) -> int:
        """Return the exact number of combinations."""

    def long_size(self) -> int | None:
        """Return size() when it fits a signed 64-bit integer, otherwise None."""
        return to_int64(self.size())

    @abstractmethod
    def __iter__(self) -> Iterator[frozenset[T]]:
        """Return a fresh iterator over all combinations."""
