"""Chase's minimal-change sequence of combinations.

The state machine follows Algorithm C from Knuth, "The Art of Computer
Programming, Volume 4A" (section 7.2.1.3). Position i of the element tuple maps
to bit i of ``membership``; every step moves one element out and one element in,
and the moved bit travels by one or two positions.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

from .base import CombinationSizeError

T = TypeVar("T", bound=Hashable)

logger = logging.getLogger(__name__)


class ChaseGenerator(Generic[T]):
    """Single-use iterator over every k-subset of ``elements``.

    The generator is not thread-safe. Independent traversals should each
    request their own generator; they only share the read-only element tuple.
    """

    def __init__(self, elements: Sequence[T], k: int) -> None:
        if isinstance(k, bool) or not isinstance(k, int):
            raise TypeError(f"k must be an int, got {type(k).__name__}.")
        n = len(elements)
        if k < 0 or k > n:
            raise CombinationSizeError(f"k must be between 0 and {n}.")

        self._elements = tuple(elements)
        self._k = k
        self._n = n
        self._membership = bytearray(n)
        self._membership[n - k :] = b"\x01" * k
        self._settled = bytearray(b"\x01" * n)
        self._boundary = k if k == n else n - k
        # -1 keeps has_next() true before the first emission, even for n == 0
        self._cursor = -1
        self._emitted = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def k(self) -> int:
        return self._k

    @property
    def emitted(self) -> int:
        """Number of combinations returned so far."""
        return self._emitted

    def has_next(self) -> bool:
        """Return True while at least one combination remains."""
        return self._cursor != self._n

    def advance(self) -> frozenset[T] | None:
        """Return the next combination, or None once the sequence is exhausted."""
        if not self.has_next():
            return None

        combination = self._combination()
        self._search_and_branch()
        self._emitted += 1
        if not self.has_next():
            logger.debug(
                "Chase sequence exhausted after %d combinations (n=%d, k=%d)",
                self._emitted,
                self._n,
                self._k,
            )
        return combination

    def __iter__(self) -> ChaseGenerator[T]:
        return self

    def __next__(self) -> frozenset[T]:
        combination = self.advance()
        if combination is None:
            raise StopIteration
        return combination

    def _combination(self) -> frozenset[T]:
        return frozenset(element for element, bit in zip(self._elements, self._membership) if bit)

    def _search_and_branch(self) -> None:
        n = self._n
        settled = self._settled
        cursor = self._boundary
        while cursor < n and not settled[cursor]:
            settled[cursor] = 1
            cursor += 1
        self._cursor = cursor

        if cursor == n:
            return

        settled[cursor] = 0
        is_even = cursor % 2 == 0
        was_set = bool(self._membership[cursor])

        if not is_even and was_set:
            self._shift_right_one()
        elif is_even and was_set:
            self._shift_right_two()
        elif is_even:
            self._shift_left_one()
        else:
            self._shift_left_two()

    def _shift_right_one(self) -> None:
        j = self._cursor
        self._membership[j - 1] = 1
        self._membership[j] = 0
        if self._boundary == j and self._boundary > 1:
            self._boundary = j - 1
        elif self._boundary == j - 1:
            self._boundary = j

    def _shift_right_two(self) -> None:
        j = self._cursor
        if self._membership[j - 2]:
            self._shift_right_one()
            return

        self._membership[j - 2] = 1
        self._membership[j] = 0
        if self._boundary == j:
            self._boundary = max(j - 2, 1)
        elif self._boundary == j - 2:
            self._boundary = j - 1

    def _shift_left_one(self) -> None:
        j = self._cursor
        self._membership[j] = 1
        self._membership[j - 1] = 0
        if self._boundary == j and self._boundary > 1:
            self._boundary = j - 1
        elif self._boundary == j - 1:
            self._boundary = j

    def _shift_left_two(self) -> None:
        j = self._cursor
        if self._membership[j - 1]:
            self._shift_left_one()
            return

        self._membership[j] = 1
        self._membership[j - 2] = 0
        if self._boundary == j - 2:
            self._boundary = j
        elif self._boundary == j - 1:
            self._boundary = j - 2
