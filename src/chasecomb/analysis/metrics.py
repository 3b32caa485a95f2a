"""Membership matrices and minimal-change metrics for Chase sequences."""

from __future__ import annotations

from collections import Counter

import numpy as np

from chasecomb.combination import ChaseGenerator, CombinationSet

# largest sequence materialized when no limit is given
MAX_UNBOUNDED_ROWS = 100_000


def resolve_row_count(combination_set: CombinationSet, limit: int | None) -> int:
    """Return how many combinations to materialize for an optional limit."""
    if limit is not None and limit <= 0:
        raise ValueError("limit must be > 0 when provided.")

    total = combination_set.size()
    if limit is not None:
        return min(total, limit)
    if total > MAX_UNBOUNDED_ROWS:
        raise ValueError(
            f"{total} combinations exceed {MAX_UNBOUNDED_ROWS} rows; pass an explicit limit."
        )
    return total


def membership_matrix(combination_set: CombinationSet, limit: int | None = None) -> np.ndarray:
    """Return a bool ndarray of shape (rows, n), one row per combination in Chase order."""
    rows = resolve_row_count(combination_set, limit)
    n = combination_set.n

    matrix = np.zeros((rows, n), dtype=bool)
    generator = ChaseGenerator(range(n), combination_set.k)
    for row in range(rows):
        positions = next(generator)
        matrix[row, np.fromiter(positions, dtype=np.intp, count=len(positions))] = True
    return matrix


def summarize_transitions(matrix: np.ndarray) -> dict[str, object]:
    """Aggregate step-to-step changes of a membership matrix."""
    matrix = np.asarray(matrix, dtype=bool)
    if matrix.ndim != 2:
        raise ValueError("matrix must be two-dimensional.")

    total = int(matrix.shape[0])
    distinct = len({row.tobytes() for row in matrix})
    if total < 2:
        return {
            "total_combinations": total,
            "total_transitions": 0,
            "distinct_combinations": distinct,
            "hamming_distribution": {},
            "max_hamming_distance": 0,
            "max_shift": 0,
            "is_minimal_change": True,
        }

    changes = matrix[1:] ^ matrix[:-1]
    distances = changes.sum(axis=1)
    distribution = Counter(int(value) for value in distances.tolist())

    shifts: list[int] = []
    for previous, current in zip(matrix[:-1], matrix[1:]):
        entered = np.flatnonzero(current & ~previous)
        left = np.flatnonzero(previous & ~current)
        if len(entered) == 1 and len(left) == 1:
            shifts.append(abs(int(entered[0]) - int(left[0])))

    max_shift = max(shifts, default=0)
    minimal = bool(np.all(distances == 2)) and len(shifts) == total - 1 and max_shift <= 2

    return {
        "total_combinations": total,
        "total_transitions": total - 1,
        "distinct_combinations": distinct,
        "hamming_distribution": dict(sorted(distribution.items())),
        "max_hamming_distance": int(distances.max()),
        "max_shift": max_shift,
        "is_minimal_change": minimal,
    }
