"""Exact binomial coefficients with arbitrary precision."""

from __future__ import annotations

from functools import lru_cache

INT64_MAX = 2**63 - 1


@lru_cache(maxsize=1024)
def combinations(n: int, k: int) -> int:
    """Return C(n, k) exactly using incremental multiply/divide."""
    if n < 0:
        raise ValueError("n must be >= 0.")
    if k < 0 or k > n:
        raise ValueError(f"k must be between 0 and n ({n}).")

    k = min(k, n - k)
    result = 1
    for factor in range(1, k + 1):
        # product of `factor` consecutive integers is divisible by factor!
        result = result * (n - k + factor) // factor
    return result


def to_int64(value: int) -> int | None:
    """Return value if it fits a signed 64-bit integer, otherwise None."""
    if value.bit_length() <= 63:
        return value
    return None
