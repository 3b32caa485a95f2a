"""Exact combinatorial counting."""

from .binomial import INT64_MAX, combinations, to_int64

__all__ = ["INT64_MAX", "combinations", "to_int64"]
