"""Minimal-change enumeration of k-element combinations."""

from .combination import (
    BaseCombination,
    ChaseGenerator,
    CombinationSet,
    CombinationSizeError,
    create,
)
from .counting import combinations

__all__ = [
    "BaseCombination",
    "ChaseGenerator",
    "CombinationSet",
    "CombinationSizeError",
    "combinations",
    "create",
]

__version__ = "0.1.0"
