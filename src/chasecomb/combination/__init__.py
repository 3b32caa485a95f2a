"""Combination sets and Chase's minimal-change generator."""

from .base import BaseCombination, CombinationSizeError
from .chase import ChaseGenerator
from .combination_set import CombinationSet, create

__all__ = [
    "BaseCombination",
    "ChaseGenerator",
    "CombinationSet",
    "CombinationSizeError",
    "create",
]
