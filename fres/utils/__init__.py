"""Utilities: seeded randomness, bounded rankings, ordered set algebra, errors."""

from .observability import CompositeObserver, EvolutionTrace, LoggingObserver, determinism_signature
from .rng_manager import RNGManager, pick_unique_pair, unique_integers
from .top_n import TopNMap, TopNMultimap, TopNMultiset, TopNSet
from .validation import ValidationError

__all__ = [
    "RNGManager",
    "unique_integers",
    "pick_unique_pair",
    "TopNMap",
    "TopNMultimap",
    "TopNSet",
    "TopNMultiset",
    "ValidationError",
    "LoggingObserver",
    "EvolutionTrace",
    "CompositeObserver",
    "determinism_signature",
]
