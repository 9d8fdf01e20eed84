"""Evolutionary search: engine, operators, fitness and trial driver."""

from .engine import evolve, evolve_from_config
from .fitness import make_tss_fitness, never_stop, stop_at
from .operators import RuleMutator, crossover_classifiers, make_mutator
from .trials import TrialResult, run_trials, summarize_trials

__all__ = [
    "evolve",
    "evolve_from_config",
    "crossover_classifiers",
    "RuleMutator",
    "make_mutator",
    "make_tss_fitness",
    "never_stop",
    "stop_at",
    "TrialResult",
    "run_trials",
    "summarize_trials",
]
