"""Independent repeated searches run concurrently, and their summary.

Every trial gets its own seed drawn from one master stream, its own
population and a reference to the shared (frozen) interpretation. Trials
run on a thread pool: the interpretation is only read once frozen, and its
membership closures are not picklable.
"""

from __future__ import annotations

import itertools
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from fres.classifier.classifier import FuzzyClassifier
from fres.config import merge_config
from fres.evolution.engine import evolve_from_config
from fres.evolution.fitness import make_tss_fitness
from fres.utils.observability import CompositeObserver, EvolutionTrace, LoggingObserver
from fres.utils.rng_manager import RNGManager
from fres.utils.sets import tanimoto


@dataclass
class TrialResult:
    """Outcome of one search.

    Attributes:
        trial: Trial number
        seed: Seed the trial was run with
        classifier: Best classifier found
        fitness: Its training fitness
        initial_test_tss: Test TSS of the initial classifier
        test_tss: Test TSS of the best classifier
        trace: Per-generation statistics
    """

    trial: int
    seed: int
    classifier: FuzzyClassifier
    fitness: float
    initial_test_tss: float
    test_tss: float
    trace: EvolutionTrace | None = None

    @property
    def improvement(self) -> float:
        return self.test_tss - self.initial_test_tss


def run_trials(
    initial: FuzzyClassifier | Callable[[], FuzzyClassifier],
    training: Any,
    test: Any,
    config: dict | None = None,
    seed: int | None = None,
    trials: int | None = None,
    max_workers: int | None = None,
    fitness: Callable[[FuzzyClassifier, Any], float] | None = None,
    fixed_rules: Any = (),
) -> list[TrialResult]:
    """Run ``trials`` independent searches from the same initial classifier.

    ``initial`` may be a classifier or a zero-argument factory returning one.
    Results are returned in trial order whatever the completion order.
    Trials share a thread pool: they run concurrently but, being pure
    Python, not in parallel on several cores.
    """
    config = merge_config(config)
    trials = int(config['trials'] if trials is None else trials)
    if max_workers is None:
        max_workers = config.get('max_workers')
    category = int(config.get('tss_category', 1))
    log_every = int(config.get('log_every', 10))
    if fitness is None:
        fitness = make_tss_fitness(category, float(config.get('alpha', 0.0005)))
    if not isinstance(initial, FuzzyClassifier):
        initial = initial()

    master = RNGManager(seed)
    seeds = [master.derive_seed() for _ in range(trials)]
    logging.info("running %d trials (master seed %d)", trials, master.seed)
    initial_test_tss = initial.evaluate_all(test).tss(category)

    def one_trial(t: int) -> TrialResult:
        trace = EvolutionTrace()
        observer = CompositeObserver(trace, LoggingObserver(every=log_every))
        best = evolve_from_config(
            initial, fitness, training, config, seed=seeds[t], observer=observer, fixed_rules=fixed_rules
        )
        result = TrialResult(
            trial=t,
            seed=seeds[t],
            classifier=best,
            fitness=fitness(best, training),
            initial_test_tss=initial_test_tss,
            test_tss=best.evaluate_all(test).tss(category),
            trace=trace,
        )
        logging.info(
            "trial %d: TSS %.4f -> %.4f (improvement %.4f)",
            t, result.initial_test_tss, result.test_tss, result.improvement,
        )
        return result

    # Freeze before any worker starts reading
    initial.interpretation.freeze()
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(one_trial, t) for t in range(trials)]
        return [f.result() for f in futures]


def _rule_items(classifier: FuzzyClassifier) -> list[tuple[Any, int]]:
    return list(classifier.rules.ordered_items())


def summarize_trials(results: list[TrialResult]) -> dict[str, Any]:
    """Aggregate statistics over trial results.

    Returns a dict with ``trials``, ``mean_improvement``,
    ``most_common_frequency`` (share of trials that found the most frequent
    rule base), ``mean_pairwise_tanimoto`` (similarity of the rule bases) and
    ``best_trial``.
    """
    if not results:
        return {
            'trials': 0,
            'mean_improvement': 0.0,
            'most_common_frequency': 0.0,
            'mean_pairwise_tanimoto': 0.0,
            'best_trial': None,
        }
    frequencies = Counter(r.classifier for r in results)
    similarities = [
        tanimoto(_rule_items(a.classifier), _rule_items(b.classifier))
        for a, b in itertools.combinations(results, 2)
    ]
    best = max(results, key=lambda r: r.test_tss)
    return {
        'trials': len(results),
        'mean_improvement': float(np.mean([r.improvement for r in results])),
        'most_common_frequency': max(frequencies.values()) / len(results),
        'mean_pairwise_tanimoto': float(np.mean(similarities)) if similarities else 1.0,
        'best_trial': best.trial,
    }


__all__ = ["TrialResult", "run_trials", "summarize_trials"]
