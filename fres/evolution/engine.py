"""Generational search for fuzzy rule bases.

Each generation:

1. every individual receives ``m ~ Binomial(n, pr)`` calls of ``mutate``,
2. every individual is scored and ranked in a fresh top-``elites`` structure,
3. the search ends if ``stop(best score)`` holds,
4. every non-elite individual is replaced by the crossover of two distinct,
   uniformly chosen elites.

Elites are recomputed from scratch each generation and are mutated like any
other individual, so the best score is not guaranteed to be monotone.

The loop is single-threaded and consumes one master random stream in a
fixed order: identical seeds give identical searches.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from fres.classifier.classifier import FuzzyClassifier
from fres.config import merge_config
from fres.evolution.fitness import never_stop, stop_at
from fres.evolution.operators import crossover_classifiers, make_mutator
from fres.utils.observability import LoggingObserver
from fres.utils.rng_manager import RNGManager, pick_unique_pair
from fres.utils.top_n import TopNMultimap
from fres.utils.validation import ValidationError


def _notify(observer: Any, hook: str, *args: Any) -> None:
    if observer is None:
        return
    fn = getattr(observer, hook, None)
    if fn is not None:
        fn(*args)


def evolve(
    initial: FuzzyClassifier,
    mutate: Callable,
    fitness: Callable[[FuzzyClassifier, Any], float],
    stop: Callable[[float], bool],
    training: Any,
    pop_size: int,
    elites: int,
    t_max: int,
    seed: int | RNGManager | None,
    n: int,
    pr: float,
    observer: Any = None,
) -> FuzzyClassifier:
    """Evolve copies of ``initial`` and return the best individual of the last generation.

    Args:
        initial: Seed classifier, copied into every slot of the population
        mutate: ``mutate(classifier, rng)`` changes a classifier in place
        fitness: ``fitness(classifier, training)`` scores a classifier
        stop: ``stop(best_score)`` ends the search early when True
        training: Rows handed to ``fitness``
        pop_size: Population size (> 0)
        elites: Individuals kept each generation (0 < elites < pop_size)
        t_max: Maximum number of generations (> 0)
        seed: Master seed, or an ``RNGManager`` owning the master stream
        n, pr: Parameters of the per-individual mutation count distribution
        observer: Optional object with ``on_mutation``/``on_generation``/``on_stop`` hooks

    Raises:
        ValidationError: if pop_size, elites or t_max are out of range
    """
    if pop_size <= 0:
        raise ValidationError('invalid_population_size', "pop_size must be positive", pop_size=pop_size)
    if not 0 < elites < pop_size:
        raise ValidationError('invalid_elites', "elites must be in (0, pop_size)", elites=elites, pop_size=pop_size)
    if t_max <= 0:
        raise ValidationError('invalid_max_generations', "t_max must be positive", t_max=t_max)

    rng_manager = seed if isinstance(seed, RNGManager) else RNGManager(seed)
    rng = rng_manager.rng

    # Shared by the whole population from now on
    initial.interpretation.freeze()
    population = [initial.copy() for _ in range(pop_size)]

    best_score = 0.0
    best_index = 0
    for generation in range(t_max):
        for i, individual in enumerate(population):
            m = rng_manager.binomial(n, pr)
            _notify(observer, 'on_mutation', generation, i, m)
            for _ in range(m):
                mutate(individual, rng)

        top = TopNMultimap(elites)
        scores = []
        for i, individual in enumerate(population):
            score = fitness(individual, training)
            scores.append(score)
            top.try_insert(score, i)
        best_score, best_index = top.maximum()
        elite_ids = sorted(top.set_of_values())
        _notify(observer, 'on_generation', generation, scores, elite_ids)

        if stop(best_score):
            _notify(observer, 'on_stop', generation, best_score, 'stop_criterion')
            return population[best_index]

        retained = set(elite_ids)
        for i in range(pop_size):
            if i in retained:
                continue
            if len(elite_ids) == 1:
                population[i] = population[elite_ids[0]].copy()
                continue
            mom, dad = pick_unique_pair(elite_ids, rng)
            population[i] = crossover_classifiers(population[mom], population[dad], rng)

    _notify(observer, 'on_stop', t_max - 1, best_score, 'max_generations')
    return population[best_index]


def evolve_from_config(
    initial: FuzzyClassifier,
    fitness: Callable[[FuzzyClassifier, Any], float],
    training: Any,
    config: dict | None = None,
    seed: int | RNGManager | None = None,
    mutate: Callable | None = None,
    stop: Callable[[float], bool] | None = None,
    observer: Any = None,
    fixed_rules: Any = (),
) -> FuzzyClassifier:
    """``evolve`` with its parameters read from a configuration dict.

    Missing collaborators default to ``make_mutator`` (with ``fixed_rules``),
    ``stop_at(stop_threshold)`` or ``never_stop``, and a ``LoggingObserver``.
    """
    config = merge_config(config)
    if mutate is None:
        mutate = make_mutator(initial.interpretation, config, fixed_rules)
    if stop is None:
        threshold = config.get('stop_threshold')
        stop = never_stop if threshold is None else stop_at(float(threshold))
    if observer is None:
        observer = LoggingObserver(every=int(config.get('log_every', 10)))
    logging.debug(
        "evolve: pop_size=%s elites=%s t_max=%s n=%s pr=%s",
        config['pop_size'], config['elites'], config['t_max'], config['mutation_trials'], config['mutation_p'],
    )
    return evolve(
        initial,
        mutate,
        fitness,
        stop,
        training,
        pop_size=int(config['pop_size']),
        elites=int(config['elites']),
        t_max=int(config['t_max']),
        seed=seed,
        n=int(config['mutation_trials']),
        pr=float(config['mutation_p']),
        observer=observer,
    )


__all__ = ["evolve", "evolve_from_config"]
