import random

import pytest

from fres.classifier import FuzzyClassifier, Interpretation
from fres.config import merge_config
from fres.data import DataMatrix
from fres.evolution import (
    crossover_classifiers,
    evolve,
    evolve_from_config,
    make_mutator,
    make_tss_fitness,
    never_stop,
    stop_at,
)
from fres.utils.observability import EvolutionTrace, determinism_signature
from fres.utils.sets import set_intersection_size, set_union_size
from fres.utils.validation import ValidationError


def _interp():
    i = Interpretation(["neg", "pos"])
    i.add_triangular_partition("x", 2, 0.0, 1.0)
    i.add_triangular_partition("y", 3, 0.0, 1.0)
    i.add_triangular_partition("z", 3, 0.0, 1.0)
    return i


def _data(n=40, seed=0):
    rng = random.Random(seed)
    d = DataMatrix(["x", "y", "z", "label"])
    for _ in range(n):
        row = [rng.random(), rng.random(), rng.random()]
        d.add_row(row, int(row[1] > 0.5))
    return d


def _initial(interp=None):
    return FuzzyClassifier(interp or _interp(), [({0: 0}, 0), ({0: 1}, 1)])


def _noop(classifier, rng):
    pass


def _constant(classifier, training):
    return 1.0


def _always(score):
    return True


@pytest.mark.parametrize("kwargs,error_type", [
    ({"pop_size": 0, "elites": 1, "t_max": 1}, "invalid_population_size"),
    ({"pop_size": 8, "elites": 0, "t_max": 1}, "invalid_elites"),
    ({"pop_size": 8, "elites": 8, "t_max": 1}, "invalid_elites"),
    ({"pop_size": 8, "elites": 2, "t_max": 0}, "invalid_max_generations"),
])
def test_evolve_rejects_bad_parameters(kwargs, error_type):
    with pytest.raises(ValidationError) as ei:
        evolve(_initial(), _noop, _constant, _always, [], seed=1, n=1, pr=0.5, **kwargs)
    assert ei.value.error_type == error_type


def test_evolve_stops_immediately_and_returns_seed_copy():
    initial = _initial()
    trace = EvolutionTrace()
    best = evolve(initial, _noop, _constant, _always, [], 8, 2, 10, seed=5, n=3, pr=0.5, observer=trace)
    assert best == initial
    assert best is not initial
    assert initial.interpretation.frozen
    assert len(trace.records) == 1
    assert trace.stop_reason == "stop_criterion"
    assert trace.stop_generation == 0


def test_evolve_runs_to_t_max_without_stop():
    trace = EvolutionTrace()
    evolve(_initial(), _noop, _constant, never_stop, [], 8, 2, 4, seed=5, n=1, pr=0.5, observer=trace)
    assert [r.generation for r in trace.records] == [0, 1, 2, 3]
    assert trace.stop_reason == "max_generations"
    assert all(len(r.elites) == 2 for r in trace.records)


def test_evolve_returns_best_of_last_generation():
    interp = _interp()
    data = _data()
    fitness = make_tss_fitness(1, 0.01)
    trace = EvolutionTrace()
    mutate = make_mutator(interp, {"max_conditions": 2})
    best = evolve(_initial(interp), mutate, fitness, never_stop, data, 12, 3, 6, seed=11, n=3, pr=0.5, observer=trace)
    assert fitness(best, data) == pytest.approx(trace.records[-1].best)
    assert best.interpretation is interp


def test_evolve_is_deterministic_for_a_seed():
    interp = _interp()
    data = _data()
    fitness = make_tss_fitness(1, 0.001)

    def run():
        trace = EvolutionTrace()
        best = evolve(_initial(interp), make_mutator(interp), fitness, never_stop, data, 10, 2, 5,
                      seed=123, n=4, pr=0.5, observer=trace)
        return best, determinism_signature(trace)

    best_a, sig_a = run()
    best_b, sig_b = run()
    assert best_a == best_b
    assert sig_a == sig_b


def test_evolve_with_single_elite_copies_it():
    trace = EvolutionTrace()
    best = evolve(_initial(), _noop, _constant, never_stop, [], 4, 1, 3, seed=2, n=0, pr=0.0, observer=trace)
    assert best.size() == 2
    assert trace.records[-1].elites == [0]


def test_evolve_reports_mutation_counts():
    calls = []

    class Counting:
        def on_mutation(self, generation, index, count):
            calls.append((generation, index, count))

    evolve(_initial(), _noop, _constant, never_stop, [], 6, 2, 2, seed=3, n=5, pr=1.0, observer=Counting())
    assert len(calls) == 12
    assert all(count == 5 for _, _, count in calls)


def test_stop_at_threshold():
    assert stop_at(0.5)(0.5)
    assert not stop_at(0.5)(0.49)
    assert not never_stop(10.0)


def test_tss_fitness_penalizes_complexity():
    interp = _interp()
    data = _data()
    c = _initial(interp)
    tss = c.evaluate_all(data).tss(1)
    assert make_tss_fitness(1, 0.0)(c, data) == pytest.approx(tss)
    assert make_tss_fitness(1, 0.1)(c, data) == pytest.approx(tss - 0.2)


@pytest.mark.parametrize("seed", range(10))
def test_crossover_bounds(seed):
    interp = _interp()
    rng = random.Random(seed)
    mutate = make_mutator(interp)
    a, b = _initial(interp), _initial(interp)
    for _ in range(15):
        mutate(a, rng)
        mutate(b, rng)
    child = crossover_classifiers(a, b, rng)
    xs = list(a.rules.ordered_items())
    ys = list(b.rules.ordered_items())
    keys_a, keys_b, keys_c = set(a.rules), set(b.rules), set(child.rules)
    assert keys_a & keys_b <= keys_c <= keys_a | keys_b
    assert set_intersection_size(list(a.rules), list(b.rules)) <= child.size() <= set_union_size(list(a.rules), list(b.rules))
    for antecedent, category in child.rules.items():
        assert (antecedent, category) in xs or (antecedent, category) in ys
    assert child.interpretation is interp
    assert list(child.rules) == sorted(child.rules)


def test_crossover_requires_shared_interpretation():
    with pytest.raises(ValidationError):
        crossover_classifiers(_initial(), _initial(), random.Random(0))


def test_crossover_leaves_parents_untouched():
    interp = _interp()
    a = FuzzyClassifier(interp, [({0: 0}, 0), ({1: 2}, 1)])
    b = FuzzyClassifier(interp, [({0: 0}, 1), ({2: 1}, 0)])
    before_a, before_b = a.copy(), b.copy()
    child = crossover_classifiers(a, b, random.Random(1))
    child.add_rule({1: 1}, 0)
    assert a == before_a and b == before_b


def test_mutator_keeps_fixed_rules_and_valid_ids():
    interp = _interp()
    fixed = [{0: 0}, {0: 1}]
    mutate = make_mutator(interp, {"max_conditions": 2}, fixed_rules=fixed)
    c = _initial(interp)
    rng = random.Random(17)
    for _ in range(300):
        mutate(c, rng)
        assert c.has_rule({0: 0}, 0)
        assert c.has_rule({0: 1}, 1)
    for antecedent, category in c.rules.items():
        assert 1 <= len(antecedent) <= 2
        assert 0 <= category < interp.num_categories()
        for var, s in antecedent:
            assert 0 <= s < interp.num_sets(var)
    assert sum(mutate.counts.values()) > 0


def test_mutator_roulette_respects_weights():
    mutate = make_mutator(_interp(), {"mutation_probs": {"add_rule": 1.0, "remove_rule": 0.0}})
    c = FuzzyClassifier(mutate.interpretation)
    rng = random.Random(0)
    for _ in range(20):
        mutate(c, rng)
    assert mutate.counts["remove_rule"] == 0
    assert c.size() > 0


def test_mutator_rejects_unknown_types():
    with pytest.raises(ValidationError):
        make_mutator(_interp(), {"mutation_probs": {"teleport": 1.0}})


def test_evolve_from_config():
    interp = _interp()
    data = _data()
    config = merge_config({"pop_size": 8, "elites": 2, "t_max": 3, "stop_threshold": 2.0})
    trace = EvolutionTrace()
    best = evolve_from_config(_initial(interp), make_tss_fitness(), data, config, seed=9, observer=trace,
                              fixed_rules=[{0: 0}, {0: 1}])
    assert len(trace.records) == 3
    assert best.has_rule({0: 0}, 0)


def test_evolve_from_config_stop_threshold():
    trace = EvolutionTrace()
    evolve_from_config(_initial(), _constant, [], {"pop_size": 8, "elites": 2, "t_max": 5, "stop_threshold": 1.0},
                       seed=1, mutate=_noop, observer=trace)
    assert trace.stop_reason == "stop_criterion"
    assert trace.stop_generation == 0


def test_mutator_skips_inputs_without_fuzzy_sets():
    interp = Interpretation(["neg", "pos"])
    interp.add_triangular_partition("x", 2, 0.0, 1.0)
    interp.add_triangular_partition("flat", 1, 0.0, 1.0)
    assert interp.num_sets(1) == 0
    c = FuzzyClassifier(interp, [({0: 0}, 0)])
    rng = random.Random(4)
    for probs in ({"add_rule": 1.0}, {"add_condition": 1.0}, None):
        mutate = make_mutator(interp, {"mutation_probs": probs} if probs else None)
        for _ in range(50):
            mutate(c, rng)
    assert all(var == 0 for antecedent in c.rules for var, _ in antecedent)


def test_add_rule_does_nothing_when_no_input_has_sets():
    interp = Interpretation(["neg", "pos"])
    interp.add_triangular_partition("flat", 1, 0.0, 1.0)
    mutate = make_mutator(interp, {"mutation_probs": {"add_rule": 1.0}})
    c = FuzzyClassifier(interp)
    mutate(c, random.Random(0))
    assert c.empty()
    assert mutate.counts["add_rule"] == 0
