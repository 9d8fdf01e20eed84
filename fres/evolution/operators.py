"""Crossover and mutation operators on fuzzy classifiers."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterable

from fres.classifier.classifier import FuzzyClassifier
from fres.classifier.interpretation import Interpretation
from fres.classifier.rules import Rule, RuleBase, antecedent_with, antecedent_without, make_antecedent
from fres.config import DEFAULT_CONFIG, MUTATION_TYPES
from fres.utils.rng_manager import unique_integers
from fres.utils.sets import map_intersection_split_union
from fres.utils.validation import ValidationError


def _normalize_probs(probabilities: list[float]) -> list[float]:
    total = sum(probabilities)
    if total > 0:
        return [p / total for p in probabilities]
    if probabilities:
        return [1.0 / len(probabilities) for _ in probabilities]
    return []


def crossover_classifiers(a: FuzzyClassifier, b: FuzzyClassifier, rng: random.Random) -> FuzzyClassifier:
    """Offspring holding every antecedent shared by both parents plus half of the others.

    Shared antecedents take their category from either parent with
    probability 0.5. The offspring gets a brand-new rule base over the
    parents' common interpretation.
    """
    if a.interpretation is not b.interpretation:
        raise ValidationError('interpretation_mismatch', "Parents must share one interpretation")
    rules = map_intersection_split_union(a.rules, b.rules, rng)
    return a.with_rules(RuleBase.from_ordered(rules))


class RuleMutator:
    """Mutation strategy ``(classifier, rng) -> None`` for ``evolve``.

    Each call picks one mutation type by roulette over ``mutation_probs`` and
    applies it. Rules whose antecedent is in ``fixed_rules`` are never
    removed or altered. A mutation with nothing to act on does nothing.

    Mutation types:
    - add_rule: new rule over 1..max_conditions random inputs and a random category
    - remove_rule: drop a random rule
    - add_condition: test one more input in a random rule
    - remove_condition: stop testing one input in a random rule (never empties it)
    - shift_set: move one condition of a random rule to an adjacent fuzzy set
    - change_category: give a random rule another category
    """

    def __init__(self, interpretation: Interpretation, config: dict | None = None, fixed_rules: Iterable[Any] = ()) -> None:
        config = config or {}
        self.interpretation = interpretation
        self.max_conditions = max(1, int(config.get('max_conditions', DEFAULT_CONFIG['max_conditions'])))
        probs: dict[str, float] = dict(config.get('mutation_probs', DEFAULT_CONFIG['mutation_probs']))
        unknown = set(probs) - set(MUTATION_TYPES)
        if unknown:
            raise ValidationError('unknown_mutation', "Unknown mutation types in mutation_probs", types=sorted(unknown))
        self.types = list(probs)
        self.weights = _normalize_probs([float(probs[k]) for k in self.types])
        self.fixed: frozenset = frozenset(self._antecedent_of(r) for r in fixed_rules)
        self.counts: dict[str, int] = {k: 0 for k in self.types}

    @staticmethod
    def _antecedent_of(rule: Any) -> tuple:
        if isinstance(rule, Rule):
            return rule.antecedent
        return make_antecedent(rule)

    def select(self, rng: random.Random) -> str:
        # Roulette selection
        r = rng.random()
        cumulative = 0.0
        selected_type = self.types[-1]
        for k, w in zip(self.types, self.weights):
            cumulative += w
            if r <= cumulative:
                selected_type = k
                break
        return selected_type

    def __call__(self, classifier: FuzzyClassifier, rng: random.Random) -> None:
        selected_type = self.select(rng)
        if getattr(self, selected_type)(classifier, rng):
            self.counts[selected_type] += 1

    # ---- helpers ------------------------------------------------------

    def _random_mutable_rule(self, classifier: FuzzyClassifier, rng: random.Random) -> Rule | None:
        candidates = [i for i, a in enumerate(classifier.rules) if a not in self.fixed]
        if not candidates:
            return None
        return classifier.rules.rule_at(candidates[rng.randrange(len(candidates))])

    def _replace(self, classifier: FuzzyClassifier, old: Rule, antecedent: tuple, category: int) -> bool:
        if antecedent in self.fixed or classifier.has_antecedent(antecedent):
            return False
        classifier.remove_rule(old.antecedent)
        classifier.add_rule(antecedent, category)
        return True

    # ---- mutation types ------------------------------------------------

    def add_rule(self, classifier: FuzzyClassifier, rng: random.Random) -> bool:
        interp = self.interpretation
        # Inputs whose partition is empty cannot be tested
        candidates = [v for v in range(interp.num_inputs()) if interp.num_sets(v)]
        if not candidates or interp.num_categories() == 0:
            return False
        k = rng.randint(1, min(self.max_conditions, len(candidates)))
        variables = [candidates[i] for i in unique_integers(k, 0, len(candidates), rng)]
        antecedent = make_antecedent((v, rng.randrange(interp.num_sets(v))) for v in variables)
        if antecedent in self.fixed or classifier.has_antecedent(antecedent):
            return False
        return classifier.add_rule(antecedent, rng.randrange(interp.num_categories()))

    def remove_rule(self, classifier: FuzzyClassifier, rng: random.Random) -> bool:
        rule = self._random_mutable_rule(classifier, rng)
        if rule is None:
            return False
        return classifier.remove_rule(rule.antecedent)

    def add_condition(self, classifier: FuzzyClassifier, rng: random.Random) -> bool:
        rule = self._random_mutable_rule(classifier, rng)
        if rule is None or len(rule.antecedent) >= self.max_conditions:
            return False
        used = {v for v, _ in rule.antecedent}
        free = [v for v in range(self.interpretation.num_inputs()) if v not in used and self.interpretation.num_sets(v)]
        if not free:
            return False
        var = free[rng.randrange(len(free))]
        s = rng.randrange(self.interpretation.num_sets(var))
        return self._replace(classifier, rule, antecedent_with(rule.antecedent, var, s), rule.category)

    def remove_condition(self, classifier: FuzzyClassifier, rng: random.Random) -> bool:
        rule = self._random_mutable_rule(classifier, rng)
        if rule is None or len(rule.antecedent) < 2:
            return False
        var, _ = rule.antecedent[rng.randrange(len(rule.antecedent))]
        return self._replace(classifier, rule, antecedent_without(rule.antecedent, var), rule.category)

    def shift_set(self, classifier: FuzzyClassifier, rng: random.Random) -> bool:
        rule = self._random_mutable_rule(classifier, rng)
        if rule is None:
            return False
        var, s = rule.antecedent[rng.randrange(len(rule.antecedent))]
        nsets = self.interpretation.num_sets(var)
        shifted = s + rng.choice((-1, 1))
        if shifted < 0 or shifted >= nsets:
            shifted = s - (shifted - s)
        if shifted < 0 or shifted >= nsets or shifted == s:
            return False
        return self._replace(classifier, rule, antecedent_with(rule.antecedent, var, shifted), rule.category)

    def change_category(self, classifier: FuzzyClassifier, rng: random.Random) -> bool:
        rule = self._random_mutable_rule(classifier, rng)
        ncategories = self.interpretation.num_categories()
        if rule is None or ncategories < 2:
            return False
        category = rng.randrange(ncategories - 1)
        if category >= rule.category:
            category += 1
        return classifier.add_rule(rule.antecedent, category)


def make_mutator(
    interpretation: Interpretation, config: dict | None = None, fixed_rules: Iterable[Any] = ()
) -> Callable[[FuzzyClassifier, random.Random], None]:
    """Default mutation strategy for ``evolve``; see ``RuleMutator``."""
    return RuleMutator(interpretation, config, fixed_rules)


__all__ = ["crossover_classifiers", "RuleMutator", "make_mutator"]
