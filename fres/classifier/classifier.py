"""Fuzzy rule-based classifier."""

from __future__ import annotations

import random
from typing import Any, Iterable, Iterator, Mapping, Sequence

from fres.classifier.display import format_classifier
from fres.classifier.interpretation import Interpretation
from fres.classifier.rules import EMPTY_RULE, Rule, RuleBase, make_antecedent
from fres.metrics.confusion import ConfusionMatrix


def idx_of_maximum(values: Sequence[Any]) -> int:
    """Index of the largest value; the lowest index wins ties."""
    best = 0
    for i in range(1, len(values)):
        if values[best] < values[i]:
            best = i
    return best


class FuzzyClassifier:
    """Predicts a category from numeric inputs with rules ``IF antecedent THEN category``.

    The truth of a rule is the strong conjunction of the memberships named in
    its antecedent; the truth of a category is the weak disjunction of its
    rules. The predicted category is the one with the highest truth.

    Args:
        interpretation: Shared naming and partition context (held by reference)
        rules: Initial rules as a ``RuleBase``, a mapping or (antecedent, category) pairs
    """

    __slots__ = ("interpretation", "rules")

    def __init__(
        self,
        interpretation: Interpretation,
        rules: RuleBase | Mapping[Any, int] | Iterable[tuple[Any, int]] | None = None,
    ) -> None:
        self.interpretation = interpretation
        self.rules = RuleBase()
        if rules is None:
            return
        items = rules.items() if isinstance(rules, Mapping) else rules
        for antecedent, category in items:
            self.add_rule(antecedent, category)

    def with_rules(self, rules: RuleBase) -> "FuzzyClassifier":
        """New classifier over the same interpretation that takes ownership of ``rules``."""
        clone = FuzzyClassifier(self.interpretation)
        clone.rules = rules
        return clone

    def copy(self) -> "FuzzyClassifier":
        return self.with_rules(self.rules.copy())

    # ---- size ---------------------------------------------------------

    def size(self) -> int:
        return len(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def empty(self) -> bool:
        return not self.rules

    def complexity(self) -> int:
        """Total number of fuzzy conditions across all rules."""
        return sum(len(antecedent) for antecedent in self.rules)

    # ---- rule access --------------------------------------------------

    def has_antecedent(self, antecedent: Any) -> bool:
        return make_antecedent(antecedent) in self.rules

    def has_rule(self, antecedent: Any, category: int) -> bool:
        return self.rules.get(make_antecedent(antecedent)) == category

    def add_rule(self, antecedent: Any, category: int) -> bool:
        """Add or overwrite a rule. Returns False, adding nothing, for an empty antecedent.

        Raises:
            IndexError: if the category or a variable/set id is unknown to the interpretation
        """
        antecedent = make_antecedent(antecedent)
        if not antecedent:
            return False
        self.interpretation.category_name(category)
        for var, s in antecedent:
            self.interpretation.label(var, s)
        self.rules[antecedent] = category
        return True

    def remove_rule(self, antecedent: Any) -> bool:
        antecedent = make_antecedent(antecedent)
        if antecedent not in self.rules:
            return False
        del self.rules[antecedent]
        return True

    def get_random_rule(self, rng: random.Random) -> Rule:
        """A uniformly chosen rule, or ``EMPTY_RULE`` if there is none."""
        if not self.rules:
            return EMPTY_RULE
        if len(self.rules) == 1:
            return self.rules.rule_at(0)
        return self.rules.rule_at(rng.randrange(len(self.rules)))

    def pop_random_rule(self, rng: random.Random) -> Rule:
        """Remove and return a uniformly chosen rule, or ``EMPTY_RULE`` if there is none."""
        if not self.rules:
            return EMPTY_RULE
        if len(self.rules) == 1:
            return self.rules.pop_at(0)
        return self.rules.pop_at(rng.randrange(len(self.rules)))

    def __iter__(self) -> Iterator[Rule]:
        return (Rule(a, c) for a, c in self.rules.ordered_items())

    # ---- inference ----------------------------------------------------

    def category_truths(self, row: Sequence[float]) -> list[Any]:
        """Accumulated truth of every category for one input row."""
        interp = self.interpretation
        logic = interp.logic
        truths = [logic.zero()] * interp.num_categories()
        unit = logic.unit()
        for antecedent, category in self.rules.ordered_items():
            truth = unit
            for var, s in antecedent:
                truth = truth.strong_and(interp.truth(var, s, row[var]))
            truths[category] = truths[category] | truth
        return truths

    def evaluate(self, row: Sequence[float]) -> int:
        """Predicted category id for one input row."""
        return idx_of_maximum(self.category_truths(row))

    def evaluate_all(self, data: Iterable[tuple[Sequence[float], int]]) -> ConfusionMatrix:
        """Confusion matrix (predicted x observed) over labeled rows."""
        results = ConfusionMatrix(self.interpretation.num_categories())
        for inputs, observed in data:
            results.add_count(self.evaluate(inputs), observed)
        return results

    # ---- identity -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuzzyClassifier):
            return NotImplemented
        return self.interpretation is other.interpretation and self.rules == other.rules

    def __hash__(self) -> int:
        return hash((hash(self.rules), id(self.interpretation)))

    def __str__(self) -> str:
        return format_classifier(self)

    def __repr__(self) -> str:
        return f"FuzzyClassifier(rules={len(self.rules)}, complexity={self.complexity()})"


__all__ = ["FuzzyClassifier", "idx_of_maximum"]
