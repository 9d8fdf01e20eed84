"""Antecedents, rules and the ordered rule base."""

from __future__ import annotations

import bisect
from collections.abc import MutableMapping
from typing import Any, Iterable, Iterator, Mapping, NamedTuple

# Sorted tuple of (variable_id, set_id) pairs, unique variable ids.
Antecedent = tuple[tuple[int, int], ...]


def make_antecedent(conditions: Mapping[int, int] | Iterable[tuple[int, int]]) -> Antecedent:
    """Canonical antecedent from a ``{variable: set}`` mapping or (variable, set) pairs.

    A variable given twice keeps its last set id.
    """
    if isinstance(conditions, Mapping):
        pairs = conditions.items()
    else:
        pairs = dict(conditions).items()
    out = []
    for var, s in pairs:
        var, s = int(var), int(s)
        if var < 0 or s < 0:
            raise ValueError(f"negative id in condition ({var}, {s})")
        out.append((var, s))
    return tuple(sorted(out))


def antecedent_with(antecedent: Antecedent, var: int, s: int) -> Antecedent:
    """Copy of ``antecedent`` where ``var`` is tested against set ``s``."""
    conditions = dict(antecedent)
    conditions[var] = s
    return tuple(sorted(conditions.items()))


def antecedent_without(antecedent: Antecedent, var: int) -> Antecedent:
    return tuple((v, s) for v, s in antecedent if v != var)


class Rule(NamedTuple):
    """IF ``antecedent`` THEN ``category``."""

    antecedent: Antecedent
    category: int


EMPTY_RULE = Rule((), 0)


class RuleBase(MutableMapping):
    """Ordered mapping antecedent -> category, iterated in antecedent order.

    Keeps a sorted key list next to a dict so that the k-th rule can be
    reached by position (uniform random picks) and merges walk keys in
    order. Empty antecedents are never stored.
    """

    __slots__ = ("_keys", "_rules")

    def __init__(self, rules: Mapping[Any, int] | Iterable[tuple[Any, int]] = ()) -> None:
        self._keys: list[Antecedent] = []
        self._rules: dict[Antecedent, int] = {}
        items = rules.items() if isinstance(rules, Mapping) else rules
        for antecedent, category in items:
            self[antecedent] = category

    @classmethod
    def from_ordered(cls, rules: dict[Antecedent, int]) -> "RuleBase":
        """Adopt a dict of canonical, non-empty antecedents already built in ascending key order."""
        rb = cls.__new__(cls)
        rb._keys = list(rules)
        rb._rules = rules
        return rb

    def __getitem__(self, antecedent: Antecedent) -> int:
        return self._rules[antecedent]

    def __setitem__(self, antecedent: Any, category: int) -> None:
        antecedent = make_antecedent(antecedent)
        if not antecedent:
            raise ValueError("empty antecedent")
        if antecedent not in self._rules:
            bisect.insort(self._keys, antecedent)
        self._rules[antecedent] = int(category)

    def __delitem__(self, antecedent: Antecedent) -> None:
        del self._rules[antecedent]
        i = bisect.bisect_left(self._keys, antecedent)
        del self._keys[i]

    def __iter__(self) -> Iterator[Antecedent]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, antecedent: object) -> bool:
        return antecedent in self._rules

    def ordered_items(self) -> Iterator[tuple[Antecedent, int]]:
        rules = self._rules
        return ((k, rules[k]) for k in self._keys)

    def rule_at(self, index: int) -> Rule:
        """The ``index``-th rule in antecedent order."""
        key = self._keys[index]
        return Rule(key, self._rules[key])

    def pop_at(self, index: int) -> Rule:
        key = self._keys.pop(index)
        return Rule(key, self._rules.pop(key))

    def copy(self) -> "RuleBase":
        rb = RuleBase.__new__(RuleBase)
        rb._keys = list(self._keys)
        rb._rules = dict(self._rules)
        return rb

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RuleBase):
            return self._rules == other._rules
        if isinstance(other, Mapping):
            try:
                canonical = {make_antecedent(k): int(v) for k, v in other.items()}
            except (TypeError, ValueError):
                return False
            return len(canonical) == len(other) and self._rules == canonical
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.ordered_items()))

    def __repr__(self) -> str:
        return f"RuleBase({dict(self.ordered_items())!r})"


__all__ = [
    "Antecedent",
    "make_antecedent",
    "antecedent_with",
    "antecedent_without",
    "Rule",
    "EMPTY_RULE",
    "RuleBase",
]
