"""Naming and partition context shared by a whole population of classifiers."""

from __future__ import annotations

from typing import Any, Sequence

from fres.fuzzy.partition import Membership, make_labels, make_triangles
from fres.logic.truth import Lukasiewicz, Truth, get_logic, resolve_logic
from fres.utils.validation import ValidationError


def _at(seq: Sequence[Any], index: int, what: str) -> Any:
    if index < 0 or index >= len(seq):
        raise IndexError(f"{what} {index} out of range (0..{len(seq) - 1})")
    return seq[index]


class Interpretation:
    """Input variables (name, fuzzy partition, labels) and category names.

    Built incrementally with ``add_triangular_partition`` (or
    ``add_partition``) and frozen once a search starts. Classifiers hold a
    reference to one interpretation; equality and hashing are by identity,
    so two separately built interpretations never compare equal.

    Args:
        categories: Names of the output categories, indexed by category id
        logic: Truth algebra (class or registered name) of the memberships
    """

    def __init__(self, categories: Sequence[str], logic: type[Truth] | str = Lukasiewicz) -> None:
        self.logic = get_logic(logic)
        self._categories = [str(c) for c in categories]
        self._input_names: list[str] = []
        self._partitions: list[list[Membership]] = []
        self._labels: list[list[str]] = []
        self._partition_names: list[str] = []
        self._frozen = False

    # ---- construction -------------------------------------------------

    def add_partition(self, name: str, sets: Sequence[Membership], labels: Sequence[str], partition_name: str = "custom") -> int:
        """Append an input variable with an explicit partition. Returns its id."""
        if self._frozen:
            raise ValidationError("interpretation_frozen", "Interpretation is frozen once a search has started", input=name)
        if len(sets) != len(labels):
            raise ValidationError(
                "invalid_partition", "Each fuzzy set needs exactly one label", input=name, sets=len(sets), labels=len(labels)
            )
        self._input_names.append(str(name))
        self._partitions.append(list(sets))
        self._labels.append(list(labels))
        self._partition_names.append(partition_name)
        return len(self._input_names) - 1

    def add_triangular_partition(self, name: str, nsets: int, a: float = 0.0, b: float = 1.0) -> int:
        """Append an input variable split into ``nsets`` triangular sets over ``[a, b]``."""
        if not self.logic.fuzziness:
            raise ValidationError("crisp_logic", "Triangular partitions need a fuzzy logic", logic=self.logic.name)
        sets = make_triangles(nsets, a, b, self.logic.zero(), self.logic.unit())
        return self.add_partition(name, sets, make_labels(nsets), f"triangular(n={nsets}, a={a}, b={b})")

    @classmethod
    def from_data(cls, data: Any, categories: Sequence[str], config: dict | None = None, first_nsets: int | None = None) -> "Interpretation":
        """One triangular partition per input column of ``data``, spanning its observed range.

        Reads ``logic`` (unknown names fall back to Łukasiewicz with a
        warning) and ``nsets`` from ``config``. ``first_nsets`` overrides the
        number of sets of the first input.
        """
        config = config or {}
        interp = cls(categories, logic=resolve_logic(config.get("logic")))
        nsets = int(config.get("nsets", 5))
        for h, name in enumerate(data.input_names()):
            col = data.column(name)
            lo, hi = (float(col.min()), float(col.max())) if col.size else (0.0, 1.0)
            if hi <= lo:
                hi = lo + 1.0
            n = first_nsets if h == 0 and first_nsets is not None else nsets
            interp.add_triangular_partition(name, n, lo, hi)
        return interp

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---- accessors ----------------------------------------------------

    def num_inputs(self) -> int:
        return len(self._input_names)

    def num_sets(self, var: int) -> int:
        return len(_at(self._partitions, var, "input"))

    def num_categories(self) -> int:
        return len(self._categories)

    def input_name(self, var: int) -> str:
        return _at(self._input_names, var, "input")

    def input_names(self) -> list[str]:
        return list(self._input_names)

    def category_name(self, category: int) -> str:
        return _at(self._categories, category, "category")

    def categories(self) -> list[str]:
        return list(self._categories)

    def labels(self, var: int) -> list[str]:
        return list(_at(self._labels, var, "input"))

    def label(self, var: int, s: int) -> str:
        return _at(_at(self._labels, var, "input"), s, "fuzzy set")

    def partition_name(self, var: int) -> str:
        return _at(self._partition_names, var, "input")

    def partition(self, var: int) -> list[Membership]:
        return list(_at(self._partitions, var, "input"))

    def membership(self, var: int, s: int) -> Membership:
        return _at(_at(self._partitions, var, "input"), s, "fuzzy set")

    def truth(self, var: int, s: int, x: float) -> Truth:
        """Membership of ``x`` in fuzzy set ``s`` of input ``var``."""
        return self.membership(var, s)(x)

    def __repr__(self) -> str:
        return (
            f"Interpretation(inputs={self._input_names!r}, categories={self._categories!r}, "
            f"logic={self.logic.__name__})"
        )


__all__ = ["Interpretation"]
