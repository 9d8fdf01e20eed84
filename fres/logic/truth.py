"""Truth algebras: crisp Boolean and the Łukasiewicz, Gödel and Product fuzzy logics.

Every algebra is a small immutable value type exposing the same operation
set (negation, strong/weak conjunction, strong/weak disjunction,
implication, equivalence) together with its ``zero`` and ``unit``
constants. The classifier is written against this interface only, so the
logic is chosen by passing one of the classes below.

Operator sugar shared by all algebras:

- ``~a``     negation
- ``a & b``  weak conjunction (lattice meet, ``min``)
- ``a | b``  weak disjunction (lattice join, ``max``)
"""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import Any

from fres.utils.validation import ValidationError


@total_ordering
class Truth:
    """Base class of all truth values.

    Subclasses implement the ``_neg``, ``_strong_and``, ``_strong_or`` and
    ``_implies`` hooks on raw values; the lattice operations and equivalence
    are shared.
    """

    __slots__ = ("value",)

    name = "truth"
    fuzziness = 1

    def __init__(self, value: Any) -> None:
        object.__setattr__(self, "value", float(value))

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ---- constants ----------------------------------------------------

    @classmethod
    def zero(cls) -> "Truth":
        return cls(0.0)

    @classmethod
    def unit(cls) -> "Truth":
        return cls(1.0)

    # ---- raw hooks ----------------------------------------------------

    @staticmethod
    def _neg(a):
        raise NotImplementedError

    @staticmethod
    def _strong_and(a, b):
        raise NotImplementedError

    @staticmethod
    def _strong_or(a, b):
        raise NotImplementedError

    @staticmethod
    def _implies(a, b):
        raise NotImplementedError

    # ---- operations ---------------------------------------------------

    def _other(self, other: Any) -> Any:
        if isinstance(other, Truth):
            if type(other) is not type(self):
                raise TypeError(f"cannot combine {type(self).__name__} with {type(other).__name__}")
            return other.value
        return type(self)(other).value

    def neg(self) -> "Truth":
        return type(self)(self._neg(self.value))

    def strong_and(self, other: Any) -> "Truth":
        return type(self)(self._strong_and(self.value, self._other(other)))

    def weak_and(self, other: Any) -> "Truth":
        return type(self)(min(self.value, self._other(other)))

    def strong_or(self, other: Any) -> "Truth":
        return type(self)(self._strong_or(self.value, self._other(other)))

    def weak_or(self, other: Any) -> "Truth":
        return type(self)(max(self.value, self._other(other)))

    def implies(self, other: Any) -> "Truth":
        return type(self)(self._implies(self.value, self._other(other)))

    def equiv(self, other: Any) -> "Truth":
        b = type(self)(self._other(other))
        return self.implies(b).strong_and(b.implies(self))

    __invert__ = neg
    __and__ = weak_and
    __or__ = weak_or

    # ---- comparison ---------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Truth):
            return NotImplemented
        return type(other) is type(self) and self.value == other.value

    def __lt__(self, other: "Truth") -> bool:
        if not isinstance(other, Truth) or type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


class Boolean(Truth):
    """Crisp two-valued logic; the degenerate algebra with no fuzziness."""

    __slots__ = ()

    name = "boolean"
    fuzziness = 0

    def __init__(self, value: Any) -> None:
        object.__setattr__(self, "value", bool(value))

    @classmethod
    def zero(cls) -> "Boolean":
        return cls(False)

    @classmethod
    def unit(cls) -> "Boolean":
        return cls(True)

    @staticmethod
    def _neg(a):
        return not a

    @staticmethod
    def _strong_and(a, b):
        return a and b

    @staticmethod
    def _strong_or(a, b):
        return a or b

    @staticmethod
    def _implies(a, b):
        return (not a) or b

    def equiv(self, other: Any) -> "Boolean":
        return Boolean(self.value == self._other(other))

    def __bool__(self) -> bool:
        return self.value


class Lukasiewicz(Truth):
    __slots__ = ()

    name = "lukasiewicz"

    @staticmethod
    def _neg(a):
        return 1.0 - a

    @staticmethod
    def _strong_and(a, b):
        return max(0.0, a + b - 1.0)

    @staticmethod
    def _strong_or(a, b):
        return min(1.0, a + b)

    @staticmethod
    def _implies(a, b):
        return min(1.0, 1.0 - a + b)

    def equiv(self, other: Any) -> "Lukasiewicz":
        return Lukasiewicz(1.0 - abs(self.value - self._other(other)))


class Godel(Truth):
    """Gödel-Dummett logic: both conjunctions are ``min``, both disjunctions ``max``."""

    __slots__ = ()

    name = "godel"

    @staticmethod
    def _neg(a):
        return 1.0 if a == 0.0 else 0.0

    @staticmethod
    def _strong_and(a, b):
        return min(a, b)

    @staticmethod
    def _strong_or(a, b):
        return max(a, b)

    @staticmethod
    def _implies(a, b):
        return b if a > b else 1.0


class Product(Truth):
    __slots__ = ()

    name = "product"

    @staticmethod
    def _neg(a):
        return 1.0 if a == 0.0 else 0.0

    @staticmethod
    def _strong_and(a, b):
        return a * b

    @staticmethod
    def _strong_or(a, b):
        return a + b - a * b

    @staticmethod
    def _implies(a, b):
        return b / a if a > b else 1.0


LOGICS: dict[str, type[Truth]] = {
    "boolean": Boolean,
    "lukasiewicz": Lukasiewicz,
    "godel": Godel,
    "product": Product,
}

_ALIASES = {
    "bool": "boolean",
    "łukasiewicz": "lukasiewicz",
    "gödel": "godel",
    "gödel-dummett": "godel",
    "godel-dummett": "godel",
}


def get_logic(name: str | type[Truth]) -> type[Truth]:
    """Look up a truth algebra by name (case-insensitive, accents accepted)."""
    if isinstance(name, type) and issubclass(name, Truth):
        return name
    key = str(name).strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return LOGICS[key]
    except KeyError:
        raise ValidationError("unknown_logic", f"Unknown logic: {name}", known=sorted(LOGICS)) from None


def resolve_logic(name: str | type[Truth] | None) -> type[Truth]:
    """Like ``get_logic`` but falls back to Łukasiewicz with a warning."""
    if name is None:
        return Lukasiewicz
    try:
        return get_logic(name)
    except ValidationError:
        logging.warning("Unknown logic %r, using Łukasiewicz instead", name)
        return Lukasiewicz


__all__ = [
    "Truth",
    "Boolean",
    "Lukasiewicz",
    "Godel",
    "Product",
    "LOGICS",
    "get_logic",
    "resolve_logic",
]
