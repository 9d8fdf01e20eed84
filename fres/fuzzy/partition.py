"""Piecewise-linear membership functions and generic linguistic labels.

Truth levels (``before``, ``after``, ``floor``, ``ceil``...) may be plain
floats or values of a :class:`~fres.logic.truth.Truth` algebra; the
returned membership functions produce values of the same kind.
"""

from __future__ import annotations

from typing import Any, Callable

from fres.logic.truth import Truth

Membership = Callable[[float], Any]


def _raw(t: Any) -> float:
    return t.value if isinstance(t, Truth) else float(t)


def _wrapper(t: Any) -> Callable[[float], Any]:
    return type(t) if isinstance(t, Truth) else float


def make_slope(begin: float, end: float, before: Any, after: Any) -> Membership:
    """Flat at ``before`` up to ``begin``, linear until ``end``, flat at ``after`` from there."""
    length = end - begin
    b, a = _raw(before), _raw(after)
    wrap = _wrapper(before)

    def slope(x: float) -> Any:
        if x < begin:
            return before
        if x < end:
            return wrap(b * (1 - (x - begin) / length) + a * (1 - (end - x) / length))
        return after

    return slope


def make_triangle(begin: float, apex: float, end: float, before: Any, peak: Any, after: Any) -> Membership:
    """Flat at ``before``, rising to ``peak`` at ``apex``, falling to ``after`` at ``end``."""
    left = apex - begin
    right = end - apex
    b, p, a = _raw(before), _raw(peak), _raw(after)
    wrap = _wrapper(before)

    def triangle(x: float) -> Any:
        if x < begin:
            return before
        if x < apex:
            return wrap(b * (1 - (x - begin) / left) + p * (1 - (apex - x) / left))
        if x < end:
            return wrap(p * (1 - (x - apex) / right) + a * (1 - (end - x) / right))
        return after

    return triangle


def make_triangles(n: int, begin: float = 0.0, end: float = 1.0, floor: Any = 0.0, ceil: Any = 1.0) -> list[Membership]:
    """Partition ``[begin, end]`` into ``n`` overlapping fuzzy sets.

    The first set is a descending slope, the last an ascending one, and the
    ``n - 2`` sets in between are triangles centred on evenly spaced points.
    Any ``x`` has a non-floor membership in at most two adjacent sets, and
    the two memberships sum to ``floor + ceil``. Returns ``[]`` for ``n < 2``.
    """
    if n < 2:
        return []
    step = (end - begin) / (n - 1)
    sets = [make_slope(begin, begin + step, ceil, floor)]
    for i in range(n - 2):
        sets.append(make_triangle(begin + i * step, begin + (i + 1) * step, begin + (i + 2) * step, floor, ceil, floor))
    sets.append(make_slope(end - step, end, floor, ceil))
    return sets


_CANNED_LABELS = {
    2: ["is low", "is high"],
    3: ["is low", "is average", "is high"],
    4: ["is very low", "is low", "is high", "is very high"],
    5: ["is very low", "is low", "is average", "is high", "is very high"],
    6: ["is very low", "is low", "is low-average", "is average-high", "is high", "is very high"],
    7: ["is very low", "is low", "is low-average", "is average", "is average-high", "is high", "is very high"],
}


def make_labels(n: int) -> list[str]:
    """Generic labels for ``n`` fuzzy sets, e.g. ``["is low", "is average", "is high"]``."""
    if n < 2:
        return []
    if n in _CANNED_LABELS:
        return list(_CANNED_LABELS[n])
    half = n // 2
    labels = [f"is low{i}" for i in range(half)]
    if n % 2:
        labels.append("is average")
    labels.extend(f"is high{i}" for i in range(half))
    return labels


__all__ = ["Membership", "make_slope", "make_triangle", "make_triangles", "make_labels"]
