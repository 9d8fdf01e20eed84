"""Merge-based algebra over ordered sets and ordered maps.

Sets are ascending sequences of unique elements; maps are any mapping whose
keys are iterated in ascending order (``sorted`` is applied when the mapping
does not guarantee it). All walks are two-pointer merges that rely on a
strict weak ordering of the elements (``<`` only).

The randomized ``*_intersection_split_union`` combinators implement uniform
crossover directly on ordered collections: elements present in both inputs
are always kept, elements present in only one input are kept with
probability 0.5. The result size is therefore bounded by the intersection
and union sizes of the inputs.
"""

from __future__ import annotations

import random
from typing import Any, Iterable, Mapping, Sequence


def _ordered(xs: Iterable[Any]) -> list[Any]:
    return xs if isinstance(xs, list) else sorted(xs)


def _ordered_items(m: Mapping[Any, Any]) -> list[tuple[Any, Any]]:
    ordered_items = getattr(m, "ordered_items", None)
    if ordered_items is not None:
        return list(ordered_items())
    return sorted(m.items(), key=lambda kv: kv[0])


def set_union(xs: Sequence[Any], ys: Sequence[Any]) -> list[Any]:
    xs, ys = _ordered(xs), _ordered(ys)
    out: list[Any] = []
    i = j = 0
    while i < len(xs) and j < len(ys):
        if xs[i] < ys[j]:
            out.append(xs[i])
            i += 1
        elif ys[j] < xs[i]:
            out.append(ys[j])
            j += 1
        else:
            out.append(xs[i])
            i += 1
            j += 1
    out.extend(xs[i:])
    out.extend(ys[j:])
    return out


def set_union_size(xs: Sequence[Any], ys: Sequence[Any]) -> int:
    return len(xs) + len(ys) - set_intersection_size(xs, ys)


def set_intersection(xs: Sequence[Any], ys: Sequence[Any]) -> list[Any]:
    xs, ys = _ordered(xs), _ordered(ys)
    out: list[Any] = []
    i = j = 0
    while i < len(xs) and j < len(ys):
        if xs[i] < ys[j]:
            i += 1
        else:
            if not ys[j] < xs[i]:
                out.append(xs[i])
                i += 1
            j += 1
    return out


def set_intersection_size(xs: Sequence[Any], ys: Sequence[Any]) -> int:
    xs, ys = _ordered(xs), _ordered(ys)
    count = 0
    i = j = 0
    while i < len(xs) and j < len(ys):
        if xs[i] < ys[j]:
            i += 1
        else:
            if not ys[j] < xs[i]:
                count += 1
                i += 1
            j += 1
    return count


def empty_set_intersection(xs: Sequence[Any], ys: Sequence[Any]) -> bool:
    xs, ys = _ordered(xs), _ordered(ys)
    i = j = 0
    while i < len(xs) and j < len(ys):
        if xs[i] < ys[j]:
            i += 1
        elif ys[j] < xs[i]:
            j += 1
        else:
            return False
    return True


def set_difference(xs: Sequence[Any], ys: Sequence[Any]) -> list[Any]:
    """Elements of ``xs`` that are not in ``ys``."""
    xs, ys = _ordered(xs), _ordered(ys)
    out: list[Any] = []
    i = j = 0
    while i < len(xs) and j < len(ys):
        if xs[i] < ys[j]:
            out.append(xs[i])
            i += 1
        elif ys[j] < xs[i]:
            j += 1
        else:
            i += 1
            j += 1
    out.extend(xs[i:])
    return out


def set_difference_size(xs: Sequence[Any], ys: Sequence[Any]) -> int:
    return len(xs) - set_intersection_size(xs, ys)


def tanimoto(xs: Sequence[Any], ys: Sequence[Any]) -> float:
    """Size of the intersection over size of the union (0 if either set is empty)."""
    if not xs or not ys:
        return 0.0
    inter = set_intersection_size(xs, ys)
    return inter / (len(xs) + len(ys) - inter)


def tanimoto_distance(xs: Sequence[Any], ys: Sequence[Any]) -> float:
    return 1.0 - tanimoto(xs, ys)


def set_intersection_split_union(xs: Sequence[Any], ys: Sequence[Any], rng: random.Random) -> list[Any]:
    """Every shared element, plus each unshared element with probability 0.5."""
    xs, ys = _ordered(xs), _ordered(ys)
    out: list[Any] = []
    i = j = 0
    while i < len(xs) and j < len(ys):
        if xs[i] < ys[j]:
            if rng.random() < 0.5:
                out.append(xs[i])
            i += 1
        else:
            if not ys[j] < xs[i]:
                out.append(xs[i])
                i += 1
            elif rng.random() < 0.5:
                out.append(ys[j])
            j += 1
    for x in xs[i:]:
        if rng.random() < 0.5:
            out.append(x)
    for y in ys[j:]:
        if rng.random() < 0.5:
            out.append(y)
    return out


def map_intersection_split_union(xs: Mapping[Any, Any], ys: Mapping[Any, Any], rng: random.Random) -> dict[Any, Any]:
    """Every shared key, plus each unshared key with probability 0.5.

    For a shared key the mapped value comes from ``xs`` or ``ys`` with
    probability 0.5 each. The returned dict is built in ascending key order.
    """
    xi, yi = _ordered_items(xs), _ordered_items(ys)
    out: dict[Any, Any] = {}
    i = j = 0
    while i < len(xi) and j < len(yi):
        xk, yk = xi[i][0], yi[j][0]
        if xk < yk:
            if rng.random() < 0.5:
                out[xk] = xi[i][1]
            i += 1
        else:
            if not yk < xk:
                out[xk] = xi[i][1] if rng.random() < 0.5 else yi[j][1]
                i += 1
            elif rng.random() < 0.5:
                out[yk] = yi[j][1]
            j += 1
    for k, v in xi[i:]:
        if rng.random() < 0.5:
            out[k] = v
    for k, v in yi[j:]:
        if rng.random() < 0.5:
            out[k] = v
    return out


__all__ = [
    "set_union",
    "set_union_size",
    "set_intersection",
    "set_intersection_size",
    "empty_set_intersection",
    "set_difference",
    "set_difference_size",
    "tanimoto",
    "tanimoto_distance",
    "set_intersection_split_union",
    "map_intersection_split_union",
]
