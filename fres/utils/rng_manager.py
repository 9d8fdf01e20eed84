"""Seeded random streams for reproducible searches.

A search owns exactly one master stream. Drivers that need independent
streams (one per trial, one per dataset split) derive them from the master
seed through named contexts, so adding a context never shifts the draws of
another one.
"""

from __future__ import annotations

import hashlib
import random
from typing import Any, Sequence

_SEED_MASK = (1 << 64) - 1


class RNGManager:
    """Owns the master random stream of an experiment.

    Args:
        seed: Master seed. ``None`` draws one from system entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self.seed = int(seed) & _SEED_MASK
        self.rng = random.Random(self.seed)
        self._contexts: dict[str, random.Random] = {}

    def get_context_rng(self, context: str) -> random.Random:
        """Stream dedicated to a named context, derived from the master seed."""
        if context not in self._contexts:
            digest = hashlib.sha256(f"{self.seed}:{context}".encode("utf-8")).digest()
            self._contexts[context] = random.Random(int.from_bytes(digest[:8], "big"))
        return self._contexts[context]

    def derive_seed(self) -> int:
        """Draw a fresh 64-bit seed from the master stream."""
        return self.rng.getrandbits(64)

    def binomial(self, n: int, p: float) -> int:
        """Number of successes in ``n`` Bernoulli(p) trials, drawn from the master stream."""
        if n <= 0 or p <= 0.0:
            return 0
        if p >= 1.0:
            return int(n)
        return self.rng.binomialvariate(int(n), float(p))

    def get_state(self) -> Any:
        return self.rng.getstate()

    def set_state(self, state: Any) -> None:
        self.rng.setstate(state)


def unique_integers(n: int, begin: int, end: int, rng: random.Random) -> list[int]:
    """``n`` distinct integers in ``[begin, end)``, ascending.

    If the range holds fewer than ``n`` integers the whole range is returned.
    """
    if end <= begin:
        return []
    n = min(int(n), end - begin)
    return sorted(rng.sample(range(begin, end), n))


def pick_unique_pair(items: Sequence[Any], rng: random.Random) -> tuple[Any, Any]:
    """Two elements at distinct positions of ``items``, chosen uniformly."""
    if len(items) < 2:
        raise ValueError("pick_unique_pair needs at least two elements")
    first, second = rng.sample(range(len(items)), 2)
    return items[first], items[second]


__all__ = ["RNGManager", "unique_integers", "pick_unique_pair"]
