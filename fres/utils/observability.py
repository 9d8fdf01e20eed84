"""Evolution observers and determinism signatures.

Observers receive callbacks at fixed trace points of the search loop:

- ``on_mutation(generation, index, count)`` after an individual received its
  mutation count,
- ``on_generation(generation, scores, elites)`` after the population was
  scored and ranked,
- ``on_stop(generation, best_score, reason)`` when the search ends.

Any object providing a subset of these methods can be passed to ``evolve``;
missing hooks are skipped.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Sequence


@dataclass
class GenerationRecord:
    """Statistics of one scored generation."""

    generation: int
    best: float
    mean: float
    worst: float
    elites: list[int] = field(default_factory=list)
    mutations: int = 0


class LoggingObserver:
    """Writes progress through the ``logging`` module.

    Generation summaries are logged every ``every`` generations at INFO,
    per-individual mutation counts at DEBUG.
    """

    def __init__(self, every: int = 1, logger: logging.Logger | None = None) -> None:
        self.every = max(1, int(every))
        self.logger = logger or logging.getLogger("fres.evolution")

    def on_mutation(self, generation: int, index: int, count: int) -> None:
        if count:
            self.logger.debug("gen %d: individual %d received %d mutations", generation, index, count)

    def on_generation(self, generation: int, scores: Sequence[float], elites: Sequence[int]) -> None:
        if generation % self.every:
            return
        self.logger.info(
            "gen %d: best=%.6f mean=%.6f elites=%s",
            generation,
            max(scores),
            sum(scores) / len(scores),
            sorted(elites),
        )

    def on_stop(self, generation: int, best_score: float, reason: str) -> None:
        self.logger.info("search stopped at gen %d (%s), best=%.6f", generation, reason, best_score)


class EvolutionTrace:
    """Records per-generation statistics in memory."""

    def __init__(self) -> None:
        self.records: list[GenerationRecord] = []
        self.stop_reason: str | None = None
        self.stop_generation: int | None = None
        self._pending_mutations = 0

    def on_mutation(self, generation: int, index: int, count: int) -> None:
        self._pending_mutations += count

    def on_generation(self, generation: int, scores: Sequence[float], elites: Sequence[int]) -> None:
        self.records.append(GenerationRecord(
            generation=generation,
            best=max(scores),
            mean=sum(scores) / len(scores),
            worst=min(scores),
            elites=sorted(elites),
            mutations=self._pending_mutations,
        ))
        self._pending_mutations = 0

    def on_stop(self, generation: int, best_score: float, reason: str) -> None:
        self.stop_reason = reason
        self.stop_generation = generation

    def best_scores(self) -> list[float]:
        return [r.best for r in self.records]

    def to_dict(self) -> dict[str, Any]:
        return {
            "records": [asdict(r) for r in self.records],
            "stop_reason": self.stop_reason,
            "stop_generation": self.stop_generation,
        }


class CompositeObserver:
    """Fans every callback out to several observers."""

    def __init__(self, *observers: Any) -> None:
        self.observers = [o for o in observers if o is not None]

    def _dispatch(self, hook: str, *args: Any) -> None:
        for observer in self.observers:
            fn = getattr(observer, hook, None)
            if fn is not None:
                fn(*args)

    def on_mutation(self, generation: int, index: int, count: int) -> None:
        self._dispatch("on_mutation", generation, index, count)

    def on_generation(self, generation: int, scores: Sequence[float], elites: Sequence[int]) -> None:
        self._dispatch("on_generation", generation, scores, elites)

    def on_stop(self, generation: int, best_score: float, reason: str) -> None:
        self._dispatch("on_stop", generation, best_score, reason)


def determinism_signature(trace: EvolutionTrace | dict) -> str:
    """Stable sha256 over the canonical JSON form of a trace."""
    payload = trace.to_dict() if isinstance(trace, EvolutionTrace) else trace
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=repr)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


__all__ = [
    "GenerationRecord",
    "LoggingObserver",
    "EvolutionTrace",
    "CompositeObserver",
    "determinism_signature",
]
