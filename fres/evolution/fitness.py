"""Fitness functions and stop criteria."""

from __future__ import annotations

from typing import Any, Callable

from fres.classifier.classifier import FuzzyClassifier


def make_tss_fitness(category: int = 1, alpha: float = 0.0005) -> Callable[[FuzzyClassifier, Any], float]:
    """Fitness = TSS of ``category`` on the training rows - ``alpha`` * complexity."""

    def fitness(classifier: FuzzyClassifier, training: Any) -> float:
        return classifier.evaluate_all(training).tss(category) - alpha * classifier.complexity()

    return fitness


def never_stop(score: float) -> bool:
    return False


def stop_at(threshold: float) -> Callable[[float], bool]:
    """Stop as soon as the best score of a generation reaches ``threshold``."""

    def stop(score: float) -> bool:
        return score >= threshold

    return stop


__all__ = ["make_tss_fitness", "never_stop", "stop_at"]
