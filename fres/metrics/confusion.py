"""Multi-class confusion matrix.

Rows are predicted categories, columns observed ones::

                 observed 0   observed 1   observed 2
    predicted 0  (0, 0)       (0, 1)       (0, 2)
    predicted 1  (1, 0)       (1, 1)       (1, 2)
    predicted 2  (2, 0)       (2, 1)       (2, 2)
"""

from __future__ import annotations

import numpy as np


class ConfusionMatrix:
    def __init__(self, dim: int) -> None:
        self._m = np.zeros((int(dim), int(dim)), dtype=np.int64)
        self._count = 0

    @classmethod
    def from_predictions(cls, dim: int, predicted, observed) -> "ConfusionMatrix":
        """Fold paired predicted/observed category arrays into a matrix."""
        cm = cls(dim)
        predicted = np.asarray(predicted, dtype=np.int64)
        observed = np.asarray(observed, dtype=np.int64)
        np.add.at(cm._m, (predicted, observed), 1)
        cm._count = int(predicted.size)
        return cm

    def empty(self) -> bool:
        return self._count == 0

    def count(self) -> int:
        return self._count

    def dim(self) -> int:
        return self._m.shape[0]

    def as_array(self) -> np.ndarray:
        return self._m.copy()

    def __call__(self, predicted: int, observed: int) -> int:
        return int(self._m[predicted, observed])

    def add_count(self, predicted: int, observed: int, add: int = 1) -> None:
        self._m[predicted, observed] += add
        self._count += add

    def sub_count(self, predicted: int, observed: int, sub: int = 1) -> None:
        """Remove up to ``sub`` counts from a cell; the cell never goes below zero."""
        removed = min(int(self._m[predicted, observed]), sub)
        self._m[predicted, observed] -= removed
        self._count -= removed

    def true_positives(self, c: int) -> int:
        return int(self._m[c, c])

    def false_positives(self, c: int) -> int:
        return int(self._m[c, :].sum() - self._m[c, c])

    def false_negatives(self, c: int) -> int:
        return int(self._m[:, c].sum() - self._m[c, c])

    def true_negatives(self, c: int) -> int:
        return self._count - (self.false_positives(c) + self.false_negatives(c) + self.true_positives(c))

    def accuracy(self) -> float:
        if not self._count:
            return 0.0
        return float(np.trace(self._m)) / self._count

    def class_accuracy(self, c: int) -> float:
        if not self._count:
            return 0.0
        return (self.true_positives(c) + self.true_negatives(c)) / self._count

    def tss(self, c: int) -> float:
        """True skill statistic of category ``c`` (0.0 when undefined)."""
        tp = self.true_positives(c)
        tn = self.true_negatives(c)
        fp = self.false_positives(c)
        fn = self.false_negatives(c)
        denominator = (tp + fn) * (fp + tn)
        if denominator == 0:
            return 0.0
        return (tp * tn - fp * fn) / denominator

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfusionMatrix):
            return NotImplemented
        return self._count == other._count and np.array_equal(self._m, other._m)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ConfusionMatrix(dim={self.dim()}, count={self._count}, cells={self._m.tolist()})"


__all__ = ["ConfusionMatrix"]
