"""Row-based labeled data for supervised rule search.

Each row is a pair ``(inputs, category)``: a tuple of floats and an integer
category id. Headers name the input columns followed by the output column.
"""

from __future__ import annotations

import io
import random
from pathlib import Path
from typing import Any, Iterator, Sequence

import numpy as np

from fres.utils.rng_manager import unique_integers
from fres.utils.validation import ValidationError

Row = tuple[tuple[float, ...], int]


class DataMatrix:
    """Rows of numeric inputs with one integer output each.

    Args:
        headers: Input column names followed by the output column name
    """

    def __init__(self, headers: Sequence[str]) -> None:
        if not headers:
            raise ValidationError("invalid_headers", "A data matrix needs at least an output column")
        self._headers = [str(h) for h in headers]
        self._index = {h: i for i, h in enumerate(self._headers[:-1])}
        self._rows: list[Row] = []

    # ---- loading ------------------------------------------------------

    @classmethod
    def from_text(cls, text: str, delimiter: str = ",") -> "DataMatrix":
        """Parse delimited text whose first line is the header and last column the category."""
        lines = [line for line in text.splitlines() if line.strip()]
        if not lines:
            raise ValidationError("empty_data", "No header line found")
        headers = [h.strip() for h in lines[0].split(delimiter)]
        dm = cls(headers)
        if len(lines) == 1:
            return dm
        values = np.loadtxt(io.StringIO("\n".join(lines[1:])), delimiter=delimiter, ndmin=2)
        if values.shape[1] != len(headers):
            raise ValidationError(
                "width_mismatch", "Row width differs from the header", headers=len(headers), columns=values.shape[1]
            )
        for row in values:
            dm.add_row(row[:-1], int(row[-1]))
        return dm

    @classmethod
    def from_csv(cls, path: str | Path, delimiter: str = ",") -> "DataMatrix":
        return cls.from_text(Path(path).read_text(encoding="utf-8"), delimiter=delimiter)

    @classmethod
    def from_arrays(
        cls,
        X: Any,
        y: Any,
        input_names: Sequence[str] | None = None,
        output_name: str = "category",
    ) -> "DataMatrix":
        """Build from a 2-D input array and a 1-D integer category array."""
        X = np.asarray(X, dtype=float)
        y = np.asarray(y).astype(int)
        if X.ndim != 2 or y.ndim != 1 or X.shape[0] != y.shape[0]:
            raise ValidationError("invalid_arrays", "Expected X of shape (n, k) and y of shape (n,)", X=X.shape, y=y.shape)
        if input_names is None:
            input_names = [f"x{i}" for i in range(X.shape[1])]
        dm = cls([*input_names, output_name])
        for inputs, category in zip(X, y):
            dm.add_row(inputs, int(category))
        return dm

    # ---- shape --------------------------------------------------------

    def add_row(self, inputs: Sequence[float], category: int) -> bool:
        """Append a row; returns False (and adds nothing) if its width is wrong."""
        if len(inputs) + 1 != len(self._headers):
            return False
        self._rows.append((tuple(float(v) for v in inputs), int(category)))
        return True

    def nrows(self) -> int:
        return len(self._rows)

    def ncols(self) -> int:
        """Number of columns, counting the output."""
        return len(self._headers)

    def empty(self) -> bool:
        return not self._rows

    def headers(self) -> list[str]:
        return list(self._headers)

    def input_names(self) -> list[str]:
        return self._headers[:-1]

    def input_name(self, i: int) -> str:
        return self.input_names()[i]

    def output_name(self) -> str:
        return self._headers[-1]

    # ---- access -------------------------------------------------------

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __getitem__(self, i: int) -> Row:
        return self._rows[i]

    def value(self, row: int, col: int | str) -> float:
        if isinstance(col, str):
            col = self._index[col]
        return self._rows[row][0][col]

    def output(self, row: int) -> int:
        return self._rows[row][1]

    def column(self, name: str) -> np.ndarray:
        """Values of an input column; empty when the name is unknown."""
        idx = self._index.get(name)
        if idx is None:
            return np.empty(0)
        return np.fromiter((r[0][idx] for r in self._rows), dtype=float, count=len(self._rows))

    def outputs(self) -> np.ndarray:
        return np.fromiter((r[1] for r in self._rows), dtype=np.int64, count=len(self._rows))

    def split_frame(self, prop: float, rng: random.Random) -> "DataMatrix":
        """Move ``int(prop * nrows)`` randomly chosen rows into a new matrix and return it."""
        n = int(prop * len(self._rows))
        picked = unique_integers(n, 0, len(self._rows), rng)
        taken = set(picked)
        other = DataMatrix(self._headers)
        other._rows = [self._rows[i] for i in picked]
        self._rows = [r for i, r in enumerate(self._rows) if i not in taken]
        return other

    def __repr__(self) -> str:
        return f"DataMatrix(headers={self._headers!r}, nrows={len(self._rows)})"


__all__ = ["DataMatrix", "Row"]
