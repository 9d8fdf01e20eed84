import random

import numpy as np
import pytest

from fres.data.data_matrix import DataMatrix
from fres.utils.validation import ValidationError

CSV = """PlantHeight,PlantFlowerWidth,Interaction
0.1,0.5,0
0.4,0.42923,1
0.9,0.2,1
0.3,0.8,0
"""


def test_from_text():
    d = DataMatrix.from_text(CSV)
    assert d.ncols() == 3
    assert d.nrows() == 4
    assert d.input_name(1) == "PlantFlowerWidth"
    assert d.output_name() == "Interaction"
    assert d.value(1, 1) == pytest.approx(0.42923)
    assert d.value(1, "PlantHeight") == pytest.approx(0.4)
    assert d.output(0) == 0
    assert d[2] == ((0.9, 0.2), 1)


def test_from_csv(tmp_path):
    path = tmp_path / "poll.csv"
    path.write_text(CSV, encoding="utf-8")
    d = DataMatrix.from_csv(path)
    assert d.nrows() == 4
    assert list(d.outputs()) == [0, 1, 1, 0]


def test_header_only_and_empty_text():
    assert DataMatrix.from_text("a,b,out\n").empty()
    with pytest.raises(ValidationError):
        DataMatrix.from_text("")


def test_add_row_checks_width():
    d = DataMatrix(["a", "b", "out"])
    assert d.add_row([1.0, 2.0], 1)
    assert not d.add_row([1.0], 1)
    assert not d.add_row([1.0, 2.0, 3.0], 1)
    assert d.nrows() == 1


def test_column():
    d = DataMatrix.from_text(CSV)
    assert np.allclose(d.column("PlantHeight"), [0.1, 0.4, 0.9, 0.3])
    assert d.column("missing").size == 0


def test_from_arrays():
    X = np.array([[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]])
    y = np.array([0, 1, 0])
    d = DataMatrix.from_arrays(X, y, ["p", "q"], "label")
    assert d.headers() == ["p", "q", "label"]
    assert d[1] == ((2.0, 3.0), 1)
    assert DataMatrix.from_arrays(X, y).input_names() == ["x0", "x1"]
    with pytest.raises(ValidationError):
        DataMatrix.from_arrays(X, y[:2])


def test_split_frame_moves_rows():
    d = DataMatrix(["a", "out"])
    for i in range(20):
        d.add_row([float(i)], i % 2)
    original = list(d)
    test = d.split_frame(0.25, random.Random(0))
    assert test.nrows() == 5
    assert d.nrows() == 15
    assert test.headers() == d.headers()
    assert sorted(list(d) + list(test)) == sorted(original)
    assert not set(d) & set(test)


def test_split_frame_is_reproducible():
    def build():
        d = DataMatrix(["a", "out"])
        for i in range(30):
            d.add_row([float(i)], 0)
        return d

    a, b = build(), build()
    assert list(a.split_frame(0.1, random.Random(8))) == list(b.split_frame(0.1, random.Random(8)))
