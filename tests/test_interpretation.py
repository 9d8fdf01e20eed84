import logging

import pytest

from fres.classifier.interpretation import Interpretation
from fres.config import merge_config
from fres.data.data_matrix import DataMatrix
from fres.fuzzy.partition import make_triangles
from fres.logic.truth import Boolean, Godel, Lukasiewicz, Product
from fres.utils.validation import ValidationError


def _interp():
    i = Interpretation(["no", "yes"])
    i.add_triangular_partition("width", 3, 0.0, 2.0)
    i.add_triangular_partition("height", 5, 0.0, 1.0)
    return i


def test_accessors():
    i = _interp()
    assert i.num_inputs() == 2
    assert i.num_categories() == 2
    assert i.num_sets(0) == 3
    assert i.num_sets(1) == 5
    assert i.input_name(1) == "height"
    assert i.category_name(1) == "yes"
    assert i.labels(0) == ["is low", "is average", "is high"]
    assert i.label(1, 0) == "is very low"
    assert i.partition_name(0) == "triangular(n=3, a=0.0, b=2.0)"
    assert len(i.partition(1)) == 5
    assert i.logic is Lukasiewicz


def test_truth_uses_partition_and_logic():
    i = _interp()
    assert i.truth(0, 1, 1.0) == Lukasiewicz(1.0)
    assert i.truth(0, 0, 0.5).value == pytest.approx(0.5)
    assert i.membership(0, 2)(2.0) == Lukasiewicz.unit()


@pytest.mark.parametrize("call", [
    lambda i: i.input_name(2),
    lambda i: i.input_name(-1),
    lambda i: i.category_name(2),
    lambda i: i.num_sets(5),
    lambda i: i.label(0, 3),
    lambda i: i.label(0, -1),
    lambda i: i.membership(1, 5),
    lambda i: i.truth(3, 0, 0.1),
])
def test_invalid_ids_raise_index_error(call):
    with pytest.raises(IndexError):
        call(_interp())


def test_frozen_interpretation_rejects_new_inputs():
    i = _interp()
    assert not i.frozen
    i.freeze()
    assert i.frozen
    with pytest.raises(ValidationError) as ei:
        i.add_triangular_partition("depth", 3, 0.0, 1.0)
    assert ei.value.error_type == "interpretation_frozen"
    assert i.num_inputs() == 2


def test_logic_by_name_and_partition_types():
    i = Interpretation(["a", "b"], logic="Gödel")
    i.add_triangular_partition("x", 2)
    assert i.logic is Godel
    assert isinstance(i.truth(0, 0, 0.3), Godel)


def test_crisp_logic_cannot_build_triangles():
    i = Interpretation(["a", "b"], logic=Boolean)
    with pytest.raises(ValidationError):
        i.add_triangular_partition("x", 3)


def test_custom_partition_needs_matching_labels():
    i = Interpretation(["a", "b"])
    sets = make_triangles(2, 0.0, 1.0, Lukasiewicz.zero(), Lukasiewicz.unit())
    assert i.add_partition("x", sets, ["cold", "hot"], "thermal") == 0
    assert i.partition_name(0) == "thermal"
    with pytest.raises(ValidationError):
        i.add_partition("y", sets, ["only one"])


def test_identity_semantics():
    a, b = _interp(), _interp()
    assert a == a
    assert a != b
    assert len({a, b, a}) == 2


def _table():
    d = DataMatrix(["a", "b", "c", "out"])
    d.add_row([0.0, 2.0, 5.0], 0)
    d.add_row([1.0, 4.0, 5.0], 1)
    return d


def test_from_data_reads_logic_and_nsets():
    i = Interpretation.from_data(_table(), ["no", "yes"], merge_config({"logic": "product", "nsets": 3}), first_nsets=2)
    assert i.logic is Product
    assert i.input_names() == ["a", "b", "c"]
    assert [i.num_sets(v) for v in range(3)] == [2, 3, 3]
    assert i.partition_name(1) == "triangular(n=3, a=2.0, b=4.0)"
    # constant column gets a unit-wide range
    assert i.partition_name(2) == "triangular(n=3, a=5.0, b=6.0)"


def test_from_data_defaults_to_lukasiewicz():
    i = Interpretation.from_data(_table(), ["no", "yes"])
    assert i.logic is Lukasiewicz
    assert i.num_sets(0) == 5


def test_from_data_unknown_logic_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        i = Interpretation.from_data(_table(), ["no", "yes"], {"logic": "quantum"})
    assert i.logic is Lukasiewicz
    assert "quantum" in caplog.text
