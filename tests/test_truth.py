import itertools

import pytest

from fres.logic.truth import Boolean, Godel, Lukasiewicz, Product, get_logic, resolve_logic
from fres.utils.validation import ValidationError

SAMPLES = [0.0, 0.1, 0.25, 0.5, 0.7, 0.9, 1.0]


@pytest.mark.parametrize("a", SAMPLES)
def test_lukasiewicz_double_negation_and_contradiction(a):
    t = Lukasiewicz(a)
    assert (~~t).value == pytest.approx(a)
    assert t.strong_and(~t).value == pytest.approx(0.0)
    assert t.strong_or(~t).value == pytest.approx(1.0)


def test_lukasiewicz_closed_forms():
    for a, b in itertools.product(SAMPLES, repeat=2):
        x, y = Lukasiewicz(a), Lukasiewicz(b)
        assert x.strong_and(y).value == pytest.approx(max(0.0, a + b - 1.0))
        assert x.weak_and(y).value == pytest.approx(min(a, b))
        assert x.strong_or(y).value == pytest.approx(min(1.0, a + b))
        assert x.weak_or(y).value == pytest.approx(max(a, b))
        assert x.implies(y).value == pytest.approx(min(1.0, 1.0 - a + b))
        assert x.equiv(y).value == pytest.approx(1.0 - abs(a - b))


def test_godel_closed_forms():
    assert (~Godel(0.0)).value == 1.0
    assert (~Godel(0.3)).value == 0.0
    for a, b in itertools.product(SAMPLES, repeat=2):
        x, y = Godel(a), Godel(b)
        assert x.strong_and(y).value == min(a, b)
        assert x.weak_and(y).value == min(a, b)
        assert x.strong_or(y).value == max(a, b)
        assert x.weak_or(y).value == max(a, b)
        assert x.implies(y).value == (b if a > b else 1.0)
        expected = min(b if a > b else 1.0, a if b > a else 1.0)
        assert x.equiv(y).value == expected


def test_product_closed_forms():
    assert (~Product(0.0)).value == 1.0
    assert (~Product(0.5)).value == 0.0
    for a, b in itertools.product(SAMPLES, repeat=2):
        x, y = Product(a), Product(b)
        assert x.strong_and(y).value == pytest.approx(a * b)
        assert x.weak_and(y).value == min(a, b)
        assert x.strong_or(y).value == pytest.approx(a + b - a * b)
        assert x.weak_or(y).value == max(a, b)
        assert x.implies(y).value == pytest.approx(b / a if a > b else 1.0)
        ab = b / a if a > b else 1.0
        ba = a / b if b > a else 1.0
        assert x.equiv(y).value == pytest.approx(ab * ba)


def test_boolean_algebra():
    t, f = Boolean.unit(), Boolean.zero()
    assert t.value is True and f.value is False
    assert Boolean.fuzziness == 0
    assert (~t) == f
    assert t.strong_and(f) == f
    assert t.weak_or(f) == t
    assert f.implies(f) == t
    assert t.implies(f) == f
    assert t.equiv(t) == t
    assert f.equiv(t) == f


def test_operator_sugar_is_lattice():
    a, b = Lukasiewicz(0.3), Lukasiewicz(0.6)
    assert (a & b) == Lukasiewicz(0.3)
    assert (a | b) == Lukasiewicz(0.6)
    assert (~a).value == pytest.approx(0.7)


def test_constants_and_ordering():
    for logic in (Lukasiewicz, Godel, Product):
        assert logic.zero() < logic.unit()
        assert logic.fuzziness == 1
        assert logic.zero().value == 0.0 and logic.unit().value == 1.0


def test_values_are_immutable_and_hashable():
    a = Lukasiewicz(0.4)
    with pytest.raises(AttributeError):
        a.value = 0.5
    assert len({Lukasiewicz(0.4), Lukasiewicz(0.4), Lukasiewicz(0.5)}) == 2


def test_different_logics_never_equal_or_mix():
    assert Lukasiewicz(0.5) != Godel(0.5)
    with pytest.raises(TypeError):
        Lukasiewicz(0.5).strong_and(Godel(0.5))


def test_get_logic_aliases():
    assert get_logic("Łukasiewicz") is Lukasiewicz
    assert get_logic("lukasiewicz") is Lukasiewicz
    assert get_logic("Gödel") is Godel
    assert get_logic("Godel") is Godel
    assert get_logic("Gödel-Dummett") is Godel
    assert get_logic("Product") is Product
    assert get_logic(Product) is Product
    with pytest.raises(ValidationError) as ei:
        get_logic("zadeh")
    assert ei.value.error_type == "unknown_logic"


def test_resolve_logic_falls_back_with_warning(caplog):
    with caplog.at_level("WARNING"):
        assert resolve_logic("zadeh") is Lukasiewicz
    assert "zadeh" in caplog.text
    assert resolve_logic(None) is Lukasiewicz
