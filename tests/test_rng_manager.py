import random

import pytest

from fres.utils.rng_manager import RNGManager, pick_unique_pair, unique_integers


def test_same_seed_same_stream():
    a, b = RNGManager(seed=42), RNGManager(seed=42)
    assert [a.rng.random() for _ in range(5)] == [b.rng.random() for _ in range(5)]
    assert a.derive_seed() == b.derive_seed()


def test_context_streams_are_independent_of_master_draws():
    a, b = RNGManager(seed=7), RNGManager(seed=7)
    a.rng.random()
    assert a.get_context_rng("split").random() == b.get_context_rng("split").random()
    assert a.get_context_rng("x") is a.get_context_rng("x")


def test_state_roundtrip():
    m = RNGManager(seed=3)
    state = m.get_state()
    first = [m.rng.random() for _ in range(3)]
    m.set_state(state)
    assert [m.rng.random() for _ in range(3)] == first


def test_binomial_edges_and_range():
    m = RNGManager(seed=1)
    assert m.binomial(0, 0.5) == 0
    assert m.binomial(5, 0.0) == 0
    assert m.binomial(5, 1.0) == 5
    for _ in range(50):
        assert 0 <= m.binomial(6, 0.3) <= 6


def test_unique_integers():
    rng = random.Random(0)
    out = unique_integers(5, 10, 20, rng)
    assert out == sorted(set(out))
    assert len(out) == 5
    assert all(10 <= x < 20 for x in out)
    assert unique_integers(10, 0, 3, rng) == [0, 1, 2]
    assert unique_integers(3, 5, 5, rng) == []


def test_pick_unique_pair():
    rng = random.Random(0)
    for _ in range(50):
        a, b = pick_unique_pair([3, 8, 9], rng)
        assert a != b
        assert a in (3, 8, 9) and b in (3, 8, 9)
    with pytest.raises(ValueError):
        pick_unique_pair([1], rng)
