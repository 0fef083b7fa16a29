"""Tests for measurement random sources."""

import pytest

from tiny_qubit import (
    NumpyRandomSource,
    RandomSource,
    RandomSourceExhausted,
    SequenceRandomSource,
)


def test_numpy_source_in_unit_interval():
    source = NumpyRandomSource(seed=0)
    draws = [source.uniform() for _ in range(1000)]
    assert all(0.0 <= r < 1.0 for r in draws)
    assert all(isinstance(r, float) for r in draws)


def test_numpy_source_seed_reproducible():
    a = NumpyRandomSource(seed=42)
    b = NumpyRandomSource(seed=42)
    assert [a.uniform() for _ in range(10)] == [b.uniform() for _ in range(10)]


def test_numpy_source_different_seeds_differ():
    a = NumpyRandomSource(seed=1)
    b = NumpyRandomSource(seed=2)
    assert [a.uniform() for _ in range(5)] != [b.uniform() for _ in range(5)]


def test_sequence_source_replays_in_order():
    source = SequenceRandomSource([0.1, 0.2, 0.3])
    assert [source.uniform() for _ in range(3)] == [0.1, 0.2, 0.3]
    assert source.remaining == 0


def test_sequence_source_exhausted():
    source = SequenceRandomSource([0.5])
    source.uniform()
    with pytest.raises(RandomSourceExhausted):
        source.uniform()


@pytest.mark.parametrize("draw", [-0.1, 1.0, 1.5])
def test_sequence_source_rejects_out_of_range(draw):
    with pytest.raises(ValueError):
        SequenceRandomSource([0.2, draw])


def test_sources_satisfy_protocol():
    assert isinstance(NumpyRandomSource(), RandomSource)
    assert isinstance(SequenceRandomSource([]), RandomSource)


def test_any_object_with_uniform_works():
    from tiny_qubit import Qubit

    class Fixed:
        def uniform(self):
            return 0.99

    assert Qubit.basis(0).measure(Fixed()).outcome == 0
