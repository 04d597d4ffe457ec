import pytest

from utils.fixpoint import iterate_to_fixpoint


def test_stops_at_first_repeated_value():
    assert list(iterate_to_fixpoint(lambda x: min(x + 1, 3), 0)) == [1, 2, 3, 3]


def test_immediate_fixpoint():
    assert list(iterate_to_fixpoint(lambda x: x, "a")) == ["a"]


def test_too_many_iterations():
    with pytest.raises(RuntimeError):
        list(iterate_to_fixpoint(lambda x: x + 1, 0, max_iterations=10))


def test_bound_counts_the_confirming_iteration():
    assert list(iterate_to_fixpoint(lambda x: min(x + 1, 2), 0, 3)) == [1, 2, 2]
    with pytest.raises(RuntimeError):
        list(iterate_to_fixpoint(lambda x: min(x + 1, 2), 0, 2))
