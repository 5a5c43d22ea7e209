from __future__ import annotations

import pytest

from monadic.utils.functional import compose, foreach, negate


def test_compose_without_functions_is_identity():
    sentinel = object()
    assert compose()(sentinel) is sentinel
    assert compose()(7) == 7


def test_compose_applies_last_function_first():
    def add_one(x):
        return x + 1

    def double(x):
        return x * 2

    assert compose(add_one, double)(5) == add_one(double(5)) == 11
    assert compose(double, add_one)(5) == 12


def test_compose_propagates_stage_errors():
    def boom(_):
        raise ValueError("bad stage")

    with pytest.raises(ValueError, match="bad stage"):
        compose(str, boom)(1)


def test_foreach_preserves_order():
    assert foreach([3, 1, 2], lambda x: x * 10) == [30, 10, 20]
    assert foreach([], str) == []


def test_negate_inverts_predicate():
    is_even = lambda x: x % 2 == 0  # noqa: E731
    is_odd = negate(is_even)
    assert [x for x in range(6) if is_odd(x)] == [1, 3, 5]
