"""Lightweight functional helpers used across modules."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary callables from right to left.

    ``compose(f, g, h)(x)`` is ``f(g(h(x)))``. With no callables the result is
    the identity.
    """

    def _inner(value: Any) -> Any:
        for fn in reversed(fns):
            value = fn(value)
        return value

    return _inner


def foreach(iterable: Iterable[T], fn: Callable[[T], U]) -> list[U]:
    """Apply ``fn`` to each element and return a list."""

    return [fn(item) for item in iterable]


def negate(predicate: Callable[[T], bool]) -> Callable[[T], bool]:
    """Return a predicate that is true wherever ``predicate`` is false."""

    def _inner(value: T) -> bool:
        return not predicate(value)

    return _inner


__all__ = ["compose", "foreach", "negate"]
