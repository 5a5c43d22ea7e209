"""List monad for non-deterministic steps.

A stage maps one value to zero or more values. :func:`bind` applies a stage to
every element of a sequence and flattens the results one level, keeping the
order of the input and, within each element, the order the stage produced.
"""

from __future__ import annotations

import string
from itertools import chain
from typing import Any, Callable, Iterable

from .typing import Fn, MultiStep
from .utils.functional import foreach, negate


def unit(value: Any) -> list:
    """Lift ``value`` into a singleton list."""

    return [value]


def bind(step: MultiStep) -> Callable[[Iterable[Any]], list]:
    """Turn ``step`` into a function from a sequence of values to a flat list."""

    def _inner(values: Iterable[Any]) -> list:
        return list(chain.from_iterable(foreach(values, step)))

    return _inner


def lift(fn: Fn) -> MultiStep:
    """Wrap a plain function as a stage with exactly one output."""

    def _inner(value: Any) -> list:
        return [fn(value)]

    return _inner


def compose_multi(*steps: MultiStep) -> Callable[[Any], list]:
    """Compose multi-value stages from right to left.

    The output is every branch flattened in depth-first, left-to-right order.
    """

    def _inner(initial: Any) -> list:
        accumulator = unit(initial)
        for step in reversed(steps):
            accumulator = bind(step)(accumulator)
        return accumulator

    return _inner


def _is_not_digit(char: str) -> bool:
    return char not in string.digits


def digit_list(number: Any) -> list[int]:
    """Return the base-10 digits of ``number``, skipping sign and other characters."""

    return [int(char) for char in filter(negate(_is_not_digit), str(number))]


def first_three_multiples(x: Any) -> list:
    return [x, x * 2, x * 3]


__all__ = [
    "unit",
    "bind",
    "lift",
    "compose_multi",
    "digit_list",
    "first_three_multiples",
]
