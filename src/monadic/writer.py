"""Writer-style debug pipeline.

Each stage maps a plain value to a :class:`DebugPair`. :func:`bind` threads the
value through a stage and appends the stage's message fragment to the running
message, so the final message lists the fragments in the order the stages were
applied.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple

from .typing import DebugStep, Fn


class DebugPair(NamedTuple):
    """A computed value together with the trace that produced it."""

    value: Any
    message: str


def unit(value: Any) -> DebugPair:
    """Lift ``value`` into a pair carrying an empty message."""

    return DebugPair(value, "")


def bind(step: DebugStep) -> Callable[[DebugPair], DebugPair]:
    """Turn ``step`` into a function from pair to pair."""

    def _inner(pair: DebugPair) -> DebugPair:
        previous_value, previous_message = pair
        next_value, next_message = step(previous_value)
        return DebugPair(next_value, previous_message + next_message)

    return _inner


def lift(fn: Fn) -> DebugStep:
    """Wrap a plain function as a silent stage."""

    def _inner(value: Any) -> DebugPair:
        return DebugPair(fn(value), "")

    return _inner


def compose_debug(*steps: DebugStep) -> Callable[[Any], DebugPair]:
    """Compose debug stages from right to left.

    The last stage sees the initial value first; the first stage is applied
    last. Faults raised by a stage propagate to the caller.
    """

    def _inner(initial: Any) -> DebugPair:
        accumulator = unit(initial)
        for step in reversed(steps):
            accumulator = bind(step)(accumulator)
        return accumulator

    return _inner


def add_five(x: Any) -> DebugPair:
    result = x + 5
    return DebugPair(result, f"{x} + 5 = {result}.")


def square(x: Any) -> DebugPair:
    result = x ** 2
    return DebugPair(result, f"{x}^2 = {result}.")


__all__ = [
    "DebugPair",
    "unit",
    "bind",
    "lift",
    "compose_debug",
    "add_five",
    "square",
]
