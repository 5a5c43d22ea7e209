"""Shared typing aliases for the monadic package."""

from __future__ import annotations

from typing import Callable, Sequence, Tuple, TypeVar

A = TypeVar("A")
B = TypeVar("B")

Fn = Callable[[A], B]
DebugStep = Callable[[A], Tuple[B, str]]
MultiStep = Callable[[A], Sequence[B]]

__all__ = ["A", "B", "Fn", "DebugStep", "MultiStep"]
