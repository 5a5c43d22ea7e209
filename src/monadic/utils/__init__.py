"""Utility helpers for the :mod:`monadic` package."""

from .functional import compose, foreach, negate

__all__ = ["compose", "foreach", "negate"]
