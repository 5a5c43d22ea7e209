"""monadic
=================

Small functional-composition helpers exploring two toy monads: a writer-style
debug pipeline that threads ``(value, message)`` pairs, and a list monad that
models non-deterministic steps. All pipelines apply their stages right to left.
"""

from . import multivalue, writer
from .utils.functional import compose

__all__ = ["compose", "multivalue", "writer"]
