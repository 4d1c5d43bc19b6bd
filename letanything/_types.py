"""
Core type definitions for letanything.

Aliases shared by the sequencer and the bindings.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Generator

# ============================================================================
# Type aliases
# ============================================================================

# Continuation = resumes the computation with an unwrapped payload
type Continuation[W] = Callable[[typing.Any], W]

# Bind = decides whether (and how often) to call the continuation
type Bind[W] = Callable[[W, Continuation[W]], W]

# Computation = generator yielding wrapped values, returning the final result
# NOTE: W (yielded) and R (returned) are independent on purpose:
#       a computation may yield Result[int, E] and finish with Result[str, E].
type Computation[W, R] = Generator[W, typing.Any, R]

# ComputationFactory = zero-arg callable producing a fresh computation
type ComputationFactory[W, R] = Callable[[], Computation[W, R]]

__all__ = (
    "Continuation",
    "Bind",
    "Computation",
    "ComputationFactory",
)
