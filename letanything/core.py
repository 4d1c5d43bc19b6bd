"""
Sequencer
=========

Drives a generator with a user-supplied bind (``let_``), so that code over any
monad-like type reads like plain sequential ``let`` bindings:

    @let_result.lifted
    def greeting(user_id: int):
        user = yield fetch_user(user_id)      # Result[User, E] -> User
        team = yield fetch_team(user.team_id) # Result[Team, E] -> Team
        return Ok(f"{user.name} @ {team.name}")

Control is inverted: the core never decides whether the computation goes on
past a ``yield``. ``let_`` does, by calling (or not calling) the continuation.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from ._types import Bind, Computation, ComputationFactory


# ============================================================================
# Config
# ============================================================================


@dataclass(frozen=True, slots=True)
class LetConfig[W]:
    """
    Sequencer configuration.

    ``let_(value, continuation)`` receives every yielded wrapped value and
    returns the wrapped result of the rest of the computation, either by
    calling ``continuation(payload)`` or by short-circuiting.
    """

    let_: Bind[W]


# ============================================================================
# Generic driver
# ============================================================================


def run_let[W, R](
    computation: ComputationFactory[W, R],
    *,
    let_: Bind[W],
) -> W | R:
    """
    Run one computation to completion through ``let_``.

    Args:
        computation: Zero-arg callable returning a fresh generator
        let_: Bind function, called once per reached ``yield``

    Returns the value the generator returns, or whatever ``let_`` returned at
    the step where it stopped calling the continuation.

    NOTE: The continuation resumes the generator from wherever it currently
          is. Calling it twice does not replay the original yield point, it
          advances the same generator again.

    NOTE: Every reached yield nests one more compose -> let_ -> compose call,
          so a computation yielding several hundred times can exceed the
          interpreter recursion limit (RecursionError).
    """
    context = computation()

    def compose(payload: typing.Any) -> W | R:
        try:
            yielded = context.send(payload)
        except StopIteration as done:
            return typing.cast(R, done.value)
        return let_(yielded, compose)

    return compose(None)


# ============================================================================
# Sequencer
# ============================================================================


class Sequencer[W]:
    """
    Callable produced by ``let_anything``.

    ``sequencer(factory)`` runs the computation. Every call creates its own
    generator, nothing is shared between runs.
    """

    __slots__ = ("_config",)

    def __init__(self, config: LetConfig[W], /) -> None:
        self._config = config

    @property
    def config(self) -> LetConfig[W]:
        return self._config

    def __call__[R](self, computation: ComputationFactory[W, R], /) -> W | R:
        return run_let(computation, let_=self._config.let_)

    def call[R, **P](
        self,
        func: Callable[P, Computation[W, R]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> W | R:
        """
        Run a generator function with arguments at the call site.

        Example:
            let_result.call(checkout, cart_id=7)
        """
        return self(lambda: func(*args, **kwargs))

    def lifted[R, **P](
        self,
        func: Callable[P, Computation[W, R]],
    ) -> Callable[P, W | R]:
        """
        Decorator: generator function -> function returning the sequenced value.

        Example:
            @let_result.lifted
            def total(order_id: int):
                order = yield load_order(order_id)
                return Ok(sum(line.price for line in order.lines))

            total(42)  # Ok(...) or Error(...)
        """

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> W | R:
            return self(lambda: func(*args, **kwargs))

        return wrapper

    def __repr__(self) -> str:
        return f"Sequencer(let_={self._config.let_!r})"


def let_anything[W](config: LetConfig[W], /) -> Sequencer[W]:
    """
    Build a sequencer for the monad described by ``config``.

    Example:
        let_result = let_anything(LetConfig(
            let_=lambda value, k: k(value.unwrap()) if isinstance(value, Ok) else value,
        ))

        def word():
            d = yield Ok("d")
            e = yield Ok("e")
            return Ok(d + e)

        let_result(word)  # Ok("de")
    """
    return Sequencer(config)


__all__ = (
    "LetConfig",
    "Sequencer",
    "let_anything",
    "run_let",
)
