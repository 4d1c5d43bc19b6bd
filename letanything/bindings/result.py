"""
Result bindings
===============

Generic short-circuit bind with the extract pattern, and its sugar for
``kungfu.Result``.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import ContinuationTypeError
from .._helpers import identity
from .._types import Bind, Continuation
from ..core import LetConfig, Sequencer, let_anything

log = logging.getLogger(__name__)


# ============================================================================
# Generic bind (extract pattern)
# ============================================================================


def short_circuitM[W, T, E](
    *,
    extract: Callable[[W], Result[T, E]],
    expect: type | tuple[type, ...] | None = None,
) -> Bind[W]:
    """
    Generic short-circuit bind.

    Continue with the Ok payload, return the wrapped value itself on Error.

    Args:
        extract: Function to extract Result[T, E] from the wrapped value
        expect: Type(s) the continuation must hand back; None disables the check

    Example (kungfu.Result):
        short_circuitM(extract=identity, expect=(Ok, Error))

    Example (custom monad):
        short_circuitM(extract=lambda resp: resp.result)
    """

    def let_(value: W, continuation: Continuation[W]) -> W:
        match extract(value):
            case Ok(payload):
                following = continuation(payload)
                if expect is not None and not isinstance(following, expect):
                    raise ContinuationTypeError(following, _describe(expect))
                return following
            case Error(err):
                log.debug("Short-circuit on error: %r", err)
                return value
            case _ as unreachable:
                assert_never(unreachable)

    return let_


def _describe(expect: type | tuple[type, ...]) -> str:
    if isinstance(expect, tuple):
        return " | ".join(t.__name__ for t in expect)
    return expect.__name__


# ============================================================================
# Sugar for kungfu.Result
# ============================================================================


let_result: Sequencer[Result[typing.Any, typing.Any]] = let_anything(
    LetConfig(let_=short_circuitM(extract=identity, expect=(Ok, Error)))
)
"""
Sequencer for kungfu.Result: stops at the first Error.

Example:
    def word():
        d = yield Ok("d")
        e = yield Ok("e")
        return Ok(d + e)

    let_result(word)  # Ok("de")
"""


__all__ = (
    "short_circuitM",
    "let_result",
)
