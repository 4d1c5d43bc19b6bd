"""
LazyCoroResult binding
======================

Sequencer for ``kungfu.LazyCoroResult``.

The sequencer itself stays synchronous: it only builds a chain of lazy
steps. The generator advances when the returned LazyCoroResult is awaited,
one ``yield`` per resolved step.

    @let_lazy.lifted
    def profile(user_id: int):
        user = yield fetch_user(user_id)
        avatar = yield fetch_avatar(user.avatar_id)
        return Ok(Profile(user, avatar))

    result = await profile(42)

NOTE: Each await resumes the same generator. Awaiting one LazyCoroResult
      twice continues from where the first await left it, it does not
      restart the computation. Call the lifted function again instead.
"""

from __future__ import annotations

import logging
import typing
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import ContinuationTypeError
from .._types import Continuation
from ..core import LetConfig, Sequencer, let_anything

log = logging.getLogger(__name__)


def _bind_lazy(
    value: LazyCoroResult[typing.Any, typing.Any],
    continuation: Continuation[LazyCoroResult[typing.Any, typing.Any]],
) -> LazyCoroResult[typing.Any, typing.Any]:
    async def run() -> Result[typing.Any, typing.Any]:
        match await value:
            case Ok(payload):
                following: typing.Any = continuation(payload)
                # Final step may hand back an already computed Result
                if isinstance(following, (Ok, Error)):
                    return following
                if not isinstance(following, LazyCoroResult):
                    raise ContinuationTypeError(following, "LazyCoroResult | Result")
                return await following
            case Error(err):
                log.debug("Short-circuit on error: %r", err)
                return Error(err)
            case _ as unreachable:
                assert_never(unreachable)

    return LazyCoroResult(run)


let_lazy: Sequencer[LazyCoroResult[typing.Any, typing.Any]] = let_anything(LetConfig(let_=_bind_lazy))


__all__ = ("let_lazy",)
