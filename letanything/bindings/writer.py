"""
Writer binding
==============

Sequencer for ``WriterResult``.

- On Ok: continues, current log + continuation log
- On Error: short-circuit, preserves current log
"""

from __future__ import annotations

import logging
import typing
from typing import assert_never

from kungfu import Error, Ok

from .._errors import ContinuationTypeError
from .._types import Continuation
from ..core import LetConfig, Sequencer, let_anything
from ..writer import WriterResult

log = logging.getLogger(__name__)

type _WR = WriterResult[typing.Any, typing.Any, typing.Any]


def _bind_writer(value: _WR, continuation: Continuation[_WR]) -> _WR:
    match value.result:
        case Ok(payload):
            following = continuation(payload)
            if not isinstance(following, WriterResult):
                raise ContinuationTypeError(following, "WriterResult")
            return WriterResult(following.result, value.log + following.log)
        case Error(err):
            log.debug("Short-circuit on error: %r (log: %d entries)", err, len(value.log))
            return value
        case _ as unreachable:
            assert_never(unreachable)


let_writer: Sequencer[_WR] = let_anything(LetConfig(let_=_bind_writer))


__all__ = ("let_writer",)
