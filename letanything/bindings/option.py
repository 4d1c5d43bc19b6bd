"""
Option binding
==============

Sequencer for ``kungfu.Option``: ``Some(x)`` continues with ``x``, ``Nothing``
ends the computation with ``Nothing``.
"""

from __future__ import annotations

import logging
import typing

from kungfu import Option, Some

from .._types import Continuation
from ..core import LetConfig, Sequencer, let_anything

log = logging.getLogger(__name__)


def _bind_option(value: Option[typing.Any], continuation: Continuation[Option[typing.Any]]) -> Option[typing.Any]:
    match value:
        case Some(payload):
            return continuation(payload)
        case _:
            log.debug("Short-circuit on empty option: %r", value)
            return value


let_option: Sequencer[Option[typing.Any]] = let_anything(LetConfig(let_=_bind_option))


__all__ = ("let_option",)
