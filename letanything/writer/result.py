"""
WriterResult - Result with accumulated log
==========================================

Synchronous counterpart of a Writer monad: a ``kungfu.Result`` travelling
together with the ``Log`` produced while computing it. Sequenced with
``letanything.bindings.let_writer``.
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    Result paired with the log written so far.

    Immutable: ``with_log`` returns a new instance.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: Log[W] | None = None) -> None:
        self._result = result
        self._log: Log[W] = log if log is not None else Log()

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> Log[W]:
        return self._log

    @property
    def is_ok(self) -> bool:
        return isinstance(self._result, Ok)

    def with_log(self, *entries: W) -> WriterResult[T, E, W]:
        """Same result, entries appended to the log."""
        return WriterResult(self._result, self._log.written(*entries))

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={list(self._log)!r})"


# Convenience Constructors
def writer_ok[T, W](value: T, *entries: W) -> WriterResult[T, typing.Never, W]:
    """Ok(value) with optional log entries."""
    return WriterResult(Ok(value), Log(entries))


def writer_error[E, W](error: E, *entries: W) -> WriterResult[typing.Never, E, W]:
    """Error(error) with optional log entries."""
    return WriterResult(Error(error), Log(entries))


def tell[W](*entries: W) -> WriterResult[None, typing.Never, W]:
    """
    Write entries without producing a value.

    Inside a computation: ``yield tell("validated")``.
    """
    return WriterResult(Ok(None), Log(entries))


__all__ = (
    "WriterResult",
    "tell",
    "writer_ok",
    "writer_error",
)
