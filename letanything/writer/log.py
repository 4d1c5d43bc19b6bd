"""
Log - entries written by a WriterResult computation
===================================================
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](tuple[A, ...]):
    """
    Immutable, ordered record of what a computation wrote.

    ``Log()`` is empty and ``+`` concatenates, so logs of sequenced steps
    join in the order the steps ran. Nothing mutates a Log in place.
    """

    __slots__ = ()

    def __new__(cls, entries: Iterable[A] = (), /) -> Log[A]:
        return super().__new__(cls, entries)

    def written(self, *entries: A) -> Log[A]:
        """Log with ``entries`` written after the current ones."""
        return Log((*self, *entries))

    def __add__(self, other: tuple[A, ...], /) -> Log[A]:  # type: ignore[override]
        return Log((*self, *other))

    def __repr__(self) -> str:
        return f"Log({list(self)!r})"


__all__ = ("Log",)
