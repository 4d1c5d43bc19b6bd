from __future__ import annotations

import typing


class ContinuationTypeError(TypeError):
    """Continuation produced a value the binding cannot combine."""

    received: typing.Any

    def __init__(self, received: typing.Any, expected: str) -> None:
        self.received = received
        super().__init__(
            f"Continuation must return {expected}, received {type(received).__name__}: {received!r}"
        )


__all__ = ("ContinuationTypeError",)
