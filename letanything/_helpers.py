"""Internal helpers for letanything.

Not part of the public API, but handy when writing binds for custom monads."""

from __future__ import annotations

from kungfu import Result

from .writer import WriterResult


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


# Extract functions (wrapped value -> Result[T, E])
def extract_writer_result[T, E, W](wr: WriterResult[T, E, W]) -> Result[T, E]:
    """
    Extract Result from WriterResult.

    Lets ``short_circuitM`` sequence WriterResult when the logs can be dropped.
    """
    return wr.result


__all__ = (
    "identity",
    "extract_writer_result",
)
