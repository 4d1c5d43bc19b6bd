"""
Ready-made sequencers for common monads.

- let_result  - kungfu.Result, stops at first Error
- let_option  - kungfu.Option, stops at first Nothing
- let_lazy    - kungfu.LazyCoroResult, async and lazy
- let_writer  - WriterResult, accumulates logs

For custom monads build a bind with ``short_circuitM`` (or write ``let_`` by
hand) and pass it to ``let_anything``.
"""

from .lazy import let_lazy
from .option import let_option
from .result import let_result, short_circuitM
from .writer import let_writer

__all__ = (
    "let_lazy",
    "let_option",
    "let_result",
    "let_writer",
    "short_circuitM",
)
