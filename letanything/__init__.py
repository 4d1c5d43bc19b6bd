"""
letanything - sequential ``let`` syntax for any monad.

A generator yields wrapped values, a user-supplied bind (``let_``) unwraps
them and resumes the generator with the payload:

    from kungfu import Error, Ok
    from letanything import let_result

    def checkout():
        cart = yield load_cart(7)          # Result[Cart, E] -> Cart
        paid = yield charge(cart.total)    # Result[Receipt, E] -> Receipt
        return Ok(paid.id)

    let_result(checkout)  # Ok(...) or the first Error

Architecture:
- Core (let_anything + LetConfig) works with any monad via a bind function
- Bindings for kungfu types (let_result, let_option, let_lazy)
- Writer (WriterResult + Log, sequenced with let_writer)
"""

# Core types
from ._types import Bind, Computation, ComputationFactory, Continuation

# Internal helpers (for custom monads)
from . import _helpers

# Core
from .core import LetConfig, Sequencer, let_anything, run_let

# Bindings
from . import bindings
from .bindings import let_lazy, let_option, let_result, let_writer, short_circuitM

# Writer
from . import writer
from .writer import Log, WriterResult, tell, writer_error, writer_ok

# Errors
from ._errors import ContinuationTypeError

__all__ = (
    # Types
    "Bind",
    "Computation",
    "ComputationFactory",
    "Continuation",
    # Internal helpers (for custom monads)
    "_helpers",
    # Core
    "LetConfig",
    "Sequencer",
    "let_anything",
    "run_let",
    # Bindings
    "bindings",
    "let_lazy",
    "let_option",
    "let_result",
    "let_writer",
    "short_circuitM",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    "tell",
    "writer_error",
    "writer_ok",
    # Errors
    "ContinuationTypeError",
)
