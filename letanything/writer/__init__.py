"""
Writer
======

WriterResult = Result[T, E] + Log[W], sequenced with ``let_writer``:

    @let_writer.lifted
    def register(email: str):
        user = yield writer_ok(User(email), "user built")
        yield tell("welcome mail queued")
        return writer_ok(user.id, "registered")
"""

from .log import Log
from .result import WriterResult, tell, writer_error, writer_ok

__all__ = (
    "Log",
    "WriterResult",
    "tell",
    "writer_ok",
    "writer_error",
)
