from __future__ import annotations

from typing import TYPE_CHECKING, Protocol


if TYPE_CHECKING:
    from .._context import ErrorContext


class ErrorHandler(Protocol):
    """Callback receiving errors of functions executed by asynchronous decorators.

    The handler is called from the event loop callback, so it must be fast
    and it must not block. If the handler itself fails, the exception is
    propagated into the event loop exception handler.
    """
    def __call__(self, ctx: ErrorContext) -> None:
        raise NotImplementedError
