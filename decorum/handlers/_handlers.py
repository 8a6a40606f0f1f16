from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._base import ErrorHandler


if TYPE_CHECKING:
    from .._context import ErrorContext


logger = logging.getLogger(__package__)


def log_error(ctx: ErrorContext) -> None:
    """Log the exception with traceback using ``logging``.

    This is the default error handler for all asynchronous decorators.
    """
    exc = ctx.exception
    logger.error(
        f'Unhandled {type(exc).__name__} in "{ctx.func_name}" ({ctx.decorator_name})',
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={
            'func': ctx.func_name,
            'decorator': ctx.decorator_name,
            'exc': str(exc),
            'exc_type': type(exc).__name__,
        },
    )


def ignore_error(ctx: ErrorContext) -> None:
    """Silently discard the exception.
    """
    pass


if TYPE_CHECKING:
    _: ErrorHandler
    _ = log_error
    _ = ignore_error
