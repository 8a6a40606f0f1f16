from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Callable

from ._helpers import get_name


if TYPE_CHECKING:
    from ._arguments import Arguments


@dataclass(frozen=True)
class ErrorContext:
    """Context passed into an error handler of an asynchronous decorator.

    Decorators like :class:`decorum.decorators.debounce` and
    :class:`decorum.decorators.queue` run the function later, when the original
    caller is already gone. Errors of such calls are reported to the error handler
    with this context instead.

    Args:
        decorator: the decorator instance that ran the function.
        func: the decorated (base) function.
        arguments: arguments the function was called with.
        exception: the raised exception.
    """
    decorator: object
    func: Callable
    arguments: Arguments
    exception: BaseException

    @cached_property
    def func_name(self) -> str:
        """Qualified name of the decorated function, if it has one.
        """
        return get_name(self.func)

    @cached_property
    def decorator_name(self) -> str:
        """Name of the decorator, like ``debounce`` or ``queue``.

        For decorators that are plain functions, it is the function name.
        """
        return get_name(self.decorator)
