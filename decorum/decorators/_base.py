from __future__ import annotations

import inspect
from functools import cached_property
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from .._context import ErrorContext
from .._helpers import get_name
from .._tasks import Tasks


if TYPE_CHECKING:
    import asyncio

    from .._arguments import Arguments
    from ..handlers import ErrorHandler


class Decorator:
    """Decorators decide whether, when, and how the decorated function is called.

    A decorator is called on every call of the decorated function with the original
    function and the call arguments. It may call the function right away,
    later, or not at all. The decorator instance keeps its state between calls,
    so create a new instance for every function you decorate.

    Any callable with the same signature can be used as a decorator, subclassing
    is not required::

        def double(func, arguments):
            return arguments.apply(func) * 2

        twice = decorum.decorate(len, double)

    """
    __slots__ = ()

    def __call__(self, func: Callable[..., Any], arguments: Arguments) -> Any:
        raise NotImplementedError


class DeferredDecorator(Decorator):
    """Base class for decorators that call the function after the caller returned.

    The return value of such calls is discarded and the exceptions are passed
    into ``on_error``. If the function returns a coroutine, it is scheduled
    as a task.
    """
    on_error: ErrorHandler

    def cancel(self) -> None:
        """Cancel all deferred calls that haven't finished yet.
        """
        self._tasks.cancel()

    async def wait(self) -> None:
        """Wait for all started coroutines to finish.

        It does not wait for calls that are scheduled but not started yet.
        """
        await self._tasks.wait()

    @cached_property
    def _tasks(self) -> Tasks:
        return Tasks(type(self).__name__)

    def _run(self, func: Callable[..., Any], arguments: Arguments) -> asyncio.Task | None:
        """Call the function, report errors, schedule the returned coroutine.

        Returns the task if the function returned an awaitable.
        """
        try:
            result = arguments.apply(func)
        except Exception as exc:
            self._report(func, arguments, exc)
            return None
        if inspect.isawaitable(result):
            coro = self._await(result, func, arguments)
            return self._tasks.start(coro, name=get_name(func))
        return None

    async def _await(
        self,
        awaitable: Awaitable[Any],
        func: Callable[..., Any],
        arguments: Arguments,
    ) -> None:
        try:
            await awaitable
        except Exception as exc:
            self._report(func, arguments, exc)

    def _report(
        self,
        func: Callable[..., Any],
        arguments: Arguments,
        exc: Exception,
    ) -> None:
        ctx = ErrorContext(
            decorator=self,
            func=func,
            arguments=arguments,
            exception=exc,
        )
        self.on_error(ctx)
