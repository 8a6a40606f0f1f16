from __future__ import annotations

import asyncio
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable

from .._arguments import Arguments
from ..handlers import ErrorHandler, log_error
from ._base import DeferredDecorator


@dataclass
class _DebounceState:
    handle: asyncio.TimerHandle | None = None


@dataclass(frozen=True)
class debounce(DeferredDecorator):
    """Call the function only when the calls stop coming for the given interval.

    Every call cancels the previously scheduled one and schedules the function
    to be called after the interval with the new arguments. So, a burst of calls
    collapses into a single call with the arguments of the last call (the trailing edge).

    The decorated function returns None right away, the result of the actual
    call is discarded.

    ::

        @decorum.decorated('debounce', 2)
        async def autosave(document: Document) -> None:
            await storage.save(document)

    Must be called from inside of a running event loop.

    Args:
        interval: how long (in seconds) to wait for the next call.
        on_error: the callback to report exceptions of the deferred call.
    """
    interval: float
    on_error: ErrorHandler = log_error

    def __post_init__(self) -> None:
        assert isinstance(self.interval, (int, float)), 'interval must be a number'
        assert self.interval >= 0

    def __call__(self, func: Callable[..., Any], arguments: Arguments) -> None:
        state = self._state
        if state.handle is not None:
            state.handle.cancel()
        loop = asyncio.get_running_loop()
        state.handle = loop.call_later(self.interval, self._fire, func, arguments)

    @property
    def pending(self) -> bool:
        """True if there is a call scheduled.
        """
        return self._state.handle is not None

    def cancel(self) -> None:
        """Cancel the scheduled call and the started coroutines.
        """
        state = self._state
        if state.handle is not None:
            state.handle.cancel()
            state.handle = None
        super().cancel()

    @cached_property
    def _state(self) -> _DebounceState:
        return _DebounceState()

    def _fire(self, func: Callable[..., Any], arguments: Arguments) -> None:
        self._state.handle = None
        self._run(func, arguments)
