from __future__ import annotations

import asyncio
from collections import deque
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable

from .._arguments import Arguments
from ..handlers import ErrorHandler, log_error
from ._base import DeferredDecorator


@dataclass
class _QueueState:
    calls: deque[Arguments] = field(default_factory=deque)
    handle: asyncio.Handle | None = None
    # True from the first call until the queue is drained
    draining: bool = False
    # incremented on cancel to ignore callbacks of the cancelled cycle
    cycle: int = 0


@dataclass(frozen=True)
class queue(DeferredDecorator):
    """Call the function for every call, one call per interval, in the order of calls.

    Calls are put into a FIFO queue and replayed one by one with the given interval
    between them. Nothing is dropped, reordered, or merged. If the function is async,
    the next call starts not earlier than the interval after the previous one finished.

    The decorated function returns None right away, the results
    of the actual calls are discarded.

    ::

        @decorum.decorated('queue', 1.1)
        async def send_sms(phone: str, text: str) -> None:
            ...

    Must be called from inside of a running event loop.

    Args:
        interval: the delay (in seconds) between calls.
        immediate: if False (default), even the first call of a burst waits
            for the interval. If True, the first call is executed on the next
            iteration of the event loop and the interval is only kept between the calls.
        on_error: the callback to report exceptions of deferred calls.
            An exception in one call does not stop the rest of the queue.
    """
    interval: float
    immediate: bool = False
    on_error: ErrorHandler = log_error

    def __post_init__(self) -> None:
        assert isinstance(self.interval, (int, float)), 'interval must be a number'
        assert self.interval >= 0

    def __call__(self, func: Callable[..., Any], arguments: Arguments) -> None:
        state = self._state
        state.calls.append(arguments)
        if state.draining:
            return
        state.draining = True
        if self.immediate:
            # run on the next loop iteration, not inside the caller
            loop = asyncio.get_running_loop()
            state.handle = loop.call_soon(self._tick, func)
        else:
            self._arm(func)

    @property
    def pending(self) -> int:
        """How many calls are waiting in the queue.
        """
        return len(self._state.calls)

    def cancel(self) -> None:
        """Drop all queued calls and stop the drain cycle.

        Coroutines already started are cancelled as well.
        """
        state = self._state
        state.calls.clear()
        if state.handle is not None:
            state.handle.cancel()
            state.handle = None
        state.draining = False
        state.cycle += 1
        super().cancel()

    @cached_property
    def _state(self) -> _QueueState:
        return _QueueState()

    def _arm(self, func: Callable[..., Any]) -> None:
        loop = asyncio.get_running_loop()
        self._state.handle = loop.call_later(self.interval, self._tick, func)

    def _tick(self, func: Callable[..., Any]) -> None:
        state = self._state
        state.handle = None
        if state.calls:
            self._step(func)
        else:
            state.draining = False

    def _step(self, func: Callable[..., Any]) -> None:
        """Run the oldest queued call and schedule the next tick when it is done.
        """
        state = self._state
        cycle = state.cycle
        arguments = state.calls.popleft()
        task = None
        try:
            task = self._run(func, arguments)
        finally:
            if task is None:
                self._next(func, cycle)
            else:
                task.add_done_callback(lambda _: self._next(func, cycle))

    def _next(self, func: Callable[..., Any], cycle: int) -> None:
        state = self._state
        if not state.draining or state.cycle != cycle:
            return
        # in the immediate mode, keep the interval after the last call too
        if state.calls or self.immediate:
            self._arm(func)
        else:
            state.draining = False
