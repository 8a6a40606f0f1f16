from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, TypeVar

from .._arguments import Arguments
from .._helpers import get_name
from ._base import Decorator


DEFAULT_LOGGER = logging.getLogger(__package__)
R = TypeVar('R')


@dataclass
class _ThrottleState:
    handle: asyncio.TimerHandle | None = None


@dataclass(frozen=True)
class throttle(Decorator):
    """Call the function at most once per time interval, drop the rest.

    The first call (the leading edge) is executed right away and opens the window.
    All calls made while the window is open are dropped: the function is not called
    and the decorated function returns None. When the interval passes,
    the next call opens a new window.

    ::

        on_scroll = decorum.decorate(redraw, decorum.decorators.throttle(.1))

    Must be called from inside of a running event loop.

    Args:
        interval: duration of the window (in seconds). If zero or negative,
            nothing is ever dropped.
    """
    interval: float

    def __post_init__(self) -> None:
        assert isinstance(self.interval, (int, float)), 'interval must be a number'

    def __call__(self, func: Callable[..., R], arguments: Arguments) -> R | None:
        state = self._state
        if state.handle is not None:
            DEFAULT_LOGGER.debug('throttled call dropped', extra={
                'func': get_name(func),
                'interval': self.interval,
            })
            return None
        if self.interval > 0:
            loop = asyncio.get_running_loop()
            state.handle = loop.call_later(self.interval, self._release)
        return arguments.apply(func)

    @property
    def active(self) -> bool:
        """True if the window is open and calls are being dropped.
        """
        return self._state.handle is not None

    @cached_property
    def _state(self) -> _ThrottleState:
        return _ThrottleState()

    def _release(self) -> None:
        self._state.handle = None

