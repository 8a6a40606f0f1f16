from __future__ import annotations

import inspect
import logging
import warnings
from dataclasses import dataclass
from functools import cached_property
from time import perf_counter
from typing import Any, Awaitable, Callable

from .._arguments import Arguments
from .._helpers import get_name
from ._base import Decorator


DEFAULT_LOGGER = logging.getLogger(__package__)


@dataclass(frozen=True)
class profile(Decorator):
    """Log how long each call of the function takes.

    The record is written on DEBUG level with ``extra`` fields ``label``, ``func``,
    ``duration`` (in seconds), and ``failed``. For async functions, the time
    spent in ``await`` is included.

    ::

        fetch = decorum.decorate(fetch, 'profile', 'http')

    Args:
        label: a name to distinguish the records. Defaults to the function name.
        logger: logger to write the records into.
    """
    label: str | None = None
    logger: logging.Logger | logging.LoggerAdapter = DEFAULT_LOGGER

    def __call__(self, func: Callable[..., Any], arguments: Arguments) -> Any:
        start = perf_counter()
        try:
            result = arguments.apply(func)
        except BaseException:
            self._log(func, start, failed=True)
            raise
        if inspect.isawaitable(result):
            return self._wrap_awaitable(result, func, start)
        self._log(func, start, failed=False)
        return result

    async def _wrap_awaitable(
        self,
        awaitable: Awaitable[Any],
        func: Callable[..., Any],
        start: float,
    ) -> Any:
        try:
            result = await awaitable
        except BaseException:
            self._log(func, start, failed=True)
            raise
        self._log(func, start, failed=False)
        return result

    def _log(self, func: Callable[..., Any], start: float, failed: bool) -> None:
        name = get_name(func)
        self.logger.debug('call profiled', extra={
            'label': self.label or name,
            'func': name,
            'duration': perf_counter() - start,
            'failed': failed,
        })


@dataclass
class _DeprecateState:
    warned: bool = False


@dataclass(frozen=True)
class deprecate(Decorator):
    """Emit a warning when the deprecated function is called.

    ::

        old_api = decorum.decorate(new_api, 'deprecate', 'use new_api instead')

    Args:
        message: the warning message.
        each_call: warn on every call. By default, the warning is emitted
            only on the first call.
        category: the warning class.
    """
    message: str
    each_call: bool = False
    category: type[Warning] = DeprecationWarning

    def __call__(self, func: Callable[..., Any], arguments: Arguments) -> Any:
        state = self._state
        if self.each_call or not state.warned:
            state.warned = True
            # point to the caller of the decorated function
            warnings.warn(self.message, self.category, stacklevel=3)
        return arguments.apply(func)

    @cached_property
    def _state(self) -> _DeprecateState:
        return _DeprecateState()
