"""Decorators controlling whether, when, and how the decorated function is called.

Pass them into :func:`decorum.decorate` or use by name from the registry.
Timing decorators (throttle, debounce, queue) are stateful, so a new instance
must be created for every decorated function.
"""
from ._base import Decorator, DeferredDecorator
from ._debounce import debounce
from ._hooks import deprecate, profile
from ._queue import queue
from ._strict import strict_arguments, strict_return
from ._throttle import throttle


__all__ = [
    'Decorator',
    'DeferredDecorator',

    # timing
    'debounce',
    'queue',
    'throttle',

    # validation
    'strict_arguments',
    'strict_return',

    # hooks
    'deprecate',
    'profile',
]
