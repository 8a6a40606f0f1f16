"""Error handlers for decorators that run the function later.

When :class:`decorum.decorators.debounce` or :class:`decorum.decorators.queue`
finally call the function, the original caller is already gone. So, if the function
fails, the exception is passed into the ``on_error`` handler of the decorator.
By default, it is :func:`decorum.handlers.log_error`.

::

    report = decorum.handlers.SentryHandler()
    save = decorum.decorate(save, decorum.decorators.debounce(2, on_error=report))

"""
from ._base import ErrorHandler
from ._handlers import ignore_error, log_error
from ._integrations import PrometheusHandler, SentryHandler, StatsdHandler


__all__ = [
    'ErrorHandler',

    # functions
    'ignore_error',
    'log_error',

    # integrations
    'PrometheusHandler',
    'SentryHandler',
    'StatsdHandler',
]
