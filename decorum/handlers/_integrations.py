from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from datadog.dogstatsd import DogStatsd
    from prometheus_client import Counter

    from .._context import ErrorContext


try:
    import prometheus_client
except ImportError:
    prometheus_client = None  # type: ignore[assignment]

try:
    import sentry_sdk
except ImportError:
    sentry_sdk = None  # type: ignore[assignment]


@dataclass(frozen=True)
class StatsdHandler:
    """Count failures using Datadog statsd client.

    The metric name is ``decorum.<decorator>.<function>.failed``.

    Requires `datadog <https://github.com/DataDog/datadogpy>`_ package to be installed.
    """
    client: DogStatsd
    prefix: str = 'decorum'

    def __call__(self, ctx: ErrorContext) -> None:
        self.client.increment(
            f'{self.prefix}.{ctx.decorator_name}.{ctx.func_name}.failed',
        )


@lru_cache(maxsize=256)
def _get_prometheus_counter(name: str, descr: str) -> Counter:
    if prometheus_client is None:
        raise ImportError('prometheus-client is not installed')
    return prometheus_client.Counter(
        name=name,
        documentation=descr,
        labelnames=['func', 'decorator'],
    )


@dataclass(frozen=True)
class PrometheusHandler:
    """Count failures in a Prometheus counter.

    The counter is ``decorum_replay_failed`` with labels ``func`` and ``decorator``.

    Requires `prometheus-client <https://github.com/prometheus/client_python>`_
    package to be installed.
    """

    def __call__(self, ctx: ErrorContext) -> None:
        _get_prometheus_counter(
            name='decorum_replay_failed',
            descr='How many times a deferred call failed',
        ).labels(ctx.func_name, ctx.decorator_name).inc()


class SentryHandler:
    """Report failures into Sentry using the official Sentry SDK.

    The report will include tags:

    * func: qualified name of the decorated function.
    * decorator: name of the decorator that ran the function.

    Requires `sentry-sdk <https://github.com/getsentry/sentry-python>`_
    package to be installed.
    """
    __slots__ = ()

    def __init__(self) -> None:
        if sentry_sdk is None:
            raise ImportError('sentry-sdk is not installed')

    def __call__(self, ctx: ErrorContext) -> None:
        assert sentry_sdk is not None, 'sentry-sdk is not installed'
        with sentry_sdk.new_scope() as scope:
            scope.set_tag('func', ctx.func_name)
            scope.set_tag('decorator', ctx.decorator_name)
            scope.set_extra('args', repr(ctx.arguments.args))
            sentry_sdk.capture_exception(ctx.exception)
