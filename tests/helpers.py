from __future__ import annotations

import asyncio
import re
import socket
import time
from collections import Counter
from contextlib import contextmanager

import decorum


class UDPLogProtocol(asyncio.DatagramProtocol):
    port: int

    def __init__(self, port: int):
        self.hist: list[str] = []
        self.port = port
        super().__init__()

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        self.transport = transport

    def datagram_received(self, data: bytes, addr: tuple) -> None:
        for line in data.decode('utf8').splitlines():
            if line:
                self.hist.append(line)


def get_random_port() -> int:
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def fuzzy_match_counter(items: list[str], rules: list[tuple[str, int]]):
    counter = Counter(items)
    print(counter)
    len_counter = len(counter.most_common())
    len_rules = len(rules)
    assert len_counter == len_rules, f'{len_counter} != {len_rules}'
    for act, exp in zip(counter.most_common(), rules):
        act_val, act_count = act
        exp_val, exp_count = exp
        act_val = act_val.rstrip()
        assert re.fullmatch(exp_val, act_val), f'{repr(act_val)} ~= /{exp_val}/'
        assert act_count == exp_count, f'{act_count} != {exp_count}'


@contextmanager
def duration_between(min_dur: float, max_dur: float):
    start = time.perf_counter()
    yield
    actual_dur = time.perf_counter() - start
    assert min_dur <= actual_dur < max_dur, f'time spent: {actual_dur}'


class Recorder:
    """Function that remembers when and with what arguments it was called.
    """
    def __init__(self, fail_on: set | None = None) -> None:
        self.calls: list = []
        self.times: list[float] = []
        self.fail_on = fail_on or set()

    def __call__(self, value):
        self.calls.append(value)
        self.times.append(time.perf_counter())
        if value in self.fail_on:
            raise ZeroDivisionError(value)
        return value


def passthrough(func, arguments: decorum.types.Arguments):
    return arguments.apply(func)


def multiplier(factor: int):
    def decorator(func, arguments: decorum.types.Arguments):
        return arguments.apply(func) * factor
    return decorator


class Collector:
    """Error handler that keeps all reported contexts.
    """
    def __init__(self) -> None:
        self.errors: list[decorum.types.ErrorContext] = []

    def __call__(self, ctx: decorum.types.ErrorContext) -> None:
        self.errors.append(ctx)
