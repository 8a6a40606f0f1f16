from __future__ import annotations

import asyncio

import pytest

import decorum

from .helpers import UDPLogProtocol, get_random_port


@pytest.fixture
async def udp_server():
    port = get_random_port()
    loop = asyncio.get_running_loop()
    transport, protocol = await loop.create_datagram_endpoint(
        lambda: UDPLogProtocol(port),
        local_addr=('127.0.0.1', port),
    )
    yield protocol
    transport.close()


@pytest.fixture
def registry() -> decorum.Decorators:
    return decorum.Decorators.default()
