""" Shared test fixtures """

import pytest

from ntpsync.struct.config import Config
from ntpsync.struct.server import Server


class Clock():
    """ A manually advanced local clock in milliseconds. """

    def __init__(self, value: int = 1_000_000):
        self.value = value

    def __call__(self) -> int:
        return self.value


class Provider():
    """ A fake ntp provider answering per host with a remote time or an exception. """

    def __init__(self, answers: dict):
        self.answers = answers
        self.calls = []

    async def __call__(self, host: str, port: int, timeout_ms: int) -> int:
        self.calls.append((host, port, timeout_ms))
        answer = self.answers[host]
        if callable(answer):
            answer = answer()
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def servers():
    return [Server('a.example'), Server('b.example'), Server('c.example')]


@pytest.fixture
def config(servers):
    return Config(
        servers=servers,
        history=10,
        sync_interval=300000,
        sync_timeout=1000,
        sync_on_creation=False,
        auto_start=False
    )


@pytest.fixture
def make_provider():
    return Provider
