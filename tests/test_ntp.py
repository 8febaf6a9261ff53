""" Tests for the network time protocol provider """

import ntplib
import pytest

from ntpsync.ntp import Provider


class Response():
    tx_time = 1700000000.1234


@pytest.mark.asyncio
async def test_provide_returns_milliseconds(monkeypatch):
    requests = []
    provider = Provider()

    def request(host, version, port, timeout):
        requests.append((host, version, port, timeout))
        return Response()

    monkeypatch.setattr(provider.client, 'request', request)

    assert await provider.provide('localhost', 1123, 2500) == 1700000000123
    assert requests == [('localhost', 3, 1123, 2.5)]


@pytest.mark.asyncio
async def test_provide_propagates_failures(monkeypatch):
    provider = Provider()

    def request(host, version, port, timeout):
        raise ntplib.NTPException('No response received from localhost.')

    monkeypatch.setattr(provider.client, 'request', request)

    with pytest.raises(ntplib.NTPException):
        await provider('localhost', 123, 100)
