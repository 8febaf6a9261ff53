""" Tests for the command-line sub-commands """

import pytest

import ntpsync
from ntpsync.cli import commands
from ntpsync.engine import Synchronizer
from ntpsync.struct.config import Config
from ntpsync.struct.server import Server


def test_parse_server():
    assert commands.parse_server('time.google.com') == Server('time.google.com', 123)
    assert commands.parse_server(' localhost:1123 ') == Server('localhost', 1123)


def test_load_config_overrides_servers(monkeypatch):
    monkeypatch.setattr(commands.settings, 'get_config', lambda: Config(history=4))

    config = commands.load_config(['localhost:1123', 'time.google.com'])

    assert config.servers == [Server('localhost', 1123), Server('time.google.com')]
    assert config.history == 4


@pytest.mark.asyncio
async def test_sync_once_fails_over_to_healthy_server(config, clock, make_provider):
    synchronizer = Synchronizer(
        config=config,
        provider=make_provider({
            'a.example': lambda: OSError('down'),
            'b.example': clock.value + 70
        }),
        clock=clock
    )

    result = await commands.sync_once(synchronizer)

    assert result.server == Server('b.example')
    assert result.offset == 70


@pytest.mark.asyncio
async def test_sync_once_tries_each_server_once(config, clock, make_provider):
    provider = make_provider({
        host: (lambda: OSError('down')) for host in ['a.example', 'b.example', 'c.example']
    })
    synchronizer = Synchronizer(config=config, provider=provider, clock=clock)

    assert await commands.sync_once(synchronizer) is None
    assert [call[0] for call in provider.calls] == ['a.example', 'b.example', 'c.example']


def test_parse_server_ipv6():
    assert commands.parse_server('::1') == Server('::1', 123)
    assert commands.parse_server('[::1]') == Server('::1', 123)
    assert commands.parse_server('[::1]:1123') == Server('::1', 1123)


@pytest.mark.parametrize('value', ['localhost:abc', 'localhost:0', 'localhost:70000', '[::1]:x'])
def test_parse_server_rejects_invalid_ports(value):
    with pytest.raises(ValueError):
        commands.parse_server(value)


def test_sync_with_invalid_server_returns_invalid_argument(monkeypatch, caplog):
    monkeypatch.setattr(commands.settings, 'get_config', lambda: Config())

    assert commands.sync(['localhost:abc']) == ntpsync.errors.INVALID_ARGUMENT
    assert 'Invalid port {abc}' in caplog.text


def test_run_with_invalid_server_returns_invalid_argument(monkeypatch):
    monkeypatch.setattr(commands.settings, 'get_config', lambda: Config())

    assert commands.run([':123']) == ntpsync.errors.INVALID_ARGUMENT
