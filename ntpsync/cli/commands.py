""" ntpsync commands """

from typing import List, Union
import asyncio
import dataclasses

import ntpsync
from ntpsync import settings
from ntpsync.engine import Synchronizer, SyncResult
from ntpsync.exceptions import SyncError
from ntpsync.struct.config import Config
from ntpsync.struct.server import Server


def parse_server(value: str) -> Server:
    """ Returns an `ntpsync.struct.server.Server` object from a `host` or `host:port` `str`.
    IPv6 addresses take a port only in brackets, `[::1]:123`.

    Raises `ValueError` when the port is not an integer in [1, 65535].

    Parameters
    ----------
    value: `str`
        The ntp server as `host` or `host:port`.
    """
    value = value.strip()

    if value.startswith('['):
        host, _, port = value[1:].partition(']')
        port = port[1:] if port.startswith(':') else port
    elif value.count(':') == 1:
        host, _, port = value.rpartition(':')
    else:
        host, port = value, ''

    if not port:
        return Server.from_dict({'host': host})

    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(
            'Invalid port {%s} for server {%s}. Port must be an integer in [1, 65535].' % (
                port, value
            )
        )

    return Server.from_dict({'host': host, 'port': int(port)})


def load_config(servers: Union[List[str], None] = None) -> Config:
    """ Returns the persisted synchronizer configuration, overriding the servers
    when provided.

    Parameters
    ----------
    servers: `Union[List[str], None]`
        A list of ntp servers as `host` or `host:port`.
    """
    config = settings.get_config()
    if servers:
        config = dataclasses.replace(
            config,
            servers=[parse_server(server) for server in servers]
        )
    return config


async def sync_once(synchronizer: Synchronizer) -> Union[SyncResult, None]:
    """ Attempts to synchronize against each configured server at most once, returning
    the first successful result or `None` when every server failed.

    Parameters
    ----------
    synchronizer: `ntpsync.engine.Synchronizer`
        An instance of an `ntpsync.engine.Synchronizer` object.
    """
    for _ in synchronizer.servers:
        try:
            return await synchronizer.attempt_sync()
        except SyncError:
            continue
    return None


# Define ntpsync sub-command function(s)
def sync(servers: Union[List[str], None] = None) -> int:
    """ Synchronizes once and prints the measured offset and the corrected time.

    Parameters
    ----------
    servers : `Union[List[str], None]`
        A list of ntp servers as `host` or `host:port`, overriding the configured servers.

    Help
    ----
    usage: ntpsync sync [-h] [--server SERVERS]

    options:
    -h, --help        show this help message and exit
    --server SERVERS  An ntp server as `host` or `host:port`, overriding the configured servers.

    Examples
    --------
    ``` console
    ntpsync sync --server time.cloudflare.com
    ```

    """
    logger = ntpsync.logging.get_cli_logger()
    try:
        config = dataclasses.replace(
            load_config(servers),
            sync_on_creation=False,
            auto_start=False
        )
    except ValueError as error:

        # Logging
        logger.error(str(error))

        return ntpsync.errors.INVALID_ARGUMENT

    async def _sync():
        synchronizer = Synchronizer(config=config, logger=ntpsync.logging.get_sync_logger())
        return synchronizer, await sync_once(synchronizer)

    synchronizer, result = asyncio.run(_sync())

    if result is None:

        # Logging
        logger.critical(
            'Communication with every ntp server failed [%s].' % (
                ', '.join(str(server) for server in synchronizer.servers)
            )
        )

        return ntpsync.errors.SYNC_ERROR

    logger.message('server: %s' % result.server)
    logger.message('offset: %d [ms]' % result.offset)
    logger.message('time: %d [ms]' % synchronizer.get_time())

    return 0


def run(servers: Union[List[str], None] = None) -> int:
    """ Runs the clock-synchronizer until interrupted.

    Parameters
    ----------
    servers : `Union[List[str], None]`
        A list of ntp servers as `host` or `host:port`, overriding the configured servers.

    Help
    ----
    usage: ntpsync run [-h] [--server SERVERS]

    options:
    -h, --help        show this help message and exit
    --server SERVERS  An ntp server as `host` or `host:port`, overriding the configured servers.

    Examples
    --------
    ``` console
    ntpsync run
    ```

    """
    logger = ntpsync.logging.get_cli_logger()
    try:
        config = dataclasses.replace(load_config(servers), auto_start=True)
    except ValueError as error:

        # Logging
        logger.error(str(error))

        return ntpsync.errors.INVALID_ARGUMENT

    async def _run():
        async with Synchronizer(config=config):
            await asyncio.Event().wait()

    try:
        asyncio.run(_run())

    except KeyboardInterrupt:

        # Logging
        logger.info("Shutting down the clock-synchronizer.")

    finally:

        # Logging
        logger.info('The clock-synchronizer exited successfully.')

    return 0
