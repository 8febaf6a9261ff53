""" Clock-synchronizer """

from __future__ import annotations
from typing import Awaitable, Callable, Union
from dataclasses import dataclass
import asyncio
import copy
import math
import time

from ntpsync import logging, failover, exceptions, ntp
from ntpsync.buffer import Buffer
from ntpsync.scheduler import Scheduler
from ntpsync.struct.config import Config
from ntpsync.struct.history import Delta, Error, History
from ntpsync.struct.server import Server


def now() -> int:
    """ Returns the local time in milliseconds since the epoch. """
    return int(round(time.time() * 1000))


@dataclass(frozen=True)
class SyncResult():
    """ A `class` that represents the outcome of a successful synchronization attempt.

    Attributes
    ----------
    offset: `int`
        The measured offset in milliseconds, `ntp - local`.
    server: `ntpsync.struct.server.Server`
        The ntp server that answered.
    """
    offset: int
    server: Server


class Synchronizer():
    """ A `class` that represents a clock-synchronizer that periodically queries a list
    of network time protocol (ntp) servers, retains a bounded history of offsets and
    errors and derives a corrected time from the average offset.

    Attempts are serialized by a per-synchronizer `asyncio.Lock`. A manual call to
    `attempt_sync()` that overlaps a scheduled attempt waits for it to complete, so
    each attempt reads the server cursor after the previous attempt has advanced it.
    """

    def __init__(
        self,
        config: Union[Config, None] = None,
        provider: Union[Callable[[str, int, int], Awaitable[int]], None] = None,
        clock: Callable[[], int] = now,
        logger: Union[logging.logger, None] = None
    ):
        """ Creates an instance of the clock-synchronizer.

        When an event loop is running, the synchronizer schedules one initial
        attempt (`config.sync_on_creation`) and starts the scheduler
        (`config.auto_start`). Without a running event loop both are deferred
        until `start()` is called from within one.

        Parameters
        ----------
        config: `ntpsync.struct.config.Config`
            The synchronizer configuration. Defaults to `ntpsync.struct.config.Config()`.
        provider: `Callable[[str, int, int], Awaitable[int]]`
            A coroutine function returning the remote time in milliseconds for
                `(host, port, timeout_ms)`. Defaults to `ntpsync.ntp.Provider()`.
        clock: `Callable[[], int]`
            A function returning the local time in milliseconds.
        logger: `ntpsync.logging.logger`
            The console logger.
        """
        self.config: Config = config or Config()
        self.servers: tuple = tuple(self.config.servers)
        self.provider = provider or ntp.Provider()
        self.clock = clock
        self.logger = logger or logging.get_sync_logger()

        # Initialize state
        self.lock: asyncio.Lock = asyncio.Lock()
        self.history: History = History(
            current_server=self.servers[0],
            current_index=0,
            deltas=Buffer(limit=self.config.history),
            errors=Buffer(limit=self.config.history)
        )

        # Initialize scheduling
        self.scheduler: Scheduler = Scheduler(
            callback=self.sync,
            interval=self.config.sync_interval / 1000,
            logger=self.logger
        )
        self.initial_sync: Union[asyncio.Task, None] = None
        self.pending_initial_sync: bool = self.config.sync_on_creation

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            if self.config.sync_on_creation or self.config.auto_start:

                # Logging
                self.logger.debug(
                    'No running event loop, synchronization is deferred until start().'
                )
        else:
            if self.config.sync_on_creation:
                self.schedule_initial_sync()
            if self.config.auto_start:
                self.scheduler.start()

    @property
    def running(self) -> bool:
        """ Returns `True` when the scheduler is active. """
        return self.scheduler.running

    def schedule_initial_sync(self):
        """ Schedules the one-time initial synchronization on the running event loop. """
        self.pending_initial_sync = False
        self.initial_sync = asyncio.get_running_loop().create_task(self.sync())

    def start(self) -> bool:
        """ Starts the scheduler, running a pending initial synchronization first.
        Returns `False` when the scheduler is already active.
        """
        if self.pending_initial_sync:
            self.schedule_initial_sync()
        return self.scheduler.start()

    def stop(self) -> bool:
        """ Stops the scheduler and cancels a pending initial synchronization.
        Returns `False` when the scheduler is not active.
        """
        if self.initial_sync is not None and not self.initial_sync.done():
            self.initial_sync.cancel()
        self.initial_sync = None
        return self.scheduler.stop()

    async def __aenter__(self) -> Synchronizer:
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.stop()

    async def attempt_sync(self) -> SyncResult:
        """ Queries the current ntp server once and updates the history.

        On success the offset is recorded and the consecutive error count resets.
        On failure the current server advances to the next candidate, the error is
        recorded and `ntpsync.exceptions.SyncError` is raised, naming the server
        that was queried.
        """
        async with self.lock:
            server = self.history.current_server

            try:

                # Malformed answers fail like any other provider error
                ntp_time = int(
                    await asyncio.wait_for(
                        self.provider(server.host, server.port, self.config.sync_timeout),
                        timeout=self.config.sync_timeout / 1000
                    )
                )
            except Exception as error:
                self.fail(error, server)
                raise exceptions.SyncError(cause=error, server=server) from error

            offset = self.update(ntp_time, server)

        return SyncResult(offset=offset, server=server)

    async def sync(self) -> bool:
        """ Runs `attempt_sync()` and returns `True` on success and `False` on failure.
        Failures are recorded in the history and never raised.
        """
        try:
            await self.attempt_sync()
        except exceptions.SyncError:
            return False
        return True

    def update(self, ntp_time: int, server: Server) -> int:
        """ Records a successful attempt and returns the measured offset in milliseconds.

        Parameters
        ----------
        ntp_time: `int`
            The ntp server time in milliseconds since the epoch.
        server: `ntpsync.struct.server.Server`
            The ntp server that answered.
        """
        local_time = self.clock()
        offset = ntp_time - local_time

        self.history.deltas.push(Delta(offset=offset, ntp=ntp_time))
        self.history.last_sync_time = local_time
        self.history.last_ntp_time = ntp_time
        self.history.consecutive_error_count = 0
        self.history.is_in_error_state = False

        # Logging
        self.logger.info(
            'The ntp time offset from {%s} is %d [ms].' % (server, offset)
        )

        return offset

    def fail(self, error: Exception, server: Server):
        """ Records a failed attempt and fails over to the next ntp server.

        Parameters
        ----------
        error: `Exception`
            The exception raised by the ntp provider.
        server: `ntpsync.struct.server.Server`
            The ntp server that was queried.
        """
        self.history.current_index = failover.next_index(
            self.history.current_index,
            len(self.servers)
        )
        self.history.current_server = self.servers[self.history.current_index]

        record = Error.from_exception(error, server=server, time=self.clock())
        self.history.errors.push(record)
        self.history.consecutive_error_count += 1
        self.history.lifetime_error_count += 1
        self.history.max_consecutive_error_count = max(
            self.history.max_consecutive_error_count,
            self.history.consecutive_error_count
        )
        self.history.is_in_error_state = True
        self.history.last_error = record

        # Logging
        self.logger.warning(
            ''.join([
                'Communication with the ntp server {%s} failed' % server,
                ' [%s] %s,' % (record.name, record.message),
                ' failing over to {%s}.' % self.history.current_server
            ])
        )

    def get_offset(self) -> int:
        """ Returns the rounded average offset in milliseconds of the retained
        deltas, or 0 when there are none.
        """
        deltas = self.history.deltas
        if not len(deltas):
            return 0

        # Round half-up
        return int(math.floor(sum(delta.offset for delta in deltas) / len(deltas) + 0.5))

    def get_time(self) -> int:
        """ Returns the corrected time in milliseconds since the epoch. """
        return self.clock() + self.get_offset()

    def get_history(self) -> History:
        """ Returns an independent deep copy of the synchronization history. """
        return copy.deepcopy(self.history)
