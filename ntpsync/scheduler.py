""" Periodic synchronization scheduler """

from typing import Awaitable, Callable, Union
import asyncio

from ntpsync import logging


class Scheduler():
    """ A `class` that represents a repeating timer that awaits a callback at a
    fixed interval on the running event loop.
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable],
        interval: float,
        logger: Union[logging.logger, None] = None
    ):
        """ Creates an instance of the scheduler. The scheduler does not start
        until `start()` is called.

        Parameters
        ----------
        callback: `Callable[[], Awaitable]`
            The coroutine function to await on every tick.
        interval: `float`
            The time interval in seconds between ticks.
        logger: `ntpsync.logging.logger`
            The console logger.
        """
        self.callback = callback
        self.interval = interval
        self.logger = logger or logging.get_sync_logger()
        self.task: Union[asyncio.Task, None] = None

    @property
    def running(self) -> bool:
        """ Returns `True` when the repeating timer is active. """
        return self.task is not None and not self.task.done()

    def start(self) -> bool:
        """ Starts the repeating timer on the running event loop. Returns `False`
        when the timer is already active.
        """
        if self.running:
            return False

        self.task = asyncio.get_running_loop().create_task(self.tick())

        # Logging
        self.logger.info(
            'Scheduled synchronization every %.2f [sec.].' % self.interval
        )

        return True

    def stop(self) -> bool:
        """ Cancels the repeating timer and releases the task. Returns `False`
        when the timer is not active.
        """
        if not self.running:
            self.task = None
            return False

        self.task.cancel()
        self.task = None

        # Logging
        self.logger.info('Scheduled synchronization stopped.')

        return True

    async def tick(self):
        """ Awaits the callback every `interval` seconds until cancelled. An exception
        raised by the callback is logged and the timer keeps running.
        """
        while True:
            await asyncio.sleep(self.interval)

            try:
                await self.callback()
            except Exception as error:

                # Logging
                self.logger.error(
                    '[%s] [tick()] %s, retrying in %.2f [sec.].' % (
                        type(error).__name__, error, self.interval
                    )
                )
