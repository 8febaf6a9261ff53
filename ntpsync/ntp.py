""" Network time protocol (ntp) provider """

import asyncio
import ntplib

import ntpsync


class Provider():
    """ A `class` that represents the network time protocol client used to
    fetch the remote time of a server.
    """

    def __init__(self, version: int = ntpsync.NTP_VERSION):
        """ An instance of the network time protocol client.

        Parameters
        ----------
        version: `int`
            The network time protocol version.
        """
        self.version = version
        self.client = ntplib.NTPClient()

    def request(self, host: str, port: int, timeout: float) -> ntplib.NTPStats:
        """ Returns the time statistics from the network time protocol server. Blocks
        until the server responds or the time-out elapses.

        Parameters
        ----------
        host: `str`
            The host-name or ip-address of the ntp server.
        port: `int`
            The udp port of the ntp server.
        timeout: `float`
            The time-out in seconds.
        """
        return self.client.request(host, version=self.version, port=port, timeout=timeout)

    async def provide(self, host: str, port: int, timeout_ms: int) -> int:
        """ Returns the transmit time of the network time protocol server in
        milliseconds since the epoch.

        Raises `ntplib.NTPException` when the server does not respond in time,
        `socket.gaierror` when the host cannot be resolved, and `OSError` on
        other transport failures.

        Parameters
        ----------
        host: `str`
            The host-name or ip-address of the ntp server.
        port: `int`
            The udp port of the ntp server.
        timeout_ms: `int`
            The time-out in milliseconds.
        """

        # Run the blocking request in a worker thread
        response = await asyncio.to_thread(
            self.request,
            host,
            port,
            timeout_ms / 1000
        )

        return int(round(response.tx_time * 1000))

    async def __call__(self, host: str, port: int, timeout_ms: int) -> int:
        return await self.provide(host, port, timeout_ms)
