""" Synchronization exceptions """

from ntpsync.struct.server import Server


class SyncError(Exception):
    """ Raised when a synchronization attempt fails.

    Attributes
    ----------
    cause: `Exception`
        The exception raised by the ntp provider.
    server: `ntpsync.struct.server.Server`
        The ntp server that was queried, not the failover target.
    """

    def __init__(self, cause: Exception, server: Server):
        self.cause = cause
        self.server = server
        super().__init__(
            'Communication with the ntp server {%s} failed. [%s] %s' % (
                server, type(cause).__name__, cause
            )
        )

    @property
    def name(self) -> str:
        """ Returns the class-name of the underlying cause. """
        return type(self.cause).__name__
