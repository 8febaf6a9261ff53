""" ntpsync

`ntpsync` is an embeddable network time protocol (ntp) clock-synchronizer for
long-running asyncio processes that cannot rely on the operating system time sync.
"""

from typing import List, Dict, Union
import errno

NAME: str = 'ntpsync'
DESCRIPTION: str = ''.join([
    '`ntpsync` is an embeddable network time protocol (ntp) clock-synchronizer',
    ' for long-running asyncio processes.'
])

# Server configuration
SERVERS: List[Dict[str, Union[str, int]]] = [
    {'host': 'time.google.com', 'port': 123},
    {'host': 'time.cloudflare.com', 'port': 123},
    {'host': '0.pool.ntp.org', 'port': 123},
    {'host': '1.pool.ntp.org', 'port': 123}
]
NTP_PORT: int = 123
NTP_VERSION: int = 3

# Synchronization configuration
HISTORY: int = 10  # The number of offsets and errors retained in the history
SYNC_INTERVAL: int = 300 * 1000  # The time interval in milliseconds between synchronizations
SYNC_TIMEOUT: int = 10 * 1000  # The time-out in milliseconds of a single synchronization
SYNC_ON_CREATION: bool = True  # Whether to synchronize once when the synchronizer is created
AUTO_START: bool = True  # Whether to start the scheduler when the synchronizer is created


# Errors
class errors:
    """ A `class` that represents static error codes. """
    SYNC_ERROR: int = errno.EHOSTUNREACH
    INVALID_ARGUMENT: int = errno.EINVAL


from ntpsync import logging, exceptions, struct, buffer, failover, ntp, scheduler, engine, settings  # noqa: E402
from ntpsync.engine import Synchronizer  # noqa: E402

__all__ = [
    'logging', 'exceptions', 'struct', 'buffer', 'failover', 'ntp', 'scheduler', 'engine', 'settings',
    'Synchronizer'
]
