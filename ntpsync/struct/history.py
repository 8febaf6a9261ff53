""" Synchronization history """

from __future__ import annotations
from typing import Union
from dataclasses import dataclass, field
import json
import traceback

from ntpsync.buffer import Buffer
from ntpsync.struct.server import Server


@dataclass(frozen=True)
class Delta():
    """ A `class` that represents a single successful offset measurement.

    Attributes
    ----------
    offset: `int`
        The offset in milliseconds between the ntp server time and the local time
            at receipt, `ntp - local`.
    ntp: `int`
        The ntp server time in milliseconds since the epoch.
    """
    offset: int
    ntp: int

    def to_dict(self) -> dict:
        """ Returns an `ntpsync.struct.history.Delta` object as a `dict`. """
        return {
            'offset': self.offset,
            'ntp': self.ntp
        }


@dataclass(frozen=True)
class Error():
    """ A `class` that represents a single failed synchronization attempt.

    Attributes
    ----------
    name: `str`
        The class-name of the exception raised by the ntp provider.
    message: `str`
        The exception message.
    server: `ntpsync.struct.server.Server`
        The ntp server that was queried when the attempt failed.
    stack: `str`
        The formatted traceback of the exception.
    time: `int`
        The local time in milliseconds since the epoch when the attempt failed.
    """
    name: str
    message: str
    server: Server
    stack: str
    time: int

    def from_exception(error: BaseException, server: Server, time: int) -> Error:
        """ Returns an `ntpsync.struct.history.Error` object from an exception.

        Parameters
        ----------
        error: `BaseException`
            The exception raised by the ntp provider.
        server: `ntpsync.struct.server.Server`
            The ntp server that was queried.
        time: `int`
            The local time in milliseconds since the epoch.
        """
        return Error(
            name=type(error).__name__,
            message=str(error),
            server=server,
            stack=''.join(
                traceback.format_exception(type(error), error, error.__traceback__)
            ),
            time=time
        )

    def to_dict(self) -> dict:
        """ Returns an `ntpsync.struct.history.Error` object as a `dict`. """
        return {
            'name': self.name,
            'message': self.message,
            'server': self.server.to_dict(),
            'stack': self.stack,
            'time': self.time
        }


@dataclass
class History():
    """ A `class` that represents the synchronization state of an
    `ntpsync.engine.Synchronizer`.

    Attributes
    ----------
    current_index: `int`
        The index of the ntp server to query on the next attempt.
    current_server: `ntpsync.struct.server.Server`
        The ntp server to query on the next attempt.
    deltas: `ntpsync.buffer.Buffer`
        The retained offset measurements, oldest-first.
    errors: `ntpsync.buffer.Buffer`
        The retained failed attempts, oldest-first.
    consecutive_error_count: `int`
        The number of failed attempts since the last successful attempt.
    lifetime_error_count: `int`
        The total number of failed attempts.
    max_consecutive_error_count: `int`
        The largest value `consecutive_error_count` has reached.
    is_in_error_state: `bool`
        Whether the most recent attempt failed.
    last_sync_time: `Union[int, None]`
        The local time in milliseconds of the most recent successful attempt.
    last_ntp_time: `Union[int, None]`
        The ntp server time in milliseconds of the most recent successful attempt.
    last_error: `Union[ntpsync.struct.history.Error, None]`
        The most recent failed attempt, retained after later successes.
    """
    current_server: Server
    current_index: int = field(default=0)
    deltas: Buffer = field(default_factory=Buffer)
    errors: Buffer = field(default_factory=Buffer)
    consecutive_error_count: int = field(default=0)
    lifetime_error_count: int = field(default=0)
    max_consecutive_error_count: int = field(default=0)
    is_in_error_state: bool = field(default=False)
    last_sync_time: Union[int, None] = field(default=None)
    last_ntp_time: Union[int, None] = field(default=None)
    last_error: Union[Error, None] = field(default=None)

    def to_dict(self) -> dict:
        """ Returns an `ntpsync.struct.history.History` object as a `dict`. """
        return {
            'current_index': self.current_index,
            'current_server': self.current_server.to_dict(),
            'deltas': [delta.to_dict() for delta in self.deltas],
            'errors': [error.to_dict() for error in self.errors],
            'consecutive_error_count': self.consecutive_error_count,
            'lifetime_error_count': self.lifetime_error_count,
            'max_consecutive_error_count': self.max_consecutive_error_count,
            'is_in_error_state': self.is_in_error_state,
            'last_sync_time': self.last_sync_time,
            'last_ntp_time': self.last_ntp_time,
            'last_error': self.last_error.to_dict() if self.last_error else None
        }

    def __repr__(self):
        """ Returns an `ntpsync.struct.history.History` object as a json-formatted `str`. """
        return json.dumps(self.to_dict(), indent=2)
