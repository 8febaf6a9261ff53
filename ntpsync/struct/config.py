""" Synchronizer configuration """

from __future__ import annotations
from typing import List
from dataclasses import dataclass, field
import json
from pytensils import config

import ntpsync
from ntpsync.struct.server import Server


def get_default_servers() -> List[Server]:
    """ Returns the default list of public ntp servers. """
    return [Server.from_dict(server) for server in ntpsync.SERVERS]


@dataclass
class Config():
    """ A `class` that represents the configuration of an `ntpsync.engine.Synchronizer`.

    Attributes
    ----------
    servers: `List[ntpsync.struct.server.Server]`
        The ordered list of candidate ntp servers.
    history: `int`
        The maximum number of retained offsets and errors.
    sync_interval: `int`
        The time interval in milliseconds between scheduled synchronizations.
    sync_timeout: `int`
        The time-out in milliseconds of a single synchronization.
    sync_on_creation: `bool`
        Whether to synchronize once when the synchronizer is created.
    auto_start: `bool`
        Whether to start the scheduler when the synchronizer is created.
    """
    servers: List[Server] = field(default_factory=get_default_servers)
    history: int = field(default=ntpsync.HISTORY)
    sync_interval: int = field(default=ntpsync.SYNC_INTERVAL)
    sync_timeout: int = field(default=ntpsync.SYNC_TIMEOUT)
    sync_on_creation: bool = field(default=ntpsync.SYNC_ON_CREATION)
    auto_start: bool = field(default=ntpsync.AUTO_START)

    def __post_init__(self):

        # Assert values
        if not self.servers:
            raise ValueError('Invalid servers. At least one ntp server is required.')
        if self.history < 0:
            raise ValueError('Invalid history {%s}. History must be >= 0.' % self.history)
        if self.sync_interval <= 0:
            raise ValueError(
                'Invalid sync_interval {%s}. Interval must be > 0.' % self.sync_interval
            )
        if self.sync_timeout <= 0:
            raise ValueError(
                'Invalid sync_timeout {%s}. Time-out must be > 0.' % self.sync_timeout
            )

        self.servers = [
            server if isinstance(server, Server) else Server.from_dict(server)
            for server in self.servers
        ]

    def from_dict(dict_object: dict) -> Config:
        """ Returns an `ntpsync.struct.config.Config` object from a `dict`. Missing keys
        take their default values.

        Parameters
        ----------
        dict_object : `dict`
            The dictionary object to convert to an `ntpsync.struct.config.Config` object.
        """

        # Assert object type
        if not isinstance(dict_object, dict):
            raise TypeError('Object must be a `dict`.')

        # Assert keys
        unknown_keys = [
            key for key in dict_object if key not in [
                'servers',
                'history',
                'sync_interval',
                'sync_timeout',
                'sync_on_creation',
                'auto_start'
            ]
        ]
        if unknown_keys:
            raise KeyError(
                'Unknown keys. The `dict` object contains the following unsupported keys [%s].' % (
                    ','.join(["'%s'" % (key) for key in unknown_keys])
                )
            )

        # Convert datatypes
        dict_object = dict(dict_object)
        if 'servers' in dict_object:
            dict_object['servers'] = [
                Server.from_dict(server) for server in dict_object['servers']
            ]
        for key in ['history', 'sync_interval', 'sync_timeout']:
            if key in dict_object:
                dict_object[key] = int(dict_object[key])

        return Config(**dict_object)

    def from_config(config: config.Handler) -> Config:
        """ Returns an `ntpsync.struct.config.Config` object from a `pytensils.config.Handler` object.

        Parameters
        ----------
        config: `pytensils.config.Handler`
            An instance of an `pytensils.config.Handler` object.
        """
        return Config.from_dict(config.to_dict()['sync'])

    def to_dict(self) -> dict:
        """ Returns an `ntpsync.struct.config.Config` object as a `dict`. """
        return {
            'servers': [server.to_dict() for server in self.servers],
            'history': self.history,
            'sync_interval': self.sync_interval,
            'sync_timeout': self.sync_timeout,
            'sync_on_creation': self.sync_on_creation,
            'auto_start': self.auto_start
        }

    def __repr__(self):
        """ Returns an `ntpsync.struct.config.Config` object as a json-formatted `str`. """
        return json.dumps(self.to_dict(), indent=2)

    def __eq__(self, compare):
        """ Returns `True` when compare is an instance of self with equal values.

        Parameters
        ----------
        compare: `ntpsync.struct.config.Config`
            An instance of an `ntpsync.struct.config.Config` object.
        """
        if isinstance(compare, Config):
            return self.to_dict() == compare.to_dict()

        return False
