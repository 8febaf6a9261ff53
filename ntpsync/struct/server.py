""" Network time protocol server """

from __future__ import annotations
from dataclasses import dataclass, field
import json

import ntpsync


@dataclass(frozen=True)
class Server():
    """ A `class` that represents a candidate network time protocol (ntp) server.

    Attributes
    ----------
    host: `str`
        The host-name or ip-address of the ntp server.
    port: `int`
        The udp port of the ntp server.
    """
    host: str
    port: int = field(default=ntpsync.NTP_PORT)

    def from_dict(dict_object: dict) -> Server:
        """ Returns an `ntpsync.struct.server.Server` object from a `dict`.

        Parameters
        ----------
        dict_object : `dict`
            The dictionary object to convert to an `ntpsync.struct.server.Server` object.
        """

        # Assert object type
        if not isinstance(dict_object, dict):
            raise TypeError('Object must be a `dict`.')

        # Assert keys
        if 'host' not in dict_object:
            raise KeyError(
                "Missing keys. The `dict` object is missing the following required keys ['host']."
            )

        # Assert values
        if not str(dict_object['host']).strip():
            raise ValueError('Invalid host {%s}. Host must be a non-empty `str`.' % (
                dict_object['host']
            ))

        return Server(
            host=str(dict_object['host']).strip(),
            port=int(dict_object.get('port', ntpsync.NTP_PORT))
        )

    def to_dict(self) -> dict:
        """ Returns an `ntpsync.struct.server.Server` object as a `dict`. """
        return {
            'host': self.host,
            'port': self.port
        }

    def __str__(self):
        return '%s:%s' % (self.host, self.port)

    def __repr__(self):
        """ Returns an `ntpsync.struct.server.Server` object as a json-formatted `str`. """
        return json.dumps(self.to_dict(), indent=2)
