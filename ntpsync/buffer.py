""" Bounded first-in first-out history buffer """

from typing import Any, Iterator, Union
from collections import deque

import ntpsync


class Buffer():
    """ A `class` that represents a bounded first-in first-out queue.

    When the buffer holds `limit` items, pushing a new item evicts the oldest item
    first. A `limit` of 0 retains nothing.
    """

    def __init__(self, limit: int = ntpsync.HISTORY):
        """ Creates an instance of the bounded buffer.

        Parameters
        ----------
        limit: `int`
            The maximum number of retained items.
        """
        if int(limit) < 0:
            raise ValueError('Invalid limit {%s}. Limit must be >= 0.' % limit)

        self.limit: int = int(limit)
        self.items: deque = deque(maxlen=self.limit)

    def push(self, item: Any) -> Union[Any, None]:
        """ Appends an item at the tail and returns the evicted item, if any.

        Parameters
        ----------
        item: `Any`
            The item to append.
        """
        if self.limit == 0:
            return item

        evicted = self.items[0] if len(self.items) == self.limit else None
        self.items.append(item)

        return evicted

    def to_list(self) -> list:
        """ Returns the items, oldest-first, as a `list`. """
        return list(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def __eq__(self, compare):
        if isinstance(compare, Buffer):
            return self.limit == compare.limit and list(self.items) == list(compare.items)
        if isinstance(compare, list):
            return list(self.items) == compare

        return False

    def __repr__(self):
        return 'Buffer(limit=%s, items=%s)' % (self.limit, list(self.items))
