""" Round-robin server failover """


def next_index(index: int, length: int) -> int:
    """ Returns the index of the ntp server to query after a failed attempt.

    The index advances by one, wrapping around the server list. With a single
    server there is nowhere to fail over to and the index is unchanged.

    Parameters
    ----------
    index: `int`
        The index of the ntp server that failed.
    length: `int`
        The number of configured ntp servers.
    """
    if length > 1:
        return (index + 1) % length
    return index
