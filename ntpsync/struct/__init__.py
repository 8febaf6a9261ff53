""" Data-structures """

from ntpsync.struct import server, history, config

__all__ = ['server', 'history', 'config']
