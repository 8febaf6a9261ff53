""" Tests for the console loggers """

import logging

from ntpsync import logging as ntpsync_logging


def test_severity_prefixes(caplog):
    logger = ntpsync_logging.logger(name='ntpsync-test')

    logger.warning('drifting')
    logger.error('unreachable')
    logger.critical('every server failed')

    assert '  * WARNING: drifting' in caplog.text
    assert ' ** ERROR: unreachable' in caplog.text
    assert '*** CRITICAL: every server failed' in caplog.text


def test_sync_logger_level():
    logger = ntpsync_logging.get_sync_logger(level=logging.WARNING)

    assert logger.logger.name == 'ntpsync'
    assert logger.logger.level == logging.WARNING
    assert len(logger.logger.handlers) == 1

    ntpsync_logging.get_sync_logger()
    assert logger.logger.level == logging.INFO


def test_cli_logger_is_not_a_child_of_the_sync_logger():
    assert ntpsync_logging.get_cli_logger().logger.name == 'ntpsync-cli'
