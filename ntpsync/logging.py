""" Logging """

import logging

import ntpsync

# ANSI escape sequences for colors
COLORS = {
    'yellow': '\033[33m',
    'cyan': '\033[36m',
}

# Default color to reset formatting
RESET = '\033[0m'


class logger():
    """ A `class` that represents a generic console logging handler. """

    def __init__(
        self,
        name: str = __name__,
        level: int = logging.INFO,
        text_color: str = RESET
    ):
        """ Creates an instance of the generic logger.

        Parameters
        ----------
        name: `str`
            The name of the logger.
        level: `int`
            The severity of the log messages.
        text_color: `str`
            The text-color of the console log messages.
        """
        self.logger = logging.getLogger(name=name)
        self.logger.setLevel(level=level)

        # Create and format a console handler
        if not self.logger.handlers:
            console = logging.StreamHandler()
            console.setLevel(level=level)
            console.setFormatter(
                fmt=logging.Formatter(
                    f'{text_color}[{name}] %(message)s{RESET}'
                )
            )
            self.logger.addHandler(hdlr=console)

    def message(self, message: str):
        """ Logs message with an un-set severity.

        Parameters
        ----------
        message: `str`
            The log-message content.
        """
        self.logger.info(f"{message}")

    def debug(self, message: str):
        """ Logs message with severity `DEBUG`.

        Parameters
        ----------
        message: `str`
            The log-message content.
        """
        self.logger.debug(
            f"    DEBUG: {message}"
        )

    def info(self, message: str):
        """ Logs message with severity `INFO`.

        Parameters
        ----------
        message: `str`
            The log-message content.
        """
        self.logger.info(
            f"    INFO: {message}"
        )

    def warning(self, message: str):
        """ Logs message with severity `WARNING`.

        Parameters
        ----------
        message: `str`
            The log-message content.
        """
        self.logger.warning(
            f"  * WARNING: {message}"
        )

    def error(self, message: str):
        """ Logs message with severity `ERROR`.

        Parameters
        ----------
        message: `str`
            The log-message content.
        """
        self.logger.error(
            f" ** ERROR: {message}"
        )

    def critical(self, message: str):
        """ Logs message with severity `CRITICAL`.

        Parameters
        ----------
        message: `str`
            The log-message content.
        """
        self.logger.critical(
            f"*** CRITICAL: {message}"
        )


# Create application-loggers
def get_sync_logger(level: int = logging.INFO) -> logger:
    """ Get the `ntpsync` synchronizer console logger.

    Parameters
    ----------
    level: `int`
        The severity of the log messages.
    """
    return logger(name=ntpsync.NAME, level=level, text_color=COLORS['cyan'])


def get_cli_logger(level: int = logging.INFO) -> logger:
    """ Get the `ntpsync` command-line console logger.

    Parameters
    ----------
    level: `int`
        The severity of the log messages.
    """
    return logger(name='%s-cli' % ntpsync.NAME, level=level, text_color=COLORS['yellow'])
