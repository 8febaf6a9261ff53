""" Command-line utility """

import sys
import ntpsync
import argparse
from ntpsync.cli import commands


# Define ntpsync CLI tool function(s)
def main():
    """
    usage: ntpsync [-h] {sync,run} ...

    CLI application for network time protocol (ntp) clock-synchronization.

    options:
    -h, --help  show this help message and exit

    commands:
    The `ntpsync` command options.

    {sync,run}
        sync      Synchronizes once and prints the corrected time.
        run       Runs the clock-synchronizer until interrupted.

    Execute `ntpsync {command} --help` for more help.
    """

    # Setup CLI argument option(s)
    _ARG_PARSER = argparse.ArgumentParser(
        prog=ntpsync.NAME,
        description=ntpsync.DESCRIPTION,
        epilog="Execute `ntpsync {command} --help` for more help."
    )

    # Setup command argument option(s)
    _ARG_SUBPARSER = _ARG_PARSER.add_subparsers(
        title='commands',
        prog=ntpsync.NAME,
        description='The `ntpsync` command options.'
    )

    # Setup `sync` command CLI argument option(s)
    _SYNC_ARG_PARSER = _ARG_SUBPARSER.add_parser(
        name='sync',
        help='Synchronizes once and prints the corrected time.',
        epilog="Execute `ntpsync sync --help` for help."
    )
    _SYNC_ARG_PARSER.add_argument(
        '--server',
        help="An ntp server as `host` or `host:port`, overriding the configured servers.",
        type=str,
        action='append',
        dest='servers',
        default=None
    )
    _SYNC_ARG_PARSER.set_defaults(func=commands.sync)

    # Setup `run` command CLI argument option(s)
    _RUN_ARG_PARSER = _ARG_SUBPARSER.add_parser(
        name='run',
        help='Runs the clock-synchronizer until interrupted.',
        epilog="Execute `ntpsync run --help` for help."
    )
    _RUN_ARG_PARSER.add_argument(
        '--server',
        help="An ntp server as `host` or `host:port`, overriding the configured servers.",
        type=str,
        action='append',
        dest='servers',
        default=None
    )
    _RUN_ARG_PARSER.set_defaults(func=commands.run)

    # Parse arguments
    _ARGS = _ARG_PARSER.parse_args()
    _KWARGS = {
        key: vars(_ARGS)[key]
        for key in vars(_ARGS).keys()
        if key != 'func'
    }

    # Execute sub-command
    if hasattr(_ARGS, 'func'):
        return _ARGS.func(**_KWARGS)
    else:
        _ARG_PARSER.print_help()
        return ntpsync.errors.INVALID_ARGUMENT


if __name__ == '__main__':
    sys.exit(main())
