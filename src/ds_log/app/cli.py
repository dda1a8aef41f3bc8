"""Command line front end for ds_log."""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from ds_log.config.parameter_schema import load_parameters
from ds_log.core.session import LogSession
from ds_log.core.severity import LogSeverity
from ds_log.core.writer import LogWriter, install_shutdown_hook
from ds_log.protocol.robot_address import default_robot_addresses

LEVELS = {severity.name.lower(): severity for severity in LogSeverity}


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        params = load_parameters(args.config)
    except ValueError as exc:
        print(f'[ds_log] ERROR: {exc}', file=sys.stderr)
        return 1

    writer = LogWriter(LogSession(params))
    install_shutdown_hook(writer)
    severity = LEVELS[args.level]
    try:
        if args.team is not None:
            try:
                addresses = default_robot_addresses(args.team)
            except ValueError as exc:
                print(f'[ds_log] ERROR: {exc}', file=sys.stderr)
                return 1
            for address in addresses:
                print(address)
            writer.system(f'Robot address candidates: {", ".join(addresses)}')

        for message in args.messages:
            writer.emit(severity, message)

        if args.print_paths:
            writer.session.ensure_started()
            print(f'log file:    {writer.log_file or "<stderr>"}')
            print(f'mirror file: {writer.mirror_file}')
    finally:
        writer.close()
    return 0


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='ds_log',
        description='Write messages to the driver station diagnostic log.',
    )
    parser.add_argument(
        'messages',
        nargs='*',
        help='Messages to log, one row each',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='YAML parameter file (relative paths resolve against the package root or CWD)',
    )
    parser.add_argument(
        '--level',
        choices=sorted(LEVELS),
        default='system',
        help='Severity for the given messages. Default: %(default)s',
    )
    parser.add_argument(
        '--team',
        type=int,
        default=None,
        help='Print robot address candidates for this team number',
    )
    parser.add_argument(
        '--print-paths',
        action='store_true',
        help='Print the log and mirror file paths after writing',
    )
    return parser.parse_args(argv)


if __name__ == '__main__':
    sys.exit(main())
