"""
Periodt CLI

Command-line interface with subcommands.
"""

import argparse
import sys
from .cli import layout


def main():
    parser = argparse.ArgumentParser(
        prog='periodt',
        description='Periodt: periodic-table shaped grid layouts'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    layout.add_parser(subparsers)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'layout':
        layout.run(args)


if __name__ == "__main__":
    main()
