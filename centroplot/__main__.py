"""
centroplot CLI

Command-line interface with subcommands for plotting and layout export.
"""

import argparse
import logging
import sys
from .cli import layout, plot
from .exceptions import CentroplotError

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='centroplot',
        description='centroplot: Centromere-centered chromosome plots for several species'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    plot.add_parser(subparsers)
    layout.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    try:
        if args.command == 'plot':
            plot.run(args)
        elif args.command == 'layout':
            layout.run(args)
    except (CentroplotError, FileNotFoundError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
