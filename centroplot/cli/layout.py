"""Layout subcommand - export computed chromosome geometry"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import PlotConfig
from ..io import load_dataset, write_layout
from ..layout import LayoutEngine
from .common import add_common_arguments, resolve_input, setup_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Write per-chromosome scale and arm lengths as TSV'
    )

    parser.add_argument('-o', '--output', required=True, metavar='TSV',
                        help='Output TSV file')
    add_common_arguments(parser)

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    setup_logging(args)

    input_file = resolve_input(args)
    output_file = Path(args.output)

    config = PlotConfig()
    if args.margin is not None:
        config.layout.margin = args.margin

    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {output_file}")

    dataset = load_dataset(input_file)
    layout = LayoutEngine(config).calculate_layout(dataset, args.width)

    for species, reason in layout.skipped.items():
        logger.warning(f"Species '{species}' left out: {reason}")

    write_layout(layout, output_file)
    logger.info(f"✓ Layout saved: {output_file}")
