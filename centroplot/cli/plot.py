"""Plot subcommand - visualization"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction
import matplotlib.pyplot as plt

from ..config import PlotConfig
from ..io import load_dataset
from ..visualizer import ChromosomePlotter
from .common import add_common_arguments, resolve_input, setup_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Draw chromosomes centered on their centromeres'
    )

    parser.add_argument('-o', '--output', required=True, metavar='PNG',
                        help='Output image file')
    parser.add_argument('--preset', choices=['default', 'publication', 'presentation', 'compact'],
                        default='default',
                        help='Style preset (default: default)')
    add_common_arguments(parser)

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    setup_logging(args)

    input_file = resolve_input(args)
    plot_file = Path(args.output)

    config = PlotConfig.from_preset(args.preset)
    if args.margin is not None:
        config.layout.margin = args.margin

    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {plot_file}")
    logger.info(f"Preset: {args.preset}")

    dataset = load_dataset(input_file)

    logger.info("Generating plot...")
    plotter = ChromosomePlotter(config)
    fig = plotter.plot(dataset, output_file=plot_file, canvas_width=args.width)
    plt.close(fig)

    logger.info(f"✓ Plot saved: {plot_file}")
