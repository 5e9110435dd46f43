"""Arguments and setup shared by subcommands"""

from __future__ import annotations
from typing import Optional
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace

from ..data import DEFAULT_CENTROMERE_TABLE

logger = logging.getLogger(__name__)


def add_common_arguments(parser: ArgumentParser) -> None:
    """
    Add input, canvas and debug options

    Args:
        parser: Subcommand parser
    """
    parser.add_argument('-i', '--input', metavar='TSV',
                        help='Centromere table (default: built-in human/mouse/yeast table)')
    parser.add_argument('--width', type=int,
                        help='Canvas width in pixels (default: 1200)')
    parser.add_argument('--margin', type=float,
                        help='Free space between the longest arm and the canvas edge, px (default: 50)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def setup_logging(args: Namespace) -> None:
    """
    Configure logging for a subcommand run

    Args:
        args: Parsed command-line arguments
    """
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def resolve_input(args: Namespace) -> Path:
    """
    Input table path, falling back to the built-in table

    Args:
        args: Parsed command-line arguments

    Returns:
        Path to an existing table
    """
    input_arg: Optional[str] = getattr(args, 'input', None)
    if input_arg is None:
        logger.info("Using built-in centromere table")
        input_file = Path(DEFAULT_CENTROMERE_TABLE)
    else:
        input_file = Path(input_arg)

    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")
    return input_file
