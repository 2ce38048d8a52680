"""Layout subcommand - arrange items and print the grid"""

from __future__ import annotations
from typing import List
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import LayoutConfig, RenderConfig
from ..layout import LayoutEngine
from ..io import read_items, write_grid_tsv
from ..io.readers import split_items
from ..render import check_conservation, format_grid, plot_grid

logger = logging.getLogger(__name__)

DEMO_CHARS = (
    "AFCDABFEAF" "BDACFEAFCD" "AFBAEFDAFC" "BAFEDAFCBA" "FEADFCABFE"
    "AFEDACFBAF" "DCABFEAFBC" "AFEDAFCBAF" "DEABFCAFED" "AFBCAFDEAF"
)


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
        help='Arrange items into a periodic-table shaped grid'
    )

    # Input (built-in demo when neither is given)
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--input', metavar='FILE',
                        help='Text file with items to arrange')
    source.add_argument('--chars',
                        help='Items given directly on the command line')
    parser.add_argument('--mode', choices=['chars', 'tokens'], default='chars',
                        help='Split input into characters or whitespace/comma separated tokens (default: chars)')

    # Layout
    parser.add_argument('--sizing', choices=['fraction', 'sqrt'], default='fraction',
                        help='Grid sizing strategy (default: fraction)')
    parser.add_argument('--randomize', action='store_true',
                        help='Shuffle the order of groups')
    parser.add_argument('--seed', type=int,
                        help='Seed for group shuffling')
    parser.add_argument('--trim', action='store_true',
                        help='Drop trailing columns that hold no items')

    # Output
    parser.add_argument('--cell-width', type=int, default=3,
                        help='Characters per cell in text output (default: 3)')
    parser.add_argument('--tsv', metavar='FILE',
                        help='Also write the grid as TSV')
    parser.add_argument('--png', metavar='FILE',
                        help='Also draw the grid to an image file')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    return parser  # type: ignore[no-any-return]


def _load_items(args: Namespace) -> List[str]:
    if args.input:
        return read_items(args.input, args.mode)
    if args.chars is not None:
        return split_items(args.chars, args.mode)
    logger.info("No input given, using built-in demo characters")
    return list(DEMO_CHARS)


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    items = _load_items(args)

    config = LayoutConfig(
        sizing=args.sizing,
        randomize=args.randomize,
        seed=args.seed,
        trim_trailing=args.trim,
    )
    engine = LayoutEngine(config)

    def key_of(item: str) -> str:
        return item

    result = engine.calculate_layout(items, key_of, lambda: ' ')
    check_conservation(result.grid, len(items))

    logger.info(f"Groups in placement order: {', '.join(result.group_keys)}")
    print(format_grid(result.grid, args.cell_width))

    if args.tsv:
        write_grid_tsv(result.grid, args.tsv)

    if args.png:
        render_config = RenderConfig(cell_width=args.cell_width)
        plot_grid(result.grid, key_of, render_config, mask=result.mask, output_file=args.png)
