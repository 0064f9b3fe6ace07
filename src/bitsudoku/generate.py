"""
Command-line generator: prints a random unique puzzle and its solution.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .engine import GeneratorConfig, NODE_LIMIT, generate_unique


def generate(config: GeneratorConfig, pretty: bool = False) -> str:
    """
    Generate a puzzle and render it with its solution.
    
    Args:
        config: Generation configuration
        pretty: Use the boxed display instead of the digit grid
        
    Returns:
        Puzzle, a blank line, then the solution
    """
    puzzle, solution = generate_unique(config=config)

    if pretty:
        return f"{puzzle.board.pretty()}\n\n{solution.board.pretty()}\n"
    return f"{puzzle.board}\n{solution.board}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for generation."""
    parser = argparse.ArgumentParser(
        description='Generate a uniquely solvable sudoku'
    )
    parser.add_argument(
        '--hint-min',
        type=int,
        default=0,
        help='Stop removing numbers once this many hints remain'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible output'
    )
    parser.add_argument(
        '--node-limit',
        type=int,
        default=NODE_LIMIT,
        help='Search node budget before a solved-grid attempt restarts'
    )
    parser.add_argument(
        '--pretty',
        action='store_true',
        help='Print boxed boards instead of digit grids'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log generation progress to stderr'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        config = GeneratorConfig(
            hint_min=args.hint_min,
            node_limit=args.node_limit,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    sys.stdout.write(generate(config, pretty=args.pretty))
    return 0


if __name__ == '__main__':
    sys.exit(main())
