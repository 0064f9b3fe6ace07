"""
Command-line solver: reads a board and prints its solution.
"""

import argparse
import sys
from typing import List, Optional

from .grid import Board
from .engine import Sudoku


def solve_text(text: str) -> str:
    """
    Solve a board given as text.
    
    Args:
        text: 81 digits, 0 for blank, whitespace ignored
        
    Returns:
        Output text: an optional uniqueness warning followed by the solved
        board or ``NO SOLUTION``
        
    Raises:
        ValueError: If the board cannot be parsed
    """
    sudoku = Sudoku(Board.parse(text))

    output = []
    if not sudoku.is_unique_solvable():
        output.append("WARN: not uniquely solvable\n")

    if sudoku.solve():
        output.append(str(sudoku.board))
    else:
        output.append("NO SOLUTION\n")

    return ''.join(output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for solving."""
    parser = argparse.ArgumentParser(
        description='Solve a sudoku read from a file or stdin'
    )
    parser.add_argument(
        'input',
        nargs='?',
        default=None,
        help='Board file (81 digits, 0 for blank); defaults to stdin'
    )

    args = parser.parse_args(argv)

    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input) as f:
                text = f.read()
        output = solve_text(text)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
