"""
Random generation of uniquely solvable puzzles.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from ..grid.board import Board
from ..grid.square import Square
from .bitboard import Bitboard
from .sudoku import Sudoku


logger = logging.getLogger(__name__)

NODE_LIMIT = 10 ** 6


def check_node_limit(node_limit: int):
    """Reject budgets no solved-board attempt can fit in."""
    # The first check after one placement already enters 81 nodes.
    if node_limit <= Square.NUM:
        raise ValueError(
            f"node_limit must be greater than {Square.NUM}, got {node_limit}"
        )


@dataclass
class GeneratorConfig:
    """Puzzle generation configuration."""
    hint_min: int = 0
    node_limit: int = NODE_LIMIT
    seed: Optional[int] = None

    def __post_init__(self):
        if not 0 <= self.hint_min <= Square.NUM:
            raise ValueError(
                f"hint_min must be between 0 and {Square.NUM}, got {self.hint_min}"
            )
        check_node_limit(self.node_limit)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


def generate_solved(rng: random.Random, node_limit: int = NODE_LIMIT) -> Sudoku:
    """
    Build a random solved position.
    
    Numbers are dropped on random squares one at a time, each placement
    checked with a node-limited solvability search. A placement that
    leaves no completion is taken back; hitting the node limit throws the
    whole attempt away and starts over from an empty board.
    
    Args:
        rng: Random source
        node_limit: Node budget for each solvability check
        
    Returns:
        Fully solved position
    """
    check_node_limit(node_limit)
    attempt = 0
    while True:
        attempt += 1
        sudoku = _try_generate_solved(rng, node_limit)
        if sudoku is not None:
            return sudoku
        logger.debug("node limit hit on attempt %d, restarting", attempt)


def _try_generate_solved(rng: random.Random, node_limit: int) -> Optional[Sudoku]:
    sudoku = Sudoku(Board.empty())
    bb_vacant = Bitboard.full()

    while not bb_vacant.is_zero():
        sq = rng.choice(list(bb_vacant))
        num = rng.choice(tuple(sudoku.candidates(sq)))

        sudoku.put(sq, num)
        bb_vacant.remove(sq)
        ok = sudoku.is_solvable_limited(node_limit)
        if ok is None:
            return None
        if not ok:
            sudoku.take(sq)
            bb_vacant.add(sq)

    return sudoku


def generate_unique(
    hint_min: int = 0,
    rng: Optional[random.Random] = None,
    node_limit: int = NODE_LIMIT,
    config: Optional[GeneratorConfig] = None,
) -> Tuple[Sudoku, Sudoku]:
    """
    Generate a random puzzle with exactly one solution.
    
    Starts from a random solved position, which is trivially unique, and
    blanks squares in random order. Once a position is unique, any other
    solution after blanking one square must differ only on that square,
    so the blank is kept iff no other number there leads to a completion.
    Each square is tried once.
    
    Args:
        hint_min: Stop removing once this many hints remain
        rng: Random source (a fresh unseeded one if omitted)
        node_limit: Node budget used while building the solved position
        config: Replaces ``hint_min``, ``node_limit`` and ``rng``; pass
            either ``config`` or those arguments, not both
        
    Returns:
        Tuple of (puzzle, solution)
    """
    if config is not None:
        if rng is not None or hint_min != 0 or node_limit != NODE_LIMIT:
            raise TypeError(
                "pass either config or hint_min/rng/node_limit, not both"
            )
        hint_min = config.hint_min
        node_limit = config.node_limit
        rng = config.make_rng()
    if rng is None:
        rng = random.Random()

    sudoku = generate_solved(rng, node_limit)
    solution = sudoku.copy()
    hint = Square.NUM

    sqs = list(Square.all())
    rng.shuffle(sqs)
    for sq in sqs:
        if hint <= hint_min:
            break

        num = sudoku.take(sq)

        found = False
        for num_other in sudoku.candidates(sq):
            if num_other == num:
                continue
            sudoku.put(sq, num_other)
            found = sudoku.is_solvable()
            sudoku.take(sq)
            if found:
                break

        if found:
            sudoku.put(sq, num)
        else:
            hint -= 1

    logger.debug("generated puzzle with %d hints (hint_min=%d)", hint, hint_min)
    return sudoku, solution
