"""
Backtracking search engine over a board and its number masks.
"""

import random
from typing import Iterator, Optional, Tuple

from ..grid.board import Board
from ..grid.number import Number
from ..grid.square import Square
from .bitboard import Bitboard
from .search import (
    Outcome,
    SearchPolicy,
    KeepFirstSolution,
    CountSolutions,
    NodeBudget,
)
from .used_mask import UsedMasks


def calc_bb_vacant(board: Board) -> Bitboard:
    """Bitboard of the blank squares of ``board``."""
    bb_vacant = Bitboard.empty()
    for sq in Square.all():
        if board[sq] is None:
            bb_vacant.add(sq)
    return bb_vacant


class Sudoku:
    """
    A puzzle position: a board plus the masks of numbers used on it.

    The instance owns its board exclusively. Searches mutate it in place
    and undo every placement they make on the way out, except ``solve``
    which keeps the completion it finds.
    """

    __slots__ = ('_board', '_used_masks')

    def __init__(self, board: Board):
        self._board = Board.empty()
        self._used_masks = UsedMasks.all_unused()
        for sq in Square.all():
            num = board[sq]
            if num is not None:
                self._put_number(sq, num)

    @property
    def board(self) -> Board:
        """Snapshot of the current board; writing to it does not affect the position."""
        return self._board.copy()

    def is_solved(self) -> bool:
        return self._board.is_solved()

    def copy(self) -> 'Sudoku':
        sudoku = Sudoku.__new__(Sudoku)
        sudoku._board = self._board.copy()
        sudoku._used_masks = self._used_masks.copy()
        return sudoku

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sudoku):
            return NotImplemented
        return self._board == other._board

    __hash__ = None

    def __repr__(self) -> str:
        return f"Sudoku({self._board!r})"

    def candidates(self, sq: Square) -> Iterator[Number]:
        """Numbers that can legally go on ``sq``, ascending."""
        return self._used_masks.candidates(sq)

    def put(self, sq: Square, num: Number) -> bool:
        """
        Try to write ``num`` on ``sq``.
        
        Returns:
            True if the move was legal and has been made
        """
        if self._board[sq] is not None or not self._used_masks.is_legal(sq, num):
            return False
        self._put_number(sq, num)
        return True

    def take(self, sq: Square) -> Optional[Number]:
        """Blank ``sq`` and return the number that was there, if any."""
        num = self._board[sq]
        if num is not None:
            self._remove_number(sq, num)
        return num

    def solve(self) -> bool:
        """
        Try to solve the position.
        
        On success the board holds the first completion in search order.
        Otherwise the board is left exactly as it was.
        
        Returns:
            True if a completion was found
        """
        outcome = self._search(calc_bb_vacant(self._board), KeepFirstSolution())
        return outcome is Outcome.FOUND

    def is_solvable(self) -> bool:
        """Whether any completion exists. The board is left unchanged."""
        outcome = self._search(calc_bb_vacant(self._board), SearchPolicy())
        return outcome is Outcome.FOUND

    def is_unique_solvable(self) -> bool:
        """Whether exactly one completion exists. The board is left unchanged."""
        policy = CountSolutions(cutoff=2)
        self._search(calc_bb_vacant(self._board), policy)
        return policy.count == 1

    def is_solvable_limited(self, node_limit: int) -> Optional[bool]:
        """
        ``is_solvable`` with a cap on visited search nodes.
        
        Args:
            node_limit: Search aborts once this many nodes have been entered
            
        Returns:
            True/False as ``is_solvable``, or None if the limit was hit.
            The board is left unchanged in every case.
        """
        outcome = self._search(calc_bb_vacant(self._board), NodeBudget(node_limit))
        if outcome is Outcome.LIMIT_EXCEEDED:
            return None
        return outcome is Outcome.FOUND

    @classmethod
    def generate_unique(
        cls,
        hint_min: int = 0,
        rng: Optional[random.Random] = None,
    ) -> Tuple['Sudoku', 'Sudoku']:
        """Random uniquely solvable puzzle and its solution. See ``generator``."""
        from .generator import generate_unique
        return generate_unique(hint_min, rng=rng)

    def _search(self, bb_vacant: Bitboard, policy: SearchPolicy) -> Optional[Outcome]:
        """
        Depth-first walk shared by all searches.
        
        Args:
            bb_vacant: Vacant squares still to decide; consumed by this call
            policy: Decides when to stop and whether to keep a completion
            
        Returns:
            The outcome that stopped the walk, or None if it ran out
        """
        stop = policy.enter()
        if stop is not None:
            return stop

        sq = self._pop_best_vacant_square(bb_vacant)
        if sq is None:
            return policy.solution_found()

        for num in self._used_masks.candidates(sq):
            self._put_number(sq, num)
            keep = False
            try:
                outcome = self._search(bb_vacant.copy(), policy)
                keep = outcome is Outcome.FOUND and policy.keep_solution
            finally:
                if not keep:
                    self._remove_number(sq, num)
            if outcome is not None:
                return outcome

        return None

    def _put_number(self, sq: Square, num: Number):
        self._board[sq] = num
        self._used_masks.use_number(sq, num)

    def _remove_number(self, sq: Square, num: Number):
        self._board[sq] = None
        self._used_masks.unuse_number(sq, num)

    def _pop_best_vacant_square(self, bb_vacant: Bitboard) -> Optional[Square]:
        """Pop the vacant square with the fewest candidates (lowest index on ties)."""
        best = None
        best_count = Number.NUM + 1
        for sq in bb_vacant:
            count = self._used_masks.candidate_count(sq)
            if count < best_count:
                best, best_count = sq, count
                if count == 0:
                    break
        if best is not None:
            bb_vacant.remove(best)
        return best
