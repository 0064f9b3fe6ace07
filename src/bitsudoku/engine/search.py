"""
Termination policies for the backtracking traversal in ``Sudoku``.

Every search walks the board the same way: take the most constrained
vacant square, try its candidates in ascending order, recurse, undo. The
policies only decide when the walk stops and what it reports.
"""

from enum import Enum
from typing import Optional


class Outcome(Enum):
    """Reason a traversal stopped early."""
    FOUND = "found"
    CUTOFF = "cutoff"
    LIMIT_EXCEEDED = "limit-exceeded"


class SearchPolicy:
    """
    Base policy: stop at the first completion and undo everything.
    
    Hooks return ``None`` to keep searching or an ``Outcome`` to stop.
    """
    keep_solution = False

    def enter(self) -> Optional[Outcome]:
        """Called once per recursive entry."""
        return None

    def solution_found(self) -> Optional[Outcome]:
        """Called when every square is filled."""
        return Outcome.FOUND


class KeepFirstSolution(SearchPolicy):
    """Stop at the first completion and leave it on the board."""
    keep_solution = True


class CountSolutions(SearchPolicy):
    """Count completions, stopping once ``cutoff`` have been seen."""

    def __init__(self, cutoff: int = 2):
        self.cutoff = cutoff
        self.count = 0

    def solution_found(self) -> Optional[Outcome]:
        self.count += 1
        if self.count >= self.cutoff:
            return Outcome.CUTOFF
        return None


class NodeBudget(SearchPolicy):
    """Stop at the first completion, or give up after ``node_limit`` nodes."""

    def __init__(self, node_limit: int):
        self.node_limit = node_limit
        self.node_count = 0

    def enter(self) -> Optional[Outcome]:
        self.node_count += 1
        if self.node_count >= self.node_limit:
            return Outcome.LIMIT_EXCEEDED
        return None
