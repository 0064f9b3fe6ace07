"""
Engine package initialization.
"""

from .bitboard import Bitboard
from .used_mask import UsedMasks
from .search import (
    Outcome,
    SearchPolicy,
    KeepFirstSolution,
    CountSolutions,
    NodeBudget,
)
from .sudoku import Sudoku, calc_bb_vacant
from .generator import (
    NODE_LIMIT,
    check_node_limit,
    GeneratorConfig,
    generate_solved,
    generate_unique,
)

__all__ = [
    'Bitboard',
    'UsedMasks',
    'Outcome',
    'SearchPolicy',
    'KeepFirstSolution',
    'CountSolutions',
    'NodeBudget',
    'Sudoku',
    'calc_bb_vacant',
    'NODE_LIMIT',
    'check_node_limit',
    'GeneratorConfig',
    'generate_solved',
    'generate_unique',
]
