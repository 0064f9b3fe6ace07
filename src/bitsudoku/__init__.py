"""
Bitmask backtracking solver and unique-puzzle generator for 9x9 sudoku.
"""

__version__ = '1.0.0'

from . import grid
from . import engine
from .grid import Number, Row, Col, Block, Square, Board
from .engine import Sudoku, GeneratorConfig, generate_unique

__all__ = [
    'grid',
    'engine',
    'Number',
    'Row',
    'Col',
    'Block',
    'Square',
    'Board',
    'Sudoku',
    'GeneratorConfig',
    'generate_unique',
]
