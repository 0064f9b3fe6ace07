"""
Grid package initialization.
"""

from .number import Number, Row, Col, Block
from .square import Square
from .board import Board

__all__ = [
    'Number',
    'Row',
    'Col',
    'Block',
    'Square',
    'Board',
]
