"""
Squares of the 9x9 board and their row/column/block lookup tables.
"""

from typing import Tuple

from .number import RangedInt, Row, Col, Block, _populate


# Block origin squares and the offsets of a block's squares from its origin.
_BLOCK_BASE = (0, 3, 6, 27, 30, 33, 54, 57, 60)
_BLOCK_OFFSET = (0, 1, 2, 9, 10, 11, 18, 19, 20)


@_populate
class Square(RangedInt):
    """Square index (0-80, row-major)."""
    MIN_VALUE = 0
    MAX_VALUE = 80
    NUM = 81

    @classmethod
    def from_col_row(cls, col: Col, row: Row) -> 'Square':
        return cls._ALL[9 * row + col]

    def row(self) -> Row:
        return ROW_OF[self]

    def col(self) -> Col:
        return COL_OF[self]

    def block(self) -> Block:
        return BLOCK_OF[self]

    @classmethod
    def row_all(cls, row: Row) -> Tuple['Square', ...]:
        """Squares of ``row`` in ascending order."""
        base = 9 * row
        return cls._ALL[base:base + 9]

    @classmethod
    def col_all(cls, col: Col) -> Tuple['Square', ...]:
        """Squares of ``col`` in ascending order."""
        return cls._ALL[col::9]

    @classmethod
    def block_all(cls, block: Block) -> Tuple['Square', ...]:
        """Squares of ``block`` in ascending order."""
        base = _BLOCK_BASE[block]
        return tuple(cls._ALL[base + offset] for offset in _BLOCK_OFFSET)


ROW_OF: Tuple[Row, ...] = tuple(Row.all()[i // 9] for i in range(Square.NUM))
COL_OF: Tuple[Col, ...] = tuple(Col.all()[i % 9] for i in range(Square.NUM))
BLOCK_OF: Tuple[Block, ...] = tuple(
    Block.all()[(i // 27) * 3 + (i % 9) // 3] for i in range(Square.NUM)
)
