"""
Board representation, validation and text formatting.
"""

import numbers
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .number import Number, Row, Col, Block
from .square import Square


Cell = Optional[Number]

_ASCII_WHITESPACE = " \t\n\r\x0c"


def _to_cell(value) -> Cell:
    """Convert ``None``/``0``/``1-9`` to a cell value."""
    if value is None:
        return None
    if not isinstance(value, numbers.Integral):
        raise ValueError(f"invalid number: {value!r}")
    value = int(value)
    if value == 0:
        return None
    number = Number.new(value)
    if number is None:
        raise ValueError(f"invalid number: {value}")
    return number


def _is_distinct(cells: Sequence[Cell], squares: Iterable[Square]) -> bool:
    """Check that the numbers on ``squares`` are pairwise distinct."""
    mask = 0
    for sq in squares:
        num = cells[sq]
        if num is None:
            continue
        bit = 1 << num
        if mask & bit:
            return False
        mask |= bit
    return True


class Board:
    """
    9x9 board indexed by ``Square``.

    Every row, column and block holds pairwise distinct numbers. The
    constructor rejects boards that break this; after construction the
    board is only mutated through ``Sudoku``, which keeps it intact.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: Iterable):
        """
        Build a validated board.
        
        Args:
            cells: 81 values in row-major order; ``None`` or ``0`` is blank
            
        Raises:
            ValueError: If the count is wrong, a value is out of range or a
                row/column/block contains a duplicate
        """
        inner = [_to_cell(value) for value in cells]
        if len(inner) != Square.NUM:
            raise ValueError(
                f"expected {Square.NUM} cells, got {len(inner)}"
            )

        for col in Col.all():
            if not _is_distinct(inner, Square.col_all(col)):
                raise ValueError(f"col {col} is illegal")
        for row in Row.all():
            if not _is_distinct(inner, Square.row_all(row)):
                raise ValueError(f"row {row} is illegal")
        for block in Block.all():
            if not _is_distinct(inner, Square.block_all(block)):
                raise ValueError(f"block {block} is illegal")

        self._cells: List[Cell] = inner

    @classmethod
    def empty(cls) -> 'Board':
        board = cls.__new__(cls)
        board._cells = [None] * Square.NUM
        return board

    @classmethod
    def parse(cls, text: str) -> 'Board':
        """
        Parse a board from text.
        
        Reads exactly 81 digits (``0`` is blank). ASCII whitespace is ignored.
        
        Args:
            text: Board text
            
        Returns:
            Validated board
            
        Raises:
            ValueError: On a bad character, a wrong digit count or an
                illegal board
        """
        cells: List[int] = []
        for c in text:
            if c in _ASCII_WHITESPACE:
                continue
            if len(cells) >= Square.NUM:
                raise ValueError("too many numbers")
            if c not in '0123456789':
                raise ValueError(f"invalid char: {c}")
            cells.append(ord(c) - ord('0'))

        if len(cells) != Square.NUM:
            raise ValueError("too few numbers")

        return cls(cells)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Board':
        """Build a validated board from a ``(9, 9)`` integer array."""
        array = np.asarray(array)
        if array.shape != (9, 9):
            raise ValueError(f"expected shape (9, 9), got {array.shape}")
        if not np.issubdtype(array.dtype, np.integer):
            raise ValueError(f"expected an integer array, got dtype {array.dtype}")
        return cls(int(v) for v in array.reshape(-1))

    def to_numpy(self) -> np.ndarray:
        """Return the board as a ``(9, 9)`` array with 0 for blanks."""
        flat = [0 if num is None else int(num) for num in self._cells]
        return np.array(flat, dtype=np.int8).reshape(9, 9)

    def __getitem__(self, sq: Square) -> Cell:
        return self._cells[sq]

    def __setitem__(self, sq: Square, num: Cell):
        self._cells[sq] = num

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None

    def copy(self) -> 'Board':
        board = Board.__new__(Board)
        board._cells = list(self._cells)
        return board

    def is_solved(self) -> bool:
        """Whether every square is filled."""
        return all(num is not None for num in self._cells)

    def hint_count(self) -> int:
        """Number of filled squares."""
        return sum(1 for num in self._cells if num is not None)

    def __str__(self) -> str:
        lines = []
        for row in Row.all():
            line = ' '.join(
                '0' if self._cells[sq] is None else str(self._cells[sq])
                for sq in Square.row_all(row)
            )
            lines.append(line + '\n')
        return ''.join(lines)

    def __repr__(self) -> str:
        digits = ''.join(
            '0' if num is None else str(num) for num in self._cells
        )
        return f"Board.parse({digits!r})"

    def pretty(self) -> str:
        """
        Boxed display of the board, ``.`` for blanks.
        
        Returns:
            Formatted string representation
        """
        horizontal_line = "+-------+-------+-------+"
        result = [horizontal_line]

        for row in Row.all():
            line = "|"
            for sq in Square.row_all(row):
                num = self._cells[sq]
                display_value = "." if num is None else str(num)
                line += f" {display_value}"
                if (sq.col() + 1) % 3 == 0:
                    line += " |"
            result.append(line)

            if (row + 1) % 3 == 0:
                result.append(horizontal_line)

        return "\n".join(result)
