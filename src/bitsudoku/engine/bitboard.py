"""
Set of squares packed into a single integer.
"""

from typing import Iterator, Optional

from ..grid.square import Square


_SQUARES = Square.all()
_FULL = (1 << Square.NUM) - 1


class Bitboard:
    """Set of squares; bit ``i`` stands for ``Square(i)``."""

    __slots__ = ('bits',)

    def __init__(self, bits: int = 0):
        self.bits = bits & _FULL

    @classmethod
    def empty(cls) -> 'Bitboard':
        return cls(0)

    @classmethod
    def full(cls) -> 'Bitboard':
        return cls(_FULL)

    def is_zero(self) -> bool:
        return self.bits == 0

    def add(self, sq: Square):
        self.bits |= 1 << sq

    def remove(self, sq: Square):
        self.bits &= ~(1 << sq)

    def pop(self) -> Optional[Square]:
        """Remove and return the smallest square, or None if empty."""
        bits = self.bits
        if not bits:
            return None
        low = bits & -bits
        self.bits = bits ^ low
        return _SQUARES[low.bit_length() - 1]

    def copy(self) -> 'Bitboard':
        return Bitboard(self.bits)

    def __iter__(self) -> Iterator[Square]:
        # Drains a private copy; the set itself is untouched.
        bits = self.bits
        while bits:
            low = bits & -bits
            bits ^= low
            yield _SQUARES[low.bit_length() - 1]

    def __contains__(self, sq: Square) -> bool:
        return bool(self.bits >> sq & 1)

    def __len__(self) -> int:
        return bin(self.bits).count('1')

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bitboard):
            return NotImplemented
        return self.bits == other.bits

    __hash__ = None

    def __repr__(self) -> str:
        return f"Bitboard({self.bits:#x})"
