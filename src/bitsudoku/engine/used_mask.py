"""
Number usage bookkeeping for rows, columns and blocks.
"""

from typing import Iterator, Tuple

from ..grid.number import Number
from ..grid.square import Square, ROW_OF, COL_OF, BLOCK_OF


MASK_NUMS = (1 << Number.NUM) - 1
ALL_UNUSED = (1 << 81) - 1

# Per-square bit offsets of the row/column/block window.
_ROW_SHIFT = tuple(9 * r for r in ROW_OF)
_COL_SHIFT = tuple(9 * c for c in COL_OF)
_BLOCK_SHIFT = tuple(9 * b for b in BLOCK_OF)

# Candidate numbers and their count for every 9-bit legal mask.
_MASK_NUMBERS: Tuple[Tuple[Number, ...], ...] = tuple(
    tuple(num for num in Number.all() if mask >> (num - 1) & 1)
    for mask in range(MASK_NUMS + 1)
)
_MASK_COUNT: Tuple[int, ...] = tuple(len(nums) for nums in _MASK_NUMBERS)


class UsedMasks:
    """
    Tracks which numbers are still unused in every row, column and block.

    Each mask packs 9 groups x 9 numbers; bit ``9 * g + (n - 1)`` is set
    while number ``n`` is unused in group ``g``. The masks must mirror the
    board they are paired with, so every placement calls ``use_number``
    once and every removal calls ``unuse_number`` with the same arguments.
    """

    __slots__ = ('row_mask', 'col_mask', 'block_mask')

    def __init__(self, row_mask: int, col_mask: int, block_mask: int):
        self.row_mask = row_mask
        self.col_mask = col_mask
        self.block_mask = block_mask

    @classmethod
    def all_unused(cls) -> 'UsedMasks':
        """Masks for an empty board."""
        return cls(ALL_UNUSED, ALL_UNUSED, ALL_UNUSED)

    @classmethod
    def all_used(cls) -> 'UsedMasks':
        """Masks for a solved board."""
        return cls(0, 0, 0)

    def use_number(self, sq: Square, num: Number):
        """Mark ``num`` as used in the groups of ``sq``."""
        bit = num - 1
        self.row_mask &= ~(1 << (_ROW_SHIFT[sq] + bit))
        self.col_mask &= ~(1 << (_COL_SHIFT[sq] + bit))
        self.block_mask &= ~(1 << (_BLOCK_SHIFT[sq] + bit))

    def unuse_number(self, sq: Square, num: Number):
        """Undo a matching ``use_number(sq, num)``."""
        bit = num - 1
        self.row_mask |= 1 << (_ROW_SHIFT[sq] + bit)
        self.col_mask |= 1 << (_COL_SHIFT[sq] + bit)
        self.block_mask |= 1 << (_BLOCK_SHIFT[sq] + bit)

    def candidate_mask(self, sq: Square) -> int:
        """9-bit mask of the numbers legal at ``sq``."""
        return (
            (self.row_mask >> _ROW_SHIFT[sq])
            & (self.col_mask >> _COL_SHIFT[sq])
            & (self.block_mask >> _BLOCK_SHIFT[sq])
            & MASK_NUMS
        )

    def is_legal(self, sq: Square, num: Number) -> bool:
        return bool(self.candidate_mask(sq) >> (num - 1) & 1)

    def candidates(self, sq: Square) -> Iterator[Number]:
        """Legal numbers at ``sq`` in ascending order, as of this call."""
        return iter(_MASK_NUMBERS[self.candidate_mask(sq)])

    def candidate_count(self, sq: Square) -> int:
        return _MASK_COUNT[self.candidate_mask(sq)]

    def copy(self) -> 'UsedMasks':
        return UsedMasks(self.row_mask, self.col_mask, self.block_mask)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UsedMasks):
            return NotImplemented
        return (
            self.row_mask == other.row_mask
            and self.col_mask == other.col_mask
            and self.block_mask == other.block_mask
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"UsedMasks(row_mask={self.row_mask:#x}, "
            f"col_mask={self.col_mask:#x}, block_mask={self.block_mask:#x})"
        )
