"""
Range-limited integer types used to index the puzzle.
"""

import numbers
from typing import Optional, Tuple, Type, TypeVar


T = TypeVar('T', bound='RangedInt')


class RangedInt(int):
    """
    Integer restricted to ``[MIN_VALUE, MAX_VALUE]``.

    ``cls(value)`` and ``cls.new(value)`` are checked. ``cls.new_unchecked``
    trusts the caller; the range is only asserted, so ``python -O`` drops it.
    """
    MIN_VALUE = 0
    MAX_VALUE = 0
    NUM = 1

    _ALL: Tuple['RangedInt', ...] = ()

    def __new__(cls: Type[T], inner: int) -> T:
        if not isinstance(inner, numbers.Integral):
            raise ValueError(f"{cls.__name__} must be an integer, got {inner!r}")
        if not cls.MIN_VALUE <= inner <= cls.MAX_VALUE:
            raise ValueError(
                f"{cls.__name__} out of range: {inner} "
                f"(expected {cls.MIN_VALUE}..{cls.MAX_VALUE})"
            )
        return int.__new__(cls, inner)

    @classmethod
    def new(cls: Type[T], inner: int) -> Optional[T]:
        """Return the value for ``inner``, or None if it is out of range."""
        if not isinstance(inner, numbers.Integral):
            return None
        if cls.MIN_VALUE <= inner <= cls.MAX_VALUE:
            return cls.new_unchecked(inner)
        return None

    @classmethod
    def new_unchecked(cls: Type[T], inner: int) -> T:
        """Build a value whose range is already guaranteed by the caller."""
        assert cls.MIN_VALUE <= inner <= cls.MAX_VALUE, inner
        return int.__new__(cls, inner)

    @classmethod
    def all(cls: Type[T]) -> Tuple[T, ...]:
        """All values in ascending order."""
        return cls._ALL

    def get(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    __str__ = int.__repr__


def _populate(cls: Type[T]) -> Type[T]:
    cls._ALL = tuple(
        cls.new_unchecked(i) for i in range(cls.MIN_VALUE, cls.MAX_VALUE + 1)
    )
    return cls


@_populate
class Number(RangedInt):
    """Number written in a square (1-9)."""
    MIN_VALUE = 1
    MAX_VALUE = 9
    NUM = 9


@_populate
class Row(RangedInt):
    """Row index (0-8, top to bottom)."""
    MIN_VALUE = 0
    MAX_VALUE = 8
    NUM = 9


@_populate
class Col(RangedInt):
    """Column index (0-8, left to right)."""
    MIN_VALUE = 0
    MAX_VALUE = 8
    NUM = 9


@_populate
class Block(RangedInt):
    """3x3 block index (0-8, left to right then top to bottom)."""
    MIN_VALUE = 0
    MAX_VALUE = 8
    NUM = 9
