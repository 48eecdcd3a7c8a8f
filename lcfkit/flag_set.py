"""A fixed-width set of boolean flags indexed by enum members."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Iterable


def _position(tag: object) -> int:
    if isinstance(tag, Enum):
        return operator.index(tag.value)
    return operator.index(tag)


class FlagSet:
    """Bit set of ``size`` flags, addressed by enum members or integers."""

    __slots__ = ("_bits", "_size")

    def __init__(self, tags: Iterable[object] = (), size: int = 32) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._bits = 0
        for tag in tags:
            self._bits |= 1 << self._checked(tag)

    def _checked(self, tag: object) -> int:
        pos = _position(tag)
        if not 0 <= pos < self._size:
            raise IndexError(f"flag {tag!r} outside set of size {self._size}")
        return pos

    def __getitem__(self, tag: object) -> bool:
        return bool(self._bits >> self._checked(tag) & 1)

    def __setitem__(self, tag: object, value: bool) -> None:
        mask = 1 << self._checked(tag)
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask

    def count(self) -> int:
        """Return the number of set flags."""
        return bin(self._bits).count("1")

    def any(self) -> bool:
        """Return True if any flag is set."""
        return self._bits != 0

    def none(self) -> bool:
        """Return True if no flag is set."""
        return self._bits == 0

    def __len__(self) -> int:
        return self._size

    def _same_kind(self, other: object) -> bool:
        if not isinstance(other, FlagSet):
            return False
        if other._size != self._size:
            raise ValueError("flag sets differ in size")
        return True

    def _with_bits(self, bits: int) -> "FlagSet":
        result = FlagSet(size=self._size)
        result._bits = bits & ((1 << self._size) - 1)
        return result

    def __invert__(self) -> "FlagSet":
        return self._with_bits(~self._bits)

    def __and__(self, other: "FlagSet") -> "FlagSet":
        if not self._same_kind(other):
            return NotImplemented
        return self._with_bits(self._bits & other._bits)

    def __or__(self, other: "FlagSet") -> "FlagSet":
        if not self._same_kind(other):
            return NotImplemented
        return self._with_bits(self._bits | other._bits)

    def __xor__(self, other: "FlagSet") -> "FlagSet":
        if not self._same_kind(other):
            return NotImplemented
        return self._with_bits(self._bits ^ other._bits)

    def __iand__(self, other: "FlagSet") -> "FlagSet":
        if not self._same_kind(other):
            return NotImplemented
        self._bits &= other._bits
        return self

    def __ior__(self, other: "FlagSet") -> "FlagSet":
        if not self._same_kind(other):
            return NotImplemented
        self._bits |= other._bits
        return self

    def __ixor__(self, other: "FlagSet") -> "FlagSet":
        if not self._same_kind(other):
            return NotImplemented
        self._bits ^= other._bits
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlagSet):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    def __hash__(self) -> int:
        return hash((self._size, self._bits))

    def __repr__(self) -> str:
        return f"FlagSet(bits={self._bits:#x}, size={self._size})"