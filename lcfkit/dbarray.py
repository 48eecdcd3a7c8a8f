"""Fixed-size array used for database storage."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class DBArray(Generic[T]):
    """An array whose length is fixed at construction; elements may be replaced."""

    __slots__ = ("_items",)

    def __init__(
        self,
        items: Iterable[T] = (),
        count: Optional[int] = None,
        fill: Any = 0,
    ) -> None:
        if count is not None:
            if items:
                raise ValueError("give either items or count, not both")
            if count < 0:
                raise ValueError("count must not be negative")
            self._items = [fill] * count
        else:
            self._items = list(items)

    def swap(self, other: "DBArray[T]") -> None:
        """Exchange contents with ``other``."""
        self._items, other._items = other._items, self._items

    def front(self) -> T:
        """Return the first element."""
        if not self._items:
            raise IndexError("front() on empty DBArray")
        return self._items[0]

    def back(self) -> T:
        """Return the last element."""
        if not self._items:
            raise IndexError("back() on empty DBArray")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the array has no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError("DBArray does not support slice assignment")
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DBArray):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: "DBArray[T]") -> bool:
        if not isinstance(other, DBArray):
            return NotImplemented
        return self._items < other._items

    def __le__(self, other: "DBArray[T]") -> bool:
        if not isinstance(other, DBArray):
            return NotImplemented
        return self._items <= other._items

    def __gt__(self, other: "DBArray[T]") -> bool:
        if not isinstance(other, DBArray):
            return NotImplemented
        return self._items > other._items

    def __ge__(self, other: "DBArray[T]") -> bool:
        if not isinstance(other, DBArray):
            return NotImplemented
        return self._items >= other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DBArray({self._items!r})"