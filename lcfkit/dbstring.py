"""String type used for database storage."""

from __future__ import annotations

from typing import Iterator, Optional, Union

StrLike = Union[str, "DBString"]


def _as_str(value: object) -> Optional[str]:
    if isinstance(value, DBString):
        return value._value
    if isinstance(value, str):
        return value
    return None


class DBString:
    """A stored string value, compared by content with other DBStrings and str."""

    __slots__ = ("_value",)

    def __init__(self, value: StrLike = "", length: Optional[int] = None) -> None:
        text = _as_str(value)
        if text is None:
            raise TypeError(f"cannot build DBString from {type(value).__name__}")
        if length is not None:
            if length < 0 or length > len(text):
                raise ValueError("length out of range")
            text = text[:length]
        self._value = text

    def swap(self, other: "DBString") -> None:
        """Exchange contents with ``other``."""
        self._value, other._value = other._value, self._value

    def front(self) -> str:
        """Return the first character."""
        if not self._value:
            raise IndexError("front() on empty DBString")
        return self._value[0]

    def back(self) -> str:
        """Return the last character."""
        if not self._value:
            raise IndexError("back() on empty DBString")
        return self._value[-1]

    def empty(self) -> bool:
        """Return True if the string has no characters."""
        return not self._value

    def c_str(self) -> str:
        """Return the content as a plain str."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"DBString({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __getitem__(self, index):
        return self._value[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._value)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._value)

    def __eq__(self, other: object) -> bool:
        text = _as_str(other)
        if text is None:
            return NotImplemented
        return self._value == text

    def __lt__(self, other: object) -> bool:
        text = _as_str(other)
        if text is None:
            return NotImplemented
        return self._value < text

    def __le__(self, other: object) -> bool:
        text = _as_str(other)
        if text is None:
            return NotImplemented
        return self._value <= text

    def __gt__(self, other: object) -> bool:
        text = _as_str(other)
        if text is None:
            return NotImplemented
        return self._value > text

    def __ge__(self, other: object) -> bool:
        text = _as_str(other)
        if text is None:
            return NotImplemented
        return self._value >= text

    def __hash__(self) -> int:
        return hash(self._value)


def to_string(s: DBString) -> str:
    """Return the content of ``s`` as a plain str."""
    return str(s)