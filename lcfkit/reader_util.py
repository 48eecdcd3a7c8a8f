"""Helpers shared by the file readers."""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def get_element(seq: Sequence[T], one_based_index: int) -> Optional[T]:
    """Return ``seq[one_based_index - 1]``, or None when that index is out of bounds."""
    if one_based_index < 1 or one_based_index > len(seq):
        return None
    return seq[one_based_index - 1]