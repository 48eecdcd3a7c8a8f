"""Map tree area rectangle stored as four 32-bit coordinates."""

from __future__ import annotations

from dataclasses import astuple, dataclass

from lcfkit.stream import LcfReader, LcfWriter

_FIELD_BYTES = 4
_SIZE = _FIELD_BYTES * 4


@dataclass
class Rect:
    """Left, top, right and bottom edges."""

    l: int = 0  # noqa: E741
    t: int = 0
    r: int = 0
    b: int = 0


def read_rect(stream: LcfReader, length: int) -> Rect:
    """Read a rectangle chunk, which must be sixteen bytes long."""
    if length != _SIZE:
        raise ValueError(f"Rect chunk has size {length}, expected {_SIZE}")
    return Rect(
        l=stream.read_uint32(),
        t=stream.read_uint32(),
        r=stream.read_uint32(),
        b=stream.read_uint32(),
    )


def write_rect(rect: Rect, stream: LcfWriter) -> None:
    """Write the four edges."""
    for value in astuple(rect):
        stream.write_uint32(value)


def rect_size(rect: Rect) -> int:
    """Return the encoded size: four bytes for each of the four edges."""
    return _FIELD_BYTES * len(astuple(rect))