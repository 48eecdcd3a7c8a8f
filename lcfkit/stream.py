"""Binary reader and writer for LCF chunk streams."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import BinaryIO, Iterable, List, Union

from lcfkit import log
from lcfkit.dbstring import DBString
from lcfkit.encoder import Encoder

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT_MAX_BYTES = 5
_UINT64_MAX_BYTES = 10

Source = Union[bytes, bytearray, memoryview, BinaryIO]


class EngineVersion(IntEnum):
    """Which engine format a file is written for."""

    E2K = 0
    E2K3 = 1


def _group_count(value: int) -> int:
    count = 1
    value >>= 7
    while value:
        count += 1
        value >>= 7
    return count


def _encode_compressed(value: int) -> bytes:
    out = bytearray([value & 0x7F])
    value >>= 7
    while value:
        out.append(0x80 | (value & 0x7F))
        value >>= 7
    out.reverse()
    return bytes(out)


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _check_uint64(value: int) -> int:
    if not 0 <= value <= _UINT64_MASK:
        raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
    return value


def int_size(value: int) -> int:
    """Return the number of bytes a compressed 32-bit integer occupies."""
    return _group_count(value & _UINT32_MASK)


def uint64_size(value: int) -> int:
    """Return the number of bytes a compressed unsigned 64-bit integer occupies."""
    return _group_count(_check_uint64(value))


class LcfReader:
    """Reads primitive values and strings from LCF data.

    ``source`` is a bytes-like object or a binary stream, which is read
    whole. Strings are converted from ``encoding`` (empty for UTF-8).
    """

    def __init__(self, source: Source, encoding: str = "") -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._data = bytes(source)
        else:
            self._data = bytes(source.read())
        self._pos = 0
        self._encoder = Encoder(encoding)
        if not self._encoder.is_ok():
            raise ValueError(f"unsupported encoding {encoding!r}")

    def _take(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("cannot read a negative number of bytes")
        end = self._pos + size
        if end > len(self._data):
            raise EOFError(f"wanted {size} bytes at 0x{self._pos:x}, data ends at 0x{len(self._data):x}")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _read_compressed(self, max_bytes: int) -> int:
        value = 0
        loops = 0
        while True:
            if self._pos >= len(self._data):
                return 0
            byte = self._data[self._pos]
            self._pos += 1
            value = (value << 7) | (byte & 0x7F)
            if loops > max_bytes:
                log.warning("Invalid compressed integer at %x", self._pos)
            loops += 1
            if not byte & 0x80:
                break
        return 0 if loops > max_bytes else value

    def read_int(self) -> int:
        """Read a compressed signed 32-bit integer; 0 at end of data or if malformed."""
        return _to_int32(self._read_compressed(_INT_MAX_BYTES))

    def read_uint64(self) -> int:
        """Read a compressed unsigned 64-bit integer; 0 at end of data or if malformed."""
        return self._read_compressed(_UINT64_MAX_BYTES - 1) & _UINT64_MASK

    def read_string(self, length: int) -> str:
        """Read ``length`` bytes and convert them to text."""
        return self._encoder.decode(self._take(length))

    def read_int16(self) -> int:
        """Read a little-endian signed 16-bit integer."""
        return int.from_bytes(self._take(2), "little", signed=True)

    def read_uint32(self) -> int:
        """Read a little-endian unsigned 32-bit integer."""
        return int.from_bytes(self._take(4), "little", signed=False)

    def read_uint8(self) -> int:
        """Read one unsigned byte."""
        return self._take(1)[0]

    def read_int16_array(self, count: int) -> List[int]:
        """Read ``count`` little-endian signed 16-bit integers."""
        raw = self._take(2 * count)
        return [int.from_bytes(raw[pos:pos + 2], "little", signed=True) for pos in range(0, len(raw), 2)]

    def peek(self) -> int:
        """Return the next byte without consuming it, or -1 at end of data."""
        return self._data[self._pos] if self._pos < len(self._data) else -1

    def tell(self) -> int:
        """Return the current read position."""
        return self._pos

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> None:
        """Move the read position as in ``io.IOBase.seek``."""
        if whence == os.SEEK_SET:
            target = offset
        elif whence == os.SEEK_CUR:
            target = self._pos + offset
        elif whence == os.SEEK_END:
            target = len(self._data) + offset
        else:
            raise ValueError(f"invalid whence {whence}")
        if target < 0:
            raise ValueError("cannot seek before the start of the data")
        self._pos = target

    def eof(self) -> bool:
        """Return True when no data is left."""
        return self._pos >= len(self._data)

    def skip(self, chunk_id: int, length: int, struct_name: str) -> None:
        """Skip an unread chunk of ``length`` bytes, logging that it was skipped."""
        log.warning(
            "Skipped Chunk %02X (%d byte) in lcf at %X (%s)",
            chunk_id,
            length,
            self._pos,
            struct_name,
        )
        self._pos = min(self._pos + max(length, 0), len(self._data))


class LcfWriter:
    """Writes primitive values and strings as LCF data to a binary stream."""

    def __init__(self, stream: BinaryIO, engine: EngineVersion, encoding: str = "") -> None:
        self._stream = stream
        self._engine = EngineVersion(engine)
        self._encoder = Encoder(encoding)
        if not self._encoder.is_ok():
            raise ValueError(f"unsupported encoding {encoding!r}")
        try:
            self._pos = stream.tell()
        except (AttributeError, OSError):
            self._pos = 0

    def _write(self, data: bytes) -> None:
        self._stream.write(data)
        self._pos += len(data)

    def write_int(self, value: int) -> None:
        """Write a compressed 32-bit integer; negative values take five bytes."""
        self._write(_encode_compressed(value & _UINT32_MASK))

    def write_uint64(self, value: int) -> None:
        """Write a compressed unsigned 64-bit integer."""
        self._write(_encode_compressed(_check_uint64(value)))

    def write_string(self, text: Union[str, DBString]) -> None:
        """Write text in the storage encoding, without a length prefix."""
        self._write(self.decode(text))

    def write_int16(self, value: int) -> None:
        """Write a little-endian signed 16-bit integer."""
        self._write(value.to_bytes(2, "little", signed=True))

    def write_uint32(self, value: int) -> None:
        """Write a little-endian unsigned 32-bit integer."""
        self._write(value.to_bytes(4, "little", signed=False))

    def write_uint8(self, value: int) -> None:
        """Write one unsigned byte."""
        self._write(value.to_bytes(1, "little", signed=False))

    def write_int16_array(self, values: Iterable[int]) -> None:
        """Write each value as a little-endian signed 16-bit integer."""
        self._write(b"".join(v.to_bytes(2, "little", signed=True) for v in values))

    def tell(self) -> int:
        """Return the current write position."""
        return self._pos

    def decode(self, text: Union[str, DBString]) -> bytes:
        """Return ``text`` converted to the storage encoding."""
        return self._encoder.encode(text)

    def is_2k3(self) -> bool:
        """Return True when writing the 2k3 format."""
        return self._engine is EngineVersion.E2K3