import io
import os
import struct

import pytest

from lcfkit import log
from lcfkit.stream import (
    EngineVersion,
    LcfReader,
    LcfWriter,
    int_size,
    uint64_size,
)


@pytest.fixture
def records():
    captured = []
    log.set_handler(lambda level, message, userdata: captured.append((level, message)))
    yield captured
    log.set_handler(None)


def _writer(encoding=""):
    buffer = io.BytesIO()
    return buffer, LcfWriter(buffer, EngineVersion.E2K, encoding)


INT_VALUES = [0, 1, 127, 128, 16383, 16384, 2**31 - 1, -1, -(2**31)]


def test_write_int_wire_bytes():
    buffer, writer = _writer()
    writer.write_int(128)
    assert buffer.getvalue() == b"\x81\x00"


@pytest.mark.parametrize("value", INT_VALUES)
def test_int_round_trip_and_size(value):
    buffer, writer = _writer()
    writer.write_int(value)
    data = buffer.getvalue()
    assert len(data) == int_size(value)
    reader = LcfReader(data)
    assert reader.read_int() == value
    assert reader.eof()


def test_uint64_rejects_negative():
    _, writer = _writer()
    with pytest.raises(ValueError):
        writer.write_uint64(-1)


def test_read_int_at_end_returns_zero():
    assert LcfReader(b"").read_int() == 0


def test_overlong_int_warns_and_returns_zero(records):
    reader = LcfReader(b"\x80" * 6 + b"\x01")
    assert reader.read_int() == 0
    assert any(level is log.Level.WARNING for level, _ in records)


@pytest.mark.parametrize("value", [-32768, -1, 0, 32767])
def test_int16_is_little_endian(value):
    buffer, writer = _writer()
    writer.write_int16(value)
    assert struct.unpack("<h", buffer.getvalue())[0] == value
    assert LcfReader(buffer.getvalue()).read_int16() == value


def test_int16_overflow_raises():
    _, writer = _writer()
    with pytest.raises(OverflowError):
        writer.write_int16(40000)


def test_uint32_and_uint8_round_trip():
    buffer, writer = _writer()
    writer.write_uint32(4000000000)
    writer.write_uint8(200)
    reader = LcfReader(buffer.getvalue())
    assert reader.read_uint32() == 4000000000
    assert reader.read_uint8() == 200
    assert reader.eof()


def test_int16_array_round_trip():
    values = [1, -2, 300, -32768]
    buffer, writer = _writer()
    writer.write_int16_array(values)
    assert LcfReader(buffer.getvalue()).read_int16_array(len(values)) == values


def test_string_round_trip_with_code_page():
    buffer, writer = _writer("1252")
    assert len(writer.decode("é")) == len("é")
    writer.write_string("café")
    reader = LcfReader(buffer.getvalue(), "1252")
    assert reader.read_string(len(buffer.getvalue())) == "café"


def test_short_string_read_raises():
    with pytest.raises(EOFError):
        LcfReader(b"ab").read_string(3)


def test_unknown_encoding_raises(records):
    with pytest.raises(ValueError):
        LcfReader(b"", "no-such-encoding")


def test_peek_seek_and_eof():
    reader = LcfReader(io.BytesIO(b"\x05\x06"))
    assert reader.peek() == 5
    reader.seek(1, os.SEEK_CUR)
    assert reader.tell() == 1
    assert reader.peek() == 6
    reader.seek(0, os.SEEK_END)
    assert reader.eof()
    assert reader.peek() == -1
    with pytest.raises(ValueError):
        reader.seek(-5)


def test_skip_advances_and_logs(records):
    reader = LcfReader(b"\x01\x02\x03\x04")
    reader.skip(0x33, 3, "Thing")
    assert reader.tell() == 3
    assert records and records[0][0] is log.Level.WARNING


def test_writer_tell_tracks_output():
    buffer, writer = _writer()
    writer.write_int(300)
    writer.write_string("abc")
    assert writer.tell() == len(buffer.getvalue())


def test_is_2k3():
    assert LcfWriter(io.BytesIO(), EngineVersion.E2K3).is_2k3()
    assert not LcfWriter(io.BytesIO(), EngineVersion.E2K).is_2k3()