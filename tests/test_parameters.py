import io

from lcfkit.parameters import Parameters, parameters_size, read_parameters, write_parameters
from lcfkit.stream import EngineVersion, LcfReader, LcfWriter


def _sample():
    return Parameters(
        maxhp=[100, 120, 140],
        maxsp=[10, 12, 14],
        attack=[5, 6, 7],
        defense=[4, 5, 6],
        spirit=[3, 4, 5],
        agility=[-1, 0, 32767],
    )


def _encode(parameters):
    buffer = io.BytesIO()
    write_parameters(parameters, LcfWriter(buffer, EngineVersion.E2K))
    return buffer.getvalue()


def test_round_trip():
    original = _sample()
    data = _encode(original)
    reader = LcfReader(data)
    assert read_parameters(reader, len(data)) == original
    assert reader.eof()


def test_size_matches_written_bytes():
    parameters = _sample()
    assert parameters_size(parameters) == len(_encode(parameters))


def test_empty_round_trip():
    data = _encode(Parameters())
    assert data == b""
    assert read_parameters(LcfReader(data), 0) == Parameters()


def test_arrays_follow_each_other():
    parameters = _sample()
    reader = LcfReader(_encode(parameters))
    assert reader.read_int16_array(3) == parameters.maxhp
    assert reader.read_int16_array(3) == parameters.maxsp