import io

import pytest

from lcfkit.inireader import IniReader

SAMPLE = (
    "; leading comment\n"
    "[RPG_RT]\n"
    "GameTitle = My Game\n"
    "Encoding=1252\n"
    "\n"
    "[Numbers]\n"
    "hex = 0x4D2\n"
    "dec = 1234\n"
    "neg = -17\n"
    "real = 2.5\n"
    "word = abc\n"
    "empty =\n"
    "flag = Yes\n"
    "off = off\n"
    "# another comment\n"
    "colon: value with colon\n"
    "commented = kept ; dropped\n"
)


@pytest.fixture
def reader():
    return IniReader(io.StringIO(SAMPLE))


def test_parses_without_error(reader):
    assert reader.parse_error() == 0


def test_lookup_is_case_insensitive(reader):
    assert reader.get("rpg_rt", "gametitle", "x") == "My Game"
    assert reader.get("RPG_RT", "GAMETITLE", "x") == "My Game"
    assert reader.has_value("Rpg_Rt", "Encoding")


def test_missing_returns_default(reader):
    assert reader.get("RPG_RT", "missing", "fallback") == "fallback"
    assert not reader.has_value("RPG_RT", "missing")
    assert not reader.has_value("Other", "GameTitle")


def test_get_string_empty_gives_default(reader):
    assert reader.get("Numbers", "empty", "def") == ""
    assert reader.get_string("Numbers", "empty", "def") == "def"
    assert reader.get_string("Numbers", "word", "def") == "abc"


def test_get_integer(reader):
    assert reader.get_integer("Numbers", "hex", 0) == 1234
    assert reader.get_integer("Numbers", "dec", 0) == 1234
    assert reader.get_integer("Numbers", "neg", 0) == -17
    assert reader.get_integer("Numbers", "word", 99) == 99
    assert reader.get_integer("Numbers", "missing", 7) == 7


def test_get_real(reader):
    assert reader.get_real("Numbers", "real", 0.0) == 2.5
    assert reader.get_real("Numbers", "dec", 0.0) == 1234.0
    assert reader.get_real("Numbers", "word", 1.5) == 1.5


def test_get_boolean(reader):
    assert reader.get_boolean("Numbers", "flag", False) is True
    assert reader.get_boolean("Numbers", "off", True) is False
    assert reader.get_boolean("Numbers", "word", True) is True
    assert reader.get_boolean("Numbers", "word", False) is False


def test_colon_separator_and_inline_comment(reader):
    assert reader.get("Numbers", "colon", "") == "value with colon"
    assert reader.get("Numbers", "commented", "") == "kept"


def test_repeated_names_are_joined():
    ini = IniReader(io.StringIO("[s]\nk = one\nk = two\n"))
    assert ini.get("s", "k", "") == "one\ntwo"


def test_continuation_line_appends():
    ini = IniReader(io.StringIO("[s]\nk = one\n  two\n"))
    assert ini.get("s", "k", "") == "one\ntwo"


def test_crlf_and_cr_line_endings():
    ini = IniReader(io.StringIO("[s]\r\na=1\rb=2\r\n"))
    assert ini.parse_error() == 0
    assert ini.get("s", "a", "") == "1"
    assert ini.get("s", "b", "") == "2"


def test_bad_line_reports_first_line_number():
    ini = IniReader(io.StringIO("[s]\nno separator here\n[broken\n"))
    assert ini.parse_error() == 2
    bad_section = IniReader(io.StringIO("[ok]\na=1\n[broken\n"))
    assert bad_section.parse_error() == 3


def test_parsing_continues_after_error():
    ini = IniReader(io.StringIO("garbage\n[s]\nk=v\n"))
    assert ini.parse_error() == 1
    assert ini.get("s", "k", "") == "v"


def test_binary_stream_with_bom():
    ini = IniReader(io.BytesIO(b"\xef\xbb\xbf[S]\nname=value\n"))
    assert ini.parse_error() == 0
    assert ini.get("s", "name", "") == "value"


def test_reads_file_from_path(tmp_path):
    path = tmp_path / "RPG_RT.ini"
    path.write_text("[RPG_RT]\nEncoding=932\n", encoding="utf-8")
    ini = IniReader(path)
    assert ini.parse_error() == 0
    assert ini.get_integer("RPG_RT", "Encoding", 0) == 932
    assert IniReader(str(path)).get("rpg_rt", "encoding", "") == "932"


def test_missing_file_reports_minus_one(tmp_path):
    ini = IniReader(tmp_path / "does_not_exist.ini")
    assert ini.parse_error() == -1
    assert ini.get("a", "b", "default") == "default"