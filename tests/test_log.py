import pytest

from lcfkit import log
from lcfkit.log import Level


@pytest.fixture(autouse=True)
def _reset_log():
    log.set_handler(None)
    log.set_level(Level.DEBUG)
    yield
    log.set_handler(None)
    log.set_level(Level.DEBUG)


def _collector():
    received = []

    def handler(level, message, userdata):
        received.append((level, message, userdata))

    return received, handler


def test_default_handler_writes_prefixed_lines(capsys):
    log.debug("one")
    log.warning("two")
    log.error("three")
    err = capsys.readouterr().err
    assert err == "Debug: one\nWarning: two\nError: three\n"


def test_custom_handler_receives_level_message_and_userdata():
    received, handler = _collector()
    marker = object()
    log.set_handler(handler, marker)
    log.warning("Equipment has incorrect size %d (expected 10)", 12)
    assert received == [
        (Level.WARNING, "Equipment has incorrect size 12 (expected 10)", marker)
    ]


def test_formatting_hex(capsys):
    log.error("Misaligned at 0x%x", 255)
    assert capsys.readouterr().err == "Error: Misaligned at 0xff\n"


def test_message_without_args_is_not_formatted(capsys):
    log.debug("100% done")
    assert capsys.readouterr().err == "Debug: 100% done\n"


def test_level_filters_less_severe_messages(capsys):
    log.set_level(Level.WARNING)
    log.debug("hidden")
    log.warning("shown")
    log.error("also shown")
    assert capsys.readouterr().err == "Warning: shown\nError: also shown\n"


def test_error_level_only_passes_errors(capsys):
    log.set_level(Level.ERROR)
    log.debug("a")
    log.warning("b")
    log.error("c")
    assert capsys.readouterr().err == "Error: c\n"


def test_reset_handler_restores_stderr(capsys):
    received, handler = _collector()
    log.set_handler(handler, "data")
    log.set_handler(None, "ignored")
    log.error("back")
    assert received == []
    assert capsys.readouterr().err == "Error: back\n"


def test_long_message_is_truncated(capsys):
    log.debug("%s", "x" * 10000)
    assert capsys.readouterr().err == "Debug: " + "x" * 4095 + "\n"


@pytest.mark.parametrize(
    "level, expected",
    [
        (Level.DEBUG, "Debug: d\nWarning: w\nError: e\n"),
        (Level.WARNING, "Warning: w\nError: e\n"),
        (Level.ERROR, "Error: e\n"),
    ],
)
def test_level_ordering(capsys, level, expected):
    log.set_level(level)
    log.debug("d")
    log.warning("w")
    log.error("e")
    assert capsys.readouterr().err == expected