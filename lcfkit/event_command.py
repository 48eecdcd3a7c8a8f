"""Event commands and the zero-terminated lists that hold them."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List

from lcfkit import log
from lcfkit.dbarray import DBArray
from lcfkit.dbstring import DBString
from lcfkit.stream import LcfReader, LcfWriter, int_size

_TERMINATOR_INTS = 4


@dataclass
class EventCommand:
    """One instruction of an event script."""

    code: int = 0
    indent: int = 0
    string: DBString = field(default_factory=DBString)
    parameters: DBArray = field(default_factory=DBArray)


def read_event_command(stream: LcfReader) -> EventCommand:
    """Read one command; a command with code 0 carries no further fields."""
    command = EventCommand(code=stream.read_int())
    if command.code != 0:
        command.indent = stream.read_int()
        command.string = DBString(stream.read_string(stream.read_int()))
        count = stream.read_int()
        params = [stream.read_int() for _ in range(max(count, 0))]
        if params:
            command.parameters = DBArray(params)
    return command


def write_event_command(command: EventCommand, stream: LcfWriter) -> None:
    """Write one command with all its fields."""
    encoded = stream.decode(command.string)
    stream.write_int(command.code)
    stream.write_int(command.indent)
    stream.write_int(len(encoded))
    stream.write_string(command.string)
    stream.write_int(len(command.parameters))
    for value in command.parameters:
        stream.write_int(value)


def event_command_size(command: EventCommand, stream: LcfWriter) -> int:
    """Return the number of bytes ``write_event_command`` produces."""
    encoded_len = len(stream.decode(command.string))
    return (
        int_size(command.code)
        + int_size(command.indent)
        + int_size(encoded_len)
        + encoded_len
        + int_size(len(command.parameters))
        + sum(int_size(value) for value in command.parameters)
    )


def _recover_end(stream: LcfReader) -> None:
    """Scan forward for four zero bytes that end a command list."""
    while True:
        zeros = 0
        while zeros < _TERMINATOR_INTS and not stream.eof():
            if stream.read_uint8() != 0:
                break
            zeros += 1
        if zeros == _TERMINATOR_INTS or stream.eof():
            return


def read_event_commands(stream: LcfReader, length: int) -> List[EventCommand]:
    """Read commands until the four zero bytes that end the list.

    If the list runs past ``length`` bytes it is treated as corrupted: a
    warning is logged and the stream is moved to the next four zero bytes.
    """
    commands: List[EventCommand] = []
    end = stream.tell() + length
    while True:
        if stream.peek() == 0:
            stream.seek(_TERMINATOR_INTS, os.SEEK_CUR)
            break
        if stream.tell() >= end or stream.eof():
            stream.seek(end)
            log.warning("Event command corrupted at %d", stream.tell())
            _recover_end(stream)
            break
        commands.append(read_event_command(stream))
    return commands


def write_event_commands(commands: Iterable[EventCommand], stream: LcfWriter) -> None:
    """Write the commands followed by four zero bytes."""
    for command in commands:
        write_event_command(command, stream)
    for _ in range(_TERMINATOR_INTS):
        stream.write_int(0)


def event_commands_size(commands: Iterable[EventCommand], stream: LcfWriter) -> int:
    """Return the number of bytes ``write_event_commands`` produces."""
    return sum(event_command_size(command, stream) for command in commands) + _TERMINATOR_INTS