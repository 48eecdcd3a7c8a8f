"""Move route commands and the lists that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List

from lcfkit.dbstring import DBString
from lcfkit.stream import LcfReader, LcfWriter, int_size


class MoveCode(IntEnum):
    """Move route command identifiers."""

    MOVE_UP = 0
    MOVE_RIGHT = 1
    MOVE_DOWN = 2
    MOVE_LEFT = 3
    MOVE_UPRIGHT = 4
    MOVE_DOWNRIGHT = 5
    MOVE_DOWNLEFT = 6
    MOVE_UPLEFT = 7
    MOVE_RANDOM = 8
    MOVE_TOWARDS_HERO = 9
    MOVE_AWAY_FROM_HERO = 10
    MOVE_FORWARD = 11
    FACE_UP = 12
    FACE_RIGHT = 13
    FACE_DOWN = 14
    FACE_LEFT = 15
    TURN_90_DEGREE_RIGHT = 16
    TURN_90_DEGREE_LEFT = 17
    TURN_180_DEGREE = 18
    TURN_90_DEGREE_RANDOM = 19
    FACE_RANDOM_DIRECTION = 20
    FACE_HERO = 21
    FACE_AWAY_FROM_HERO = 22
    WAIT = 23
    BEGIN_JUMP = 24
    END_JUMP = 25
    LOCK_FACING = 26
    UNLOCK_FACING = 27
    INCREASE_MOVEMENT_SPEED = 28
    DECREASE_MOVEMENT_SPEED = 29
    INCREASE_MOVEMENT_FREQUENCE = 30
    DECREASE_MOVEMENT_FREQUENCE = 31
    SWITCH_ON = 32
    SWITCH_OFF = 33
    CHANGE_GRAPHIC = 34
    PLAY_SOUND_EFFECT = 35
    WALK_EVERYWHERE_ON = 36
    WALK_EVERYWHERE_OFF = 37
    STOP_ANIMATION = 38
    START_ANIMATION = 39
    INCREASE_TRANSP = 40
    DECREASE_TRANSP = 41


_SWITCHES = (MoveCode.SWITCH_ON, MoveCode.SWITCH_OFF)


@dataclass
class MoveCommand:
    """One step of a move route; which parameters are stored depends on the command."""

    command_id: int = 0
    parameter_string: DBString = field(default_factory=DBString)
    parameter_a: int = 0
    parameter_b: int = 0
    parameter_c: int = 0


def read_move_command(stream: LcfReader) -> MoveCommand:
    """Read one move command and the parameters its code carries."""
    command = MoveCommand(command_id=stream.read_int())
    code = command.command_id
    if code in _SWITCHES:
        command.parameter_a = stream.read_int()
    elif code == MoveCode.CHANGE_GRAPHIC:
        command.parameter_string = DBString(stream.read_string(stream.read_int()))
        command.parameter_a = stream.read_int()
    elif code == MoveCode.PLAY_SOUND_EFFECT:
        command.parameter_string = DBString(stream.read_string(stream.read_int()))
        command.parameter_a = stream.read_int()
        command.parameter_b = stream.read_int()
        command.parameter_c = stream.read_int()
    return command


def write_move_command(command: MoveCommand, stream: LcfWriter) -> None:
    """Write one move command and the parameters its code carries."""
    code = command.command_id
    stream.write_int(code)
    if code in _SWITCHES:
        stream.write_int(command.parameter_a)
    elif code in (MoveCode.CHANGE_GRAPHIC, MoveCode.PLAY_SOUND_EFFECT):
        stream.write_int(len(stream.decode(command.parameter_string)))
        stream.write_string(command.parameter_string)
        stream.write_int(command.parameter_a)
        if code == MoveCode.PLAY_SOUND_EFFECT:
            stream.write_int(command.parameter_b)
            stream.write_int(command.parameter_c)


def move_command_size(command: MoveCommand, stream: LcfWriter) -> int:
    """Return the number of bytes ``write_move_command`` produces."""
    code = command.command_id
    total = int_size(code)
    if code in _SWITCHES:
        total += int_size(command.parameter_a)
    elif code in (MoveCode.CHANGE_GRAPHIC, MoveCode.PLAY_SOUND_EFFECT):
        encoded_len = len(stream.decode(command.parameter_string))
        total += int_size(encoded_len) + encoded_len + int_size(command.parameter_a)
        if code == MoveCode.PLAY_SOUND_EFFECT:
            total += int_size(command.parameter_b) + int_size(command.parameter_c)
    return total


def read_move_commands(stream: LcfReader, length: int) -> List[MoveCommand]:
    """Read move commands filling ``length`` bytes."""
    end = stream.tell() + length
    commands: List[MoveCommand] = []
    while stream.tell() < end and not stream.eof():
        commands.append(read_move_command(stream))
    return commands


def write_move_commands(commands: Iterable[MoveCommand], stream: LcfWriter) -> None:
    """Write the commands one after another."""
    for command in commands:
        write_move_command(command, stream)


def move_commands_size(commands: Iterable[MoveCommand], stream: LcfWriter) -> int:
    """Return the number of bytes ``write_move_commands`` produces."""
    return sum(move_command_size(command, stream) for command in commands)