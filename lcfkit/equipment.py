"""Actor equipment record stored as five 16-bit item ids."""

from __future__ import annotations

from dataclasses import astuple, dataclass

from lcfkit import log
from lcfkit.stream import LcfReader, LcfWriter

_CHUNK_ID = 0x33
_FIELD_BYTES = 2
_SIZE = _FIELD_BYTES * 5


@dataclass
class Equipment:
    """Item ids worn in each equipment slot."""

    weapon_id: int = 0
    shield_id: int = 0
    armor_id: int = 0
    helmet_id: int = 0
    accessory_id: int = 0


def read_equipment(stream: LcfReader, length: int) -> Equipment:
    """Read an equipment chunk; a chunk of the wrong size is skipped with a warning."""
    if length != _SIZE:
        log.warning("Equipment has incorrect size %d (expected 10)", length)
        stream.skip(_CHUNK_ID, length, "Equipment")
        return Equipment()
    return Equipment(
        weapon_id=stream.read_int16(),
        shield_id=stream.read_int16(),
        armor_id=stream.read_int16(),
        helmet_id=stream.read_int16(),
        accessory_id=stream.read_int16(),
    )


def write_equipment(equipment: Equipment, stream: LcfWriter) -> None:
    """Write the five item ids."""
    stream.write_int16_array(list(astuple(equipment)))


def equipment_size(equipment: Equipment) -> int:
    """Return the encoded size: two bytes for each of the five item ids."""
    return _FIELD_BYTES * len(astuple(equipment))