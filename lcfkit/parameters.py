"""Per-level actor statistics stored as six arrays of 16-bit values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from lcfkit.stream import LcfReader, LcfWriter

_ARRAYS = 6
_VALUE_SIZE = 2


@dataclass
class Parameters:
    """Stat curves, one value per level."""

    maxhp: List[int] = field(default_factory=list)
    maxsp: List[int] = field(default_factory=list)
    attack: List[int] = field(default_factory=list)
    defense: List[int] = field(default_factory=list)
    spirit: List[int] = field(default_factory=list)
    agility: List[int] = field(default_factory=list)

    def _arrays(self) -> List[List[int]]:
        return [self.maxhp, self.maxsp, self.attack, self.defense, self.spirit, self.agility]


def read_parameters(stream: LcfReader, length: int) -> Parameters:
    """Read a chunk of ``length`` bytes split evenly over the six arrays."""
    count = (length // _ARRAYS) // _VALUE_SIZE
    return Parameters(*(stream.read_int16_array(count) for _ in range(_ARRAYS)))


def write_parameters(parameters: Parameters, stream: LcfWriter) -> None:
    """Write the six arrays one after another."""
    for values in parameters._arrays():
        stream.write_int16_array(values)


def parameters_size(parameters: Parameters) -> int:
    """Return the encoded size, taken from the length of ``maxhp``."""
    return len(parameters.maxhp) * _VALUE_SIZE * _ARRAYS