# lcfkit

Building blocks for working with the binary LCF data format used by
RPG Maker 2000 and 2003 games: the compressed integer encoding, encoded
strings, and the fixed-layout records found inside LCF chunks.

## Installation

```
pip install lcfkit
```

For running the test suite:

```
pip install "lcfkit[test]"
pytest
```

## What is inside

- `lcfkit.stream` – `LcfReader` reads compressed integers (`read_int`,
  `read_uint64`), little-endian primitives (`read_int16`, `read_uint32`,
  `read_uint8`, `read_int16_array`) and encoded strings from bytes or a
  binary stream, with `peek`, `tell`, `seek`, `eof` and `skip`.
  `LcfWriter` writes the same values to a binary stream. `int_size` and
  `uint64_size` give the encoded length of a compressed integer.
  `EngineVersion` (`E2K`, `E2K3`) selects the engine format.
- `lcfkit.encoder` – `Encoder` converts text to and from a storage
  encoding. An empty name or any UTF-8 name means UTF-8; a positive
  number is taken as a Windows code page (for example `"1252"`).
- `lcfkit.inireader` – `IniReader` reads INI files such as `RPG_RT.ini`
  from a path or an open stream, with case-insensitive lookups and the
  getters `get`, `get_string`, `get_integer`, `get_real`, `get_boolean`
  and `has_value`. `parse_error()` returns 0, the first bad line number,
  or -1 if the file could not be opened.
- `lcfkit.dbarray.DBArray`, `lcfkit.dbstring.DBString`,
  `lcfkit.flag_set.FlagSet` – small containers used by the records.
- `lcfkit.equipment` (`Equipment`), `lcfkit.rect` (`Rect`),
  `lcfkit.parameters` (`Parameters`), `lcfkit.event_command`
  (`EventCommand`) and `lcfkit.move_command` (`MoveCommand`, `MoveCode`) –
  dataclasses with `read_*`, `write_*` and `*_size` functions for each
  record and, for event and move commands, for lists of them.
- `lcfkit.reader_util.get_element` – one-based lookup that returns
  `None` when the index is out of range.
- `lcfkit.log` – levelled diagnostics (`debug`, `warning`, `error`) with
  a replaceable handler (`set_handler`) and a threshold (`set_level`).

## Example

```python
import io

from lcfkit.dbarray import DBArray
from lcfkit.dbstring import DBString
from lcfkit.event_command import EventCommand, read_event_commands, write_event_commands
from lcfkit.stream import EngineVersion, LcfReader, LcfWriter

buffer = io.BytesIO()
writer = LcfWriter(buffer, EngineVersion.E2K)
commands = [EventCommand(code=10110, indent=0, string=DBString("Hello"), parameters=DBArray([1, 2]))]
write_event_commands(commands, writer)

data = buffer.getvalue()
reader = LcfReader(data)
assert read_event_commands(reader, len(data)) == commands
```

Diagnostics go to standard error by default; route them elsewhere with
`lcfkit.log.set_handler` and filter them with `lcfkit.log.set_level`.

## What it does not do

lcfkit handles individual records and primitive values only. It does not
load or save whole database, map tree, map or save files, has no XML
import or export, and provides no command-line tool.