"""Read an INI file into case-insensitive section/name lookups."""

from __future__ import annotations

import math
import os
import re
from typing import IO, Optional, Union

_WHITESPACE = " \t\n\v\f\r"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_HEX_REAL = re.compile(
    r"[ \t\n\v\f\r]*([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)
_DEC_REAL = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})

Source = Union[str, bytes, "os.PathLike[str]", IO[str], IO[bytes]]


def _inline_comment_at(text: str) -> int:
    """Return the index where a ';' comment preceded by whitespace starts."""
    prev_space = False
    for pos, ch in enumerate(text):
        if ch == ";" and prev_space:
            return pos
        prev_space = ch in _WHITESPACE
    return len(text)


def _find_before_comment(text: str, chars: str) -> Optional[int]:
    cut = _inline_comment_at(text)
    for pos, ch in enumerate(text[:cut]):
        if ch in chars:
            return pos
    return None


def _make_key(section: str, name: str) -> str:
    return f"{section}={name}".lower()


class IniReader:
    """Parsed INI content.

    ``source`` is a file path or an open text or binary stream. Parse
    problems do not raise: ``parse_error()`` reports them.
    """

    def __init__(self, source: Source) -> None:
        self._values: dict[str, str] = {}
        if isinstance(source, (str, bytes, os.PathLike)):
            try:
                with open(source, "rb") as handle:
                    content: Union[str, bytes] = handle.read()
            except OSError:
                self._error = -1
                return
        else:
            content = source.read()
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")
        self._error = self._parse(content)

    def _store(self, section: str, name: str, value: str) -> None:
        key = _make_key(section, name)
        previous = self._values.get(key, "")
        self._values[key] = f"{previous}\n{value}" if previous else value

    def _parse(self, text: str) -> int:
        section = ""
        prev_name = ""
        error = 0
        for lineno, raw in enumerate(_LINE_BREAK.split(text), start=1):
            if lineno == 1 and raw.startswith("\ufeff"):
                raw = raw[1:]
            line = raw.rstrip(_WHITESPACE)
            start = line.lstrip(_WHITESPACE)
            if not start or start[0] in ";#":
                continue
            if prev_name and len(start) < len(line):
                value = start[: _inline_comment_at(start)].rstrip(_WHITESPACE)
                self._store(section, prev_name, value)
            elif start[0] == "[":
                end = _find_before_comment(start[1:], "]")
                if end is not None and start[1 + end] == "]":
                    section = start[1 : 1 + end]
                    prev_name = ""
                elif not error:
                    error = lineno
            else:
                pos = _find_before_comment(start, "=:")
                if pos is None:
                    if not error:
                        error = lineno
                    continue
                name = start[:pos].rstrip(_WHITESPACE)
                value = start[pos + 1 :].lstrip(_WHITESPACE)
                value = value[: _inline_comment_at(value)].rstrip(_WHITESPACE)
                self._store(section, name, value)
                prev_name = name
        return error

    def parse_error(self) -> int:
        """Return 0 on success, the first bad line number, or -1 if the file could not be opened."""
        return self._error

    def get(self, section: str, name: str, default: str) -> str:
        """Return the raw value, or ``default`` if it is not present."""
        return self._values.get(_make_key(section, name), default)

    def get_string(self, section: str, name: str, default: str) -> str:
        """Return the value, or ``default`` if it is missing or empty."""
        value = self.get(section, name, "")
        return value if value else default

    def get_integer(self, section: str, name: str, default: int) -> int:
        """Return a decimal, hex (0x) or octal (leading 0) integer value, or ``default``."""
        match = _INTEGER.match(self.get(section, name, ""))
        if match is None:
            return default
        sign, digits = match.groups()
        number = int(digits, 0) if digits[:2].lower() == "0x" else int(digits, 8 if digits.startswith("0") else 10)
        return -number if sign == "-" else number

    def get_real(self, section: str, name: str, default: float) -> float:
        """Return a floating point value, or ``default`` if none can be read."""
        text = self.get(section, name, "")
        match = _HEX_REAL.match(text)
        if match is not None:
            return float.fromhex(match.group(1))
        match = _DEC_REAL.match(text)
        if match is None:
            return default
        number = float(match.group(1))
        return number if not math.isnan(number) else math.nan

    def get_boolean(self, section: str, name: str, default: bool) -> bool:
        """Return true/yes/on/1 as True and false/no/off/0 as False, otherwise ``default``."""
        word = self.get(section, name, "").lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        return default

    def has_value(self, section: str, name: str) -> bool:
        """Return True if the section holds the given name."""
        return _make_key(section, name) in self._values