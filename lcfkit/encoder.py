"""Conversion between text and the byte encoding used in stored files."""

from __future__ import annotations

import codecs
import re
from typing import Optional, Union

from lcfkit import log
from lcfkit.dbstring import DBString

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _filter_utf8_compatible(encoding: str) -> str:
    if encoding in ("utf-8", "UTF-8", "65001"):
        return ""
    try:
        if codecs.lookup(encoding).name == "utf-8":
            return ""
    except LookupError:
        pass
    return encoding


class Encoder:
    """Converts text to and from a storage encoding.

    An empty name, or any name for UTF-8, means the data is stored as
    UTF-8. A name that is a positive number is read as a Windows code page.
    """

    def __init__(self, encoding: str = "") -> None:
        self._encoding = _filter_utf8_compatible(encoding)
        self._codec: Optional[str] = None
        if self._encoding:
            self._codec = self._open(self._encoding)

    @staticmethod
    def _open(encoding: str) -> Optional[str]:
        code_page = _atoi(encoding)
        storage = f"cp{code_page}" if code_page > 0 else encoding
        try:
            return codecs.lookup(storage).name
        except LookupError:
            log.error('No converter for encoding "%s"', storage)
            return None

    @property
    def encoding(self) -> str:
        """The configured storage encoding; empty for UTF-8."""
        return self._encoding

    def is_ok(self) -> bool:
        """Return True if conversion to and from the storage encoding is possible."""
        return not self._encoding or self._codec is not None

    def _require_codec(self) -> Optional[str]:
        if not self._encoding:
            return None
        if self._codec is None:
            raise LookupError(f"no converter for encoding {self._encoding!r}")
        return self._codec

    def encode(self, data: Union[str, DBString]) -> bytes:
        """Convert text to bytes in the storage encoding."""
        text = str(data)
        codec = self._require_codec()
        if not text:
            return b""
        if codec is None:
            return text.encode("utf-8", errors="surrogateescape")
        return text.encode(codec, errors="replace")

    def decode(self, data: bytes) -> str:
        """Convert bytes in the storage encoding to text."""
        codec = self._require_codec()
        if not data:
            return ""
        if codec is None:
            return bytes(data).decode("utf-8", errors="surrogateescape")
        return bytes(data).decode(codec, errors="replace")