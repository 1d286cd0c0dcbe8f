"""Binary encoding of the value lists of a lexicon.

Layout (little endian): item count (u32), total value bytes (u32), the
NUL-terminated UTF-8 values, then per item its value count (u16) followed
by the byte size of each value including its terminator (u16).
"""

from __future__ import annotations

import struct
from typing import IO

from .dict_entry import DictEntry
from .errors import InvalidFormat
from .lexicon import Lexicon

_U32 = struct.Struct("<I")
_U16 = struct.Struct("<H")
_U16_MAX = 0xFFFF


def _read_int(stream: IO[bytes], fmt: struct.Struct) -> int:
    data = stream.read(fmt.size)
    if len(data) != fmt.size:
        raise InvalidFormat("Invalid OpenCC binary dictionary.")
    return fmt.unpack(data)[0]


def write_values(stream: IO[bytes], lexicon: Lexicon) -> None:
    """Write the values of every entry of lexicon to a binary stream."""
    encoded: list[list[bytes]] = []
    for entry in lexicon:
        if not entry.values:
            raise ValueError(f"entry {entry.key!r} has no value")
        if entry.num_values > _U16_MAX:
            raise ValueError(f"entry {entry.key!r} has too many values")
        values = [value.encode("utf-8") + b"\0" for value in entry.values]
        for raw in values:
            if len(raw) > _U16_MAX:
                raise ValueError(f"value of {entry.key!r} is too long")
        encoded.append(values)

    buffer = b"".join(raw for values in encoded for raw in values)
    stream.write(_U32.pack(len(encoded)))
    stream.write(_U32.pack(len(buffer)))
    stream.write(buffer)
    for values in encoded:
        stream.write(_U16.pack(len(values)))
        for raw in values:
            stream.write(_U16.pack(len(raw)))


def read_values(stream: IO[bytes]) -> Lexicon:
    """Read value lists back; the entries carry empty keys."""
    num_items = _read_int(stream, _U32)
    total = _read_int(stream, _U32)
    buffer = stream.read(total)
    if len(buffer) != total:
        raise InvalidFormat("Invalid OpenCC binary dictionary (valueBuffer)")

    lexicon = Lexicon()
    offset = 0
    for _ in range(num_items):
        num_values = _read_int(stream, _U16)
        values = []
        for _ in range(num_values):
            size = _read_int(stream, _U16)
            if offset + size > total:
                raise InvalidFormat("Invalid OpenCC binary dictionary (valueOffset)")
            raw = buffer[offset:offset + size].split(b"\0", 1)[0]
            try:
                values.append(raw.decode("utf-8"))
            except UnicodeDecodeError as exc:
                raise InvalidFormat("Invalid OpenCC binary dictionary (value)") from exc
            offset += size
        lexicon.add(DictEntry("", tuple(values)))
    return lexicon