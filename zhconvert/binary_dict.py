"""Lexicon storage in a compact binary layout with string buffers and offsets.

Layout (little endian, every integer 64 bits): item count, key buffer size,
the NUL-terminated UTF-8 keys, value buffer size, the NUL-terminated UTF-8
values, then per item its value count, its key offset and one offset per value.
"""

from __future__ import annotations

import struct
from itertools import accumulate
from typing import IO

from .dict_entry import DictEntry
from .errors import InvalidFormat
from .lexicon import Lexicon

_SIZE = struct.Struct("<Q")


def _read_size(stream: IO[bytes], what: str) -> int:
    data = stream.read(_SIZE.size)
    if len(data) != _SIZE.size:
        raise InvalidFormat(f"Invalid OpenCC binary dictionary ({what})")
    return _SIZE.unpack(data)[0]


def _read_buffer(stream: IO[bytes], size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise InvalidFormat(f"Invalid OpenCC binary dictionary ({what})")
    return data


def _c_string(buffer: bytes, offset: int, what: str) -> str:
    if offset >= len(buffer):
        raise InvalidFormat(f"Invalid OpenCC binary dictionary ({what})")
    raw = buffer[offset:].split(b"\0", 1)[0]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidFormat(f"Invalid OpenCC binary dictionary ({what})") from exc


def _offsets(chunks: list[bytes]) -> list[int]:
    return list(accumulate((len(c) for c in chunks), initial=0))[:-1]


class BinaryDict:
    """A lexicon that can be written to and read from the binary layout."""

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon

    def key_max_length(self) -> int:
        return max((entry.key_length for entry in self.lexicon), default=0)

    def save(self, stream: IO[bytes]) -> None:
        """Write the lexicon to a binary stream; every entry needs a value."""
        entries = list(self.lexicon)
        for entry in entries:
            if not entry.values:
                raise ValueError(f"entry {entry.key!r} has no value")

        keys = [entry.key.encode("utf-8") + b"\0" for entry in entries]
        values = [v.encode("utf-8") + b"\0" for entry in entries for v in entry.values]
        key_offsets = _offsets(keys)
        value_offsets = iter(_offsets(values))
        key_buffer = b"".join(keys)
        value_buffer = b"".join(values)

        stream.write(_SIZE.pack(len(entries)))
        stream.write(_SIZE.pack(len(key_buffer)))
        stream.write(key_buffer)
        stream.write(_SIZE.pack(len(value_buffer)))
        stream.write(value_buffer)
        for entry, key_offset in zip(entries, key_offsets):
            stream.write(_SIZE.pack(entry.num_values))
            stream.write(_SIZE.pack(key_offset))
            for _ in entry.values:
                stream.write(_SIZE.pack(next(value_offsets)))

    @classmethod
    def load(cls, stream: IO[bytes]) -> "BinaryDict":
        """Read a lexicon written by save."""
        num_items = _read_size(stream, "numItems")
        key_total = _read_size(stream, "keyTotalLength")
        key_buffer = _read_buffer(stream, key_total, "keyBuffer")
        value_total = _read_size(stream, "valueTotalLength")
        value_buffer = _read_buffer(stream, value_total, "valueBuffer")

        lexicon = Lexicon()
        for _ in range(num_items):
            num_values = _read_size(stream, "numValues")
            key_offset = _read_size(stream, "keyOffset")
            key = _c_string(key_buffer, key_offset, "keyOffset")
            values = tuple(
                _c_string(value_buffer, _read_size(stream, "valueOffset"), "valueOffset")
                for _ in range(num_values)
            )
            lexicon.add(DictEntry(key, values))
        return cls(lexicon)