"""Dictionary backed by a character trie, with a binary file form."""

from __future__ import annotations

import struct
from typing import IO, Iterable, Iterator, Optional

from .dict_entry import DictEntry
from .dictionary import Dict
from .errors import InvalidFormat
from .lexicon import Lexicon
from .serialized_values import read_values, write_values

_HEADER = b"ZHCONVERT_TRIE_1"
_U32 = struct.Struct("<I")
_U16 = struct.Struct("<H")


class _Node:
    __slots__ = ("children", "entry")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.entry: Optional[DictEntry] = None


def _read_exact(stream: IO[bytes], size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise InvalidFormat("Invalid OpenCC dictionary (truncated keys)")
    return data


class TrieDict(Dict):
    """Immutable dictionary; entries are kept sorted by key, one per key."""

    def __init__(self, entries: Iterable[DictEntry]) -> None:
        by_key = {entry.key: entry for entry in entries}
        self._entries = [by_key[key] for key in sorted(by_key)]
        self._root = _Node()
        for entry in self._entries:
            node = self._root
            for ch in entry.key:
                child = node.children.get(ch)
                if child is None:
                    child = node.children[ch] = _Node()
                node = child
            node.entry = entry
        self._max_length = max((e.key_length for e in self._entries), default=0)

    @classmethod
    def from_dict(cls, other: Dict) -> "TrieDict":
        return cls.from_lexicon(other.lexicon())

    @classmethod
    def from_lexicon(cls, lexicon: Lexicon) -> "TrieDict":
        """Build from a lexicon; for repeated keys the last entry wins."""
        return cls(lexicon)

    @classmethod
    def load(cls, stream: IO[bytes]) -> "TrieDict":
        if stream.read(len(_HEADER)) != _HEADER:
            raise InvalidFormat("Invalid OpenCC dictionary header")
        count = _U32.unpack(_read_exact(stream, _U32.size))[0]
        keys = []
        for _ in range(count):
            size = _U16.unpack(_read_exact(stream, _U16.size))[0]
            try:
                keys.append(_read_exact(stream, size).decode("utf-8"))
            except UnicodeDecodeError as exc:
                raise InvalidFormat("Invalid OpenCC dictionary (key)") from exc
        values = read_values(stream)
        if len(values) != count:
            raise InvalidFormat("Invalid OpenCC dictionary (key/value count mismatch)")
        return cls(DictEntry(key, entry.values) for key, entry in zip(keys, values))

    def save(self, stream: IO[bytes]) -> None:
        stream.write(_HEADER)
        stream.write(_U32.pack(len(self._entries)))
        for entry in self._entries:
            raw = entry.key.encode("utf-8")
            if len(raw) > 0xFFFF:
                raise ValueError(f"key {entry.key!r} is too long")
            stream.write(_U16.pack(len(raw)))
            stream.write(raw)
        write_values(stream, self.lexicon())

    def key_max_length(self) -> int:
        return self._max_length

    def _walk(self, word: str) -> Iterator[DictEntry]:
        """Yield the entries of keys that prefix word, shortest first."""
        node = self._root
        if node.entry is not None:
            yield node.entry
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return
            if node.entry is not None:
                yield node.entry

    def match(self, word: str) -> Optional[DictEntry]:
        if len(word) > self._max_length:
            return None
        node: Optional[_Node] = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node.entry

    def _query(self, word: str, length: Optional[int]) -> str:
        limit = self._max_length if length is None else min(self._max_length, length)
        return word[:max(limit, 0)]

    def match_prefix(self, word: str, length: Optional[int] = None) -> Optional[DictEntry]:
        found = None
        for found in self._walk(self._query(word, length)):
            pass
        return found

    def match_all_prefixes(self, word: str, length: Optional[int] = None) -> list[DictEntry]:
        matches = list(self._walk(self._query(word, length)))
        matches.reverse()
        return matches

    def lexicon(self) -> Lexicon:
        return Lexicon(self._entries)