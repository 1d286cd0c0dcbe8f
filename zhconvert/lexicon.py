"""Ordered storage of dictionary entries and the text dictionary parser."""

from __future__ import annotations

import re
from itertools import pairwise
from operator import attrgetter
from typing import IO, Iterable, Iterator, Optional, Union, overload

from .dict_entry import DictEntry
from .errors import InvalidTextDictionary

_LINE_END = re.compile(r"[\r\n\0]")
_BOM = "\ufeff"


class Lexicon:
    """A list of dictionary entries."""

    def __init__(self, entries: Optional[Iterable[DictEntry]] = None) -> None:
        self._entries: list[DictEntry] = list(entries) if entries is not None else []

    def add(self, entry: DictEntry) -> None:
        self._entries.append(entry)

    def sort(self) -> None:
        """Sort entries by key."""
        self._entries.sort(key=attrgetter("key"))

    def is_sorted(self) -> bool:
        return all(a.key <= b.key for a, b in pairwise(self._entries))

    def find_duplicate(self) -> Optional[str]:
        """Return the first key that equals its predecessor, or None."""
        for a, b in pairwise(self._entries):
            if a.key == b.key:
                return b.key
        return None

    def is_unique(self) -> bool:
        """True if no two neighbouring entries share a key (meaningful once sorted)."""
        return self.find_duplicate() is None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictEntry]:
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> DictEntry: ...

    @overload
    def __getitem__(self, index: slice) -> list[DictEntry]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __repr__(self) -> str:
        return f"Lexicon({self._entries!r})"


def parse_entry(line: str, line_num: int) -> Optional[DictEntry]:
    """Parse one "key<TAB>value value ..." line; return None for an empty line."""
    content = _LINE_END.split(line, 1)[0]
    if not content:
        return None
    if "\t" not in content:
        raise InvalidTextDictionary(f"Tabular not found {content}", line_num)
    key, rest = content.split("\t", 1)
    return DictEntry(key, tuple(rest.split(" ")))


def parse_lexicon(stream: Union[IO[str], IO[bytes], Iterable[Union[str, bytes]]]) -> Lexicon:
    """Read a text dictionary, skipping a leading UTF-8 byte order mark."""
    lexicon = Lexicon()
    for line_num, raw in enumerate(stream, start=1):
        line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        if line_num == 1 and line.startswith(_BOM):
            line = line[len(_BOM):]
        entry = parse_entry(line, line_num)
        if entry is not None:
            lexicon.add(entry)
    return lexicon