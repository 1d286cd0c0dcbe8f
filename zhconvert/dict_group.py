"""A dictionary made of several dictionaries consulted in order."""

from __future__ import annotations

from typing import Iterable, Optional

from .dict_entry import DictEntry
from .dictionary import Dict
from .lexicon import Lexicon
from .trie_dict import TrieDict


class DictGroup(Dict):
    """Dictionaries searched in turn; earlier ones take priority."""

    def __init__(self, dicts: Iterable[Dict]) -> None:
        self._dicts: tuple[Dict, ...] = tuple(dicts)
        self._key_max_length = max(
            (d.key_max_length() for d in self._dicts), default=0
        )

    @classmethod
    def from_dict(cls, other: Dict) -> "DictGroup":
        """Build a group holding a single copy of another dictionary."""
        return cls([TrieDict.from_dict(other)])

    def dicts(self) -> list[Dict]:
        return list(self._dicts)

    def key_max_length(self) -> int:
        return self._key_max_length

    def match(self, word: str) -> Optional[DictEntry]:
        for d in self._dicts:
            entry = d.match(word)
            if entry is not None:
                return entry
        return None

    def match_prefix(self, word: str, length: Optional[int] = None) -> Optional[DictEntry]:
        for d in self._dicts:
            entry = d.match_prefix(word, length)
            if entry is not None:
                return entry
        return None

    def match_all_prefixes(self, word: str, length: Optional[int] = None) -> list[DictEntry]:
        """Entries of all matched prefixes, longest first; earlier dictionaries win ties."""
        matched: dict[int, DictEntry] = {}
        for d in self._dicts:
            for entry in d.match_all_prefixes(word, length):
                matched.setdefault(entry.key_length, entry)
        return [matched[n] for n in sorted(matched, reverse=True)]

    def lexicon(self) -> Lexicon:
        """All entries of every dictionary, sorted by key (duplicates kept)."""
        merged = Lexicon(entry for d in self._dicts for entry in d.lexicon())
        merged.sort()
        return merged