"""Abstract dictionary interface with prefix matching."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .dict_entry import DictEntry
from .lexicon import Lexicon


class Dict(ABC):
    """A lookup table from keys to entries; lengths are counted in characters."""

    @abstractmethod
    def match(self, word: str) -> Optional[DictEntry]:
        """Return the entry whose key equals word exactly, or None."""

    @abstractmethod
    def key_max_length(self) -> int:
        """Length of the longest key."""

    @abstractmethod
    def lexicon(self) -> Lexicon:
        """All entries of the dictionary."""

    def _prefix_lengths(self, word: str, length: Optional[int]) -> range:
        limit = len(word) if length is None else min(length, len(word))
        return range(min(self.key_max_length(), limit), 0, -1)

    def match_prefix(self, word: str, length: Optional[int] = None) -> Optional[DictEntry]:
        """Return the entry of the longest key that prefixes word[:length].

        Given keys "a", "an", "b", "ba", "ban", "bana", the longest prefix
        of "banana" matched is "bana".
        """
        for n in self._prefix_lengths(word, length):
            entry = self.match(word[:n])
            if entry is not None:
                return entry
        return None

    def match_all_prefixes(self, word: str, length: Optional[int] = None) -> list[DictEntry]:
        """Return the entries of every key that prefixes word[:length], longest first."""
        found = (self.match(word[:n]) for n in self._prefix_lengths(word, length))
        return [entry for entry in found if entry is not None]