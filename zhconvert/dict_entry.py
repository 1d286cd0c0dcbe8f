"""Key/values pairs stored in dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class DictEntry:
    """A dictionary key with zero or more candidate values."""

    key: str
    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def default(self) -> str:
        """The preferred value, or the key itself when there is no value."""
        return self.values[0] if self.values else self.key

    @property
    def num_values(self) -> int:
        return len(self.values)

    @property
    def key_length(self) -> int:
        return len(self.key)

    def __str__(self) -> str:
        if not self.values:
            return self.key
        return f"{self.key}\t{' '.join(self.values)}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return self.key < other.key


def make_entry(key: str, values: Union[str, Iterable[str]] = ()) -> DictEntry:
    """Build an entry from a key and either one value or an iterable of values."""
    if isinstance(values, str):
        return DictEntry(key, (values,))
    return DictEntry(key, tuple(values))