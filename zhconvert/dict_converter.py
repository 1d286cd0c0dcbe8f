"""Conversion of dictionaries between the text and binary formats."""

from __future__ import annotations

import os
from typing import IO, Callable, Union

from .dictionary import Dict
from .errors import FileNotFound, InvalidFormat
from .lexicon import parse_lexicon
from .trie_dict import TrieDict

PathLike = Union[str, "os.PathLike[str]"]


class _TextDict(TrieDict):
    """A dictionary written as "key<TAB>value value ..." lines, sorted by key."""

    def save(self, stream: IO[bytes]) -> None:
        for entry in self.lexicon():
            stream.write(f"{entry}\n".encode("utf-8"))


def _load_text(stream: IO[bytes]) -> Dict:
    return _TextDict.from_lexicon(parse_lexicon(stream))


_LOADERS: dict[str, Callable[[IO[bytes]], Dict]] = {
    "text": _load_text,
    "ocd2": TrieDict.load,
}

_CONVERTERS: dict[str, Callable[[Dict], Dict]] = {
    "text": _TextDict.from_dict,
    "ocd2": TrieDict.from_dict,
}


def _unknown_format(fmt: str) -> InvalidFormat:
    return InvalidFormat(f"Unknown dictionary format: {fmt}")


def load_dictionary(fmt: str, path: PathLike) -> Dict:
    """Read a dictionary file stored in the given format ("text" or "ocd2")."""
    loader = _LOADERS.get(fmt)
    if loader is None:
        raise _unknown_format(fmt)
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise FileNotFound(os.fspath(path)) from exc
    with stream:
        return loader(stream)


def convert_dict(fmt: str, dict_: Dict) -> Dict:
    """Return a copy of dict_ that saves itself in the given format."""
    converter = _CONVERTERS.get(fmt)
    if converter is None:
        raise _unknown_format(fmt)
    return converter(dict_)


def save_dictionary(dict_: Dict, path: PathLike) -> None:
    """Write a dictionary produced by convert_dict to a file."""
    with open(path, "wb") as stream:
        dict_.save(stream)


def convert_dictionary(
    input_path: PathLike,
    output_path: PathLike,
    format_from: str,
    format_to: str,
) -> None:
    """Read a dictionary in one format and write it in another."""
    source = load_dictionary(format_from, input_path)
    save_dictionary(convert_dict(format_to, source), output_path)