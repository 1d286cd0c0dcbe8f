"""Dictionary-driven conversion of phrases and chains of conversions."""

from __future__ import annotations

from typing import Iterable, Sequence

from .dictionary import Dict


class Conversion:
    """Replaces the longest matching keys of a text with their default values."""

    def __init__(self, dict_: Dict) -> None:
        self.dict = dict_

    def convert(self, phrase: str) -> str:
        """Convert one phrase; unmatched characters are kept as they are."""
        parts: list[str] = []
        pos = 0
        while pos < len(phrase):
            entry = self.dict.match_prefix(phrase[pos:])
            if entry is None or entry.key_length == 0:
                parts.append(phrase[pos])
                pos += 1
            else:
                parts.append(entry.default)
                pos += entry.key_length
        return "".join(parts)

    def convert_segments(self, segments: Iterable[str]) -> list[str]:
        """Convert every segment independently."""
        return [self.convert(segment) for segment in segments]


class ConversionChain:
    """Conversions applied one after another to segmented text."""

    def __init__(self, conversions: Iterable[Conversion]) -> None:
        self.conversions: tuple[Conversion, ...] = tuple(conversions)

    def convert(self, segments: Sequence[str]) -> list[str]:
        output = list(segments)
        for conversion in self.conversions:
            output = conversion.convert_segments(output)
        return output