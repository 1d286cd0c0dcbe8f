"""Splitting text into segments ahead of conversion."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .dictionary import Dict


class Segmentation(ABC):
    """Splits a text into a list of segments whose concatenation is the text."""

    @abstractmethod
    def segment(self, text: str) -> list[str]:
        """Return the segments of text."""


class MaxMatchSegmentation(Segmentation):
    """Greedy longest-match segmentation against a dictionary.

    Matched keys become their own segments; runs of unmatched characters are
    gathered into a single segment.
    """

    def __init__(self, dict_: Dict) -> None:
        self.dict = dict_

    def segment(self, text: str) -> list[str]:
        segments: list[str] = []
        start = 0
        pos = 0
        while pos < len(text):
            entry = self.dict.match_prefix(text[pos:])
            if entry is None or entry.key_length == 0:
                pos += 1
                continue
            if pos > start:
                segments.append(text[start:pos])
            segments.append(entry.key)
            pos += entry.key_length
            start = pos
        if pos > start:
            segments.append(text[start:pos])
        return segments