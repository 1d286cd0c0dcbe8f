"""Statistical extraction of phrases from raw text.

Candidates are substrings whose length lies between a minimum and a maximum.
Each candidate is scored by its frequency, its cohesion (the smallest
pointwise mutual information over its two-part splits) and the entropies of
the characters that precede and follow it.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

PUNCTUATIONS: tuple[str, ...] = (
    " ", "\n", "\r", "\t", "-", ",", ".", "?", "!", "*", "\u3000",
    "，", "。", "、", "；", "：", "？", "！", "…", "“", "”", "「",
    "」", "—", "－", "（", "）", "《", "》", "．", "／", "＼",
)

WordFilter = Callable[["PhraseExtract", str], bool]


def contains_punctuation(word: str) -> bool:
    """True if word contains any punctuation or whitespace character."""
    return any(mark in word for mark in PUNCTUATIONS)


@dataclass
class Signals:
    """Statistics gathered for one candidate word."""

    frequency: int = 0
    cohesion: float = 0.0
    suffix_entropy: float = 0.0
    prefix_entropy: float = 0.0


def default_pre_calculation_filter(extractor: "PhraseExtract", word: str) -> bool:
    """Reject only words that were never counted in the text."""
    return extractor.frequency(word) <= 0


def default_post_calculation_filter(extractor: "PhraseExtract", word: str) -> bool:
    """Reject candidates whose cohesion or entropy scores are too low."""
    signals = extractor.signal(word)
    log_probability = extractor.log_probability(word)
    cohesion_score = signals.cohesion - log_probability * 0.5
    entropy_score = (
        math.sqrt(signals.prefix_entropy * (signals.suffix_entropy + 1))
        - log_probability * 0.85
    )
    accept = (
        cohesion_score > 9
        and entropy_score > 11
        and signals.prefix_entropy > 0.5
        and signals.suffix_entropy > 0
        and signals.prefix_entropy + signals.suffix_entropy > 3
    )
    return not accept


def _entropy(choices: Counter) -> float:
    total = sum(choices.values())
    if not total:
        return 0.0
    entropy = -sum((n / total) * math.log(n / total) for n in choices.values())
    return entropy if entropy != 0 else 0.0


def _adjacent_groups(
    presuffixes: Sequence[str],
    set_length: int,
    min_length: int,
    max_length: int,
    from_start: bool,
) -> Iterator[tuple[str, Counter]]:
    """Yield each word with the counts of its neighbouring strings.

    presuffixes must be sorted so that windows sharing the same word are
    contiguous: by text for suffixes, by reversed text for prefixes.
    """
    for length in range(min_length, max_length + 1):
        last = ""
        adjacent: Counter = Counter()
        for presuffix in presuffixes:
            size = len(presuffix)
            if size < length:
                continue
            word = presuffix[:length] if from_start else presuffix[size - length:]
            if word != last:
                if last:
                    yield last, adjacent
                last = word
                adjacent = Counter()
            if length + set_length <= size:
                if from_start:
                    neighbour = presuffix[length:length + set_length]
                else:
                    neighbour = presuffix[size - length - set_length:size - length]
                adjacent[neighbour] += 1
        if last:
            yield last, adjacent


class PhraseExtract:
    """Extracts likely phrases from a text; lengths are counted in characters."""

    def __init__(self) -> None:
        self.word_min_length = 2
        self.word_max_length = 2
        self.prefix_set_length = 1
        self.suffix_set_length = 1
        self.reset()

    def reset(self) -> None:
        """Forget the text, all statistics and any custom filters."""
        self._prefixes_extracted = False
        self._suffixes_extracted = False
        self._frequencies_calculated = False
        self._word_candidates_extracted = False
        self._cohesions_calculated = False
        self._prefix_entropies_calculated = False
        self._suffix_entropies_calculated = False
        self._words_selected = False
        self._total_occurrence = 0
        self._log_total_occurrence = 0.0
        self._prefixes: list[str] = []
        self._suffixes: list[str] = []
        self._word_candidates: list[str] = []
        self._words: list[str] = []
        self._signals: dict[str, Signals] = {}
        self._items: list[tuple[str, Signals]] = []
        self._full_text = ""
        self.pre_calculation_filter: WordFilter = default_pre_calculation_filter
        self.post_calculation_filter: WordFilter = default_post_calculation_filter

    def extract(self, text: str) -> list[str]:
        """Run every stage on text and return the selected words."""
        self.set_full_text(text)
        self.extract_suffixes()
        self.calculate_frequency()
        self.calculate_suffix_entropy()
        self.release_suffixes()
        self.extract_prefixes()
        self.calculate_prefix_entropy()
        self.release_prefixes()
        self.extract_word_candidates()
        self.calculate_cohesions()
        self.select_words()
        return self.words

    def set_full_text(self, text: str) -> None:
        self._full_text = text

    @property
    def suffixes(self) -> list[str]:
        return list(self._suffixes)

    @property
    def prefixes(self) -> list[str]:
        return list(self._prefixes)

    @property
    def word_candidates(self) -> list[str]:
        return list(self._word_candidates)

    @property
    def words(self) -> list[str]:
        return list(self._words)

    def extract_suffixes(self) -> None:
        """Collect the windows starting at every position, sorted."""
        size = self.word_max_length + self.suffix_set_length
        text = self._full_text
        self._suffixes = sorted(text[i:i + size] for i in range(len(text)))
        self._suffixes_extracted = True

    def extract_prefixes(self) -> None:
        """Collect the windows ending at every position, sorted from the end."""
        size = self.word_max_length + self.prefix_set_length
        text = self._full_text
        windows = (text[max(0, end - size):end] for end in range(len(text), 0, -1))
        self._prefixes = sorted(windows, key=lambda s: s[::-1])
        self._prefixes_extracted = True

    def release_suffixes(self) -> None:
        self._suffixes = []

    def release_prefixes(self) -> None:
        self._prefixes = []

    def calculate_frequency(self) -> None:
        if not self._suffixes_extracted:
            self.extract_suffixes()
        counts: Counter = Counter()
        for suffix in self._suffixes:
            for length in range(1, min(len(suffix), self.word_max_length) + 1):
                counts[suffix[:length]] += 1
                self._total_occurrence += 1
        self._log_total_occurrence = (
            math.log(self._total_occurrence) if self._total_occurrence else -math.inf
        )
        for word, count in counts.items():
            self._signals.setdefault(word, Signals()).frequency += count
        self._items = sorted(self._signals.items(), key=lambda item: item[0])
        self._frequencies_calculated = True

    def extract_word_candidates(self) -> None:
        """Pick candidates and order them by frequency (desc), then by text."""
        if not self._frequencies_calculated:
            self.calculate_frequency()
        candidates = [
            word
            for word, _ in self._items
            if len(word) >= self.word_min_length
            and not contains_punctuation(word)
            and not self.pre_calculation_filter(self, word)
        ]
        candidates.sort(key=lambda word: (-self.frequency(word), word))
        self._word_candidates = candidates
        self._word_candidates_extracted = True

    def calculate_suffix_entropy(self) -> None:
        if not self._suffixes_extracted:
            self.extract_suffixes()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word, adjacent in _adjacent_groups(
            self._suffixes, self.suffix_set_length,
            self.word_min_length, self.word_max_length, from_start=True,
        ):
            self.signal(word).suffix_entropy = _entropy(adjacent)
        self._suffix_entropies_calculated = True

    def calculate_prefix_entropy(self) -> None:
        if not self._prefixes_extracted:
            self.extract_prefixes()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word, adjacent in _adjacent_groups(
            self._prefixes, self.prefix_set_length,
            self.word_min_length, self.word_max_length, from_start=False,
        ):
            self.signal(word).prefix_entropy = _entropy(adjacent)
        self._prefix_entropies_calculated = True

    def calculate_cohesions(self) -> None:
        if not self._word_candidates_extracted:
            self.extract_word_candidates()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word in self._word_candidates:
            self.signal(word).cohesion = self._calculate_cohesion(word)
        self._cohesions_calculated = True

    def select_words(self) -> None:
        """Keep the candidates the post-calculation filter does not reject."""
        if not self._word_candidates_extracted:
            self.extract_word_candidates()
        if not self._cohesions_calculated:
            self.calculate_cohesions()
        if not self._prefix_entropies_calculated:
            self.calculate_prefix_entropy()
        if not self._suffix_entropies_calculated:
            self.calculate_suffix_entropy()
        self._words = [
            word for word in self._word_candidates
            if not self.post_calculation_filter(self, word)
        ]
        self._words_selected = True

    def signal(self, word: str) -> Signals:
        """Statistics of a word seen while counting frequencies."""
        try:
            return self._signals[word]
        except KeyError:
            raise KeyError(f"unknown word: {word!r}") from None

    def cohesion(self, word: str) -> float:
        return self.signal(word).cohesion

    def entropy(self, word: str) -> float:
        return self.suffix_entropy(word) + self.prefix_entropy(word)

    def suffix_entropy(self, word: str) -> float:
        return self.signal(word).suffix_entropy

    def prefix_entropy(self, word: str) -> float:
        return self.signal(word).prefix_entropy

    def frequency(self, word: str) -> int:
        return self.signal(word).frequency

    def probability(self, word: str) -> float:
        return self.frequency(word) / self._total_occurrence

    def log_probability(self, word: str) -> float:
        frequency = self.frequency(word)
        log_frequency = math.log(frequency) if frequency else -math.inf
        return log_frequency - self._log_total_occurrence

    def _pmi(self, word: str, part1: str, part2: str) -> float:
        return (
            self.log_probability(word)
            - self.log_probability(part1)
            - self.log_probability(part2)
        )

    def _calculate_cohesion(self, word: str) -> float:
        return min(
            (self._pmi(word, word[:k], word[k:]) for k in range(1, len(word))),
            default=math.inf,
        )

    def __repr__(self) -> str:
        return (
            f"PhraseExtract(word_min_length={self.word_min_length}, "
            f"word_max_length={self.word_max_length}, words={len(self._words)})"
        )


__all__ = [
    "PUNCTUATIONS",
    "PhraseExtract",
    "Signals",
    "contains_punctuation",
    "default_post_calculation_filter",
    "default_pre_calculation_filter",
]