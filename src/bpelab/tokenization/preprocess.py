# bpelab/src/bpelab/tokenization/preprocess.py
"""
Corpus preprocessing shared by training and encoding.

Text is lower-cased and split on runs of whitespace. Each word becomes
its list of characters followed by an end-of-word marker.
"""

from __future__ import annotations

from collections import Counter
from typing import List

DEFAULT_WORD_END = "</w>"


def split_words(text: str) -> List[str]:
    """Lower-case `text` and split it on whitespace, dropping empty fragments."""
    return text.lower().split()


def normalize_text(text: str) -> str:
    """What a tokenize -> detokenize round trip is expected to give back."""
    return " ".join(split_words(text))


def word_to_symbols(word: str, word_end: str = DEFAULT_WORD_END) -> List[str]:
    return list(word) + [word_end]


class WordTable:
    """
    Word-frequency table used during training.

    Distinct words are kept in first-appearance order. `symbols[i]` is the
    current symbol list of word i and `freqs[i]` its corpus count; merges
    rewrite `symbols` in place and never touch `freqs`.
    """

    def __init__(self, words: Counter, word_end: str = DEFAULT_WORD_END):
        self.word_end = word_end
        self.symbols: List[List[str]] = [word_to_symbols(w, word_end) for w in words]
        self.freqs: List[int] = list(words.values())

    def __len__(self) -> int:
        return len(self.symbols)

    def characters(self) -> List[str]:
        """Distinct single characters of the corpus, sorted by code point."""
        chars = set()
        for symbols in self.symbols:
            chars.update(symbols[:-1])
        return sorted(chars)

    def pair_counts(self) -> Counter:
        """
        Count every adjacent symbol pair, weighted by word frequency.

        Keys are inserted in scan order (words first to last, pairs left to
        right), which is what `Counter.most_common` falls back on for ties.
        """
        counts: Counter = Counter()
        for symbols, freq in zip(self.symbols, self.freqs):
            for pair in zip(symbols, symbols[1:]):
                counts[pair] += freq
        return counts

    def apply_merge(self, pair) -> None:
        for i, symbols in enumerate(self.symbols):
            if len(symbols) > 1:
                self.symbols[i] = merge_symbols(symbols, pair)

    def as_frequencies(self) -> dict:
        """Space-joined representation -> count, for inspection and logging."""
        return {" ".join(s): f for s, f in zip(self.symbols, self.freqs)}


def build_word_table(text: str, word_end: str = DEFAULT_WORD_END) -> WordTable:
    return WordTable(Counter(split_words(text)), word_end=word_end)


def merge_symbols(symbols: List[str], pair) -> List[str]:
    """Replace every non-overlapping occurrence of `pair`, scanning left to right."""
    a, b = pair
    merged = []
    i = 0
    while i < len(symbols):
        if i < len(symbols) - 1 and symbols[i] == a and symbols[i + 1] == b:
            merged.append(a + b)
            i += 2
        else:
            merged.append(symbols[i])
            i += 1
    return merged
