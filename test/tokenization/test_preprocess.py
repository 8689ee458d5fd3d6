from collections import Counter

import pytest

from bpelab.tokenization.preprocess import (
    WordTable,
    build_word_table,
    merge_symbols,
    normalize_text,
    split_words,
    word_to_symbols,
)


def test_split_words_lowercases_and_drops_empty_fragments():
    assert split_words("  Hello\t\tWORLD \n again ") == ["hello", "world", "again"]
    assert split_words("") == []
    assert split_words(" \n\t ") == []


def test_normalize_text_collapses_whitespace():
    assert normalize_text("  Hello\t\tWorld!  ") == "hello world!"


def test_word_to_symbols_keeps_multibyte_characters_whole():
    assert word_to_symbols("北京🚀") == ["北", "京", "🚀", "</w>"]
    assert word_to_symbols("ab", word_end="<eow>") == ["a", "b", "<eow>"]


def test_word_table_keeps_first_appearance_order_and_counts():
    table = build_word_table("b a b c b")
    assert table.symbols == [["b", "</w>"], ["a", "</w>"], ["c", "</w>"]]
    assert table.freqs == [3, 1, 1]
    assert len(table) == 3
    assert table.characters() == ["a", "b", "c"]


def test_pair_counts_are_frequency_weighted_in_scan_order():
    table = build_word_table("ab ab b")
    counts = table.pair_counts()
    assert counts == Counter({("a", "b"): 2, ("b", "</w>"): 3})
    assert list(counts) == [("a", "b"), ("b", "</w>")]


@pytest.mark.parametrize(
    "symbols, pair, expected",
    [
        (["a", "a", "a", "</w>"], ("a", "a"), ["aa", "a", "</w>"]),
        (["a", "a", "a", "a"], ("a", "a"), ["aa", "aa"]),
        (["a", ".", "b"], (".", "b"), ["a", ".b"]),
        (["x", "y"], ("y", "x"), ["x", "y"]),
        (["ab", "c", "a", "bc"], ("ab", "c"), ["abc", "a", "bc"]),
    ],
)
def test_merge_symbols(symbols, pair, expected):
    assert merge_symbols(symbols, pair) == expected


def test_apply_merge_rewrites_in_place_and_keeps_freqs():
    table = WordTable(Counter({"abab": 2, "b": 1}))
    table.apply_merge(("a", "b"))
    assert table.symbols == [["ab", "ab", "</w>"], ["b", "</w>"]]
    assert table.freqs == [2, 1]
    assert table.as_frequencies() == {"ab ab </w>": 2, "b </w>": 1}
