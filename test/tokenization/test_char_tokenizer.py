# test/tokenization/test_char_tokenizer.py

import pytest

from bpelab.tokenization.base import REPLACEMENT_CHAR, Tokenizer
from bpelab.tokenization.char_tokenizer import CharacterTokenizer
from bpelab.tokenization.errors import InvalidInputError, NotTrainedError


def test_encode_decode_roundtrip():
    text = "Hello!"
    tokenizer = CharacterTokenizer()
    tokenizer.train(text)

    ids = tokenizer.tokenize(text)
    assert tokenizer.detokenize(ids) == text
    assert len(ids) == len(text)


def test_unicode_roundtrip():
    text = "🚀🌟"
    tokenizer = CharacterTokenizer()
    tokenizer.train(text)
    assert tokenizer.detokenize(tokenizer.tokenize(text)) == text


def test_vocab_layout_and_unknowns():
    tokenizer = CharacterTokenizer()
    tokenizer.train("ba")
    assert list(tokenizer.vocab) == ["<pad>", "<unk>", "<s>", "</s>", "a", "b"]
    assert tokenizer.tokenize("abz") == [4, 5, 1]
    assert tokenizer.detokenize([4, 1, 99]) == "a" + REPLACEMENT_CHAR


def test_errors_and_empty_input():
    tokenizer = CharacterTokenizer()
    assert tokenizer.tokenize("") == []
    with pytest.raises(NotTrainedError):
        tokenizer.tokenize("a")
    with pytest.raises(InvalidInputError):
        tokenizer.train("")


def test_satisfies_tokenizer_interface():
    assert isinstance(CharacterTokenizer(), Tokenizer)
