import pytest

from bpelab.tokenization.char_bpe_tokenizer import BPETokenizer
from bpelab.tokenization.char_tokenizer import CharacterTokenizer
from bpelab.tokenization.registry import (
    TOKENIZER_REGISTRY,
    load_tokenizer,
    save_tokenizer,
    tokenizer_from_dict,
)
from bpelab.tokenization.word_tokenizer import WordTokenizer

TEXT = "hello elephants\nwhere do elephants live?"


@pytest.mark.parametrize("model_type", sorted(TOKENIZER_REGISTRY))
def test_save_load_roundtrip(tmp_path, model_type):
    tokenizer = TOKENIZER_REGISTRY[model_type]()
    tokenizer.train(TEXT)

    path = save_tokenizer(tokenizer, tmp_path / "tok" / "tokenizer.json")
    loaded = load_tokenizer(path)

    assert type(loaded) is type(tokenizer)
    assert loaded.tokenize(TEXT) == tokenizer.tokenize(TEXT)


def test_registry_names_match_model_types():
    assert TOKENIZER_REGISTRY == {
        "char": CharacterTokenizer,
        "word": WordTokenizer,
        "char_bpe": BPETokenizer,
    }
    for name, cls in TOKENIZER_REGISTRY.items():
        assert cls.model_type == name


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tokenizer(tmp_path / "missing.json")


def test_unknown_model_type():
    with pytest.raises(ValueError, match="Unknown tokenizer type"):
        tokenizer_from_dict({"model_type": "sentencepiece", "vocab": {}})


def test_save_requires_to_dict(tmp_path):
    with pytest.raises(ValueError):
        save_tokenizer(object(), tmp_path / "x.json")
