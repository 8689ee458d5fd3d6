# bpelab/src/bpelab/tokenization/char_tokenizer.py

from typing import List

from bpelab.tokenization.base import VocabTokenizer

MODEL_TYPE = "char"


class CharacterTokenizer(VocabTokenizer):
    """One id per character. Case and whitespace survive the round trip."""

    model_type = MODEL_TYPE
    separator = ""

    def units(self, text: str) -> List[str]:
        return list(text)
