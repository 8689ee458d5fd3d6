# bpelab/src/bpelab/tokenization/word_tokenizer.py

from typing import List

from bpelab.tokenization.base import VocabTokenizer
from bpelab.tokenization.preprocess import split_words

MODEL_TYPE = "word"


class WordTokenizer(VocabTokenizer):
    """One id per lower-cased, whitespace-delimited word."""

    model_type = MODEL_TYPE
    separator = " "

    def units(self, text: str) -> List[str]:
        return split_words(text)
