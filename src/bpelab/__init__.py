# src/bpelab/__init__.py

# Tokenizers
from .tokenization.char_bpe_tokenizer import BPETokenizer, BPETokenizerConfig
from .tokenization.char_tokenizer import CharacterTokenizer
from .tokenization.word_tokenizer import WordTokenizer
from .tokenization.base import Tokenizer
from .tokenization.registry import load_tokenizer, save_tokenizer

# Errors
from .tokenization.errors import TokenizerError, InvalidInputError, NotTrainedError

__all__ = [
    # Tokenizers
    "BPETokenizer",
    "BPETokenizerConfig",
    "CharacterTokenizer",
    "WordTokenizer",
    "Tokenizer",
    "load_tokenizer",
    "save_tokenizer",

    # Errors
    "TokenizerError",
    "InvalidInputError",
    "NotTrainedError",
]
