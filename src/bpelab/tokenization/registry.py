# tokenization/registry.py
import json
from pathlib import Path
from typing import Union

from .char_tokenizer import CharacterTokenizer
from .word_tokenizer import WordTokenizer
from .char_bpe_tokenizer import BPETokenizer
from bpelab.utils.logger import get_logger

logger = get_logger(__name__)


TOKENIZER_REGISTRY = {
    "char": CharacterTokenizer,
    "word": WordTokenizer,
    "char_bpe": BPETokenizer,
}


def get_tokenizer_class(model_type: str):
    cls = TOKENIZER_REGISTRY.get(model_type)
    if cls is None:
        raise ValueError(f"Unknown tokenizer type: {model_type}. Known: {list(TOKENIZER_REGISTRY)}")
    return cls


def tokenizer_from_dict(data: dict):
    """
    Rebuild a tokenizer from its to_dict() form.
    Auto-detects the tokenizer type based on the "model_type" key.
    """
    return get_tokenizer_class(data.get("model_type")).from_dict(data)


def load_tokenizer(path: Union[str, Path]):
    """
    Load a tokenizer from a JSON file written by save_tokenizer().
    """
    tok_path = Path(path)

    if not tok_path.exists():
        raise FileNotFoundError(f"Tokenizer not found at: {tok_path}")

    with tok_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    tokenizer = tokenizer_from_dict(data)
    logger.info(f"Loaded {tokenizer.model_type} tokenizer ({len(tokenizer.vocab)} tokens) from {tok_path}")
    return tokenizer


def save_tokenizer(tokenizer, path: Union[str, Path]) -> Path:
    tok_path = Path(path)

    if hasattr(tokenizer, "to_dict"):
        data = tokenizer.to_dict()
    else:
        raise ValueError("Tokenizer must implement to_dict()")

    tok_path.parent.mkdir(parents=True, exist_ok=True)
    with tok_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved {tokenizer.model_type} tokenizer to {tok_path}")
    return tok_path
