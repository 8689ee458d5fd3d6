## bpelab/tokenization/training/bpe_training.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from bpelab.tokenization.char_bpe_tokenizer import BPETokenizer, BPETokenizerConfig
from bpelab.tokenization.registry import TOKENIZER_REGISTRY, get_tokenizer_class, save_tokenizer
from bpelab.utils.config_util import _tok_cfg
from bpelab.utils.logger import get_logger
from bpelab.utils.path_util import get_data_file_path
from bpelab.utils.tokenizer_io import get_tokenizer_path

logger = get_logger(__name__)

DEFAULT_TOKENIZER_TYPE = "char_bpe"


def read_corpus(path: Path) -> List[str]:
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def build_tokenizer(
    tokenizer_type: str,
    tokenizer_config: dict,
    *,
    vocab_size: Optional[int] = None,
    min_freq: Optional[int] = None,
):
    """
    Instantiate an untrained tokenizer of `tokenizer_type`.

    Explicit arguments win over keys of `tokenizer_config`
    (vocab_size, min_freq, special_tokens, unk_token, pad_token, word_end).
    """
    cls = get_tokenizer_class(tokenizer_type)
    special_tokens = tokenizer_config.get("special_tokens")

    if cls is not BPETokenizer:
        return cls(
            special_tokens=special_tokens,
            unk_token=tokenizer_config.get("unk_token", "<unk>"),
        )

    if vocab_size is None:
        vocab_size = tokenizer_config.get("vocab_size")
    if vocab_size is None:
        raise ValueError("vocab_size must be provided either as arg or in project_config['tokenizer_config']['vocab_size']")
    if min_freq is None:
        min_freq = tokenizer_config.get("min_freq", 2)

    overrides = {
        key: tokenizer_config[key]
        for key in ("unk_token", "pad_token", "word_end")
        if key in tokenizer_config
    }
    if special_tokens is not None:
        overrides["special_tokens"] = special_tokens

    config = BPETokenizerConfig(vocab_size=vocab_size, min_freq=min_freq, **overrides)
    return BPETokenizer(config)


def train_and_save_tokenizer(
    project_config: dict,
    *,
    tokenizer_type: Optional[str] = None,
    vocab_size: Optional[int] = None,
    min_freq: Optional[int] = None,
    save: bool = True,
    out_path: Optional[Path] = None,
):
    """
    Train a tokenizer on the project's corpus file.

    Parameters
    ----------
    project_config : dict
        Project config containing project_metadata (data_path, data_file,
        tokenizer_save_path) and optionally tokenizer_config.
    tokenizer_type : Optional[str]
        Key of TOKENIZER_REGISTRY. Falls back to tokenizer_config["type"],
        then to "char_bpe".
    vocab_size : Optional[int]
        Target vocabulary size. If None, read from tokenizer_config.
    min_freq : Optional[int]
        Stop merging once the best pair occurs fewer times than this.
    save : bool
        If True, persist tokenizer JSON to the configured path (or out_path).
    out_path : Optional[Path]
        If provided, override destination path (useful for tests).

    Returns
    -------
    tokenizer_instance, Path
        The trained tokenizer and the path where it was saved (or would be).
    """
    tok_cfg = _tok_cfg(project_config)
    tokenizer_type = tokenizer_type or tok_cfg.get("type", DEFAULT_TOKENIZER_TYPE)
    if tokenizer_type not in TOKENIZER_REGISTRY:
        raise ValueError(f"Unknown tokenizer_type: {tokenizer_type}. Known: {list(TOKENIZER_REGISTRY)}")

    data_file_path = get_data_file_path(project_config)
    texts = read_corpus(data_file_path)
    logger.info(f"Read {len(texts)} lines from {data_file_path}")

    tokenizer = build_tokenizer(tokenizer_type, tok_cfg, vocab_size=vocab_size, min_freq=min_freq)
    tokenizer.train("\n".join(texts))

    if out_path is not None:
        tok_path = Path(out_path)
    else:
        tok_path = get_tokenizer_path(project_config, create_dir=save)

    if save:
        save_tokenizer(tokenizer, tok_path)

    return tokenizer, tok_path
