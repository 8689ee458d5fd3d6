# bpelab/src/bpelab/tokenization/char_bpe_tokenizer.py

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Dict, Iterable, List, Tuple
import json
from pathlib import Path
from typing import Union

from bpelab.tokenization.analysis import (
    BenchmarkResult,
    RoundTripValidation,
    VocabularyAnalysis,
    analyze_vocabulary,
    run_benchmark,
    validate_round_trip,
)
from bpelab.tokenization.base import DEFAULT_SPECIAL_TOKENS, REPLACEMENT_CHAR
from bpelab.tokenization.errors import InvalidInputError, NotTrainedError
from bpelab.tokenization.preprocess import (
    DEFAULT_WORD_END,
    build_word_table,
    merge_symbols,
    normalize_text,
    split_words,
    word_to_symbols,
)
from bpelab.utils.logger import get_logger

logger = get_logger(__name__)

MODEL_TYPE = "char_bpe"


def _default_special_tokens() -> List[str]:
    return list(DEFAULT_SPECIAL_TOKENS)


@dataclass
class BPETokenizerConfig:
    """
    Settings fixed for the lifetime of one trained tokenizer.
    """

    vocab_size: int = 1000
    special_tokens: List[str] = field(default_factory=_default_special_tokens)
    unk_token: str = "<unk>"
    pad_token: str = "<pad>"
    word_end: str = DEFAULT_WORD_END
    min_freq: int = 2

    def __post_init__(self):
        if self.vocab_size <= 0:
            raise ValueError(f"vocab_size must be positive, got {self.vocab_size}")
        if not self.word_end:
            raise ValueError("word_end marker cannot be empty")
        self.special_tokens = list(self.special_tokens)


def _is_blocked_merge(pair: Tuple[str, str], specials: set, word_end: str) -> bool:
    """
    A merge may not spell out a special token, and may only end in the
    end-of-word marker when its right half already carries the real marker.
    """
    symbol = pair[0] + pair[1]
    if symbol in specials:
        return True
    return symbol.endswith(word_end) and not pair[1].endswith(word_end)


def _add_token(vocab: Dict[str, int], id_to_token: Dict[int, str], token: str) -> bool:
    """Give `token` the next free id. Returns False if it already had one."""
    if token in vocab:
        return False
    tok_id = len(vocab)
    vocab[token] = tok_id
    id_to_token[tok_id] = token
    return True


class BPETokenizer:
    """
    Character-level BPE tokenizer with an end-of-word marker.

      - `train` learns an ordered merge list from raw text
      - `tokenize` replays those merges, in order, on new text
      - `detokenize` walks ids back to lower-cased, single-spaced text

    Training is a one-shot reset: each call rebuilds vocabulary and merges
    from scratch and installs them only once the new state is complete.
    """

    model_type = MODEL_TYPE

    def __init__(self, config: BPETokenizerConfig | None = None, **overrides):
        if config is None:
            config = BPETokenizerConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self.config = config
        self.vocab: Dict[str, int] = {}
        self.id_to_token: Dict[int, str] = {}
        self.merges: List[Tuple[str, str]] = []

    @property
    def is_trained(self) -> bool:
        return bool(self.vocab)

    # -------- TRAINING --------

    def train(self, text: str | List[str]) -> None:
        """
        Learn a vocabulary and merge list from `text`.

        1) Lower-case, split on whitespace, count distinct words.
        2) Seed ids: special tokens, sorted characters, end-of-word marker.
        3) Repeatedly merge the most frequent adjacent pair until the
           vocabulary reaches `vocab_size` or no pair occurs `min_freq` times.
        """
        if isinstance(text, list):
            text = "\n".join(text)
        if not text:
            raise InvalidInputError("Training text cannot be empty")

        cfg = self.config
        table = build_word_table(text, cfg.word_end)

        vocab: Dict[str, int] = {}
        id_to_token: Dict[int, str] = {}
        for tok in cfg.special_tokens:
            _add_token(vocab, id_to_token, tok)
        for ch in table.characters():
            _add_token(vocab, id_to_token, ch)
        _add_token(vocab, id_to_token, cfg.word_end)
        seed_size = len(vocab)

        specials = set(cfg.special_tokens)
        merges: List[Tuple[str, str]] = []
        max_merges = cfg.vocab_size - seed_size
        while len(vocab) < cfg.vocab_size and len(merges) < max_merges:
            pair_counts = table.pair_counts()
            for pair in [p for p in pair_counts if _is_blocked_merge(p, specials, cfg.word_end)]:
                del pair_counts[pair]
            if not pair_counts:
                break

            # most_common is stable: ties go to the pair seen first
            best_pair, best_count = pair_counts.most_common(1)[0]
            if best_count < cfg.min_freq:
                break

            merges.append(best_pair)
            table.apply_merge(best_pair)
            new_symbol = best_pair[0] + best_pair[1]
            added = _add_token(vocab, id_to_token, new_symbol)
            logger.debug(
                f"merge {len(merges)}: {best_pair!r} x{best_count} -> {new_symbol!r}"
                f"{'' if added else ' (already in vocab)'}"
            )

        logger.debug(f"final word table: {table.as_frequencies()}")
        self.vocab, self.id_to_token, self.merges = vocab, id_to_token, merges
        logger.info(
            f"Trained BPE tokenizer on {len(table)} distinct words: "
            f"seed {seed_size}, merges {len(merges)}, vocab {len(vocab)}"
        )

    # -------- ENCODE / DECODE --------

    def normalize(self, text: str) -> str:
        return normalize_text(text)

    def _bpe_tokenize_word(self, word: str) -> List[str]:
        """
        Apply learned merges to a single word, in training order.
        """
        symbols = word_to_symbols(word, self.config.word_end)
        for pair in self.merges:
            if len(symbols) < 2:
                break
            symbols = merge_symbols(symbols, pair)
        return symbols

    def tokenize(self, text: str) -> List[int]:
        """
        Encode text to a list of token IDs.
        """
        if not text:
            return []
        if not self.vocab:
            raise NotTrainedError("Tokenizer not trained. Call train() first.")

        unk_id = self.vocab.get(self.config.unk_token)
        cache: Dict[str, List[str]] = {}
        ids: List[int] = []

        for word in split_words(text):
            if word not in cache:
                cache[word] = self._bpe_tokenize_word(word)
            for symbol in cache[word]:
                tok_id = self.vocab.get(symbol, unk_id)
                if tok_id is None:
                    logger.debug(f"dropping unmappable symbol {symbol!r} (no unk token)")
                    continue
                ids.append(tok_id)

        return ids

    def detokenize(self, ids: Iterable[int]) -> str:
        """
        Decode IDs back to text. Unknown ids become U+FFFD, special tokens
        are skipped, and any token ending in the end-of-word marker
        closes the current word.
        """
        word_end = self.config.word_end
        specials = set(self.config.special_tokens)

        words: List[str] = []
        current_word = ""

        for tok_id in ids:
            tok = self.id_to_token.get(tok_id)
            if tok is None:
                logger.debug(f"unknown token id {tok_id!r}")
                tok = REPLACEMENT_CHAR

            # merged symbols like "lo</w>" close a word as well
            if tok.endswith(word_end):
                current_word += tok[: -len(word_end)]
                if current_word:
                    words.append(current_word)
                    current_word = ""
            elif tok in specials:
                continue
            else:
                current_word += tok

        if current_word:
            words.append(current_word)

        return " ".join(words)

    # -------- ANALYSIS --------

    def get_vocabulary_info(self) -> dict:
        return {
            "size": len(self.vocab),
            "merges": len(self.merges),
            "special_tokens": list(self.config.special_tokens),
        }

    def get_vocabulary_analysis(self) -> VocabularyAnalysis:
        return analyze_vocabulary(
            self.vocab,
            self.merges,
            special_tokens=self.config.special_tokens,
            word_end=self.config.word_end,
        )

    def validate_round_trip(self, text: str) -> RoundTripValidation:
        return validate_round_trip(self, text)

    def benchmark(self, texts: List[str]) -> BenchmarkResult:
        return run_benchmark(self, texts)

    # -------- SERIALIZATION --------

    def to_dict(self) -> dict:
        """
        Standard serializable dict for this tokenizer.
        Keeps merges as lists for JSON friendliness.
        """
        return {
            "model_type": self.model_type,
            "vocab": dict(self.vocab),
            "merges": [list(pair) for pair in self.merges],
            "config": asdict(self.config),
        }

    def export_vocabulary(self) -> dict:
        return self.to_dict()

    def import_vocabulary(self, snapshot: dict) -> None:
        """
        Replace vocabulary, merges and token config with those of `snapshot`.
        Nothing changes if the snapshot is malformed.
        """
        config, vocab, merges = self._parse_snapshot(snapshot)
        id_to_token = {i: t for t, i in vocab.items()}
        self.config = config
        self.vocab, self.id_to_token, self.merges = vocab, id_to_token, merges
        logger.info(f"Imported vocabulary: {len(vocab)} tokens, {len(merges)} merges")

    def _parse_snapshot(self, snapshot):
        if not isinstance(snapshot, dict) or not isinstance(snapshot.get("vocab"), dict):
            raise InvalidInputError("Snapshot must be a dict with a 'vocab' mapping")

        model_type = snapshot.get("model_type", self.model_type)
        if model_type != self.model_type:
            raise InvalidInputError(f"Snapshot is for tokenizer type {model_type!r}, not {self.model_type!r}")

        raw_vocab = snapshot["vocab"]
        if not all(isinstance(t, str) and t and isinstance(i, int) and not isinstance(i, bool) for t, i in raw_vocab.items()):
            raise InvalidInputError("Vocabulary must map non-empty strings to integer ids")
        if sorted(raw_vocab.values()) != list(range(len(raw_vocab))):
            raise InvalidInputError("Vocabulary ids must be unique and cover 0..size-1")
        vocab = dict(sorted(raw_vocab.items(), key=lambda kv: kv[1]))

        merges: List[Tuple[str, str]] = []
        for pair in snapshot.get("merges", []):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2 or not all(isinstance(s, str) and s for s in pair):
                raise InvalidInputError(f"Malformed merge entry: {pair!r}")
            merges.append((pair[0], pair[1]))

        if "config" in snapshot:
            try:
                config = BPETokenizerConfig(**snapshot["config"])
            except (TypeError, ValueError) as e:
                raise InvalidInputError(f"Malformed tokenizer config: {e}") from e
        else:
            config = self.config

        return config, vocab, merges

    @classmethod
    def from_dict(cls, data: dict) -> "BPETokenizer":
        """
        Construct from a dict produced by to_dict().
        """
        tokenizer = cls()
        tokenizer.import_vocabulary(data)
        return tokenizer

    def save(self, path: Union[str, Path]) -> None:
        """
        Save tokenizer config, vocab and merges to a JSON file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "BPETokenizer":
        """
        Load tokenizer from a JSON file created by `.save`.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            obj = json.load(f)

        return cls.from_dict(obj)
