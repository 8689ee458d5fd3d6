# bpelab/src/bpelab/tokenization/analysis.py
"""
Read-only reports over a tokenizer's state:

- vocabulary composition (characters vs. learned subwords)
- round-trip validation of a single text
- a small benchmark over many texts (accuracy, compression)
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Tuple

import numpy as np

from bpelab.tokenization.preprocess import DEFAULT_WORD_END
from bpelab.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class VocabularyAnalysis:
    total_tokens: int
    merge_operations: int
    character_tokens: int
    subword_tokens: int
    average_token_length: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RoundTripValidation:
    original_text: str
    expected_text: str
    reconstructed_text: str
    tokens: List[int]
    is_valid: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BenchmarkResult:
    total_texts: int
    round_trip_accuracy: float
    average_compression_ratio: float
    average_tokens_per_text: float
    elapsed_seconds: float

    def to_dict(self) -> dict:
        return asdict(self)


def analyze_vocabulary(
    vocab: Dict[str, int],
    merges: List[Tuple[str, str]],
    special_tokens: Iterable[str] = (),
    word_end: str = DEFAULT_WORD_END,
) -> VocabularyAnalysis:
    """
    Summarize vocabulary composition. Special tokens and the end-of-word
    marker count toward the total only.
    """
    specials = set(special_tokens)
    regular = [tok for tok in vocab if tok not in specials and tok != word_end]
    lengths = np.array([len(tok) for tok in regular], dtype=np.float64)

    return VocabularyAnalysis(
        total_tokens=len(vocab),
        merge_operations=len(merges),
        character_tokens=sum(1 for tok in regular if len(tok) == 1),
        subword_tokens=sum(1 for tok in regular if len(tok) > 1),
        average_token_length=float(lengths.mean()) if lengths.size else 0.0,
    )


def validate_round_trip(tokenizer, text: str) -> RoundTripValidation:
    """Tokenize then detokenize `text` and compare with its normalized form."""
    tokens = tokenizer.tokenize(text)
    reconstructed = tokenizer.detokenize(tokens)
    expected = tokenizer.normalize(text)
    return RoundTripValidation(
        original_text=text,
        expected_text=expected,
        reconstructed_text=reconstructed,
        tokens=tokens,
        is_valid=reconstructed == expected,
    )


def run_benchmark(tokenizer, texts: Iterable[str]) -> BenchmarkResult:
    """
    Round-trip every text and report accuracy and compression
    (characters per token, averaged over texts that produced tokens).

    An untrained tokenizer is first trained on the benchmark texts.
    """
    texts = list(texts)
    if not texts:
        return BenchmarkResult(0, 0.0, 0.0, 0.0, 0.0)

    if not tokenizer.is_trained:
        corpus = "\n".join(texts)
        if corpus:
            logger.info(f"Tokenizer is untrained; training on {len(texts)} benchmark texts")
            tokenizer.train(corpus)

    start = time.perf_counter()
    valid = np.zeros(len(texts), dtype=bool)
    token_counts = np.zeros(len(texts), dtype=np.int64)
    ratios = []

    for i, text in enumerate(texts):
        result = validate_round_trip(tokenizer, text)
        valid[i] = result.is_valid
        token_counts[i] = len(result.tokens)
        if result.tokens:
            ratios.append(len(text) / len(result.tokens))

    elapsed = time.perf_counter() - start
    report = BenchmarkResult(
        total_texts=len(texts),
        round_trip_accuracy=float(valid.mean()),
        average_compression_ratio=float(np.mean(ratios)) if ratios else 0.0,
        average_tokens_per_text=float(token_counts.mean()),
        elapsed_seconds=elapsed,
    )
    logger.info(
        f"Benchmark: {report.total_texts} texts, accuracy {report.round_trip_accuracy:.2%}, "
        f"compression {report.average_compression_ratio:.2f} chars/token"
    )
    return report
