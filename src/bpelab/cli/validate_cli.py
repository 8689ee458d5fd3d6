#!/usr/bin/env python3
"""
Tokenizer Validation CLI

Loads a saved tokenizer, prints its vocabulary analysis, checks the
tokenize -> detokenize round trip and optionally benchmarks a text file.

bpelab-validate --tokenizer tok.json [--text "Hello world!"] [--benchmark-file val.txt]
bpelab-validate --config project_config.json
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from bpelab.tokenization.analysis import run_benchmark, validate_round_trip
from bpelab.tokenization.errors import NotTrainedError
from bpelab.tokenization.registry import load_tokenizer
from bpelab.tokenization.training.bpe_training import read_corpus
from bpelab.utils.config_util import load_config
from bpelab.utils.logger import get_logger
from bpelab.utils.tokenizer_io import load_tokenizer_path

logger = get_logger(__name__)


def validate_tokenizer(tokenizer, test_text: str = "Hello world! This is a test.") -> bool:
    """Round-trip `test_text` through the tokenizer and log what happened."""
    result = validate_round_trip(tokenizer, test_text)
    tokens = result.tokens

    logger.info(f"   Original text: '{result.original_text}'")
    logger.info(f"   Encoded tokens: {tokens[:20]}{'...' if len(tokens) > 20 else ''}")
    logger.info(f"   Token count: {len(tokens)}")
    logger.info(f"   Decoded text: '{result.reconstructed_text}'")

    if result.is_valid:
        logger.info("   ✅ Roundtrip encoding/decoding successful")
    else:
        logger.warning(f"   ⚠️  Decoded text differs from expected '{result.expected_text}'")
    return result.is_valid


def parse_args(argv: Optional[list[str]] = None):
    p = argparse.ArgumentParser(description="Validate a trained tokenizer.")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--tokenizer", type=Path, help="Path to tokenizer JSON.")
    src.add_argument("--config", type=Path, help="Project config; uses its tokenizer_save_path.")
    p.add_argument("--text", type=str, default="Hello world! This is a test.", help="Round-trip test text.")
    p.add_argument("--benchmark-file", type=Path, default=None, help="Text file, one sample per line.")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        if args.config is not None:
            tokenizer_path = load_tokenizer_path(load_config(args.config))
        else:
            tokenizer_path = args.tokenizer
        logger.info(f"🔤 Validating tokenizer: {tokenizer_path}")
        tokenizer = load_tokenizer(tokenizer_path)
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"   ❌ Could not load tokenizer: {e}")
        return 2

    if hasattr(tokenizer, "get_vocabulary_analysis"):
        for key, value in tokenizer.get_vocabulary_analysis().to_dict().items():
            logger.info(f"   {key}: {value}")

    try:
        ok = validate_tokenizer(tokenizer, args.text)
    except NotTrainedError as e:
        logger.error(f"   ❌ Tokenizer validation failed: {e}")
        return 1

    if args.benchmark_file is not None:
        try:
            texts = read_corpus(args.benchmark_file)
        except OSError as e:
            logger.error(f"   ❌ Could not read benchmark file: {e}")
            return 2
        report = run_benchmark(tokenizer, texts)
        for key, value in report.to_dict().items():
            logger.info(f"   {key}: {value}")

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
