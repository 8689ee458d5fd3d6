#!/usr/bin/env python3
"""
Train & save a tokenizer from the command line.

Usage examples:

# Use project config in current directory (project_config.json)
bpelab-train-tokenizer

# Specify project config path
bpelab-train-tokenizer --config /path/to/project_config.json

# Choose tokenizer type and vocab size (overrides config)
bpelab-train-tokenizer --tokenizer-type char_bpe --vocab-size 800

# Dry-run (don't write tokenizer file)
bpelab-train-tokenizer --no-save --vocab-size 200

"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from bpelab.tokenization.registry import TOKENIZER_REGISTRY
from bpelab.tokenization.training.bpe_training import train_and_save_tokenizer
from bpelab.utils.config_util import load_config
from bpelab.utils.logger import get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[list[str]] = None):
    p = argparse.ArgumentParser(description="Train and save a tokenizer for a project.")
    p.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("project_config.json"),
        help="Path to the project config JSON (default: ./project_config.json)",
    )
    p.add_argument(
        "--tokenizer-type",
        "-t",
        type=str,
        default=None,
        choices=list(TOKENIZER_REGISTRY.keys()),
        help="Tokenizer type name (overrides project config).",
    )
    p.add_argument(
        "--vocab-size",
        "-v",
        type=int,
        default=None,
        help="Target vocabulary size (overrides tokenizer_config).",
    )
    p.add_argument(
        "--min-freq",
        type=int,
        default=None,
        help="Minimum pair frequency for merges (default: tokenizer_config or 2).",
    )
    p.add_argument(
        "--no-save",
        action="store_true",
        help="Train but do not write tokenizer file to disk (dry run).",
    )
    p.add_argument(
        "--out-path",
        type=Path,
        default=None,
        help="Optional explicit path to save tokenizer JSON (overrides project config).",
    )
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load project config: {e}")
        return 2

    logger.info(f"Project config loaded from: {args.config.resolve()}")

    try:
        tokenizer, saved_path = train_and_save_tokenizer(
            cfg,
            tokenizer_type=args.tokenizer_type,
            vocab_size=args.vocab_size,
            min_freq=args.min_freq,
            save=not args.no_save,
            out_path=args.out_path,
        )
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Tokenizer training failed: {e}")
        return 3

    logger.info(f"Trained {tokenizer.model_type} tokenizer, vocab size: {len(tokenizer.vocab)}")
    if not args.no_save:
        logger.info(f"Saved to: {saved_path}")
    else:
        logger.info("(dry-run: not saved)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
