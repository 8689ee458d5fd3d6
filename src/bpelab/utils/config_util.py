## Configuration Utilities for bpelab
# bpelab/src/bpelab/utils/config_util.py

import json
from pathlib import Path


def _meta(cfg: dict) -> dict:
    """Return project_metadata sub-dict if present, otherwise the whole dict."""
    return cfg.get("project_metadata", cfg)


def _tok_cfg(cfg: dict) -> dict:
    """Return tokenizer_config sub-dict if present, otherwise an empty dict."""
    return cfg.get("tokenizer_config", {})


def load_config(config_path: Path | str) -> dict:
    """
    Load a project configuration JSON file.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Project config not found at: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        return json.load(f)
