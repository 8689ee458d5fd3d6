## Tokenizer I/O Utilities
# bpelab/src/bpelab/utils/tokenizer_io.py

from pathlib import Path
from bpelab.utils.config_util import _meta
from bpelab.utils.path_util import get_global_model_dir


def get_tokenizer_path(project_config: dict, create_dir: bool = True) -> Path:
    """
    Return the full absolute path to the tokenizer file defined in:
        project_metadata["tokenizer_save_path"]

    Relative paths are resolved under GLOBAL_MODELS_DIR.
    """
    meta = _meta(project_config)

    if "tokenizer_save_path" not in meta:
        raise KeyError(
            "project_metadata must contain 'tokenizer_save_path' "
            "for tokenizer-related operations."
        )

    full_path = get_global_model_dir() / meta["tokenizer_save_path"]

    if create_dir:
        full_path.parent.mkdir(parents=True, exist_ok=True)

    return full_path


def load_tokenizer_path(project_config: dict) -> Path:
    """
    Resolve the tokenizer path without creating directories.
    Useful for read-only access in validation or demo scripts.
    """
    return get_tokenizer_path(project_config, create_dir=False)
