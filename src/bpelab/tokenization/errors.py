# bpelab/src/bpelab/tokenization/errors.py


class TokenizerError(Exception):
    """Base class for tokenizer failures surfaced to callers."""


class InvalidInputError(TokenizerError, ValueError):
    """Training text is empty, or a vocabulary snapshot is malformed."""


class NotTrainedError(TokenizerError, RuntimeError):
    """Raised when encoding is attempted before the tokenizer has a vocabulary."""
