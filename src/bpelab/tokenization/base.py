# bpelab/src/bpelab/tokenization/base.py
"""
The capability set shared by every tokenizer variant, plus a small base
class for the lookup tokenizers (character and word) that learn nothing
beyond a sorted unit vocabulary.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Protocol, runtime_checkable

from bpelab.tokenization.errors import InvalidInputError, NotTrainedError

REPLACEMENT_CHAR = "\ufffd"
DEFAULT_SPECIAL_TOKENS = ["<pad>", "<unk>", "<s>", "</s>"]


@runtime_checkable
class Tokenizer(Protocol):
    model_type: str
    vocab: Dict[str, int]

    @property
    def is_trained(self) -> bool: ...

    def train(self, text: str) -> None: ...

    def tokenize(self, text: str) -> List[int]: ...

    def detokenize(self, ids: Iterable[int]) -> str: ...

    def normalize(self, text: str) -> str: ...

    def to_dict(self) -> dict: ...


class VocabTokenizer:
    """
    Lookup tokenizer: special tokens first, then the sorted distinct units
    (characters, words, ...) seen in training. Subclasses define how text
    splits into units and how units join back.
    """

    model_type = "lookup"
    separator = ""

    def __init__(
        self,
        special_tokens: List[str] | None = None,
        unk_token: str = "<unk>",
        vocab: Dict[str, int] | None = None,
    ):
        self.special_tokens = list(DEFAULT_SPECIAL_TOKENS if special_tokens is None else special_tokens)
        self.unk_token = unk_token
        self.vocab: Dict[str, int] = dict(vocab or {})
        self.id_to_token: Dict[int, str] = {i: t for t, i in self.vocab.items()}

    @property
    def is_trained(self) -> bool:
        return bool(self.vocab)

    def units(self, text: str) -> List[str]:
        raise NotImplementedError

    def normalize(self, text: str) -> str:
        return self.separator.join(self.units(text))

    def train(self, text: str) -> None:
        if not text:
            raise InvalidInputError("Training text cannot be empty")
        vocab: Dict[str, int] = {}
        for tok in self.special_tokens + sorted(set(self.units(text))):
            vocab.setdefault(tok, len(vocab))
        self.vocab = vocab
        self.id_to_token = {i: t for t, i in vocab.items()}

    def tokenize(self, text: str) -> List[int]:
        if not text:
            return []
        if not self.vocab:
            raise NotTrainedError("Tokenizer not trained. Call train() first.")
        unk_id = self.vocab.get(self.unk_token)
        ids = (self.vocab.get(unit, unk_id) for unit in self.units(text))
        return [i for i in ids if i is not None]

    def detokenize(self, ids: Iterable[int]) -> str:
        specials = set(self.special_tokens)
        pieces = (self.id_to_token.get(i, REPLACEMENT_CHAR) for i in ids)
        return self.separator.join(p for p in pieces if p not in specials)

    def get_vocabulary_info(self) -> dict:
        return {
            "size": len(self.vocab),
            "merges": 0,
            "special_tokens": list(self.special_tokens),
        }

    def to_dict(self) -> dict:
        return {
            "model_type": self.model_type,
            "vocab": dict(self.vocab),
            "special_tokens": list(self.special_tokens),
            "unk_token": self.unk_token,
        }

    @classmethod
    def from_dict(cls, data: dict):
        return cls(
            special_tokens=data.get("special_tokens"),
            unk_token=data.get("unk_token", "<unk>"),
            vocab=data["vocab"],
        )
