from __future__ import annotations
from typing import List
from .base import LexicalOracle, MAX_WORD_LENGTH, REGISTRY, register

from . import wordnet  # noqa: F401
from . import wordlist  # noqa: F401


def create_oracle(oracle_id: str, **options) -> LexicalOracle:
    """
    Factory: instantiate a registered lexicon backend by id.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown lexicon id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_oracle_ids() -> List[str]:
    """
    Return all registered lexicon ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["LexicalOracle", "MAX_WORD_LENGTH", "create_oracle", "get_oracle_ids", "register"]
