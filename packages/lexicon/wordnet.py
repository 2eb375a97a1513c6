"""
WordNet-backed oracle (NLTK).

Morphology:
  - wordnet.morphy(word, pos) gives the base form of `word` in one of the
    four categories, or None when the word is not in that category.
  - morphy returning the word unchanged means it is already a base form,
    which triggers the secondary (Snowball) stemmer in LexicalOracle.

Dictionary:
  - by default, a word is real if morphy finds it in any category;
  - with `words`, recognition is limited to that list as well.

The corpus must be installed: python -m nltk.downloader wordnet
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from packages.engine.errors import ResourceInitializationFailure
from .base import LexicalOracle, register

log = logging.getLogger(__name__)

# noun, verb, adjective, adverb
POS_TAGS = ("n", "v", "a", "r")


@register
class WordNetOracle(LexicalOracle):
    id = "wordnet"
    name = "WordNet"

    def __init__(self, *, words: Optional[Iterable[str]] = None, wordnet=None, **kwargs):
        super().__init__(**kwargs)
        self._words: Optional[Set[str]] = (
            {w.strip().lower() for w in words if w.strip()} if words is not None else None
        )
        self._wn = wordnet

    def open(self) -> "WordNetOracle":
        if self._wn is None:
            from nltk.corpus import wordnet as wn
            try:
                wn.ensure_loaded()
            except LookupError as e:
                raise ResourceInitializationFailure(
                    "Failed to initialize WordNet (run: python -m nltk.downloader wordnet)."
                ) from e
            self._wn = wn
            log.info("WordNet loaded")
        return super().open()

    def _morphy(self, word: str, pos: str) -> Optional[str]:
        if self._wn is None:
            raise RuntimeError("WordNetOracle used before open()")
        return self._wn.morphy(word, pos)

    def _recognizes(self, word: str) -> bool:
        if self._words is not None and word not in self._words:
            return False
        return self._known(word, self._reduce(word))

    def _known(self, word: str, reduced: List[Optional[str]]) -> bool:
        if self._words is not None and word not in self._words:
            return False
        return any(base is not None for base in reduced)

    def _reduce(self, word: str) -> List[Optional[str]]:
        return [self._morphy(word, pos) for pos in POS_TAGS]
