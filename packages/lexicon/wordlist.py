from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set

from packages.datasets.io import read_lines
from packages.engine.errors import ResourceInitializationFailure
from .base import LexicalOracle, register

log = logging.getLogger(__name__)


@register
class WordListOracle(LexicalOracle):
    """
    Plain word list backend: one word per line, no part-of-speech data.

    Every listed word counts as its own base form, so its stems are what
    the secondary stemmer returns ("cats" -> {"cats", "cat"}).
    """
    id = "wordlist"
    name = "Word list"

    def __init__(self, *, path: Optional[str] = None, words: Optional[Iterable[str]] = None,
                 **kwargs):
        super().__init__(**kwargs)
        if path is None and words is None:
            raise ValueError("WordListOracle needs a `path` or `words`")
        self.path = path
        self._given = words
        self._words: Set[str] = set()

    def open(self) -> "WordListOracle":
        if self._given is not None:
            raw = list(self._given)
        else:
            try:
                raw = read_lines(Path(self.path))
            except (FileNotFoundError, UnicodeDecodeError) as e:
                raise ResourceInitializationFailure(f"Couldn't read word list: {self.path}") from e
        self._words = {w.strip().lower() for w in raw if w.strip()}
        log.info("word list loaded: %d words", len(self._words))
        return super().open()

    def close(self) -> None:
        self._words = set()
        super().close()

    def _recognizes(self, word: str) -> bool:
        return word in self._words

    def _reduce(self, word: str) -> List[Optional[str]]:
        return [word]
