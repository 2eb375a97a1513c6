from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set, Type

from nltk.stem.snowball import SnowballStemmer

from packages.engine.errors import InputLengthExceeded
from packages.engine.words import is_alpha_word, normalize

log = logging.getLogger(__name__)

# Sanity cap on word length; anything longer is refused before lookup.
MAX_WORD_LENGTH = 128

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["LexicalOracle"]] = {}


def register(cls: Type["LexicalOracle"]) -> Type["LexicalOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that lexicon backends inherit ----
class LexicalOracle:
    """
    Answers two questions about a word: is it real, and what are its stems.

    Subclasses implement `_recognizes` (dictionary lookup) and `_reduce`
    (per-category base forms). Resources are held between open() and
    close(); use the oracle as a context manager.
    """
    id = "base"
    name = "Base"

    def __init__(self, *, max_length: int = MAX_WORD_LENGTH, stemmer=None):
        self.max_length = int(max_length)
        self._stemmer = stemmer or SnowballStemmer("english")
        self._open = False

    # -- lifecycle --
    def open(self) -> "LexicalOracle":
        self._open = True
        return self

    def close(self) -> None:
        self._open = False

    def __enter__(self) -> "LexicalOracle":
        return self.open() if not self._open else self

    def __exit__(self, *exc) -> None:
        self.close()

    # -- queries --
    def is_word(self, s: str) -> bool:
        if not is_alpha_word(s) or len(s) > self.max_length:
            return False
        return self._recognizes(s)

    def stems_of(self, s: str) -> Set[str]:
        """
        Base forms of `s` across noun, verb, adjective and adverb.

        Empty when `s` is not a word. A category that leaves the word
        unchanged means it is already a base form there; in that case the
        rule-based stemmer is consulted once after the loop.

        Raises:
          InputLengthExceeded if `s` is longer than `max_length`.
        """
        if len(s) > self.max_length:
            raise InputLengthExceeded(f"Input length exceeded ({len(s)} > {self.max_length}).")
        word = normalize(s)
        if not is_alpha_word(word):
            return set()
        reduced = list(self._reduce(word))
        if not self._known(word, reduced):
            return set()

        stems: Set[str] = set()
        should_stem = False
        for base in reduced:
            if base is None:
                continue
            if base != word:
                stems.add(base.lower())
            else:
                should_stem = True

        if should_stem:
            stems.update(st.lower() for st in self.secondary_stems(word))
        log.debug("stems_of(%r) -> %s", word, sorted(stems))
        return stems

    def secondary_stems(self, word: str) -> List[str]:
        """
        Rule-based stems for a word already in base form: the word itself,
        plus its Snowball stem when that is also a dictionary word.
        """
        out = [word]
        root = self._stemmer.stem(word)
        if root != word and self.is_word(root):
            out.append(root)
        return out

    # -- backend hooks --
    def _recognizes(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def _reduce(self, word: str) -> Iterable[Optional[str]]:
        """
        One entry per grammatical category: the base form, the word itself
        when it already is one, or None when the category does not apply.
        """
        raise NotImplementedError("Override in subclass")

    def _known(self, word: str, reduced: List[Optional[str]]) -> bool:
        """Recognition given reductions already computed by stems_of()."""
        return self._recognizes(word)
