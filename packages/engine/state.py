"""
Game state and its two ways of starting.

GameState bundles the live word pool, the retired word pool, the stem
ledger and the score. It only changes through:
  - commit(verdict): apply a turn already approved by rounds.evaluate_turn
  - finish():        credit the quit bonus and close the game
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Union

from .errors import InputRejected
from .ledger import StemLedger
from .words import MIN_CANDIDATE_LEN, Word, normalize

if TYPE_CHECKING:
    from packages.lexicon.base import LexicalOracle
    from .rounds import Verdict

log = logging.getLogger(__name__)

# Starting words are always exactly this long.
SEED_WORD_LEN = 3


class WordPool:
    """A set of Words keyed by literal, iterated alphabetically."""

    def __init__(self, words: Iterable[Union[Word, str]] = ()):
        self._words = {}
        for w in words:
            self.add(w)

    def add(self, word: Union[Word, str]) -> None:
        w = word if isinstance(word, Word) else Word(word)
        self._words[w.literal] = w

    def remove(self, word: Union[Word, str]) -> Word:
        return self._words.pop(str(word))

    def __contains__(self, word) -> bool:
        return str(word) in self._words

    def __iter__(self) -> Iterator[Word]:
        return iter(sorted(self._words.values()))

    def __len__(self) -> int:
        return len(self._words)

    def literals(self) -> List[str]:
        return [w.literal for w in self]

    def __repr__(self) -> str:
        return f"WordPool({self.literals()!r})"


def quit_bonus(word: Word) -> int:
    """Points a still-live word is worth when the player quits."""
    return len(word) - MIN_CANDIDATE_LEN


class GameState:
    def __init__(self, seed: Union[Word, str], seed_stems: Iterable[str] = ()):
        self.current = WordPool([seed])
        self.prior = WordPool()
        self.used_stems = StemLedger(seed_stems)
        self.score = 0
        self.finished = False
        self.turns = 0

    def commit(self, verdict: Verdict) -> None:
        """
        Apply an approved turn. Every part lands or (on a programming error
        raised before any write) none does.
        """
        if self.finished:
            raise RuntimeError("game is over; no further turns")
        if verdict.chosen not in self.current:
            raise RuntimeError(f"stale verdict: {verdict.chosen!r} is no longer current")
        new_words = [Word(c) for c in verdict.candidates]

        self.score += verdict.points
        self.used_stems.insert_all(verdict.claimed_stems)
        self.prior.add(self.current.remove(verdict.chosen))
        for w in new_words:
            self.current.add(w)
        self.turns += 1
        log.debug("turn %d committed: %s -> %s (+%d)", self.turns, verdict.chosen,
                  " ".join(verdict.candidates), verdict.points)

    def finish(self) -> int:
        """Credit every live word once, close the game, return the final score."""
        if self.finished:
            return self.score
        bonus = sum(quit_bonus(w) for w in self.current)
        self.score += bonus
        self.finished = True
        log.info("game finished after %d turn(s): bonus %d, final score %d",
                 self.turns, bonus, self.score)
        return self.score


def _seeded(word: str, oracle: LexicalOracle) -> GameState:
    stems = oracle.stems_of(word)
    log.info("new game from %r (stems: %s)", word, ", ".join(sorted(stems)) or "-")
    return GameState(word, stems)


def new_game(word: str, oracle: LexicalOracle) -> GameState:
    """Start from a player-typed word; it must be a real 3-letter word."""
    w = normalize(word)
    if len(w) != SEED_WORD_LEN or not oracle.is_word(w):
        raise InputRejected("bad_seed", f"'{w}' is not a valid {SEED_WORD_LEN}-letter word")
    return _seeded(w, oracle)


def random_game(seed_words: Sequence[str], oracle: LexicalOracle,
                rng: Optional[random.Random] = None) -> GameState:
    """Start from a uniformly random entry of the seed list."""
    if not seed_words:
        raise ValueError("seed word list is empty")
    rng = rng or random.Random()
    return _seeded(normalize(rng.choice(list(seed_words))), oracle)
