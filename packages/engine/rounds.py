"""
One turn of play: parse a line, judge it, apply it.

The judging step (evaluate_turn) is pure. It either raises InputRejected
or returns a Verdict describing exactly what commit() will write, so a
rejected turn can never leave half-applied state behind.

Checks, in order:
  1) the chosen word is live (in `current`)
  2) there is at least one candidate
  3) every candidate is a-z and at least 3 letters
  4) the candidates are an anagram of the chosen word plus one letter
  5) per candidate, in input order: the lexicon knows it, and none of its
     stems was credited before or claimed earlier in this same turn
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Tuple

from .anagram import is_one_letter_more
from .errors import InputLengthExceeded, InputRejected
from .state import GameState
from .words import MIN_CANDIDATE_LEN, is_alpha_word

if TYPE_CHECKING:
    from packages.lexicon.base import LexicalOracle

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verdict:
    """An approved turn, ready for GameState.commit()."""
    chosen: str
    candidates: Tuple[str, ...]
    claimed_stems: frozenset
    points: int


def parse_turn(line: str) -> Tuple[str, List[str]]:
    """
    Split a raw input line into (chosen, candidates).

    Returns ("", []) for a blank line.
    """
    tokens = line.lower().split()
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]


def evaluate_turn(state: GameState, chosen: str, candidates: Sequence[str],
                  oracle: LexicalOracle) -> Verdict:
    """
    Judge a turn against `state` without touching it.

    Raises:
      InputRejected with one of the reason codes from errors.RejectReason.
    """
    if chosen not in state.current:
        raise InputRejected("not_current", f"'{chosen}' is not a current word.")
    if not candidates:
        raise InputRejected("no_candidates", "Need at least one word...")
    for c in candidates:
        if not is_alpha_word(c) or len(c) < MIN_CANDIDATE_LEN:
            raise InputRejected("bad_token", f"'{c}' is not alpha/too short")
    if not is_one_letter_more(chosen, candidates):
        raise InputRejected("not_anagram", "Not a valid anagram + extra letter")

    points = 0
    claimed: set = set()
    for c in candidates:
        try:
            stems = oracle.stems_of(c)
        except InputLengthExceeded as e:
            raise InputRejected("too_long", f"'{c}' is too long") from e
        if not stems:
            raise InputRejected("not_a_word", f"'{c}' isn't a valid word")
        if c in state.prior:
            raise InputRejected("stem_used", f"'{c}' already used previously")

        scored = False
        for stem in sorted(stems):
            if stem in state.used_stems:
                raise InputRejected("stem_used", f"'{c}' already used previously")
            if stem in claimed:
                raise InputRejected("stem_repeated",
                                    f"'{c}' already used previously (same root twice this turn)")
            claimed.add(stem)
            # a word is paid once however many stems it has
            if not scored:
                points += len(c) - MIN_CANDIDATE_LEN
                scored = True
        log.debug("candidate %r claims %s", c, sorted(stems))

    return Verdict(chosen=chosen, candidates=tuple(candidates),
                   claimed_stems=frozenset(claimed), points=points)


def play_turn(state: GameState, line: str, oracle: LexicalOracle) -> Verdict:
    """Parse, judge and apply one line. Raises InputRejected on refusal."""
    chosen, candidates = parse_turn(line)
    verdict = evaluate_turn(state, chosen, candidates, oracle)
    state.commit(verdict)
    return verdict
