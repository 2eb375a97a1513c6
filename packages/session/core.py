"""
Session: everything between a line of player input and what goes on screen.

- GameSession.start:  the setup prompt (typed word, random word, help)
- GameSession.submit: in-game commands (paging, help, quit) and turns
- GameSession.view:   the board as plain data (score + current pages)

No printing or input reading happens here, so the same session can sit
behind the terminal CLI, a test, or some other front end.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from packages.datasets import load_seed_words
from packages.engine import GameState, InputRejected, new_game, play_turn, random_game
from packages.engine.state import SEED_WORD_LEN
from .pages import DEFAULT_WIDTH, Page, paginate

log = logging.getLogger(__name__)

HELP_TEXT = """\
RAT TRAP PARTS
==============

Grow words one letter at a time.

Each turn, type a current word followed by one or more new words that use
all of its letters plus exactly one more:

    rat trap        rat -> trap
    trap parts      trap -> parts
    stare cat res   stare -> cat + res

New words must be real, at least 3 letters long, and must not share a root
with any word played before ("trap" and "traps" count as the same word).
Each new word scores its length minus 3. When you quit, every current word
scores its length minus 3 once more.

Commands
========

    ,  .    previous / next page of prior words
    <  >    previous / next page of current words
    h  ?    this help
    q       quit and show the final score
"""

ReplyKind = Literal["ok", "error", "help", "page", "prompt", "final"]


@dataclass(frozen=True)
class SessionConfig:
    width: int = DEFAULT_WIDTH
    prior_rows: int = 14
    current_rows: int = 4


@dataclass(frozen=True)
class Reply:
    kind: ReplyKind
    message: str = ""


@dataclass(frozen=True)
class BoardView:
    score: int
    prior_page: Optional[Page]
    current_page: Optional[Page]
    prior_index: int
    prior_pages: int
    current_index: int
    current_pages: int
    finished: bool


class GameSession:
    """One game, from the setup prompt to the final score."""

    def __init__(self, oracle, config: SessionConfig = SessionConfig()):
        self.oracle = oracle
        self.config = config
        self.state: Optional[GameState] = None
        self.prior_index = 0
        self.current_index = 0
        self._prior_pages: List[Page] = []
        self._current_pages: List[Page] = []

    @property
    def started(self) -> bool:
        return self.state is not None

    @property
    def finished(self) -> bool:
        return self.state is not None and self.state.finished

    # -- setup --
    def start(self, text: str, seed_words: Optional[Sequence[str]] = None,
              rng: Optional[random.Random] = None) -> Reply:
        """
        Handle one line at the setup prompt.

        A 3-letter word starts the game with it; 'r'/'random' picks from
        `seed_words` (the packaged list when None); 'h'/'help' returns the help text.
        """
        if self.started:
            raise RuntimeError("game already started")
        cmd = text.strip().lower()
        try:
            if cmd in ("r", "random"):
                if seed_words is None:
                    seed_words = load_seed_words()
                if not seed_words:
                    return Reply("error", "No seed words available for a random start.")
                self.state = random_game(seed_words, self.oracle, rng)
            elif cmd in ("h", "help"):
                return Reply("help", HELP_TEXT)
            elif len(cmd) == SEED_WORD_LEN:
                self.state = new_game(cmd, self.oracle)
            else:
                return Reply("prompt", f"Enter a {SEED_WORD_LEN}-letter word to start with.")
        except InputRejected as e:
            return Reply("error", e.message)
        self._repaginate()
        return Reply("ok", f"Starting with '{self.state.current.literals()[0]}'.")

    # -- play --
    def submit(self, line: str) -> Reply:
        """Handle one line of in-game input."""
        if not self.started:
            raise RuntimeError("game not started; call start() first")
        if self.finished:
            return self._final_reply()

        cmd = line.strip().lower()
        if cmd == ",":
            return self._page("prior", -1)
        if cmd == ".":
            return self._page("prior", +1)
        if cmd == "<":
            return self._page("current", -1)
        if cmd == ">":
            return self._page("current", +1)
        if cmd in ("h", "?"):
            return Reply("help", HELP_TEXT)
        if cmd == "q":
            return self.quit()
        if not cmd:
            return Reply("prompt", "If confused, press h<Enter>")

        try:
            verdict = play_turn(self.state, cmd, self.oracle)
        except InputRejected as e:
            log.debug("rejected %r: %s", cmd, e.reason)
            return Reply("error", e.message)
        self._repaginate()
        return Reply("ok", f"{verdict.chosen} -> {' '.join(verdict.candidates)} "
                           f"(+{verdict.points})")

    def quit(self) -> Reply:
        if not self.started:
            raise RuntimeError("game not started")
        self.state.finish()
        return self._final_reply()

    def _final_reply(self) -> Reply:
        return Reply("final", f"Your final score is {self.state.score}")

    # -- display --
    def view(self) -> BoardView:
        if not self.started:
            raise RuntimeError("game not started")
        return BoardView(
            score=self.state.score,
            prior_page=self._prior_pages[self.prior_index] if self._prior_pages else None,
            current_page=self._current_pages[self.current_index] if self._current_pages else None,
            prior_index=self.prior_index,
            prior_pages=len(self._prior_pages),
            current_index=self.current_index,
            current_pages=len(self._current_pages),
            finished=self.state.finished,
        )

    def _repaginate(self) -> None:
        cfg = self.config
        self._prior_pages = list(paginate(self.state.prior.literals(),
                                          width=cfg.width, rows=cfg.prior_rows))
        self._current_pages = list(paginate(self.state.current.literals(),
                                            width=cfg.width, rows=cfg.current_rows))
        self.prior_index = _clamp(self.prior_index, len(self._prior_pages))
        self.current_index = _clamp(self.current_index, len(self._current_pages))

    def _page(self, which: str, step: int) -> Reply:
        if which == "prior":
            self.prior_index = _clamp(self.prior_index + step, len(self._prior_pages))
            idx, total = self.prior_index, len(self._prior_pages)
        else:
            self.current_index = _clamp(self.current_index + step, len(self._current_pages))
            idx, total = self.current_index, len(self._current_pages)
        return Reply("page", f"{which} words page {idx + 1 if total else 0}/{total}")


def _clamp(index: int, pages: int) -> int:
    return max(0, min(index, pages - 1))
