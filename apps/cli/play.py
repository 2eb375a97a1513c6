# apps/cli/play.py
"""
Terminal front end for Rat Trap Parts.

This script:
  1) Opens the selected lexicon (WordNet by default) once for the session.
  2) Runs the setup prompt until a starting word is chosen.
  3) Loops: draw the board, read a line, hand it to the session.
  4) On 'q' (or end of input) prints the final score.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --lexicon wordlist --dictionary words.txt --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, Optional

from packages.datasets import DEFAULT_SEED_WORDS, load_seed_words, pretty_summary, \
    validate_seed_words
from packages.datasets.io import read_lines
from packages.engine import ResourceInitializationFailure
from packages.lexicon import MAX_WORD_LENGTH, create_oracle, get_oracle_ids
from packages.session import BoardView, GameSession, SessionConfig

log = logging.getLogger("rat_trap_parts")

PROMPT = "> "
BANNER = "\n".join(["", "welcome to", "", "R A T", "T R A P", "P A R T S", ""])


def render(view: BoardView, width: int) -> str:
    """Board as text: prior words, current words, score."""
    lines = [f"Prior words: (page {view.prior_index + 1 if view.prior_pages else 0}"
             f"/{view.prior_pages})"]
    lines += list(view.prior_page or ())
    lines.append("-" * min(width, 40))
    lines.append(f"Current words: (page {view.current_index + 1}/{view.current_pages})")
    lines += list(view.current_page or ())
    lines.append(f"Score: {view.score}")
    return "\n".join(lines)


def _build_oracle(args):
    options = {"max_length": args.max_length}
    if args.lexicon == "wordlist":
        if not args.dictionary:
            raise SystemExit("--dictionary is required with --lexicon wordlist")
        options["path"] = args.dictionary
    elif args.dictionary:
        options["words"] = read_lines(args.dictionary)
    return create_oracle(args.lexicon, **options)


def run_setup(session: GameSession, read: Callable[[str], str], seed_path: str,
              rng: random.Random) -> bool:
    """
    Setup prompt loop. Returns False if input ran out before a game started.
    """
    seed_words = None
    print(BANNER)
    print("Enter a 3-letter word to start with.")
    print("'r' or 'random' for random start, 'h' for help.")
    while not session.started:
        try:
            text = read(PROMPT)
        except EOFError:
            return False
        if text.strip().lower() in ("r", "random") and seed_words is None:
            seed_words = load_seed_words(seed_path)
            log.debug("loaded %d seed words from %s", len(seed_words), seed_path)
        reply = session.start(text, seed_words, rng)
        print(reply.message)
    return True


def run_game(session: GameSession, read: Callable[[str], str], width: int) -> int:
    """Main loop. Returns the final score."""
    print("If confused, press h<Enter>")
    while not session.finished:
        print()
        print(render(session.view(), width))
        try:
            line = read(PROMPT)
        except EOFError:
            reply = session.quit()
        else:
            reply = session.submit(line)
        print(reply.message)
    return session.state.score


def main(argv: Optional[list] = None, read: Callable[[str], str] = input) -> int:
    """
    Parse CLI args, open the lexicon, play one game.
    """
    lexicon_choices = ", ".join(get_oracle_ids())

    ap = argparse.ArgumentParser(description="Rat Trap Parts — grow words one letter at a time")
    ap.add_argument("--lexicon", default="wordnet", choices=get_oracle_ids(),
                    help=f"lexicon backend (one of: {lexicon_choices})")
    ap.add_argument("--dictionary",
                    help="word list file (required for wordlist; restricts wordnet)")
    ap.add_argument("--seed-words", default=str(DEFAULT_SEED_WORDS),
                    help="3-letter word list used for random starts")
    ap.add_argument("--seed", type=int, help="RNG seed for random starts")
    ap.add_argument("--max-length", type=int, default=MAX_WORD_LENGTH,
                    help="longest word the lexicon will look up")
    ap.add_argument("--width", type=int, default=80, help="screen width for word pages")
    ap.add_argument("--prior-rows", type=int, default=14, help="rows per prior-words page")
    ap.add_argument("--current-rows", type=int, default=4, help="rows per current-words page")
    ap.add_argument("--check-seed-words", action="store_true",
                    help="validate the seed list against the lexicon and exit")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[%(levelname)s] %(message)s")

    config = SessionConfig(width=args.width, prior_rows=args.prior_rows,
                           current_rows=args.current_rows)
    rng = random.Random(args.seed)

    try:
        with _build_oracle(args) as oracle:
            if args.check_seed_words:
                rep = validate_seed_words(args.seed_words, oracle=oracle)
                print(pretty_summary(rep))
                for issue in rep["issues"]:
                    print(f"  - {issue}")
                return 0 if rep["passed"] else 1

            session = GameSession(oracle, config)
            if not run_setup(session, read, args.seed_words, rng):
                return 0
            run_game(session, read, args.width)
    except ResourceInitializationFailure as e:
        sys.stderr.write(f"error: {e}\n")
        return 1
    except (FileNotFoundError, ValueError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
