import random

import nltk
import pytest
from apps.cli.play import main
from packages.datasets import load_seed_words
from packages.lexicon.wordlist import WordListOracle
from packages.session import GameSession, HELP_TEXT, SessionConfig

WORDS = ["cat", "act", "acts", "cast", "casts", "scat"]


@pytest.fixture
def lexicon():
    with WordListOracle(words=WORDS) as lex:
        yield lex


def _reader(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_setup_prompt(lexicon):
    s = GameSession(lexicon)
    assert s.start("h").kind == "help"
    assert s.start("zz").kind == "prompt"
    assert s.start("dog").kind == "error"
    assert not s.started
    reply = s.start("Cat")
    assert reply.kind == "ok" and s.started
    assert s.view().current_page[0] == "cat"
    with pytest.raises(RuntimeError):
        s.start("cat")


def test_random_start(lexicon):
    s = GameSession(lexicon)
    assert s.start("random", ["cat"], random.Random(3)).kind == "ok"
    assert s.state.current.literals() == ["cat"]


def test_full_game(lexicon):
    s = GameSession(lexicon)
    s.start("cat")

    r = s.submit("cat acts")
    assert r.kind == "ok" and "+1" in r.message
    assert s.submit("acts casts").kind == "ok"   # +2

    view = s.view()
    assert view.score == 3
    assert view.prior_page[0] == "acts cat"
    assert view.current_page[0] == "casts"

    assert s.submit("q").message == "Your final score is 5"
    assert s.finished
    # nothing is evaluated after quitting
    assert s.submit("casts xxxxxx").kind == "final"
    assert s.state.score == 5


def test_rejection_is_a_message(lexicon):
    s = GameSession(lexicon)
    s.start("cat")
    r = s.submit("dog acts")
    assert r.kind == "error"
    assert r.message == "'dog' is not a current word."
    assert s.submit("cat cats").kind == "error"  # not in the word list
    assert s.view().score == 0


def test_commands_and_paging(lexicon):
    s = GameSession(lexicon, SessionConfig(width=8, prior_rows=1, current_rows=1))
    s.start("cat")
    assert s.submit("?").message == HELP_TEXT
    assert s.submit("").kind == "prompt"
    s.submit(",")
    assert s.view().prior_index == 0 and s.view().prior_page is None
    s.submit(">")
    assert s.view().current_index == 0  # clamped to the only page
    s.submit("cat acts")
    s.submit("acts casts")
    # "acts cat" does not fit in width 8 -> two prior pages
    assert s.view().prior_pages == 2
    s.submit(".")
    assert s.view().prior_page == ("cat",)
    s.submit(".")
    assert s.view().prior_index == 1
    s.submit(",")
    assert s.view().prior_page == ("acts",)


def test_session_requires_start(lexicon):
    s = GameSession(lexicon)
    with pytest.raises(RuntimeError):
        s.submit("cat acts")
    with pytest.raises(RuntimeError):
        s.view()


# --- CLI smoke ---
def _dictionary(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(p)


def test_cli_plays_a_game(tmp_path, capsys):
    code = main(["--lexicon", "wordlist", "--dictionary", _dictionary(tmp_path)],
                read=_reader(["h", "cat", "cat acts", ">", "q"]))
    out = capsys.readouterr().out
    assert code == 0
    assert "R A T" in out
    assert "cat -> acts (+1)" in out
    assert "Your final score is 2" in out


def test_cli_end_of_input_quits(tmp_path, capsys):
    code = main(["--lexicon", "wordlist", "--dictionary", _dictionary(tmp_path)],
                read=_reader(["cat", "cat acts"]))
    assert code == 0
    assert "Your final score is 2" in capsys.readouterr().out


def test_cli_random_start(tmp_path, capsys):
    seeds = tmp_path / "seeds.txt"
    seeds.write_text("cat\n", encoding="utf-8")
    code = main(["--lexicon", "wordlist", "--dictionary", _dictionary(tmp_path),
                 "--seed-words", str(seeds), "--seed", "1"],
                read=_reader(["r", "q"]))
    assert code == 0
    assert "Starting with 'cat'" in capsys.readouterr().out


def test_cli_missing_dictionary(tmp_path, capsys):
    code = main(["--lexicon", "wordlist", "--dictionary", str(tmp_path / "none.txt")],
                read=_reader([]))
    assert code == 1
    assert "error:" in capsys.readouterr().err


def test_cli_checks_seed_words(tmp_path, capsys):
    seeds = tmp_path / "seeds.txt"
    seeds.write_text("cat\ndog\n", encoding="utf-8")
    code = main(["--lexicon", "wordlist", "--dictionary", _dictionary(tmp_path),
                 "--seed-words", str(seeds), "--check-seed-words"], read=_reader([]))
    assert code == 1
    assert "unrecognized=1" in capsys.readouterr().out


def test_random_start_without_seed_words(lexicon):
    s = GameSession(lexicon)
    r = s.start("random", [])
    assert r.kind == "error"
    assert r.message == "No seed words available for a random start."
    assert not s.started


def test_random_start_defaults_to_packaged_list(lexicon):
    s = GameSession(lexicon)
    assert s.start("r", rng=random.Random(0)).kind == "ok"
    assert s.state.current.literals()[0] in load_seed_words()


def test_cli_missing_wordnet_corpus(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(nltk.data, "path", [str(tmp_path)])
    code = main(["--lexicon", "wordnet"], read=_reader(["cat"]))
    assert code == 1
    assert "WordNet" in capsys.readouterr().err
