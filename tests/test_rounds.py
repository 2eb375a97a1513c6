import random

import pytest
from packages.engine import (GameState, InputRejected, evaluate_turn, new_game, parse_turn,
                             play_turn, random_game)


def _snapshot(state):
    return (state.score, list(state.used_stems), state.current.literals(), state.prior.literals())


def test_parse_turn():
    assert parse_turn("  Cat   ACTS ") == ("cat", ["acts"])
    assert parse_turn("stare cat res") == ("stare", ["cat", "res"])
    assert parse_turn("   ") == ("", [])


def test_valid_turn_commits_everything(oracle):
    state = GameState("cat", {"cat"})
    verdict = play_turn(state, "cat acts", oracle)

    assert verdict.points == 1
    assert state.current.literals() == ["acts"]
    assert state.prior.literals() == ["cat"]
    assert state.score == 1
    assert "act" in state.used_stems and "cat" in state.used_stems


def test_quit_bonus_counts_live_words(oracle):
    state = GameState("cat", {"cat"})
    play_turn(state, "cat acts", oracle)
    assert state.finish() == 2  # 1 from the turn + (4 - 3) for "acts"
    assert state.finished
    assert state.finish() == 2  # no double credit


def test_no_turns_after_finish(oracle):
    state = GameState("cat", {"cat"})
    state.finish()
    with pytest.raises(RuntimeError):
        play_turn(state, "cat acts", oracle)


@pytest.mark.parametrize("line,reason", [
    ("dog acts", "not_current"),
    ("cat", "no_candidates"),
    ("cat ca ts", "bad_token"),
    ("cat ac1s", "bad_token"),
    ("cat act", "not_anagram"),
    ("cat tabs", "not_anagram"),
    ("cat tacz", "not_a_word"),
    ("cat cats", "stem_used"),      # 'cat' was pre-claimed by the seed
])
def test_rejections_leave_state_untouched(oracle, line, reason):
    state = GameState("cat", {"cat"})
    before = _snapshot(state)
    with pytest.raises(InputRejected) as exc:
        play_turn(state, line, oracle)
    assert exc.value.reason == reason
    assert _snapshot(state) == before


def test_used_stem_rejected_whichever_word_surfaces_it(oracle):
    state = GameState("cat", {"cat"})
    play_turn(state, "cat acts", oracle)   # claims 'act'
    state.current.add("tac")
    # 'acts' and 'act' share the stem 'act'; the second route is closed
    oracle.stems["tacs"] = {"act"}
    with pytest.raises(InputRejected) as exc:
        play_turn(state, "tac tacs", oracle)
    assert exc.value.reason == "stem_used"
    assert "already used" in exc.value.message


def test_same_turn_collision_rejects_whole_turn(oracle):
    # letters of "cat" twice; "cat" + "cats" share their only stem
    state = GameState("cattac")
    before = _snapshot(state)
    with pytest.raises(InputRejected) as exc:
        play_turn(state, "cattac cat cats", oracle)
    assert exc.value.reason == "stem_repeated"
    assert "'cats' already used" in exc.value.message
    assert _snapshot(state) == before


def test_first_candidate_wins_a_shared_stem(oracle):
    state = GameState("cattac")
    with pytest.raises(InputRejected) as exc:
        evaluate_turn(state, "cattac", ["cats", "cat"], oracle)
    # order flips which word is named, not the outcome
    assert "'cat' already used" in exc.value.message


def test_word_with_several_stems_scores_once(oracle):
    state = GameState("unring")
    verdict = evaluate_turn(state, "unring", ["running"], oracle)
    assert verdict.points == 4
    assert verdict.claimed_stems == {"run", "running"}
    assert state.score == 0  # evaluate never writes


def test_two_candidates_each_score(oracle):
    state = GameState("tacks")
    verdict = evaluate_turn(state, "tacks", ["cat", "sky"], oracle)
    assert verdict.points == 0
    assert verdict.candidates == ("cat", "sky")
    state.commit(verdict)
    assert state.current.literals() == ["cat", "sky"]
    assert state.prior.literals() == ["tacks"]


def test_retired_word_cannot_come_back(oracle):
    state = GameState("tacks")   # empty ledger on purpose
    state.prior.add("cat")
    with pytest.raises(InputRejected) as exc:
        play_turn(state, "tacks cat sky", oracle)
    assert exc.value.reason == "stem_used"


def test_too_long_candidate(oracle):
    state = GameState("abcdefghijk")
    with pytest.raises(InputRejected) as exc:
        play_turn(state, "abcdefghijk abcdefghijkl", oracle)
    assert exc.value.reason == "too_long"


def test_lexicon_consulted_in_input_order(oracle):
    state = GameState("tacks")
    evaluate_turn(state, "tacks", ["sky", "cat"], oracle)
    assert oracle.calls == ["sky", "cat"]


# --- starting a game ---
def test_new_game_seeds_current_and_stems(oracle):
    state = new_game("CAT", oracle)
    assert state.current.literals() == ["cat"]
    assert "cat" in state.used_stems
    assert state.score == 0 and len(state.prior) == 0


@pytest.mark.parametrize("word", ["dog", "cats", "c4t", ""])
def test_new_game_rejects_bad_seed(oracle, word):
    with pytest.raises(InputRejected) as exc:
        new_game(word, oracle)
    assert exc.value.reason == "bad_seed"


def test_random_game_is_reproducible(oracle):
    words = ["cat", "act", "sky"]
    a = random_game(words, oracle, random.Random(5))
    b = random_game(words, oracle, random.Random(5))
    assert a.current.literals() == b.current.literals()
    assert a.current.literals()[0] in words
    assert len(a.used_stems) == 1


def test_random_game_needs_words(oracle):
    with pytest.raises(ValueError):
        random_game([], oracle, random.Random(0))


def test_evaluator_signatures_name_their_collaborators():
    from typing import get_type_hints
    from packages.lexicon import LexicalOracle

    for fn in (evaluate_turn, play_turn):
        hints = get_type_hints(fn, localns={"LexicalOracle": LexicalOracle})
        assert hints["state"] is GameState
        assert hints["oracle"] is LexicalOracle
