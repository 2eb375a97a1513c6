"""
Anagram-plus-one check.

A turn is only legal if the candidate words, glued together, use every
letter of the source word plus exactly one extra letter. Candidate order
and word boundaries do not matter; only the multiset of letters does.

Algorithm (sorted two-cursor walk):
  1) Join the candidates and sort the letters.
  2) The joined string must be exactly one letter longer than the source.
  3) Walk both sorted strings. Matching letters advance both cursors; a
     mismatch advances only the joined cursor, and only one such skip is
     allowed in total.
  4) Every source letter must have been matched by the end of the walk.

Candidates shorter than MIN_CANDIDATE_LEN are not words in this game, so
any such piece makes the answer False.
"""

from typing import Sequence, Union

from .words import MIN_CANDIDATE_LEN, Word


def is_one_letter_more(source: Union[Word, str], candidates: Sequence[str]) -> bool:
    """
    Return True if `candidates` spell `source` plus one extra letter.

    Examples:
      is_one_letter_more("cat", ["cats"])      -> True
      is_one_letter_more("cat", ["act"])       -> False  (no extra letter)
      is_one_letter_more("cat", ["tabs"])      -> False  ('c' missing)
      is_one_letter_more("cat", ["ct", "as"])  -> False  (pieces too short)
      is_one_letter_more("stare", ["cat", "res"]) -> True
    """
    if any(len(c) < MIN_CANDIDATE_LEN for c in candidates):
        return False
    if not isinstance(source, Word):
        source = Word(source)
    src = source.sorted_letters
    combined = "".join(sorted("".join(candidates)))

    if len(combined) - len(src) != 1:
        return False

    i = j = 0
    while i < len(src) and j < len(combined):
        if src[i] == combined[j]:
            i += 1
            j += 1
            continue
        # j - i counts the letters skipped so far; one is the budget
        if j - i >= 1:
            return False
        j += 1

    return i == len(src)
