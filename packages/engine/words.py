from dataclasses import dataclass, field

# Candidates shorter than this are refused outright.
MIN_CANDIDATE_LEN = 3


def normalize(token: str) -> str:
    """Lowercase and trim a raw token. Does not validate."""
    return token.strip().lower()


def is_alpha_word(token: str) -> bool:
    """True for a non-empty token made only of a-z."""
    return bool(token) and token.isascii() and token.isalpha() and token.islower()


@dataclass(frozen=True, order=True)
class Word:
    """
    A playable word plus its letters in sorted order.

    Ordering and equality use the literal only, so pools iterate
    alphabetically.
    """
    literal: str
    sorted_letters: str = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        if not is_alpha_word(self.literal):
            raise ValueError(f"not a lowercase a-z word: {self.literal!r}")
        object.__setattr__(self, "sorted_letters", "".join(sorted(self.literal)))

    def __len__(self) -> int:
        return len(self.literal)

    def __str__(self) -> str:
        return self.literal
