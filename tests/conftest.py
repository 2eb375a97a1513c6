import pytest

from packages.engine.errors import InputLengthExceeded

# word -> stems; anything missing is "not a word"
FAKE_STEMS = {
    "cat": {"cat"},
    "cats": {"cat"},
    "act": {"act"},
    "acts": {"act"},
    "cast": {"cast"},
    "casts": {"cast"},
    "scat": {"scat"},
    "sky": {"sky"},
    "running": {"run", "running"},
    "abcdefghijkl": {"abcdefghijkl"},
}


class FakeOracle:
    """Table-driven stand-in for a LexicalOracle."""

    def __init__(self, stems=None, max_length=11):
        self.stems = dict(FAKE_STEMS if stems is None else stems)
        self.max_length = max_length
        self.calls = []

    def is_word(self, s):
        return len(s) <= self.max_length and s in self.stems

    def stems_of(self, s):
        self.calls.append(s)
        if len(s) > self.max_length:
            raise InputLengthExceeded(s)
        return set(self.stems.get(s, ()))


@pytest.fixture
def oracle():
    return FakeOracle()
