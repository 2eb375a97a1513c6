from typing import Iterable, Iterator, Set


class StemLedger:
    """
    Every stem ever credited to the player.

    Grows only; there is no remove/discard. Stems are compared
    case-insensitively by storing them lowercased.
    """

    def __init__(self, stems: Iterable[str] = ()):
        self._stems: Set[str] = set()
        self.insert_all(stems)

    def contains(self, stem: str) -> bool:
        return stem.lower() in self._stems

    __contains__ = contains

    def insert_all(self, stems: Iterable[str]) -> None:
        self._stems.update(s.lower() for s in stems)

    def __len__(self) -> int:
        return len(self._stems)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._stems))

    def __repr__(self) -> str:
        return f"StemLedger({len(self._stems)} stems)"
