"""
Lay a word pool out as fixed-size screen pages.

paginate() is a plain generator: it keeps no cursor, so calling it again
starts over. Which page is on screen is the caller's business.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

Page = Tuple[str, ...]

# Classic 80-column terminal.
DEFAULT_WIDTH = 80


def _rows(words: Iterable[str], width: int) -> Iterator[str]:
    row: List[str] = []
    used = 0  # length of " ".join(row) + trailing space
    for w in words:
        if row and used + len(w) >= width:
            yield " ".join(row)
            row, used = [], 0
        row.append(w)
        used += len(w) + 1
    if row:
        yield " ".join(row)


def paginate(words: Iterable, *, width: int = DEFAULT_WIDTH, rows: int = 4) -> Iterator[Page]:
    """
    Yield pages of exactly `rows` lines each, last page padded with "".

    Words are separated by single spaces and a row takes another word only
    while `len(row) + len(word) < width`. An empty pool yields no pages.
    """
    if rows < 1 or width < 1:
        raise ValueError("rows and width must be positive")
    page: List[str] = []
    for line in _rows((str(w) for w in words), width):
        page.append(line)
        if len(page) == rows:
            yield tuple(page)
            page = []
    if page:
        yield tuple(page + [""] * (rows - len(page)))
