from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

# Packaged list of known-good 3-letter starting words.
DEFAULT_SEED_WORDS = Path(__file__).parent / "data" / "seed_words_3.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_seed_words(p: Path | str = DEFAULT_SEED_WORDS, N: int = 3) -> List[str]:
    """
    Load the random-start word list: lowercase, a-z, length N, first
    occurrence kept. Lines that don't fit are skipped silently; use
    validate_seed_words() to see them.
    """
    seen = set()
    out: List[str] = []
    for raw in read_lines(p):
        w = raw.strip().lower()
        if len(w) != N or not (w.isascii() and w.isalpha()) or w in seen:
            continue
        seen.add(w)
        out.append(w)
    if not out:
        raise ValueError(f"{p} contains no valid {N}-letter words")
    return out
