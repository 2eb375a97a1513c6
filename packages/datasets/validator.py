"""
Seed word list validator.

What this module does:
- Validate the random-start word list (seed_words_3.txt by default).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Optionally ask a lexicon which words it does not recognise.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_seed_words, pretty_summary
    rep = validate_seed_words("packages/datasets/data/seed_words_3.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class SeedListReport:
    """Diagnostics and metadata for one seed list file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    unrecognized: List[str] = field(default_factory=list)  # valid shape, unknown to the lexicon
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.islower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_seed_words(path: str, N: int = 3, oracle=None) -> Dict:
    """
    Validate a seed word list for length N.

    Parameters
    ----------
    path : str
        Word list file (one word per line).
    N : int
        Required word length (3 for this game).
    oracle : LexicalOracle, optional
        An *opened* lexicon; words it does not recognise are reported.

    Returns
    -------
    Dict
        JSON-serializable SeedListReport. `passed` requires a non-empty
        file with no invalid lines, no duplicates and no unrecognized words.
    """
    p = Path(path)
    if not p.exists():
        rep = SeedListReport(N=N, path=str(path), exists=False, count=0, sha256="",
                             unique_count=0, invalid_lines=0,
                             issues=[f"seed list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = sorted(set(words))
    unrecognized = [w for w in unique if not oracle.is_word(w)] if oracle is not None else []

    issues: List[str] = []
    if not words:
        issues.append("seed list contains 0 valid words")
    if invalid:
        issues.append(f"seed list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("seed list contains duplicate lines")
    if unrecognized:
        issues.append(f"lexicon does not recognise {len(unrecognized)} word(s) "
                      f"(e.g., {unrecognized[:5]})")

    rep = SeedListReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        unrecognized=unrecognized,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=3 | seed words=152 (uniq=152, sha=abc123...) | unrecognized=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | seed words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| unrecognized={len(report['unrecognized'])} | {status}"
    )
