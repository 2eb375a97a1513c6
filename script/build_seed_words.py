"""
Build the random-start seed list from a downloaded word list.

What it does:
- Downloads a page or plain-text file of words (--url).
- If the response is HTML, extracts the visible text with BeautifulSoup.
- Keeps unique lowercase tokens of exactly N letters (3 by default).
- Drops anything the selected lexicon does not recognise.
- Writes one word per line and prints the validator summary.

Usage:
    python -m script.build_seed_words --url <word list URL> \
        --out packages/datasets/data/seed_words_3.txt
    # keep download order instead of sorting:
    python -m script.build_seed_words --url <word list URL> --keep-order
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests
from tqdm import tqdm

from packages.datasets import DEFAULT_SEED_WORDS, pretty_summary, validate_seed_words, \
    write_lines
from packages.lexicon import create_oracle, get_oracle_ids

TOKEN_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str, N: int = 3) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = r.text
    if "html" in r.headers.get("Content-Type", "").lower():
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    tokens = [t.lower() for t in TOKEN_RE.findall(text) if len(t) == N]
    return unique_preserve_order(tokens)


def keep_recognized(words: list[str], oracle) -> list[str]:
    return [w for w in tqdm(words, ncols=80, desc="Checking", unit="word") if oracle.is_word(w)]


def main():
    ap = argparse.ArgumentParser(description="Build the 3-letter seed word list")
    ap.add_argument("--url", required=True, help="page or text file listing words")
    ap.add_argument("--out", default=str(DEFAULT_SEED_WORDS))
    ap.add_argument("--N", type=int, default=3, help="word length")
    ap.add_argument("--lexicon", default="wordnet", choices=get_oracle_ids())
    ap.add_argument("--dictionary", help="word list for --lexicon wordlist")
    ap.add_argument("--keep-order", action="store_true",
                    help="keep download order instead of sorting alphabetically")
    args = ap.parse_args()

    options = {"path": args.dictionary} if args.lexicon == "wordlist" else {}
    words = fetch_words(args.url, args.N)
    with create_oracle(args.lexicon, **options) as oracle:
        words = keep_recognized(words, oracle)
        if not args.keep_order:
            words = sorted(words)
        write_lines(words, args.out)
        print(f"Wrote {len(words)} words -> {args.out}")
        print(pretty_summary(validate_seed_words(args.out, args.N, oracle=oracle)))


if __name__ == "__main__":
    main()
