"""
Download a plaintext English word list and write a clean copy.

What it does:
- Downloads a newline-separated word list (default: dwyl/english-words).
- Lowercases, keeps alphabetic a–z words of at least --min-length letters.
- De-duplicates while preserving order (or sorts) and writes to file.

The result feeds `WordListDictionary.from_file` and the replay autoplayer.

Usage:
    python -m script.fetch_wordlist --out data/words_alpha.txt
"""

import argparse
from pathlib import Path

import requests

from packages.datasets.io import unique_preserve_order, write_lines
from packages.engine import MIN_WORD_LENGTH

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL, min_length: int = MIN_WORD_LENGTH) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = []
    for line in r.text.splitlines():
        w = line.strip().lower()
        if len(w) >= min_length and w.isalpha() and w.isascii():
            words.append(w)
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean an English word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/words_alpha.txt")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                    help="drop words shorter than this (they can never be played)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    args = ap.parse_args()

    words = fetch_words(args.url, args.min_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, Path(args.out))
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
