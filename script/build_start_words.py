"""
Build the start-word list from wordfreq's most common English words.

What it does:
- Takes the top-N English tokens from wordfreq.
- Keeps pure lowercase alphabetic words of exactly --length letters.
- Optionally drops words with fewer than --min-subwords playable words hidden
  in them (needs --wordlist), so every root gives the player something to do.
- De-duplicates while preserving frequency order and writes one word per line.

Usage:
    python -m script.build_start_words --out packages/datasets/data/start.txt
    python -m script.build_start_words --length 8 --top 50000 \
        --wordlist data/words_alpha.txt --min-subwords 10
"""

import argparse
from pathlib import Path

from tqdm import tqdm
from wordfreq import top_n_list

from packages.datasets.io import read_lines, unique_preserve_order, write_lines
from packages.engine import filter_derivable


def candidate_roots(top: int, length: int) -> list[str]:
    words = top_n_list("en", top)
    keep = [w for w in words if len(w) == length and w.isalpha() and w.isascii() and w.islower()]
    return unique_preserve_order(keep)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list from wordfreq")
    ap.add_argument("--out", default="packages/datasets/data/start.txt")
    ap.add_argument("--top", type=int, default=50000, help="how many frequent words to scan")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--wordlist", help="word list used to count playable sub-words")
    ap.add_argument("--min-subwords", type=int, default=0,
                    help="drop roots with fewer playable sub-words (needs --wordlist)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of by frequency")
    args = ap.parse_args()

    roots = candidate_roots(args.top, args.length)

    if args.min_subwords:
        if not args.wordlist:
            ap.error("--min-subwords needs --wordlist")
        vocab = [w.strip().lower() for w in read_lines(args.wordlist) if w.strip()]
        roots = [
            r for r in tqdm(roots, ncols=80, desc="Scoring roots", unit="word")
            if len(filter_derivable(vocab, r)) >= args.min_subwords
        ]

    if args.sort:
        roots = sorted(roots)

    write_lines(roots, Path(args.out))
    print(f"Wrote {len(roots)} start words -> {args.out}")


if __name__ == "__main__":
    main()
