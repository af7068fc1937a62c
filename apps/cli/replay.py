# apps/cli/replay.py
"""
CLI entry point for replaying games.

This script:
  1) Validates the start-word list (prints counts + SHA).
  2) Either replays a submissions file against one --root word, or autoplays
     every derivable word from --words against one root / a sample of start
     words.
  3) Writes:
       - CSV:  one row per submission with its result and running score
       - JSON: manifest with config, start-word hash, git commit, totals

Usage:
    python -m apps.cli.replay --root mountain --submissions tries.txt
    python -m apps.cli.replay --root mountain --submissions tries.txt --words words_alpha.txt
    python -m apps.cli.replay --auto --words words_alpha.txt --sample 20 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from packages.datasets import (
    DEFAULT_START_WORDS,
    FileWordSource,
    pretty_summary,
    read_lines,
    validate_start_words,
)
from packages.dictionary import DEFAULT_MIN_ZIPF, WordListDictionary, create_dictionary
from packages.harness import run_batch, run_transcript, write_csv, write_manifest
from packages.harness.io import git_commit_or_unknown, timestamp_id


def main(argv=None):
    ap = argparse.ArgumentParser(description="Replay word-scramble rounds and write reports")
    ap.add_argument("--root", help="single root word (default: sample the start-word list)")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="path to the start-word list")
    ap.add_argument("--submissions", help="file with one submission per line (needs --root)")
    ap.add_argument("--auto", action="store_true",
                    help="submit every derivable word from --words")
    ap.add_argument("--words", help="candidate word list for --auto (also the dictionary "
                                    "unless --dictionary wordfreq)")
    ap.add_argument("--dictionary", choices=["wordlist", "wordfreq"],
                    help="default: wordlist when --words is given, else wordfreq")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF)
    ap.add_argument("--sample", type=int, help="autoplay only this many start words")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["bar", "off"],
        default="bar",
        help="Show a tqdm progress bar on stderr."
    )
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.submissions and not args.root:
        ap.error("--submissions needs --root")
    if not args.submissions and not args.auto:
        ap.error("pass --submissions FILE or --auto")
    if args.auto and not args.words:
        ap.error("--auto needs --words")

    # 1) Validate the start list and print a one-liner summary
    rep = validate_start_words(args.start_words)
    print(pretty_summary(rep))

    # 2) Dictionary
    if args.dictionary is None:
        args.dictionary = "wordlist" if args.words else "wordfreq"
    if args.dictionary == "wordfreq":
        dictionary = create_dictionary("wordfreq", min_zipf=args.min_zipf)
    else:
        if not args.words:
            ap.error("--dictionary wordlist needs --words")
        dictionary = WordListDictionary.from_file(args.words)

    # 3) Roots to play
    roots = [args.root.strip().lower()] if args.root else FileWordSource(args.start_words).load()

    # 4) Run
    if args.submissions:
        results = [run_transcript(roots[0], read_lines(args.submissions), dictionary)]
    else:
        results = run_batch(
            roots,
            read_lines(args.words),
            dictionary,
            sample=args.sample,
            seed=args.seed,
            progress=lambda it: tqdm(it, ncols=80, desc="Replaying", unit="root",
                                     disable=args.progress == "off"),
        )

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": rep,
        "num_rounds": len(results),
        "total_score": sum(r["score"] for r in results),
        "scores": {r["root_word"]: r["score"] for r in results},
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
