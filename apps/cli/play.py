# apps/cli/play.py
"""
Terminal front end for the word-scramble game.

This script:
  1) Validates the start-word list (prints counts + SHA) and builds the
     requested dictionary.
  2) Starts a round and reads submissions from stdin, one per line.
  3) Prints either the rejection (title + message) or the updated word list
     and score after every submission.

Commands typed instead of a word:
  :new    start a new game with a fresh root word
  :hint   how many words are still findable (needs a word list)
  :quit   leave (EOF / Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, TextIO

from packages.datasets import (
    DEFAULT_START_WORDS,
    FileWordSource,
    WordSourceError,
    pretty_summary,
    validate_start_words,
)
from packages.dictionary import (
    DEFAULT_MIN_ZIPF,
    WordListDictionary,
    create_dictionary,
    get_dictionary_ids,
)
from packages.engine import filter_derivable
from packages.game import GameSession, render_round

PROMPT = "> "


def _build_dictionary(args):
    if args.dictionary == "wordlist":
        if not args.wordlist:
            raise SystemExit("--wordlist is required with --dictionary wordlist")
        return WordListDictionary.from_file(args.wordlist)
    return create_dictionary("wordfreq", min_zipf=args.min_zipf)


def _hint(session: GameSession, hint_words: Optional[Iterable[str]]) -> str:
    if hint_words is None:
        return "Hints need a word list (use --dictionary wordlist or --hint-words)."
    r = session.round
    left = filter_derivable(hint_words, r.root_word, r.used_words)
    return f"{len(left)} word(s) left to find."


def play(session: GameSession, stdin: TextIO, stdout: TextIO,
         hint_words: Optional[Iterable[str]] = None, spoken: bool = False) -> int:
    """
    Run the interaction loop until `:quit` or EOF. Returns the final score.
    """
    def show(*lines: str) -> None:
        for ln in lines:
            print(ln, file=stdout)

    session.new_game()
    show(*render_round(session.round, spoken=spoken))

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        cmd = line.strip().lower()

        if cmd == ":quit":
            break
        if cmd == ":new":
            session.new_game()
            show(*render_round(session.round, spoken=spoken))
            continue
        if cmd == ":hint":
            show(_hint(session, hint_words))
            continue

        outcome = session.submit(line)
        if outcome.accepted:
            show(*render_round(session.round, spoken=spoken))
        else:
            show(f"{outcome.title}: {outcome.message}")

    return session.round.score


def main(argv=None):
    ap = argparse.ArgumentParser(description="Word scramble: spell words from the root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="path to the start-word list (one root word per line)")
    ap.add_argument("--dictionary", default="wordfreq", choices=get_dictionary_ids(),
                    help="dictionary oracle used to recognize real words")
    ap.add_argument("--wordlist", help="word-list file for --dictionary wordlist")
    ap.add_argument("--hint-words", help="word-list file used by :hint (defaults to --wordlist)")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="minimum wordfreq Zipf frequency for --dictionary wordfreq")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word picks")
    ap.add_argument("--spoken", action="store_true",
                    help="list words as screen-reader labels (\"mount, 5 letters\")")
    ap.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate the start-word list; problems are reported, the fallback
    #    root word keeps the game playable.
    rep = validate_start_words(args.start_words)
    if args.verbose or not rep["passed"]:
        print(pretty_summary(rep), file=sys.stderr)

    # 2) Dictionary (+ optional hint list)
    dictionary = _build_dictionary(args)
    hint_words = None
    hint_path = args.hint_words or args.wordlist
    if hint_path:
        hint_words = sorted(WordListDictionary.from_file(hint_path).words)

    # 3) Play
    session = GameSession(FileWordSource(args.start_words), dictionary, seed=args.seed)
    try:
        score = play(session, sys.stdin, sys.stdout, hint_words=hint_words, spoken=args.spoken)
    except WordSourceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stdout)
        return 0

    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
